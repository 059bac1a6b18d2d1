"""
Gene representation and dominance resolution.

A Gene is a single heritable allele. An organism carries many of them,
possibly several for the same locus; dominance decides which variants
are observably expressed.

Key features:
- Immutable, hashable allele values
- Lower dominance values are MORE dominant
- Equal dominance values are co-dominant (all of them get expressed)
"""

from dataclasses import dataclass, asdict
from functools import reduce
from typing import Dict, FrozenSet, Iterable, Set, Tuple, Any


# Locus -> set of expressed variants
Phenotype = Dict[str, FrozenSet[str]]


@dataclass(frozen=True)
class Gene:
    """
    A heritable allele, passed from parent to child.

    Attributes:
        locus: The trait category this allele belongs to, e.g. 'fur_color'.
            Genes sharing a locus compete for expression.
        variant: The specific allele value, e.g. 'orange' or 'black'.
        dominance: Dominance rank. Lower numbers win; ties are co-dominant,
            like the orange and black fur genes of a tortoiseshell cat.
    """
    locus: str
    variant: str
    dominance: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Gene':
        """Create Gene from dictionary."""
        return cls(
            locus=data['locus'],
            variant=data['variant'],
            dominance=data['dominance'],
        )

    def __repr__(self) -> str:
        return f"Gene({self.locus}={self.variant}, dominance={self.dominance})"


# Per-locus fold state: (best dominance so far, variants tied at it)
_LocusState = Tuple[float, Set[str]]


def _fold_gene(state: Dict[str, _LocusState], gene: Gene) -> Dict[str, _LocusState]:
    current = state.get(gene.locus)

    if current is None or gene.dominance < current[0]:
        # First gene at this locus, or a more dominant one than any seen so far
        state[gene.locus] = (gene.dominance, {gene.variant})
    elif gene.dominance == current[0]:
        # Co-dominant; the set collapses exact duplicates
        current[1].add(gene.variant)

    # Anything less dominant is masked
    return state


def get_expressions(genes: Iterable[Gene]) -> Phenotype:
    """
    Determine which gene variants get expressed.

    Genes of different loci may be mixed freely, in any order.

    Args:
        genes: Gene objects, typically an organism's full allele set

    Returns:
        Phenotype mapping each locus present in `genes` to the frozenset of
        variants carried by the most dominant gene(s) at that locus
    """
    state = reduce(_fold_gene, genes, {})
    return {
        locus: frozenset(variants)
        for locus, (_, variants) in state.items()
    }
