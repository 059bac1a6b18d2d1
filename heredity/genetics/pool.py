"""
Gene pool helpers.

A gene pool is the universe of alleles available at each locus. Pools are
manufactured elsewhere; this module only converts and checks them.
"""

from typing import Dict, List, Mapping, Sequence, Any

from .gene import Gene


GenePool = Mapping[str, Sequence[Gene]]


def gene_pool_from_dict(data: Mapping[str, Sequence[Dict[str, Any]]]) -> Dict[str, List[Gene]]:
    """
    Build a gene pool from plain data (e.g., loaded from JSON).

    Args:
        data: Mapping of locus -> list of {'variant': ..., 'dominance': ...}

    Returns:
        Mapping of locus -> list of Gene objects, entry order preserved
    """
    return {
        locus: [
            Gene(locus=locus, variant=entry['variant'], dominance=entry['dominance'])
            for entry in entries
        ]
        for locus, entries in data.items()
    }


def gene_pool_to_dict(gene_pool: GenePool) -> Dict[str, List[Dict[str, Any]]]:
    """Convert a gene pool to JSON-serializable form."""
    return {
        locus: [
            {'variant': gene.variant, 'dominance': gene.dominance}
            for gene in genes
        ]
        for locus, genes in gene_pool.items()
    }


def validate_gene_pool(gene_pool: GenePool) -> None:
    """
    Check that a gene pool can be sampled from.

    Raises:
        ValueError: If the pool is empty, a locus has no candidate genes,
            or a gene is filed under the wrong locus
    """
    if not gene_pool:
        raise ValueError("Gene pool is empty")

    for locus, genes in gene_pool.items():
        if len(genes) == 0:
            raise ValueError(f"Gene pool has no candidate genes at locus '{locus}'")
        for gene in genes:
            if gene.locus != locus:
                raise ValueError(
                    f"Gene {gene!r} is filed under locus '{locus}' "
                    f"but belongs to '{gene.locus}'"
                )
