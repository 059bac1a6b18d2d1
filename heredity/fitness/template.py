"""
Fitness templates: randomized expression requirements for selection.

A FitnessTemplate lists, per locus, one variant an individual must express.
Phenotypes are set-valued (co-dominance) while requirements are scalar, so
a requirement is met when its variant is AMONG the expressed ones.

Key features:
- Random construction bounded in size and score, drawn from a gene pool
- Uniform sampling of loci without replacement
- Clamping when more constraints are requested than the pool has loci
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Any, Collection
import numpy as np

from ..genetics.pool import GenePool


@dataclass(frozen=True)
class FitnessTemplate:
    """
    A set of required expressions plus the fitness delta for meeting them.

    Attributes:
        required_expressions: Locus -> the single variant required there
        score_value: Fitness delta granted when every requirement is met
            (may be negative for harmful trait combinations)
    """
    required_expressions: Mapping[str, str]
    score_value: float

    def __post_init__(self):
        # Snapshot the caller's mapping behind a read-only view
        object.__setattr__(
            self,
            'required_expressions',
            MappingProxyType(dict(self.required_expressions)),
        )

    def __hash__(self) -> int:
        return hash((frozenset(self.required_expressions.items()), self.score_value))

    def __len__(self) -> int:
        return len(self.required_expressions)

    def __reduce__(self):
        # mappingproxy cannot be pickled; rebuild from a plain dict
        return (self.__class__, (dict(self.required_expressions), self.score_value))

    def match(self, phenotype: Mapping[str, Collection[str]]) -> bool:
        """
        Check whether a phenotype satisfies every requirement.

        Loci in the phenotype that the template does not mention are
        ignored. An empty template matches any phenotype.

        Args:
            phenotype: Locus -> expressed variants (set, frozenset or list)

        Returns:
            True if each required variant is expressed at its locus
        """
        for locus, variant in self.required_expressions.items():
            expressed = phenotype.get(locus)
            if expressed is None or variant not in expressed:
                return False
        return True

    def score(self, phenotype: Mapping[str, Collection[str]]) -> float:
        """Return score_value if the phenotype matches, else 0.0."""
        return self.score_value if self.match(phenotype) else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            'required_expressions': dict(self.required_expressions),
            'score_value': self.score_value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FitnessTemplate':
        """Create FitnessTemplate from dictionary."""
        return cls(
            required_expressions=data['required_expressions'],
            score_value=data['score_value'],
        )

    @classmethod
    def create_random(
        cls,
        min_constraints: int,
        max_constraints: int,
        min_score: float,
        max_score: float,
        gene_pool: GenePool,
        rng: Optional[np.random.Generator] = None,
    ) -> 'FitnessTemplate':
        """See create_random_template."""
        return create_random_template(
            min_constraints, max_constraints, min_score, max_score, gene_pool, rng=rng,
        )

    @classmethod
    def create_random_set(
        cls,
        count: int,
        min_constraints: int,
        max_constraints: int,
        min_score: float,
        max_score: float,
        gene_pool: GenePool,
        rng: Optional[np.random.Generator] = None,
    ) -> List['FitnessTemplate']:
        """See create_random_template_set."""
        return create_random_template_set(
            count, min_constraints, max_constraints, min_score, max_score, gene_pool, rng=rng,
        )

    def __repr__(self) -> str:
        reqs = ', '.join(f"{locus}={variant}" for locus, variant in self.required_expressions.items())
        return f"FitnessTemplate({{{reqs}}}, score={self.score_value:.3f})"


def create_random_template(
    min_constraints: int,
    max_constraints: int,
    min_score: float,
    max_score: float,
    gene_pool: GenePool,
    rng: Optional[np.random.Generator] = None,
) -> FitnessTemplate:
    """
    Create a random fitness template from a gene pool.

    If more constraints are requested than the pool has loci, every locus
    is used exactly once instead.

    Args:
        min_constraints: Minimum number of required expressions (inclusive)
        max_constraints: Maximum number of required expressions (inclusive)
        min_score: Lower bound for score_value
        max_score: Upper bound for score_value
        gene_pool: Locus -> candidate genes to draw requirements from
        rng: Random generator; a fresh one is created if not given.
            Concurrent callers should each pass their own.

    Returns:
        A randomly constructed FitnessTemplate
    """
    if rng is None:
        rng = np.random.default_rng()

    loci = list(gene_pool)

    # Random size, clamped to what the pool can supply
    n_constraints = int(rng.integers(min_constraints, max_constraints, endpoint=True))
    n_constraints = min(n_constraints, len(loci))

    # Shuffle-and-take gives distinct loci with equal probability each
    chosen = rng.permutation(len(loci))[:n_constraints]

    required_expressions = {}
    for i in chosen:
        locus = loci[i]
        candidates = gene_pool[locus]
        gene = candidates[int(rng.integers(len(candidates)))]
        required_expressions[locus] = gene.variant

    score_value = float(rng.uniform(min_score, max_score))

    return FitnessTemplate(
        required_expressions=required_expressions,
        score_value=score_value,
    )


def create_random_template_set(
    count: int,
    min_constraints: int,
    max_constraints: int,
    min_score: float,
    max_score: float,
    gene_pool: GenePool,
    rng: Optional[np.random.Generator] = None,
) -> List[FitnessTemplate]:
    """
    Create many independent random fitness templates.

    Each template is drawn with the same parameters. Duplicates are not
    filtered out.

    Args:
        count: Number of templates to create
        min_constraints, max_constraints: Size bounds per template
        min_score, max_score: Score bounds per template
        gene_pool: Locus -> candidate genes
        rng: Random generator shared by all draws

    Returns:
        List of exactly `count` templates
    """
    if rng is None:
        rng = np.random.default_rng()

    return [
        create_random_template(
            min_constraints, max_constraints, min_score, max_score, gene_pool, rng=rng,
        )
        for _ in range(count)
    ]
