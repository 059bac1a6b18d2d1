"""
Fitness evaluation of phenotypes against template sets.

Each template an individual matches contributes its score_value; the sum
is the individual's fitness under that selection pressure.
"""

from dataclasses import dataclass, asdict, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Any, Collection

from .template import FitnessTemplate


@dataclass
class FitnessEvaluation:
    """Result of scoring one phenotype against a template set."""
    total_score: float
    matched: Tuple[int, ...] = field(default_factory=tuple)  # Indices into the template set
    n_templates: int = 0

    @property
    def match_rate(self) -> float:
        """Fraction of templates matched (0.0 for an empty set)."""
        if self.n_templates == 0:
            return 0.0
        return len(self.matched) / self.n_templates

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['matched'] = list(self.matched)
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FitnessEvaluation':
        return cls(
            total_score=data['total_score'],
            matched=tuple(data['matched']),
            n_templates=data['n_templates'],
        )

    def __repr__(self) -> str:
        return (
            f"FitnessEvaluation(score={self.total_score:.3f}, "
            f"matched={len(self.matched)}/{self.n_templates})"
        )


def evaluate_fitness(
    templates: Sequence[FitnessTemplate],
    phenotype: Mapping[str, Collection[str]],
) -> FitnessEvaluation:
    """
    Score a phenotype against every template in a set.

    Args:
        templates: Fitness templates making up the selection pressure
        phenotype: Locus -> expressed variants

    Returns:
        FitnessEvaluation with the summed score of all matched templates
    """
    matched = [i for i, template in enumerate(templates) if template.match(phenotype)]
    total_score = sum(templates[i].score_value for i in matched)

    return FitnessEvaluation(
        total_score=float(total_score),
        matched=tuple(matched),
        n_templates=len(templates),
    )


def evaluate_population(
    templates: Sequence[FitnessTemplate],
    phenotypes: Mapping[str, Mapping[str, Collection[str]]],
    verbose: bool = False,
) -> Dict[str, FitnessEvaluation]:
    """
    Score every individual in a population.

    Args:
        templates: Fitness templates making up the selection pressure
        phenotypes: Individual id -> phenotype
        verbose: Print progress

    Returns:
        Individual id -> FitnessEvaluation
    """
    evaluations = {}
    n_total = len(phenotypes)
    report_every = max(1, n_total // 10)

    for i, (individual_id, phenotype) in enumerate(phenotypes.items(), start=1):
        evaluations[individual_id] = evaluate_fitness(templates, phenotype)
        if verbose and (i % report_every == 0 or i == n_total):
            print(f"Evaluated {i}/{n_total} individuals against {len(templates)} templates")

    if verbose and evaluations:
        best_id = rank_by_fitness(evaluations, n=1)[0]
        print(f"Best: {best_id} {evaluations[best_id]!r}")

    return evaluations


def rank_by_fitness(
    evaluations: Mapping[str, FitnessEvaluation],
    n: Optional[int] = None,
) -> List[str]:
    """
    Order individuals from fittest to least fit.

    Ties on total_score are broken by individual id so the order is stable.

    Args:
        evaluations: Individual id -> FitnessEvaluation
        n: Keep only the top n (all if None)

    Returns:
        List of individual ids
    """
    ranked = sorted(evaluations, key=lambda k: (-evaluations[k].total_score, k))
    if n is not None:
        ranked = ranked[:n]
    return ranked
