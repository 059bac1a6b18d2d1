"""
Uniformity diagnostics for generated fitness templates.

Provides functions for:
- Counting how often each locus and each candidate position is chosen
- Histogramming score values
- Chi-square goodness-of-fit against a uniform distribution
"""

import math
from dataclasses import dataclass
from typing import Dict, Sequence, Iterable
import numpy as np

from ..fitness.template import FitnessTemplate
from ..genetics.pool import GenePool


@dataclass
class UniformityResult:
    """Result of a chi-square test against the uniform distribution."""
    statistic: float
    dof: int
    p_value: float
    uniform: bool  # p_value >= alpha


def locus_selection_counts(
    templates: Iterable[FitnessTemplate],
    gene_pool: GenePool,
) -> Dict[str, int]:
    """
    Count how many templates constrain each locus.

    Every locus in the pool is present in the result, including those
    never chosen.
    """
    counts = {locus: 0 for locus in gene_pool}
    for template in templates:
        for locus in template.required_expressions:
            counts[locus] += 1
    return counts


def variant_index_counts(
    templates: Iterable[FitnessTemplate],
    gene_pool: GenePool,
) -> np.ndarray:
    """
    Count the position of each chosen variant within its locus entry.

    Args:
        templates: Generated templates
        gene_pool: The pool the templates were drawn from

    Returns:
        Integer array whose i-th element counts requirements that picked
        the i-th candidate at their locus
    """
    max_variants = max((len(genes) for genes in gene_pool.values()), default=0)
    counts = np.zeros(max_variants, dtype=int)

    # Variant -> position lookup per locus (first occurrence wins)
    positions = {}
    for locus, genes in gene_pool.items():
        index = {}
        for i, gene in enumerate(genes):
            index.setdefault(gene.variant, i)
        positions[locus] = index

    for template in templates:
        for locus, variant in template.required_expressions.items():
            counts[positions[locus][variant]] += 1

    return counts


def score_histogram(
    templates: Sequence[FitnessTemplate],
    min_score: float,
    max_score: float,
    n_bins: int = 5,
) -> np.ndarray:
    """Bucket template score values into `n_bins` equal-width bins."""
    scores = [t.score_value for t in templates]
    counts, _ = np.histogram(scores, bins=n_bins, range=(min_score, max_score))
    return counts


def chi_square_uniformity(
    counts: Sequence[int],
    alpha: float = 0.01,
) -> UniformityResult:
    """
    Pearson chi-square test of observed counts against equal expected counts.

    The p-value uses the Wilson-Hilferty normal approximation of the
    chi-square distribution, which avoids a scipy dependency and is
    accurate to a few decimal places for dof >= 3.

    Args:
        counts: Observed count per bucket
        alpha: Significance level below which uniformity is rejected

    Returns:
        UniformityResult

    Raises:
        ValueError: If fewer than two buckets or no observations are given
    """
    observed = np.asarray(counts, dtype=float)
    if observed.size < 2:
        raise ValueError(f"Need at least 2 buckets, got {observed.size}")
    total = float(observed.sum())
    if total <= 0:
        raise ValueError("Counts sum to zero")

    expected = total / observed.size
    statistic = float(np.sum((observed - expected) ** 2) / expected)
    dof = observed.size - 1

    # Wilson-Hilferty: (X/k)^(1/3) is approximately normal
    mean = 1.0 - 2.0 / (9.0 * dof)
    std = math.sqrt(2.0 / (9.0 * dof))
    z = ((statistic / dof) ** (1.0 / 3.0) - mean) / std
    p_value = 1.0 - _normal_cdf(z)

    return UniformityResult(
        statistic=statistic,
        dof=dof,
        p_value=float(p_value),
        uniform=p_value >= alpha,
    )


def summarize_template_set(
    templates: Sequence[FitnessTemplate],
    gene_pool: GenePool,
    min_score: float,
    max_score: float,
    alpha: float = 0.01,
) -> Dict[str, UniformityResult]:
    """
    Run every uniformity check on a template set.

    The variant check is only meaningful when every locus offers the same
    number of candidates.

    Returns:
        Mapping of 'loci', 'variants' and 'scores' to their test results
    """
    variant_counts = variant_index_counts(templates, gene_pool)
    return {
        'loci': chi_square_uniformity(
            list(locus_selection_counts(templates, gene_pool).values()), alpha,
        ),
        'variants': chi_square_uniformity(variant_counts, alpha),
        'scores': chi_square_uniformity(
            score_histogram(templates, min_score, max_score), alpha,
        ),
    }


def _normal_cdf(x: float) -> float:
    """
    Approximate cumulative distribution function for standard normal.

    Uses Abramowitz and Stegun approximation (error < 7.5e-8).
    """
    a1 = 0.254829592
    a2 = -0.284496736
    a3 = 1.421413741
    a4 = -1.453152027
    a5 = 1.061405429
    p = 0.3275911

    # erf is evaluated at x / sqrt(2)
    sign = 1 if x >= 0 else -1
    x = abs(x) / math.sqrt(2.0)

    t = 1.0 / (1.0 + p * x)
    y = 1.0 - (((((a5 * t + a4) * t) + a3) * t + a2) * t + a1) * t * math.exp(-x * x)

    return 0.5 * (1.0 + sign * y)
