"""Analysis module for generated fitness templates.

Provides tools for:
- Selection frequency counts (loci, candidate positions, scores)
- Chi-square uniformity checks
"""

from .uniformity import (
    UniformityResult,
    locus_selection_counts,
    variant_index_counts,
    score_histogram,
    chi_square_uniformity,
    summarize_template_set,
)

__all__ = [
    'UniformityResult',
    'locus_selection_counts',
    'variant_index_counts',
    'score_histogram',
    'chi_square_uniformity',
    'summarize_template_set',
]
