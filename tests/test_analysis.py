"""
Tests for template uniformity diagnostics.

Run with: python -m pytest tests/test_analysis.py -v
"""

import numpy as np
import pytest

from heredity.fitness.template import FitnessTemplate
from heredity.analysis.uniformity import (
    locus_selection_counts,
    variant_index_counts,
    score_histogram,
    chi_square_uniformity,
    summarize_template_set,
    _normal_cdf,
)


class TestCounts:
    """Tests for selection counting."""

    def test_locus_selection_counts_includes_unchosen(self, gene_pool_small):
        templates = [FitnessTemplate({'GENE0': 'G0V0', 'GENE1': 'G1V0'}, 1)]

        counts = locus_selection_counts(templates, gene_pool_small)

        assert len(counts) == 100
        assert counts['GENE0'] == 1
        assert counts['GENE1'] == 1
        assert counts['GENE2'] == 0

    def test_variant_index_counts(self, gene_pool_const_variants):
        templates = [
            FitnessTemplate({'GENE0': 'G0V0', 'GENE1': 'G1V4'}, 1),
            FitnessTemplate({'GENE2': 'G2V4'}, 1),
        ]

        counts = variant_index_counts(templates, gene_pool_const_variants)

        assert counts.tolist() == [1, 0, 0, 0, 2]

    def test_score_histogram(self):
        templates = [FitnessTemplate({}, s) for s in [-2.0, -1.5, 0.2, 1.9, 2.0]]

        counts = score_histogram(templates, -2, 2, n_bins=4)

        assert counts.tolist() == [2, 0, 1, 2]


class TestChiSquare:
    """Tests for the chi-square uniformity check."""

    def test_flat_counts_are_uniform(self):
        result = chi_square_uniformity([50] * 100)

        assert result.statistic == 0.0
        assert result.dof == 99
        assert result.p_value > 0.99
        assert result.uniform

    def test_skewed_counts_are_not_uniform(self):
        result = chi_square_uniformity([1000, 10, 10, 10, 10])

        assert result.p_value < 1e-6
        assert not result.uniform

    def test_rejects_single_bucket(self):
        with pytest.raises(ValueError):
            chi_square_uniformity([10])

    def test_rejects_zero_total(self):
        with pytest.raises(ValueError):
            chi_square_uniformity([0, 0, 0])

    def test_normal_cdf(self):
        assert _normal_cdf(0.0) == pytest.approx(0.5)
        assert _normal_cdf(1.96) == pytest.approx(0.975, abs=1e-3)
        assert _normal_cdf(-1.96) == pytest.approx(0.025, abs=1e-3)

    def test_generated_templates_are_uniform(self, gene_pool_const_variants):
        templates = FitnessTemplate.create_random_set(
            2000, 1, 5, -2, 2, gene_pool_const_variants, rng=np.random.default_rng(300),
        )

        summary = summarize_template_set(
            templates, gene_pool_const_variants, -2, 2, alpha=1e-4,
        )

        assert summary['loci'].uniform
        assert summary['variants'].uniform
        assert summary['scores'].uniform
