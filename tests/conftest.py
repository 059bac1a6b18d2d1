"""
Shared fixtures: gene pools of various shapes.

Pools are built once per session since the larger ones take a moment.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from heredity.genetics.gene import Gene


def make_gene_pool(n_loci, min_variants, max_variants, seed=0):
    """
    Build a pool of loci GENE0..GENE{n-1}, each with a random number of
    variants G{i}V0..G{i}V{k-1} in [min_variants, max_variants].
    """
    rng = np.random.default_rng(seed)
    pool = {}
    for i in range(n_loci):
        locus = f'GENE{i}'
        n_variants = int(rng.integers(min_variants, max_variants, endpoint=True))
        pool[locus] = [
            Gene(locus=locus, variant=f'G{i}V{j}', dominance=int(rng.integers(1, 5)))
            for j in range(n_variants)
        ]
    return pool


@pytest.fixture(scope='session')
def gene_pool_small():
    return make_gene_pool(100, 1, 5)


@pytest.fixture(scope='session')
def gene_pool_large():
    return make_gene_pool(1000, 1, 5)


@pytest.fixture(scope='session')
def gene_pool_const_variants():
    """Every locus has exactly 5 candidates."""
    return make_gene_pool(100, 5, 5)
