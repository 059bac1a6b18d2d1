#!/usr/bin/env python3
"""
Quick Start - Minimal example of expression and fitness templates.

Builds a tiny gene pool by hand, resolves a few organisms' phenotypes and
scores them against randomly generated fitness templates.

Usage:
    python examples/quick_start.py [--templates N] [--seed N]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from heredity.genetics import Gene, get_expressions, gene_pool_from_dict
from heredity.fitness import TemplateConfig, generate_templates, evaluate_population, rank_by_fitness


GENE_POOL = gene_pool_from_dict({
    'fur': [
        {'variant': 'orange', 'dominance': 1},
        {'variant': 'black', 'dominance': 1},
        {'variant': 'white', 'dominance': 2},
    ],
    'eyes': [
        {'variant': 'brown', 'dominance': 1},
        {'variant': 'blue', 'dominance': 2},
    ],
    'tail': [
        {'variant': 'long', 'dominance': 1},
        {'variant': 'short', 'dominance': 1},
    ],
})


def parse_args():
    parser = argparse.ArgumentParser(description='Score a few organisms against random templates')
    parser.add_argument(
        '--templates', type=int, default=8,
        help='Number of fitness templates to generate (default: 8)'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for reproducibility'
    )
    return parser.parse_args()


def main():
    args = parse_args()
    rng = np.random.default_rng(args.seed)

    print("Heredity - Quick Start")
    print("=" * 40)

    # Each organism inherits two alleles per locus
    organisms = {}
    for name in ['tortie', 'tabby', 'snowball', 'shadow']:
        genes = []
        for locus, candidates in GENE_POOL.items():
            for i in rng.integers(len(candidates), size=2):
                genes.append(candidates[int(i)])
        organisms[name] = genes

    phenotypes = {name: get_expressions(genes) for name, genes in organisms.items()}

    print("\nPhenotypes:")
    for name, phenotype in phenotypes.items():
        traits = ', '.join(
            f"{locus}={'/'.join(sorted(variants))}" for locus, variants in phenotype.items()
        )
        print(f"  {name:10s} {traits}")

    config = TemplateConfig(min_constraints=1, max_constraints=2, min_score=-2.0, max_score=2.0)
    templates = generate_templates(config, args.templates, GENE_POOL, rng=rng)

    print(f"\nSelection pressure ({len(templates)} templates):")
    for template in templates:
        print(f"  {template!r}")

    print()
    evaluations = evaluate_population(templates, phenotypes, verbose=True)

    print("\nRanking:")
    for i, name in enumerate(rank_by_fitness(evaluations), start=1):
        print(f"  {i}. {name:10s} {evaluations[name]!r}")


if __name__ == '__main__':
    main()
