"""Alleles, dominance resolution and gene pools."""

from .gene import Gene, Phenotype, get_expressions
from .pool import GenePool, gene_pool_from_dict, gene_pool_to_dict, validate_gene_pool

__all__ = [
    'Gene',
    'Phenotype',
    'get_expressions',
    'GenePool',
    'gene_pool_from_dict',
    'gene_pool_to_dict',
    'validate_gene_pool',
]
