"""
heredity - Heritable traits and fitness templates for population simulation

Each individual carries alleles (Genes); dominance decides which variants
are expressed (the phenotype). Fitness templates are randomized sets of
expression requirements that phenotypes are scored against.

Example usage:
    from heredity import Gene, get_expressions, FitnessTemplate

    phenotype = get_expressions([
        Gene('fur', 'orange', 1),
        Gene('fur', 'black', 1),
        Gene('eyes', 'blue', 2),
        Gene('eyes', 'brown', 1),
    ])
    # {'fur': frozenset({'orange', 'black'}), 'eyes': frozenset({'brown'})}

    template = FitnessTemplate({'fur': 'black'}, 10)
    template.match(phenotype)  # True
"""

__version__ = "0.1.0"

from .genetics import (
    Gene,
    Phenotype,
    GenePool,
    get_expressions,
    gene_pool_from_dict,
    gene_pool_to_dict,
    validate_gene_pool,
)
from .fitness import (
    FitnessTemplate,
    TemplateConfig,
    FitnessEvaluation,
    create_random_template,
    create_random_template_set,
    generate_template,
    generate_templates,
    evaluate_fitness,
    evaluate_population,
    rank_by_fitness,
)

__all__ = [
    'Gene',
    'Phenotype',
    'GenePool',
    'get_expressions',
    'gene_pool_from_dict',
    'gene_pool_to_dict',
    'validate_gene_pool',
    'FitnessTemplate',
    'TemplateConfig',
    'FitnessEvaluation',
    'create_random_template',
    'create_random_template_set',
    'generate_template',
    'generate_templates',
    'evaluate_fitness',
    'evaluate_population',
    'rank_by_fitness',
]
