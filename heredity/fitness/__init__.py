"""
Fitness templates and phenotype evaluation.

Key components:
- FitnessTemplate: required expressions plus a score value
- TemplateConfig: validated bounds for random template generation
- FitnessEvaluation: a phenotype's score against a template set

Example usage:
    from heredity.fitness import FitnessTemplate, evaluate_fitness

    templates = FitnessTemplate.create_random_set(10, 1, 3, -2, 2, gene_pool)
    result = evaluate_fitness(templates, phenotype)

    print(f"Fitness: {result.total_score:.3f}")
"""

from .template import FitnessTemplate, create_random_template, create_random_template_set
from .config import TemplateConfig, generate_template, generate_templates
from .evaluation import (
    FitnessEvaluation,
    evaluate_fitness,
    evaluate_population,
    rank_by_fitness,
)

__all__ = [
    # Core classes
    'FitnessTemplate',
    'TemplateConfig',
    'FitnessEvaluation',
    # Template construction
    'create_random_template',
    'create_random_template_set',
    'generate_template',
    'generate_templates',
    # Evaluation
    'evaluate_fitness',
    'evaluate_population',
    'rank_by_fitness',
]
