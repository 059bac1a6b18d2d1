"""
Configuration for fitness template generation.

Bundles the size and score bounds used to draw templates, validated up
front so generation itself never has to second-guess its arguments.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Any
import numpy as np

from ..genetics.pool import GenePool, validate_gene_pool
from .template import FitnessTemplate, create_random_template, create_random_template_set


@dataclass
class TemplateConfig:
    """Bounds for randomly generated fitness templates (all inclusive)."""
    # Number of required expressions per template
    min_constraints: int = 1
    max_constraints: int = 5

    # Fitness delta range
    min_score: float = -1.0
    max_score: float = 1.0

    def __post_init__(self):
        """Validate bounds."""
        if self.min_constraints < 1:
            raise ValueError(
                f"min_constraints must be at least 1, got {self.min_constraints}"
            )
        if self.min_constraints > self.max_constraints:
            raise ValueError(
                f"min_constraints ({self.min_constraints}) exceeds "
                f"max_constraints ({self.max_constraints})"
            )
        if self.min_score > self.max_score:
            raise ValueError(
                f"min_score ({self.min_score}) exceeds max_score ({self.max_score})"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TemplateConfig':
        return cls(**data)


def generate_template(
    config: TemplateConfig,
    gene_pool: GenePool,
    rng: Optional[np.random.Generator] = None,
) -> FitnessTemplate:
    """Draw a single template using the bounds in `config`."""
    return create_random_template(
        config.min_constraints,
        config.max_constraints,
        config.min_score,
        config.max_score,
        gene_pool,
        rng=rng,
    )


def generate_templates(
    config: TemplateConfig,
    count: int,
    gene_pool: GenePool,
    rng: Optional[np.random.Generator] = None,
) -> List[FitnessTemplate]:
    """
    Draw `count` templates using the bounds in `config`.

    The gene pool is validated once before any sampling.

    Raises:
        ValueError: If count is negative or the gene pool is unusable
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    validate_gene_pool(gene_pool)

    return create_random_template_set(
        count,
        config.min_constraints,
        config.max_constraints,
        config.min_score,
        config.max_score,
        gene_pool,
        rng=rng,
    )
