"""Content generators."""

from bullpen.generators.archetypes import determine_archetype
from bullpen.generators.names import generate_name
from bullpen.generators.prospect import (
    GeneratorConfig,
    assign_media_ranks,
    generate_draft_class,
    generate_prospect,
)

__all__ = [
    # Prospect generation
    "GeneratorConfig",
    "assign_media_ranks",
    "generate_draft_class",
    "generate_prospect",
    # Labels and names
    "determine_archetype",
    "generate_name",
]
