"""Compiled-in registries and their config models.

Quick usage::

    from fhevm_hub.registry import EXAMPLE_REGISTRY

    config = EXAMPLE_REGISTRY.lookup("fhe-counter")
    if config is None:
        ...
"""

from fhevm_hub.registry.catalog import (
    CATEGORIES,
    CATEGORY_REGISTRY,
    DOC_REGISTRY,
    DOC_TOPICS,
    EXAMPLE_REGISTRY,
    EXAMPLES,
)
from fhevm_hub.registry.models import (
    CategoryConfig,
    ConceptSection,
    Difficulty,
    DocTopicConfig,
    ExampleConfig,
    FunctionDoc,
)
from fhevm_hub.registry.registry import Registry

__all__ = [
    "CATEGORIES",
    "CATEGORY_REGISTRY",
    "CategoryConfig",
    "ConceptSection",
    "DOC_REGISTRY",
    "DOC_TOPICS",
    "Difficulty",
    "DocTopicConfig",
    "EXAMPLES",
    "EXAMPLE_REGISTRY",
    "ExampleConfig",
    "FunctionDoc",
    "Registry",
]
