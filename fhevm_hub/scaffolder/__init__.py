"""FHEVM scaffolder -- generates example and category repositories.

This module takes a registry key (``"fhe-counter"``, ``"trading"``, ...) and
renders a ready-to-install hardhat project directory: package manifest,
hardhat config, README, ignore file and the contracts/test/deploy/scripts
skeleton.

Quick usage::

    from fhevm_hub.scaffolder import ExampleGenerator

    generator = ExampleGenerator()
    result = await generator.generate("fhe-counter", "./out/counter")
"""

from fhevm_hub.scaffolder.category_gen import CategoryGenerator
from fhevm_hub.scaffolder.example_gen import ExampleGenerator
from fhevm_hub.scaffolder.generator import RenderedFile, ScaffoldGenerator, ScaffoldResult
from fhevm_hub.scaffolder.templates import TemplateRenderer
from fhevm_hub.scaffolder.tree import DEFAULT_SUBDIRS, FileTreeBuilder
from fhevm_hub.scaffolder.writer import FileWriter

__all__ = [
    "CategoryGenerator",
    "DEFAULT_SUBDIRS",
    "ExampleGenerator",
    "FileTreeBuilder",
    "FileWriter",
    "RenderedFile",
    "ScaffoldGenerator",
    "ScaffoldResult",
    "TemplateRenderer",
]
