"""FHEVM example hub scaffolding toolkit.

Generates standalone FHEVM example repositories, multi-example category
repositories, and markdown documentation from compiled-in registries.
"""

__version__ = "1.0.0"
