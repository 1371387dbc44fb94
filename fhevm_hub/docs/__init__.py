"""Markdown documentation generation for the FHEVM examples.

Quick usage::

    from fhevm_hub.docs import DocsGenerator

    generator = DocsGenerator()
    result = await generator.generate_all("./examples")
"""

from fhevm_hub.docs.extract import extract_code_section
from fhevm_hub.docs.generator import DOC_SECTIONS, DocsBatchResult, DocsGenerator

__all__ = [
    "DOC_SECTIONS",
    "DocsBatchResult",
    "DocsGenerator",
    "extract_code_section",
]
