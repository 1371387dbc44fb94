"""Pydantic v2 models for the compiled-in example, category and docs registries.

Every record is frozen: registries are populated at import time and never
mutated afterwards.  Sequence fields are tuples for the same reason.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Difficulty(str, Enum):
    """Descriptive difficulty level. Only ever rendered into prose."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def label(self) -> str:
        """Capitalised display label, e.g. ``"Beginner"``."""
        return self.value.capitalize()

    @property
    def audience(self) -> str:
        """Who the material is aimed at, completing "suitable for developers with ..."."""
        return _AUDIENCE[self]


_AUDIENCE: dict[Difficulty, str] = {
    Difficulty.BEGINNER: "basic knowledge of Solidity and blockchain",
    Difficulty.INTERMEDIATE: "intermediate Solidity experience and FHE concepts",
    Difficulty.ADVANCED: "advanced cryptography and smart contract knowledge",
}


# ---------------------------------------------------------------------------
# Scaffold configs
# ---------------------------------------------------------------------------

class ExampleConfig(BaseModel):
    """One standalone example repository."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Registry key and generated package name (kebab-case)")
    title: str = Field(..., description="Human-readable display name")
    description: str = Field(..., description="One-paragraph summary embedded in the README")
    concepts: tuple[str, ...] = Field(default=(), description="FHEVM concepts, rendered as bullets")
    difficulty: Difficulty = Field(default=Difficulty.BEGINNER)


class CategoryConfig(ExampleConfig):
    """A category repository grouping several examples.

    ``examples`` holds example registry keys.  They are not cross-checked
    against the example registry.
    """
    examples: tuple[str, ...] = Field(default=(), description="Example keys in this category")


# ---------------------------------------------------------------------------
# Documentation configs
# ---------------------------------------------------------------------------

class ConceptSection(BaseModel):
    """A "Key Concepts" subsection: a heading plus bullet points."""
    model_config = ConfigDict(frozen=True)

    heading: str
    points: tuple[str, ...] = ()


class FunctionDoc(BaseModel):
    """A contract function documented in the "Key Functions" section."""
    model_config = ConfigDict(frozen=True)

    name: str
    summary: str
    signature: str = Field(..., description="Solidity signature, rendered in a code block")


class DocTopicConfig(BaseModel):
    """One documentation page.

    ``contract_file`` and ``test_file`` are paths relative to the docs source
    root.  They are interpolated into the page as-is; existence is only checked
    to emit a warning.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Registry key and output file stem")
    title: str
    description: str
    contract_file: str
    test_file: str
    chapter: str = Field(..., description="GitBook chapter tag")
    concept_sections: tuple[ConceptSection, ...] = ()
    key_functions: tuple[FunctionDoc, ...] = ()
    use_cases: tuple[ConceptSection, ...] = ()
    topics: tuple[str, ...] = Field(default=(), description="Bullets shown in the docs index")
    snippet_start: Optional[str] = Field(default=None, description="Start marker for the source excerpt")
    snippet_end: Optional[str] = Field(default=None, description="End marker for the source excerpt")

    @property
    def has_snippet_markers(self) -> bool:
        return bool(self.snippet_start and self.snippet_end)
