"""
Pattern entry model - what the registry stores.

Every runnable example is keyed by (category, name, variant). An entry
is a plain record holding an opaque zero-argument callable; there is no
shared base type across the unrelated pattern examples.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field, field_validator

from gof_harness.constants import Category, Variant


def normalize_name(value: str) -> str:
    """
    Normalize a pattern name to lower-case kebab-case.

    'Template_Method' and 'template-method' name the same pattern.
    """
    name = value.strip().lower().replace("_", "-")
    if not name or not name.replace("-", "").isalnum():
        raise ValueError(f"Invalid pattern name: {value!r}")
    return name


def normalize_token(value: str) -> str:
    """Normalize a category or variant token: ' Behavioral ' -> 'behavioral'."""
    return value.strip().lower()


def _coerce_token(value: Any) -> Any:
    if isinstance(value, str) and not isinstance(value, (Category, Variant)):
        return normalize_token(value)
    return value


class PatternKey(BaseModel):
    """
    Identity of one runnable example.

    Frozen and hashable so it can key the registry directly.
    """

    category: Category = Field(..., description="Pattern category")
    name: str = Field(..., description="Pattern name, unique within its category")
    variant: Variant = Field(..., description="base or improved")

    model_config = {"frozen": True}

    @field_validator("category", "variant", mode="before")
    @classmethod
    def normalize_tokens(cls, v: Any) -> Any:
        """Accept category and variant tokens in any case."""
        return _coerce_token(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure pattern name is a valid kebab-case identifier."""
        return normalize_name(v)

    @classmethod
    def parse(cls, text: str) -> PatternKey:
        """
        Parse 'category/name/variant'.

        Raises:
            ValueError: If the text does not have three parts
        """
        parts = text.strip().split("/")
        if len(parts) != 3:
            raise ValueError(f"Expected 'category/name/variant', got {text!r}")
        category, name, variant = parts
        return cls(category=category, name=name, variant=variant)

    def sort_key(self) -> tuple[str, str, str]:
        """Lexicographic ordering: category, then name, then variant."""
        return (self.category.value, self.name, self.variant.value)

    def __str__(self) -> str:
        return f"{self.category.value}/{self.name}/{self.variant.value}"


class PatternEntry(BaseModel):
    """
    A registered pattern example.

    ``run`` takes no arguments and produces output lines: it may be a
    generator, return a list of lines, return one string, or return None.
    Raising from ``run`` is a fault that the harness reports.
    """

    category: Category = Field(..., description="Pattern category")
    name: str = Field(..., description="Pattern name")
    variant: Variant = Field(..., description="base or improved")
    run: Callable[[], Any] = Field(..., description="Zero-argument demonstration callable")

    summary: str = Field("", description="One-line description of the pattern")
    source: str | None = Field(None, description="Module the example was loaded from")

    model_config = {"frozen": True}

    @field_validator("category", "variant", mode="before")
    @classmethod
    def normalize_tokens(cls, v: Any) -> Any:
        """Accept category and variant tokens in any case."""
        return _coerce_token(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure pattern name is a valid kebab-case identifier."""
        return normalize_name(v)

    @property
    def key(self) -> PatternKey:
        """The registry key for this entry."""
        return PatternKey(category=self.category, name=self.name, variant=self.variant)

    def __repr__(self) -> str:
        return f"PatternEntry({str(self.key)!r})"
