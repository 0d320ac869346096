"""
Tests for pattern models.
"""

import pytest
from pydantic import ValidationError

from gof_harness.constants import Category, FaultKind, RunState, RunStatus, Variant
from gof_harness.models import PatternEntry, PatternKey, RunResult, normalize_name


class TestNormalizeName:
    """Tests for pattern name normalization."""

    def test_kebab_case(self) -> None:
        """Underscores and case are normalized."""
        assert normalize_name("Template_Method") == "template-method"
        assert normalize_name("  observer ") == "observer"

    def test_invalid_names(self) -> None:
        """Empty or punctuated names are rejected."""
        for bad in ("", "   ", "a/b", "hello world", "x!"):
            with pytest.raises(ValueError):
                normalize_name(bad)


class TestPatternKey:
    """Tests for PatternKey."""

    def test_coerces_strings(self) -> None:
        """String tokens become enums."""
        key = PatternKey(category="behavioral", name="Chain_Of_Responsibility", variant="base")
        assert key.category == Category.BEHAVIORAL
        assert key.variant == Variant.BASE
        assert key.name == "chain-of-responsibility"

    def test_str_and_parse(self) -> None:
        """String form round-trips through parse."""
        key = PatternKey(category="structural", name="proxy", variant="improved")
        assert str(key) == "structural/proxy/improved"
        assert PatternKey.parse("structural/proxy/improved") == key

    def test_parse_rejects_wrong_shape(self) -> None:
        """parse needs exactly three parts."""
        with pytest.raises(ValueError):
            PatternKey.parse("structural/proxy")

    def test_hashable_and_frozen(self) -> None:
        """Keys can be dict keys and cannot be mutated."""
        key = PatternKey(category="creational", name="builder", variant="base")
        assert {key: 1}[PatternKey(category="creational", name="builder", variant="base")] == 1
        with pytest.raises(ValidationError):
            key.name = "other"  # type: ignore[misc]

    def test_invalid_category(self) -> None:
        """Unknown categories are rejected."""
        with pytest.raises(ValidationError):
            PatternKey(category="culinary", name="builder", variant="base")


class TestPatternEntry:
    """Tests for PatternEntry."""

    def test_entry_key(self) -> None:
        """An entry exposes its key."""
        entry = PatternEntry(category="creational", name="builder", variant="base", run=list)
        assert str(entry.key) == "creational/builder/base"
        assert entry.summary == ""
        assert entry.source is None

    def test_run_must_be_callable(self) -> None:
        """Non-callables are rejected."""
        with pytest.raises(ValidationError):
            PatternEntry(category="creational", name="builder", variant="base", run="nope")

    def test_entry_is_frozen(self) -> None:
        """Entries are immutable once created."""
        entry = PatternEntry(category="creational", name="builder", variant="base", run=list)
        with pytest.raises(ValidationError):
            entry.summary = "changed"  # type: ignore[misc]


class TestRunResult:
    """Tests for RunResult."""

    def test_ok_property(self) -> None:
        """ok reflects status."""
        result = RunResult(
            selection="creational/builder/base",
            status=RunStatus.OK,
            state=RunState.COMPLETED,
            output=["a"],
        )
        assert result.ok
        assert result.error is None

    def test_to_dict_is_json_safe(self) -> None:
        """to_dict emits plain values."""
        result = RunResult(
            selection="creational/builder/base",
            key=PatternKey(category="creational", name="builder", variant="base"),
            status=RunStatus.FAILED,
            state=RunState.FAULTED,
            error="pattern not found",
            fault_kind=FaultKind.NOT_FOUND,
        )
        data = result.to_dict()
        assert data["status"] == "failed"
        assert data["fault_kind"] == "not_found"
        assert data["key"] == {"category": "creational", "name": "builder", "variant": "base"}
        assert data["output"] == []
