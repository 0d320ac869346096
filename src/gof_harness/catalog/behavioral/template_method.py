"""
Template Method.

Base: the CSV and JSON exporters repeat the same load/validate/format
steps with small differences.
Improved: a base class fixes the algorithm's skeleton and subclasses
fill in the format step.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Iterator

SUMMARY = "Define an algorithm's skeleton and let subclasses override specific steps."

ROWS = [{"name": "ada", "score": 91}, {"name": "bob", "score": -1}, {"name": "cy", "score": 78}]


class CsvExporter:
    def export(self, rows: list[dict[str, object]]) -> str:
        valid = [r for r in rows if isinstance(r["score"], int) and r["score"] >= 0]
        return "\n".join(f"{r['name']},{r['score']}" for r in valid)


class JsonExporter:
    def export(self, rows: list[dict[str, object]]) -> str:
        valid = [r for r in rows if isinstance(r["score"], int) and r["score"] >= 0]
        return json.dumps(valid)


class Exporter(ABC):
    def export(self, rows: list[dict[str, object]]) -> str:
        """The template method: the step order is fixed here."""
        valid = [r for r in rows if self.is_valid(r)]
        return self.header() + self.format(valid)

    def is_valid(self, row: dict[str, object]) -> bool:
        score = row["score"]
        return isinstance(score, int) and score >= 0

    def header(self) -> str:
        return ""

    @abstractmethod
    def format(self, rows: list[dict[str, object]]) -> str: ...


class TemplateCsvExporter(Exporter):
    def header(self) -> str:
        return "name,score\n"

    def format(self, rows: list[dict[str, object]]) -> str:
        return "\n".join(f"{r['name']},{r['score']}" for r in rows)


class TemplateJsonExporter(Exporter):
    def format(self, rows: list[dict[str, object]]) -> str:
        return json.dumps(rows)


def base() -> Iterator[str]:
    yield from CsvExporter().export(ROWS).splitlines()
    yield JsonExporter().export(ROWS)
    yield "validation written: 2 times"


def improved() -> Iterator[str]:
    yield from TemplateCsvExporter().export(ROWS).splitlines()
    yield TemplateJsonExporter().export(ROWS)
    yield "validation written: 1 time"
