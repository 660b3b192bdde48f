"""Outcomes of parsing one schema definition."""

from __future__ import annotations

from dataclasses import dataclass

from .schema_models import Schema


@dataclass(frozen=True)
class ParsedSchema:
    """The definition parsed and its named types were registered."""

    schema: Schema


@dataclass(frozen=True)
class UnresolvedReference:
    """The definition refers to a named type that is not known yet."""

    name: str


@dataclass(frozen=True)
class ParseFailure:
    """The definition is invalid for any other reason."""

    detail: str


ParseOutcome = ParsedSchema | UnresolvedReference | ParseFailure
