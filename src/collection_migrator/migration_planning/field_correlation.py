"""Correlation of edited field entries with persisted schema fields."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from collection_migrator.field_editing.field_entries import FieldEntry

PersistedField = tuple[str, Mapping[str, Any]]


@dataclass(frozen=True)
class Correlation:
    """An edited entry paired with the persisted field it is assumed to stand for."""

    index: int
    previous_name: str
    entry: FieldEntry


class FieldCorrelator(Protocol):  # pylint: disable=too-few-public-methods
    """Strategy that pairs persisted fields with edited entries."""

    def correlate(
        self, previous: Sequence[PersistedField], current: Sequence[FieldEntry]
    ) -> Sequence[Correlation]: ...


class PositionalCorrelator:  # pylint: disable=too-few-public-methods
    """Pair entries with persisted fields by list index.

    Entries carry no stable identifier, so position ``i`` of the edited list is
    taken to be position ``i`` of the persisted schema. Pairing stops at the end
    of the shorter sequence: trailing entries are treated as new, and trailing
    persisted fields are left unaccounted for. Inserting or reordering fields in
    the middle of the list therefore shifts every later pairing.
    """

    def correlate(
        self, previous: Sequence[PersistedField], current: Sequence[FieldEntry]
    ) -> Sequence[Correlation]:
        correlations: list[Correlation] = []
        for index, entry in enumerate(current):
            if index >= len(previous):
                break
            previous_name, _ = previous[index]
            correlations.append(Correlation(index=index, previous_name=previous_name, entry=entry))
        return tuple(correlations)
