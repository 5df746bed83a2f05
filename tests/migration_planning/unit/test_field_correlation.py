"""Positional correlation tests."""

from __future__ import annotations

from collection_migrator.field_editing.field_entries import EntryStatus, FieldEntry
from collection_migrator.migration_planning import Correlation, PositionalCorrelator


def test_pairs_entries_with_persisted_fields_by_index() -> None:
    previous = (("title", {"type": "string"}), ("body", {"type": "string"}))
    current = [
        FieldEntry(name="headline", status=EntryStatus.KEPT),
        FieldEntry(name="body", status=EntryStatus.REMOVED),
    ]

    correlations = PositionalCorrelator().correlate(previous, current)

    assert correlations == (
        Correlation(index=0, previous_name="title", entry=current[0]),
        Correlation(index=1, previous_name="body", entry=current[1]),
    )


def test_stops_at_the_end_of_the_shorter_sequence() -> None:
    previous = (("a", {}), ("b", {}), ("c", {}))
    correlator = PositionalCorrelator()

    assert len(correlator.correlate(previous, [FieldEntry(name="a")])) == 1
    assert len(correlator.correlate(previous[:1], [FieldEntry(name=n) for n in "axyz"])) == 1
    assert correlator.correlate((), [FieldEntry(name="a")]) == ()
