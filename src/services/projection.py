"""Preference projection — trim a canonical entry to the user's display settings."""

from dataclasses import replace

from domain.model.entry import Entry
from domain.model.preferences import DisplayPreferences, Scope


def project(entry: Entry, prefs: DisplayPreferences) -> Entry:
    """Return a new Entry honoring scope and per-sense example count.

    RELEVANT keeps only the first sense (and its part of speech); ALL keeps
    every sense in order. Each retained sense keeps at most
    prefs.example_count examples. Never adds senses or examples, so
    projecting an already projected entry is a no-op.
    """
    senses = entry.senses
    parts_of_speech = entry.parts_of_speech
    if prefs.scope == Scope.RELEVANT and len(senses) > 1:
        senses = senses[:1]
        parts_of_speech = parts_of_speech[:1]

    trimmed = tuple(
        sense if len(sense.examples) <= prefs.example_count
        else replace(sense, examples=sense.examples[:prefs.example_count])
        for sense in senses
    )
    return replace(entry, senses=trimmed, parts_of_speech=parts_of_speech)
