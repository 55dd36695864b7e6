"""Unit tests for lexical domain models — Entry, Settings, ProviderId.

Tests focus on behavior relied on by the pipeline:
- Entry parallel-array invariant and wire-shape conversion (cache + client)
- Settings defaults and lenient coercion of stored values
- ProviderId fallback for unknown sources
"""

import dataclasses
import unittest

from domain.model.entry import Entry, Example, Pronunciation, Sense
from domain.model.outcome import Outcome
from domain.model.preferences import DisplayPreferences, Scope, Settings
from domain.model.provider import ProviderId


def _entry() -> Entry:
    return Entry.from_senses(
        "run",
        [
            Sense("verb", "move fast", examples=(Example("He can run fast."),)),
            Sense("noun", "an act of running", "carrera", (Example("a run", "una carrera"),)),
        ],
        pronunciations=[Pronunciation("us", "/rən/", "https://audio/run.wav")],
        translation="correr",
    )


class TestEntry(unittest.TestCase):
    """Tests for Entry construction and invariants."""

    def test_mismatched_parts_of_speech_rejected(self):
        """senses and parts_of_speech must have the same length."""
        with self.assertRaises(ValueError):
            Entry(headword="run", senses=(Sense("verb", "move fast"),), parts_of_speech=())

    def test_from_senses_derives_parts_of_speech(self):
        self.assertEqual(_entry().parts_of_speech, ("verb", "noun"))

    def test_default_pronunciation_has_empty_audio(self):
        entry = Entry.from_senses("run", [Sense("verb", "move fast")])
        self.assertEqual(entry.pronunciations, (Pronunciation("us", "", ""),))

    def test_inflections_always_empty_by_default(self):
        self.assertEqual(_entry().inflections, ())

    def test_entry_is_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            _entry().headword = "walk"


class TestEntryWireShape(unittest.TestCase):
    """Tests for to_dict/from_dict used by cache store and API."""

    def test_to_dict_uses_client_field_names(self):
        data = _entry().to_dict()
        self.assertEqual(data["word"], "run")
        self.assertEqual(data["translation"], "correr")
        self.assertEqual(data["pos"], ["verb", "noun"])
        self.assertEqual(data["verbs"], [])
        self.assertEqual(data["pronunciation"], [{"lang": "us", "pron": "/rən/", "url": "https://audio/run.wav"}])
        self.assertEqual(data["definition"][1], {
            "pos": "noun",
            "text": "an act of running",
            "translation": "carrera",
            "example": [{"text": "a run", "translation": "una carrera"}],
        })

    def test_from_dict_restores_equal_entry(self):
        entry = _entry()
        self.assertEqual(Entry.from_dict(entry.to_dict()), entry)

    def test_from_dict_accepts_string_examples(self):
        entry = Entry.from_dict({
            "word": "run",
            "pos": ["verb"],
            "pronunciation": [],
            "definition": [{"pos": "verb", "text": "move fast", "example": ["He runs."]}],
        })
        self.assertEqual(entry.senses[0].examples, (Example("He runs.", None),))

    def test_from_dict_derives_missing_pos_list(self):
        entry = Entry.from_dict({"word": "run", "definition": [{"pos": "verb", "text": "x"}]})
        self.assertEqual(entry.parts_of_speech, ("verb",))

    def test_from_dict_rejects_inconsistent_pos_list(self):
        with self.assertRaises(ValueError):
            Entry.from_dict({"word": "run", "pos": ["verb", "noun"], "definition": [{"pos": "verb", "text": "x"}]})

    def test_from_dict_rejects_pos_values_differing_from_senses(self):
        with self.assertRaises(ValueError):
            Entry.from_dict({"word": "run", "pos": [None], "definition": [{"pos": "verb", "text": "x"}]})

    def test_from_dict_rejects_non_string_fields(self):
        cases = [
            {"word": 5, "definition": [{"pos": "verb", "text": "x"}]},
            {"word": "run", "definition": [{"pos": "verb", "text": 5}]},
            {"word": "run", "definition": [{"pos": 1, "text": "x"}]},
            {"word": "run", "definition": [{"pos": "verb", "text": "x", "example": [{"text": None, "translation": 2}]}]},
            {"word": "run", "translation": ["correr"], "definition": [{"pos": "verb", "text": "x"}]},
            {"word": "run", "definition": [{"pos": "verb", "text": "x"}], "pronunciation": [{"url": 7}]},
            {"word": "run", "definition": "verb: x"},
        ]
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaises(ValueError):
                    Entry.from_dict(data)

    def test_from_dict_absent_optional_fields_use_defaults(self):
        entry = Entry.from_dict({"word": "run", "definition": [{"pos": "verb"}]})
        self.assertEqual(entry.senses[0], Sense("verb", ""))
        self.assertIsNone(entry.translation)


class TestSettings(unittest.TestCase):
    """Tests for Settings.from_mapping defaults and coercion."""

    def test_empty_store_uses_defaults(self):
        settings = Settings.from_mapping({})
        self.assertEqual(settings.preferred_source, ProviderId.CAMBRIDGE)
        self.assertIsNone(settings.mw_api_key)
        self.assertEqual(settings.target_language, "none")
        self.assertFalse(settings.has_target_language)
        self.assertEqual(settings.display, DisplayPreferences(Scope.RELEVANT, 1))
        self.assertFalse(settings.tts_enabled)

    def test_none_mapping_uses_defaults(self):
        self.assertEqual(Settings.from_mapping(None), Settings())

    def test_absent_example_count_defaults_to_one(self):
        """Absence means 1, not 0 and not unlimited."""
        self.assertEqual(Settings.from_mapping({"definitionScope": "all"}).display.example_count, 1)

    def test_zero_example_count_is_kept(self):
        self.assertEqual(Settings.from_mapping({"exampleCount": 0}).display.example_count, 0)

    def test_string_example_count_is_coerced(self):
        self.assertEqual(Settings.from_mapping({"exampleCount": "3"}).display.example_count, 3)

    def test_invalid_example_count_falls_back(self):
        self.assertEqual(Settings.from_mapping({"exampleCount": "many"}).display.example_count, 1)
        self.assertEqual(Settings.from_mapping({"exampleCount": -2}).display.example_count, 1)

    def test_scope_parsing(self):
        self.assertEqual(Settings.from_mapping({"definitionScope": "relevant"}).display.scope, Scope.RELEVANT)
        self.assertEqual(Settings.from_mapping({"definitionScope": "all"}).display.scope, Scope.ALL)
        self.assertEqual(Settings.from_mapping({"definitionScope": "everything"}).display.scope, Scope.ALL)

    def test_tts_flag_coercion(self):
        self.assertTrue(Settings.from_mapping({"ttsEnabled": True}).tts_enabled)
        self.assertTrue(Settings.from_mapping({"ttsEnabled": "true"}).tts_enabled)
        self.assertFalse(Settings.from_mapping({"ttsEnabled": "false"}).tts_enabled)

    def test_target_language(self):
        settings = Settings.from_mapping({"targetLanguage": "es"})
        self.assertEqual(settings.target_language, "es")
        self.assertTrue(settings.has_target_language)

    def test_negative_example_count_rejected_by_preferences(self):
        with self.assertRaises(ValueError):
            DisplayPreferences(Scope.ALL, -1)


class TestProviderId(unittest.TestCase):

    def test_known_sources(self):
        self.assertEqual(ProviderId.parse("gemini"), ProviderId.GEMINI)
        self.assertEqual(ProviderId.parse("merriam-webster"), ProviderId.MERRIAM_WEBSTER)
        self.assertEqual(ProviderId.parse("cambridge"), ProviderId.CAMBRIDGE)

    def test_unknown_or_absent_source_is_cambridge(self):
        self.assertEqual(ProviderId.parse("oxford"), ProviderId.CAMBRIDGE)
        self.assertEqual(ProviderId.parse(None), ProviderId.CAMBRIDGE)


class TestOutcome(unittest.TestCase):

    def test_success_serializes_entry(self):
        data = Outcome.success(_entry(), tts_enabled=True).to_dict()
        self.assertEqual(data["status"], "success")
        self.assertTrue(data["ttsEnabled"])
        self.assertEqual(data["data"]["word"], "run")

    def test_error_has_only_status_and_message(self):
        self.assertEqual(Outcome.error("boom").to_dict(), {"status": "error", "message": "boom"})

    def test_no_language(self):
        outcome = Outcome.no_language("pick one")
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.to_dict(), {"status": "noLanguage", "message": "pick one"})
