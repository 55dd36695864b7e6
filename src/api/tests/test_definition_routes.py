"""Unit tests for definition, translation and health routes."""

import unittest

from fastapi.testclient import TestClient

from adapter.fake.cache import FakeCacheAdapter
from adapter.fake.dictionary import FakeDictionaryAdapter
from adapter.fake.settings import FakeSettingsAdapter
from adapter.fake.translation import FakeTranslationAdapter
from api.dependencies import get_cache, get_definition_service
from api.main import app
from domain.model.provider import ProviderId
from services.definition_service import DefinitionService, MISSING_MW_KEY_MESSAGE, NO_LANGUAGE_MESSAGE

GEMINI_RUN = {
    "word": "run",
    "translation": "correr",
    "forms": [
        {"partOfSpeech": "verb", "definitions": [
            {"definition": "move fast", "examples": [{"text": "He can run fast.", "translation": "Puede correr rápido."}]},
        ]},
        {"partOfSpeech": "noun", "definitions": [{"definition": "an act of running"}]},
    ],
}

CAMBRIDGE_RUN = {
    "word": "run",
    "pos": ["verb"],
    "pronunciation": [{"lang": "us", "pron": "/rʌn/", "url": "https://cdn/us/run.mp3"}],
    "definition": [{"pos": "verb", "text": "to move fast", "example": []}],
}


class _RouteTestCase(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.cache = FakeCacheAdapter()
        self.settings = FakeSettingsAdapter()
        self.gemini = FakeDictionaryAdapter(GEMINI_RUN)
        self.cambridge = FakeDictionaryAdapter(CAMBRIDGE_RUN)
        self.mw = FakeDictionaryAdapter([])
        self.translator = FakeTranslationAdapter({"translation": "Hola mundo"})
        app.dependency_overrides[get_definition_service] = lambda: DefinitionService(
            settings=self.settings,
            cache=self.cache,
            providers={
                ProviderId.CAMBRIDGE: self.cambridge,
                ProviderId.GEMINI: self.gemini,
                ProviderId.MERRIAM_WEBSTER: self.mw,
            },
            translator=self.translator,
        )
        app.dependency_overrides[get_cache] = lambda: self.cache

    def tearDown(self):
        """Clean up dependency overrides."""
        app.dependency_overrides.clear()


class TestDefinitionsRoute(_RouteTestCase):
    """Test cases for POST /definitions."""

    def test_success_with_gemini(self):
        self.settings.values = {"preferredSource": "gemini", "targetLanguage": "es", "ttsEnabled": True}

        response = self.client.post("/definitions", json={"word": "Run"})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "success")
        self.assertTrue(body["ttsEnabled"])
        data = body["data"]
        self.assertEqual(data["word"], "run")
        self.assertEqual(data["translation"], "correr")
        self.assertEqual(data["pos"], ["verb"])
        self.assertEqual(len(data["definition"]), 1)
        self.assertEqual(data["definition"][0]["example"],
                         [{"text": "He can run fast.", "translation": "Puede correr rápido."}])
        self.assertEqual(data["pronunciation"][0]["url"], "https://cdn/us/run.mp3")

    def test_scope_all_returns_every_sense(self):
        self.settings.values = {"preferredSource": "gemini", "definitionScope": "all"}

        data = self.client.post("/definitions", json={"word": "run"}).json()["data"]

        self.assertEqual(data["pos"], ["verb", "noun"])
        self.assertEqual([d["text"] for d in data["definition"]], ["move fast", "an act of running"])

    def test_configuration_error_is_reported(self):
        self.settings.values = {"preferredSource": "merriam-webster"}

        response = self.client.post("/definitions", json={"word": "run"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "error", "message": MISSING_MW_KEY_MESSAGE})
        self.assertEqual(self.mw.calls, [])

    def test_not_found_is_reported(self):
        self.cambridge.payload = None

        body = self.client.post("/definitions", json={"word": "zzzz"}).json()

        self.assertEqual(body["status"], "error")
        self.assertIn("not found", body["message"])

    def test_wrongly_typed_payload_is_reported_and_not_cached(self):
        self.cambridge.payload = {"word": "run", "pos": [None], "definition": [{"pos": "verb", "text": 5}]}

        for _ in range(2):
            response = self.client.post("/definitions", json={"word": "run"})
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json()["status"], "error")
        self.assertEqual(self.cache.store, {})

    def test_empty_word_rejected(self):
        response = self.client.post("/definitions", json={"word": ""})
        self.assertEqual(response.status_code, 422)


class TestTranslationsRoute(_RouteTestCase):
    """Test cases for POST /translations."""

    def test_no_language(self):
        body = self.client.post("/translations", json={"text": "Hello world"}).json()
        self.assertEqual(body, {"status": "noLanguage", "message": NO_LANGUAGE_MESSAGE})

    def test_success(self):
        self.settings.values = {"targetLanguage": "es"}

        body = self.client.post("/translations", json={"text": "Hello world"}).json()

        self.assertEqual(body["status"], "success")
        self.assertEqual(body["data"], {"translation": "Hola mundo"})
        self.assertFalse(body["ttsEnabled"])


class TestHealthAndRoot(_RouteTestCase):

    def test_health_with_cache(self):
        body = self.client.get("/health").json()
        self.assertEqual(body["status"], "healthy")
        self.assertEqual(body["services"]["redis"]["status"], "healthy")

    def test_health_degraded_without_cache(self):
        self.cache.ping = lambda: False
        body = self.client.get("/health").json()
        self.assertEqual(body["status"], "degraded")

    def test_root(self):
        body = self.client.get("/").json()
        self.assertEqual(body["status"], "running")
        self.assertIn("version", body)
