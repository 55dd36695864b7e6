"""Definition service — orchestrates lookups and sentence translations.

Lookup pipeline:
    settings → cache key → cache lookup → provider fetch → adapter →
    projection → cache store → Outcome

Every reported failure (missing credential, unrepresentable payload,
upstream error) ends as Outcome.error(); callers never see an exception.
"""

import asyncio
import logging
from typing import Any

from domain.model.entry import Entry
from domain.model.errors import ConfigurationError, DefinitionNotFoundError, DomainError
from domain.model.outcome import Outcome
from domain.model.preferences import Settings
from domain.model.provider import ProviderId
from port.cache import CachePort
from port.dictionary import DictionaryPort, ProviderError
from port.settings import SettingsPort
from port.translation import TranslationPort
from services.cache_keys import lookup_key, sentence_key
from services.normalizers import adapt, enrich_pronunciation, is_phrase
from services.projection import project

logger = logging.getLogger(__name__)

MISSING_MW_KEY_MESSAGE = "Merriam-Webster API key is not set."
GEMINI_NOT_FOUND_MESSAGE = "Gemini AI definition not found or invalid format."
NOT_FOUND_MESSAGE = "Definition not found or API returned invalid format."
NO_LANGUAGE_MESSAGE = "Please select a target language in options setting to proceed"
INVALID_TEXT_MESSAGE = "Text contains characters that cannot be encoded."


class DefinitionService:
    """Serves normalized, preference-projected entries and sentence translations.

    Collaborators are injected as ports; providers maps each ProviderId to
    the client that fetches its payloads.
    """

    def __init__(
        self,
        settings: SettingsPort,
        cache: CachePort,
        providers: dict[ProviderId, DictionaryPort],
        translator: TranslationPort | None = None,
    ):
        self.settings = settings
        self.cache = cache
        self.providers = providers
        self.translator = translator

    # ------------------------------------------------------------------
    # Definition lookup
    # ------------------------------------------------------------------

    async def get_definition(self, word: str) -> Outcome:
        """Look up word with the user's configured source and display settings."""
        term = word.strip().lower()
        if not _is_encodable(term):
            return Outcome.error(INVALID_TEXT_MESSAGE)
        settings = Settings.from_mapping(self.settings.load())
        source = settings.preferred_source
        key = lookup_key(term, source, settings.display, settings.target_language)

        cached = self._cached_entry(key)
        if cached is not None:
            logger.info("Found processed entry in cache", extra={"word": term, "source": source.value})
            return Outcome.success(cached, tts_enabled=settings.tts_enabled)

        logger.info("Fetching definition", extra={"word": term, "source": source.value})
        try:
            entry = await self._fetch_entry(term, settings)
        except (DomainError, ProviderError) as e:
            logger.warning("Definition lookup failed", extra={
                "word": term, "source": source.value,
                "error": str(e), "error_type": type(e).__name__,
            })
            return Outcome.error(str(e))

        projected = project(entry, settings.display)
        self.cache.set(key, projected.to_dict())
        return Outcome.success(projected, tts_enabled=settings.tts_enabled)

    def _cached_entry(self, key: str) -> Entry | None:
        data = self.cache.get(key)
        if data is None:
            return None
        try:
            return Entry.from_dict(data)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning("Discarding unreadable cache entry", extra={"key": key, "error": str(e)})
            return None

    async def _fetch_entry(self, term: str, settings: Settings) -> Entry:
        """Fetch and adapt the canonical entry for term.

        Raises:
            ConfigurationError: Required credential missing.
            DefinitionNotFoundError: Payload not representable as an Entry.
            ProviderError: Upstream fetch failed.
        """
        source = settings.preferred_source

        if source is ProviderId.GEMINI:
            return await self._fetch_gemini_entry(term, settings)

        if source is ProviderId.MERRIAM_WEBSTER:
            if not settings.mw_api_key:
                raise ConfigurationError(MISSING_MW_KEY_MESSAGE)
            payload = await self.providers[source].fetch(term, api_key=settings.mw_api_key)
        else:
            payload = await self.providers[source].fetch(term)

        entry = adapt(source, payload)
        if entry is None:
            raise DefinitionNotFoundError(NOT_FOUND_MESSAGE)
        return entry

    async def _fetch_gemini_entry(self, term: str, settings: Settings) -> Entry:
        """Fetch the AI entry; single words also borrow Cambridge audio."""
        language = settings.target_language if settings.has_target_language else None
        gemini = self.providers[ProviderId.GEMINI]

        if is_phrase(term):
            payload = await gemini.fetch(term, target_language=language)
            enrichment = None
        else:
            enrichment_task = asyncio.create_task(self._fetch_enrichment(term))
            try:
                payload = await gemini.fetch(term, target_language=language)
            except BaseException:
                enrichment_task.cancel()
                raise
            enrichment = await enrichment_task

        entry = adapt(ProviderId.GEMINI, payload)
        if entry is None:
            raise DefinitionNotFoundError(GEMINI_NOT_FOUND_MESSAGE)
        if enrichment is None:
            return entry
        return enrich_pronunciation(entry, enrichment)

    async def _fetch_enrichment(self, term: str) -> Any | None:
        """Fetch the audio-only payload. Failures mean no enrichment."""
        cambridge = self.providers.get(ProviderId.CAMBRIDGE)
        if cambridge is None:
            return None
        try:
            return await cambridge.fetch(term)
        except ProviderError as e:
            logger.info("Skipping audio enrichment", extra={"word": term, "error": str(e)})
            return None

    # ------------------------------------------------------------------
    # Sentence translation
    # ------------------------------------------------------------------

    async def translate_sentence(self, sentence: str) -> Outcome:
        """Translate sentence into the configured target language."""
        settings = Settings.from_mapping(self.settings.load())
        if not settings.has_target_language:
            return Outcome.no_language(NO_LANGUAGE_MESSAGE)
        if not _is_encodable(sentence):
            return Outcome.error(INVALID_TEXT_MESSAGE)

        key = sentence_key(sentence, settings.target_language)
        cached = self.cache.get(key)
        if cached is not None:
            logger.info("Found sentence translation in cache", extra={"language": settings.target_language})
            return Outcome.success(cached, tts_enabled=settings.tts_enabled)

        if self.translator is None:
            return Outcome.error("Sentence translation is not configured.")

        logger.info("Translating sentence", extra={
            "language": settings.target_language, "length": len(sentence),
        })
        try:
            data = await self.translator.translate(sentence, settings.target_language)
        except ProviderError as e:
            logger.warning("Sentence translation failed", extra={"error": str(e)})
            return Outcome.error(str(e))

        if not isinstance(data, dict):
            return Outcome.error("Translation service returned invalid format.")
        if data.get("error"):
            return Outcome.error(str(data["error"]))

        self.cache.set(key, data)
        return Outcome.success(data, tts_enabled=settings.tts_enabled)


def _is_encodable(text: str) -> bool:
    # Lone surrogates survive JSON decoding but not UTF-8 encoding for URLs and keys
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
