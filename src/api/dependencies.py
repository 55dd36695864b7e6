from fastapi import Depends

from adapter.external.dictionary_backend import BackendTranslationClient, CambridgeClient, GeminiClient
from adapter.external.merriam_webster import MerriamWebsterClient
from adapter.redis.cache import RedisCacheAdapter
from adapter.redis.connection import get_redis_connection
from adapter.redis.settings import RedisSettingsAdapter
from domain.model.provider import ProviderId
from port.cache import CachePort
from port.dictionary import DictionaryPort
from port.settings import SettingsPort
from port.translation import TranslationPort
from services.definition_service import DefinitionService


def get_cache() -> CachePort:
    return RedisCacheAdapter(get_redis_connection())


def get_settings_store() -> SettingsPort:
    return RedisSettingsAdapter(get_redis_connection())


def get_dictionary_ports() -> dict[ProviderId, DictionaryPort]:
    return {
        ProviderId.CAMBRIDGE: CambridgeClient(),
        ProviderId.MERRIAM_WEBSTER: MerriamWebsterClient(),
        ProviderId.GEMINI: GeminiClient(),
    }


def get_translation_port() -> TranslationPort:
    return BackendTranslationClient()


def get_definition_service(
    settings: SettingsPort = Depends(get_settings_store),
    cache: CachePort = Depends(get_cache),
    providers: dict[ProviderId, DictionaryPort] = Depends(get_dictionary_ports),
    translator: TranslationPort = Depends(get_translation_port),
) -> DefinitionService:
    return DefinitionService(settings=settings, cache=cache, providers=providers, translator=translator)
