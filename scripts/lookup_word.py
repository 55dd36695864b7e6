"""Manual lookup script against the real providers.

Runs the full pipeline (adapter → projection) for a few words without the
cache or settings store, printing the projected entries as JSON.
Not collected by pytest (manual run only).

Usage:
    PYTHONPATH=src python scripts/lookup_word.py run "pick up" --source gemini --scope all --examples 2
"""

import argparse
import asyncio
import json
import os

from dotenv import load_dotenv

load_dotenv()

from adapter.external.dictionary_backend import CambridgeClient, GeminiClient
from adapter.external.merriam_webster import MerriamWebsterClient
from adapter.fake.cache import FakeCacheAdapter
from adapter.fake.settings import FakeSettingsAdapter
from domain.model.provider import ProviderId
from services.definition_service import DefinitionService


async def main(words: list[str], source: str, scope: str, examples: int, language: str) -> None:
    settings = FakeSettingsAdapter({
        "preferredSource": source,
        "mwApiKey": os.getenv("MW_API_KEY"),
        "targetLanguage": language,
        "definitionScope": scope,
        "exampleCount": examples,
    })
    service = DefinitionService(
        settings=settings,
        cache=FakeCacheAdapter(),
        providers={
            ProviderId.CAMBRIDGE: CambridgeClient(),
            ProviderId.GEMINI: GeminiClient(),
            ProviderId.MERRIAM_WEBSTER: MerriamWebsterClient(),
        },
    )
    for word in words:
        outcome = await service.get_definition(word)
        print(json.dumps(outcome.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Look up words through the normalization pipeline")
    parser.add_argument("words", nargs="+")
    parser.add_argument("--source", default="cambridge", choices=[p.value for p in ProviderId])
    parser.add_argument("--scope", default="relevant", choices=["relevant", "all"])
    parser.add_argument("--examples", type=int, default=1)
    parser.add_argument("--language", default="none")
    args = parser.parse_args()
    asyncio.run(main(args.words, args.source, args.scope, args.examples, args.language))
