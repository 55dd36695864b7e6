"""Provider adapters — reduce provider payloads to the canonical Entry.

Each adapter takes one provider's parsed JSON payload and returns an Entry,
or None when the payload lacks the minimum viable fields (headword, senses).
Adapters never raise for malformed payloads.

Dispatch is by explicit provider identity (ADAPTERS), since the payload
shapes are not self-describing.
"""

import logging
import os
import re
from dataclasses import replace
from typing import Any, Callable

from domain.model.entry import Entry, Example, Pronunciation, Sense
from domain.model.provider import ProviderId

logger = logging.getLogger(__name__)

MW_AUDIO_BASE_URL = os.getenv("MW_AUDIO_BASE_URL", "https://media.merriam-webster.com/audio/prons/en")

UNKNOWN_POS = "unknown"
MW_NO_DEFINITION = "No definition found."
GEMINI_NO_DEFINITION = "No definition text found."
DEFAULT_LANGUAGE_TAG = "us"

_ITALIC_MARKUP = re.compile(r"\{it\}|\{/it\}")
_WORD_ID_MARKUP = re.compile(r"\{wi\}|\{/wi\}")
_NUMBER_TOKEN = re.compile(r"^_[0-9]")


# ── Structure traversal ──────────────────────────────────────


def _dig(data: Any, *path: Any) -> Any | None:
    """Walk nested dicts/lists along path; None when any step is missing."""
    current = data
    for step in path:
        try:
            current = current[step]
        except (KeyError, IndexError, TypeError):
            return None
    return current


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


# ── Provider A: Merriam-Webster (structured reference) ───────


def audio_bucket(token: str) -> str:
    """Select the audio subdirectory for a Merriam-Webster sound token.

    Examples:
        audio_bucket("bix123") → "bix"
        audio_bucket("_45abc") → "number"
        audio_bucket("xyz") → "x"
    """
    if token.startswith("bix"):
        return "bix"
    if token.startswith("gg"):
        return "gg"
    if _NUMBER_TOKEN.match(token):
        return "number"
    return token[:1]


def audio_url(token: str, language_tag: str = DEFAULT_LANGUAGE_TAG) -> str:
    return f"{MW_AUDIO_BASE_URL}/{language_tag}/wav/{audio_bucket(token)}/{token}.wav"


def _mw_pronunciation(record: dict[str, Any]) -> Pronunciation:
    pron = _dig(record, "hwi", "prs", 0)
    if not isinstance(pron, dict):
        return Pronunciation(language_tag=DEFAULT_LANGUAGE_TAG)

    written = _text(pron.get("mw"))
    token = _text(_dig(pron, "sound", "audio"))
    return Pronunciation(
        language_tag=DEFAULT_LANGUAGE_TAG,
        phonetic_text=f"/{written}/" if written else "",
        audio_url=audio_url(token) if token else "",
    )


def _mw_supplemental_example(record: dict[str, Any]) -> Example | None:
    text = _dig(record, "suppl", "examples", 0, "t")
    if not isinstance(text, str):
        return None
    return Example(text=_ITALIC_MARKUP.sub("", text))


def _mw_vis_example(record: dict[str, Any]) -> Example | None:
    """Find the first usage-in-context ("vis") example of the first sub-sense.

    Path: def[0].sseq[0][0][1].dt → item tagged "vis" → [1][0].t
    Any structural mismatch means no example.
    """
    details = _dig(record, "def", 0, "sseq", 0, 0, 1, "dt")
    if not isinstance(details, list):
        return None
    for item in details:
        if _dig(item, 0) != "vis":
            continue
        text = _dig(item, 1, 0, "t")
        if not isinstance(text, str):
            logger.debug("Malformed 'vis' example in Merriam-Webster entry",
                         extra={"entry_id": _dig(record, "meta", "id")})
            return None
        return Example(text=_WORD_ID_MARKUP.sub("", text))
    return None


def adapt_merriam_webster(payload: Any) -> Entry | None:
    """Adapt a Merriam-Webster collegiate payload (list of entry records).

    Only the first record is used. For unknown words the API answers with a
    list of spelling suggestions (strings), which is not representable.
    """
    record = _dig(payload, 0)
    if not isinstance(payload, list) or not isinstance(record, dict):
        return None

    identifier = _text(_dig(record, "meta", "id"))
    headword = identifier.split(":", 1)[0]
    if not headword:
        return None

    shortdefs = record.get("shortdef")
    first_shortdef = _dig(shortdefs, 0) if isinstance(shortdefs, list) else None

    example = _mw_supplemental_example(record) or _mw_vis_example(record)
    sense = Sense(
        part_of_speech=_text(record.get("fl")) or UNKNOWN_POS,
        definition_text=_text(first_shortdef) or MW_NO_DEFINITION,
        examples=(example,) if example else (),
    )
    return Entry.from_senses(headword, [sense], pronunciations=[_mw_pronunciation(record)])


# ── Provider B: Gemini (AI-generated) ────────────────────────


def _gemini_example(raw: Any) -> Example | None:
    if isinstance(raw, str):
        return Example(text=raw)
    if isinstance(raw, dict) and isinstance(raw.get("text"), str):
        translation = raw.get("translation")
        return Example(text=raw["text"], translation=translation if isinstance(translation, str) else None)
    return None


def _gemini_sense(form: Any) -> Sense | None:
    definition = _dig(form, "definitions", 0)
    if not isinstance(definition, dict):
        return None

    raw_examples = definition.get("examples")
    examples = [
        example
        for example in (_gemini_example(raw) for raw in raw_examples or [])
        if example is not None
    ] if isinstance(raw_examples, list) else []

    translation = definition.get("definitionTranslation")
    return Sense(
        part_of_speech=_text(form.get("partOfSpeech")) or UNKNOWN_POS,
        definition_text=_text(definition.get("definition")) or GEMINI_NO_DEFINITION,
        definition_translation=translation if isinstance(translation, str) and translation else None,
        examples=tuple(examples),
    )


def adapt_gemini(payload: Any) -> Entry | None:
    """Adapt an AI-generated payload: {word|phrase, forms[], translation, pronunciation}.

    Each form yields one sense built from its first definition. A form
    without any definition makes the whole payload unrepresentable.
    """
    if not isinstance(payload, dict):
        return None

    forms = payload.get("forms")
    if not isinstance(forms, list) or not forms:
        return None

    headword = _text(payload.get("word")) or _text(payload.get("phrase"))
    if not headword:
        return None

    senses = []
    for form in forms:
        sense = _gemini_sense(form)
        if sense is None:
            logger.debug("Gemini form without definitions", extra={"word": headword})
            return None
        senses.append(sense)

    translation = payload.get("translation")
    pronunciation = Pronunciation(
        language_tag=DEFAULT_LANGUAGE_TAG,
        phonetic_text=_text(payload.get("pronunciation")),
    )
    return Entry.from_senses(
        headword,
        senses,
        pronunciations=[pronunciation],
        translation=translation if isinstance(translation, str) and translation else None,
    )


# ── Provider C: Cambridge (pre-normalized passthrough) ───────


def adapt_cambridge(payload: Any) -> Entry | None:
    """Adapt a payload that already has the canonical wire shape.

    Validated for a non-empty headword, at least one sense, string-typed
    text fields, and a pos list matching the senses' pos one for one.
    """
    if not isinstance(payload, dict) or not _text(payload.get("word")):
        return None
    if not isinstance(payload.get("definition"), list) or not payload["definition"]:
        return None
    try:
        return Entry.from_dict(payload)
    except (AttributeError, TypeError, ValueError) as e:
        logger.debug("Cambridge payload is not a valid entry", extra={
            "word": payload.get("word"), "error": str(e),
        })
        return None


# ── Cross-provider audio enrichment ──────────────────────────


def is_phrase(term: str) -> bool:
    """A term with more than one whitespace-separated token is a phrase."""
    return len(term.split()) > 1


def _borrowable_pronunciation(payload: Any) -> dict[str, Any] | None:
    pronunciations = _dig(payload, "pronunciation")
    if not isinstance(pronunciations, list):
        return None
    candidates = [p for p in pronunciations if isinstance(p, dict)]
    if not candidates:
        return None
    return next((p for p in candidates if p.get("url")), candidates[0])


def enrich_pronunciation(primary: Entry, secondary_payload: Any) -> Entry:
    """Borrow audio (and missing phonetic text) from a secondary provider payload.

    Only the first pronunciation slot of the primary entry changes; none of
    the secondary definitions are adopted. Returns primary unchanged when
    the secondary payload offers nothing.
    """
    borrowed = _borrowable_pronunciation(secondary_payload)
    if borrowed is None:
        return primary

    current = primary.pronunciations[0] if primary.pronunciations else Pronunciation()
    phonetic_text = current.phonetic_text or _text(borrowed.get("pron"))
    slot = replace(current, audio_url=_text(borrowed.get("url")), phonetic_text=phonetic_text)
    return replace(primary, pronunciations=(slot,) + primary.pronunciations[1:])


# ── Dispatch ─────────────────────────────────────────────────

ADAPTERS: dict[ProviderId, Callable[[Any], Entry | None]] = {
    ProviderId.MERRIAM_WEBSTER: adapt_merriam_webster,
    ProviderId.GEMINI: adapt_gemini,
    ProviderId.CAMBRIDGE: adapt_cambridge,
}


def adapt(provider: ProviderId, payload: Any) -> Entry | None:
    """Adapt payload with the adapter registered for provider."""
    return ADAPTERS[provider](payload)
