"""Lexical entry domain models.

An Entry is the canonical, provider-independent record for one looked-up
term. It is built fresh per request and never mutated; projection and
enrichment return new instances via dataclasses.replace().

The wire shape (to_dict / from_dict) is the one shared with the browser
client and stored in the cache store:

    {
        "word": "run",
        "translation": None,
        "pos": ["verb"],
        "verbs": [],
        "pronunciation": [{"lang": "us", "pron": "/rən/", "url": "..."}],
        "definition": [
            {"pos": "verb", "text": "...", "translation": None,
             "example": [{"text": "...", "translation": None}]},
        ],
    }
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Example:
    """A usage example, optionally translated."""
    text: str
    translation: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "translation": self.translation}


@dataclass(frozen=True)
class Pronunciation:
    """Phonetic text and audio location for one regional variant.

    audio_url is "" when no recording is known.
    """
    language_tag: str = "us"
    phonetic_text: str = ""
    audio_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"lang": self.language_tag, "pron": self.phonetic_text, "url": self.audio_url}


@dataclass(frozen=True)
class Sense:
    """One part-of-speech/definition unit within an Entry."""
    part_of_speech: str
    definition_text: str
    definition_translation: str | None = None
    examples: tuple[Example, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "pos": self.part_of_speech,
            "text": self.definition_text,
            "translation": self.definition_translation,
            "example": [example.to_dict() for example in self.examples],
        }


@dataclass(frozen=True)
class Entry:
    """Canonical lexical entry (Value Object).

    parts_of_speech is parallel to senses; construction fails otherwise.
    """
    headword: str
    senses: tuple[Sense, ...] = ()
    parts_of_speech: tuple[str, ...] = ()
    pronunciations: tuple[Pronunciation, ...] = field(default_factory=lambda: (Pronunciation(),))
    translation: str | None = None
    inflections: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.senses) != len(self.parts_of_speech):
            raise ValueError(
                f"parts_of_speech ({len(self.parts_of_speech)}) must parallel "
                f"senses ({len(self.senses)})"
            )

    @classmethod
    def from_senses(
        cls,
        headword: str,
        senses: list[Sense] | tuple[Sense, ...],
        pronunciations: list[Pronunciation] | tuple[Pronunciation, ...] | None = None,
        translation: str | None = None,
    ) -> "Entry":
        """Build an Entry whose parts_of_speech are derived from its senses."""
        senses = tuple(senses)
        return cls(
            headword=headword,
            senses=senses,
            parts_of_speech=tuple(sense.part_of_speech for sense in senses),
            pronunciations=tuple(pronunciations) if pronunciations is not None else (Pronunciation(),),
            translation=translation,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the client/cache wire shape."""
        return {
            "word": self.headword,
            "translation": self.translation,
            "pos": list(self.parts_of_speech),
            "verbs": list(self.inflections),
            "pronunciation": [p.to_dict() for p in self.pronunciations],
            "definition": [sense.to_dict() for sense in self.senses],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entry":
        """Rebuild an Entry from its wire shape.

        Absent fields take their defaults; present fields of the wrong type
        are rejected, and an explicit pos list must equal the senses' pos.

        Raises:
            ValueError: If the data does not describe a consistent entry.
        """
        if not isinstance(data, dict):
            raise ValueError(f"entry must be an object, got {type(data).__name__}")

        senses = tuple(_sense_from_dict(d) for d in _list_field(data, "definition"))
        derived_pos = tuple(s.part_of_speech for s in senses)
        pos = data.get("pos")
        if pos is not None:
            pos = tuple(_list_field(data, "pos"))
            if not all(isinstance(p, str) for p in pos):
                raise ValueError("'pos' items must be strings")
            if len(pos) == len(derived_pos) and pos != derived_pos:
                raise ValueError(f"'pos' {list(pos)} does not match definitions {list(derived_pos)}")

        inflections = tuple(_list_field(data, "verbs"))
        if not all(isinstance(v, str) for v in inflections):
            raise ValueError("'verbs' items must be strings")

        return cls(
            headword=_str_field(data, "word", ""),
            senses=senses,
            parts_of_speech=pos if pos is not None else derived_pos,
            pronunciations=tuple(
                Pronunciation(
                    language_tag=_str_field(p, "lang") or "us",
                    phonetic_text=_str_field(p, "pron", ""),
                    audio_url=_str_field(p, "url", ""),
                )
                for p in (_object(item, "pronunciation") for item in _list_field(data, "pronunciation"))
            ),
            translation=_str_field(data, "translation"),
            inflections=inflections,
        )


def _object(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{name!r} items must be objects, got {type(value).__name__}")
    return value


def _str_field(data: dict[str, Any], key: str, default: str | None = None) -> str | None:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _list_field(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{key!r} must be a list, got {type(value).__name__}")
    return list(value)


def _example_from_dict(value: Any) -> Example:
    # Plain strings are accepted for examples without a translation
    if isinstance(value, str):
        return Example(text=value)
    value = _object(value, "example")
    return Example(text=_str_field(value, "text", ""), translation=_str_field(value, "translation"))


def _sense_from_dict(value: Any) -> Sense:
    value = _object(value, "definition")
    return Sense(
        part_of_speech=_str_field(value, "pos") or "unknown",
        definition_text=_str_field(value, "text", ""),
        definition_translation=_str_field(value, "translation"),
        examples=tuple(_example_from_dict(ex) for ex in _list_field(value, "example")),
    )
