"""Cache key derivation.

Keys are pure functions of the lookup inputs and every setting that shapes
the cached output, so distinct settings never share an artifact and
identical settings always hit the same one. Both key families keep the
"qdp_" layout used by the browser extension's own storage.
"""

import re
from enum import Enum
from urllib.parse import quote

from domain.model.preferences import NO_LANGUAGE, DisplayPreferences
from domain.model.provider import ProviderId

KEY_PREFIX = "qdp"
KEY_DELIMITER = "_"

# Characters left unescaped by encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"
_SUB_DELIMS = re.compile(r"[!'()*]")


class CacheKeyKind(str, Enum):
    LOOKUP = "lookup"
    SENTENCE = "sentence"


def encode_uri_component(text: str) -> str:
    """Percent-encode text, additionally escaping ! ' ( ) *.

    Matches encodeURIComponent() followed by the sub-delimiter escape, so
    keys agree across platforms (lowercase hex for the extra escapes).
    """
    encoded = quote(text, safe=_URI_COMPONENT_SAFE)
    return _SUB_DELIMS.sub(lambda m: "%" + format(ord(m.group(0)), "x"), encoded)


def lookup_key(
    term: str,
    provider: ProviderId,
    prefs: DisplayPreferences,
    language: str | None = None,
) -> str:
    """Key for a projected lexical entry.

    The term is lowercased but not escaped; a term containing the
    delimiter still yields a deterministic key.
    """
    fields = (
        KEY_PREFIX,
        provider.value,
        term.lower(),
        prefs.scope.value,
        str(prefs.example_count),
        language or NO_LANGUAGE,
    )
    return KEY_DELIMITER.join(fields)


def sentence_key(sentence: str, language: str) -> str:
    """Key for a sentence translation."""
    return KEY_DELIMITER.join((KEY_PREFIX, "sentence", encode_uri_component(sentence), language))


def derive_key(
    kind: CacheKeyKind,
    term: str,
    provider: ProviderId | None = None,
    prefs: DisplayPreferences | None = None,
    language: str | None = None,
) -> str:
    """Derive a cache key of the given kind.

    Raises:
        ValueError: If a lookup key is requested without provider and prefs.
    """
    if kind is CacheKeyKind.SENTENCE:
        return sentence_key(term, language or NO_LANGUAGE)
    if provider is None or prefs is None:
        raise ValueError("lookup keys require a provider and display preferences")
    return lookup_key(term, provider, prefs, language)
