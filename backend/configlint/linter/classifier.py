"""Line classifier — turns one physical line into a tagged classification.

Quote and comma stripping are cosmetic normalizations that let YAML-ish and
JSON-ish input share one scanner. This is not a YAML or JSON parser.
"""

import re
from typing import Literal, Union

from pydantic import BaseModel

STRUCTURAL_TOKENS = frozenset({"{", "}", "[", "]"})

# A value that only opens a nested structure is not captured
NESTED_OPENERS = frozenset({"{", "["})

QUOTE_CHARS = "\"'"

INLINE_COMMENT = re.compile(r"(?:^|\s)#")


class Blank(BaseModel):
    """Empty line or ``#`` comment."""

    kind: Literal["blank"] = "blank"


class Structural(BaseModel):
    """A bare bracket: ``{``, ``}``, ``[`` or ``]``."""

    kind: Literal["structural"] = "structural"
    token: str


class KeyValue(BaseModel):
    """A ``key: value`` line. ``has_value`` is False for nested-structure starts."""

    kind: Literal["key_value"] = "key_value"
    key: str
    value: str = ""
    has_value: bool = True


class NoColon(BaseModel):
    """Anything else; ignored by the scanner."""

    kind: Literal["no_colon"] = "no_colon"


LineClass = Union[Blank, Structural, KeyValue, NoColon]


def normalize(line: str) -> str:
    """Trim and drop one trailing comma."""
    text = line.strip()
    if text.endswith(","):
        text = text[:-1].strip()
    return text


def strip_inline_comment(value: str) -> str:
    """Drop a trailing ``# comment`` from an unquoted value.

    Only a ``#`` at the start or after whitespace opens a comment, so
    ``image: app#v2`` keeps its value. A quoted value ends at its closing quote.
    """
    if value and value[0] in QUOTE_CHARS:
        end = value.find(value[0], 1)
        return value if end == -1 else value[:end + 1]
    match = INLINE_COMMENT.search(value)
    if match is None:
        return value
    return value[:match.start()].rstrip()


def parse_key_value(text: str) -> LineClass:
    """Split ``text`` at its first colon. Returns NoColon when there is no usable key."""
    key, sep, value = text.partition(":")
    if not sep:
        return NoColon()

    key = key.strip().strip(QUOTE_CHARS)
    if not key:
        return NoColon()

    value = strip_inline_comment(value.strip()).strip(QUOTE_CHARS)
    if value in NESTED_OPENERS:
        return KeyValue(key=key, value="", has_value=False)

    return KeyValue(key=key, value=value)


def classify(line: str) -> LineClass:
    """Classify a single line of config text (no trailing newline)."""
    text = line.strip()
    if not text or text.startswith("#"):
        return Blank()

    text = normalize(text)
    if text in STRUCTURAL_TOKENS:
        return Structural(token=text)

    return parse_key_value(text)
