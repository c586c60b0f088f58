"""
escaping - replace markup significant characters with entities

Escaping is applied once, when a text node is created or an attribute value
is set. Rendering never escapes again, so input must be raw (unescaped)
text.
"""
from __future__ import annotations

from .config import EscapeMode

TEXT_ENTITIES = {"<": "&lt;", ">": "&gt;", "&": "&amp;"}
ATTRIBUTE_ENTITIES = {'"': "&quot;"}

_TEXT_TABLE = str.maketrans(TEXT_ENTITIES)
_ATTRIBUTE_TABLE = str.maketrans(ATTRIBUTE_ENTITIES)


def _charref(ch: str) -> str:
    return f"&#{ord(ch)};"


def escapechar(ch: str, mode: EscapeMode, attribute: bool = False) -> str:
    """
    escapechar - return ch, or its entity if mode escapes it

    ch: a single character
    mode: escaping mode
    attribute: true when ch is part of an attribute value, false for text
        content
    """
    if mode is EscapeMode.NONE:
        return ch
    if attribute:
        if ch in ATTRIBUTE_ENTITIES:
            return ATTRIBUTE_ENTITIES[ch]
    elif mode is not EscapeMode.ATTR and ch in TEXT_ENTITIES:
        return TEXT_ENTITIES[ch]
    if mode is EscapeMode.ASCII and ord(ch) > 127:
        return _charref(ch)
    return ch


def _asciionly(text: str) -> str:
    if text.isascii():
        return text
    return "".join(_charref(c) if ord(c) > 127 else c for c in text)


def escapetext(text: str, mode: EscapeMode) -> str:
    """
    escapetext - escape text content

    UTF8 and ASCII replace <, > and &; ASCII also replaces non ascii
    characters with numeric character references. ATTR and NONE return the
    text untouched.
    """
    if mode is EscapeMode.UTF8:
        return text.translate(_TEXT_TABLE)
    if mode is EscapeMode.ASCII:
        return _asciionly(text.translate(_TEXT_TABLE))
    return text


def escapeattribute(value: str, mode: EscapeMode) -> str:
    """
    escapeattribute - escape an attribute value

    Values are always rendered double quoted so only " is replaced (and non
    ascii characters in ASCII mode). NONE returns the value untouched.
    """
    if mode is EscapeMode.NONE:
        return value
    value = value.translate(_ATTRIBUTE_TABLE)
    if mode is EscapeMode.ASCII:
        return _asciionly(value)
    return value
