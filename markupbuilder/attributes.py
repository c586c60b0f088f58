"""
attributes - ordered attribute sets for elements and components

Values are escaped when they are written, using the escaping mode of the
set's configuration at that moment. Keys keep the position of their first
insertion; replacing a value does not move the key.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .config import RenderConfig, getconfig
from .errors import InvalidAttributeSource, InvalidAttributeValue
from .escaping import escapeattribute

_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.:-]*$")


def normalizekey(key: Any) -> str:
    """
    normalizekey - return key as a lowercase hyphenated attribute name

    A single trailing underscore (used to dodge python keywords, eg class_)
    is dropped and remaining underscores become hyphens:
        class_ -> class, data_id -> data-id, Aria_Label -> aria-label
    Raises InvalidAttributeSource if key is not an identifier.
    """
    if not isinstance(key, str) or not _KEY_PATTERN.match(key):
        raise InvalidAttributeSource(f"Invalid attribute name: {key!r}")
    key = key.lower()
    if len(key) > 1 and key.endswith("_"):
        key = key[:-1]
    return key.replace("_", "-")


def ispairs(source: Any) -> bool:
    """
    ispairs - true if source is a non empty list/tuple of (str, value) pairs
    """
    if not isinstance(source, (list, tuple)) or not source:
        return False
    return all(
        isinstance(p, tuple) and len(p) == 2 and isinstance(p[0], str) for p in source
    )


def _pairsfrom(source: Any) -> List[Tuple[Any, Any]]:
    """
    _pairsfrom - turn a pair sequence, flat key/value list or mapping into a
        list of (key, value) pairs. Raises InvalidAttributeSource
    """
    if isinstance(source, Mapping):
        return list(source.items())
    if isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
        raise InvalidAttributeSource(
            f"Cannot create attributes from {type(source).__name__}"
        )

    items = list(source)
    pairlike = [isinstance(i, (tuple, list)) for i in items]
    if all(pairlike):
        for item in items:
            if len(item) != 2:
                raise InvalidAttributeSource(
                    f"Attribute pairs must have 2 items, got {len(item)}"
                )
        return [tuple(item) for item in items]
    if any(pairlike):
        raise InvalidAttributeSource("Cannot mix pairs and flat key/value items")

    # flat alternating key, value list
    if len(items) % 2:
        raise InvalidAttributeSource(
            f"Flat attribute list must have an even length, got {len(items)}"
        )
    return list(zip(items[0::2], items[1::2]))


class AttributeSet:
    """
    An ordered set of attribute name/value pairs
    """

    def __init__(self, source: Any = None, config: Optional[RenderConfig] = None):
        """
        source: None, another AttributeSet (copied, values are not escaped
            again), a mapping, a sequence of (name, value) pairs or a flat
            [name, value, name, value...] list
        config: configuration whose escaping mode is used for values written
            to this set. Defaults to the default configuration
        """
        self.config = getconfig(config)
        self._values: Dict[str, str] = {}
        # values as written, before escaping
        self._raw: Dict[str, str] = {}
        # called after every change, used by the owning node
        self._listener: Optional[Callable[[], None]] = None

        if source is None:
            return
        if isinstance(source, AttributeSet):
            self._values = dict(source._values)
            self._raw = dict(source._raw)
            return

        # validate everything before anything is stored
        entries = []
        for key, value in _pairsfrom(source):
            raw = self._rawvalue(key, value)
            entries.append((normalizekey(key), raw, self._escape(raw)))
        for name, raw, value in entries:
            self._values[name] = value
            self._raw[name] = raw

    def _rawvalue(self, key: Any, value: Any) -> str:
        if value is None:
            raise InvalidAttributeValue(
                f"Attribute {key!r} set to None. Use delete() to remove it"
            )
        if not isinstance(value, str):
            value = str(value)
        return value

    def _escape(self, raw: str) -> str:
        return escapeattribute(raw, self.config.escape)

    def _changed(self) -> None:
        if self._listener is not None:
            self._listener()

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        get - return the (escaped) value of key, or default if absent. This is
            the value as rendered inside the attribute's quotes
        """
        try:
            return self._values.get(normalizekey(key), default)
        except InvalidAttributeSource:
            return default

    def getraw(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        getraw - return the value of key as it was written (not escaped), or
            default if absent. Use this when a builder places an attribute
            value in text content, which escapes it again:

                p(attrs.getraw("title"))
        """
        try:
            return self._raw.get(normalizekey(key), default)
        except InvalidAttributeSource:
            return default

    def set(self, key: str, value: Any) -> None:
        """
        set - create or overwrite an attribute

        key: attribute name, normalized (see normalizekey)
        value: raw value, escaped here. None is rejected with
            InvalidAttributeValue
        """
        name = normalizekey(key)
        raw = self._rawvalue(key, value)
        self._values[name] = self._escape(raw)
        self._raw[name] = raw
        self._changed()

    def delete(self, key: str) -> None:
        """
        delete - remove an attribute if it exists
        """
        try:
            name = normalizekey(key)
        except InvalidAttributeSource:
            return
        if name in self._values:
            del self._values[name]
            del self._raw[name]
            self._changed()

    def copy(self) -> AttributeSet:
        """
        copy - return an independent copy with the same pairs and config
        """
        return AttributeSet(self, config=self.config)

    def topairs(self) -> Tuple[Tuple[str, str], ...]:
        """
        topairs - return the (name, value) pairs in order
        """
        return tuple(self._values.items())

    def update(self, other: Any) -> None:
        """
        update - set every pair of other (anything AttributeSet accepts). Pairs
            from another AttributeSet are copied without escaping again
        """
        if not isinstance(other, AttributeSet):
            other = AttributeSet(other, config=self.config)
        if not other:
            return
        self._values.update(other._values)
        self._raw.update(other._raw)
        self._changed()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeSet):
            return NotImplemented
        return self.topairs() == other.topairs()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AttributeSet({list(self.topairs())!r})"
