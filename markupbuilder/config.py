"""
config - render configuration

A RenderConfig holds the escaping mode used when text and attribute values
are written, and whether components render as their expansion or in
collapsed form. Nodes and render functions take a config explicitly; when
none is given the process wide default instance is used. The default is
plain mutable state with no locking, callers sharing it between threads must
serialize access themselves.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterator, Optional, Union

log = logging.getLogger(__name__)


class EscapeMode(Enum):
    """
    EscapeMode - which characters are replaced by entities when written
    """

    UTF8 = "utf8"  # <, > and & in text; " in attribute values
    ASCII = "ascii"  # as UTF8, plus every non ascii character
    ATTR = "attr"  # only " in attribute values, text is left alone
    NONE = "none"  # nothing is escaped

    @classmethod
    def coerce(cls, mode: Union[EscapeMode, str]) -> EscapeMode:
        """
        coerce - accept a member or its name/value (case insensitive)
        """
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls[mode.upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown escape mode: {mode!r}")


@dataclass
class RenderConfig:
    """
    RenderConfig - settings consulted while building and rendering

    escape: escaping mode applied to text content and attribute values at
        the moment they are written
    expand_components: when true (default) components render as their
        builder's output, when false as their own tag/attrs/children
    """

    escape: EscapeMode = EscapeMode.UTF8
    expand_components: bool = True

    def __post_init__(self) -> None:
        self.escape = EscapeMode.coerce(self.escape)

    def copy(self) -> RenderConfig:
        return RenderConfig(self.escape, self.expand_components)


_default = RenderConfig()


def getconfig(config: Optional[RenderConfig] = None) -> RenderConfig:
    """
    getconfig - return config if given, otherwise the default configuration
    """
    if config is not None:
        return config
    return _default


def setescaping(mode: Union[EscapeMode, str]) -> None:
    """
    setescaping - set the escaping mode of the default configuration. Affects
        text and attributes written afterwards only
    """
    _default.escape = EscapeMode.coerce(mode)
    log.debug("default escaping mode set to %s", _default.escape.name)


def setexpandcomponents(flag: bool) -> None:
    """
    setexpandcomponents - choose expanded (True) or collapsed (False)
        rendering of components for the default configuration
    """
    _default.expand_components = bool(flag)
    log.debug("default component expansion set to %s", _default.expand_components)


def resetconfig() -> None:
    """
    resetconfig - restore the default configuration to its initial values
    """
    initial = RenderConfig()
    _default.escape = initial.escape
    _default.expand_components = initial.expand_components


@contextmanager
def configured(**overrides) -> Iterator[RenderConfig]:
    """
    configured - temporarily override fields of the default configuration

        with configured(escape="ascii", expand_components=False):
            ...

    The previous values are restored on exit, also when an exception is
    raised inside the block.
    """
    names = {f.name for f in fields(RenderConfig)}
    unknown = set(overrides) - names
    if unknown:
        raise TypeError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")
    saved = _default.copy()
    try:
        if "escape" in overrides:
            setescaping(overrides["escape"])
        if "expand_components" in overrides:
            setexpandcomponents(overrides["expand_components"])
        yield _default
    finally:
        _default.escape = saved.escape
        _default.expand_components = saved.expand_components
