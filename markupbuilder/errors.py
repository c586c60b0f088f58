"""
errors - exceptions raised while building or rendering a node tree

Every error is raised to the immediate caller of the failing operation and
the target node or attribute set is left unmodified.
"""
from __future__ import annotations


class MarkupError(Exception):
    """
    MarkupError - base class for all markupbuilder errors
    """


class InvalidAttributeSource(MarkupError, ValueError):
    """
    InvalidAttributeSource - attribute input could not be turned into an
        AttributeSet (odd flat list, non identifier key, unknown shape)
    """


class InvalidAttributeValue(MarkupError, ValueError):
    """
    InvalidAttributeValue - an attribute was set to None. Use delete instead
    """


class InvalidChild(MarkupError, TypeError):
    """
    InvalidChild - a flattened child was neither a string nor a Node
    """


class BuilderFailure(MarkupError, RuntimeError):
    """
    BuilderFailure - a component builder raised or returned something that is
        not a node. The original exception is available as __cause__
    """

    def __init__(self, tag: str, message: str):
        super().__init__(f"<{tag}>: {message}")
        self.tag = tag
