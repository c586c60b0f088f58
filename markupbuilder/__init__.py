"""
markupbuilder

Build html as a tree of nodes, change it after the fact and render it
pretty printed or minified. User defined components render as the output of
their builder, recomputed only after the component changes.

    from markupbuilder import component, renderpretty
    from markupbuilder.tags import div, p

    @component(params=("title",))
    def card(attrs, children):
        return div(p(attrs.getraw("title")), children, class_="card")

    print(renderpretty(card("body text", title="Hello")))
"""
from __future__ import annotations

from .attributes import AttributeSet, normalizekey
from .components import (
    ComponentDefinition,
    clearcomponents,
    component,
    defcomponent,
    getcomponent,
)
from .config import (
    EscapeMode,
    RenderConfig,
    configured,
    getconfig,
    resetconfig,
    setescaping,
    setexpandcomponents,
)
from .errors import (
    BuilderFailure,
    InvalidAttributeSource,
    InvalidAttributeValue,
    InvalidChild,
    MarkupError,
)
from .escaping import escapeattribute, escapechar, escapetext
from .nodes import VOID_ELEMENTS, Component, Container, Element, Node, Text, flatten
from .render import (
    DOCTYPE,
    iterrender,
    renderlist,
    renderminified,
    renderpretty,
    renderto,
)
from .tags import attrs, fragment, lookup, makedocument

__version__ = "0.2.0"
