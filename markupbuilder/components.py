"""
components - user defined tags

A component definition ties a tag name to a builder function. The
constructor returned by defcomponent (or the component decorator) creates a
new Component node on every call; all of them share the one builder.

    @component(params=("id", "size"))
    def dog(attrs, children):
        if attrs.get("size") == "big":
            return div(children, class_="big-dog")
        return div(children, class_="dog")

    page = body(dog("Rex", id="rex", size="big"))

The builder receives the node's full current AttributeSet (not only the
declared params) and the list of its children, and returns a Node (or a
string). It must not have side effects.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union

from .attributes import AttributeSet, normalizekey
from .config import RenderConfig
from .nodes import Component, Node

log = logging.getLogger(__name__)

Builder = Callable[[AttributeSet, list], Union[Node, str]]

# registered component definitions, by tag name
COMPONENTS: Dict[str, ComponentDefinition] = {}


class ComponentDefinition:
    """
    A registered component: tag name, declared parameters and builder
    """

    def __init__(self, tag: str, params: Iterable[str], builder: Builder):
        """
        tag: tag name of the component (stored lowercase)
        params: names of the attributes the builder expects to read,
            normalized as attribute names
        builder: function (attrs, children) -> Node
        """
        if not tag or not isinstance(tag, str):
            raise ValueError(f"Invalid component tag: {tag!r}")
        if not callable(builder):
            raise TypeError(f"Component builder for {tag!r} is not callable")
        self.tag = tag.lower()
        self.params: Tuple[str, ...] = tuple(normalizekey(p) for p in params)
        self.builder = builder

    def __call__(
        self, *args: Any, config: Optional[RenderConfig] = None, **attributes: Any
    ) -> Component:
        """
        create a new Component node of this definition. Same arguments as a
        built-in tag constructor
        """
        return Component(self, *args, config=config, **attributes)

    def __repr__(self) -> str:
        return f"<ComponentDefinition {self.tag}({', '.join(self.params)})>"


def defcomponent(
    tag: str, params: Iterable[str], builder: Builder
) -> ComponentDefinition:
    """
    defcomponent - register a component and return its constructor

    tag: tag name used for the component (and when rendered collapsed)
    params: attribute names the builder reads
    builder: function (attrs, children) -> Node

    Registering a tag again replaces the previous definition for lookups;
    nodes already created keep the definition they were created with.
    """
    definition = ComponentDefinition(tag, params, builder)
    if definition.tag in COMPONENTS:
        log.debug("component <%s> redefined", definition.tag)
    COMPONENTS[definition.tag] = definition
    log.debug("component <%s> registered with params %s", definition.tag, definition.params)
    return definition


def component(
    tag: Union[str, Builder, None] = None, params: Iterable[str] = ()
) -> Any:
    """
    component - decorator form of defcomponent

        @component
        def card(attrs, children): ...

        @component("dog", params=("id", "size"))
        def makedog(attrs, children): ...

    The tag defaults to the function name (underscores become hyphens).
    Returns the constructor in place of the function.
    """
    if callable(tag):
        builder = tag
        return defcomponent(builder.__name__.replace("_", "-"), params, builder)

    def decorator(builder: Builder) -> ComponentDefinition:
        name = tag if tag else builder.__name__.replace("_", "-")
        return defcomponent(name, params, builder)

    return decorator


def getcomponent(tag: str) -> Optional[ComponentDefinition]:
    """
    getcomponent - return the registered definition for tag, if any
    """
    return COMPONENTS.get(tag.lower())


def clearcomponents() -> None:
    """
    clearcomponents - forget all registered components
    """
    COMPONENTS.clear()
