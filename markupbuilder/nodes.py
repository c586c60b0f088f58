"""
nodes - the node tree

Three kinds of node make up a tree:
    Text - escaped text content (a leaf)
    Element - a built-in tag with attributes and children
    Component - a user defined tag whose rendered form is produced by a
        builder function from the component's current attributes and
        children. The builder's result (the expansion) is cached until the
        component is mutated.

Children are always stored flattened: nested lists/tuples/generators are
collapsed into one ordered list and None/empty string placeholders are
dropped. Child nodes may be shared between several parents; a parent never
modifies its children.

Does not enforce correct html structure.
Does not prevent self referential structures (a node that contains itself or
a builder that returns its own component will recurse forever when
rendered).
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .attributes import AttributeSet, ispairs
from .config import RenderConfig, getconfig
from .errors import BuilderFailure, InvalidChild
from .escaping import escapetext

if TYPE_CHECKING:
    from .components import ComponentDefinition

log = logging.getLogger(__name__)

# in html5 these elements can not have a closing tags (or empty tag)
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def flatten(items: Any, config: Optional[RenderConfig] = None) -> List[Node]:
    """
    flatten - collapse arbitrarily nested children into a flat list of nodes

    items: a string, Node, None or an iterable (of iterables...) of those.
        Strings become Text nodes, escaped with config's escaping mode.
        None and empty strings are dropped.

    Raises InvalidChild for anything else. Nothing is returned in that case,
    so callers can flatten first and assign after.
    """
    config = getconfig(config)
    dest: List[Node] = []
    _flatteninto(dest, items, config)
    return dest


def _flatteninto(dest: List[Node], item: Any, config: RenderConfig) -> None:
    if item is None:
        return
    if isinstance(item, str):
        if item:
            dest.append(Text(item, config=config))
        return
    if isinstance(item, Text):
        if item.content:
            dest.append(item)
        return
    if isinstance(item, Node):
        dest.append(item)
        return
    if isinstance(item, (bytes, Mapping, AttributeSet)) or not isinstance(
        item, Iterable
    ):
        raise InvalidChild(
            f"Children must be strings or Nodes, got {type(item).__name__}: {item!r}"
        )
    for child in item:
        _flatteninto(dest, child, config)


def isattributes(arg: Any) -> bool:
    """
    isattributes - true if arg, as the first positional argument of a node
        constructor, is taken as attributes rather than a child
    """
    return isinstance(arg, (AttributeSet, Mapping)) or ispairs(arg)


class Node:
    """
    Node - base of all tree nodes
    """

    def render(self, pretty: bool = False, config: Optional[RenderConfig] = None) -> str:
        """
        render - render this node (and its subtree) to a string
        """
        from .render import renderminified, renderpretty

        if pretty:
            return renderpretty(self, config=config)
        return renderminified(self, config=config)

    def __str__(self) -> str:
        return self.render()

    def getElementById(self, id: str) -> Optional[Container]:
        return None

    def getElementsByTagName(self, tagName: str) -> List[Container]:
        return []

    def getElementByTagName(self, tagName: str) -> Optional[Container]:
        return None


class Text(Node):
    """
    A text node. The content is escaped once, when the node is created
    """

    def __init__(self, text: str, config: Optional[RenderConfig] = None):
        """
        text: raw text. Must not already be escaped, it would be escaped twice
        config: configuration providing the escaping mode
        """
        if not isinstance(text, str):
            raise InvalidChild(f"Text content must be a string, got {type(text).__name__}")
        self.content = escapetext(text, getconfig(config).escape)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Text):
            return NotImplemented
        return self.content == other.content

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Text({self.content!r})"


class Container(Node):
    """
    Container - common part of Element and Component: a tag, an attribute
    set and a flattened list of children
    """

    def __init__(
        self,
        tagName: str,
        *args: Any,
        config: Optional[RenderConfig] = None,
        **attributes: Any,
    ):
        """
        tagName: type of this tag. If tagName is empty, opening/closing tags
            are not emitted (a fragment)
        args: children. If the first one is an AttributeSet, a mapping or a
            sequence of (name, value) pairs it is used as the attributes
        config: configuration used to escape text and attribute values
            written to this node, now and by later mutation
        attributes: extra attributes, applied after the positional ones.
            None values are skipped. Use class_ for class
        """
        self.config = getconfig(config)
        self.tagName = tagName.lower()
        self.isvoid = self.tagName in VOID_ELEMENTS

        attrs = AttributeSet(config=self.config)
        if args and isattributes(args[0]):
            attrs.update(args[0])
            args = args[1:]
        named = {k: v for k, v in attributes.items() if v is not None}
        if named:
            attrs.update(named)

        self._children: List[Node] = flatten(args, self.config)
        self._attrs = attrs
        attrs._listener = self._invalidate

    def _invalidate(self) -> None:
        """
        _invalidate - called after any change to attributes or children
        """

    @property
    def tag(self) -> str:
        return self.tagName

    @property
    def attrs(self) -> AttributeSet:
        """
        attrs - the live attribute set. Changes made through it count as
            changes to this node
        """
        return self._attrs

    @attrs.setter
    def attrs(self, attributes: Any) -> None:
        self.setAttributes(attributes)

    @property
    def children(self) -> Tuple[Node, ...]:
        return tuple(self._children)

    @children.setter
    def children(self, children: Any) -> None:
        self.setChildren(children)

    def setAttributes(self, attributes: Any) -> None:
        """
        setAttributes - replace all attributes of this node

        attributes: anything AttributeSet accepts. An AttributeSet is copied,
            so the caller's set stays independent of this node
        """
        new = AttributeSet(attributes, config=self.config)
        self._attrs._listener = None
        new._listener = self._invalidate
        self._attrs = new
        self._invalidate()

    def setChildren(self, *children: Any) -> None:
        """
        setChildren - replace all children of this node. Children are
            flattened as in the constructor
        """
        new = flatten(children, self.config)
        self._children = new
        self._invalidate()

    def setAttribute(self, name: str, value: Any) -> None:
        """
        setAttribute - set (create or overwrite) an attribute of this node
        name: name of attribute
        value: value of attribute (raw, escaped here). None is rejected
        """
        self._attrs.set(name, value)

    def removeAttribute(self, name: str) -> None:
        """
        removeAttribute - remove an attribute from this node if it exists
        name: name of attribute to delete
        """
        self._attrs.delete(name)

    def getAttribute(self, name: str) -> Optional[str]:
        """
        getAttribute - return the value of an attribute if it exists
        """
        return self._attrs.get(name)

    @property
    def id(self) -> Optional[str]:
        """
        id - return the id of this element or None if no id
        """
        return self.getAttribute("id")

    @id.setter
    def id(self, id: str) -> None:
        self.setAttribute("id", id)

    def appendChild(self, child: Any) -> Any:
        """
        appendChild - add child (flattened, so a string or list also works)
            after the existing children

        returns child (for storing children that are created directly in the
            arguments)
        """
        new = flatten(child, self.config)
        self._children.extend(new)
        self._invalidate()
        return child

    def removeChild(self, child: Node) -> Node:
        """
        removeChild - remove the supplied child node from this node's
        list of children.
        child: node to remove (matched by identity), must be a child of this
            node or ValueError will be thrown
        """
        for idx, c in enumerate(self._children):
            if c is child:
                self._children.pop(idx)
                self._invalidate()
                return child

        raise ValueError("child does not exist in this parent node")

    @property
    def innerHTML(self) -> str:
        """
        innerHTML - return the children as minified html
        """
        from .render import renderminified

        return "".join(renderminified(c, config=self.config) for c in self._children)

    def getElementById(self, id: str) -> Optional[Container]:
        """
        getElementById - return the first node from this (sub)tree (ie this
            node or its descendants) with the supplied id. Depth first

        Components are searched in their collapsed form (their own children),
        not their expansion.
        """
        if self.id == id:
            return self

        for c in self._children:
            e = c.getElementById(id)
            if e is not None:
                return e
        return None

    def getElementsByTagName(self, tagName: str) -> List[Container]:
        """
        getElementsByTagName - return a list of nodes from this (sub)tree
            with the supplied tagName. Exhaustive search, depth first
        """
        tagName = tagName.lower()
        result: List[Container] = []

        if self.tagName == tagName:
            result.append(self)

        for c in self._children:
            result.extend(c.getElementsByTagName(tagName))

        return result

    def getElementByTagName(self, tagName: str) -> Optional[Container]:
        """
        getElementByTagName - return the first node from this (sub)tree with
            the supplied tagName, depth first
        """
        tagName = tagName.lower()
        if self.tagName == tagName:
            return self

        for c in self._children:
            e = c.getElementByTagName(tagName)
            if e is not None:
                return e

        return None

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other) or not isinstance(other, Container):
            return NotImplemented
        return (
            self.tagName == other.tagName
            and self._attrs == other._attrs
            and self._children == other._children
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        attrs = "".join(f' {k}="{v}"' for k, v in self._attrs.topairs())
        return f"<{type(self).__name__} {self.tagName or '#fragment'}{attrs} ({len(self._children)} children)>"


class Element(Container):
    """
    An HTML element. Has a tag, optionally attributes, optionally children
    """


class Component(Container):
    """
    A node of a user defined component

    Renders as the node returned by the component's builder (its expansion)
    when components are expanded, or as a plain element with its own tag,
    attributes and children when they are collapsed. The expansion is
    computed on first use and cached until the attributes or children of
    this node change.
    """

    def __init__(
        self,
        definition: ComponentDefinition,
        *args: Any,
        config: Optional[RenderConfig] = None,
        **attributes: Any,
    ):
        self.definition = definition
        self._expansion: Optional[Node] = None
        super().__init__(definition.tag, *args, config=config, **attributes)

    @property
    def builder(self):
        return self.definition.builder

    @property
    def isexpanded(self) -> bool:
        """
        isexpanded - true if the expansion is cached
        """
        return self._expansion is not None

    def _invalidate(self) -> None:
        if self._expansion is not None:
            log.debug("<%s> changed, expansion discarded", self.tagName)
            self._expansion = None

    def arguments(self) -> Dict[str, Optional[str]]:
        """
        arguments - return the current value (as written, not escaped) or
            None of each parameter declared by the component definition
        """
        return {p: self._attrs.getraw(p) for p in self.definition.params}

    def expand(self) -> Node:
        """
        expand - return the expansion of this component, running the builder
            if it is not cached

        The builder receives copies of the current attributes and children.
        A string result becomes a Text node. A builder that raises, or
        returns anything other than a Node or string, raises BuilderFailure.
        """
        if self._expansion is not None:
            return self._expansion

        log.debug("expanding <%s>", self.tagName)
        try:
            result = self.definition.builder(self._attrs.copy(), list(self._children))
        except BuilderFailure:
            raise
        except Exception as e:
            raise BuilderFailure(
                self.tagName, f"builder raised {type(e).__name__}: {e}"
            ) from e

        if isinstance(result, str):
            result = Text(result, config=self.config)
        elif not isinstance(result, Node):
            raise BuilderFailure(
                self.tagName,
                f"builder returned {type(result).__name__}, expected a Node",
            )
        self._expansion = result
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        if self.definition is not other.definition:
            return False
        return super().__eq__(other)
