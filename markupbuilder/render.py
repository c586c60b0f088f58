"""
render - serialize a node tree to html text

Two forms are produced: pretty (one node per line, children indented two
spaces deeper than their parent) and minified (no whitespace added). Text
and attribute values were escaped when they were written, so rendering only
reads the tree back. Rendering does not modify the tree except for caching
component expansions.
"""
from __future__ import annotations

from typing import Iterator, List, Optional, Protocol

from .config import RenderConfig, getconfig
from .nodes import Component, Container, Node, Text

DOCTYPE = "<!DOCTYPE html>"
INDENT = "  "


class Sink(Protocol):
    def write(self, text: str) -> object:
        ...


def _resolve(node: Node, config: RenderConfig) -> Node:
    """
    _resolve - replace a component by its expansion (repeatedly, an
        expansion may itself be a component) when components are expanded
    """
    while isinstance(node, Component) and config.expand_components:
        node = node.expand()
    return node


def _opentag(node: Container) -> str:
    dest = ["<" + node.tagName]
    for k, v in node.attrs.topairs():
        dest.append(f' {k}="{v}"')
    if node.isvoid and not node._children:
        dest.append(" />")
    else:
        dest.append(">")
    return "".join(dest)


def _closetag(node: Container) -> str:
    if node.isvoid and not node._children:
        return ""
    return f"</{node.tagName}>"


def _minified(node: Node, config: RenderConfig, root: bool) -> Iterator[str]:
    node = _resolve(node, config)
    if isinstance(node, Text):
        if node.content:
            yield node.content
    elif isinstance(node, Container):
        if node.tagName:
            if root and node.tagName == "html":
                yield DOCTYPE
            yield _opentag(node)
        # fragment children stay at the root, as in _prettylines
        childroot = root and not node.tagName
        for c in node._children:
            yield from _minified(c, config, childroot)
        if node.tagName:
            yield _closetag(node)
    else:
        raise TypeError(f"Cannot render {type(node).__name__}")


def _prettylines(node: Node, config: RenderConfig, depth: int) -> Iterator[str]:
    """
    _prettylines - yield the lines (without line ends) of node rendered at
        the given indentation depth
    """
    node = _resolve(node, config)
    pad = INDENT * depth
    if isinstance(node, Text):
        if node.content:
            yield pad + node.content
    elif isinstance(node, Container):
        if not node.tagName:
            # fragment, children stay at this depth
            for c in node._children:
                yield from _prettylines(c, config, depth)
            return
        if depth == 0 and node.tagName == "html":
            yield DOCTYPE
        if not node._children:
            yield pad + _opentag(node) + _closetag(node)
            return
        yield pad + _opentag(node)
        for c in node._children:
            yield from _prettylines(c, config, depth + 1)
        yield pad + _closetag(node)
    else:
        raise TypeError(f"Cannot render {type(node).__name__}")


def iterrender(
    node: Node, pretty: bool = False, config: Optional[RenderConfig] = None
) -> Iterator[str]:
    """
    iterrender - yield the rendered html of node in chunks

    node: root of the tree to render. An html element at the root is
        preceded by the doctype
    pretty: indented, one node per line when true, minified when false
    config: configuration deciding whether components are expanded
    """
    config = getconfig(config)
    if not pretty:
        yield from _minified(node, config, True)
        return
    first = True
    for line in _prettylines(node, config, 0):
        if not first:
            yield "\n"
        first = False
        yield line


def renderlist(
    node: Node, pretty: bool = False, config: Optional[RenderConfig] = None
) -> List[str]:
    """
    renderlist - render node and recursively, all child nodes

    returns a list of strings that can be joined to create the rendered html
    """
    return list(iterrender(node, pretty=pretty, config=config))


def renderpretty(node: Node, config: Optional[RenderConfig] = None) -> str:
    """
    renderpretty - render node to indented html, one node per line
    """
    return "".join(iterrender(node, pretty=True, config=config))


def renderminified(node: Node, config: Optional[RenderConfig] = None) -> str:
    """
    renderminified - render node to html without any added whitespace
    """
    return "".join(iterrender(node, pretty=False, config=config))


def renderto(
    node: Node,
    sink: Sink,
    pretty: bool = True,
    config: Optional[RenderConfig] = None,
) -> None:
    """
    renderto - render node, writing the html to sink as it is produced

    sink: any object with a write(str) method (a text file, io.StringIO...)
    """
    for chunk in iterrender(node, pretty=pretty, config=config):
        sink.write(chunk)
