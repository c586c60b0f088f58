"""
tags - constructors for the built-in html tags

Every tag of TAGS gets a constructor in this module with the same calling
convention:

    div(*children, **attributes) -> Element
    div(attributes, *children, **attributes) -> Element

where a first positional AttributeSet, mapping or sequence of (name, value)
pairs is used as the attributes. Python keywords get a trailing underscore
(del_). lookup() resolves a tag name (built-in or registered component) to
its constructor.
"""
from __future__ import annotations

import keyword
from typing import Any, Callable, Dict, Optional

from .attributes import AttributeSet
from .components import getcomponent
from .config import RenderConfig
from .nodes import VOID_ELEMENTS, Element

# see https://developer.mozilla.org/en-US/docs/Web/HTML/Element
TAGS: Dict[str, str] = {
    # main root
    "html": "The root element of a document.",
    # document metadata
    "base": "Specifies the base URL for all relative URLs in the document.",
    "head": "Contains metadata about the document.",
    "link": "Specifies links to external resources (eg CSS, favicon).",
    "meta": "Specifies misc. additional metadata for the document.",
    "style": "Contains inline style information for the document.",
    "title": "Specifies the document's title.",
    # sectioning root
    "body": "Contains the content of the html document.",
    # content sectioning
    "address": "Contains contact information for a person/organisation.",
    "article": "Represents a self-contained composition in a document.",
    "aside": "Represents indirectly related content.",
    "footer": "Represents a footer for the nearest ancestor section.",
    "header": "Represents introductory content.",
    "h1": "Represents a level 1 section heading.",
    "h2": "Represents a level 2 section heading.",
    "h3": "Represents a level 3 section heading.",
    "h4": "Represents a level 4 section heading.",
    "h5": "Represents a level 5 section heading.",
    "h6": "Represents a level 6 section heading.",
    "hgroup": "Represents a heading grouped with secondary content.",
    "main": "Represents the dominant content of the body.",
    "nav": "Represents a section providing navigation links.",
    "section": "Represents a standalone section of a document.",
    "search": "Represents a section containing search/filter controls.",
    # text content
    "blockquote": "Indicates the enclosed text is an extended quotation.",
    "dd": "Provides the value for the preceding <dt> (definition term).",
    "div": "Generic container for flow content.",
    "dl": "Represents a list of <dt> <dd> definition pairs.",
    "dt": "Specifies a definition term in a definition list <dl>.",
    "figcaption": "Represents a caption for the contents of a parent <figure>.",
    "figure": "Represents a self-contained figure.",
    "hr": "Represents a break between paragraph level content.",
    "li": "Represents an item in a list (<ol> or <ul>).",
    "menu": "Represents an unordered list of interactive items.",
    "ol": "Represents an ordered list of items.",
    "p": "Represents a paragraph.",
    "pre": "Represents preformatted text.",
    "ul": "Represents an unordered list of items.",
    # inline text semantics
    "a": "Represents an anchor element, a hyperlink.",
    "abbr": "Represents an abbreviation.",
    "b": "Used to draw attention to content (previously, boldface).",
    "bdi": "Isolates contents from surrounds for the bidirectional algorithm.",
    "bdo": "Overrides the bidirectionality of contained text.",
    "br": "A line break.",
    "cite": "Marks up the title of a cited work.",
    "code": "Represents a fragment of computer code.",
    "data": "Represents content that has a machine readable value.",
    "dfn": "Indicates the contents is a term to be defined.",
    "em": "Marks text to be emphasised.",
    "i": "Marks text set off from normal text. Previously italics.",
    "kbd": "Presents textual user input from a keyboard.",
    "mark": "Represents text marked or highlighted for reference.",
    "q": "Represents a short, inline quote.",
    "rp": "Provides fallback parentheses for the <ruby> element.",
    "rt": "Specifies the ruby text component of a ruby annotation.",
    "ruby": "Presents small annotations rendered near base text.",
    "s": "Represents text that is no longer relevant.",
    "samp": "Represents sample or quoted output.",
    "small": "Represents side-comments and small print.",
    "span": "Generic inline container for phrasing content.",
    "strong": "Indicates contents have strong importance.",
    "sub": "Represents subscript content.",
    "sup": "Represents superscript content.",
    "time": "Represents a point in time.",
    "u": "Represents unarticulated content. Previously underline.",
    "var": "Represents the name of a variable.",
    "wbr": "Represents a word break opportunity.",
    # image and multimedia
    "area": "Represents an area inside an image map.",
    "audio": "Represents embedded sound content.",
    "img": "Represents an embedded image.",
    "map": "Represents an image map. Used with <area>.",
    "track": "A timed text track for <audio> or <video>.",
    "video": "Represents embedded video.",
    # embedded content
    "embed": "Represents embedded content.",
    "iframe": "Represents a nested browsing context.",
    "object": "Represents an external resource.",
    "param": "Defines parameters for an <object>.",
    "picture": "Represents a list of alternate sources for an <img>.",
    "portal": "Represents an embedded html page. Experimental.",
    "source": "Specifies a media resource for <picture>, <audio> or <video>.",
    # svg and mathml
    "svg": "Represents an svg (Scalable Vector Graphics) container.",
    "math": "Represents a MathML container.",
    # scripting
    "canvas": "Represents a canvas for scripted or WebGL graphics.",
    "noscript": "Content used when scripting is unsupported or turned off.",
    "script": "Embeds executable code or data.",
    # demarcating edits
    "del": "Represents a range of text that has been deleted.",
    "ins": "Represents a section that has been inserted into a document.",
    # table content
    "caption": "Represents a caption or title of a table.",
    "col": "Represents one or more columns of a <colgroup>.",
    "colgroup": "Represents a group of columns within a <table>.",
    "table": "Represents tabular data.",
    "tbody": "Encapsulates the body rows (<tr>) of a <table>.",
    "td": "Table (<table>) cell data element. Child of <tr>.",
    "tfoot": "Encapsulates the foot rows (<tr>) of a <table>.",
    "th": "Table (<table>) cell header element. Child of <tr>.",
    "thead": "Encapsulates the head rows (<tr>) of a <table>.",
    "tr": "Table (<table>) row of cells. Contains <td> or <th> cells.",
    # forms
    "button": "Represents an interactive element that can be activated.",
    "datalist": "A set of <option> elements for other controls.",
    "fieldset": "Groups several controls and labels within a web form.",
    "form": "A document section of controls for submitting information.",
    "input": "Represents an interactive control within a web <form>.",
    "label": "Represents a caption for an item in a user interface.",
    "legend": "Represents a caption for its parent <fieldset>.",
    "meter": "Represents a scalar value within a specified range.",
    "optgroup": "Creates a grouping of options within a <select>.",
    "option": "Represents an option within a <select>, <optgroup> or <datalist>.",
    "output": "A container element into which results can be injected.",
    "progress": "Represents an indicator showing completion of a task.",
    "select": "Represents a control that provides a menu of options.",
    "textarea": "Represents a multi-line plain-text editing control.",
    # interactive elements
    "details": 'A widget showing additional information when "open".',
    "dialog": "Represents an interactive component: dialog box, alert etc.",
    "summary": "Represents a summary or caption for a <details> element.",
    # web components
    "slot": "Represents a placeholder within a web component.",
    "template": "Holds html fragments that are not rendered.",
}

TagConstructor = Callable[..., Element]


def pyname(tag: str) -> str:
    """
    pyname - name of the constructor for tag (python keywords get a
        trailing underscore)
    """
    return tag + "_" if keyword.iskeyword(tag) else tag


def _maketag(tag: str, description: str) -> TagConstructor:
    def construct(
        *args: Any, config: Optional[RenderConfig] = None, **attributes: Any
    ) -> Element:
        return Element(tag, *args, config=config, **attributes)

    construct.__name__ = construct.__qualname__ = pyname(tag)
    kind = "void element" if tag in VOID_ELEMENTS else "element"
    construct.__doc__ = f"""
    {pyname(tag)} - create a {tag} {kind}.
        {description}
    """
    return construct


CONSTRUCTORS: Dict[str, TagConstructor] = {
    tag: _maketag(tag, description) for tag, description in TAGS.items()
}
globals().update({pyname(tag): c for tag, c in CONSTRUCTORS.items()})


def fragment(*children: Any, config: Optional[RenderConfig] = None) -> Element:
    """
    fragment - group children without emitting a tag of their own. Useful
        as the result of a component builder producing several nodes
    """
    return Element("", *children, config=config)


def attrs(*flat: Any, config: Optional[RenderConfig] = None, **named: Any) -> AttributeSet:
    """
    attrs - create an AttributeSet from a flat [name, value, name, value...]
        argument list and/or keyword arguments (applied after)

        div(attrs("id", "main", class_="wide"), "content")
    """
    result = AttributeSet(list(flat), config=config)
    if named:
        result.update(named)
    return result


def lookup(name: str) -> Callable[..., Any]:
    """
    lookup - return the constructor for a tag name: a registered component
        first, then a built-in tag. Raises KeyError for unknown names
    """
    tag = name.lower()
    if tag.endswith("_") and keyword.iskeyword(tag[:-1]):
        tag = tag[:-1]
    definition = getcomponent(tag)
    if definition is not None:
        return definition
    if tag in CONSTRUCTORS:
        return CONSTRUCTORS[tag]
    raise KeyError(f"Unknown tag: {name!r}")


def makedocument(title: Optional[str] = None, config: Optional[RenderConfig] = None) -> Element:
    """
    makedocument - create a basic html document: html(head(title), body)
    """
    head = Element("head", config=config)
    if title:
        head.appendChild(Element("title", title, config=config))
    return Element("html", head, Element("body", config=config), config=config)


# names shadowing python builtins are left out of star imports
__all__ = [
    pyname(tag) for tag in TAGS if pyname(tag) not in ("input", "map", "object")
] + ["TAGS", "CONSTRUCTORS", "fragment", "attrs", "lookup", "makedocument", "pyname"]
