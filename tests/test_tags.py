"""Tests for the built-in tag constructors and name lookup."""

import pytest

from markupbuilder import AttributeSet, Element, InvalidAttributeSource, defcomponent
from markupbuilder import tags
from markupbuilder.tags import TAGS, attrs, div, lookup, makedocument


class TestConstructors:
    """Tests for the tag constructors."""

    def test_every_tag_has_a_constructor(self):
        for tag in TAGS:
            constructor = getattr(tags, tags.pyname(tag))
            node = constructor()
            assert isinstance(node, Element)
            assert node.tagName == tag

    def test_keyword_tag_name(self):
        assert tags.pyname("del") == "del_"
        assert tags.del_("gone").tagName == "del"

    def test_constructor_calling_convention(self):
        node = div({"id": "a"}, "x", ["y"], class_="c")
        assert node.attrs.topairs() == (("id", "a"), ("class", "c"))
        assert [c.content for c in node.children] == ["x", "y"]

    def test_constructor_metadata(self):
        assert div.__name__ == "div"
        assert "Generic container" in div.__doc__
        assert "void element" in tags.br.__doc__

    def test_void_tags(self):
        assert tags.img().isvoid
        assert not tags.span().isvoid


class TestAttrs:
    """Tests for the attrs helper."""

    def test_flat_list(self):
        result = attrs("id", "main", "class", "wide")
        assert isinstance(result, AttributeSet)
        assert result.topairs() == (("id", "main"), ("class", "wide"))

    def test_flat_list_and_keywords(self):
        result = attrs("id", "main", data_role="nav")
        assert result.topairs() == (("id", "main"), ("data-role", "nav"))

    def test_odd_list_fails(self):
        with pytest.raises(InvalidAttributeSource):
            attrs("id")

    def test_used_as_first_argument(self):
        node = div(attrs("id", "main"), "x")
        assert node.id == "main"


class TestLookup:
    """Tests for name to constructor lookup."""

    def test_builtin(self):
        assert lookup("div") is div
        assert lookup("DIV") is div
        assert lookup("del_") is tags.del_

    def test_component_preferred(self):
        card = defcomponent("card", [], lambda a, c: div(c))
        assert lookup("card") is card
        section = defcomponent("section", [], lambda a, c: div(c))
        assert lookup("section") is section

    def test_unknown(self):
        with pytest.raises(KeyError, match="blink"):
            lookup("blink")


class TestMakeDocument:
    """Tests for makedocument."""

    def test_with_title(self):
        assert str(makedocument("Home")) == (
            "<!DOCTYPE html><html><head><title>Home</title></head><body></body></html>"
        )

    def test_without_title(self):
        assert str(makedocument()) == (
            "<!DOCTYPE html><html><head></head><body></body></html>"
        )
