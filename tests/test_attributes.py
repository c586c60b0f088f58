"""Tests for AttributeSet."""

import pytest

from markupbuilder import (
    AttributeSet,
    EscapeMode,
    InvalidAttributeSource,
    InvalidAttributeValue,
    RenderConfig,
    normalizekey,
)


class TestCreate:
    """Tests for creating attribute sets."""

    def test_empty(self):
        attrs = AttributeSet()
        assert attrs.topairs() == ()
        assert len(attrs) == 0
        assert not attrs

    def test_from_pairs(self):
        attrs = AttributeSet([("id", "a"), ("class", "b")])
        assert attrs.topairs() == (("id", "a"), ("class", "b"))

    def test_from_flat_list(self):
        attrs = AttributeSet(["id", "a", "class", "b"])
        assert attrs.topairs() == (("id", "a"), ("class", "b"))

    def test_from_mapping(self):
        attrs = AttributeSet({"id": "a", "data_x": 1})
        assert attrs.topairs() == (("id", "a"), ("data-x", "1"))

    def test_duplicate_keys_last_write_wins(self):
        attrs = AttributeSet([("id", "a"), ("class", "b"), ("id", "c")])
        assert attrs.topairs() == (("id", "c"), ("class", "b"))

    def test_copy_from_attribute_set(self):
        original = AttributeSet([("title", 'a "b"')])
        copied = AttributeSet(original)
        assert copied == original
        # already escaped values are not escaped again
        assert copied.get("title") == "a &quot;b&quot;"

    def test_odd_flat_list_fails(self):
        with pytest.raises(InvalidAttributeSource, match="even length"):
            AttributeSet(["id", "a", "class"])

    @pytest.mark.parametrize("key", ["1abc", "has space", "", 'q"uote', 5])
    def test_non_identifier_key_fails(self, key):
        with pytest.raises(InvalidAttributeSource):
            AttributeSet([(key, "x")] if isinstance(key, str) else [key, "x"])

    @pytest.mark.parametrize("source", ["id", b"id", 42])
    def test_unknown_shape_fails(self, source):
        with pytest.raises(InvalidAttributeSource):
            AttributeSet(source)

    def test_mixed_pairs_and_flat_fails(self):
        with pytest.raises(InvalidAttributeSource, match="mix"):
            AttributeSet([("id", "a"), "class", "b"])

    def test_pair_of_wrong_length_fails(self):
        with pytest.raises(InvalidAttributeSource):
            AttributeSet([("id", "a", "b")])

    def test_none_value_fails(self):
        with pytest.raises(InvalidAttributeValue):
            AttributeSet({"id": None})


class TestNormalizeKey:
    """Tests for attribute name normalization."""

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("id", "id"),
            ("class_", "class"),
            ("for_", "for"),
            ("data_id", "data-id"),
            ("Aria_Label", "aria-label"),
            ("hx-get", "hx-get"),
            ("xml:lang", "xml:lang"),
        ],
    )
    def test_normalize(self, key, expected):
        assert normalizekey(key) == expected


class TestAccess:
    """Tests for get/set/delete."""

    def test_get_missing_returns_none(self):
        attrs = AttributeSet()
        assert attrs.get("id") is None
        assert attrs.get("id", "fallback") == "fallback"

    def test_get_invalid_key_returns_default(self):
        assert AttributeSet().get("not valid") is None

    def test_get_uses_normalized_key(self):
        attrs = AttributeSet()
        attrs.set("data_id", "1")
        assert attrs.get("data-id") == "1"
        assert attrs.get("data_id") == "1"
        assert "data_id" in attrs
        assert "data-id" in attrs

    def test_new_keys_append(self):
        attrs = AttributeSet()
        for key in ("c", "a", "b"):
            attrs.set(key, key.upper())
        assert list(attrs) == ["c", "a", "b"]

    def test_replace_keeps_position(self):
        attrs = AttributeSet([("a", "1"), ("b", "2"), ("c", "3")])
        attrs.set("a", "changed")
        assert attrs.topairs() == (("a", "changed"), ("b", "2"), ("c", "3"))

    def test_set_escapes_value(self):
        attrs = AttributeSet()
        attrs.set("title", 'He said "hi" <b>')
        assert attrs.get("title") == "He said &quot;hi&quot; <b>"

    def test_set_converts_non_strings(self):
        attrs = AttributeSet()
        attrs.set("width", 10)
        assert attrs.get("width") == "10"

    def test_set_none_fails_and_leaves_set_unchanged(self):
        attrs = AttributeSet([("id", "a")])
        with pytest.raises(InvalidAttributeValue, match="delete"):
            attrs.set("id", None)
        assert attrs.topairs() == (("id", "a"),)

    def test_set_invalid_key_fails(self):
        attrs = AttributeSet()
        with pytest.raises(InvalidAttributeSource):
            attrs.set("no spaces", "x")
        assert len(attrs) == 0

    def test_delete(self):
        attrs = AttributeSet([("id", "a"), ("class", "b")])
        attrs.delete("id")
        assert attrs.topairs() == (("class", "b"),)

    def test_delete_missing_is_noop(self):
        attrs = AttributeSet([("id", "a")])
        attrs.delete("class")
        attrs.delete("not valid")
        assert attrs.topairs() == (("id", "a"),)

    def test_update(self):
        attrs = AttributeSet([("id", "a")])
        attrs.update({"id": "b", "class_": "c"})
        assert attrs.topairs() == (("id", "b"), ("class", "c"))


class TestRawValues:
    """Tests for reading values as they were written."""

    def test_getraw_returns_unescaped_value(self):
        attrs = AttributeSet([("title", 'say "hi"')])
        assert attrs.get("title") == "say &quot;hi&quot;"
        assert attrs.getraw("title") == 'say "hi"'

    def test_getraw_missing(self):
        attrs = AttributeSet()
        assert attrs.getraw("title") is None
        assert attrs.getraw("title", "x") == "x"
        assert attrs.getraw("not valid") is None

    def test_getraw_follows_set_delete_and_copy(self):
        attrs = AttributeSet(config=RenderConfig(escape=EscapeMode.ASCII))
        attrs.set("data_note", "café")
        copied = attrs.copy()
        attrs.delete("data-note")
        assert attrs.getraw("data-note") is None
        assert copied.getraw("data_note") == "café"
        assert copied.get("data_note") == "caf&#233;"

    def test_getraw_after_update(self):
        attrs = AttributeSet()
        attrs.update(AttributeSet({"title": '"a"'}))
        attrs.update({"alt": 3})
        assert attrs.getraw("title") == '"a"'
        assert attrs.getraw("alt") == "3"


class TestCopy:
    """Tests for independent copies."""

    def test_copy_is_independent(self):
        original = AttributeSet([("id", "a")])
        copied = original.copy()
        copied.set("id", "b")
        copied.set("class", "c")
        original.delete("id")
        assert original.topairs() == ()
        assert copied.topairs() == (("id", "b"), ("class", "c"))

    def test_topairs_is_a_snapshot(self):
        attrs = AttributeSet([("id", "a")])
        pairs = attrs.topairs()
        attrs.set("class", "b")
        assert pairs == (("id", "a"),)


class TestEscapingMode:
    """Tests for the escaping mode used by a set."""

    def test_mode_of_config(self):
        attrs = AttributeSet(config=RenderConfig(escape=EscapeMode.ASCII))
        attrs.set("title", '"é"')
        assert attrs.get("title") == "&quot;&#233;&quot;"

    def test_none_mode(self):
        attrs = AttributeSet(config=RenderConfig(escape=EscapeMode.NONE))
        attrs.set("title", '"é"')
        assert attrs.get("title") == '"é"'

    def test_changing_mode_does_not_touch_existing_values(self):
        config = RenderConfig()
        attrs = AttributeSet([("a", "é")], config=config)
        config.escape = EscapeMode.ASCII
        attrs.set("b", "é")
        assert attrs.topairs() == (("a", "é"), ("b", "&#233;"))
