"""Tests for Path rendering, parsing and navigation."""

from __future__ import annotations

import pytest

from jsonscope.tree.paths import ROOT_LABEL, Path


class TestRendering:
    def test_root_renders_empty(self) -> None:
        assert str(Path.root()) == ""

    def test_root_label(self) -> None:
        assert Path.root().label() == ROOT_LABEL == "root"

    def test_single_key_has_no_leading_dot(self) -> None:
        assert str(Path(("a",))) == "a"

    def test_nested_keys_and_indices(self) -> None:
        assert str(Path(("a", 2, "b"))) == "a[2].b"

    def test_index_at_root(self) -> None:
        assert str(Path((0, "x"))) == "[0].x"

    def test_consecutive_indices(self) -> None:
        assert str(Path(("m", 1, 0))) == "m[1][0]"

    def test_key_with_dot_is_quoted(self) -> None:
        assert str(Path(("a", "x.y"))) == 'a["x.y"]'

    def test_empty_key_is_quoted(self) -> None:
        assert str(Path(("",))) == '[""]'

    def test_key_with_space_is_quoted(self) -> None:
        assert str(Path(("first name",))) == '["first name"]'

    def test_unicode_key_is_plain(self) -> None:
        assert str(Path(("名前", "値"))) == "名前.値"

    def test_lone_root_key_is_quoted(self) -> None:
        assert str(Path(("root",))) == '["root"]'
        assert Path(("root",)).label() != Path.root().label()

    def test_nested_root_key_is_plain(self) -> None:
        assert str(Path(("root", "a"))) == "root.a"

    def test_numeric_key_stays_a_key(self) -> None:
        assert str(Path(("a", "0"))) == "a.0"


class TestParse:
    @pytest.mark.parametrize(
        "segments",
        [
            (),
            ("a",),
            ("a", 2, "b"),
            (0, "x"),
            ("m", 1, 0),
            ("a", "x.y"),
            ("",),
            ("first name", 'say "hi"'),
            ("root",),
            ("a", "0"),
            ("back\\slash",),
        ],
    )
    def test_parse_inverts_rendering(self, segments: tuple[str | int, ...]) -> None:
        path = Path(segments)
        assert Path.parse(str(path)) == path

    def test_parse_root_label(self) -> None:
        assert Path.parse("root") == Path.root()

    def test_numeric_key_parses_as_str(self) -> None:
        assert Path.parse("a.0").segments == ("a", "0")

    @pytest.mark.parametrize("text", [".a", "a..b", "a[", "a[x]", "a]b", "[0]b"])
    def test_malformed_paths_raise(self, text: str) -> None:
        with pytest.raises(ValueError):
            Path.parse(text)


class TestNavigation:
    def test_child_does_not_mutate_parent(self) -> None:
        parent = Path(("a",))
        child = parent.child(3)
        assert parent.segments == ("a",)
        assert child.segments == ("a", 3)

    def test_parent(self) -> None:
        assert Path(("a", 1)).parent == Path(("a",))
        assert Path.root().parent is None

    def test_depth(self) -> None:
        assert Path.root().depth == 0
        assert Path(("a", 1, "b")).depth == 3

    def test_is_root(self) -> None:
        assert Path.root().is_root
        assert not Path(("a",)).is_root

    def test_ancestors_root_first(self) -> None:
        assert Path(("a", 1, "b")).ancestors() == [
            Path.root(),
            Path(("a",)),
            Path(("a", 1)),
        ]

    def test_is_ancestor_of(self) -> None:
        assert Path.root().is_ancestor_of(Path(("a",)))
        assert Path(("a",)).is_ancestor_of(Path(("a", 0)))
        assert not Path(("a",)).is_ancestor_of(Path(("a",)))
        assert not Path(("a",)).is_ancestor_of(Path(("b", 0)))

    def test_last_label(self) -> None:
        assert Path.root().last_label() == "root"
        assert Path(("a", 4)).last_label() == "[4]"
        assert Path(("a", "b.c")).last_label() == "b.c"

    def test_hashable_and_set_friendly(self) -> None:
        paths = {Path(("a",)), Path(("a",)), Path.root()}
        assert len(paths) == 2

    def test_index_and_key_segments_are_distinct(self) -> None:
        assert Path((0,)) != Path(("0",))
