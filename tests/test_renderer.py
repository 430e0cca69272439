"""Tests for the box-drawing renderer."""

import pytest

from debugtreelib import Node, RenderConfig, SymbolSet, render, render_lines
from debugtreelib.core.renderer import column_unit, connector


def make_tree(spec):
    """Build a Node tree from nested (text, [children]) tuples."""
    root = Node()
    for item in spec:
        root.append(_make(item))
    return root


def _make(item):
    if isinstance(item, str):
        return Node.from_text(item)
    text, children = item
    node = Node.from_text(text)
    for child in children:
        node.append(_make(child))
    return node


class TestGlyphs:
    """Test connector and column construction."""

    def test_connector_default_indent(self):
        config = RenderConfig()
        assert connector(config, is_last=False) == "├╼"
        assert connector(config, is_last=True) == "└╼"

    def test_connector_wide_indent_adds_horizontal_fill(self):
        config = RenderConfig(indent_width=4)
        assert connector(config, is_last=True) == "└──╼"

    def test_column_unit(self):
        config = RenderConfig(indent_width=3)
        assert column_unit(config, continues=True) == "│  "
        assert column_unit(config, continues=False) == "   "

    def test_column_unit_zero_indent(self):
        assert column_unit(RenderConfig(indent_width=0), continues=True) == ""


class TestRender:
    """Test rendering of whole trees."""

    def test_empty_tree_renders_empty_string(self):
        assert render(Node(), RenderConfig()) == ""
        assert render_lines(Node(), RenderConfig()) == []

    def test_top_level_nodes_have_no_connector(self):
        root = make_tree(["1", "2", "3"])
        assert render(root, RenderConfig()) == "1\n2\n3"

    def test_leaves_under_branch_use_mid_then_last(self):
        leaves = [f"leaf {i}" for i in range(5)]
        root = make_tree([("parent", leaves)])

        lines = render_lines(root, RenderConfig())

        assert len(lines) == 6
        for line in lines[1:-1]:
            assert line.startswith("├╼ ")
        assert lines[-1] == "└╼ leaf 4"

    def test_nested_columns(self):
        root = make_tree([
            ("10", [
                "10.1",
                ("10.2", ["10.1.1", "10.1.2\nNext line"]),
                "10.3",
            ]),
        ])
        expected = (
            "10\n"
            "├╼ 10.1\n"
            "├╼ 10.2\n"
            "│ ├╼ 10.1.1\n"
            "│ └╼ 10.1.2\n"
            "│    Next line\n"
            "└╼ 10.3"
        )
        assert render(root, RenderConfig()) == expected

    def test_multiline_leaf_aligns_under_text(self):
        root = make_tree([("Branch", ["A\nB"])])
        assert render(root, RenderConfig()) == "Branch\n└╼ A\n   B"

    def test_multiline_leaf_with_following_sibling(self):
        root = make_tree([("Branch", ["A\nB", "C"])])
        assert render(root, RenderConfig()) == "Branch\n├╼ A\n│  B\n└╼ C"

    def test_multiline_alignment_wide_indent(self):
        root = make_tree([("Branch", ["first\nsecond"])])
        lines = render_lines(root, RenderConfig(indent_width=4))
        assert lines[1] == "└──╼ first"
        assert lines[2] == "     second"
        assert lines[1].index("first") == lines[2].index("second")

    def test_multiline_top_level_is_verbatim(self):
        root = make_tree(["one\ntwo"])
        assert render(root, RenderConfig()) == "one\ntwo"

    def test_unlabeled_nodes(self):
        root = Node()
        top = root.append(Node())
        top.append(Node())
        assert render_lines(root, RenderConfig()) == ["", "└╼"]

    def test_indent_four(self):
        root = make_tree([("1", [("1.1", ["1.1.1"])])])
        assert render(root, RenderConfig(indent_width=4)) == (
            "1\n"
            "└──╼ 1.1\n"
            "    └──╼ 1.1.1"
        )

    def test_indent_zero_flattens_columns(self):
        root = make_tree([("1", [("1.1", ["1.1.1"])])])
        assert render(root, RenderConfig(indent_width=0)) == "1\n└╼ 1.1\n└╼ 1.1.1"

    def test_rounded_preset(self):
        root = make_tree([("1", ["1.1", "1.2"])])
        assert render(root, RenderConfig.rounded()) == "1\n├╼ 1.1\n╰╼ 1.2"

    def test_custom_glyphs_rendered_literally(self):
        symbols = SymbolSet(branch_mid="+", branch_last="\\", leaf_prefix="-",
                            vertical_continuation="!", horizontal="=")
        root = make_tree([("a", [("b", ["c"]), "d"])])
        assert render(root, RenderConfig(indent_width=3, symbols=symbols)) == (
            "a\n"
            "+=- b\n"
            "!  \\=- c\n"
            "\\=- d"
        )

    def test_render_is_pure(self):
        root = make_tree([("a", ["b\nc", ("d", ["e"])])])
        config = RenderConfig()
        first = render(root, config)
        assert render(root, config) == first
        assert root.count() == 5

    @pytest.mark.parametrize("indent", [1, 2, 5])
    def test_deep_chain_prefix_width(self, indent):
        root = Node()
        node = root.append(Node.from_text("0"))
        for i in range(1, 4):
            node = node.append(Node.from_text(str(i)))

        lines = render_lines(root, RenderConfig(indent_width=indent))

        # Each level shifts right by one indent unit
        for depth, line in enumerate(lines[1:], start=1):
            assert line.index(str(depth)) == (depth - 1) * indent + len(
                connector(RenderConfig(indent_width=indent), True)) + 1
