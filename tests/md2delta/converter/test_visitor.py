"""Tests for markup tree to delta conversion."""

import pytest

from md2delta.converter import MarkdownToDelta, convert, markdown_to_delta
from md2delta.delta import Attribute, Embed, header
from md2delta.exceptions import ConversionError
from md2delta.markdown import Element, Text

BULLET = {"list": "bullet"}
ORDERED = {"list": "ordered"}
QUOTE = {"blockquote": True}
CODE_BLOCK = {"code-block": True}


def ops(markdown: str, **kwargs) -> list[dict]:
    """Convert markdown and return the delta in wire format."""
    return markdown_to_delta(markdown, **kwargs).to_json()


def tree_ops(*nodes, **kwargs) -> list[dict]:
    return convert(list(nodes), **kwargs).to_json()


def p(*children) -> Element:
    return Element(tag="p", children=list(children))


def t(content: str) -> Text:
    return Text(content=content)


# === 1. BASIC DOCUMENTS ===


class TestBasicDocuments:
    def test_single_paragraph(self):
        assert ops("hello world") == [{"insert": "hello world\n"}]

    def test_bold_then_plain_text(self):
        assert ops("**bold** text") == [
            {"insert": "bold", "attributes": {"bold": True}},
            {"insert": " text\n"},
        ]

    def test_heading_level_one(self):
        assert ops("# Title") == [
            {"insert": "Title"},
            {"insert": "\n", "attributes": {"header": 1}},
        ]

    def test_heading_levels_two_and_three(self):
        assert ops("## Two\n\n### Three") == [
            {"insert": "Two"},
            {"insert": "\n", "attributes": {"header": 2}},
            {"insert": "Three"},
            {"insert": "\n", "attributes": {"header": 3}},
        ]

    def test_unmapped_heading_level_is_plain_line(self):
        assert ops("#### Four") == [{"insert": "Four\n"}]

    def test_two_paragraphs(self):
        assert ops("first\n\nsecond") == [{"insert": "first\nsecond\n"}]

    def test_empty_input_gives_empty_delta(self):
        assert ops("") == []
        assert tree_ops() == []

    def test_horizontal_rule(self):
        assert ops("---") == [{"insert": {"hr": True}}, {"insert": "\n"}]

    def test_horizontal_rule_between_paragraphs(self):
        assert ops("above\n\n---\n\nbelow") == [
            {"insert": "above\n"},
            {"insert": {"hr": True}},
            {"insert": "\nbelow\n"},
        ]


# === 2. INLINE FORMATTING ===


class TestInlineFormatting:
    def test_italic(self):
        assert ops("*soft*") == [{"insert": "soft", "attributes": {"italic": True}}, {"insert": "\n"}]

    def test_strikethrough(self):
        assert ops("~~gone~~") == [{"insert": "gone", "attributes": {"strike": True}}, {"insert": "\n"}]

    def test_nested_emphasis_merges_attributes(self):
        assert ops("***both***") == [
            {"insert": "both", "attributes": {"bold": True, "italic": True}},
            {"insert": "\n"},
        ]

    def test_inline_code(self):
        assert ops("use `x` here") == [
            {"insert": "use "},
            {"insert": "x", "attributes": {"code": True}},
            {"insert": " here\n"},
        ]

    def test_link(self):
        assert ops("[site](https://example.com)") == [
            {"insert": "site", "attributes": {"link": "https://example.com"}},
            {"insert": "\n"},
        ]

    def test_bold_link(self):
        assert ops("**[site](https://example.com)**") == [
            {"insert": "site", "attributes": {"bold": True, "link": "https://example.com"}},
            {"insert": "\n"},
        ]

    def test_inner_attribute_wins_on_same_key(self):
        outer = Attribute(key="color", value="red")
        inner = Attribute(key="color", value="blue")
        result = tree_ops(
            p(Element(tag="red", children=[Element(tag="blue", children=[t("x")])])),
            custom_inline_attributes={"red": lambda _: outer, "blue": lambda _: inner},
        )
        assert result == [{"insert": "x", "attributes": {"color": "blue"}}, {"insert": "\n"}]

    def test_image_embed(self):
        assert ops("![alt](pic.png)") == [{"insert": {"image": "pic.png"}}, {"insert": "\n"}]

    def test_image_without_src_defaults_to_empty(self):
        assert tree_ops(p(Element.empty("img"))) == [{"insert": {"image": ""}}, {"insert": "\n"}]

    def test_embed_does_not_carry_inline_attributes(self):
        result = ops("**![alt](pic.png)**")
        assert {"insert": {"image": "pic.png"}} in result


# === 3. SOFT AND HARD LINE BREAKS ===


class TestLineBreaks:
    def test_soft_line_break_collapsed_by_default(self):
        assert ops("line one\nline two") == [{"insert": "line one line two\n"}]

    def test_soft_line_break_preserved_when_disabled(self):
        result = ops("line one\nline two", collapse_soft_line_breaks=False)
        assert result == [{"insert": "line one\nline two\n"}]
        assert result[0]["insert"].splitlines() == ["line one", "line two"]

    def test_preserved_lines_carry_block_attributes(self):
        heading = Element(tag="h1", children=[t("a\nb")])
        assert tree_ops(heading, collapse_soft_line_breaks=False) == [
            {"insert": "a"},
            {"insert": "\n", "attributes": {"header": 1}},
            {"insert": "b"},
            {"insert": "\n", "attributes": {"header": 1}},
        ]

    def test_preserved_break_before_inline_element(self):
        assert ops("line one\n*line two*", collapse_soft_line_breaks=False) == [
            {"insert": "line one\n"},
            {"insert": "line two", "attributes": {"italic": True}},
            {"insert": "\n"},
        ]

    def test_preserved_break_after_inline_element(self):
        assert ops("*line one*\nline two", collapse_soft_line_breaks=False) == [
            {"insert": "line one", "attributes": {"italic": True}},
            {"insert": "\nline two\n"},
        ]

    def test_collapsed_break_before_inline_element(self):
        assert ops("line one\n*line two*") == [
            {"insert": "line one "},
            {"insert": "line two", "attributes": {"italic": True}},
            {"insert": "\n"},
        ]

    def test_trailing_break_of_text_leaf_survives(self):
        heading = Element(tag="h1", children=[t("a\n"), Element(tag="strong", children=[t("b")])])
        assert tree_ops(heading, collapse_soft_line_breaks=False) == [
            {"insert": "a"},
            {"insert": "\n", "attributes": {"header": 1}},
            {"insert": "b", "attributes": {"bold": True}},
            {"insert": "\n", "attributes": {"header": 1}},
        ]

    def test_hard_break(self):
        assert ops("one  \ntwo") == [{"insert": "one\ntwo\n"}]

    def test_leading_spaces_after_hard_break_are_ignored(self):
        assert tree_ops(p(t("one"), Element.empty("br"), t("   two"))) == [{"insert": "one\ntwo\n"}]

    def test_leading_spaces_kept_after_inline_element(self):
        assert tree_ops(p(Element(tag="em", children=[t("a")]), t("  b"))) == [
            {"insert": "a", "attributes": {"italic": True}},
            {"insert": "  b\n"},
        ]


# === 4. LISTS ===


class TestLists:
    def test_bullet_list(self):
        assert ops("- a\n- b") == [
            {"insert": "a"},
            {"insert": "\n", "attributes": BULLET},
            {"insert": "b"},
            {"insert": "\n", "attributes": BULLET},
        ]

    def test_ordered_list(self):
        assert ops("1. one\n2. two") == [
            {"insert": "one"},
            {"insert": "\n", "attributes": ORDERED},
            {"insert": "two"},
            {"insert": "\n", "attributes": ORDERED},
        ]

    def test_loose_list_has_one_terminator_per_item(self):
        assert ops("- a\n\n- b") == [
            {"insert": "a"},
            {"insert": "\n", "attributes": BULLET},
            {"insert": "b"},
            {"insert": "\n", "attributes": BULLET},
        ]

    def test_nested_list_is_indented(self):
        assert ops("- a\n  - b") == [
            {"insert": "a"},
            {"insert": "\n", "attributes": BULLET},
            {"insert": "b"},
            {"insert": "\n", "attributes": {"indent": 1, "list": "bullet"}},
        ]

    def test_indent_level_follows_nesting_depth(self):
        assert ops("- a\n  - b\n    - c") == [
            {"insert": "a"},
            {"insert": "\n", "attributes": BULLET},
            {"insert": "b"},
            {"insert": "\n", "attributes": {"indent": 1, "list": "bullet"}},
            {"insert": "c"},
            {"insert": "\n", "attributes": {"indent": 2, "list": "bullet"}},
        ]

    def test_ordered_inside_bullet_keeps_outer_list_type(self):
        result = ops("- a\n  1. b")
        assert result[-1] == {"insert": "\n", "attributes": {"indent": 1, "list": "bullet"}}

    def test_paragraph_after_list(self):
        assert ops("- a\n\nafter") == [
            {"insert": "a"},
            {"insert": "\n", "attributes": BULLET},
            {"insert": "after\n"},
        ]


# === 5. BLOCKQUOTES AND CODE BLOCKS ===


class TestBlockquotesAndCode:
    def test_blockquote(self):
        assert ops("> quoted") == [{"insert": "quoted"}, {"insert": "\n", "attributes": QUOTE}]

    def test_adjacent_blockquotes_are_separated(self):
        result = ops("> a\n\n> b")
        assert result == [
            {"insert": "a"},
            {"insert": "\n", "attributes": QUOTE},
            {"insert": "\nb"},
            {"insert": "\n", "attributes": QUOTE},
        ]

    def test_quoted_lines_stay_lines(self):
        assert ops("> a\n> b") == [
            {"insert": "a"},
            {"insert": "\n", "attributes": QUOTE},
            {"insert": "b"},
            {"insert": "\n", "attributes": QUOTE},
        ]

    def test_quoted_line_followed_by_formatting(self):
        assert ops("> a\n> *b*") == [
            {"insert": "a"},
            {"insert": "\n", "attributes": QUOTE},
            {"insert": "b", "attributes": {"italic": True}},
            {"insert": "\n", "attributes": QUOTE},
        ]

    def test_formatted_quoted_line_followed_by_text(self):
        assert ops("> **a**\n> b") == [
            {"insert": "a", "attributes": {"bold": True}},
            {"insert": "\n", "attributes": QUOTE},
            {"insert": "b"},
            {"insert": "\n", "attributes": QUOTE},
        ]

    def test_heading_inside_blockquote_keeps_outer_attribute(self):
        assert ops("> # Quote") == [{"insert": "Quote"}, {"insert": "\n", "attributes": QUOTE}]

    def test_fenced_code_block(self):
        assert ops("```python\nx = 1\ny = 2\n```") == [
            {"insert": "x = 1"},
            {"insert": "\n", "attributes": CODE_BLOCK},
            {"insert": "y = 2"},
            {"insert": "\n", "attributes": CODE_BLOCK},
        ]

    def test_code_inside_code_block_has_no_inline_code(self):
        result = ops("```\nx\n```")
        assert all("code" not in (op.get("attributes") or {}) for op in result)

    def test_adjacent_code_blocks_are_separated(self):
        assert ops("```\na\n```\n```\nb\n```") == [
            {"insert": "a"},
            {"insert": "\n", "attributes": CODE_BLOCK},
            {"insert": "\nb"},
            {"insert": "\n", "attributes": CODE_BLOCK},
        ]


# === 6. EXCLUSIVITY ===


class TestExclusivity:
    def test_outermost_exclusive_attribute_wins(self):
        tree = Element(
            tag="ul",
            children=[Element(tag="li", children=[Element(tag="blockquote", children=[p(t("q"))])])],
        )
        assert tree_ops(tree) == [{"insert": "q"}, {"insert": "\n", "attributes": BULLET}]

    def test_attributes_without_group_are_kept(self):
        align = Attribute(key="align", value="center", scope="block")
        tree = Element(tag="center", children=[Element(tag="h1", children=[t("T")])])
        result = tree_ops(tree, custom_block_attributes={"center": lambda _: align})
        assert result == [{"insert": "T"}, {"insert": "\n", "attributes": {"align": "center", "header": 1}}]


# === 7. CUSTOM MAPPINGS ===


class TestCustomMappings:
    def test_custom_block_attribute(self):
        result = ops("#### Four", custom_block_attributes={"h4": lambda _: header(4)})
        assert result == [{"insert": "Four"}, {"insert": "\n", "attributes": {"header": 4}}]

    def test_custom_inline_attribute(self):
        underline = Attribute(key="underline")
        result = tree_ops(p(Element(tag="u", children=[t("x")])), custom_inline_attributes={"u": lambda _: underline})
        assert result == [{"insert": "x", "attributes": {"underline": True}}, {"insert": "\n"}]

    def test_custom_mapping_shadows_default(self):
        underline = Attribute(key="underline")
        result = ops("*x*", custom_inline_attributes={"em": lambda _: underline})
        assert result == [{"insert": "x", "attributes": {"underline": True}}, {"insert": "\n"}]

    def test_custom_embed(self):
        def video(attrs):
            return Embed(type="video", data=attrs["src"])

        result = tree_ops(Element.empty("video", src="clip.mp4"), custom_embeds={"video": video})
        assert result == [{"insert": {"video": "clip.mp4"}}, {"insert": "\n"}]

    def test_failing_converter_aborts_conversion(self):
        def broken(attrs):
            raise ConversionError("broken mapping")

        with pytest.raises(ConversionError, match="broken mapping"):
            tree_ops(p(Element(tag="u", children=[t("x")])), custom_inline_attributes={"u": broken})


# === 8. TERMINATION AND REUSE ===


class TestTermination:
    def test_delta_ends_with_single_terminator(self):
        for markdown in ["a", "# a", "- a", "> a", "---", "```\na\n```", "![x](y.png)"]:
            delta = markdown_to_delta(markdown)
            last = delta.last
            assert last is not None and isinstance(last.insert, str)
            assert last.insert.endswith("\n")
            assert not last.insert.endswith("\n\n")

    def test_top_level_text_is_terminated(self):
        assert tree_ops(t("loose")) == [{"insert": "loose\n"}]

    def test_top_level_inline_element_is_terminated(self):
        assert tree_ops(Element(tag="strong", children=[t("x")])) == [
            {"insert": "x", "attributes": {"bold": True}},
            {"insert": "\n"},
        ]

    def test_converter_reuse_is_stateless(self):
        converter = MarkdownToDelta()
        first = converter.convert_markdown("- a\n  - b\n\n> q")
        second = converter.convert_markdown("- a\n  - b\n\n> q")
        assert first == second
        assert converter.convert_markdown("plain").to_json() == [{"insert": "plain\n"}]


# === 9. TABLES ===


class TestTables:
    def test_rows_become_lines(self):
        assert ops("| a | b |\n|---|---|\n| 1 | 2 |") == [{"insert": "a\tb\n1\t2\n"}]

    def test_formatting_inside_cells(self):
        assert ops("| **a** | b |\n|---|---|") == [
            {"insert": "a", "attributes": {"bold": True}},
            {"insert": "\tb\n"},
        ]

    def test_paragraph_after_table(self):
        assert ops("| a |\n|---|\n| 1 |\n\nafter") == [{"insert": "a\n1\nafter\n"}]
