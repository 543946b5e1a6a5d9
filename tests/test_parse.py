"""Tests for MarkupCodec.parse()."""

import pytest

from entitas import (
    Bold,
    Code,
    CodecConfig,
    Italic,
    MarkupCodec,
    MentionLink,
    Pre,
    Strike,
    TextLink,
    parse,
)


class TestPlainText:
    """Text without markup passes through."""

    def test_plain(self) -> None:
        assert parse("hello world") == ("hello world", [])

    def test_empty(self) -> None:
        assert parse("") == ("", [])

    def test_lone_markup_characters(self) -> None:
        assert parse("2 * 3 = 6_a ~ b") == ("2 * 3 = 6_a ~ b", [])

    def test_snake_case(self) -> None:
        assert parse("snake_case_name") == ("snake_case_name", [])


class TestDelimitedEntities:
    """**, __, ~~, `, ```."""

    @pytest.mark.parametrize(
        "markup,entity",
        [
            ("**bold**", Bold(0, 4)),
            ("__bold__", Italic(0, 4)),
            ("~~bold~~", Strike(0, 4)),
            ("`bold`", Code(0, 4)),
            ("```bold```", Pre(0, 4)),
        ],
    )
    def test_single_entity(self, markup: str, entity: object) -> None:
        assert parse(markup) == ("bold", [entity])

    def test_sequential_styles(self) -> None:
        assert parse("**a** __b__") == ("a b", [Bold(0, 1), Italic(2, 1)])

    def test_offsets_follow_plain_text(self) -> None:
        text, entities = parse("x **yy** z ~~w~~")
        assert text == "x yy z w"
        assert entities == [Bold(2, 2), Strike(7, 1)]

    def test_adjacent_entities(self) -> None:
        assert parse("**a****b**") == ("ab", [Bold(0, 1), Bold(1, 1)])

    def test_other_delimiters_inside_content_are_literal(self) -> None:
        """Entities do not nest; inner markup stays in the text."""
        assert parse("**a__b**") == ("a__b", [Bold(0, 4)])

    def test_pre_keeps_newlines(self) -> None:
        assert parse("```\nx = 1\n```") == ("\nx = 1\n", [Pre(0, 7)])

    def test_entities_are_ordered(self) -> None:
        _, entities = parse("`a` b ```c``` ~~d~~")
        offsets = [e.offset for e in entities]
        assert offsets == sorted(offsets)
        assert [type(e) for e in entities] == [Code, Pre, Strike]


class TestUnclosedDelimiters:
    """Unclosed or empty delimiters degrade to text with the opener dropped."""

    def test_unclosed_bold(self) -> None:
        assert parse("**bold") == ("bold", [])

    def test_empty_bold(self) -> None:
        assert parse("****") == ("**", [])

    def test_unclosed_pre(self) -> None:
        assert parse("```code") == ("code", [])

    def test_unclosed_code(self) -> None:
        assert parse("a `b") == ("a b", [])

    def test_empty_code_spans(self) -> None:
        """Pre is only tried on three backticks; two backticks are two failed codes."""
        assert parse("``x``") == ("`x`", [])

    def test_lower_priority_rule_retried_at_moved_position(self) -> None:
        """After a failed bold, italic is tried where the opener ended."""
        assert parse("**__x__") == ("x", [Italic(0, 1)])

    def test_higher_priority_rule_not_retried(self) -> None:
        """After a failed italic, bold is not tried at the moved position."""
        assert parse("__**x**") == ("**x", [])

    def test_unclosed_at_end_adds_nothing(self) -> None:
        assert parse("a**") == ("a", [])

    def test_keep_unclosed_delimiters(self) -> None:
        codec = MarkupCodec(CodecConfig(drop_unclosed_delimiters=False))
        assert codec.parse("**bold") == ("**bold", [])
        assert codec.parse("****") == ("****", [])
        assert codec.parse("**a** **b") == ("a **b", [Bold(0, 1)])


class TestLinks:
    """[label](url)."""

    def test_link(self) -> None:
        assert parse("[click](http://x)") == ("click", [TextLink(0, 5, url="http://x")])

    def test_link_after_text(self) -> None:
        assert parse("see [a](b)") == ("see a", [TextLink(4, 1, url="b")])

    def test_shortest_label_and_target(self) -> None:
        assert parse("[a](b) [c](d)") == (
            "a c",
            [TextLink(0, 1, url="b"), TextLink(2, 1, url="d")],
        )

    def test_label_may_span_lines(self) -> None:
        assert parse("[a\nb](u)") == ("a\nb", [TextLink(0, 3, url="u")])

    def test_label_markup_is_literal(self) -> None:
        assert parse("[**a**](u)") == ("**a**", [TextLink(0, 5, url="u")])

    @pytest.mark.parametrize("markup", ["[a]", "[a](", "[](x)", "[a] (b)", "["])
    def test_not_a_link(self, markup: str) -> None:
        assert parse(markup) == (markup, [])

    def test_mention_is_text_link_by_default(self) -> None:
        assert parse("[Ann](tg://user?id=42)") == (
            "Ann",
            [TextLink(0, 3, url="tg://user?id=42")],
        )

    def test_mention_links_enabled(self) -> None:
        codec = MarkupCodec(CodecConfig(mention_links_enabled=True))
        assert codec.parse("hi [Ann](tg://user?id=42)") == (
            "hi Ann",
            [MentionLink(3, 3, user_id=42)],
        )

    def test_non_numeric_mention_stays_text_link(self) -> None:
        codec = MarkupCodec(CodecConfig(mention_links_enabled=True))
        assert codec.parse("[Ann](tg://user?id=abc)") == (
            "Ann",
            [TextLink(0, 3, url="tg://user?id=abc")],
        )


class TestUtf16Offsets:
    """Offsets and lengths count UTF-16 code units."""

    def test_emoji_before_entity(self) -> None:
        assert parse("😀 **hi**") == ("😀 hi", [Bold(3, 2)])

    def test_emoji_inside_entity(self) -> None:
        assert parse("**😀**") == ("😀", [Bold(0, 2)])

    def test_bmp_characters_count_once(self) -> None:
        assert parse("é **ü**") == ("é ü", [Bold(2, 1)])

    def test_emoji_link(self) -> None:
        assert parse("[😀](http://x/😀)") == ("😀", [TextLink(0, 2, url="http://x/😀")])

    def test_plain_emoji_survives(self) -> None:
        assert parse("a 👍🏽 b") == ("a 👍🏽 b", [])


class TestParseMany:
    """Batch parsing."""

    def test_parse_many(self) -> None:
        codec = MarkupCodec()
        assert codec.parse_many(["**a**", "b", ""]) == [
            ("a", [Bold(0, 1)]),
            ("b", []),
            ("", []),
        ]

    def test_parse_many_with_config(self) -> None:
        codec = MarkupCodec(CodecConfig(mention_links_enabled=True))
        results = codec.parse_many(["[a](tg://user?id=1)", "[b](tg://user?id=2)"])
        assert [entities for _, entities in results] == [
            [MentionLink(0, 1, user_id=1)],
            [MentionLink(0, 1, user_id=2)],
        ]
