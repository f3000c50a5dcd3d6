"""Tests for the capability catalog — tag descriptors and messages."""

from __future__ import annotations

from bbmark.domain.catalog import DEFAULT_MESSAGES, MessageCatalog, TagDescriptor, usable_tags
from bbmark.domain.engine import MarkupEngine


class TestMessageCatalog:
    def test_default_english(self) -> None:
        assert MessageCatalog().get("BBCodeParser.BOLD") == "Bold Text"

    def test_override(self) -> None:
        messages = MessageCatalog(overrides={"BBCodeParser.BOLD": "Fett"})
        assert messages.get("BBCodeParser.BOLD") == "Fett"
        assert messages.get("BBCodeParser.ITALIC") == "Italic Text"

    def test_unknown_key_falls_back_to_key(self) -> None:
        assert MessageCatalog().get("BBCodeParser.NOPE") == "BBCodeParser.NOPE"

    def test_defaults_read_only(self) -> None:
        assert "BBCodeParser.LINK" in DEFAULT_MESSAGES


class TestUsableTags:
    def test_order_and_titles(self) -> None:
        titles = [tag.title for tag in usable_tags()]
        assert titles == [
            "Bold Text",
            "Italic Text",
            "Underlined Text",
            "Struck-out Text",
            "Colored text",
            "Code Block",
            "Email link",
            "Email link",
            "Unordered list",
            "Image",
            "Youtube",
            "Website link",
            "Website link",
        ]

    def test_first_entry(self) -> None:
        assert usable_tags()[0] == TagDescriptor("Bold Text", "", "[b]Bold[/b]")

    def test_description_present_where_defined(self) -> None:
        by_example = {tag.example: tag for tag in usable_tags()}
        assert by_example["[code]Code block[/code]"].description == "Unformatted code block"
        assert by_example["[i]Italics[/i]"].description == ""

    def test_examples_localized(self) -> None:
        messages = MessageCatalog(
            overrides={"BBCodeParser.BOLD": "Fett", "BBCodeParser.BOLDEXAMPLE": "Fettdruck"}
        )
        assert usable_tags(messages)[0] == TagDescriptor("Fett", "", "[b]Fettdruck[/b]")

    def test_every_example_renders(self, engine: MarkupEngine) -> None:
        for tag in usable_tags():
            rendered = engine.render(tag.example)
            assert rendered != tag.example, tag.title
            assert "[/" not in rendered, tag.title

    def test_list_example_renders_items(self, engine: MarkupEngine) -> None:
        example = next(tag.example for tag in usable_tags() if tag.title == "Unordered list")
        assert engine.render(example) == (
            "<ul>\n<li>unordered item 1</li>\n<li>unordered item 2</li>\n</ul>"
        )
