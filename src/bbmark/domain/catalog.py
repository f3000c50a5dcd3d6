"""Capability catalog — the user-facing list of supported tags.

Feeds a help page: one descriptor per tag family with a localized title,
an optional description, and a literal markup example.  The engine never
reads this module.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# English defaults, keyed by translation key.
DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "BBCodeParser.BOLD": "Bold Text",
        "BBCodeParser.BOLDEXAMPLE": "Bold",
        "BBCodeParser.ITALIC": "Italic Text",
        "BBCodeParser.ITALICEXAMPLE": "Italics",
        "BBCodeParser.UNDERLINE": "Underlined Text",
        "BBCodeParser.UNDERLINEEXAMPLE": "Underlined",
        "BBCodeParser.STRUCK": "Struck-out Text",
        "BBCodeParser.STRUCKEXAMPLE": "Struck-out",
        "BBCodeParser.COLORED": "Colored text",
        "BBCodeParser.COLOREDEXAMPLE": "blue text",
        "BBCodeParser.CODE": "Code Block",
        "BBCodeParser.CODEDESCRIPTION": "Unformatted code block",
        "BBCodeParser.CODEEXAMPLE": "Code block",
        "BBCodeParser.EMAILLINK": "Email link",
        "BBCodeParser.EMAILLINKDESCRIPTION": "Create link to an email address",
        "BBCodeParser.UNORDERED": "Unordered list",
        "BBCodeParser.UNORDEREDDESCRIPTION": "Unordered list",
        "BBCodeParser.UNORDEREDEXAMPLE1": "unordered item 1",
        "BBCodeParser.UNORDEREDEXAMPLE2": "unordered item 2",
        "BBCodeParser.IMAGE": "Image",
        "BBCodeParser.IMAGEDESCRIPTION": "Show an image in your post",
        "BBCodeParser.YOUTUBE": "Youtube",
        "BBCodeParser.YOUTUBEDESCRIPTION": "Show Youtube video in your post",
        "BBCodeParser.LINK": "Website link",
        "BBCodeParser.LINKDESCRIPTION": "Link to another website or URL",
    }
)


@dataclass(frozen=True)
class MessageCatalog:
    """Translation lookup with English fallbacks.

    *overrides* replaces individual strings (e.g. from a locale file or
    config); unknown keys fall back to the key itself.
    """

    overrides: Mapping[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str:
        if key in self.overrides:
            return self.overrides[key]
        return DEFAULT_MESSAGES.get(key, key)


@dataclass(frozen=True)
class TagDescriptor:
    """One help-page entry."""

    title: str
    description: str
    example: str


def usable_tags(messages: MessageCatalog | None = None) -> list[TagDescriptor]:
    """Build the ordered list of tag descriptors for a help page."""
    t = (messages or MessageCatalog()).get
    return [
        TagDescriptor(t("BBCodeParser.BOLD"), "", f"[b]{t('BBCodeParser.BOLDEXAMPLE')}[/b]"),
        TagDescriptor(t("BBCodeParser.ITALIC"), "", f"[i]{t('BBCodeParser.ITALICEXAMPLE')}[/i]"),
        TagDescriptor(
            t("BBCodeParser.UNDERLINE"), "", f"[u]{t('BBCodeParser.UNDERLINEEXAMPLE')}[/u]"
        ),
        TagDescriptor(t("BBCodeParser.STRUCK"), "", f"[s]{t('BBCodeParser.STRUCKEXAMPLE')}[/s]"),
        TagDescriptor(
            t("BBCodeParser.COLORED"),
            "",
            f"[color=blue]{t('BBCodeParser.COLOREDEXAMPLE')}[/color]",
        ),
        TagDescriptor(
            t("BBCodeParser.CODE"),
            t("BBCodeParser.CODEDESCRIPTION"),
            f"[code]{t('BBCodeParser.CODEEXAMPLE')}[/code]",
        ),
        TagDescriptor(
            t("BBCodeParser.EMAILLINK"),
            t("BBCodeParser.EMAILLINKDESCRIPTION"),
            "[email]you@yoursite.com[/email]",
        ),
        TagDescriptor(
            t("BBCodeParser.EMAILLINK"),
            t("BBCodeParser.EMAILLINKDESCRIPTION"),
            "[email=you@yoursite.com]Email[/email]",
        ),
        # One item per line: a list item runs to the end of its line.
        TagDescriptor(
            t("BBCodeParser.UNORDERED"),
            t("BBCodeParser.UNORDEREDDESCRIPTION"),
            f"[list]\n[*]{t('BBCodeParser.UNORDEREDEXAMPLE1')}\n"
            f"[*]{t('BBCodeParser.UNORDEREDEXAMPLE2')}\n[/list]",
        ),
        TagDescriptor(
            t("BBCodeParser.IMAGE"),
            t("BBCodeParser.IMAGEDESCRIPTION"),
            "[img]http://www.website.com/image.jpg[/img]",
        ),
        TagDescriptor(
            t("BBCodeParser.YOUTUBE"),
            t("BBCodeParser.YOUTUBEDESCRIPTION"),
            "[youtube]youtube_video_id[/youtube]",
        ),
        TagDescriptor(
            t("BBCodeParser.LINK"),
            t("BBCodeParser.LINKDESCRIPTION"),
            "[url]http://www.website.com/[/url]",
        ),
        TagDescriptor(
            t("BBCodeParser.LINK"),
            t("BBCodeParser.LINKDESCRIPTION"),
            "[url=http://www.website.com/]Website[/url]",
        ),
    ]
