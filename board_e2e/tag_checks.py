"""Visual behavior checks keyed by card tag label.

Each check receives the rendered card, the tag text and the `Expectations`
sink for the current call, and asserts one visual or structural property of
the tag. Labels without a registered check fall back to `DEFAULT_CHECK`,
which only asserts the tag is visible.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Awaitable, Callable, Dict, Mapping, Optional

from playwright.async_api import Locator

from board_e2e.assertions import Expectations

if TYPE_CHECKING:
    from board_e2e.browser import Browser, TextMatcher

DEFAULT_FONT_WEIGHT = 400
MIN_PRIORITY_WEIGHT = 600
MIN_FEATURE_PADDING_PX = 8.0

# Board red: any rgb(239, …) or the #ef4444 token.
RED_TAG_COLOR = re.compile(r"rgba?\(239,\s?\d{1,3},\s?\d{1,3}|#?ef4444")
TRANSPARENT = re.compile(r"rgba\(0,\s?0,\s?0,\s?0\)|transparent")
_LEADING_NUMBER = re.compile(r"^\s*(-?\d+(?:\.\d+)?)")


def parse_font_weight(value: Optional[str]) -> int:
    """Numeric font weight; keywords such as "bold" count as 400."""
    try:
        weight = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_FONT_WEIGHT
    return weight or DEFAULT_FONT_WEIGHT


def parse_px(value: Optional[str]) -> float:
    match = _LEADING_NUMBER.match(value or "")
    return float(match.group(1)) if match else 0.0


def is_board_red(color: str) -> bool:
    return bool(RED_TAG_COLOR.search(color.lower()))


def is_transparent(color: str) -> bool:
    return bool(TRANSPARENT.search(color.lower()))


@dataclass
class RenderedCard:
    """Handle on a card container rendered in the browser."""

    browser: "Browser"
    container: Locator
    title: str = ""

    def tag(self, text: "TextMatcher") -> Locator:
        return self.browser.locate_tag(text, within=self.container)

    def text(self, text: "TextMatcher") -> Locator:
        return self.browser.locate_text(text, within=self.container)

    async def style_of(self, text: str, *properties: str) -> Dict[str, str]:
        return await self.browser.computed_style(self.tag(text), *properties)

    async def has_visible_tag(self, text: "TextMatcher") -> bool:
        return await self.browser.is_visible(self.tag(text))

    async def has_visible_text(self, text: "TextMatcher") -> bool:
        """Anywhere in the card, title included."""
        return await self.browser.is_visible(self.text(text))

    async def count_text(self, text: str) -> int:
        return await self.browser.count_text(text, within=self.container)


TagCheck = Callable[[RenderedCard, str, Expectations], Awaitable[None]]


def _subject(card: RenderedCard, tag_text: str) -> str:
    return f'tag "{tag_text}" on card "{card.title}"'


async def check_high_priority(card: RenderedCard, tag_text: str, expect: Expectations) -> None:
    style = await card.style_of(tag_text, "font-weight")
    weight = parse_font_weight(style.get("font-weight"))
    expect.that(
        weight >= MIN_PRIORITY_WEIGHT,
        _subject(card, tag_text),
        "font weight too light",
        expected=f">= {MIN_PRIORITY_WEIGHT}",
        actual=weight,
    )


async def check_bug(card: RenderedCard, tag_text: str, expect: Expectations) -> None:
    style = await card.style_of(tag_text, "color")
    color = style.get("color", "")
    expect.that(is_board_red(color), _subject(card, tag_text), "text is not red", expected="rgb(239, …) / #ef4444", actual=color)


async def check_design(card: RenderedCard, tag_text: str, expect: Expectations) -> None:
    style = await card.style_of(tag_text, "background-color")
    background = style.get("background-color", "")
    expect.that(
        not is_transparent(background),
        _subject(card, tag_text),
        "background is transparent",
        expected="an opaque background color",
        actual=background,
    )


async def check_feature(card: RenderedCard, tag_text: str, expect: Expectations) -> None:
    style = await card.style_of(tag_text, "padding-left", "padding-right")
    padding = parse_px(style.get("padding-left")) + parse_px(style.get("padding-right"))
    expect.that(
        padding > MIN_FEATURE_PADDING_PX,
        _subject(card, tag_text),
        "horizontal padding too small",
        expected=f"> {MIN_FEATURE_PADDING_PX:g}px",
        actual=f"{padding:g}px",
    )


async def check_marketing(card: RenderedCard, tag_text: str, expect: Expectations) -> None:
    count = await card.count_text("Marketing")
    expect.that(count >= 1, _subject(card, tag_text), 'no element containing "Marketing"', expected=">= 1", actual=count)


async def check_email(card: RenderedCard, tag_text: str, expect: Expectations) -> None:
    visible = await card.has_visible_text(re.compile("email", re.IGNORECASE))
    expect.that(visible, _subject(card, tag_text), "no visible email text", expected=True, actual=visible)


async def check_q2(card: RenderedCard, tag_text: str, expect: Expectations) -> None:
    visible = await card.has_visible_text(re.compile("q2", re.IGNORECASE))
    expect.that(visible, _subject(card, tag_text), "no visible Q2 text", expected=True, actual=visible)


async def check_visible(card: RenderedCard, tag_text: str, expect: Expectations) -> None:
    visible = await card.has_visible_tag(tag_text)
    expect.that(visible, _subject(card, tag_text), "tag is not visible", expected=True, actual=visible)


DEFAULT_CHECK: TagCheck = check_visible

TAG_CHECKS: Mapping[str, TagCheck] = MappingProxyType(
    {
        "High Priority": check_high_priority,
        "Bug": check_bug,
        "Design": check_design,
        "Feature": check_feature,
        "Marketing": check_marketing,
        "Email": check_email,
        "Q2": check_q2,
    }
)


def resolve_check(
    tag_text: str, checks: Mapping[str, TagCheck] = TAG_CHECKS, default: TagCheck = DEFAULT_CHECK
) -> TagCheck:
    """Exact-label lookup, then the default check."""
    check = checks.get(tag_text)
    return check if check is not None else default
