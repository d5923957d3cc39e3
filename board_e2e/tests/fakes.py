"""In-memory stand-in for `board_e2e.browser.Browser` used by driver-free tests.

`set_content` reads the card title and tag spans out of the rendered card
markup. Locators resolve to the first element in document order whose text
matches, the way `.first` does in a browser: `locate_text` considers the
title and every tag, `locate_tag` only the tags. Styles are looked up by the
text of the resolved element, so a lookup that lands on the title gets the
title's (unstyled) values.
"""
from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set, Tuple

_TITLE = re.compile(r"<h2>(.*?)</h2>")
_TAG = re.compile(r'<span class="tag" data-tag="[^"]*">(.*?)</span>')

TITLE = "title"
TAG = "tag"

DEFAULT_STYLE = {
    "font-weight": "400",
    "color": "rgb(55, 65, 81)",
    "background-color": "rgba(0, 0, 0, 0)",
    "padding-left": "0px",
    "padding-right": "0px",
}

# Styles under which every registered tag check passes.
PASSING_STYLES: Dict[str, Dict[str, str]] = {
    "High Priority": {"font-weight": "600"},
    "Bug": {"color": "rgb(239, 68, 68)"},
    "Design": {"background-color": "rgb(224, 231, 255)"},
    "Feature": {"padding-left": "12px", "padding-right": "12px"},
}


@dataclass
class FakeLocator:
    target: object
    kinds: Tuple[str, ...] = (TITLE, TAG)

    @property
    def first(self) -> "FakeLocator":
        return self


def text_matches(target: object, text: str) -> bool:
    if isinstance(target, re.Pattern):
        return bool(target.search(text))
    return str(target).lower() in text.lower()


class FakeBrowser:
    def __init__(
        self,
        styles: Optional[Dict[str, Dict[str, str]]] = None,
        hidden: Iterable[str] = (),
    ) -> None:
        self.styles = PASSING_STYLES if styles is None else styles
        self.hidden: Set[str] = set(hidden)
        self.elements: List[Tuple[str, str]] = []
        self.calls: List[Tuple] = []

    @property
    def texts(self) -> List[str]:
        return [text for _, text in self.elements]

    def render(self, title: str, tags: Iterable[str]) -> None:
        self.elements = [(TITLE, title)] + [(TAG, tag) for tag in tags]

    def resolve(self, locator: FakeLocator) -> Optional[str]:
        """Text of the element the locator's `.first` lands on, or None."""
        for kind, text in self.elements:
            if kind in locator.kinds and text_matches(locator.target, text):
                return text
        return None

    def _shown(self, locator: FakeLocator) -> bool:
        text = self.resolve(locator)
        return text is not None and text not in self.hidden

    # ---- Browser surface ----------------------------------------------------------
    async def set_content(self, markup: str) -> None:
        self.calls.append(("set_content",))
        title = _TITLE.search(markup)
        self.render(
            html.unescape(title.group(1)) if title else "",
            [html.unescape(tag) for tag in _TAG.findall(markup)],
        )

    def locator(self, selector: str, within: Optional[FakeLocator] = None) -> FakeLocator:
        return FakeLocator(selector)

    def locate_text(self, text, within: Optional[FakeLocator] = None, exact: bool = False) -> FakeLocator:
        return FakeLocator(text)

    def locate_tag(self, text, within: Optional[FakeLocator] = None, selector: str = ".tag") -> FakeLocator:
        return FakeLocator(text, kinds=(TAG,))

    async def expect_visible(self, locator: FakeLocator, message: Optional[str] = None) -> None:
        self.calls.append(("expect_visible", locator.target))
        if not self._shown(locator):
            raise AssertionError(message or f"{locator.target!r} is not visible")

    async def is_visible(self, locator: FakeLocator) -> bool:
        return self._shown(locator)

    async def computed_style(self, locator: FakeLocator, *properties: str) -> Dict[str, str]:
        self.calls.append(("computed_style", locator.target, properties))
        style = self.styles.get(self.resolve(locator) or "", {})
        return {prop: style.get(prop, DEFAULT_STYLE.get(prop, "")) for prop in properties}

    async def count_text(self, text: str, within: Optional[FakeLocator] = None) -> int:
        return sum(1 for _, visible in self.elements if visible not in self.hidden and text_matches(text, visible))

    def visibility_checks(self) -> List[object]:
        return [call[1] for call in self.calls if call[0] == "expect_visible"]
