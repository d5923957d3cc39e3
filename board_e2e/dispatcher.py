"""Route each card to its named scenario or to the generic tag checks.

The dispatcher is built once from two read-only registries and never
mutates them, so one instance can serve every test in the run.

Lookup order for a card:

1. ``scenarios[card.title]`` (exact match) runs the named scenario and
   nothing else.
2. Otherwise the card is rendered, and each tag, in declaration order, gets
   one hard visibility assertion followed by its behavior check (or the
   default check). Behavior checks follow the strictness passed in for the
   call; soft failures are raised together once every tag was checked.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Optional

from board_e2e import fixture_pages
from board_e2e.assertions import Expectations
from board_e2e.browser import Browser
from board_e2e.cards import Card
from board_e2e.scenarios import SCENARIOS, Scenario
from board_e2e.tag_checks import DEFAULT_CHECK, TAG_CHECKS, RenderedCard, TagCheck, resolve_check

logger = logging.getLogger(__name__)

CARD_SELECTOR = '[data-testid="card"]'


class DispatchPath(str, Enum):
    SCENARIO = "scenario"
    TAG_CHECKS = "tag-checks"


@dataclass
class DispatchOutcome:
    """What the dispatcher did for one card."""

    card: Card
    path: DispatchPath
    checked_tags: List[str] = field(default_factory=list)


class ScenarioDispatcher:
    """Verify cards through named scenarios, falling back to tag checks."""

    def __init__(
        self,
        scenarios: Mapping[str, Scenario] = SCENARIOS,
        tag_checks: Mapping[str, TagCheck] = TAG_CHECKS,
        default_check: TagCheck = DEFAULT_CHECK,
    ) -> None:
        self._scenarios = scenarios
        self._tag_checks = tag_checks
        self._default_check = default_check

    def scenario_for(self, card: Card) -> Optional[Scenario]:
        return self._scenarios.get(card.title)

    def check_for(self, tag_text: str) -> TagCheck:
        return resolve_check(tag_text, self._tag_checks, self._default_check)

    async def dispatch(self, card: Card, browser: Browser, strict: bool) -> DispatchOutcome:
        scenario = self.scenario_for(card)
        if scenario is not None:
            logger.info("Card %r: running named scenario %s", card.title, getattr(scenario, "__name__", scenario))
            await scenario(browser)
            return DispatchOutcome(card=card, path=DispatchPath.SCENARIO)

        logger.info("Card %r: no named scenario, checking %d tag(s) (strict=%s)", card.title, card.tag_count, strict)
        return await self.check_tags(card, browser, strict)

    async def check_tags(self, card: Card, browser: Browser, strict: bool) -> DispatchOutcome:
        await browser.set_content(fixture_pages.card_page(card.title, card.tags))
        rendered = RenderedCard(browser=browser, container=browser.locator(CARD_SELECTOR).first, title=card.title)

        expectations = Expectations(strict=strict)
        outcome = DispatchOutcome(card=card, path=DispatchPath.TAG_CHECKS)
        for tag_text in card.tags:
            await browser.expect_visible(rendered.tag(tag_text), f'Missing tag "{tag_text}" for card "{card.title}"')
            await self.check_for(tag_text)(rendered, tag_text, expectations)
            outcome.checked_tags.append(tag_text)

        expectations.raise_for_failures(context=f'card "{card.title}"')
        return outcome
