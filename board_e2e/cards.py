"""Card metadata loaded from the board test data file."""
from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from board_e2e.config import settings


class CardDataError(ValueError):
    """Raised when the card data file is missing or inconsistent."""


class Category(str, Enum):
    WEB_APPLICATION = "web-application"
    MOBILE = "mobile"
    MARKETING = "marketing"


@dataclass(frozen=True)
class Card:
    """One UI feature on the board, identified by its title."""

    title: str
    description: str
    tags: Tuple[str, ...]
    category: Category

    @property
    def tag_count(self) -> int:
        return len(self.tags)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Card":
        try:
            title = raw["title"]
            tags = tuple(raw.get("tags", ()))
            category = Category(raw["category"])
        except KeyError as exc:
            raise CardDataError(f"Card record is missing field {exc.args[0]!r}: {dict(raw)}") from exc
        except ValueError as exc:
            raise CardDataError(f"Card {raw.get('title')!r} has unknown category {raw.get('category')!r}") from exc

        if not isinstance(title, str) or not title.strip():
            raise CardDataError(f"Card title must be a non-empty string: {dict(raw)}")
        if not all(isinstance(tag, str) and tag for tag in tags):
            raise CardDataError(f"Card {title!r} has a non-string or empty tag: {list(tags)}")

        declared = raw.get("tagCount")
        if declared is not None and declared != len(tags):
            raise CardDataError(f"Card {title!r} declares tagCount={declared} but has {len(tags)} tag(s)")

        return cls(title=title, description=raw.get("description", ""), tags=tags, category=category)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
            "category": self.category.value,
            "tagCount": self.tag_count,
        }


def load_test_data(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the raw test data document."""
    data_file = Path(path) if path else settings.data_file
    if not data_file.exists():
        raise CardDataError(f"Card data file not found: {data_file}\nSet BOARD_DATA_FILE or restore the packaged data.")
    try:
        return json.loads(data_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CardDataError(f"Card data file {data_file} is not valid JSON: {exc}") from exc


def parse_cards(records: Iterable[Mapping[str, Any]]) -> List[Card]:
    """Build cards in file order, rejecting duplicate titles."""
    cards: List[Card] = []
    seen: Dict[str, int] = {}
    for index, record in enumerate(records):
        card = Card.from_dict(record)
        if card.title in seen:
            raise CardDataError(f"Duplicate card title {card.title!r} at index {index} (first at {seen[card.title]})")
        seen[card.title] = index
        cards.append(card)
    return cards


def load_cards(path: Optional[Path] = None) -> List[Card]:
    return parse_cards(load_test_data(path).get("cards", []))


def cards_by_category(cards: Iterable[Card], category: Category) -> List[Card]:
    return [card for card in cards if card.category is category]
