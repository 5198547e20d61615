"""Best-effort extraction of a ``BookRecord`` from a search results page.

The results page is only loosely structured, so every field is recovered by
its own extractor. An extractor that finds nothing returns ``None`` and the
record is assembled from whatever the others recovered.
"""

import re
from collections.abc import Callable
from typing import Any

from bs4 import BeautifulSoup, Tag

from app.models import BookRecord

# Info cell of the first row in the results table.
RESULTS_REGION_SELECTOR = (
    "#bodycontainer .mainContentContainer .mainContent .mainContentFloat "
    ".leftContainer table tr td:nth-child(2)"
)
TITLE_SELECTOR = '.bookTitle span[itemprop="name"]'
AUTHOR_CONTAINER_SELECTOR = ".authorName__container"
AUTHOR_NAME_SELECTOR = '.authorName span[itemprop="name"]'
AUTHOR_ROLE_SELECTOR = ".role"

RATING_PATTERN = re.compile(r"(\d+\.\d+)\s+avg rating\s+[—-]\s+(\d[\d,]*)\s+ratings")
PUBLISHED_PATTERN = re.compile(r"published\s+(\d{4})")
EDITIONS_PATTERN = re.compile(r"(\d[\d,]*)\s+editions")

FieldExtractor = Callable[[Tag, str], Any]


def _parse_int(value: str) -> int:
    return int(value.replace(",", ""))


def extract_avg_rating(region: Tag, text: str) -> float | None:
    match = RATING_PATTERN.search(text)
    return float(match.group(1)) if match else None


def extract_ratings(region: Tag, text: str) -> int | None:
    match = RATING_PATTERN.search(text)
    return _parse_int(match.group(2)) if match else None


def extract_published(region: Tag, text: str) -> int | None:
    match = PUBLISHED_PATTERN.search(text)
    return int(match.group(1)) if match else None


def extract_editions(region: Tag, text: str) -> int | None:
    match = EDITIONS_PATTERN.search(text)
    return _parse_int(match.group(1)) if match else None


def extract_book_name(region: Tag, text: str) -> str | None:
    element = region.select_one(TITLE_SELECTOR)
    return element.get_text().strip() if element else None


def _author_name(container: Tag, include_role: bool) -> str:
    name_element = container.select_one(AUTHOR_NAME_SELECTOR)
    name = name_element.get_text().strip() if name_element else ""
    if include_role:
        role_element = container.select_one(AUTHOR_ROLE_SELECTOR)
        role = role_element.get_text().strip() if role_element else ""
        if role:
            return f"{name} {role}"
    return name


def extract_authors(region: Tag, text: str, include_roles: bool = False) -> str:
    containers = region.select(AUTHOR_CONTAINER_SELECTOR)
    return ", ".join(_author_name(c, include_roles) for c in containers)


class RecordExtractor:
    def __init__(self, include_author_roles: bool = False) -> None:
        self._fields: dict[str, FieldExtractor] = {
            "book_name": extract_book_name,
            "author": lambda region, text: extract_authors(
                region, text, include_roles=include_author_roles
            ),
            "avg_rating": extract_avg_rating,
            "ratings": extract_ratings,
            "published": extract_published,
            "editions": extract_editions,
        }

    def extract(self, raw_markup: str) -> BookRecord | None:
        soup = BeautifulSoup(raw_markup, "html.parser")
        region = soup.select_one(RESULTS_REGION_SELECTOR)
        if region is None:
            return None

        text = region.get_text()
        return BookRecord(
            **{field: extractor(region, text) for field, extractor in self._fields.items()}
        )


def extract(raw_markup: str) -> BookRecord | None:
    return RecordExtractor().extract(raw_markup)
