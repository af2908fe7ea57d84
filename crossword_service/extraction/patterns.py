"""Markup patterns that locate embedded crossword JSON in a puzzle page.

The publisher has changed how it embeds puzzle data several times. Each
pattern below recognises one variant and yields the raw JSON text of every
match, in document order. Patterns are listed from most to least specific;
``CASCADE`` is the order they are tried in.

Attribute values come out of BeautifulSoup already entity-decoded, whichever
quoting the page used and in whatever order the attributes appear.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

logger = logging.getLogger(__name__)

COMPONENT_NAME = "CrosswordComponent"

# Bare JSON object; non-greedy so it stops at the first "]}" after entries
RAW_JSON_OBJECT = re.compile(
    r"(\{\"id\"\s*:\s*\"crosswords[^\"]*\"[\s\S]*?\"entries\"\s*:\s*\[[\s\S]*?\]\s*\})"
)


class PuzzlePage:
    """A fetched page, parsed at most once however many patterns look at it."""

    def __init__(self, markup: str):
        self.markup = markup
        self._soup: Optional[BeautifulSoup] = None

    @property
    def soup(self) -> BeautifulSoup:
        if self._soup is None:
            try:
                self._soup = BeautifulSoup(self.markup, "html.parser")
            except ParserRejectedMarkup as e:
                # Only the raw JSON scan can still find anything
                logger.debug(f"Markup rejected by parser: {e}")
                self._soup = BeautifulSoup("", "html.parser")
        return self._soup


def _is_component_name(value: Optional[str]) -> bool:
    # name=&quot;CrosswordComponent&quot; decodes with the quotes inside the value
    return value is not None and value.strip("\"' ") == COMPONENT_NAME


def _props_with_entries(value: Optional[str]) -> bool:
    return value is not None and "entries" in value


def island_by_name(page: PuzzlePage) -> List[str]:
    """``props`` of each ``<gu-island name="CrosswordComponent">``."""
    islands = page.soup.find_all("gu-island", attrs={"name": _is_component_name, "props": True})
    return [island["props"] for island in islands]


def island_with_entries(page: PuzzlePage) -> List[str]:
    """``props`` of any island mentioning entries, in case the component is renamed."""
    islands = page.soup.find_all("gu-island", attrs={"props": _props_with_entries})
    return [island["props"] for island in islands]


def legacy_data_attribute(page: PuzzlePage) -> List[str]:
    """Value of the old ``data-crossword-data`` attribute on any element."""
    elements = page.soup.find_all(attrs={"data-crossword-data": True})
    return [element["data-crossword-data"] for element in elements]


def raw_json_object(page: PuzzlePage) -> List[str]:
    """A crossword object written straight into the markup, e.g. inside a script."""
    return RAW_JSON_OBJECT.findall(page.markup)


@dataclass(frozen=True)
class ExtractionPattern:
    """One way of finding the puzzle payload in a page."""

    name: str
    locate: Callable[[PuzzlePage], List[str]]

    def __call__(self, page: Union[str, PuzzlePage]) -> List[str]:
        if isinstance(page, str):
            page = PuzzlePage(page)
        return self.locate(page)


CASCADE: List[ExtractionPattern] = [
    ExtractionPattern("island_by_name", island_by_name),
    ExtractionPattern("island_with_entries", island_with_entries),
    ExtractionPattern("legacy_data_attribute", legacy_data_attribute),
    ExtractionPattern("raw_json_object", raw_json_object),
]
