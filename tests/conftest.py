"""Shared fixtures: publisher-shaped crossword payloads and pages."""

import html
import json

import pytest


def build_entries(count):
    """Build ``count`` across entries without nested arrays."""
    return [
        {
            "id": f"{i + 1}-across",
            "number": i + 1,
            "humanNumber": str(i + 1),
            "clue": f"Clue number {i + 1} (5)",
            "direction": "across",
            "length": 5,
            "position": {"x": 0, "y": i},
            "solution": "ABCDE",
        }
        for i in range(count)
    ]


def build_payload(entry_count=3, number=17405):
    """Build a crossword payload the way the publisher embeds it."""
    return {
        "id": f"crosswords/quick/{number}",
        "number": number,
        "name": f"Quick crossword No {number}",
        "creator": {"name": "Pasquale", "webUrl": "https://www.theguardian.com/profile/pasquale"},
        "date": 1771286400000,
        "dimensions": {"cols": 13, "rows": 13},
        "crosswordType": "quick",
        "solutionAvailable": True,
        "entries": build_entries(entry_count),
    }


def island_single(payload, name="CrosswordComponent", props_first=False):
    props = json.dumps({"data": payload})
    if props_first:
        return f"<gu-island props='{props}' name=\"{name}\" deferuntil=\"visible\"></gu-island>"
    return f"<gu-island name=\"{name}\" deferuntil=\"visible\" props='{props}'></gu-island>"


def island_encoded(payload, name="CrosswordComponent", props_first=False, wrap=True):
    props = html.escape(json.dumps({"data": payload} if wrap else payload), quote=True)
    if props_first:
        return f"<gu-island props=\"{props}\" name=\"{name}\"></gu-island>"
    return f"<gu-island name=\"{name}\" props=\"{props}\"></gu-island>"


def page(*fragments):
    body = "\n".join(fragments)
    return f"<!DOCTYPE html><html><head><title>Crossword</title></head><body>{body}</body></html>"


@pytest.fixture
def payload():
    """A valid three-entry crossword payload."""
    return build_payload()


@pytest.fixture
def crossword_page():
    """Factory for pages with a single-quoted CrosswordComponent island."""
    def _make(entry_count=3, number=17405):
        return page(island_single(build_payload(entry_count, number)))
    return _make
