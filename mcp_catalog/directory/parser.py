"""
Parser for the upstream MCP servers README.

The README is loosely structured markdown. Section headings are recognised
by fixed marker phrases, and server entries come in three competing line
shapes which are tried in a fixed priority order:

    - **[Name](url)** - description          (bold)
    [Name](url) (by Author) - description    (authored)
    - [Name](url) - description              (plain)

Lines that look like links but match none of the shapes are skipped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Pattern, Tuple

from .models import CatalogEntry, Category

logger = logging.getLogger(__name__)


SECTION_MARKERS: Tuple[Tuple[str, Category], ...] = (
    ("These servers aim to demonstrate MCP features", Category.REFERENCE),
    ("Official integrations are maintained by companies", Category.OFFICIAL),
    ("A growing set of community-developed", Category.COMMUNITY),
)

_EMBEDDED_LINK = re.compile(r"\[([^\]]+)\]\([^)]+\)")


class LineShape(str, Enum):
    BOLD = "bold"
    AUTHORED = "authored"
    PLAIN = "plain"


@dataclass(frozen=True)
class LinePattern:
    shape: LineShape
    regex: Pattern[str]

    def match(self, line: str) -> Optional["LineMatch"]:
        m = self.regex.match(line)
        if not m:
            return None
        groups = m.groupdict()
        return LineMatch(
            shape=self.shape,
            name=groups["name"],
            url=groups["url"],
            description=groups["description"],
            author=groups.get("author"),
        )


@dataclass(frozen=True)
class LineMatch:
    shape: LineShape
    name: str
    url: str
    description: str
    author: Optional[str] = None


# Order matters: the first pattern that matches wins.
LINE_PATTERNS: Tuple[LinePattern, ...] = (
    LinePattern(
        LineShape.BOLD,
        re.compile(r"^-?\s*\*\*\[(?P<name>[^\]]+)\]\((?P<url>[^)]+)\)\*\*\s*-\s*(?P<description>.+)"),
    ),
    LinePattern(
        LineShape.AUTHORED,
        re.compile(
            r"^-?\s*\[(?P<name>[^\]]+)\]\((?P<url>[^)]+)\)\s*\(by (?P<author>[^)]+)\)\s*-\s*(?P<description>.+)"
        ),
    ),
    LinePattern(
        LineShape.PLAIN,
        re.compile(r"^-?\s*\[(?P<name>[^\]]+)\]\((?P<url>[^)]+)\)\s*-\s*(?P<description>.+)"),
    ),
)


def detect_category(line: str) -> Optional[Category]:
    for marker, category in SECTION_MARKERS:
        if marker in line:
            return category
    return None


def is_entry_candidate(line: str) -> bool:
    # "[[...]]" lines are reference-style definitions, never entries.
    return "[" in line and "](" in line and not line.startswith("[[")


def match_line(line: str) -> Optional[LineMatch]:
    for pattern in LINE_PATTERNS:
        matched = pattern.match(line)
        if matched:
            return matched
    return None


def clean_description(text: str) -> str:
    """
    Replace embedded markdown links with their label and trim the result.
    Backtick code spans are left as-is. Substitution repeats until nothing
    changes so that cleaning an already-clean description is a no-op.
    """
    cleaned = text
    while True:
        cleaned, replaced = _EMBEDDED_LINK.subn(r"\1", cleaned)
        if not replaced:
            break
    return cleaned.strip()


def build_entry(matched: LineMatch, category: Category) -> Optional[CatalogEntry]:
    description = clean_description(matched.description)
    if not description:
        return None
    url = matched.url
    return CatalogEntry(
        name=matched.name,
        description=description,
        category=category,
        link=url if url.startswith("http") else None,
        github=url if "github.com" in url else None,
        author=matched.author,
    )


def parse_readme(content: str) -> List[CatalogEntry]:
    entries: List[CatalogEntry] = []
    current_category: Optional[Category] = None

    for line_number, line in enumerate(content.split("\n"), start=1):
        category = detect_category(line)
        if category is not None:
            current_category = category

        if current_category is None or not is_entry_candidate(line):
            continue

        matched = match_line(line)
        if matched is None:
            logger.debug("Skipping unmatched line %d: %r", line_number, line)
            continue

        entry = build_entry(matched, current_category)
        if entry is None:
            logger.debug("Skipping line %d with empty description", line_number)
            continue
        entries.append(entry)

    logger.debug("Parsed %d entries from %d characters", len(entries), len(content))
    return entries
