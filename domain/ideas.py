import logging
import re

from domain.models import COURSE_SLOTS


logger = logging.getLogger(__name__)


BULLET = re.compile(r"^[\s*\-+•·–—\d.)\]]+")
INLINE_SEPARATOR = re.compile(r"[;,|/]")


def _clean(line: str) -> str:
    return BULLET.sub("", line).strip()


def extract_ideas(text: str | None, limit: int = len(COURSE_SLOTS)) -> list[str]:
    """Split a host's free-text course list into at most `limit` ideas.

    One idea per non-blank line, with bullets and numbering removed. A single
    line like "salad, soup, steak" is split on inline separators instead.
    """
    if not text or not isinstance(text, str):
        return []

    ideas = [idea for idea in (_clean(line) for line in text.splitlines()) if idea]

    if len(ideas) == 1:
        pieces = [_clean(p) for p in INLINE_SEPARATOR.split(ideas[0])]
        pieces = [p for p in pieces if p]
        if len(pieces) > 1:
            ideas = pieces

    if len(ideas) > limit:
        logger.debug("Dropping %d ideas over the %d course limit.", len(ideas) - limit, limit)
    return ideas[:limit]
