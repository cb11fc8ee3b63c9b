"""Checks that generated menus kept the host's course ideas."""

import logging
import re
from typing import Sequence

from domain.models import MenuVariant
from domain.slots import assign_slots


logger = logging.getLogger(__name__)


MIN_WORD_LENGTH = 3
MATCH_THRESHOLD = 2


def normalize_text(value: str | None) -> str:
    if not value:
        return ""
    value = re.sub(r"[^a-z0-9\s]", " ", value.lower())
    return re.sub(r"\s+", " ", value).strip()


def idea_matches_course(
    idea: str,
    course_name: str | None,
    *,
    threshold: int = MATCH_THRESHOLD,
) -> bool:
    idea_text = normalize_text(idea)
    course_text = normalize_text(course_name)
    if not idea_text or not course_text:
        return False
    if idea_text in course_text:
        return True
    words = [w for w in idea_text.split(" ") if len(w) >= MIN_WORD_LENGTH]
    if not words:
        return False
    matched = sum(w in course_text for w in words)
    return matched >= min(threshold, len(words))


def menu_respects_ideas(
    menu: MenuVariant,
    ideas: Sequence[str],
    *,
    threshold: int = MATCH_THRESHOLD,
) -> bool:
    if not ideas:
        return True
    for slot, idea in assign_slots(ideas).items():
        if idea is None:
            continue
        if slot.index >= len(menu.courses):
            return False
        name = menu.courses[slot.index].name
        if not idea_matches_course(idea, name, threshold=threshold):
            logger.debug("%s drifted from %r: %r", slot.value, idea, name)
            return False
    return True


def menus_respect_ideas(
    menus: Sequence[MenuVariant],
    ideas: Sequence[str],
    *,
    threshold: int = MATCH_THRESHOLD,
) -> bool:
    if not ideas:
        return True
    return bool(menus) and all(
        menu_respects_ideas(menu, ideas, threshold=threshold) for menu in menus
    )
