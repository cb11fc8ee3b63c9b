"""Placing a host's course ideas into the five canonical course slots.

Three signals, strongest first:

1. An explicit tag written by the host ("Dessert: lemon tart").
2. Dish vocabulary ("lemon tart" reads like a dessert).
3. Position, for whatever is left.

A slot is never taken away from an idea once committed, so earlier ideas win
ties. Ideas that find no empty slot are dropped.
"""

import logging
import re
from typing import Sequence

from domain.models import COURSE_SLOTS, CourseSlot, SlotAssignment


logger = logging.getLogger(__name__)


SLOT_SYNONYMS: tuple[tuple[CourseSlot, tuple[str, ...]], ...] = (
    (
        CourseSlot.amuse_bouche,
        (r"amuse[\s-]*bouche", r"amuse", r"appetizer", r"starter"),
    ),
    (CourseSlot.first_course, (r"first[\s-]*course", r"first")),
    (CourseSlot.second_course, (r"second[\s-]*course", r"second")),
    (CourseSlot.main_course, (r"main[\s-]*course", r"main", r"entr[eé]e")),
    (CourseSlot.dessert, (r"dessert", r"sweet")),
)

# A colon, or a dash that is not gluing two words together ("amuse-bouche").
TAG_SEPARATOR = r"(?:\s*:|\s+[-–—]|[-–—]\s)"

TAG_PATTERNS: tuple[tuple[CourseSlot, re.Pattern[str]], ...] = tuple(
    (
        slot,
        re.compile(
            rf"^\s*{synonym}{TAG_SEPARATOR}\s*(?P<rest>.*)$",
            re.IGNORECASE | re.DOTALL,
        ),
    )
    for slot, synonyms in SLOT_SYNONYMS
    for synonym in synonyms
)

# Checked in this order; the first family with a hit wins.
KEYWORD_FAMILIES: tuple[tuple[CourseSlot, tuple[str, ...]], ...] = (
    (
        CourseSlot.dessert,
        ("cake", "tart", "pie", "ice cream", "sorbet", "pudding", "cookie"),
    ),
    (
        CourseSlot.amuse_bouche,
        ("amuse", "appetizer", "starter", "canapé", "canape", "crostini"),
    ),
    (
        CourseSlot.first_course,
        ("salad", "soup", "gazpacho", "ceviche", "carpaccio"),
    ),
    (
        CourseSlot.second_course,
        ("shrimp", "pasta", "risotto", "gnocchi", "seafood", "fish", "scallop"),
    ),
    (
        CourseSlot.main_course,
        (
            "beef",
            "steak",
            "lamb",
            "pork",
            "chicken",
            "duck",
            "turkey",
            "entrée",
            "entree",
            "main",
        ),
    ),
)

# Keywords may close a compound ("cheesecake", "swordfish") or take a
# diminutive ("tartlet", "duckling"), but "tartare" is not a tart.
KEYWORD_PATTERNS: tuple[tuple[CourseSlot, re.Pattern[str]], ...] = tuple(
    (
        slot,
        re.compile(rf"\b\w*(?:{'|'.join(map(re.escape, words))})(?:let|ling)?s?\b"),
    )
    for slot, words in KEYWORD_FAMILIES
)

# Where ideas go when none of them carried a tag or a recognisable dish.
POSITIONAL_ORDER: dict[int, tuple[CourseSlot, ...]] = {
    1: (CourseSlot.main_course,),
    2: (CourseSlot.first_course, CourseSlot.main_course),
    3: (CourseSlot.first_course, CourseSlot.main_course, CourseSlot.dessert),
    4: (
        CourseSlot.first_course,
        CourseSlot.second_course,
        CourseSlot.main_course,
        CourseSlot.dessert,
    ),
    5: COURSE_SLOTS,
}


def normalize(text: str) -> str:
    text = re.sub(r"[^\w\s]", " ", text.lower())
    return re.sub(r"\s+", " ", text).strip()


def match_explicit_tag(idea: str) -> tuple[CourseSlot, str] | None:
    """The slot an idea names for itself, and the idea without the tag."""
    for slot, pattern in TAG_PATTERNS:
        match = pattern.match(idea)
        if match is None:
            continue
        rest = match.group("rest").strip()
        return slot, rest or idea
    return None


def classify_keywords(idea: str) -> CourseSlot | None:
    text = normalize(idea)
    for slot, pattern in KEYWORD_PATTERNS:
        if pattern.search(text):
            return slot
    return None


def assign_slots(ideas: Sequence[str]) -> SlotAssignment:
    slots: list[str | None] = [None] * len(COURSE_SLOTS)

    untyped: list[str] = []
    for idea in ideas:
        tagged = match_explicit_tag(idea)
        if tagged is None:
            untyped.append(idea)
            continue
        slot, text = tagged
        if slots[slot.index] is None:
            slots[slot.index] = text
        else:
            untyped.append(text)

    remaining: list[str] = []
    for idea in untyped:
        slot = classify_keywords(idea)
        if slot is not None and slots[slot.index] is None:
            slots[slot.index] = idea
        else:
            remaining.append(idea)

    if any(s is not None for s in slots):
        order = COURSE_SLOTS
    else:
        order = POSITIONAL_ORDER.get(len(remaining), COURSE_SLOTS)

    for idea in remaining:
        target = next((s for s in order if slots[s.index] is None), None)
        if target is None:
            logger.debug("No free course slot for idea %r, dropping it.", idea)
            continue
        slots[target.index] = idea

    return SlotAssignment(slots)
