from enum import Enum
from typing import Any, Iterator, Sequence

import markdown2  # pyright: ignore[reportMissingTypeStubs]

from config import DEFAULT_FOOD_BUDGET, DEFAULT_WINE_BUDGET


class CourseSlot(Enum):
    amuse_bouche = "Amuse-Bouche"
    first_course = "First Course"
    second_course = "Second Course"
    main_course = "Main Course"
    dessert = "Dessert"

    @property
    def index(self) -> int:
        return COURSE_SLOTS.index(self)


# Serving order.
COURSE_SLOTS: tuple[CourseSlot, ...] = tuple(CourseSlot)


class VariantStyle:
    def __init__(self, label: str, personality: str) -> None:
        self.label = label
        self.personality = personality

    def __repr__(self) -> str:
        return f"<VariantStyle(label={self.label})>"


VARIANT_STYLES: tuple[VariantStyle, ...] = (
    VariantStyle(
        "Classic",
        "A classic, timeless execution of your requested courses.",
    ),
    VariantStyle(
        "Deconstructed",
        "Deconstructed plating that keeps flavors intact while changing form.",
    ),
    VariantStyle(
        "Modernist",
        "Modernist techniques and refined textures across your requested courses.",
    ),
    VariantStyle(
        "Global Slant",
        "International flavor accents that reinterpret your requested courses.",
    ),
    VariantStyle(
        "Elevated",
        "An elevated, special-occasion version of your requested courses.",
    ),
)


class BudgetContext:
    def __init__(
        self,
        food_budget: str | None = None,
        wine_budget: str | None = None,
    ) -> None:
        self.food_budget = food_budget or DEFAULT_FOOD_BUDGET
        self.wine_budget = wine_budget or DEFAULT_WINE_BUDGET


class SlotAssignment:
    """One optional course idea per canonical slot, in serving order."""

    def __init__(self, ideas: Sequence[str | None] | None = None) -> None:
        ideas = [None] * len(COURSE_SLOTS) if ideas is None else list(ideas)
        if len(ideas) != len(COURSE_SLOTS):
            raise ValueError(f"Expected {len(COURSE_SLOTS)} slots, got {len(ideas)}.")
        self.ideas: tuple[str | None, ...] = tuple(ideas)

    def __getitem__(self, key: int | CourseSlot) -> str | None:
        if isinstance(key, CourseSlot):
            key = key.index
        return self.ideas[key]

    def __iter__(self) -> Iterator[str | None]:
        return iter(self.ideas)

    def __len__(self) -> int:
        return len(self.ideas)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlotAssignment):
            return NotImplemented
        return self.ideas == other.ideas

    def __hash__(self) -> int:
        return hash(self.ideas)

    def __repr__(self) -> str:
        return f"<SlotAssignment({self.ideas})>"

    @property
    def filled(self) -> int:
        return sum(idea is not None for idea in self.ideas)

    def items(self) -> Iterator[tuple[CourseSlot, str | None]]:
        return zip(COURSE_SLOTS, self.ideas)

    def to_dict(self) -> dict[str, str | None]:
        return {slot.value: idea for slot, idea in self.items()}


WINE_TIERS = ("worldwideTopRated", "domesticTopRated", "budgetTopRated", "bondPick")


def _wine_from_raw(raw: Any) -> str | None:
    if not raw:
        return None
    if isinstance(raw, dict):
        for tier in WINE_TIERS:
            if raw.get(tier):  # pyright: ignore[reportUnknownMemberType]
                return str(raw[tier])
        return None
    return str(raw)


class Course:
    def __init__(self, *, type: str, name: str, wine: str | None = None) -> None:
        self.type = type
        self.name = name
        self.wine = wine

    def __repr__(self) -> str:
        return f"<Course(type={self.type}, name={self.name})>"

    def to_dict(self) -> dict[str, str | None]:
        return {"type": self.type, "name": self.name, "wine": self.wine}

    @classmethod
    def from_dict(cls, data: Any, *, index: int = 0) -> "Course":
        # Anything but an object still holds its slot, as an empty course.
        if not isinstance(data, dict):
            data = {}
        fallback = COURSE_SLOTS[index].value if index < len(COURSE_SLOTS) else ""
        return cls(
            type=str(data.get("type") or data.get("courseType") or fallback),
            name=str(data.get("name") or data.get("courseName") or ""),
            wine=_wine_from_raw(data.get("wine")),
        )


class MenuVariant:
    def __init__(
        self,
        *,
        id: int,
        title: str,
        personality: str,
        food_cost: str,
        wine_cost: str,
        courses: list[Course],
    ) -> None:
        self.id = id
        self.title = title
        self.personality = personality
        self.food_cost = food_cost
        self.wine_cost = wine_cost
        self.courses = courses

    def __repr__(self) -> str:
        return f"<MenuVariant(id={self.id}, title={self.title})>"

    @property
    def markdown(self) -> str:
        lines = [
            f"### {self.title}",
            "",
            f"_{self.personality}_",
            "",
            f"🍴 Food: {self.food_cost} · 🍷 Wine: {self.wine_cost}",
            "",
        ]
        for course in self.courses:
            line = f"- **{course.type}**: {course.name}"
            if course.wine:
                line += f" (🍷 {course.wine})"
            lines.append(line)
        return "\n".join(lines)

    @property
    def html(self) -> str:
        return markdown2.markdown(  # pyright: ignore[reportUnknownVariableType, reportUnknownMemberType]
            self.markdown
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "personality": self.personality,
            "foodCost": self.food_cost,
            "wineCost": self.wine_cost,
            "courses": [course.to_dict() for course in self.courses],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, index: int = 0) -> "MenuVariant":
        raw_courses = data.get("courses")
        if not isinstance(raw_courses, list):
            raw_courses = []
        courses = [
            Course.from_dict(c, index=i)
            for i, c in enumerate(raw_courses)  # pyright: ignore[reportUnknownVariableType, reportUnknownArgumentType]
        ]
        raw_id = data.get("id")
        return cls(
            id=raw_id if isinstance(raw_id, int) else index + 1,
            title=str(data.get("title") or ""),
            personality=str(data.get("personality") or data.get("theme") or ""),
            food_cost=str(data.get("foodCost") or ""),
            wine_cost=str(data.get("wineCost") or ""),
            courses=courses,
        )
