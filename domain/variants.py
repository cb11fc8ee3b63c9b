from typing import Sequence

from domain.models import (
    COURSE_SLOTS,
    VARIANT_STYLES,
    BudgetContext,
    Course,
    CourseSlot,
    MenuVariant,
    SlotAssignment,
    VariantStyle,
)
from domain.slots import assign_slots


FALLBACK_NAMES: dict[CourseSlot, str] = {
    CourseSlot.amuse_bouche: "Chef's amuse-bouche selection",
    CourseSlot.first_course: "Seasonal first course",
    CourseSlot.second_course: "Light second course",
    CourseSlot.main_course: "Signature main course",
    CourseSlot.dessert: "House dessert",
}

SOMMELIER_SELECTION = "Sommelier selection"

UNPAIRED_SLOTS = frozenset((CourseSlot.amuse_bouche, CourseSlot.second_course))


def build_variant(
    style: VariantStyle,
    assignment: SlotAssignment,
    *,
    id: int,
    budget: BudgetContext,
) -> MenuVariant:
    courses: list[Course] = []
    for slot in COURSE_SLOTS:
        idea = assignment[slot]
        if idea is None:
            name = FALLBACK_NAMES[slot]
        else:
            name = f"{idea} ({style.label.lower()} variation)"
        wine = None if slot in UNPAIRED_SLOTS else SOMMELIER_SELECTION
        courses.append(Course(type=slot.value, name=name, wine=wine))

    return MenuVariant(
        id=id,
        title=f"{style.label} Interpretation",
        personality=style.personality,
        food_cost=f"{budget.food_budget}/person",
        wine_cost=f"{budget.wine_budget} total",
        courses=courses,
    )


def build_variant_menus(
    ideas: Sequence[str] | SlotAssignment,
    budget: BudgetContext | None = None,
) -> list[MenuVariant]:
    """One menu per style, each keeping the host's ideas in their slots."""
    budget = BudgetContext() if budget is None else budget
    assignment = ideas if isinstance(ideas, SlotAssignment) else assign_slots(ideas)
    return [
        build_variant(style, assignment, id=i, budget=budget)
        for i, style in enumerate(VARIANT_STYLES, start=1)
    ]
