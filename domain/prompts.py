from typing import Sequence

from config import DEFAULT_FOOD_BUDGET, DEFAULT_WINE_BUDGET
from domain.models import COURSE_SLOTS, VARIANT_STYLES


CUSTOM_MENU_PROMPT = """

Host provided desired courses. Use these as the foundation and keep the same course order.
{lines}

Requirements for custom menu:
- Each of the {count} menus must preserve the requested course ideas.
- Provide options by varying preparation, ingredients, or style, but do not replace the course themes.
- Keep the same number of courses in the same order.
- Start each course name with the host's course text, then add a variation descriptor.
- Use these style lenses for the five options: {styles}.
"""


MENU_PROMPT = """You are an expert culinary team creating dinner party menus.

Event Context:
- Event: {event_title}
- Guests: {guest_count}
- Food Budget: {food_budget}/person
- Wine Budget: {wine_budget} total
- Skill Level: {skill_level}
- Cuisine Direction: {cuisine}
- Guest Preferences: Likes {likes}, Avoids {dislikes}
- Dietary Restrictions: {restrictions}

Generate exactly {count} distinct menu options as a JSON array. Each menu must have:
- id: number (1-{count})
- title: Creative, evocative menu name
- personality: One sentence describing the menu's character and vibe
- foodCost: Estimated cost per person (e.g., "$45-55/person")
- wineCost: Total wine budget estimate (e.g., "$120 total")
- courses: Array of exactly {course_count} courses, each with:
  - type: One of {course_types}
  - name: Full dish name with key components
  - wine: Suggested wine pairing, or null when a pairing should be omitted

RESPOND WITH ONLY VALID JSON - no markdown, no explanation, just the array.{custom_menu}"""


def build_custom_menu_prompt(custom_menu: str | None, ideas: Sequence[str]) -> str:
    """Instructions that pin generated menus to the host's own courses."""
    if not custom_menu:
        return ""
    if ideas:
        lines = "\n".join(f"- Course {i}: {idea}" for i, idea in enumerate(ideas, 1))
    else:
        lines = custom_menu.strip()
    return CUSTOM_MENU_PROMPT.format(
        lines=lines,
        count=len(VARIANT_STYLES),
        styles=", ".join(style.label for style in VARIANT_STYLES),
    )


class EventContext:
    def __init__(
        self,
        *,
        event_title: str = "Dinner Party",
        guest_count: int = 6,
        food_budget: str = DEFAULT_FOOD_BUDGET,
        wine_budget: str = DEFAULT_WINE_BUDGET,
        skill_level: str = "intermediate",
        cuisine: str = "any",
        likes: Sequence[str] = (),
        dislikes: Sequence[str] = (),
        restrictions: Sequence[str] = (),
    ) -> None:
        self.event_title = event_title
        self.guest_count = guest_count
        self.food_budget = food_budget
        self.wine_budget = wine_budget
        self.skill_level = skill_level
        self.cuisine = cuisine
        self.likes = list(likes)
        self.dislikes = list(dislikes)
        self.restrictions = list(restrictions)


class MenuPrompt:
    def __init__(
        self,
        context: EventContext | None = None,
        custom_menu: str | None = None,
        ideas: Sequence[str] = (),
    ) -> None:
        self.context = EventContext() if context is None else context
        self.custom_menu = build_custom_menu_prompt(custom_menu, ideas)

    def __str__(self) -> str:
        ctx = self.context
        return MENU_PROMPT.format(
            event_title=ctx.event_title,
            guest_count=ctx.guest_count,
            food_budget=ctx.food_budget,
            wine_budget=ctx.wine_budget,
            skill_level=ctx.skill_level,
            cuisine=ctx.cuisine,
            likes=", ".join(ctx.likes) or "various",
            dislikes=", ".join(ctx.dislikes) or "nothing specific",
            restrictions=", ".join(ctx.restrictions) or "none",
            count=len(VARIANT_STYLES),
            course_count=len(COURSE_SLOTS),
            course_types=", ".join(f'"{slot.value}"' for slot in COURSE_SLOTS),
            custom_menu=self.custom_menu,
        )
