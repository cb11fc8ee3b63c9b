from domain.models import (
    COURSE_SLOTS,
    VARIANT_STYLES,
    BudgetContext,
    CourseSlot,
    MenuVariant,
)
from domain.slots import assign_slots
from domain.variants import FALLBACK_NAMES, build_variant_menus


def assert_menu_shape(menus: list[MenuVariant]) -> None:
    assert len(menus) == len(VARIANT_STYLES)
    assert [m.id for m in menus] == [1, 2, 3, 4, 5]
    for menu in menus:
        assert [c.type for c in menu.courses] == [s.value for s in COURSE_SLOTS]


def test_build_variant_menus_preserves_ideas_and_count() -> None:
    ideas = ["Amuse: Oyster", "Salad", "Soup", "Steak", "Chocolate tart"]
    assignment = assign_slots(ideas)
    menus = build_variant_menus(ideas, BudgetContext("$50-60", "$120"))
    assert_menu_shape(menus)
    for menu in menus:
        assert "Oyster" in menu.courses[0].name
        for idx, idea in enumerate(assignment):
            assert idea is not None
            assert menu.courses[idx].name.startswith(idea)


def test_build_variant_menus_names_and_titles() -> None:
    menus = build_variant_menus(["Main: Duck confit"])
    assert [m.title for m in menus] == [
        "Classic Interpretation",
        "Deconstructed Interpretation",
        "Modernist Interpretation",
        "Global Slant Interpretation",
        "Elevated Interpretation",
    ]
    assert menus[0].courses[3].name == "Duck confit (classic variation)"
    assert menus[3].courses[3].name == "Duck confit (global slant variation)"
    assert menus[0].personality == VARIANT_STYLES[0].personality


def test_build_variant_menus_no_ideas_uses_fallbacks() -> None:
    menus = build_variant_menus([])
    assert_menu_shape(menus)
    for menu in menus:
        assert [c.name for c in menu.courses] == [FALLBACK_NAMES[s] for s in COURSE_SLOTS]


def test_build_variant_menus_wine_notes() -> None:
    for menu in build_variant_menus(["Steak"]):
        wines = {CourseSlot(c.type): c.wine for c in menu.courses}
        assert wines[CourseSlot.amuse_bouche] is None
        assert wines[CourseSlot.second_course] is None
        assert wines[CourseSlot.first_course] == "Sommelier selection"
        assert wines[CourseSlot.main_course] == "Sommelier selection"
        assert wines[CourseSlot.dessert] == "Sommelier selection"


def test_build_variant_menus_costs() -> None:
    menus = build_variant_menus(["Steak"], BudgetContext("$50-60", "$120"))
    assert {m.food_cost for m in menus} == {"$50-60/person"}
    assert {m.wine_cost for m in menus} == {"$120 total"}

    menus = build_variant_menus(["Steak"], BudgetContext(None, ""))
    assert menus[0].food_cost == "$45-60/person"
    assert menus[0].wine_cost == "$80-120 total"


def test_build_variant_menus_from_assignment() -> None:
    assignment = assign_slots(["Burrata", "Venison"])
    menus = build_variant_menus(assignment)
    assert menus[0].courses[1].name == "Burrata (classic variation)"
    assert menus[0].courses[3].name == "Venison (classic variation)"
    assert menus[0].courses[0].name == FALLBACK_NAMES[CourseSlot.amuse_bouche]


def test_menu_variant_to_dict_and_html() -> None:
    menu = build_variant_menus(["Amuse: Oyster"])[0]
    data = menu.to_dict()
    assert set(data) == {"id", "title", "personality", "foodCost", "wineCost", "courses"}
    assert data["courses"][0] == {
        "type": "Amuse-Bouche",
        "name": "Oyster (classic variation)",
        "wine": None,
    }
    assert "<h3>Classic Interpretation</h3>" in menu.html
    assert "Oyster (classic variation)" in menu.html


def test_menu_variant_from_dict() -> None:
    menu = MenuVariant.from_dict(
        {
            "title": "Autumn",
            "courses": [
                {"type": "Amuse-Bouche", "name": "Oyster", "wine": None},
                {"name": "Salad", "wine": {"worldwideTopRated": None, "domesticTopRated": "Sancerre"}},
            ],
        },
        index=2,
    )
    assert menu.id == 3
    assert menu.courses[1].type == "First Course"
    assert menu.courses[1].wine == "Sancerre"
    assert menu.courses[0].wine is None


def test_menu_variant_from_dict_keeps_positions() -> None:
    menu = MenuVariant.from_dict(
        {"courses": [None, {"name": "Citrus salad"}, "Risotto", {"name": "Steak"}]}
    )
    assert [c.type for c in menu.courses] == [s.value for s in COURSE_SLOTS[:4]]
    assert [c.name for c in menu.courses] == ["", "Citrus salad", "", "Steak"]


def test_menu_variant_from_dict_courses_not_a_list() -> None:
    assert MenuVariant.from_dict({"courses": "Steak"}).courses == []
