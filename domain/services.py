"""What collaborators call. Pure functions, no I/O."""

from domain.fidelity import menus_respect_ideas
from domain.ideas import extract_ideas
from domain.prompts import build_custom_menu_prompt as build_prompt
from domain.slots import assign_slots
from domain.variants import build_variant_menus


__all__ = [
    "assign_slots",
    "build_prompt",
    "build_variant_menus",
    "extract_ideas",
    "menus_respect_ideas",
]
