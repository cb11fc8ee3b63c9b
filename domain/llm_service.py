import json
import logging
import re
from typing import Any

import openai

import config
from domain.aopenai import system_chat
from domain.fidelity import menus_respect_ideas
from domain.ideas import extract_ideas
from domain.models import BudgetContext, MenuVariant
from domain.prompts import EventContext, MenuPrompt
from domain.variants import build_variant_menus


logger = logging.getLogger(__name__)


USER_MESSAGE = "Generate 5 personalized menu options based on the context provided."

FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)
JSON_ARRAY = re.compile(r"\[.*\]", re.DOTALL)


class MenuGenerationError(Exception):
    pass


def parse_menus(text: str) -> list[MenuVariant]:
    """Menus from a model reply that should be a bare JSON array."""
    text = FENCE.sub("", text.strip())
    match = JSON_ARRAY.search(text)
    if match is None:
        raise ValueError("No JSON array in response.")
    try:
        data: Any = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in response: {e}") from e
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of menus.")
    return [
        MenuVariant.from_dict(menu, index=i)  # pyright: ignore[reportUnknownArgumentType]
        for i, menu in enumerate(data)  # pyright: ignore[reportUnknownVariableType]
        if isinstance(menu, dict)
    ]


class MenuLLMService:
    def __init__(
        self,
        openai_client: openai.AsyncClient | None = None,
        settings: config.Config | None = None,
    ) -> None:
        self._openai_client = openai_client
        self.settings = config.Config() if settings is None else settings

    @property
    def openai_client(self) -> openai.AsyncClient:
        if self._openai_client is None:
            self._openai_client = openai.AsyncClient()
        return self._openai_client

    async def menus(self, prompt: MenuPrompt) -> list[MenuVariant]:
        reply = await system_chat(
            str(prompt),
            USER_MESSAGE,
            openai_client=self.openai_client,
            model=self.settings.core_model,
            max_tokens=self.settings.max_tokens,
        )
        return parse_menus(reply)

    async def generate_menus(
        self,
        context: EventContext | None = None,
        custom_menu: str | None = None,
    ) -> list[MenuVariant]:
        context = EventContext() if context is None else context
        ideas = extract_ideas(custom_menu)
        prompt = MenuPrompt(context, custom_menu=custom_menu, ideas=ideas)

        for attempt in range(1, self.settings.generation_attempts + 1):
            logger.info("Generating menus, attempt %d.", attempt)
            try:
                menus = await self.menus(prompt)
            except openai.OpenAIError as e:
                logger.warning("Menu request failed: %s", e)
                continue
            except ValueError as e:
                logger.warning("Could not parse menus: %s", e)
                continue
            if not menus:
                logger.warning("No menus in response.")
                continue
            if menus_respect_ideas(
                menus, ideas, threshold=self.settings.match_threshold
            ):
                return menus
            logger.warning("Generated menus drifted from the host's courses.")

        if ideas and self.settings.allow_fallback:
            logger.info("Falling back to variants of the host's courses.")
            budget = BudgetContext(context.food_budget, context.wine_budget)
            return build_variant_menus(ideas, budget)

        raise MenuGenerationError("Menu generation failed.")
