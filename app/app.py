import functools
import json
import logging
from typing import Any, Awaitable, Callable

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

import config
from domain.llm_service import MenuGenerationError, MenuLLMService
from domain.models import BudgetContext, MenuVariant
from domain.prompts import EventContext
from domain.services import (
    assign_slots,
    build_prompt,
    build_variant_menus,
    extract_ideas,
    menus_respect_ideas,
)


logger = logging.getLogger(__name__)


CONFIG = config.Config()


class BadRequest(Exception):
    pass


def aJSONResponse(route: Callable[..., Awaitable[Any | tuple[Any, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> JSONResponse:
        try:
            resp = await route(*args, **kwargs)
        except BadRequest as e:
            return JSONResponse({"error": str(e)}, status_code=400)
        if not isinstance(resp, tuple):
            content, code = resp, 200
        else:
            content, code = resp
        return JSONResponse(content, status_code=code)

    return wrapper


async def json_body(request: Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except json.JSONDecodeError:
        raise BadRequest("Body is not valid JSON.")
    if not isinstance(body, dict):
        raise BadRequest("Body must be a JSON object.")
    return body  # pyright: ignore[reportUnknownVariableType]


def string_list(value: Any, field: str) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise BadRequest(f"{field} must be a list of strings.")
    return [str(v) for v in value]  # pyright: ignore[reportUnknownVariableType]


def event_context(data: Any) -> EventContext:
    if not isinstance(data, dict):
        data = {}
    try:
        guest_count = int(data.get("guestCount") or 6)
    except (TypeError, ValueError):
        raise BadRequest("guestCount must be a number.")
    return EventContext(
        event_title=data.get("eventTitle") or "Dinner Party",
        guest_count=guest_count,
        food_budget=data.get("foodBudget") or CONFIG.food_budget,
        wine_budget=data.get("wineBudget") or CONFIG.wine_budget,
        skill_level=data.get("skillLevel") or "intermediate",
        cuisine=data.get("cuisine") or "any",
        likes=string_list(data.get("likes"), "likes"),
        dislikes=string_list(data.get("dislikes"), "dislikes"),
        restrictions=string_list(data.get("restrictions"), "restrictions"),
    )


@aJSONResponse
async def custom_menus(request: Request) -> dict[str, Any]:
    body = await json_body(request)
    custom_menu = body.get("customMenu")
    if not isinstance(custom_menu, str):
        custom_menu = ""
    ideas = extract_ideas(custom_menu)
    assignment = assign_slots(ideas)
    budget = BudgetContext(
        body.get("foodBudget") or CONFIG.food_budget,
        body.get("wineBudget") or CONFIG.wine_budget,
    )
    menus = build_variant_menus(assignment, budget)
    return {
        "ideas": ideas,
        "assignment": assignment.to_dict(),
        "menus": [menu.to_dict() for menu in menus],
        "prompt": build_prompt(custom_menu, ideas),
    }


@aJSONResponse
async def generate_menus(request: Request) -> dict[str, Any] | tuple[dict[str, Any], int]:
    body = await json_body(request)
    custom_menu = body.get("customMenu")
    if not isinstance(custom_menu, str) or not custom_menu.strip():
        custom_menu = None
    llm: MenuLLMService = request.app.state.llm
    try:
        menus = await llm.generate_menus(
            event_context(body.get("context")),
            custom_menu=custom_menu,
        )
    except MenuGenerationError as e:
        logger.error("Menu generation error: %s", e)
        return {"error": "Menu generation failed."}, 502
    return {"menus": [menu.to_dict() for menu in menus]}


@aJSONResponse
async def validate_menus(request: Request) -> dict[str, Any]:
    body = await json_body(request)
    raw_menus = body.get("menus")
    if not isinstance(raw_menus, list):
        raise BadRequest("menus must be a list.")
    menus = [
        MenuVariant.from_dict(menu, index=i)  # pyright: ignore[reportUnknownArgumentType]
        for i, menu in enumerate(raw_menus)  # pyright: ignore[reportUnknownVariableType]
        if isinstance(menu, dict)
    ]
    ideas = extract_ideas(body.get("customMenu"))
    return {"valid": menus_respect_ideas(menus, ideas, threshold=CONFIG.match_threshold)}


app = Starlette(
    debug=True if CONFIG.env == config.Env.local else False,
    routes=[
        Route("/menus/custom", custom_menus, methods=["POST"]),
        Route("/menus/generate", generate_menus, methods=["POST"]),
        Route("/menus/validate", validate_menus, methods=["POST"]),
    ],
)

app.state.llm = MenuLLMService(settings=CONFIG)
