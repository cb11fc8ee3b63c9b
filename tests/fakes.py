import json
from types import SimpleNamespace
from typing import Any

import httpx
import openai


COURSE_TYPES = ["Amuse-Bouche", "First Course", "Second Course", "Main Course", "Dessert"]


class FakeCompletions:
    def __init__(self, replies: list[str | Exception]) -> None:
        self.replies = list(replies)
        self.calls: list[dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        message = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self, replies: list[str | Exception]) -> None:
        self.completions = FakeCompletions(replies)
        self.chat = SimpleNamespace(completions=self.completions)


def menus_reply(*names: list[str], fenced: bool = False) -> str:
    menus = [
        {
            "id": i,
            "title": f"Menu {i}",
            "personality": "Generated.",
            "foodCost": "$45-55/person",
            "wineCost": "$120 total",
            "courses": [
                {"type": t, "name": n, "wine": None}
                for t, n in zip(COURSE_TYPES, course_names)
            ],
        }
        for i, course_names in enumerate(names, start=1)
    ]
    text = json.dumps(menus)
    return f"```json\n{text}\n```" if fenced else text


def api_error() -> openai.APIConnectionError:
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    return openai.APIConnectionError(request=request)
