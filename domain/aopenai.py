import os

import openai


DEFAULT_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4-turbo-preview")
MAX_TOKENS = 4096


async def system_chat(
    system: str,
    msg: str,
    *,
    openai_client: openai.AsyncClient,
    model: str | None = None,
    max_tokens: int = MAX_TOKENS,
) -> str:
    model = DEFAULT_MODEL if model is None else model
    resp = await openai_client.chat.completions.create(
        model=model,
        max_tokens=max_tokens,
        messages=[
            {"role": "system", "content": system},
            {"role": "user", "content": msg},
        ],
    )
    ans = resp.choices[0].message.content or ""
    return ans.strip()
