from enum import Enum

from pydantic_settings import BaseSettings


DEFAULT_FOOD_BUDGET = "$45-60"
DEFAULT_WINE_BUDGET = "$80-120"


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    food_budget: str = DEFAULT_FOOD_BUDGET
    wine_budget: str = DEFAULT_WINE_BUDGET
    core_model: str = "gpt-4-turbo-preview"
    max_tokens: int = 4096
    generation_attempts: int = 2
    allow_fallback: bool = True
    match_threshold: int = 2
