"""Fixture rendering and generation configuration."""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class FixtureSettings(BaseSettings):
    """Fixture settings loaded from environment.

    Explicit arguments to the renderer, parser and generator always win
    over these defaults.
    """

    # Parsing
    dialect: str = ""  # sqlglot dialect name; empty uses sqlglot's generic dialect

    # Rendering
    layout: str = "pretty"
    indent: int = 7

    # Synthetic generation
    seed: int = 42
    max_sequence_length: int = 8
    default_categories: str = "MALE,FEMALE,NULL"

    class Config:
        env_prefix = "QT_FIXTURES_"
        env_file = ".env"

    @property
    def category_vocabulary(self) -> List[str]:
        """Default categorical vocabulary as a list."""
        return [c.strip() for c in self.default_categories.split(",") if c.strip()]


@lru_cache
def get_settings() -> FixtureSettings:
    """Get cached settings instance."""
    return FixtureSettings()
