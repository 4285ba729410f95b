"""Configuration for the art event parser.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other service configs in the project.
"""

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ParserMode = Literal["full", "lean"]


class ArtEventsConfig(BaseSettings):
    """
    Configuration for the art event parser.

    All settings can be overridden via environment variables with ART_EVENTS_ prefix.
    Example: ART_EVENTS_MODE=lean

    Attributes:
        mode: Parser profile. "full" is the tiered classifier with end-of-day
            deadlines; "lean" is the flat-keyword profile with midnight deadlines
            and keyword-filtered rule sentences.
        year_rollover_days: Year-less dates further in the past than this are
            moved to next year.
        title_max_length: Line length limit used by the event name cascade.
        bracket_min_length: Bracketed titles must be strictly longer than this.
        bracket_max_length: Bracketed titles must be strictly shorter than this.
        unknown_title: Name used when classification passed but no title was found.
        manual_title: Name used for manually collected posts without a title.
    """

    model_config = SettingsConfigDict(
        env_prefix="ART_EVENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    mode: ParserMode = Field(
        default="full",
        description="Parser profile: full (tiered) or lean (flat keywords).",
    )
    year_rollover_days: int = Field(
        default=180,
        ge=0,
        le=366,
        description="Days in the past after which a year-less date rolls to next year.",
    )
    title_max_length: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Maximum title line length before truncation.",
    )
    bracket_min_length: int = Field(
        default=2,
        ge=0,
        description="Bracketed title must be longer than this.",
    )
    bracket_max_length: int = Field(
        default=40,
        ge=1,
        description="Bracketed title must be shorter than this.",
    )
    unknown_title: str = Field(
        default="イベント（タイトル不明）",
        min_length=1,
        description="Fallback name for detected events without a title.",
    )
    manual_title: str = Field(
        default="手動収集イベント",
        min_length=1,
        description="Fallback name for manually collected posts without a title.",
    )

    @model_validator(mode="after")
    def _check_bracket_bounds(self) -> "ArtEventsConfig":
        if self.bracket_min_length >= self.bracket_max_length:
            raise ValueError("bracket_min_length must be smaller than bracket_max_length")
        return self
