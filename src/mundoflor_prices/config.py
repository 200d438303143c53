from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseModel):
    values: list[str] = Field(default_factory=list)
    html_file: str | None = None
    selectors: list[str] | None = None
    output: str
    log_level: str = "INFO"
    strict: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def _has_source(self) -> "Settings":
        if not self.values and not self.html_file:
            raise ValueError("Provide price values or an HTML file to read them from.")
        return self
