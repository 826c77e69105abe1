"""Greeting value type."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

GREETING_PREFIX = "hello "


class Greeter(BaseModel):
    """Greets a fixed name.

    Instances are immutable; ``name`` must be text and is never coerced.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    name: str = Field(description="Name appended to the greeting")

    def greet(self) -> str:
        return f"{GREETING_PREFIX}{self.name}"


__all__ = ["GREETING_PREFIX", "Greeter"]
