"""Greeting helpers."""

from greeting.greeter import GREETING_PREFIX, Greeter

__all__ = ["GREETING_PREFIX", "Greeter"]
