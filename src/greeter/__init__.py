"""Greeter: build a greeting from a name and print it."""

from greeter.core import DEFAULT_NAME, GREETING_PREFIX, greet

__all__ = ["DEFAULT_NAME", "GREETING_PREFIX", "greet"]
