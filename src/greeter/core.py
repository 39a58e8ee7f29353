"""Core functionality for the greeter application."""

GREETING_PREFIX = "Hello, "
DEFAULT_NAME = "Riyaz"


def greet(name: str) -> str:
    """Return a greeting message for the given name.

    The name is used verbatim. Passing anything other than a string is a
    type error for static checkers; no runtime check is made.

    Args:
        name: The name to greet.

    Returns:
        A greeting string.
    """
    return f"{GREETING_PREFIX}{name}"
