"""Handlebars sentence templates for generated prompts."""

from collections.abc import Callable
from typing import Any

import pybars


_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}

# Triple-stash: subject text is plain prose, never HTML-escaped.
IDEA_TEMPLATE = "Imagine a combination of {{{descriptor}}} {{{subjects}}}"

CHALLENGE_TEMPLATES: dict[str, str] = {
    "beginner": "Create a painting of {{{subject1}}}",
    "intermediate": (
        "Create a painting with {{{subject1}}} and {{{subject2}}}"
        " using {{{tool}}}"
    ),
    "advanced": (
        "Create a painting with {{{subject1}}} and {{{subject2}}}"
        " and {{{subject3}}} using {{{tool}}} in the style of {{{style}}}"
    ),
}


class PromptError(Exception):
    """Raised when a Handlebars template fails to compile or render."""


def render_prompt(template_str: str, context: dict[str, Any]) -> str:
    """Compile and render a Handlebars template with the given context.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return str(compiled(context))
    except Exception as e:
        raise PromptError(f"Template error: {e}") from e
