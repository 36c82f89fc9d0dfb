"""FastMCP server exposing the prompt generators as MCP tools.

Tools:
  - generate_idea(level, categories, mood, style)  : idea-mode prompt
  - generate_challenge(level)                      : challenge-mode prompt
  - list_options()                                 : selectable levels, categories, moods, ...

Prompts only: no photos are fetched, so the server needs no Unsplash key.

Usage:
    uv run python -m backend.mcp_server
"""

from mcp.server.fastmcp import FastMCP

from artspark.composer import compose_challenge, compose_idea
from artspark.models import FilterSelection
from artspark.taxonomy import TAXONOMY

mcp = FastMCP("artspark")


@mcp.tool()
def generate_idea(
    level: str,
    categories: list[str],
    mood: str = "random",
    style: str | None = None,
) -> dict:
    """Generate an art idea from 1-3 categories, a mood and an optional style."""
    selection = FilterSelection.model_validate({
        "level": level,
        "category": categories,
        "mood": mood,
        "style": style,
    })
    return compose_idea(selection).model_dump()


@mcp.tool()
def generate_challenge(level: str) -> dict:
    """Generate a randomised painting challenge for a skill level."""
    return compose_challenge(level).model_dump()


@mcp.tool()
def list_options() -> dict:
    """List the levels, categories, moods, styles and tools the generators accept."""
    return TAXONOMY.describe()


if __name__ == "__main__":
    mcp.run()
