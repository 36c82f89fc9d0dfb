"""Print sample prompts for development/testing."""

import random

from artspark.composer import Composer
from artspark.models import FilterSelection
from artspark.taxonomy import LEVELS, MAX_CATEGORIES

DEMO_MOODS = ["soft", "dark", "random"]
DEMO_STYLES = [None, "ink-wash", "manga"]


def demo_prompts(seed: int | None = None) -> list[str]:
    """Return one idea and one challenge line per level."""
    composer = Composer(rng=random.Random(seed))
    lines: list[str] = []

    categories = list(composer.taxonomy.all_categories())
    for level, mood, style in zip(LEVELS, DEMO_MOODS, DEMO_STYLES):
        picked = composer.rng.sample(categories, MAX_CATEGORIES[level])
        selection = FilterSelection.model_validate({
            "level": level,
            "category": picked,
            "mood": mood,
            "style": style,
        })
        idea = composer.idea(selection)
        lines.append(f"[idea/{level}] {idea.sentence}  (keywords: {', '.join(idea.keywords)})")

    for level in LEVELS:
        challenge = composer.challenge(level)
        lines.append(f"[challenge/{level}] {challenge.sentence}  (keywords: {', '.join(challenge.keywords)})")

    return lines


def print_demo(seed: int | None = None) -> None:
    for line in demo_prompts(seed):
        print(line)
