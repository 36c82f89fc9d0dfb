"""Prompt composer: turns filters into a sentence plus photo-search keywords.

Two entry points share the same sampling primitives:

  idea(selection)   Caller picks level, 1–3 categories, mood, optional style.
                    One subject per category, one mood descriptor.
                      "Imagine a combination of {descriptor} {A and B and C}"
                    Keywords: the subjects in category order, then style.
                    Mood never reaches the keywords; style never reaches
                    the sentence.

  challenge(level)  Caller picks only a level; everything else is drawn.
                      beginner      "Create a painting of {s1}"
                                    keywords [s1, tool]
                      intermediate  "... with {s1} and {s2} using {tool}"
                                    keywords [s1, s2, tool]
                      advanced      "... and {s3} using {tool} in the style of {style}"
                                    keywords [s1, s2, s3, tool, style]
                    Categories within one challenge are pairwise distinct.

Every draw goes through uniform_random() with the composer's RNG, so tests
can pass a seeded random.Random for reproducible output.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import TypeVar

from artspark.models import FilterSelection, Prompt
from artspark.prompts import CHALLENGE_TEMPLATES, IDEA_TEMPLATE, render_prompt
from artspark.taxonomy import LEVELS, MAX_CATEGORIES, RANDOM_MOOD, TAXONOMY, Taxonomy

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Rejection sampling gives up after RETRY_FACTOR * len(categories) draws per slot
RETRY_FACTOR = 10

_CHALLENGE_CATEGORY_COUNT = {"beginner": 1, "intermediate": 2, "advanced": 3}


class InvalidLevel(ValueError):
    """Raised for a challenge level outside beginner/intermediate/advanced."""


class CategoryLimitExceeded(ValueError):
    """Raised when a selection has more categories than its level allows."""


class SamplingExhausted(RuntimeError):
    """Raised when distinct categories cannot be drawn (taxonomy too small)."""


def uniform_random(items: Sequence[T], rng: random.Random) -> T:
    """Return one element of items, uniformly at random."""
    if not items:
        raise IndexError("cannot sample from an empty sequence")
    return items[rng.randrange(len(items))]


def join_subjects(subjects: Sequence[str]) -> str:
    """Join subjects as "A", "A and B" or "A and B and C"."""
    return " and ".join(subjects)


class Composer:
    """Builds idea and challenge prompts from a taxonomy and an RNG.

    Args:
        taxonomy: Lookup tables. Defaults to the built-in taxonomy.
        rng:      Random source. Defaults to a fresh random.Random().
    """

    def __init__(self, taxonomy: Taxonomy = TAXONOMY, rng: random.Random | None = None) -> None:
        self.taxonomy = taxonomy
        self.rng = rng or random.Random()

    # ── Sampling primitives ─────────────────────────────────

    def sample_subject(self, category: str) -> str:
        subjects = self.taxonomy.subjects_of(category)
        if not subjects:
            return category
        return uniform_random(subjects, self.rng)

    def sample_descriptor(self, mood: str) -> str:
        if mood == RANDOM_MOOD:
            mood = uniform_random(self.taxonomy.all_moods(), self.rng)
        descriptors = self.taxonomy.descriptors_of(mood)
        if not descriptors:
            return mood
        return uniform_random(descriptors, self.rng)

    def distinct_categories(self, count: int) -> list[str]:
        """Draw count pairwise-distinct categories by rejection sampling."""
        categories = self.taxonomy.all_categories()
        if len(categories) < count:
            raise SamplingExhausted(
                f"Need {count} distinct categories, taxonomy has {len(categories)}"
            )
        max_draws = RETRY_FACTOR * len(categories)
        picked: list[str] = []
        for _ in range(count):
            for _ in range(max_draws):
                candidate = uniform_random(categories, self.rng)
                if candidate not in picked:
                    picked.append(candidate)
                    break
            else:
                raise SamplingExhausted(
                    f"No distinct category after {max_draws} draws"
                )
        return picked

    # ── Entry points ────────────────────────────────────────

    def idea(self, selection: FilterSelection) -> Prompt:
        cap = MAX_CATEGORIES[selection.level]
        if len(selection.category) > cap:
            raise CategoryLimitExceeded(
                f"Level {selection.level!r} allows at most {cap} categories"
            )

        subjects = [self.sample_subject(category) for category in selection.category]
        descriptor = self.sample_descriptor(selection.mood)
        sentence = render_prompt(IDEA_TEMPLATE, {
            "descriptor": descriptor,
            "subjects": join_subjects(subjects),
        })

        keywords = list(subjects)
        if selection.style:
            keywords.append(selection.style)

        logger.debug("idea level=%s subjects=%s descriptor=%s", selection.level, subjects, descriptor)
        return Prompt(sentence=sentence, keywords=keywords)

    def challenge(self, level: str) -> Prompt:
        if level not in LEVELS:
            raise InvalidLevel(f"Unknown skill level: {level!r}")

        tool = uniform_random(self.taxonomy.all_tools(), self.rng)
        categories = self.distinct_categories(_CHALLENGE_CATEGORY_COUNT[level])
        subjects = [self.sample_subject(category) for category in categories]

        context: dict[str, str] = {"tool": tool}
        for i, subject in enumerate(subjects, start=1):
            context[f"subject{i}"] = subject
        keywords = [*subjects, tool]

        if level == "advanced":
            style = uniform_random(self.taxonomy.all_styles(), self.rng)
            context["style"] = style
            keywords.append(style)

        sentence = render_prompt(CHALLENGE_TEMPLATES[level], context)
        logger.debug("challenge level=%s categories=%s tool=%s", level, categories, tool)
        return Prompt(sentence=sentence, keywords=keywords)


_default = Composer()


def compose_idea(selection: FilterSelection) -> Prompt:
    """Idea-mode prompt using the default composer."""
    return _default.idea(selection)


def compose_challenge(level: str) -> Prompt:
    """Challenge-mode prompt using the default composer."""
    return _default.challenge(level)
