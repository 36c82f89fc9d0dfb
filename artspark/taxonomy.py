"""Static subject/mood/style/tool tables.

The tables are built once at import and never change afterwards, so any
number of requests can read them concurrently without locking.

  categories  Category id → concrete subjects (nouns / noun phrases)
  moods       Mood id → descriptive adjectives
  styles      Art-style labels (used as photo keywords, never expanded)
  tools       Art media (challenge mode only)

The pseudo-mood "random" is not a key; the composer resolves it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced")

# Max categories a caller may pick per level
MAX_CATEGORIES: Mapping[str, int] = MappingProxyType({
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
})

RANDOM_MOOD = "random"


class UnknownCategory(KeyError):
    """Raised for a category id outside the taxonomy."""


class UnknownMood(KeyError):
    """Raised for a mood id outside the taxonomy."""


_SUBJECTS: dict[str, tuple[str, ...]] = {
    "nature": (
        "dog", "cat", "mouse", "lion", "seal", "whale", "stingray", "elephant",
        "tiger", "bird", "raccoon", "bear", "fox", "rabbit", "squirrel", "deer",
        "penguin", "lizard", "bee", "butterfly", "peacock", "horse", "pig", "cow",
        "crocodile", "duck", "goat", "eagle", "giraffe", "oak tree", "pine tree",
        "waterfall", "mushroom", "fern", "owl", "cabin", "canopy", "lake",
        "pebble", "grass field", "wildflowers", "stream", "hills", "sheep",
        "windmill", "meadow", "rose", "sunflower", "tulip", "orchid", "lily",
        "daisy", "cherry blossom", "lavender", "peony", "iris", "peak", "valley",
        "cliff", "cave", "glacier", "hiking trail", "pine forest", "wave",
        "coral reef", "dolphin", "jellyfish",
    ),
    "fantasy": (
        "elf", "fairy", "fae", "goblin", "dragon", "unicorn", "orc", "wizard",
        "witch", "necromancer", "dwarf", "siren", "mermaid", "merman", "pegasus",
        "cyclops", "nine-tailed fox", "vampire", "werewolf", "old god", "saint",
        "angel", "goddess", "forgotten god", "kraken", "banshee", "griffin",
        "phoenix", "centaur", "chimera", "Sun Wukong", "mummy",
    ),
    "objects": (
        "chair", "stool", "dining table", "lamp", "standing desk", "murphy bed",
        "old sofa", "cup of tea", "stack of books", "pile of clothes",
        "broken glass", "reading glasses", "old camera", "typewriter",
        "teleprompter", "kitchen knife", "sword", "axe", "hammer", "microphone",
        "guitar", "piano", "violin", "drum set", "flute", "kite", "balloon",
        "teddy bear", "heater", "bottle of champagne", "soda can",
        "pair of sandals", "old shoe", "leather wallet", "handbag",
        "fountain pen", "ballpoint pen", "open window", "old swing", "computer",
        "smartphone", "satellite", "circuit", "hologram", "VR headset",
        "solar panel", "rocket", "laser", "flying car", "car", "building",
        "space elevator", "laptop", "notebook", "treasure chest", "submarine",
        "sports car", "vintage truck", "motorcycle", "sailboat", "helicopter",
        "train", "bicycle", "hot air balloon",
    ),
    "food": (
        "croissant", "matcha latte", "cappuccino", "latte macchiato", "gelato",
        "pizza", "spaghetti", "sushi", "ramen", "sandwich", "cake", "cookie",
        "candy", "orange", "apple", "tropical fruit", "cocktail", "waffle",
        "pancake", "beef roast", "salad", "soup", "oyster", "turkey", "milk",
        "beer",
    ),
    "worlds": (
        "outer space", "galaxy", "inside of a spaceship", "mountains", "volcano",
        "ancient city", "futuristic city", "city", "savannah",
        "cyberpunk neighborhood", "medieval village", "hamlet",
        "stone age village", "futuristic ruins", "underwater city", "canyon",
        "tropical forest", "winter wonderland", "summer island", "salt mine",
        "gold mine", "Cold War meeting room", "office", "library",
        "elementary school", "urban jungle", "suburban area", "shipwreck",
        "inside of a submarine",
    ),
    "architecture": (
        "cathedral", "modern house", "bridge", "tower", "pavilion", "courtyard",
        "archway", "dome", "spiral staircase", "glass building", "shelter",
        "underground train", "underground station", "bus stop", "temple",
        "mosque", "lighthouse", "wind turbine", "city park", "car park", "cafe",
        "restaurant", "street vendor", "market",
    ),
    "character": (
        "singer", "ballerina", "dancer", "musician", "magician", "office worker",
        "software developer", "painter", "writer", "photographer", "chef",
        "waiter", "waitress", "queen", "king", "prince", "princess", "soldier",
        "knight", "firefighter", "salesman", "doctor", "nurse", "teacher",
        "athlete", "scientist", "politician", "housewife", "homeless person",
        "thief", "detective", "spy", "astronaut", "blacksmith", "fisherman",
        "farmer",
    ),
    "abstract": (
        "symbol of hope", "symbol of dream", "symbol of despair",
        "symbol of anger", "symbol of joy", "symbol of sadness", "symbol of love",
        "symbol of hate", "symbol of fear", "symbol of courage",
        "symbol of curiosity", "symbol of ambition", "symbol of desire",
        "symbol of grief", "symbol of envy", "symbol of pride",
        "symbol of anxiety", "symbol of chaos", "symbol of void",
        "symbol of serenity",
    ),
}

_DESCRIPTORS: dict[str, tuple[str, ...]] = {
    "soft": ("melancholic", "romantic", "lonely"),
    "dark": ("noir", "eerie", "dystopian", "gritty", "mysterious"),
    "wild": ("chaotic", "whimsical", "dreamy", "surreal"),
    "epic": ("majestic", "dramatic", "utopian", "epic"),
}

_STYLES: tuple[str, ...] = (
    "manga", "3d", "2d", "ink-wash", "cartoon", "chibi", "realism",
    "photorealistic", "surrealism", "abstract", "contemporary", "minimalist",
    "impressionist", "expressionist", "cubist", "pop-art", "line-drawing",
    "caricature", "minimalism", "sketch",
)

_TOOLS: tuple[str, ...] = (
    "watercolor", "acrylic paint", "oil paint", "colored pencils", "charcoal",
    "pastels", "digital art", "ink", "gouache", "markers", "graphite pencil",
    "pen and ink", "tempera", "spray paint", "chalk", "crayons",
)


def _freeze(table: Mapping[str, Any]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({key: tuple(values) for key, values in table.items()})


@dataclass(frozen=True)
class Taxonomy:
    """Read-only lookup tables.

    Tables are not checked for emptiness; an empty subject or descriptor
    list is tolerated and handled by the composer's fallbacks.
    """

    subjects: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: _freeze(_SUBJECTS))
    descriptors: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: _freeze(_DESCRIPTORS))
    styles: tuple[str, ...] = _STYLES
    tools: tuple[str, ...] = _TOOLS

    @classmethod
    def from_tables(
        cls,
        subjects: Mapping[str, Any],
        descriptors: Mapping[str, Any],
        styles: tuple[str, ...] | list[str] = _STYLES,
        tools: tuple[str, ...] | list[str] = _TOOLS,
    ) -> Taxonomy:
        """Build a taxonomy from plain dicts/lists (used by tests)."""
        return cls(
            subjects=_freeze(subjects),
            descriptors=_freeze(descriptors),
            styles=tuple(styles),
            tools=tuple(tools),
        )

    def subjects_of(self, category: str) -> tuple[str, ...]:
        try:
            return self.subjects[category]
        except KeyError:
            raise UnknownCategory(category) from None

    def descriptors_of(self, mood: str) -> tuple[str, ...]:
        try:
            return self.descriptors[mood]
        except KeyError:
            raise UnknownMood(mood) from None

    def all_categories(self) -> tuple[str, ...]:
        return tuple(self.subjects)

    def all_moods(self) -> tuple[str, ...]:
        return tuple(self.descriptors)

    def all_styles(self) -> tuple[str, ...]:
        return self.styles

    def all_tools(self) -> tuple[str, ...]:
        return self.tools

    def describe(self) -> dict[str, Any]:
        """JSON-ready summary of every selectable option."""
        return {
            "levels": [
                {"value": level, "max_categories": MAX_CATEGORIES[level]}
                for level in LEVELS
            ],
            "categories": list(self.all_categories()),
            "moods": [*self.all_moods(), RANDOM_MOOD],
            "styles": list(self.all_styles()),
            "tools": list(self.all_tools()),
        }


TAXONOMY = Taxonomy()

# Module-level shortcuts onto the default tables
subjects_of = TAXONOMY.subjects_of
descriptors_of = TAXONOMY.descriptors_of
all_categories = TAXONOMY.all_categories
all_moods = TAXONOMY.all_moods
all_styles = TAXONOMY.all_styles
all_tools = TAXONOMY.all_tools
