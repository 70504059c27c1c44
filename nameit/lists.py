"""
Built-in word lists.

Two collections ship with nameit:
    - heroku: nature-flavoured words in the style of "autumn-waterfall"
    - modern: crisper, product-style words like "nimble-beacon"
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple


class Mode(str, Enum):
    """Built-in word collection to draw from."""
    modern = "modern"
    heroku = "heroku"


# Heroku-style adjectives (seasons, weather, texture)
HEROKU_ADJECTIVES = (
    "aged", "ancient", "autumn", "billowing", "bitter", "black", "blue", "bold",
    "broad", "broken", "calm", "cold", "cool", "crimson", "curly", "damp",
    "dark", "dawn", "delicate", "divine", "dry", "empty", "falling", "fancy",
    "flat", "floral", "fragrant", "frosty", "gentle", "green", "hidden", "holy",
    "icy", "jolly", "late", "lingering", "little", "lively", "long", "lucky",
    "misty", "morning", "muddy", "mute", "nameless", "noisy", "odd", "old",
    "orange", "patient", "plain", "polished", "proud", "purple", "quiet", "rapid",
    "raspy", "red", "restless", "rough", "round", "royal", "shiny", "shrill",
    "shy", "silent", "small", "snowy", "soft", "solitary", "sparkling", "spring",
    "square", "steep", "still", "summer", "super", "sweet", "throbbing", "tight",
    "tiny", "twilight", "wandering", "weathered", "white", "wild", "winter", "wispy",
    "withered", "yellow", "young",
)

# Heroku-style nouns (landscape, sky, water)
HEROKU_NOUNS = (
    "art", "band", "bar", "base", "bird", "block", "boat", "bonus",
    "bread", "breeze", "brook", "bush", "butterfly", "cake", "cell", "cherry",
    "cloud", "credit", "darkness", "dawn", "dew", "disk", "dream", "dust",
    "feather", "field", "fire", "firefly", "flower", "fog", "forest", "frog",
    "frost", "glade", "glitter", "grass", "hall", "hat", "haze", "heart",
    "hill", "king", "lab", "lake", "leaf", "limit", "math", "meadow",
    "mode", "moon", "morning", "mountain", "mouse", "mud", "night", "paper",
    "pine", "poetry", "pond", "queen", "rain", "recipe", "resonance", "rice",
    "river", "salad", "scene", "sea", "shadow", "shape", "silence", "sky",
    "smoke", "snow", "snowflake", "sound", "star", "sun", "sunset", "surf",
    "term", "thunder", "tooth", "tree", "truth", "union", "unit", "violet",
    "voice", "water", "waterfall", "wave", "wildflower", "wind", "wood",
)

# Modern adjectives (short, upbeat, product-like)
MODERN_ADJECTIVES = (
    "agile", "amber", "apt", "astral", "atomic", "brisk", "bright", "candid",
    "civic", "clever", "cobalt", "cosmic", "crisp", "daring", "deft", "eager",
    "electric", "elegant", "epic", "fluent", "focal", "fresh", "glossy", "golden",
    "grand", "happy", "humble", "hyper", "keen", "kinetic", "lucid", "lunar",
    "magnetic", "mellow", "modular", "neat", "nimble", "noble", "optic", "plucky",
    "polar", "prime", "quantum", "quick", "radiant", "rapid", "ready", "robust",
    "sharp", "sleek", "smart", "snappy", "solar", "sonic", "stellar", "steady",
    "sunny", "swift", "tidy", "tonal", "urban", "vast", "vivid", "witty",
    "zesty", "zen",
)

# Modern nouns (tools, structures, signals)
MODERN_NOUNS = (
    "anchor", "arc", "atlas", "axis", "beacon", "bolt", "bridge", "canvas",
    "cargo", "circuit", "cipher", "citadel", "comet", "compass", "core", "cosmos",
    "crane", "delta", "dock", "echo", "engine", "falcon", "flare", "forge",
    "frame", "galaxy", "gateway", "glyph", "grid", "harbor", "helix", "horizon",
    "hub", "kernel", "lantern", "lattice", "ledger", "lens", "matrix", "meteor",
    "nexus", "node", "nova", "orbit", "otter", "panda", "pixel", "prism",
    "pulse", "quasar", "radar", "relay", "rocket", "signal", "spark", "sphere",
    "summit", "tangent", "tensor", "vector", "vertex", "vortex", "wave", "zenith",
)


def builtin_lists(mode: Mode | str) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Return the (adjectives, nouns) pair for a built-in mode.

    Raises:
        ValueError: If mode is not a known Mode value
    """
    mode = Mode(mode)
    if mode is Mode.heroku:
        return HEROKU_ADJECTIVES, HEROKU_NOUNS
    return MODERN_ADJECTIVES, MODERN_NOUNS
