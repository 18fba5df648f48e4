"""Random, readable room names."""

from __future__ import annotations

import random
from typing import Optional

_ADJECTIVES = (
    "agile", "bold", "brave", "bright", "calm", "clever", "cosmic", "curious",
    "daring", "eager", "fancy", "gentle", "giant", "happy", "humble", "jolly",
    "keen", "lively", "lucky", "mellow", "mighty", "nimble", "noble", "proud",
    "quiet", "rapid", "shy", "silent", "swift", "tidy", "vivid", "witty",
)

_COLORS = (
    "amber", "aqua", "azure", "beige", "black", "blue", "bronze", "coral",
    "crimson", "cyan", "gold", "gray", "green", "indigo", "ivory", "jade",
    "lavender", "lime", "magenta", "maroon", "navy", "olive", "orange", "pink",
    "plum", "purple", "red", "salmon", "silver", "teal", "violet", "white",
)

_NAMES = (
    "badger", "beaver", "bison", "cheetah", "condor", "coyote", "dolphin",
    "eagle", "falcon", "ferret", "gazelle", "heron", "jaguar", "koala",
    "lemur", "lynx", "marmot", "meerkat", "otter", "owl", "panda", "puffin",
    "raven", "salmon", "seal", "sparrow", "tiger", "turtle", "walrus", "wolf",
)


def generate_base_name(rng: Optional[random.Random] = None) -> str:
    """Return an adjective_color_name combination."""
    chooser = rng or random
    return "_".join(chooser.choice(words) for words in (_ADJECTIVES, _COLORS, _NAMES))


def generate_room_name(rng: Optional[random.Random] = None) -> str:
    """Return a base name followed by a dash and a three-digit number."""
    chooser = rng or random
    base = generate_base_name(chooser)
    number = chooser.randrange(100, 1000)
    return f"{base}-{number}"