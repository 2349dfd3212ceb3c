from enum import Enum


class HighlightCategory(str, Enum):
    NEUTRAL = "neutral"
    PASSING = "passing"
    FAILING = "failing"
    MUTED = "muted"


class Outcome(str, Enum):
    PASSING = "passing"
    FAILING = "failing"
