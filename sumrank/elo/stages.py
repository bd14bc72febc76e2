"""
Stage Label Classification

Round labels arrive as free text ("Group A - 2", "Quarter-finals",
"Round of 16", "3rd Place Final"). They are normalized with an ordered
keyword table: the first keyword found in the lowercased label wins, so
more specific keywords ("quarter", "semi") sit above "final".
"""

from enum import Enum


class Stage(str, Enum):
    GROUP = "group"
    ROUND_OF_16 = "round_of_16"
    QUARTER = "quarter"
    SEMI = "semi"
    FINAL = "final"
    THIRD_PLACE = "third_place"
    PLAY_OFF = "play_off"
    UNSPECIFIED = "unspecified"


STAGE_KEYWORDS = (
    ("third", Stage.THIRD_PLACE),
    ("3rd", Stage.THIRD_PLACE),
    ("quarter", Stage.QUARTER),
    ("semi", Stage.SEMI),
    ("play-off", Stage.PLAY_OFF),
    ("playoff", Stage.PLAY_OFF),
    ("1/16", Stage.ROUND_OF_16),
    ("1/8", Stage.ROUND_OF_16),
    ("1/4", Stage.QUARTER),
    ("1/2", Stage.SEMI),
    ("round of", Stage.ROUND_OF_16),
    ("final", Stage.FINAL),
    ("group", Stage.GROUP),
    ("gr.", Stage.GROUP),
    ("league", Stage.GROUP),
    ("regular season", Stage.GROUP),
)

KNOCKOUT_KEYWORDS = ("round of", "quarter", "semi", "final", "play-off", "playoff")
KNOCKOUT_STAGES = frozenset({Stage.ROUND_OF_16, Stage.QUARTER, Stage.SEMI, Stage.FINAL, Stage.PLAY_OFF})

# Stages that carry the higher weight in final tournaments
LATE_STAGES = frozenset({Stage.QUARTER, Stage.SEMI, Stage.FINAL, Stage.THIRD_PLACE})
NATIONS_LEAGUE_LATE_STAGES = frozenset({
    Stage.QUARTER, Stage.SEMI, Stage.FINAL, Stage.THIRD_PLACE, Stage.PLAY_OFF,
})


def normalize_stage(label) -> Stage:
    """Map a free-text round label to a Stage; empty or unknown -> UNSPECIFIED."""
    if isinstance(label, Stage):
        return label
    if not isinstance(label, str) or not label.strip():
        return Stage.UNSPECIFIED
    text = label.lower()
    for keyword, stage in STAGE_KEYWORDS:
        if keyword in text:
            return stage
    return Stage.UNSPECIFIED


def is_knockout_stage(label) -> bool:
    """True if the label names an elimination round. Missing label -> False."""
    if isinstance(label, Stage):
        return label in KNOCKOUT_STAGES
    if not isinstance(label, str) or not label:
        return False
    text = label.lower()
    return any(keyword in text for keyword in KNOCKOUT_KEYWORDS)
