from mtgassistant.analysis.completion import PLAYSET_SIZE, calculate_set_completion
from mtgassistant.analysis.distance import (
    CardNotAvailableError,
    calculate_deck_distance,
    parse_expansions,
)

__all__ = [
    "PLAYSET_SIZE",
    "CardNotAvailableError",
    "calculate_deck_distance",
    "calculate_set_completion",
    "parse_expansions",
]
