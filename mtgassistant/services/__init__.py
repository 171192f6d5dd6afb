from mtgassistant.services.reports import (
    BoosterContents,
    booster_contents,
    format_boosters,
    format_card_line,
    format_collection,
    format_deck_distance,
    format_set_completion,
)

__all__ = [
    "BoosterContents",
    "booster_contents",
    "format_boosters",
    "format_card_line",
    "format_collection",
    "format_deck_distance",
    "format_set_completion",
]
