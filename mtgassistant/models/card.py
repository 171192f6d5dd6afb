from dataclasses import dataclass
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class Rarity(IntEnum):
    """Rarity tiers as encoded in the MTGA card resource file."""

    TOKEN = 0
    BASIC_LAND = 1
    COMMON = 2
    UNCOMMON = 3
    RARE = 4
    MYTHIC = 5


class CardAttributes(BaseModel):
    """
    One row of the MTGA cards resource file (``data_cards_*.mtga``).

    Only the fields used for indexing and reporting are mapped; the file
    carries many more (art ids, abilities, frame details) which are ignored.

    Attributes:
        id: Arena card id (``grpid``), unique per printing
        title_id: Reference into the localization table for the card name
        collector_number: Collector number within the set
        set_code: Expansion code (e.g., "WAR")
        rarity: Rarity tier, see ``Rarity``
        casting_cost: Mana cost in Arena notation (e.g., "o3oBoB")
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="grpid", ge=0)
    title_id: int = Field(alias="titleId", ge=0)
    collector_number: str = Field(default="", alias="CollectorNumber")
    set_code: str = Field(default="", alias="set")
    rarity: int = 0
    color_identity: tuple[int, ...] = Field(default=(), alias="colorIdentity")
    casting_cost: str = Field(default="", alias="castingcost")
    types: tuple[int, ...] = ()
    subtypes: tuple[int, ...] = ()
    supertypes: tuple[int, ...] = ()
    card_type_text_id: int = Field(default=0, alias="cardTypeTextId")
    subtype_text_id: int = Field(default=0, alias="subtypeTextId")


@dataclass(frozen=True, slots=True)
class Card:
    """
    A resolved card: localized name plus its attribute row.

    Cards are owned by the catalog that built them; lookups hand out
    references to the same instances.
    """

    name: str
    attributes: CardAttributes

    @property
    def id(self) -> int:
        return self.attributes.id

    @property
    def set_code(self) -> str:
        return self.attributes.set_code

    @property
    def rarity(self) -> int:
        return self.attributes.rarity

    @property
    def collector_number(self) -> str:
        return self.attributes.collector_number
