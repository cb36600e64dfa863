"""The Configuration tagged union and its variant registry."""

from enum import Enum
from typing import Annotated, Dict, Type, Union

from pydantic import Field

from .base import ConfigSection
from .game_config import GameConfig
from .website_config import WebsiteConfig


class Variant(str, Enum):
    """Discriminator tag carried in the `kind` field."""
    GAME = "game"
    WEBSITE = "website"


Configuration = Annotated[Union[GameConfig, WebsiteConfig], Field(discriminator="kind")]

VARIANT_MODELS: Dict[Variant, Type[ConfigSection]] = {
    Variant.GAME: GameConfig,
    Variant.WEBSITE: WebsiteConfig,
}


def variant_of(config: Union[GameConfig, WebsiteConfig]) -> Variant:
    return Variant(config.kind)
