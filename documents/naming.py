"""Project identity derived from a configuration: display name and description."""

import re

from contracts.game_config import GameConfig
from contracts.options import option_label, option_labels
from contracts.website_config import WebsiteConfig
from .templates import UNSPECIFIED

MAX_NAME_LENGTH = 60

_SENTENCE_END = re.compile(r"[.!?]")


def game_name(config: GameConfig) -> str:
    """First sentence of the elevator pitch, else '<Theme> <Genre> Game'.

    Falls back to 'Untitled Game' when neither a pitch nor a theme or genre
    is configured.
    """
    first_sentence = _SENTENCE_END.split(config.elevator_pitch, maxsplit=1)[0].strip()
    if first_sentence:
        return first_sentence[:MAX_NAME_LENGTH].strip()

    words = []
    if config.themes:
        words.append(option_label(config.themes[0]))
    if config.genres:
        words.append(option_label(config.genres[0]))
    if not words:
        return "Untitled Game"
    return " ".join(words + ["Game"])


def game_description(config: GameConfig) -> str:
    """Genre labels, dimension and engine joined with ' | '."""
    parts = [
        option_labels(config.genres),
        option_label(config.dimension),
        option_label(config.engine),
    ]
    return " | ".join(part for part in parts if part)


def website_name(config: WebsiteConfig) -> str:
    return config.site_name.strip() or UNSPECIFIED


def website_description(config: WebsiteConfig) -> str:
    parts = [
        option_labels(config.website_types),
        option_label(config.industry),
        option_label(config.framework),
    ]
    return " | ".join(part for part in parts if part)
