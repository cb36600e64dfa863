"""Complexity scoring for game and website configurations."""

import math
from typing import List, Tuple

from contracts.game_config import GameConfig
from contracts.options import (
    Dimension,
    Framework,
    Genre,
    is_chosen,
    LevelGeneration,
    PlayerMode,
    SearchProvider,
    VoiceActing,
    WebsiteType,
    WorldScope,
)
from contracts.report_contracts import ComplexityRating
from contracts.website_config import WebsiteConfig

DIMENSION_POINTS = {Dimension.THREE_D: 3, Dimension.TWO_AND_HALF_D: 2, Dimension.TWO_D: 1}
WORLD_SCOPE_POINTS = {WorldScope.MASSIVE: 3, WorldScope.LARGE: 2, WorldScope.MEDIUM: 1}
PLAYER_MODE_POINTS = {
    PlayerMode.MMO: 5,
    PlayerMode.ONLINE_MULTIPLAYER: 3,
    PlayerMode.ASYNC_MULTIPLAYER: 2,
    PlayerMode.LOCAL_MULTIPLAYER: 1,
    PlayerMode.CO_OP: 1,
}

# (upper bound of score, label, scope estimate)
GAME_BANDS: Tuple[Tuple[int, str, str], ...] = (
    (2, "Simple", "1-3 months for a solo developer"),
    (4, "Moderate", "3-6 months for a solo developer, or 2-3 months for a small team"),
    (6, "Complex", "6-12 months for a small team (2-4 developers)"),
    (8, "Very Complex", "12-24 months for a medium team (5-10 developers)"),
    (10, "Extremely Complex", "24+ months for a large team (10+ developers)"),
)

WEBSITE_BANDS: Tuple[Tuple[int, str, str], ...] = (
    (3, "Simple", "1-2 weeks"),
    (5, "Moderate", "2-4 weeks"),
    (7, "Complex", "1-2 months"),
    (10, "Enterprise", "2-4 months"),
)


def _clamp(score: int) -> int:
    return min(max(score, 1), 10)


def _band(score: int, bands: Tuple[Tuple[int, str, str], ...]) -> ComplexityRating:
    for upper, label, scope in bands:
        if score <= upper:
            break
    return ComplexityRating(score=score, label=label, scope_estimate=scope)


def game_complexity_points(config: GameConfig) -> int:
    points = DIMENSION_POINTS.get(config.dimension, 0)
    points += min(len(config.platforms), 3)

    if Genre.RPG in config.genres:
        points += 2
    if Genre.SIMULATION in config.genres:
        points += 1
    if len(config.genres) > 3:
        points += 1

    points += PLAYER_MODE_POINTS.get(config.player_mode, 0)
    points += WORLD_SCOPE_POINTS.get(config.world_scope, 0)
    points += min(len(config.core_mechanics) + len(config.secondary_mechanics), 4)

    if config.level_generation in (LevelGeneration.PROCEDURAL, LevelGeneration.HYBRID):
        points += 1
    if config.voice_acting == VoiceActing.FULL:
        points += 1
    points += min(len(config.social_features) // 3, 2)
    if config.content_plan.mvp_timeline or config.content_plan.full_launch_timeline:
        points += 1
    return points


def rate_game(config: GameConfig) -> ComplexityRating:
    """Scale raw points (about 30 for a maximal game) onto 1..10."""
    points = game_complexity_points(config)
    score = _clamp(math.floor(points * 10 / 30 + 0.5))
    return _band(score, GAME_BANDS)


def _integration_count(config: WebsiteConfig) -> int:
    selected: List[bool] = [
        is_chosen(config.email_provider),
        bool(config.analytics) and not any(a.value == "none" for a in config.analytics),
        is_chosen(config.monitoring),
        is_chosen(config.crm),
        is_chosen(config.chat_widget),
    ]
    return sum(selected)


def website_complexity_points(config: WebsiteConfig) -> int:
    types = config.website_types
    points = 0
    if len(types) > 2:
        points += 2
    if config.is_ecommerce:
        points += 3
    if WebsiteType.MARKETPLACE in types:
        points += 2
    if WebsiteType.SAAS_PRODUCT in types:
        points += 2
    if WebsiteType.WEBAPP in types:
        points += 1
    if WebsiteType.COMMUNITY in types:
        points += 1

    if config.framework == Framework.CUSTOM:
        points += 3
    elif config.framework is not None:
        points += 1

    if is_chosen(config.database):
        points += 1
    if is_chosen(config.auth):
        points += 1
    if len(config.auth_methods) > 3:
        points += 1

    if is_chosen(config.cms_provider):
        points += 1
    if config.i18n_enabled:
        points += 2
    if config.search_enabled and config.search_provider != SearchProvider.BUILT_IN:
        points += 1

    points += min(_integration_count(config), 3)

    if config.is_ecommerce:
        points += int(config.variants) + 2 * int(config.subscription_billing)
        points += int(config.international_shipping) + int(len(config.currencies) > 2)

    if config.is_business_service:
        points += len(config.business_modules)
        if is_chosen(config.directory_provider):
            points += 2

    if config.containerized:
        points += 1
    if len(config.environments) > 2:
        points += 1
    if len(config.distribution_channels) > 3:
        points += 1

    points += len(config.ai_features)
    return points


def rate_website(config: WebsiteConfig) -> ComplexityRating:
    return _band(_clamp(website_complexity_points(config)), WEBSITE_BANDS)


def configured_sections(config: WebsiteConfig) -> Tuple[int, int]:
    """Count configured website sections and the features they carry."""
    sections = 0
    features = 0
    if config.website_types:
        sections += 1
        features += len(config.website_types)
    for chosen in (config.framework is not None, is_chosen(config.database)):
        if chosen:
            sections += 1
            features += 1
    if is_chosen(config.auth):
        sections += 1
        features += len(config.auth_methods)
    for chosen in (config.hosting is not None, config.layout_style is not None, config.theme is not None):
        if chosen:
            sections += 1
            features += 1
    if config.content_types:
        sections += 1
        features += len(config.content_types)
    if config.is_ecommerce and config.payment_processor is not None:
        sections += 1
        features += 1
    features += (
        len(config.analytics) + len(config.page_structure)
        + len(config.ai_features) + len(config.distribution_channels)
    )
    return sections, features
