"""Recommendation Engine: ranked suggestions across six independent dimensions."""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Union

from config import DIMENSIONS, settings
from contracts.game_config import GameConfig
from contracts.report_contracts import RecommendationSet
from contracts.website_config import WebsiteConfig
from .game_rules import GAME_RECOMMENDATIONS
from .rules import RecommendationRule, rank_and_cap
from .website_rules import WEBSITE_RECOMMENDATIONS

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """Evaluates per-dimension rule tables against a validated configuration.

    Every dimension is computed independently; a dimension never reads
    another dimension's output.
    """

    def __init__(self, limits: Optional[Mapping[str, int]] = None):
        """Initialize the engine.

        Args:
            limits: Per-dimension caps; defaults to settings.recommendation_limits
        """
        self.limits: Dict[str, int] = dict(settings.recommendation_limits)
        if limits:
            self.limits.update(limits)

    def rules_for(self, config: Union[GameConfig, WebsiteConfig], dimension: str) -> Sequence[RecommendationRule]:
        if dimension not in DIMENSIONS:
            raise KeyError(f"Unknown recommendation dimension '{dimension}'")
        if isinstance(config, GameConfig):
            return GAME_RECOMMENDATIONS[dimension]
        if isinstance(config, WebsiteConfig):
            return WEBSITE_RECOMMENDATIONS[dimension]
        raise TypeError(f"Cannot recommend for {type(config).__name__}; validate the configuration first")

    def recommend(self, config: Union[GameConfig, WebsiteConfig], dimension: str) -> List[str]:
        """Ranked, capped suggestions for one dimension."""
        rules = self.rules_for(config, dimension)
        matched = [rule for rule in rules if rule.when(config)]
        result = rank_and_cap(matched, self.limits.get(dimension, 5))
        logger.debug(
            "%s/%s: %d of %d rules matched, %d kept",
            config.kind, dimension, len(matched), len(rules), len(result),
        )
        return result

    def recommend_all(self, config: Union[GameConfig, WebsiteConfig]) -> RecommendationSet:
        return RecommendationSet(**{dimension: self.recommend(config, dimension) for dimension in DIMENSIONS})


# Default engine instance
_engine = RecommendationEngine()


def recommend_ai_providers(config: Union[GameConfig, WebsiteConfig]) -> List[str]:
    return _engine.recommend(config, "aiProviders")


def recommend_features(config: Union[GameConfig, WebsiteConfig]) -> List[str]:
    return _engine.recommend(config, "features")


def recommend_security(config: Union[GameConfig, WebsiteConfig]) -> List[str]:
    return _engine.recommend(config, "security")


def recommend_deployment(config: Union[GameConfig, WebsiteConfig]) -> List[str]:
    return _engine.recommend(config, "deployment")


def recommend_integrations(config: Union[GameConfig, WebsiteConfig]) -> List[str]:
    return _engine.recommend(config, "integrations")


def recommend_stack(config: Union[GameConfig, WebsiteConfig]) -> List[str]:
    return _engine.recommend(config, "stack")


def recommend(config: Union[GameConfig, WebsiteConfig], dimension: str) -> List[str]:
    """Convenience function for a single dimension by name."""
    return _engine.recommend(config, dimension)


def recommend_all(config: Union[GameConfig, WebsiteConfig]) -> RecommendationSet:
    """Convenience function for all six dimensions."""
    return _engine.recommend_all(config)
