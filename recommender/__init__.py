"""Recommendation Engine: per-dimension rule tables, ranking and capping."""

from .rules import RecommendationRule, rank_and_cap
from .game_rules import GAME_RECOMMENDATIONS
from .website_rules import WEBSITE_RECOMMENDATIONS
from .engine import (
    RecommendationEngine,
    recommend,
    recommend_all,
    recommend_ai_providers,
    recommend_features,
    recommend_security,
    recommend_deployment,
    recommend_integrations,
    recommend_stack,
)

__all__ = [
    # Rules
    "RecommendationRule",
    "rank_and_cap",
    "GAME_RECOMMENDATIONS",
    "WEBSITE_RECOMMENDATIONS",
    # Engine
    "RecommendationEngine",
    "recommend",
    "recommend_all",
    "recommend_ai_providers",
    "recommend_features",
    "recommend_security",
    "recommend_deployment",
    "recommend_integrations",
    "recommend_stack",
]
