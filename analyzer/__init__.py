"""Consistency Analyzer: completeness, missing requirements, conflicts and complexity."""

from .rules import WeightedField, RequirementRule, ConflictRule, SuggestionRule
from .game_rules import GAME_WEIGHTS, GAME_REQUIREMENTS, GAME_CONFLICTS, GAME_SUGGESTIONS
from .website_rules import WEBSITE_WEIGHTS, WEBSITE_REQUIREMENTS, WEBSITE_CONFLICTS, WEBSITE_SUGGESTIONS
from .complexity import rate_game, rate_website
from .consistency_analyzer import ConsistencyAnalyzer, analyze, completeness, feasibility

__all__ = [
    # Rule types
    "WeightedField",
    "RequirementRule",
    "ConflictRule",
    "SuggestionRule",
    # Rule tables
    "GAME_WEIGHTS",
    "GAME_REQUIREMENTS",
    "GAME_CONFLICTS",
    "GAME_SUGGESTIONS",
    "WEBSITE_WEIGHTS",
    "WEBSITE_REQUIREMENTS",
    "WEBSITE_CONFLICTS",
    "WEBSITE_SUGGESTIONS",
    # Analysis
    "rate_game",
    "rate_website",
    "ConsistencyAnalyzer",
    "analyze",
    "completeness",
    "feasibility",
]
