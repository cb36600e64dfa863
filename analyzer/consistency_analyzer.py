"""Consistency analysis for validated configurations.

Produces a completeness score, missing-requirement flags and conflict flags
from the per-variant rule tables, plus a complexity rating, a feasibility
verdict and improvement suggestions.
"""

import logging
from typing import List, Sequence, Union

from contracts.base import is_set
from contracts.game_config import GameConfig
from contracts.options import option_label
from contracts.report_contracts import (
    AnalysisReport,
    ComplexityRating,
    ConsistencyConflict,
    Feasibility,
    MissingRequirement,
    Severity,
)
from contracts.website_config import WebsiteConfig
from .complexity import configured_sections, rate_game, rate_website
from .game_rules import GAME_CONFLICTS, GAME_REQUIREMENTS, GAME_SUGGESTIONS, GAME_WEIGHTS
from .rules import ConflictRule, RequirementRule, WeightedField
from .website_rules import WEBSITE_CONFLICTS, WEBSITE_REQUIREMENTS, WEBSITE_SUGGESTIONS, WEBSITE_WEIGHTS

logger = logging.getLogger(__name__)


def completeness(config, weights: Sequence[WeightedField]) -> float:
    """Weighted share of significant fields that differ from their defaults."""
    total = sum(field.weight for field in weights)
    if total <= 0:
        return 0.0
    filled = sum(field.weight for field in weights if is_set(config, field.path))
    return round(filled / total, 4)


def feasibility(conflicts: Sequence[ConsistencyConflict]) -> Feasibility:
    errors = sum(1 for c in conflicts if c.severity == Severity.ERROR)
    warnings = sum(1 for c in conflicts if c.severity == Severity.WARNING)
    if errors >= 2:
        return Feasibility.LOW
    if errors == 1 or warnings > 0:
        return Feasibility.MEDIUM
    return Feasibility.HIGH


class ConsistencyAnalyzer:
    """Evaluates a Configuration against the rule tables of its variant.

    Tables are walked in declaration order, so flag order is stable across
    runs and Python versions.
    """

    GAME_TABLES = (GAME_WEIGHTS, GAME_REQUIREMENTS, GAME_CONFLICTS, GAME_SUGGESTIONS)
    WEBSITE_TABLES = (WEBSITE_WEIGHTS, WEBSITE_REQUIREMENTS, WEBSITE_CONFLICTS, WEBSITE_SUGGESTIONS)

    def analyze(self, config: Union[GameConfig, WebsiteConfig]) -> AnalysisReport:
        """Analyze a validated configuration.

        Args:
            config: A GameConfig or WebsiteConfig produced by the validator

        Returns:
            AnalysisReport with score, flags, complexity and summary
        """
        if isinstance(config, GameConfig):
            weights, requirements, conflicts, suggestions = self.GAME_TABLES
            rating = rate_game(config)
        elif isinstance(config, WebsiteConfig):
            weights, requirements, conflicts, suggestions = self.WEBSITE_TABLES
            rating = rate_website(config)
        else:
            raise TypeError(f"Cannot analyze {type(config).__name__}; validate the configuration first")

        missing = self.missing_requirements(config, requirements)
        found = self.conflicts(config, conflicts)
        advice = [rule.text for rule in suggestions if rule.when(config)]
        verdict = feasibility(found)

        if isinstance(config, GameConfig):
            summary = self._game_summary(config, rating, verdict, found, advice)
        else:
            summary = self._website_summary(config, rating)

        report = AnalysisReport(
            kind=config.kind,
            completeness=completeness(config, weights),
            missing_requirements=missing,
            conflicts=found,
            complexity=rating,
            feasibility=verdict,
            suggestions=advice,
            summary=summary,
        )
        logger.debug(
            "Analyzed %s config: completeness=%.4f missing=%d conflicts=%d",
            config.kind, report.completeness, len(missing), len(found),
        )
        return report

    def missing_requirements(self, config, rules: Sequence[RequirementRule]) -> List[MissingRequirement]:
        flags = []
        for rule in rules:
            flag = rule.evaluate(config)
            if flag is not None:
                logger.debug("Requirement rule '%s' fired: %s", rule.name, flag.required_fields)
                flags.append(flag)
        return flags

    def conflicts(self, config, rules: Sequence[ConflictRule]) -> List[ConsistencyConflict]:
        flags = []
        for rule in rules:
            flag = rule.evaluate(config)
            if flag is not None:
                logger.debug("Conflict rule fired on %s/%s", rule.field_a, rule.field_b)
                flags.append(flag)
        return flags

    def _game_summary(
        self,
        config: GameConfig,
        rating: ComplexityRating,
        verdict: Feasibility,
        conflicts: Sequence[ConsistencyConflict],
        suggestions: Sequence[str],
    ) -> str:
        themes = ", ".join(option_label(t) for t in config.themes) or "unspecified theme"
        genres = ", ".join(option_label(g) for g in config.genres) or "unspecified genre"
        dimension = option_label(config.dimension) or "?D"
        errors = sum(1 for c in conflicts if c.severity == Severity.ERROR)

        summary = (
            f"This is a {rating.label.lower()} {dimension} {genres} game with {themes} themes, "
            f"targeting {len(config.platforms)} platform(s). "
            f"The project has a complexity score of {rating.score}/10 with an estimated scope of "
            f"{rating.scope_estimate}. Technical feasibility is {verdict.value}"
        )
        if errors:
            summary += f" with {errors} critical issue(s) to resolve"
        summary += "."
        if suggestions:
            summary += f" There are {len(suggestions)} improvement suggestion(s) to consider."
        return summary

    def _website_summary(self, config: WebsiteConfig, rating: ComplexityRating) -> str:
        types = ", ".join(option_label(t) for t in config.website_types) or "unspecified type"
        framework = option_label(config.framework) or "an unspecified framework"
        sections, features = configured_sections(config)
        return (
            f"This is a {rating.label.lower()} {types} website built with {framework}. "
            f"The project has a complexity score of {rating.score}/10 and an estimated effort of "
            f"{rating.scope_estimate}, with {sections} configured section(s) covering "
            f"{features} feature(s)."
        )


# Default analyzer instance
_analyzer = ConsistencyAnalyzer()


def analyze(config: Union[GameConfig, WebsiteConfig]) -> AnalysisReport:
    """Convenience function to analyze a validated configuration."""
    return _analyzer.analyze(config)
