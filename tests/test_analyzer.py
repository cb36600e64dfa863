"""Tests for the Consistency Analyzer."""

import pytest

from analyzer import (
    GAME_WEIGHTS,
    WEBSITE_WEIGHTS,
    ConflictRule,
    ConsistencyAnalyzer,
    RequirementRule,
    analyze,
    completeness,
    feasibility,
    rate_game,
    rate_website,
)
from analyzer.rules import always
from contracts import ConsistencyConflict, Feasibility, Severity
from validator import validate_config


def game(**fields):
    return validate_config(dict(fields), "game")


def website(**fields):
    return validate_config(dict(fields), "website")


FANTASY_RPG = {"themes": ["fantasy"], "genres": ["rpg"], "dimension": "3d", "engine": "unity"}


class TestCompleteness:
    """Test the weighted completeness score."""

    def test_empty_configs_score_zero(self):
        assert analyze(game()).completeness == 0.0
        assert analyze(website()).completeness == 0.0

    def test_score_in_unit_interval(self):
        report = analyze(game(**FANTASY_RPG))
        assert 0.0 < report.completeness < 1.0
        assert report.completeness == pytest.approx(10 / 32)

    def test_monotonic_in_filled_fields(self):
        fields = {}
        previous = analyze(game()).completeness
        for name, selection in (
            ("themes", ["horror"]),
            ("genres", ["survival"]),
            ("engine", "godot"),
            ("artStyle", "pixel-art"),
            ("soundEffects", ["foley"]),
        ):
            fields[name] = selection
            score = analyze(game(**fields)).completeness
            assert score > previous
            previous = score

    def test_unweighted_fields_do_not_count(self):
        assert analyze(game(offlineMode=True)).completeness == 0.0

    def test_empty_weight_table(self):
        assert completeness(game(), ()) == 0.0

    def test_weights_reference_real_fields(self):
        # Every path must resolve; an unknown path raises KeyError
        completeness(game(), GAME_WEIGHTS)
        completeness(website(), WEBSITE_WEIGHTS)


class TestMissingRequirements:
    """Test conditional requirement flags."""

    def test_empty_game_requirements(self):
        names = [flag.rule for flag in analyze(game()).missing_requirements]
        assert names == [
            "theme-required",
            "genre-required",
            "engine-required",
            "dimension-required",
            "platforms-required",
        ]

    def test_online_play_needs_network_settings(self):
        report = analyze(game(**FANTASY_RPG, platforms=["pc-windows"], playerMode="online-multiplayer"))
        flags = {flag.rule: flag for flag in report.missing_requirements}
        assert flags["network-model-for-online-play"].required_fields == ["multiplayer.networkModel"]
        assert flags["network-model-for-online-play"].trigger_fields == ["playerMode"]
        assert "sync-type-for-online-play" in flags
        assert "bandwidth-for-online-play" in flags

    def test_requirement_cleared_when_filled(self):
        report = analyze(game(
            **FANTASY_RPG,
            platforms=["pc-windows"],
            playerMode="online-multiplayer",
            multiplayer={"networkModel": "client-server", "syncType": "state-sync"},
            technicalConstraints={"networkBandwidth": "256 kbps"},
        ))
        assert report.missing_requirements == []

    def test_ecommerce_needs_payment_processor(self):
        report = analyze(website(siteName="Shop", websiteTypes=["ecommerce"], framework="nextjs"))
        assert [flag.rule for flag in report.missing_requirements] == ["payment-processor-for-ecommerce"]

    def test_i18n_needs_languages(self):
        report = analyze(website(websiteTypes=["blog"], framework="astro", i18nEnabled=True))
        assert "languages-for-i18n" in [flag.rule for flag in report.missing_requirements]

    def test_rule_reports_only_missing_paths(self):
        rule = RequirementRule("pair", always, ("themes", "genres"), "Need both.")
        flag = rule.evaluate(game(themes=["fantasy"]))
        assert flag.required_fields == ["genres"]
        assert rule.evaluate(game(themes=["fantasy"], genres=["rpg"])) is None


class TestConflicts:
    """Test conflict flags and feasibility."""

    def test_scenario_has_no_conflicts(self):
        report = analyze(game(**FANTASY_RPG))
        assert report.conflicts == []
        assert report.feasibility == Feasibility.HIGH

    def test_vr_in_2d_is_an_error(self):
        report = analyze(game(platforms=["vr"], dimension="2d"))
        assert [c.fields for c in report.conflicts] == [("platforms", "dimension")]
        assert report.conflicts[0].severity == Severity.ERROR
        assert report.feasibility == Feasibility.MEDIUM

    def test_two_errors_lower_feasibility(self):
        report = analyze(game(platforms=["vr"], dimension="2d", playerMode="mmo", engine="phaser3"))
        assert report.error_count == 2
        assert report.feasibility == Feasibility.LOW

    def test_conflict_description_names_values(self):
        report = analyze(game(offlineMode=True, playerMode="online-multiplayer"))
        descriptions = [c.description for c in report.conflicts]
        assert "Offline mode cannot support the Online Multiplayer play mode." in descriptions

    def test_warning_gives_medium_feasibility(self):
        report = analyze(game(artStyle="pixel-art", cameraStyle="first-person"))
        assert [c.severity for c in report.conflicts] == [Severity.WARNING]
        assert report.feasibility == Feasibility.MEDIUM

    def test_ssl_off_for_shop(self):
        report = analyze(website(websiteTypes=["ecommerce"], ssl=False))
        assert ("ssl", "websiteTypes") in [c.fields for c in report.conflicts]

    def test_false_is_a_matchable_value(self):
        rule = ConflictRule("offlineMode", {False}, "pwaSupport", {False}, "Both off ({a}/{b}).")
        conflict = rule.evaluate(game())
        assert conflict.description == "Both off (disabled/disabled)."

    def test_feasibility_from_severities(self):
        def conflict(severity):
            return ConsistencyConflict(fields=("a", "b"), description="x", severity=severity)

        assert feasibility([]) == Feasibility.HIGH
        assert feasibility([conflict(Severity.INFO)]) == Feasibility.HIGH
        assert feasibility([conflict(Severity.WARNING)]) == Feasibility.MEDIUM
        assert feasibility([conflict(Severity.ERROR)] * 2) == Feasibility.LOW


class TestComplexity:
    """Test complexity ratings."""

    def test_empty_configs_are_simple(self):
        assert rate_game(game()).score == 1
        assert rate_game(game()).label == "Simple"
        assert rate_website(website()).label == "Simple"

    def test_large_online_game(self):
        rating = rate_game(game(
            dimension="3d",
            platforms=["pc-windows", "console-xbox", "console-playstation"],
            genres=["rpg", "simulation"],
            playerMode="mmo",
            worldScope="massive",
            levelGeneration="procedural",
        ))
        assert rating.score >= 6
        assert rating.label in ("Complex", "Very Complex", "Extremely Complex")

    def test_website_uses_its_own_bands(self):
        rating = rate_website(website(
            websiteTypes=["ecommerce", "marketplace", "community"],
            framework="custom",
            database="postgresql",
            auth="clerk",
            i18nEnabled=True,
        ))
        assert rating.label == "Enterprise"
        assert rating.scope_estimate == "2-4 months"


class TestAnalyzeReport:
    """Test the assembled report."""

    def test_game_summary(self):
        report = analyze(game(**FANTASY_RPG))
        assert report.kind == "game"
        assert report.summary.startswith("This is a simple 3D RPG game with Fantasy themes")

    def test_website_summary(self):
        report = analyze(website(websiteTypes=["blog"], framework="astro"))
        assert "Blog website built with Astro" in report.summary

    def test_suggestions(self):
        report = analyze(game(genres=["roguelike"], levelGeneration="hand-crafted"))
        assert any("procedural level generation" in s for s in report.suggestions)

    def test_deterministic(self):
        config = game(**FANTASY_RPG, platforms=["vr"], playerMode="co-op")
        assert analyze(config) == analyze(config)

    def test_rejects_raw_mappings(self):
        with pytest.raises(TypeError):
            ConsistencyAnalyzer().analyze({"kind": "game"})
