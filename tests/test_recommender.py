"""Tests for the Recommendation Engine."""

import pytest

from config import DIMENSIONS, settings
from recommender import (
    GAME_RECOMMENDATIONS,
    WEBSITE_RECOMMENDATIONS,
    RecommendationEngine,
    RecommendationRule,
    rank_and_cap,
    recommend,
    recommend_all,
    recommend_stack,
)
from validator import validate_config


def game(**fields):
    return validate_config(dict(fields), "game")


def website(**fields):
    return validate_config(dict(fields), "website")


FANTASY_RPG = {"themes": ["fantasy"], "genres": ["rpg"], "dimension": "3d", "engine": "unity"}


def rule(text, priority):
    return RecommendationRule(lambda c: True, text, priority)


class TestRankAndCap:
    """Test ordering, de-duplication and the tie policy."""

    def test_descending_priority(self):
        assert rank_and_cap([rule("low", 10), rule("high", 90), rule("mid", 50)], 5) == ["high", "mid", "low"]

    def test_equal_priorities_keep_declaration_order(self):
        rules = [rule("first", 50), rule("second", 50), rule("third", 50)]
        assert rank_and_cap(rules, 5) == ["first", "second", "third"]

    def test_cap_applied(self):
        rules = [rule("a", 90), rule("b", 80), rule("c", 70), rule("d", 60)]
        assert rank_and_cap(rules, 2) == ["a", "b"]

    def test_tie_at_boundary_keeps_whole_group(self):
        rules = [rule("a", 90), rule("b", 80), rule("c", 80), rule("d", 80), rule("e", 10)]
        assert rank_and_cap(rules, 2) == ["a", "b", "c", "d"]

    def test_tie_below_boundary_is_cut(self):
        rules = [rule("a", 90), rule("b", 80), rule("c", 40), rule("d", 40)]
        assert rank_and_cap(rules, 2) == ["a", "b"]

    def test_duplicate_text_emitted_once(self):
        rules = [rule("same", 30), rule("other", 50), rule("same", 70)]
        assert rank_and_cap(rules, 5) == ["same", "other"]

    def test_zero_limit(self):
        assert rank_and_cap([rule("a", 90)], 0) == []

    def test_no_matches(self):
        assert rank_and_cap([], 4) == []


class TestGameRecommendations:
    """Test recommendations for game configurations."""

    def test_stack_names_the_chosen_engine(self):
        stack = recommend(game(**FANTASY_RPG), "stack")
        assert stack
        assert "unity" in stack[0].lower()

    def test_stack_suggests_engines_when_unset(self):
        stack = recommend_stack(game(dimension="2d", platforms=["web"]))
        assert stack[0] == "Phaser 3 or PixiJS for a 2D browser game"

    def test_online_security(self):
        security = recommend(game(playerMode="mmo"), "security")
        assert security[0].startswith("Add anti-cheat")
        assert "Keep game state server-authoritative so clients cannot forge results" in security

    def test_mobile_deployment(self):
        deployment = recommend(game(platforms=["mobile-ios", "mobile-android"]), "deployment")
        assert "Publish on the App Store via TestFlight beta builds" in deployment
        assert "Publish on Google Play with an internal testing track" in deployment

    def test_mobile_monetisation(self):
        deployment = recommend(game(platforms=["mobile-ios", "mobile-android"], genres=["puzzle"]), "deployment")
        assert deployment == [
            "Publish on the App Store via TestFlight beta builds",
            "Publish on Google Play with an internal testing track",
            "Monetise mobile builds as free-to-play or ad-supported",
        ]

    def test_pc_puzzle_monetisation(self):
        deployment = recommend(game(platforms=["pc-windows"], genres=["puzzle"]), "deployment")
        assert deployment == [
            "Ship on Steam, with itch.io for early builds and demos",
            "Sell PC and console releases as a premium one-time purchase",
            "List the puzzle release on itch.io as well as Steam to reach indie players",
        ]

    def test_long_running_play_monetisation(self):
        deployment = recommend(game(playerMode="mmo", platforms=["web"]), "deployment")
        assert "Pair free-to-play with an optional subscription for long-running play" in deployment
        assert "Keep the web build free-to-play and accept donations" in deployment

    def test_empty_config_yields_every_dimension(self):
        results = recommend_all(game()).as_dict()
        assert list(results) == list(DIMENSIONS)
        assert results["security"] == []

    def test_tables_cover_every_dimension(self):
        assert set(GAME_RECOMMENDATIONS) == set(DIMENSIONS)
        assert set(WEBSITE_RECOMMENDATIONS) == set(DIMENSIONS)

    def test_caps_respected(self):
        config = game(
            **FANTASY_RPG,
            platforms=["pc-windows", "mobile-ios", "mobile-android", "web", "console-switch"],
            playerMode="online-multiplayer",
            businessModel="free-to-play",
            additionalTech=["cloud-save", "mod-support", "analytics"],
            socialFeatures=["guilds"],
        )
        for dimension, suggestions in recommend_all(config).as_dict().items():
            limit = settings.limit_for(dimension)
            matched = [r for r in GAME_RECOMMENDATIONS[dimension] if r.when(config)]
            if len(matched) > limit:
                assert len(suggestions) >= limit
            assert len(suggestions) == len(set(suggestions))

    def test_deterministic(self):
        config = game(**FANTASY_RPG, playerMode="co-op", platforms=["pc-windows"])
        assert recommend_all(config) == recommend_all(config)


class TestWebsiteRecommendations:
    """Test recommendations for website configurations."""

    def test_framework_stack(self):
        stack = recommend(website(framework="nextjs"), "stack")
        assert stack[0] == "Next.js (App Router) with TypeScript and React Server Components"

    def test_ai_provider_tie_extends_cap(self):
        config = website(aiFeatures=["chatbot", "search", "content-generation"])
        providers = recommend(config, "aiProviders")
        assert providers[-2:] == [
            "Enable provider fallback for reliability",
            "Enable cost tracking to monitor multi-provider spending",
        ]
        assert len(providers) == 5

    def test_ai_provider_cap_without_tie(self):
        config = website(aiFeatures=["chatbot", "search", "content-generation", "image-generation"])
        assert len(recommend(config, "aiProviders")) == settings.limit_for("aiProviders")

    def test_ecommerce_payment_feature(self):
        features = recommend(website(websiteTypes=["ecommerce"]), "features")
        assert "Use Stripe for payments" in features


class TestRecommendationEngine:
    """Test engine configuration and error handling."""

    def test_custom_limits(self):
        engine = RecommendationEngine(limits={"stack": 1})
        assert engine.recommend(game(**FANTASY_RPG), "stack") == [
            "Unity (C#) with the Universal Render Pipeline (com.unity.render-pipelines.universal) "
            "and the Input System package (com.unity.inputsystem)"
        ]

    def test_unknown_dimension(self):
        with pytest.raises(KeyError):
            recommend(game(), "marketing")

    def test_rejects_raw_mappings(self):
        with pytest.raises(TypeError):
            RecommendationEngine().recommend({"kind": "game"}, "stack")

    def test_settings_limits(self):
        assert settings.limit_for("aiProviders") == 4
        assert settings.limit_for("features") == 6
        with pytest.raises(KeyError):
            settings.limit_for("pricing")
