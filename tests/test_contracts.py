"""Tests for the configuration and report contracts.

Verifies defaults, wire names, field helpers and the model-level rules
that every configuration enforces.
"""

import pytest
from pydantic import ValidationError

from contracts import (
    BrandAsset,
    CorporateIdentityConfig,
    Document,
    DocumentSection,
    GameConfig,
    MultiplayerConfig,
    RecommendationSet,
    ValidationIssue,
    ValidationResult,
    WebsiteConfig,
    is_default,
    is_set,
    option_label,
    option_labels,
    is_chosen,
    resolve_field,
)
from contracts.options import AssetCategory, Dimension, Engine, Genre, Hosting, PlayerMode, Theme


class TestGameConfig:
    """Test the game configuration record."""

    def test_empty_object_validates_with_defaults(self):
        config = GameConfig.model_validate({})
        assert config.kind == "game"
        assert config.themes == ()
        assert config.engine is None
        assert config.multiplayer.max_players == 4
        assert config.localization.launch_languages == ("en",)
        assert len(config.visual_identity.color_palette) == 5

    def test_camel_case_wire_names(self):
        config = GameConfig.model_validate({
            "elevatorPitch": "Dig deeper.",
            "playerMode": "co-op",
            "multiplayer": {"maxPlayers": 8},
        })
        assert config.elevator_pitch == "Dig deeper."
        assert config.player_mode == PlayerMode.CO_OP
        assert config.multiplayer.max_players == 8

    def test_unknown_keys_are_dropped(self):
        config = GameConfig.model_validate({"legacyField": True})
        assert "legacyField" not in config.model_dump(by_alias=True)

    def test_blank_single_choice_is_unset(self):
        config = GameConfig.model_validate({"engine": ""})
        assert config.engine is None

    def test_duplicate_choices_rejected(self):
        with pytest.raises(ValidationError):
            GameConfig.model_validate({"genres": ["rpg", "rpg"]})

    def test_multi_choice_cap(self):
        with pytest.raises(ValidationError):
            GameConfig.model_validate({"themes": ["fantasy", "horror", "western", "pirates"]})

    def test_max_players_range(self):
        with pytest.raises(ValidationError):
            MultiplayerConfig(max_players=0)

    def test_configs_are_frozen(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.engine = Engine.UNITY

    def test_multi_choice_selections_are_immutable(self):
        config = GameConfig.model_validate({"themes": ["fantasy"], "lore": {"factions": ["Guild"]}})
        assert isinstance(config.themes, tuple)
        with pytest.raises(AttributeError):
            config.themes.append(Theme.HORROR)
        with pytest.raises(AttributeError):
            config.lore.factions.append("Crown")
        assert isinstance(GameConfig().platforms, tuple)

    def test_is_multiplayer(self):
        assert not GameConfig(player_mode=PlayerMode.SINGLE_PLAYER).is_multiplayer
        assert GameConfig(player_mode=PlayerMode.MMO).is_multiplayer


class TestWebsiteConfig:
    """Test the website configuration record."""

    def test_defaults(self):
        config = WebsiteConfig()
        assert config.kind == "website"
        assert config.site_name == ""
        assert config.ssl is True
        assert config.primary_color == "#2563eb"

    def test_invalid_hex_color(self):
        with pytest.raises(ValidationError):
            WebsiteConfig.model_validate({"primaryColor": "blue"})

    def test_i18n_aliases(self):
        config = WebsiteConfig.model_validate({"i18nEnabled": True, "i18nLanguages": ["de", "fr"]})
        assert config.i18n_enabled is True
        assert config.i18n_languages == ("de", "fr")

    def test_ecommerce_flags(self):
        assert WebsiteConfig.model_validate({"websiteTypes": ["marketplace"]}).is_ecommerce
        assert not WebsiteConfig.model_validate({"websiteTypes": ["blog"]}).is_ecommerce


class TestCorporateIdentity:
    """Test per-category asset limits."""

    def _asset(self, asset_id: str, category: str) -> dict:
        return {"id": asset_id, "category": category, "fileName": f"{asset_id}.png"}

    def test_single_logo_accepted(self):
        identity = CorporateIdentityConfig.model_validate({"assets": [self._asset("a1", "logo")]})
        assert identity.assets[0].category == AssetCategory.LOGO

    def test_second_logo_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CorporateIdentityConfig.model_validate({
                "assets": [self._asset("a1", "logo"), self._asset("a2", "logo")],
            })
        assert "Too many 'logo' assets" in str(exc_info.value)

    def test_several_fonts_accepted(self):
        identity = CorporateIdentityConfig.model_validate({
            "assets": [self._asset(f"f{i}", "font") for i in range(5)],
        })
        assert len(identity.assets) == 5

    def test_asset_size_cap(self):
        with pytest.raises(ValidationError):
            BrandAsset(id="big", category=AssetCategory.OTHER, file_name="big.zip", file_size=6 * 1024 * 1024)


class TestFieldHelpers:
    """Test dotted-path field access."""

    def test_resolve_nested_wire_path(self):
        config = GameConfig.model_validate({"multiplayer": {"networkModel": "relay"}})
        assert resolve_field(config, "multiplayer.networkModel").value == "relay"

    def test_resolve_unknown_field(self):
        with pytest.raises(KeyError):
            resolve_field(GameConfig(), "notAField")

    def test_is_default_for_factory_defaults(self):
        config = GameConfig()
        assert is_default(config, "localization.launchLanguages")
        assert is_default(config, "visualIdentity.colorPalette")

    def test_is_set_after_change(self):
        config = GameConfig.model_validate({"themes": ["fantasy"], "technicalConstraints": {"minRAM": "8 GB"}})
        assert is_set(config, "themes")
        assert is_set(config, "technicalConstraints.minRAM")
        assert not is_set(config, "genres")


class TestOptionLabels:
    """Test display labels for option values."""

    def test_title_cased_by_default(self):
        assert option_label(Theme.FANTASY) == "Fantasy"
        assert option_label(Hosting.CLOUDFLARE_PAGES) == "Cloudflare Pages"

    def test_overrides(self):
        assert option_label(Genre.RPG) == "RPG"
        assert option_label(Dimension.THREE_D) == "3D"

    def test_unset_is_empty(self):
        assert option_label(None) == ""

    def test_joined_labels(self):
        assert option_labels([Theme.FANTASY, Theme.SCI_FI]) == "Fantasy, Sci-Fi"

    def test_is_chosen(self):
        assert not is_chosen(None)
        assert is_chosen(Engine.UNITY)


class TestReportContracts:
    """Test engine output contracts."""

    def test_validation_result_primary_issue(self):
        issues = [
            ValidationIssue(field_path="a", message="wrong type", error_type="string_type"),
            ValidationIssue(field_path="b", message="too long", error_type="string_too_long"),
        ]
        result = ValidationResult(issues=issues, primary_index=1)
        assert not result.ok
        assert result.primary_issue.field_path == "b"
        assert str(result.primary_issue) == "too long (field: b)"

    def test_recommendation_set_dimension_order(self):
        recommendations = RecommendationSet(stack=["Astro"], ai_providers=["Claude"])
        assert list(recommendations.as_dict()) == [
            "aiProviders", "features", "security", "deployment", "integrations", "stack",
        ]
        assert recommendations.as_dict()["aiProviders"] == ["Claude"]

    def test_document_render(self):
        document = Document(
            name="init-prompt",
            title="Demo: Init Prompt",
            template_version="1.0",
            sections=[DocumentSection(title="Context", body="Hello")],
        )
        rendered = document.render()
        assert rendered.startswith("# Demo: Init Prompt\n")
        assert "## 1. Context\n\nHello" in rendered
        assert document.section("Context").body == "Hello"
        with pytest.raises(KeyError):
            document.section("Missing")
