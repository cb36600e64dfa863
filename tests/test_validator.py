"""Tests for the Schema Validator.

Covers array repair, variant resolution, default filling and the ranking
of issues surfaced to callers.
"""

import copy
import json

import pytest

from contracts import GameConfig, WebsiteConfig
from contracts.options import Dimension, Engine, Genre, Theme
from validator import (
    ConfigValidationError,
    PresetEngineError,
    SchemaValidator,
    StructuralValidationError,
    UnknownVariantError,
    check_config,
    repair_arrays,
    validate,
    validate_config,
)


class TestRepairArrays:
    """Test repair of index-keyed objects."""

    def test_index_keyed_object_becomes_list(self):
        assert repair_arrays({"0": "fantasy", "1": "horror"}) == ["fantasy", "horror"]

    def test_nested_repair(self):
        raw = {"aiFreetext": {"inGameAi": {"0": "npc-behavior"}}, "themes": ["fantasy"]}
        assert repair_arrays(raw) == {"aiFreetext": {"inGameAi": ["npc-behavior"]}, "themes": ["fantasy"]}

    def test_repair_inside_lists(self):
        raw = {"assets": [{"0": "a", "1": "b"}]}
        assert repair_arrays(raw) == {"assets": [["a", "b"]]}

    def test_non_contiguous_keys_untouched(self):
        raw = {"1": "a", "2": "b"}
        assert repair_arrays(raw) == raw

    def test_out_of_order_keys_untouched(self):
        raw = {"1": "b", "0": "a"}
        assert repair_arrays(raw) == raw

    def test_empty_mapping_stays_mapping(self):
        assert repair_arrays({}) == {}

    def test_input_not_mutated(self):
        raw = {"genres": {"0": "rpg"}}
        snapshot = copy.deepcopy(raw)
        repair_arrays(raw)
        assert raw == snapshot

    def test_repair_is_idempotent(self):
        raw = {"genres": {"0": "rpg", "1": "action"}, "lore": {"factions": {"0": "Guild"}}}
        once = repair_arrays(raw)
        assert repair_arrays(once) == once


class TestVariantResolution:
    """Test selection of the variant schema."""

    def test_kind_tag_selects_variant(self):
        assert isinstance(validate_config({"kind": "game"}), GameConfig)
        assert isinstance(validate_config({"kind": "website"}), WebsiteConfig)

    def test_explicit_variant_without_tag(self):
        config = validate_config({"siteName": "Acme"}, "website")
        assert isinstance(config, WebsiteConfig)
        assert config.site_name == "Acme"

    def test_unknown_variant(self):
        with pytest.raises(UnknownVariantError) as exc_info:
            validate_config({"kind": "mobile-app"})
        assert exc_info.value.field_path == "kind"
        assert exc_info.value.variant == "mobile-app"

    def test_missing_variant(self):
        with pytest.raises(UnknownVariantError):
            validate_config({})

    def test_mismatched_tag(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            validate_config({"kind": "game"}, "website")
        assert exc_info.value.field_path == "kind"

    def test_non_object_rejected(self):
        with pytest.raises(StructuralValidationError):
            validate_config(["not", "an", "object"], "game")

    def test_error_hierarchy(self):
        assert issubclass(StructuralValidationError, ConfigValidationError)
        assert issubclass(UnknownVariantError, ConfigValidationError)
        assert issubclass(ConfigValidationError, PresetEngineError)


class TestValidateConfig:
    """Test validation of full configurations."""

    def test_game_scenario(self):
        config = validate_config({
            "kind": "game",
            "themes": ["fantasy"],
            "genres": ["rpg"],
            "dimension": "3d",
            "engine": "unity",
        })
        assert config.themes == (Theme.FANTASY,)
        assert config.genres == (Genre.RPG,)
        assert config.dimension == Dimension.THREE_D
        assert config.engine == Engine.UNITY

    def test_repaired_arrays_validate(self):
        config = validate_config({"kind": "game", "themes": {"0": "fantasy", "1": "horror"}})
        assert config.themes == (Theme.FANTASY, Theme.HORROR)

    def test_defaults_filled(self):
        config = validate_config({"kind": "website"})
        assert config.language == "typescript"
        assert config.corporate_identity.assets == ()

    def test_validate_returns_result(self):
        result = validate({"kind": "website", "primaryColor": "blue"})
        assert not result.ok
        assert result.primary_issue.field_path == "primaryColor"
        assert validate({"kind": "website"}).ok

    def test_normalized_output_revalidates_unchanged(self):
        config = validate_config({
            "kind": "website",
            "siteName": "Acme",
            "websiteTypes": {"0": "ecommerce"},
            "paymentProcessor": "stripe",
        })
        dumped = config.model_dump(mode="json", by_alias=True)
        assert validate_config(dumped) == config

    def test_validated_config_accepted_as_input(self):
        config = validate_config({"themes": ["fantasy"]}, "game")
        result = validate(config, "game")
        assert result.ok
        assert result.config == config
        assert validate_config(config) == config

    def test_validated_config_keeps_its_variant(self):
        config = validate_config({"siteName": "Acme"}, "website")
        with pytest.raises(StructuralValidationError) as exc_info:
            validate_config(config, "game")
        assert exc_info.value.field_path == "kind"

    def test_json_round_trip_with_degraded_arrays(self):
        config = validate_config({
            "kind": "game",
            "themes": ["fantasy", "horror"],
            "genres": ["rpg"],
            "platforms": ["pc-windows", "web"],
            "lore": {"factions": ["Guild", "Crown"]},
        })
        wire = config.model_dump(mode="json", by_alias=True)
        wire["themes"] = {"0": "fantasy", "1": "horror"}
        wire["platforms"] = {"0": "pc-windows", "1": "web"}
        wire["lore"]["factions"] = {"0": "Guild", "1": "Crown"}
        restored = validate_config(json.loads(json.dumps(wire)))
        assert restored == config

    def test_raw_input_not_mutated(self):
        raw = {"themes": {"0": "fantasy"}}
        snapshot = copy.deepcopy(raw)
        validate_config(raw, "game")
        assert raw == snapshot

    def test_second_logo_rejected(self):
        raw = {
            "kind": "website",
            "corporateIdentity": {
                "assets": [
                    {"id": "a1", "category": "logo", "fileName": "logo.svg"},
                    {"id": "a2", "category": "logo", "fileName": "logo-dark.svg"},
                ],
            },
        }
        with pytest.raises(StructuralValidationError) as exc_info:
            validate_config(raw)
        assert exc_info.value.field_path == "corporateIdentity.assets"
        assert "logo" in exc_info.value.message

    def test_out_of_range_nested_value(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            validate_config({"kind": "game", "multiplayer": {"maxPlayers": 0}})
        assert exc_info.value.field_path == "multiplayer.maxPlayers"


class TestIssueRanking:
    """Test which issue is surfaced when several are found."""

    def test_constraint_violation_before_type_error(self):
        raw = {
            "kind": "website",
            "elevatorPitch": 42,
            "additionalNotes": "x" * 2001,
        }
        result = check_config(raw)
        assert not result.ok
        assert [issue.field_path for issue in result.issues] == ["elevatorPitch", "additionalNotes"]
        assert result.primary_issue.field_path == "additionalNotes"

        with pytest.raises(StructuralValidationError) as exc_info:
            validate_config(raw)
        assert exc_info.value.field_path == "additionalNotes"
        assert len(exc_info.value.issues) == 2

    def test_missing_ranked_last(self):
        validator = SchemaValidator()
        raw = {
            "kind": "website",
            "corporateIdentity": {"assets": [{"id": "a1", "category": "logo"}]},
            "footerStyle": 7,
        }
        result = validator.check(raw)
        missing = [issue for issue in result.issues if issue.error_type == "missing"]
        assert missing
        assert result.primary_issue.error_type != "missing"

    def test_check_reports_success(self):
        result = check_config({"kind": "game"})
        assert result.ok
        assert result.primary_issue is None
