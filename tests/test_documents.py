"""Tests for the Document Builder."""

import pytest

from contracts.options import Engine, Framework
from documents import (
    ENGINE_PROFILES,
    FRAMEWORK_PROFILES,
    GAME_DEVELOPMENT_CONCEPT,
    GAME_INIT_PROMPT,
    UNSPECIFIED,
    WEBSITE_DEVELOPMENT_CONCEPT,
    WEBSITE_INIT_PROMPT,
    DocumentBuilder,
    DocumentTemplate,
    SectionTemplate,
    build,
    engine_profile,
    framework_profile,
    describe,
    game_description,
    game_name,
    website_description,
    website_name,
    write_documents,
)
from documents.templates import labels, requires_any, table, value
from validator import validate_config


def game(**fields):
    return validate_config(dict(fields), "game")


def website(**fields):
    return validate_config(dict(fields), "website")


FANTASY_RPG = {"themes": ["fantasy"], "genres": ["rpg"], "dimension": "3d", "engine": "unity"}

GAME_INIT_SECTIONS = [
    "Context",
    "Technical Specification",
    "Instructions",
    "Constraints (DO NOT)",
    "Error Handling Protocol",
    "References",
    "Agent-Specific Prompts",
    "Quick Start",
]

GAME_CONCEPT_SECTIONS = [
    "Project Overview",
    "Technical Architecture",
    "Data Model",
    "API Design",
    "Tech Stack",
    "Implementation Guidelines",
    "Security Concept",
    "Testing Strategy",
    "Deployment Plan",
    "Component Library",
    "DO NOT List",
]

WEBSITE_INIT_SECTIONS = [
    "Context & Overview",
    "Site Identity",
    "Technical Specification",
    "Build Instructions (MVP)",
    "Build Instructions (Full Feature Set)",
    "Constraints (DO NOT)",
    "Error Handling & Edge Cases",
    "Agent Prompts",
]


class TestGameDocuments:
    """Test the game document templates."""

    def test_scenario_builds_both_documents(self):
        documents = build(game(**FANTASY_RPG))
        assert [d.name for d in documents] == ["init-prompt", "development-concept"]
        assert documents[0].section_titles == GAME_INIT_SECTIONS
        assert documents[1].section_titles == GAME_CONCEPT_SECTIONS

    def test_context_shows_theme(self):
        init_prompt = build(game(**FANTASY_RPG))[0]
        assert "Fantasy" in init_prompt.section("Context").body

    def test_engine_drives_technical_sections(self):
        init_prompt, concept = build(game(**FANTASY_RPG))
        assert "C# (.NET)" in init_prompt.section("Technical Specification").body
        assert "Unity" in concept.section("Tech Stack").body

    def test_empty_config_uses_placeholders(self):
        init_prompt, concept = build(game())
        assert init_prompt.section("Context").body == UNSPECIFIED
        assert init_prompt.section("Quick Start").body != UNSPECIFIED
        assert init_prompt.section("Constraints (DO NOT)").body != UNSPECIFIED
        assert concept.section("DO NOT List").body != UNSPECIFIED
        assert init_prompt.title == "Untitled Game: Initialization Prompt"

    def test_sections_never_empty(self):
        for document in build(game()) + build(game(**FANTASY_RPG)):
            for section in document.sections:
                assert section.body.strip()

    def test_template_version(self):
        for document in build(game(**FANTASY_RPG)):
            assert document.template_version == "1.0"

    def test_multiplayer_networking_row(self):
        init_prompt = build(game(
            **FANTASY_RPG,
            playerMode="online-multiplayer",
            multiplayer={"maxPlayers": 16, "networkModel": "client-server"},
        ))[0]
        context = init_prompt.section("Context").body
        assert "up to 16 players" in context
        assert "Networking" in context

    def test_deterministic(self):
        config = game(**FANTASY_RPG, platforms=["pc-windows", "web"], elevatorPitch="Tame dragons. Save the realm.")
        assert build(config) == build(config)


class TestWebsiteDocuments:
    """Test the website document templates."""

    def test_section_titles(self):
        init_prompt, concept = build(website(siteName="Acme", framework="nextjs"))
        assert init_prompt.section_titles == WEBSITE_INIT_SECTIONS
        assert concept.section_titles == [s.title for s in WEBSITE_DEVELOPMENT_CONCEPT.sections]

    def test_missing_site_name_is_unspecified(self):
        init_prompt = build(website(websiteTypes=["blog"], framework="astro"))[0]
        assert init_prompt.section("Site Identity").body == UNSPECIFIED
        assert init_prompt.title == "Unspecified: Website Init Prompt"

    def test_site_name_rendered(self):
        init_prompt = build(website(siteName="Acme Tools", customDomain="acme.example"))[0]
        identity = init_prompt.section("Site Identity").body
        assert "Acme Tools" in identity
        assert "acme.example" in identity

    def test_static_sections_always_render(self):
        init_prompt, concept = build(website())
        assert init_prompt.section("Constraints (DO NOT)").body != UNSPECIFIED
        assert init_prompt.section("Error Handling & Edge Cases").body != UNSPECIFIED
        assert concept.section("DO NOT List").body != UNSPECIFIED

    def test_brand_assets_listed(self):
        config = website(
            siteName="Acme",
            corporateIdentity={
                "assets": [{"id": "a1", "category": "logo", "fileName": "acme.svg", "fileType": "image/svg+xml"}],
            },
        )
        identity = build(config)[0].section("Site Identity").body
        assert "acme.svg" in identity
        assert "| Asset | Category | Type |" in identity


class TestDocumentTemplate:
    """Test template rendering and the placeholder policy."""

    def test_empty_section_becomes_placeholder(self):
        template = DocumentTemplate(
            name="demo",
            title="Demo",
            version="9.9",
            sections=(
                SectionTemplate("Blank", lambda config: "   "),
                SectionTemplate("Filled", lambda config: "content"),
            ),
        )
        document = template.render(game(), "Project")
        assert document.title == "Project: Demo"
        assert document.section("Blank").body == UNSPECIFIED
        assert document.section("Filled").body == "content"

    def test_requires_any(self):
        @requires_any("engine", "platforms")
        def render(config):
            return "rendered"

        assert render(game()) == ""
        assert render(game(platforms=["web"])) == "rendered"
        assert render.__name__ == "render"

    def test_value_helper(self):
        assert value(None) == UNSPECIFIED
        assert value("") == UNSPECIFIED
        assert value(Engine.UNITY) == "Unity"
        assert value(16) == "16"

    def test_labels_helper(self):
        assert labels([]) == UNSPECIFIED

    def test_table_helper(self):
        assert table(("A", "B"), [("x", None)]) == "| A | B |\n|---|---|\n| x | Unspecified |"

    def test_templates_registered(self):
        assert GAME_INIT_PROMPT.name == WEBSITE_INIT_PROMPT.name == "init-prompt"
        assert GAME_DEVELOPMENT_CONCEPT.name == "development-concept"


class TestNaming:
    """Test project names and descriptions."""

    def test_game_name_from_pitch(self):
        assert game_name(game(elevatorPitch="Dragon Tamer! A cozy taming sim.")) == "Dragon Tamer"

    def test_game_name_truncated(self):
        name = game_name(game(elevatorPitch="x" * 100))
        assert len(name) == 60

    def test_game_name_fallbacks(self):
        assert game_name(game(**FANTASY_RPG)) == "Fantasy RPG Game"
        assert game_name(game()) == "Untitled Game"

    def test_game_description(self):
        assert game_description(game(**FANTASY_RPG)) == "RPG | 3D | Unity"

    def test_website_description(self):
        config = website(websiteTypes=["ecommerce", "blog"], framework="nextjs")
        assert website_description(config) == "E-Commerce, Blog | Next.js"
        assert website_description(website()) == ""

    def test_describe(self):
        assert describe(game(**FANTASY_RPG)) == "Fantasy RPG Game (RPG | 3D | Unity)"
        assert describe(game()) == "Untitled Game"

    def test_website_name(self):
        assert website_name(website(siteName="  Acme  ")) == "Acme"
        assert website_name(website()) == UNSPECIFIED


class TestProfiles:
    """Test engine and framework profiles."""

    def test_every_engine_has_a_profile(self):
        assert set(ENGINE_PROFILES) == set(Engine)

    def test_every_framework_has_a_profile(self):
        assert set(FRAMEWORK_PROFILES) == set(Framework)

    def test_unset_falls_back_to_custom(self):
        assert engine_profile(None) == ENGINE_PROFILES[Engine.CUSTOM]
        assert framework_profile(None) == FRAMEWORK_PROFILES[Framework.CUSTOM]

    def test_unity_profile(self):
        profile = engine_profile(Engine.UNITY)
        assert profile.language == "C# (.NET)"
        assert profile.docs_url == "https://docs.unity3d.com/Manual/"


class TestDocumentBuilder:
    """Test building and writing documents."""

    def test_write_documents(self, tmp_path):
        documents = build(game(**FANTASY_RPG))
        paths = write_documents(documents, tmp_path / "out")
        assert [p.name for p in paths] == ["init-prompt.md", "development-concept.md"]
        text = paths[0].read_text(encoding="utf-8")
        assert text.startswith("# Fantasy RPG Game: Initialization Prompt")
        assert "## 1. Context" in text

    def test_rejects_raw_mappings(self):
        with pytest.raises(TypeError):
            DocumentBuilder().build({"kind": "game"})
