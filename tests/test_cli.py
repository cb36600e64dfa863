"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_config(tmp_path):
    def _write(data, name="preset.json"):
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


GAME = {"kind": "game", "themes": ["fantasy"], "genres": ["rpg"], "dimension": "3d", "engine": "unity"}


class TestValidateCommand:
    """Test the validate command."""

    def test_prints_normalized_config(self, runner, write_config):
        result = runner.invoke(cli, ["validate", write_config({"kind": "game", "themes": {"0": "fantasy"}})])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["kind"] == "game"
        assert data["themes"] == ["fantasy"]
        assert data["multiplayer"]["maxPlayers"] == 4

    def test_kind_option(self, runner, write_config):
        result = runner.invoke(cli, ["validate", write_config({}), "--kind", "website"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["kind"] == "website"

    def test_invalid_config_exits_with_one(self, runner, write_config):
        result = runner.invoke(cli, ["validate", write_config({"kind": "website", "primaryColor": "blue"})])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert "primaryColor" in result.output

    def test_unknown_variant_exits_with_one(self, runner, write_config):
        result = runner.invoke(cli, ["validate", write_config({"kind": "app"})])
        assert result.exit_code == 1

    def test_malformed_json_is_a_usage_error(self, runner, write_config):
        result = runner.invoke(cli, ["validate", write_config("{not json")])
        assert result.exit_code == 2


class TestAnalyzeCommand:
    """Test the analyze command."""

    def test_report(self, runner, write_config):
        result = runner.invoke(cli, ["analyze", write_config(GAME)])
        assert result.exit_code == 0
        assert "Completeness" in result.output
        assert "Missing requirements" in result.output

    def test_conflicts_listed(self, runner, write_config):
        result = runner.invoke(cli, ["analyze", write_config({"kind": "game", "platforms": ["vr"], "dimension": "2d"})])
        assert result.exit_code == 0
        assert "Conflicts" in result.output


class TestRecommendCommand:
    """Test the recommend command."""

    def test_json_single_dimension(self, runner, write_config):
        result = runner.invoke(cli, ["recommend", write_config(GAME), "--dimension", "stack", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert list(data) == ["stack"]
        assert "Unity" in data["stack"][0]

    def test_json_all_dimensions(self, runner, write_config):
        result = runner.invoke(cli, ["recommend", write_config(GAME), "--json"])
        assert result.exit_code == 0
        assert list(json.loads(result.stdout)) == [
            "aiProviders", "features", "security", "deployment", "integrations", "stack",
        ]

    def test_unknown_dimension_rejected(self, runner, write_config):
        result = runner.invoke(cli, ["recommend", write_config(GAME), "--dimension", "pricing"])
        assert result.exit_code == 2


class TestBuildCommand:
    """Test the build command."""

    def test_print(self, runner, write_config):
        result = runner.invoke(cli, ["build", write_config({"kind": "website"}), "--print"])
        assert result.exit_code == 0
        assert "# Unspecified: Website Init Prompt" in result.stdout
        assert "## 2. Site Identity\n\nUnspecified" in result.stdout

    def test_writes_files(self, runner, write_config, tmp_path):
        output_dir = tmp_path / "docs"
        result = runner.invoke(cli, ["build", write_config(GAME), "--output", str(output_dir)])
        assert result.exit_code == 0
        assert (output_dir / "init-prompt.md").exists()
        assert (output_dir / "development-concept.md").exists()
        assert "Fantasy RPG Game (RPG | 3D | Unity)" in result.output
