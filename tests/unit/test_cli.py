"""Unit tests for revtree.cli.main — click commands."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from revtree.cli.main import cli
from revtree.storage.files import load_tree


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def _invoke(runner: CliRunner, path: Path, *args: str):
    return runner.invoke(cli, ["--file", str(path), *args])


class TestInit:
    def test_writes_sample(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "casino.txt"
        result = _invoke(runner, path, "init")
        assert result.exit_code == 0, result.output
        assert load_tree(path).name == "Casino Games"

    def test_refuses_to_overwrite(self, runner: CliRunner, casino_file: Path) -> None:
        result = _invoke(runner, casino_file, "init")
        assert result.exit_code == 1
        assert load_tree(casino_file).name == "Casino"

    def test_force_overwrites(self, runner: CliRunner, casino_file: Path) -> None:
        result = _invoke(runner, casino_file, "init", "--force")
        assert result.exit_code == 0
        assert load_tree(casino_file).name == "Casino Games"

    def test_envvar_selects_file(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "from-env.txt"
        result = runner.invoke(cli, ["init"], env={"REVTREE_FILE": str(path)})
        assert result.exit_code == 0
        assert path.exists()


class TestShow:
    def test_renders_tree(self, runner: CliRunner, casino_file: Path) -> None:
        result = _invoke(runner, casino_file, "show")
        assert result.exit_code == 0
        assert "----- Casino -----" in result.output
        assert "Blackjack | Revenue: 100.0" in result.output
        assert "Total: 150.5" in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = _invoke(runner, tmp_path / "missing.txt", "show")
        assert result.exit_code == 1

    def test_strict_rejects_malformed(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "messy.txt"
        path.write_text("GROUP Root\n  junk\n", encoding="utf-8")
        assert _invoke(runner, path, "show").exit_code == 0
        assert runner.invoke(cli, ["--file", str(path), "--strict", "show"]).exit_code == 1


class TestListings:
    def test_groups(self, runner: CliRunner, casino_file: Path) -> None:
        result = _invoke(runner, casino_file, "groups")
        assert result.exit_code == 0
        assert "Table Games" in result.output
        assert "Slot Games" in result.output

    def test_games(self, runner: CliRunner, casino_file: Path) -> None:
        result = _invoke(runner, casino_file, "games")
        assert result.exit_code == 0
        for name in ("Blackjack", "Roulette", "Mega Joker"):
            assert name in result.output
        assert "150.5" in result.output


class TestMutations:
    def test_add_game(self, runner: CliRunner, casino_file: Path) -> None:
        result = _invoke(runner, casino_file, "add-game", "2", "Starburst", "12.5")
        assert result.exit_code == 0, result.output
        root = load_tree(casino_file)
        assert [g.name for g in root.get_groups()[1].get_all_games()] == [
            "Mega Joker",
            "Starburst",
        ]
        assert root.total_revenue() == 163.0

    def test_add_game_bad_index(self, runner: CliRunner, casino_file: Path) -> None:
        before = casino_file.read_text(encoding="utf-8")
        result = _invoke(runner, casino_file, "add-game", "9", "Starburst", "1")
        assert result.exit_code == 1
        assert casino_file.read_text(encoding="utf-8") == before

    def test_add_revenue(self, runner: CliRunner, casino_file: Path) -> None:
        result = _invoke(runner, casino_file, "add-revenue", "1", "25")
        assert result.exit_code == 0, result.output
        assert load_tree(casino_file).total_revenue() == 175.5

    def test_add_negative_revenue(self, runner: CliRunner, casino_file: Path) -> None:
        result = _invoke(runner, casino_file, "add-revenue", "3", "-7.5")
        assert result.exit_code == 0, result.output
        assert load_tree(casino_file).get_all_games()[2].revenue == -7.5

    def test_infinite_revenue_is_kept_on_reload(self, runner: CliRunner, casino_file: Path) -> None:
        result = _invoke(runner, casino_file, "add-revenue", "1", "inf")
        assert result.exit_code == 0, result.output
        games = load_tree(casino_file).get_all_games()
        assert [g.name for g in games] == ["Blackjack", "Roulette", "Mega Joker"]
        assert games[0].revenue == float("inf")

    def test_add_revenue_bad_index(self, runner: CliRunner, casino_file: Path) -> None:
        result = _invoke(runner, casino_file, "add-revenue", "0", "1")
        assert result.exit_code == 1


class TestCheck:
    def test_clean_file(self, runner: CliRunner, casino_file: Path) -> None:
        result = _invoke(runner, casino_file, "check")
        assert result.exit_code == 0
        assert "no issues" in result.output

    def test_reports_issues(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "messy.txt"
        path.write_text("GROUP Root\n  junk\n      GAME o 1\n", encoding="utf-8")
        result = _invoke(runner, path, "check")
        assert result.exit_code == 1
        assert "UNRECOGNIZED_RECORD" in result.output
        assert "ORPHAN_LINE" in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        assert _invoke(runner, tmp_path / "missing.txt", "check").exit_code == 1


class TestExport:
    def test_json_to_file(self, runner: CliRunner, casino_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "tree.json"
        result = _invoke(runner, casino_file, "export", "--output", str(out))
        assert result.exit_code == 0
        assert json.loads(out.read_text(encoding="utf-8"))["total"] == 150.5

    def test_yaml_to_file(self, runner: CliRunner, casino_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "tree.yaml"
        result = _invoke(runner, casino_file, "export", "--format", "yaml", "-o", str(out))
        assert result.exit_code == 0
        assert yaml.safe_load(out.read_text(encoding="utf-8"))["name"] == "Casino"


def test_version_command(runner: CliRunner, expected_version: str) -> None:
    result = runner.invoke(cli, ["version"])
    assert result.exit_code == 0
    assert expected_version in result.output
