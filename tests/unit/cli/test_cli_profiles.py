"""Tests for the smartencode profiles command."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from smartencode.cli import main


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    """CLI runner that leaves the root logger untouched."""
    monkeypatch.setattr("smartencode.cli.configure_logging", lambda config: None)
    return CliRunner()


class TestProfilesCommand:
    """Tests for smartencode profiles."""

    def test_lists_builtin_profiles(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(main, ["profiles", "--profiles-dir", str(tmp_path)])

        assert result.exit_code == 0
        for name in ("final", "nas", "titan"):
            assert name in result.stdout
        assert f"User profiles directory: {tmp_path}" in result.stdout

    def test_json_includes_user_profiles(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        (tmp_path / "movies.yaml").write_text(
            "title: Movies\noptions:\n  target_codec: av1\n"
        )

        result = runner.invoke(
            main, ["profiles", "--profiles-dir", str(tmp_path), "--json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [p["name"] for p in data] == ["final", "nas", "titan", "movies"]
        assert data[-1]["source"] == "user"
        assert data[-1]["options"] == {"target_codec": "av1"}

    def test_broken_user_profile_reported(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        (tmp_path / "broken.yaml").write_text("- not a mapping\n")

        result = runner.invoke(
            main, ["profiles", "--profiles-dir", str(tmp_path), "--json"]
        )

        assert result.exit_code == 0
        broken = json.loads(result.stdout)[-1]
        assert broken["name"] == "broken"
        assert "must be a mapping" in broken["error"]
