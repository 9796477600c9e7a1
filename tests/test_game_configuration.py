# ABOUTME: Tests for HangmanConfiguration class
# ABOUTME: Validates defaults, TOML loading, environment overrides and validation

import pytest
from pathlib import Path
from pydantic import ValidationError

from session.game_configuration import HangmanConfiguration


PROJECT_ROOT = Path(__file__).parent.parent


class TestDefaults:
    """Test configuration without any TOML file."""

    def test_defaults(self):
        config = HangmanConfiguration()

        assert config.server_host == "erdos.dsm.fordham.edu"
        assert config.server_port == 9999
        assert config.guess_budget == 10
        assert config.preamble_lines == 2
        assert config.unguessed_marker == "_"
        assert config.debug is False
        assert config.json_log_file is None
        assert config.read_timeout_seconds is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("HANGMAN_SERVER_HOST", "localhost")
        monkeypatch.setenv("HANGMAN_GUESS_BUDGET", "6")

        config = HangmanConfiguration()

        assert config.server_host == "localhost"
        assert config.guess_budget == 6

    def test_explicit_values_beat_environment(self, monkeypatch):
        monkeypatch.setenv("HANGMAN_SERVER_PORT", "1234")
        config = HangmanConfiguration(server_port=4321)
        assert config.server_port == 4321


class TestValidation:
    """Test field validation."""

    @pytest.mark.parametrize("port", [0, 70000])
    def test_rejects_bad_port(self, port):
        with pytest.raises(ValidationError):
            HangmanConfiguration(server_port=port)

    def test_rejects_zero_budget(self):
        with pytest.raises(ValidationError):
            HangmanConfiguration(guess_budget=0)

    def test_rejects_negative_preamble(self):
        with pytest.raises(ValidationError):
            HangmanConfiguration(preamble_lines=-1)

    @pytest.mark.parametrize("marker", ["", "__", "X"])
    def test_rejects_bad_marker(self, marker):
        with pytest.raises(ValidationError):
            HangmanConfiguration(unguessed_marker=marker)

    def test_accepts_asterisk_marker(self):
        assert HangmanConfiguration(unguessed_marker="*").unguessed_marker == "*"

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            HangmanConfiguration(guess_budjet=5)


class TestFromToml:
    """Test loading the [tool.hangman] table."""

    def test_loads_project_pyproject(self):
        config = HangmanConfiguration.from_toml(PROJECT_ROOT / "pyproject.toml")

        assert config.server_port == 9999
        assert config.guess_budget == 10
        assert config.preamble_lines == 2

    def test_loads_custom_file(self, tmp_path):
        config_file = tmp_path / "hangman.toml"
        config_file.write_text(
            "[tool.hangman.server]\n"
            'host = "127.0.0.1"\n'
            "port = 4000\n"
            "read_timeout_seconds = 5.0\n"
            "[tool.hangman.gameplay]\n"
            "guess_budget = 7\n"
            'unguessed_marker = "*"\n'
            "[tool.hangman.logging]\n"
            "debug = true\n"
            'json_log_file = "session.jsonl"\n'
        )

        config = HangmanConfiguration.from_toml(config_file)

        assert config.server_host == "127.0.0.1"
        assert config.server_port == 4000
        assert config.read_timeout_seconds == 5.0
        assert config.guess_budget == 7
        assert config.unguessed_marker == "*"
        assert config.debug is True
        assert config.json_log_file == "session.jsonl"
        # Not in the file, so the default applies
        assert config.preamble_lines == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            HangmanConfiguration.from_toml(tmp_path / "absent.toml")

    def test_missing_section(self, tmp_path):
        config_file = tmp_path / "other.toml"
        config_file.write_text("[tool.something]\nvalue = 1\n")

        with pytest.raises(KeyError):
            HangmanConfiguration.from_toml(config_file)

    def test_invalid_value_in_file(self, tmp_path):
        config_file = tmp_path / "bad.toml"
        config_file.write_text("[tool.hangman.gameplay]\nguess_budget = 0\n")

        with pytest.raises(ValidationError):
            HangmanConfiguration.from_toml(config_file)
