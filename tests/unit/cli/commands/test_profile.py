"""Unit tests for the profile commands."""

import json

from kilometraje.cli import cli


def stored(env):
    with open(env["STORAGE_FILE"], encoding="utf-8") as f:
        return json.load(f)


class TestProfileSet:
    """Tests for 'profile set'."""

    def test_set_all_fields(self, runner, mock_env):
        """Test that fields are saved under their storage keys."""
        result = runner.invoke(
            cli,
            ["profile", "set", "--name", "Ana", "--national-id", " x1234567l ",
             "--start", "09:00", "--end", "17:00"],
        )

        assert result.exit_code == 0
        assert "Profile saved" in result.output
        assert stored(mock_env) == {
            "nombreUsuario": "Ana",
            "dniUsuario": "X1234567L",
            "horaInicioUsuario": "09:00",
            "horaFinalUsuario": "17:00",
        }

    def test_set_one_field_at_a_time(self, runner, mock_env):
        """Test that a partial profile can be built step by step."""
        assert runner.invoke(cli, ["profile", "set", "--name", "Ana"]).exit_code == 0
        assert runner.invoke(cli, ["profile", "set", "--start", "09:00"]).exit_code == 0

        data = stored(mock_env)
        assert data["nombreUsuario"] == "Ana"
        assert data["horaInicioUsuario"] == "09:00"

    def test_nothing_to_change(self, runner, mock_env):
        result = runner.invoke(cli, ["profile", "set"])

        assert result.exit_code == 0
        assert "Nothing to change." in result.output

    def test_invalid_national_id_is_not_saved(self, runner, mock_env):
        result = runner.invoke(cli, ["profile", "set", "--national-id", "12345678A"])

        assert result.exit_code == 3
        assert "national_id: Check letter does not match the number" in result.output
        assert "National ID: -" in runner.invoke(cli, ["profile", "show"]).output

    def test_end_before_start(self, runner, mock_env):
        runner.invoke(cli, ["profile", "set", "--start", "17:00"])

        result = runner.invoke(cli, ["profile", "set", "--end", "09:00"])

        assert result.exit_code == 3
        assert "end_time: End time must be after start time" in result.output

    def test_malformed_time(self, runner, mock_env):
        result = runner.invoke(cli, ["profile", "set", "--start", "9am"])

        assert result.exit_code == 3
        assert "start_time: Value does not have the expected format" in result.output

    def test_short_name(self, runner, mock_env):
        result = runner.invoke(cli, ["profile", "set", "--name", "A"])

        assert result.exit_code == 3
        assert "Name must be at least 2 characters" in result.output

    def test_existing_invalid_field_does_not_block_others(self, runner, mock_env):
        """Test that only the fields being changed are validated."""
        with open(mock_env["STORAGE_FILE"], "w", encoding="utf-8") as f:
            json.dump({"dniUsuario": "bad"}, f)

        result = runner.invoke(cli, ["profile", "set", "--name", "Ana"])

        assert result.exit_code == 0


class TestProfileShowAndClear:
    """Tests for 'profile show' and 'profile clear'."""

    def test_show_empty(self, runner, mock_env):
        result = runner.invoke(cli, ["profile", "show"])

        assert result.exit_code == 0
        assert "Name:        -" in result.output
        assert "Hours:" not in result.output

    def test_show_with_hours(self, runner, mock_env):
        runner.invoke(
            cli,
            ["profile", "set", "--name", "Ana", "--start", "08:00", "--end", "15:30"],
        )

        result = runner.invoke(cli, ["profile", "show"])

        assert "Name:        Ana" in result.output
        assert "Hours:       7.50 h" in result.output

    def test_clear(self, runner, mock_env):
        """Test that clearing removes every profile key."""
        runner.invoke(cli, ["profile", "set", "--name", "Ana"])

        result = runner.invoke(cli, ["profile", "clear", "--yes"])

        assert result.exit_code == 0
        assert "Profile cleared" in result.output
        assert stored(mock_env) == {}
