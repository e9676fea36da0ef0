from typer.testing import CliRunner

from birth_number.presentation.cli.main import app

runner = CliRunner()


def test_parse_command():
    result = runner.invoke(app, ["parse", "01017000027"])
    assert result.exit_code == 0
    assert "1970-01-01" in result.output
    assert "00027" in result.output


def test_parse_command_rejects_bad_input():
    result = runner.invoke(app, ["parse", "123"])
    assert result.exit_code == 1


def test_validate_command():
    result = runner.invoke(app, ["validate", "01017000027", "12056647528"])
    assert result.exit_code == 0
    assert "01017000027: valid" in result.output


def test_validate_command_fails_on_invalid():
    result = runner.invoke(app, ["validate", "01017000027", "23"])
    assert result.exit_code == 1
    assert "23: invalid" in result.output
