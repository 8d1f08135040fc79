from typer.testing import CliRunner

from numbergate.main import app

runner = CliRunner()


def test_number_command_prints_components():
    result = runner.invoke(app, ["number"])
    assert result.exit_code == 0
    assert "hour" in result.output and "second" in result.output
    assert "Z" in result.output


def test_help_lists_commands():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "serve" in result.output
    assert "number" in result.output
