"""
Tests for the nodeweb CLI.
"""

from unittest.mock import patch

from click.testing import CliRunner

from nodeweb.cli import main


def test_stage_command(monkeypatch):
    monkeypatch.setenv("NODEWEB_SECURITY_PARAM_K", "5")
    for name in ("NODEWEB_SSC_COMMITMENT", "NODEWEB_SSC_OPENING", "NODEWEB_SSC_SHARES"):
        monkeypatch.delenv(name, raising=False)
    runner = CliRunner()

    result = runner.invoke(main, ["stage", "3"])
    assert result.exit_code == 0
    assert result.output.strip() == "commitment"

    result = runner.invoke(main, ["stage", "12"])
    assert result.output.strip() == "opening"

    result = runner.invoke(main, ["stage", "27"])
    assert result.output.strip() == "ordinary"


def test_stage_rejects_negative_index():
    result = CliRunner().invoke(main, ["stage", "--", "-1"])
    assert result.exit_code != 0


def test_invalid_config_exits(monkeypatch):
    monkeypatch.setenv("NODEWEB_SECURITY_PARAM_K", "0")
    result = CliRunner().invoke(main, ["config"])
    assert result.exit_code == 1


def test_serve_applies_options(monkeypatch):
    monkeypatch.setenv("NODEWEB_SECURITY_PARAM_K", "2")
    with patch("uvicorn.run") as mock_run:
        result = CliRunner().invoke(main, ["serve", "--port", "9200", "--base-only", "--no-request-logging"])
    assert result.exit_code == 0, result.output
    _, kwargs = mock_run.call_args
    assert kwargs["port"] == 9200
    app = mock_run.call_args[0][0]
    assert app.state.config.ENABLE_SSC is False
    assert app.state.config.REQUEST_LOGGING is False


def test_unparsable_port_reported(monkeypatch):
    monkeypatch.setenv("NODEWEB_PORT", "abc")
    result = CliRunner().invoke(main, ["config"])
    assert result.exit_code == 1
    assert "Configuration errors" in result.output
    assert "NODEWEB_PORT is not an integer: 'abc'" in result.output
    assert not isinstance(result.exception, ValueError)
