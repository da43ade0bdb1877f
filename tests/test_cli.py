"""
Tests for the command line interface
"""

import json

import pytest

from masterstat import cli
from masterstat.models import MultiQueryResult, QuerySuccess


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep CLI logging handlers out of the test run"""
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


class TestMain:
    """Test cli.main"""

    def test_plain_output(self, master_factory, capsys):
        first = master_factory(["2.2.2.2:1", "1.1.1.1:1"])
        second = master_factory(["1.1.1.1:1"])
        assert cli.main([first.address, second.address, "-t", "1"]) == 0
        assert capsys.readouterr().out.splitlines() == ["1.1.1.1:1", "2.2.2.2:1"]

    def test_json_output(self, master_factory, capsys):
        server = master_factory(["1.1.1.1:1"])
        silent = master_factory(silent=True)
        assert cli.main(["--json", "-t", "0.5", server.address, silent.address]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["server_addresses"] == ["1.1.1.1:1"]
        assert data["successes"][0]["master_address"] == server.address
        assert data["failures"] == [
            {"master_address": silent.address, "error": "timeout reached while waiting for response"}
        ]

    def test_malformed_master(self):
        """Test masters that are not host:port are rejected before querying"""
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["broken"])
        assert excinfo.value.code == 2

    def test_all_failed(self, master_factory, capsys):
        server = master_factory(silent=True)
        assert cli.main(["-t", "0.1", server.address]) == 1
        assert capsys.readouterr().out == ""

    def test_invalid_arguments(self):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["-t", "0", "127.0.0.1:27000"])
        assert excinfo.value.code == 2


class TestFormatResult:
    """Test output formatting"""

    def test_plain(self):
        result = MultiQueryResult(successes=[QuerySuccess("m:1", ["b:1", "a:1", "a:1"])])
        assert cli.format_result(result, json_output=False) == "a:1\nb:1"

    def test_json(self):
        result = MultiQueryResult(successes=[QuerySuccess("m:1", ["a:1"])])
        assert json.loads(cli.format_result(result, json_output=True))["server_addresses"] == ["a:1"]
