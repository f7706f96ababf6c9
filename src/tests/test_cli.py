"""Tests for the command line entrypoint."""

import json
from unittest.mock import Mock

import pytest

import cli
from config import get_settings
from consumer import DEFAULT_URL, PageConsumer
from exceptions import ConfigurationError


@pytest.fixture
def no_network(monkeypatch):
    http = Mock(side_effect=AssertionError("network touched"))
    monkeypatch.setattr(cli, "PageConsumer", lambda url: PageConsumer(url, http=http))
    return http


def test_settings_default_url():
    settings = get_settings(["--hash", "h1", "--token", "t1"])

    assert settings.url == DEFAULT_URL
    assert (settings.hash, settings.token) == ("h1", "t1")


@pytest.mark.parametrize(
    "argv",
    [
        ["--hash", "", "--token", "t1"],
        ["--hash", "h1", "--token", ""],
        ["--url", "", "--hash", "h1", "--token", "t1"],
        ["--token", "t1"],
        [],
    ],
)
def test_settings_reject_missing_values(argv):
    with pytest.raises(ConfigurationError, match="invalid arguments"):
        get_settings(argv)


def test_empty_hash_exits_before_any_request(no_network, capsys, caplog):
    code = cli.main(["--hash", "", "--token", "t1"])

    assert code == 1
    assert "invalid arguments" in caplog.text
    assert capsys.readouterr().out == ""
    no_network.assert_not_called()


def test_full_run_prints_summary(monkeypatch, capsys):
    bodies = [
        json.dumps({"meta": {"next": "abc"}, "data": {"records": [["1"], ["2"], ["3"]]}}).encode(),
        json.dumps({"meta": {"next": ""}, "data": {"records": [["4"]] * 5}}).encode(),
    ]
    http = Mock(side_effect=[(200, b) for b in bodies])
    monkeypatch.setattr(cli, "PageConsumer", lambda url: PageConsumer(url, http=http))

    code = cli.main(["--url", "http://proxy:9000", "--hash", "h1", "--token", "first"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[0] == "Hash: h1, First Token: first"
    assert out[1] == "  Pages: 2"
    assert out[2] == "  Records: 8"
    assert out[3].startswith("  Duration to retrieve pages: ")
    assert out[4].startswith("  Duration to unmarshal pages: ")
    assert http.call_args.args[0] == "http://proxy:9000/page"


def test_malformed_page_reports_error(monkeypatch, capsys):
    http = Mock(return_value=(200, b"this is not json"))
    monkeypatch.setattr(cli, "PageConsumer", lambda url: PageConsumer(url, http=http))

    code = cli.main(["--hash", "h1", "--token", "first"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert len(out) == 2
    assert out[0] == "Hash: h1, First Token: first"
    assert out[1].startswith("Error: [dataproxy] decode response")
