"""
CLI Unit Tests
Tests for http_template_cli/main.py and commands/request.py
"""

import json

import pytest

from fixtures import make_response
from http_template.config import HttpTemplateConfig, set_default_config
from http_template.schemas.enums import Protocol
from http_template_cli.commands import request as request_cmd
from http_template_cli.commands.request import parse_form_pairs
from http_template_cli.main import (
    EXIT_HTTP_ERROR,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    main,
)


class TestParseFormPairs:
    """Tests for parse_form_pairs()."""

    def test_pairs(self):
        assert parse_form_pairs(["a=1", "b=x=y", "c="]) == {"a": "1", "b": "x=y", "c": ""}

    def test_none(self):
        assert parse_form_pairs(None) == {}

    @pytest.mark.parametrize("pair", ["novalue", "=1"])
    def test_invalid(self, pair):
        with pytest.raises(ValueError):
            parse_form_pairs([pair])


class TestGetCommand:
    """Tests for `http-template get`."""

    def test_prints_body(self, fake_transport, session, capsys):
        code = main(["get", "http://example.com/ping"])

        assert code == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == "pong"
        session.get.assert_called_once_with("http://example.com/ping")

    def test_json_output(self, fake_transport, session, capsys):
        session.get.return_value = make_response(200, '{"up": true}')

        code = main(["get", "http://example.com/status", "--json"])

        assert code == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out) == {"ok": True, "result": {"up": True}}

    def test_https_flag_and_timeout(self, fake_transport):
        code = main(["get", "https://self-signed.example/ping", "--https", "--timeout", "3"])

        assert code == EXIT_SUCCESS
        assert fake_transport.calls == [(Protocol.HTTPS, 3.0)]

    def test_http_failure_exit_code(self, fake_transport, session, capsys):
        session.get.return_value = make_response(503, "down")

        code = main(["get", "http://example.com/ping"])

        assert code == EXIT_HTTP_ERROR
        assert "Error [1002]: response status code invalid" in capsys.readouterr().err

    def test_http_failure_json(self, fake_transport, session, capsys):
        session.get.return_value = make_response(503, "down")

        code = main(["get", "http://example.com/ping", "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert code == EXIT_HTTP_ERROR
        assert payload["ok"] is False
        assert payload["error"]["code"] == 1002
        assert payload["error"]["details"]["status_code"] == 503

    def test_bad_charset(self, fake_transport, capsys):
        code = main(["get", "http://example.com/ping", "--charset", "nope"])

        assert code == EXIT_RUNTIME_ERROR
        assert not fake_transport.called


class TestPostCommand:
    """Tests for `http-template post`."""

    def test_posts_form(self, fake_transport, session):
        code = main(["post", "http://example.com/submit", "-d", "a=1", "--data", "b=2"])

        assert code == EXIT_SUCCESS
        assert session.post.call_args.kwargs["data"] == b"a=1&b=2"

    def test_bad_pair(self, fake_transport, capsys):
        code = main(["post", "http://example.com/submit", "-d", "oops"])

        assert code == EXIT_RUNTIME_ERROR
        assert "key=value" in capsys.readouterr().err
        assert not fake_transport.called


class TestConfigCommand:
    """Tests for `http-template config` and configuration loading."""

    def test_show_defaults(self, capsys):
        code = main(["config", "--show"])

        assert code == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out) == {
            "protocol": "http",
            "content_type": "application/json",
            "charset": "UTF-8",
            "request_method": "POST",
            "connection_timeout": 10.0,
        }

    def test_yaml_then_env(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "http.yaml"
        path.write_text("protocol: https\ncharset: GBK\n")
        monkeypatch.setenv("HTTP_TEMPLATE_CHARSET", "UTF-8")

        code = main(["--config", str(path), "config", "--show"])

        shown = json.loads(capsys.readouterr().out)
        assert code == EXIT_SUCCESS
        assert shown["protocol"] == "https"
        assert shown["charset"] == "UTF-8"

    def test_missing_config_file(self, tmp_path, capsys):
        code = main(["--config", str(tmp_path / "missing.yaml"), "config", "--show"])

        assert code == EXIT_RUNTIME_ERROR
        assert "Error loading configuration" in capsys.readouterr().err

    def test_no_command(self, capsys):
        assert main([]) == EXIT_RUNTIME_ERROR

    def test_config_file_option(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "http.yaml"
        path.write_text("protocol: https\ncharset: GBK\nconnection_timeout: 4\n")
        monkeypatch.setenv("HTTP_TEMPLATE_CONTENT_TYPE", "text/plain")

        code = main(["config", "--file", str(path)])

        shown = json.loads(capsys.readouterr().out)
        assert code == EXIT_SUCCESS
        assert shown["protocol"] == "https"
        assert shown["charset"] == "GBK"
        assert shown["connection_timeout"] == 4.0
        assert shown["content_type"] == "text/plain"

    def test_config_file_missing(self, tmp_path, capsys):
        code = main(["config", "--file", str(tmp_path / "missing.yaml")])

        assert code == EXIT_RUNTIME_ERROR
        assert "Error loading configuration" in capsys.readouterr().err

    def test_config_file_invalid_value(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("request_method: DELETE\n")

        assert main(["config", "-f", str(path)]) == EXIT_RUNTIME_ERROR

    def test_process_default_config_is_used(self, capsys):
        set_default_config(HttpTemplateConfig(protocol=Protocol.HTTPS, charset="GBK"))

        code = main(["config", "--show"])

        shown = json.loads(capsys.readouterr().out)
        assert code == EXIT_SUCCESS
        assert shown["protocol"] == "https"
        assert shown["charset"] == "GBK"

    def test_default_config_drives_requests(self, fake_transport):
        set_default_config(HttpTemplateConfig(protocol=Protocol.HTTPS, connection_timeout=6))

        assert main(["get", "https://internal.example/ping"]) == EXIT_SUCCESS
        assert fake_transport.calls == [(Protocol.HTTPS, 6.0)]


class TestExitCodes:
    """Exit codes have a single definition shared by main and the commands."""

    def test_same_objects(self):
        assert EXIT_HTTP_ERROR is request_cmd.EXIT_HTTP_ERROR
        assert EXIT_RUNTIME_ERROR is request_cmd.EXIT_RUNTIME_ERROR
        assert EXIT_SUCCESS is request_cmd.EXIT_SUCCESS

    def test_values(self):
        assert (EXIT_SUCCESS, EXIT_RUNTIME_ERROR, EXIT_HTTP_ERROR) == (0, 1, 2)
