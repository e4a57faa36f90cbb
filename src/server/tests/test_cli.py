# -*- coding: utf-8 -*-
"""
测试命令行入口与配置加载
"""

import pytest
import requests
from pydantic import ValidationError

import cli
from config import TARGET_HOST, load_config


def test_load_config_defaults(monkeypatch):
    for key in ("NETINFO_TARGET_HOST", "NETINFO_TIMEOUT", "NETINFO_TOP_PEERS", "NETINFO_OUTPUT_FILE"):
        monkeypatch.delenv(key, raising=False)
    config = load_config()
    assert config.host == TARGET_HOST
    assert config.timeout == 30
    assert config.top_n == 5
    assert config.output_path == "peers.txt"


def test_load_config_env_then_overrides(monkeypatch):
    monkeypatch.setenv("NETINFO_TARGET_HOST", "rpc.example:26657")
    monkeypatch.setenv("NETINFO_TOP_PEERS", "8")
    config = load_config(top_n=3, timeout=None)
    assert config.host == "rpc.example:26657"
    assert config.top_n == 3
    assert config.timeout == 30


def test_load_config_rejects_invalid():
    with pytest.raises(ValidationError):
        load_config(timeout=0)
    with pytest.raises(ValidationError):
        load_config(top_n=-1)


def test_cli_success(tmp_path, make_peer, make_net_info, fake_response, serve_net_info):
    output = tmp_path / "out.txt"
    serve_net_info(fake_response(content=make_net_info([make_peer("a", sent="1", remote_ip="5.5.5.5")])))

    code = cli.main(["--host", "node:26657", "--output", str(output)])

    assert code == 0
    assert output.read_text(encoding="utf-8") == "a@5.5.5.5:26656"


def test_cli_fatal_returns_nonzero(tmp_path, serve_net_info):
    output = tmp_path / "out.txt"
    serve_net_info(error=requests.exceptions.ConnectionError("refused"))

    assert cli.main(["--output", str(output)]) == 1
    assert not output.exists()


def test_cli_invalid_config_exits(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--top", "-1", "--output", str(tmp_path / "out.txt")])
    assert exc_info.value.code == 2
