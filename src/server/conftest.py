# -*- coding: utf-8 -*-
"""
测试公共夹具：构造 net_info 返回体，并隔离 requests 网络调用。
"""

import json
from types import SimpleNamespace

import pytest


class FakeResponse:
    def __init__(self, *, status=200, content=b"", read_error=None):
        self.status_code = status
        self._content = content
        self._read_error = read_error
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def close(self):
        self.closed = True

    @property
    def content(self):
        if self._read_error is not None:
            raise self._read_error
        return self._content


@pytest.fixture
def make_peer():
    def _make(node_id, sent="0", received="0", listen_addr="0.0.0.0:26656",
              remote_ip="1.2.3.4", moniker=None, network="cosmoshub-4"):
        return {
            "node_info": {
                "protocol_version": {"p2p": "8", "block": "11", "app": "0"},
                "id": node_id,
                "listen_addr": listen_addr,
                "network": network,
                "version": "0.37.2",
                "channels": "40202122233038606100",
                "moniker": moniker or f"moniker-{node_id}",
                "other": {"tx_index": "on", "rpc_address": "tcp://0.0.0.0:26657"},
            },
            "is_outbound": True,
            "connection_status": {
                "Duration": "3600000000000",
                "SendMonitor": {"Active": True, "Start": "2024-01-01T00:00:00Z",
                                "Bytes": sent, "Progress": 0},
                "RecvMonitor": {"Active": True, "Start": "2024-01-01T00:00:00Z",
                                "Bytes": received, "Progress": 0},
                "Channels": [{"ID": 48, "SendQueueCapacity": "1", "SendQueueSize": "0",
                              "Priority": "5", "RecentlySent": "0"}],
            },
            "remote_ip": remote_ip,
        }
    return _make


@pytest.fixture
def make_net_info():
    def _make(peers):
        return json.dumps({
            "jsonrpc": "2.0",
            "id": -1,
            "result": {
                "listening": True,
                "listeners": ["Listener(@)"],
                "n_peers": str(len(peers)),
                "peers": peers,
            },
        }).encode("utf-8")
    return _make


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def serve_net_info(monkeypatch):
    """替换 netinfo_client.fetch 中的 requests，返回给定响应或抛出给定异常"""
    calls = []

    def _install(response=None, error=None):
        def fake_get(url, timeout=0, **kwargs):
            calls.append(SimpleNamespace(url=url, timeout=timeout))
            if error is not None:
                raise error
            return response

        monkeypatch.setattr("netinfo_client.fetch.requests", SimpleNamespace(get=fake_get))
        return calls

    return _install
