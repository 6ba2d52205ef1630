# tests/conftest.py
import threading

import pytest
from fastapi.testclient import TestClient

from chaingate.api.server import create_app
from chaingate.exceptions import UpstreamError
from chaingate.explorer.api import ExplorerAPI
from chaingate.monitoring.metrics import MetricsCollector
from chaingate.upstream.client import Connector
from chaingate.upstream.models import Block, NetworkInfo, Transaction

BLOCK_HASH = "a" * 64
TX_HASH = "b" * 64


def make_block(height=1, txs=(), time=1609459200):
    return Block.model_validate({
        "status": "success",
        "data": {
            "network": "BTC",
            "blockhash": BLOCK_HASH,
            "block_no": height,
            "time": time,
            "txs": list(txs),
            "previous_blockhash": "c" * 64,
            "next_blockhash": "d" * 64,
            "size": 285,
        },
    })


def make_transaction(txid, time=1609459200, fee="0.00010000", sent_value="1.23456789"):
    return Transaction.model_validate({
        "status": "success",
        "data": {"txid": txid, "time": time, "fee": fee, "sent_value": sent_value},
    })


class FakeConnector(Connector):
    """In-memory connector recording every call it receives."""

    def __init__(self, latest_height=1):
        self.latest_height = latest_height
        self.blocks = {}
        self.transactions = {}
        self.errors = {}
        self.calls = []
        self.closed = False
        self._lock = threading.Lock()

    def _record(self, *call):
        with self._lock:
            self.calls.append(call)
        error = self.errors.get(call)
        if error is not None:
            raise error

    def network_info(self, network):
        self._record("network_info", network)
        return NetworkInfo.model_validate({"status": "success", "data": {"blocks": self.latest_height}})

    def block_by_height(self, network, height):
        self._record("block_by_height", network, height)
        if height not in self.blocks:
            raise UpstreamError.status("sochain response statuscode 404", 404)
        return self.blocks[height]

    def block_by_hash(self, network, block_hash):
        self._record("block_by_hash", network, block_hash)
        if block_hash not in self.blocks:
            raise UpstreamError.status("sochain response statuscode 404", 404)
        return self.blocks[block_hash]

    def transaction(self, network, tx_hash):
        self._record("transaction", network, tx_hash)
        if tx_hash not in self.transactions:
            raise UpstreamError.status("sochain response statuscode 404", 404)
        return self.transactions[tx_hash]

    def close(self):
        self.closed = True

    def add_block(self, block, by_hash=False):
        key = block.data.blockhash if by_hash else block.data.block_no
        self.blocks[key] = block
        return block

    def add_transactions(self, *txids):
        for txid in txids:
            self.transactions[txid] = make_transaction(txid)


@pytest.fixture
def connector():
    return FakeConnector()


@pytest.fixture
def metrics():
    return MetricsCollector()


@pytest.fixture
def explorer(connector, metrics):
    return ExplorerAPI(connector, metrics=metrics)


@pytest.fixture
def client(explorer, metrics):
    with TestClient(create_app(explorer, metrics=metrics)) as test_client:
        yield test_client
