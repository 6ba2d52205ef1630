# tests/test_enrichment.py
import threading
import time
from unittest.mock import MagicMock, patch

import pytest

from chaingate.exceptions import UpstreamError, UpstreamErrorKind
from chaingate.explorer.enrichment import TransactionEnricher
from chaingate.upstream.client import API_URL, SochainClient

from conftest import FakeConnector


class SlowConnector(FakeConnector):
    """Delays lookups so later ids finish first and tracks concurrency."""

    def __init__(self):
        super().__init__()
        self.active = 0
        self.peak = 0
        self._counter_lock = threading.Lock()

    def transaction(self, network, tx_hash):
        with self._counter_lock:
            self.active += 1
            self.peak = max(self.peak, self.active)
        try:
            time.sleep(0.01 * (20 - int(tx_hash)))
            return super().transaction(network, tx_hash)
        finally:
            with self._counter_lock:
                self.active -= 1


class TestTransactionEnricher:
    @pytest.fixture
    def enricher(self, connector):
        return TransactionEnricher(connector)

    def test_all_lookups_succeed(self, enricher, connector):
        connector.add_transactions("1", "2")

        report = enricher.enrich("btc", ["1", "2"])

        assert [tx.data.txid for tx in report.transactions] == ["1", "2"]
        assert report.failure_count == 0

    def test_failures_are_counted_not_raised(self, enricher, connector):
        connector.add_transactions("1", "2")
        connector.errors[("transaction", "btc", "3")] = ValueError("unexpected")
        connector.errors[("transaction", "btc", "4")] = UpstreamError.status("server error", 500)

        report = enricher.enrich("btc", ["1", "2", "3", "4"])

        assert len(report.transactions) == 2
        assert report.failure_count == 2
        failures = {f.txid: f.error for f in report.failures}
        assert isinstance(failures["3"], ValueError)
        assert failures["4"].kind is UpstreamErrorKind.STATUS
        assert failures["4"].status_code == 500

    def test_total_failure_returns_empty_report(self, enricher):
        report = enricher.enrich("btc", ["a", "b", "c"])

        assert report.transactions == []
        assert report.failure_count == 3

    def test_caps_at_ten_in_upstream_order(self, enricher, connector):
        txids = [str(i) for i in range(1, 16)]
        connector.add_transactions(*txids)

        report = enricher.enrich("btc", txids)

        assert [tx.data.txid for tx in report.transactions] == txids[:10]
        assert len(report.transactions) + report.failure_count == 10
        assert len(connector.calls) == 10

    def test_successes_plus_failures_match_capped_ids(self, enricher, connector):
        txids = [str(i) for i in range(1, 13)]
        connector.add_transactions(*txids[::2])

        report = enricher.enrich("btc", txids)

        assert len(report.transactions) + report.failure_count == 10

    def test_empty_id_list(self, enricher, connector):
        report = enricher.enrich("btc", [])

        assert report.transactions == []
        assert report.failure_count == 0
        assert connector.calls == []

    def test_order_does_not_depend_on_completion(self):
        connector = SlowConnector()
        txids = [str(i) for i in range(1, 6)]
        connector.add_transactions(*txids)

        report = TransactionEnricher(connector).enrich("btc", txids)

        assert [tx.data.txid for tx in report.transactions] == txids

    def test_lookups_run_concurrently_within_worker_bound(self):
        connector = SlowConnector()
        txids = [str(i) for i in range(1, 9)]
        connector.add_transactions(*txids)

        TransactionEnricher(connector, max_workers=3).enrich("btc", txids)

        assert 1 < connector.peak <= 3

    def test_custom_cap(self, connector):
        connector.add_transactions("1", "2", "3")

        report = TransactionEnricher(connector, max_transactions=2).enrich("btc", ["1", "2", "3"])

        assert [tx.data.txid for tx in report.transactions] == ["1", "2"]

    def test_rejects_non_positive_cap(self, connector):
        with pytest.raises(ValueError):
            TransactionEnricher(connector, max_transactions=0)

    def test_transaction_with_unrenderable_time_is_dropped(self):
        client = SochainClient()
        payloads = {
            f"{API_URL}/tx/btc/good": {"data": {"txid": "good", "time": 1609459200}},
            f"{API_URL}/tx/btc/bad": {"data": {"txid": "bad", "time": 10 ** 13}},
        }

        def fake_get(url, timeout=None):
            resp = MagicMock()
            resp.status_code = 200
            resp.json.return_value = payloads[url]
            return resp

        with patch.object(client.session, "get", side_effect=fake_get):
            report = TransactionEnricher(client).enrich("btc", ["good", "bad"])

        assert [tx.data.txid for tx in report.transactions] == ["good"]
        assert report.failures[0].txid == "bad"
        assert report.failures[0].error.kind is UpstreamErrorKind.DECODE
