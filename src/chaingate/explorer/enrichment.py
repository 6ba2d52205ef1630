# File: src/chaingate/explorer/enrichment.py
"""Concurrent lookup of the transactions listed in a block."""
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..upstream.client import Connector
from ..upstream.models import Transaction
from ..utils.config import Config


@dataclass
class EnrichmentFailure:
    txid: str
    error: Exception


@dataclass
class EnrichmentReport:
    transactions: List[Transaction] = field(default_factory=list)
    failures: List[EnrichmentFailure] = field(default_factory=list)

    @property
    def failure_count(self) -> int:
        return len(self.failures)


class TransactionEnricher:
    """Fetch full transaction records for a block's transaction ids.

    At most ``max_transactions`` ids are looked up, always the first ones in
    the order the block lists them. Lookups run in parallel on a thread pool
    and every one of them runs to completion; a failed lookup is recorded in
    the report and never affects its siblings. Successful transactions are
    returned in the order of their ids, not in completion order.
    """

    def __init__(self, client: Connector, max_transactions: int = Config.MAX_TX_PER_BLOCK,
                 max_workers: Optional[int] = None):
        if max_transactions < 1:
            raise ValueError("max_transactions must be at least 1")
        self.client = client
        self.max_transactions = max_transactions
        self.max_workers = max_workers or max_transactions

    def cap(self, tx_ids: Sequence[str]) -> List[str]:
        return list(tx_ids[:self.max_transactions])

    def enrich(self, network: str, tx_ids: Sequence[str]) -> EnrichmentReport:
        ids = self.cap(tx_ids)
        report = EnrichmentReport()
        if not ids:
            return report

        workers = min(self.max_workers, len(ids))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="enrich") as executor:
            futures = [executor.submit(self.client.transaction, network, txid) for txid in ids]

            # Each slot belongs to one id, so the result keeps the block's order
            for txid, future in zip(ids, futures):
                try:
                    report.transactions.append(future.result())
                except Exception as e:
                    report.failures.append(EnrichmentFailure(txid=txid, error=e))

        return report
