# File: src/chaingate/explorer/api.py
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import HTTPException

from ..exceptions import UpstreamError, UpstreamErrorKind, ValidationError
from ..upstream.client import Connector
from ..upstream.models import Block
from ..utils.logger import get_logger
from . import validation
from .enrichment import EnrichmentReport, TransactionEnricher
from .models import BlockResponse, TransactionResponse

logger = get_logger(__name__)

MISSING_BLOCK_SELECTOR_MESSAGE = "one of query params 'height' or 'blockhash' is mandatory"


@dataclass(frozen=True)
class ErrorMessages:
    not_found: str
    bad_request: str
    internal: str


BLOCK_BY_HEIGHT_ERRORS = ErrorMessages(
    not_found="unable to find block for given height",
    bad_request="bad request",
    internal="unable to fetch block for given height",
)
BLOCK_BY_HASH_ERRORS = ErrorMessages(
    not_found="unable to find block for given hash",
    bad_request="bad request block for given hash",
    internal="unable to fetch block by hash",
)
TRANSACTION_ERRORS = ErrorMessages(
    not_found="unable to find tx for given hash",
    bad_request="bad request tx for given hash",
    internal="unable to fetch transaction",
)


def status_for_upstream_error(error: UpstreamError) -> int:
    """Map an upstream failure to the status returned to our caller.

    404 and 400 from the upstream are passed on, everything else including
    transport and decoding failures becomes a 500.
    """
    if error.kind is UpstreamErrorKind.STATUS and error.status_code in (404, 400):
        return error.status_code
    return 500


def upstream_http_exception(error: UpstreamError, messages: ErrorMessages) -> HTTPException:
    status_code = status_for_upstream_error(error)
    if status_code == 404:
        return HTTPException(status_code=404, detail=messages.not_found)
    if status_code == 400:
        return HTTPException(status_code=400, detail=messages.bad_request)
    return HTTPException(status_code=500, detail=messages.internal)


class ExplorerAPI:
    def __init__(self, client: Connector, enricher: Optional[TransactionEnricher] = None,
                 metrics=None):
        self.client = client
        self.enricher = enricher or TransactionEnricher(client)
        self.metrics = metrics

    def get_block(self, network: Optional[str], height: Optional[str] = None,
                  blockhash: Optional[str] = None) -> Dict[str, Any]:
        """Get a block with its first transactions.

        Without ``height`` and ``blockhash`` the latest block of the network
        is returned. ``height`` wins when both are given.
        """
        network = self._validate(validation.validate_network, network,
                                 f"invalid path param network 'id' {network!r}")

        if not height and not blockhash:
            try:
                info = self.client.network_info(network)
            except UpstreamError as e:
                logger.info(f"missing query params 'height' or 'blockhash': {e}")
                raise HTTPException(status_code=400, detail=MISSING_BLOCK_SELECTOR_MESSAGE)
            block = self._fetch_block_by_height(network, info.data.blocks)
        elif height:
            height_value = self._validate(validation.parse_height, height,
                                          f"invalid query param 'height' {height!r}")
            block = self._fetch_block_by_height(network, height_value)
        else:
            self._validate(validation.validate_blockhash, blockhash,
                           f"provided blockhash is not a valid SHA-256 hash: {blockhash!r}")
            try:
                block = self.client.block_by_hash(network, blockhash)
            except UpstreamError as e:
                logger.info(f"unable to fetch block by hash: {e}")
                raise upstream_http_exception(e, BLOCK_BY_HASH_ERRORS)

        report = self.enricher.enrich(network, block.data.txs)
        self._log_enrichment(network, report)
        return BlockResponse.from_upstream(block, report.transactions).to_dict()

    def get_transaction(self, network: Optional[str], txhash: Optional[str]) -> Dict[str, Any]:
        """Get a single transaction by hash."""
        network = self._validate(validation.validate_network, network,
                                 f"invalid path param network 'id' {network!r}")
        self._validate(validation.validate_txhash, txhash,
                       f"path param 'txhash' rejected: {txhash!r}")

        try:
            tx = self.client.transaction(network, txhash)
        except UpstreamError as e:
            logger.info(f"unable to fetch transaction: {e}")
            raise upstream_http_exception(e, TRANSACTION_ERRORS)

        return TransactionResponse.from_upstream(tx).to_dict()

    def _fetch_block_by_height(self, network: str, height: int) -> Block:
        try:
            return self.client.block_by_height(network, height)
        except UpstreamError as e:
            logger.info(f"unable to receive block by height: {e}")
            raise upstream_http_exception(e, BLOCK_BY_HEIGHT_ERRORS)

    def _validate(self, check, value, log_message: str):
        try:
            return check(value)
        except ValidationError as e:
            logger.info(log_message)
            raise HTTPException(status_code=400, detail=str(e))

    def _log_enrichment(self, network: str, report: EnrichmentReport) -> None:
        for failure in report.failures:
            error = failure.error
            if isinstance(error, UpstreamError) and error.kind is UpstreamErrorKind.STATUS:
                logger.warning(
                    f"unable to fetch transaction txhash={failure.txid} "
                    f"statuscode={error.status_code}: {error}"
                )
            else:
                logger.info(f"unable to fetch transaction txhash={failure.txid}: {error!r}")

        if self.metrics is not None:
            self.metrics.record_enrichment(network, len(report.transactions), report.failure_count)
