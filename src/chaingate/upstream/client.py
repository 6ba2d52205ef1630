# File: src/chaingate/upstream/client.py
import time
from abc import ABC, abstractmethod
from typing import Optional, Type, TypeVar

import pydantic
import requests

from ..exceptions import UpstreamError
from ..utils.logger import get_logger
from .models import Block, NetworkInfo, Transaction

API_URL = "https://sochain.com/api/v2"

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


class Connector(ABC):
    """Read-only operations the gateway needs from a block explorer."""

    @abstractmethod
    def network_info(self, network: str) -> NetworkInfo:
        ...

    @abstractmethod
    def block_by_height(self, network: str, height: int) -> Block:
        ...

    @abstractmethod
    def block_by_hash(self, network: str, block_hash: str) -> Block:
        ...

    @abstractmethod
    def transaction(self, network: str, tx_hash: str) -> Transaction:
        ...

    def close(self) -> None:
        """Release connections held by the connector."""


class SochainClient(Connector):
    """Blocking client for the SoChain v2 REST API.

    Every call is a single GET with no retry. The client keeps no state
    between calls apart from the pooled connections of its session, so one
    instance can be shared by any number of threads.
    """

    def __init__(
        self,
        base_url: str = API_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        metrics=None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.metrics = metrics

    def network_info(self, network: str) -> NetworkInfo:
        return self._get(
            "network_info",
            f"get_info/{network}",
            NetworkInfo,
            f"networkID '{network}'",
        )

    def block_by_height(self, network: str, height: int) -> Block:
        return self._get(
            "block_by_height",
            f"get_block/{network}/{height}",
            Block,
            f"height '{height}'",
        )

    def block_by_hash(self, network: str, block_hash: str) -> Block:
        return self._get(
            "block_by_hash",
            f"get_block/{network}/{block_hash}",
            Block,
            f"blockhash '{block_hash}'",
        )

    def transaction(self, network: str, tx_hash: str) -> Transaction:
        return self._get(
            "transaction",
            f"tx/{network}/{tx_hash}",
            Transaction,
            f"txhash '{tx_hash}'",
        )

    def close(self) -> None:
        self.session.close()

    def _get(self, operation: str, path: str, model: Type[ModelT], context: str) -> ModelT:
        url = f"{self.base_url}/{path}"
        started = time.perf_counter()
        outcome = "error"
        try:
            try:
                resp = self.session.get(url, timeout=self.timeout)
            except requests.RequestException as e:
                logger.debug(f"GET {url} failed: {e}")
                raise UpstreamError.transport(f"sochain request failed, {context}: {e}") from e

            if resp.status_code != 200:
                outcome = str(resp.status_code)
                raise UpstreamError.status(
                    f"sochain response statuscode {resp.status_code}, {context}",
                    resp.status_code,
                )

            try:
                result = model.model_validate(resp.json())
            except (ValueError, pydantic.ValidationError) as e:
                # requests' JSONDecodeError is a ValueError
                raise UpstreamError.decode(f"unable to decode sochain response, {context}: {e}") from e

            outcome = "ok"
            return result
        finally:
            if self.metrics is not None:
                self.metrics.record_upstream_request(
                    operation, outcome, time.perf_counter() - started
                )
