# File: src/chaingate/explorer/models.py
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from ..upstream import models as upstream

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(epoch_seconds: int) -> str:
    """Render upstream epoch seconds as an RFC 3339 UTC timestamp."""
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc).strftime(RFC3339_FORMAT)


class TransactionResponse(BaseModel):
    txid: Optional[str] = None
    time: Optional[str] = None
    fee: Optional[str] = None
    sent_value: Optional[str] = None

    @classmethod
    def from_upstream(cls, tx: upstream.Transaction) -> "TransactionResponse":
        return cls(
            txid=tx.data.txid or None,
            time=format_timestamp(tx.data.time),
            fee=tx.data.fee or None,
            sent_value=tx.data.sent_value or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        # Empty fields are left out of the payload
        return self.model_dump(exclude_none=True)


class BlockResponse(BaseModel):
    blocknumber: int
    timestamp: str
    previoushash: str = ""
    nexthash: str = ""
    size: int = 0
    transactions: List[TransactionResponse] = Field(default_factory=list)

    @classmethod
    def from_upstream(cls, block: upstream.Block,
                      transactions: Iterable[upstream.Transaction] = ()) -> "BlockResponse":
        data = block.data
        return cls(
            blocknumber=data.block_no,
            timestamp=format_timestamp(data.time),
            previoushash=data.previous_blockhash or "",
            nexthash=data.next_blockhash or "",
            size=data.size,
            transactions=[TransactionResponse.from_upstream(tx) for tx in transactions],
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = self.model_dump(exclude={"transactions"})
        payload["transactions"] = [tx.to_dict() for tx in self.transactions]
        return payload
