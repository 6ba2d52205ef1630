# File: src/chaingate/upstream/models.py
"""Shapes of the SoChain v2 JSON envelopes.

Monetary amounts and difficulty values are kept as the strings the upstream
sends so no precision is lost on the way through the gateway.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# 9999-12-31T23:59:59Z, the last second a datetime can render
MAX_EPOCH_SECONDS = 253402300799


def check_epoch(value: int) -> int:
    if not 0 <= value <= MAX_EPOCH_SECONDS:
        raise ValueError(f"epoch seconds out of range: {value}")
    return value


class UpstreamModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # A null field decodes to its empty default
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class NetworkData(UpstreamModel):
    name: str = ""
    acronym: str = ""
    network: str = ""
    symbol_htmlcode: str = ""
    url: str = ""
    mining_difficulty: str = ""
    unconfirmed_txs: int = 0
    blocks: int = 0
    price: str = ""
    price_base: str = ""
    price_update_time: int = 0
    hashrate: str = ""


class NetworkInfo(UpstreamModel):
    status: str = ""
    data: NetworkData = Field(default_factory=NetworkData)


class BlockData(UpstreamModel):
    network: str = ""
    blockhash: str = ""
    block_no: int = 0
    mining_difficulty: str = ""
    time: int = 0
    confirmations: int = 0
    is_orphan: bool = False
    txs: List[str] = Field(default_factory=list)
    merkleroot: str = ""
    previous_blockhash: str = ""
    next_blockhash: str = ""
    size: int = 0

    @field_validator("time")
    @classmethod
    def check_time(cls, value: int) -> int:
        return check_epoch(value)


class Block(UpstreamModel):
    status: str = ""
    data: BlockData = Field(default_factory=BlockData)


class Input(UpstreamModel):
    input_no: int = 0
    address: str = ""
    value: str = ""
    received_from: Any = None
    script_asm: str = ""
    script_hex: Any = None
    witness: Optional[List[str]] = None


class Output(UpstreamModel):
    output_no: int = 0
    address: str = ""
    value: str = ""
    type: str = ""
    req_sigs: Any = None
    spent: Any = None
    script_asm: str = ""
    script_hex: str = ""


class TransactionData(UpstreamModel):
    network: str = ""
    txid: str = ""
    blockhash: str = ""
    block_no: int = 0
    confirmations: int = 0
    time: int = 0
    size: int = 0
    vsize: int = 0
    version: int = 0
    locktime: int = 0
    sent_value: str = ""
    fee: str = ""
    inputs: List[Input] = Field(default_factory=list)
    outputs: List[Output] = Field(default_factory=list)
    tx_hex: str = ""

    @field_validator("time")
    @classmethod
    def check_time(cls, value: int) -> int:
        return check_epoch(value)


class Transaction(UpstreamModel):
    status: str = ""
    data: TransactionData = Field(default_factory=TransactionData)
    code: int = 0
    message: str = ""
