# File: src/chaingate/explorer/validation.py
import re
from typing import Optional

from ..exceptions import ValidationError
from ..utils.config import Config

INVALID_NETWORK_MESSAGE = "path param: network 'id' can only be 'btc', 'ltc' or 'doge'"
INVALID_HEIGHT_MESSAGE = "query param 'height' is no integer number, zero or negative"
INVALID_BLOCKHASH_MESSAGE = "provided blockhash is not a valid SHA-256 hash"
MISSING_TXHASH_MESSAGE = "path param: missing 'txhash'"
INVALID_TXHASH_MESSAGE = "path param: 'txhash' is not a valid SHA-256 hash"

HEIGHT_PATTERN = re.compile(r"[+-]?[0-9]+")


def validate_network(network: Optional[str]) -> str:
    """Return the network id if it is one of the supported chains."""
    if not network or network not in Config.SUPPORTED_NETWORKS:
        raise ValidationError(INVALID_NETWORK_MESSAGE)
    return network


def is_sha256_hash(value: str) -> bool:
    return Config.HASH_PATTERN.fullmatch(value) is not None


def parse_height(height: str) -> int:
    """Parse a block height; only strictly positive base-10 integers pass."""
    if not HEIGHT_PATTERN.fullmatch(height):
        raise ValidationError(INVALID_HEIGHT_MESSAGE)
    value = int(height)
    if value <= 0:
        raise ValidationError(INVALID_HEIGHT_MESSAGE)
    return value


def validate_blockhash(block_hash: str) -> str:
    if not is_sha256_hash(block_hash):
        raise ValidationError(INVALID_BLOCKHASH_MESSAGE)
    return block_hash


def validate_txhash(tx_hash: Optional[str]) -> str:
    if not tx_hash:
        raise ValidationError(MISSING_TXHASH_MESSAGE)
    if not is_sha256_hash(tx_hash):
        raise ValidationError(INVALID_TXHASH_MESSAGE)
    return tx_hash
