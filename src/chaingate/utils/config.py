# src/chaingate/utils/config.py
import re


class Config:
    # Networks served by the upstream explorer
    SUPPORTED_NETWORKS = frozenset({"btc", "ltc", "doge"})

    # BTC, LTC and DOGE all use SHA-256 for block and transaction hashes
    HASH_PATTERN = re.compile(r"[A-Fa-f0-9]{64}")

    # Enrichment
    MAX_TX_PER_BLOCK = 10

    # Server defaults
    DEFAULT_HOST = "localhost"
    DEFAULT_PORT = 8080

    # Logging environments
    ENVIRONMENT_DEV = "development"
    ENVIRONMENT_STAGING = "staging"
    ENVIRONMENT_PROD = "production"
