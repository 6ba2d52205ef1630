from .client import API_URL, Connector, SochainClient
from .models import Block, BlockData, NetworkData, NetworkInfo, Transaction, TransactionData

__all__ = [
    'API_URL', 'Connector', 'SochainClient',
    'Block', 'BlockData', 'NetworkData', 'NetworkInfo', 'Transaction', 'TransactionData',
]
