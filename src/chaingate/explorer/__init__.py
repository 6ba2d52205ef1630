from .api import ExplorerAPI
from .enrichment import EnrichmentFailure, EnrichmentReport, TransactionEnricher
from .models import BlockResponse, TransactionResponse

__all__ = [
    'ExplorerAPI', 'EnrichmentFailure', 'EnrichmentReport', 'TransactionEnricher',
    'BlockResponse', 'TransactionResponse',
]
