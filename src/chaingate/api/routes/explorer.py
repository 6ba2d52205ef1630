# File: src/chaingate/api/routes/explorer.py
from typing import Optional

from fastapi import APIRouter, Depends, Request

from chaingate.explorer.api import ExplorerAPI

router = APIRouter(tags=["explorer"])


def get_explorer(request: Request) -> ExplorerAPI:
    return request.app.state.explorer


# Sync handlers run in FastAPI's thread pool, the upstream client blocks
@router.get("/network/{network_id}")
def get_block(network_id: str, height: Optional[str] = None, blockhash: Optional[str] = None,
              explorer: ExplorerAPI = Depends(get_explorer)):
    return explorer.get_block(network_id, height=height, blockhash=blockhash)


@router.get("/network/{network_id}/tx/{txhash}")
def get_transaction(network_id: str, txhash: str,
                    explorer: ExplorerAPI = Depends(get_explorer)):
    return explorer.get_transaction(network_id, txhash)
