from __future__ import annotations

import logging
import secrets
from typing import Annotated

from fastapi import Header, HTTPException, status

from app.utils.settings import settings


logger = logging.getLogger(__name__)


async def verify_hub_credentials(
    x_hub_store: Annotated[str | None, Header()] = None,
    x_hub_access_token: Annotated[str | None, Header()] = None,
) -> None:
    """
    Dependency que valida os headers enviados pelo hub.

    Só atua quando HUB_ACCESS_TOKEN está configurado. HUB_STORE_ID,
    se configurado, também precisa bater com X-Hub-Store.
    """
    if not settings.hub_auth_enabled:
        return

    if not x_hub_access_token or not secrets.compare_digest(
        x_hub_access_token.encode(), settings.hub_access_token.encode()
    ):
        logger.warning("Requisição recusada: X-Hub-Access-Token inválido")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token do hub inválido",
        )

    if settings.hub_store_id and x_hub_store != settings.hub_store_id:
        logger.warning(f"Requisição recusada: loja desconhecida {x_hub_store}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Loja do hub inválida",
        )
