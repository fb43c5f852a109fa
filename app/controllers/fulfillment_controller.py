from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.middlewares.hub_auth_middleware import verify_hub_credentials
from app.services import fulfillment_service


logger = logging.getLogger(__name__)

router = APIRouter(tags=["Fulfillment"], dependencies=[Depends(verify_hub_credentials)])


@router.post("/drop_ship")
async def drop_ship(request: Request):
    """
    Confirma o recebimento de um pedido drop-ship.

    Retorna sempre 200 com o message_id ecoado.
    """
    raw = await request.body()
    logger.debug(f"POST /drop_ship recebido ({len(raw)} bytes)")
    result = fulfillment_service.drop_ship(raw)
    return JSONResponse(status_code=200, content=result.model_dump())


@router.post("/validate_address")
async def validate_address(request: Request):
    """
    Valida o endereço de entrega do pedido.

    O corpo é lido cru para que JSON inválido vire uma notificação de erro
    em vez de um 422 do FastAPI. Sucesso e falha retornam 200; o resultado
    vai no campo message do envelope.
    """
    raw = await request.body()
    logger.debug(f"POST /validate_address recebido ({len(raw)} bytes)")
    result = fulfillment_service.validate_address(raw)
    logger.info(f"Resposta de validate_address para {result.message_id}: {result.message}")
    return JSONResponse(status_code=200, content=result.model_dump())
