from __future__ import annotations

import logging

from fastapi import FastAPI

from app.controllers import fulfillment_router
from app.utils.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title="Drop-ship Fulfillment Endpoint",
    description="Endpoint de fulfillment drop-ship com validação de endereço",
    version="1.0.0",
)

app.include_router(fulfillment_router)
