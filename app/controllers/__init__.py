from app.controllers.fulfillment_controller import router as fulfillment_router

__all__ = [
    "fulfillment_router",
]
