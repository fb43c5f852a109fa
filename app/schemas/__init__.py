from app.schemas.envelope_schemas import (
    Acknowledgement,
    InboundMessage,
    NotificationPayload,
    NotificationType,
    OrderPayload,
    OutboundMessage,
    ShippingAddress,
    ValidateAddressPayload,
)

__all__ = [
    "Acknowledgement",
    "InboundMessage",
    "NotificationPayload",
    "NotificationType",
    "OrderPayload",
    "OutboundMessage",
    "ShippingAddress",
    "ValidateAddressPayload",
]
