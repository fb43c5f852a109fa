from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def is_utf8_encodable(value: str) -> bool:
    """Strings com surrogates soltos (ex.: "\\ud800") não podem ser ecoadas na resposta."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class NotificationType(str, Enum):
    INFO = "notification:info"
    ERROR = "notification:error"


class InboundMessage(BaseModel):
    """Envelope recebido do hub: id, tipo e payload livre."""
    message_id: str
    message: str | None = None
    payload: dict[str, Any]

    @field_validator("message_id")
    @classmethod
    def message_id_must_be_utf8(cls, value: str) -> str:
        if not is_utf8_encodable(value):
            raise ValueError("message_id não pode ser codificado em UTF-8")
        return value


class ShippingAddress(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Só o zipcode é avaliado; os demais campos passam adiante sem validação.
    firstname: Any = None
    lastname: Any = None
    address1: Any = None
    address2: Any = None
    city: Any = None
    zipcode: Any = None
    phone: Any = None
    company: Any = None
    country: Any = None
    state: Any = None


class OrderPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    shipping_address: ShippingAddress


class ValidateAddressPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    order: OrderPayload


class NotificationPayload(BaseModel):
    result: str


class OutboundMessage(BaseModel):
    message_id: str | None = None
    message: str
    payload: NotificationPayload


class Acknowledgement(BaseModel):
    message_id: str = Field(..., description="Id da mensagem recebida")
