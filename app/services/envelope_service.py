from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from app.schemas.envelope_schemas import (
    Acknowledgement,
    InboundMessage,
    NotificationPayload,
    NotificationType,
    OutboundMessage,
    ShippingAddress,
    ValidateAddressPayload,
    is_utf8_encodable,
)


logger = logging.getLogger(__name__)


class EnvelopeServiceError(RuntimeError):
    pass


class MalformedInputError(EnvelopeServiceError, ValueError):
    """Corpo da requisição não é um envelope válido."""


def _decode(raw: bytes | str) -> Any:
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Corpo não está em UTF-8: {e}") from e
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"JSON inválido: {e}") from e
    except (ValueError, RecursionError) as e:
        # inteiros acima do limite de dígitos do int() ou aninhamento profundo demais
        raise MalformedInputError(f"JSON não suportado: {type(e).__name__}") from e


def parse(raw: bytes | str) -> InboundMessage:
    """
    Decodifica o corpo bruto da requisição em um InboundMessage.

    Raises:
        MalformedInputError: se o corpo não for JSON, não for um objeto,
            ou se message_id/payload estiverem ausentes ou com tipo errado.
    """
    data = _decode(raw)
    if not isinstance(data, dict):
        raise MalformedInputError("Envelope precisa ser um objeto JSON")

    try:
        return InboundMessage.model_validate(data)
    except ValidationError as e:
        raise MalformedInputError(f"Envelope inválido: {e.error_count()} erro(s)") from e


def recover_message_id(raw: bytes | str) -> str | None:
    """Tenta extrair o message_id de um corpo que falhou no parse."""
    try:
        data = _decode(raw)
    except MalformedInputError:
        return None
    message_id = data.get("message_id") if isinstance(data, dict) else None
    if isinstance(message_id, str) and is_utf8_encodable(message_id):
        return message_id
    return None


def build(
    message_id: str | None,
    message_type: NotificationType | str,
    result_text: str,
) -> OutboundMessage:
    if isinstance(message_type, NotificationType):
        message_type = message_type.value
    return OutboundMessage(
        message_id=message_id,
        message=message_type,
        payload=NotificationPayload(result=result_text),
    )


def acknowledge(inbound: InboundMessage) -> Acknowledgement:
    return Acknowledgement(message_id=inbound.message_id)


def encode(message: OutboundMessage | Acknowledgement) -> bytes:
    return message.model_dump_json().encode("utf-8")


def get_shipping_address(inbound: InboundMessage) -> ShippingAddress:
    """
    Acessa payload.order.shipping_address de forma tipada.

    Raises:
        MalformedInputError: se order ou shipping_address estiverem ausentes
            ou não forem objetos.
    """
    try:
        payload = ValidateAddressPayload.model_validate(inbound.payload)
    except ValidationError as e:
        logger.debug(f"Payload sem shipping_address na mensagem {inbound.message_id}: {e}")
        raise MalformedInputError("payload.order.shipping_address ausente ou inválido") from e
    return payload.order.shipping_address
