from __future__ import annotations

import logging

from app.schemas.envelope_schemas import Acknowledgement, NotificationType, OutboundMessage
from app.services import address_validation_service, envelope_service
from app.services.address_validation_service import ValidationOutcome
from app.services.envelope_service import MalformedInputError


logger = logging.getLogger(__name__)


MALFORMED_MESSAGE_RESULT = "The message could not be parsed."
ADDRESS_VALID_RESULT = "The address is valid, and the shipment will be sent."
ADDRESS_PROBLEM_RESULT = "There was a problem with this address."


def _malformed_response(raw: bytes | str, error: MalformedInputError) -> OutboundMessage:
    message_id = envelope_service.recover_message_id(raw)
    logger.warning(f"Mensagem malformada (message_id={message_id}): {error}")
    return envelope_service.build(message_id, NotificationType.ERROR, MALFORMED_MESSAGE_RESULT)


def drop_ship(raw: bytes | str) -> Acknowledgement | OutboundMessage:
    """
    Simula o envio drop-ship: apenas confirma o recebimento ecoando o message_id.
    """
    try:
        inbound = envelope_service.parse(raw)
    except MalformedInputError as e:
        return _malformed_response(raw, e)

    logger.info(f"Drop-ship recebido: {inbound.message_id}")
    return envelope_service.acknowledge(inbound)


def validate_address(raw: bytes | str) -> OutboundMessage:
    """
    Valida o endereço de entrega do pedido contido na mensagem.

    Todos os resultados viram uma notificação; o status HTTP é sempre 200.
    - zipcode no intervalo aceito: notification:info
    - fora do intervalo, ilegível ou endereço ausente: notification:error
    """
    try:
        inbound = envelope_service.parse(raw)
    except MalformedInputError as e:
        return _malformed_response(raw, e)

    try:
        address = envelope_service.get_shipping_address(inbound)
    except MalformedInputError as e:
        logger.warning(f"Mensagem {inbound.message_id} sem endereço de entrega: {e}")
        return envelope_service.build(inbound.message_id, NotificationType.ERROR, ADDRESS_PROBLEM_RESULT)

    outcome = address_validation_service.validate(address)
    logger.info(f"Endereço da mensagem {inbound.message_id} validado: {outcome.value}")

    if outcome is ValidationOutcome.VALID:
        return envelope_service.build(inbound.message_id, NotificationType.INFO, ADDRESS_VALID_RESULT)

    if outcome is ValidationOutcome.MALFORMED:
        logger.debug(f"Zipcode ilegível na mensagem {inbound.message_id}: {address.zipcode!r}")
    return envelope_service.build(inbound.message_id, NotificationType.ERROR, ADDRESS_PROBLEM_RESULT)
