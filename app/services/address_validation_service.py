"""
Regra de validação de endereço de entrega.

O endereço é aceito quando o zipcode, interpretado como inteiro, cai no
intervalo fechado configurado (20170 a 20179 por padrão).
"""
from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any

from app.schemas.envelope_schemas import ShippingAddress
from app.utils.settings import settings


# Dígitos iniciais, com espaço e sinal opcionais. O resto é ignorado.
LEADING_INTEGER_PATTERN = re.compile(r'^\s*([+-]?\d+)')


class ValidationOutcome(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    MALFORMED = "malformed"


def parse_zipcode(value: Any) -> int | None:
    """
    Converte o zipcode em inteiro.

    Retorna None quando não há número a extrair (ausente, booleano,
    texto sem dígitos iniciais, float não finito, dígitos demais).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = LEADING_INTEGER_PATTERN.match(value)
        if not match:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # mais dígitos do que o int() aceita converter
            return None
    return None


def validate(
    address: ShippingAddress,
    zip_range: tuple[int, int] | None = None,
) -> ValidationOutcome:
    start, end = zip_range or settings.zipcode_range

    zipcode = parse_zipcode(address.zipcode)
    if zipcode is None:
        return ValidationOutcome.MALFORMED

    if start <= zipcode <= end:
        return ValidationOutcome.VALID
    return ValidationOutcome.INVALID
