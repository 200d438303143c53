from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from mundoflor_prices.domain.errors import AmbiguousGrouping, InvalidAmount
from mundoflor_prices.domain.models import Err, Ok, ParseResult

CENTS = Decimal("0.01")

_NON_PRICE_CHARS = re.compile(r"[^0-9.,]")


def parse_amount(text: str, strict: bool = False) -> ParseResult:
    """
    Converte um texto de preço como "$1,234.56", "€ 1.234,56" ou "123,45" em Decimal.

    Quando vírgula e ponto aparecem, o separador mais à direita é o decimal e o
    outro é removido como separador de milhar. Só com vírgula, ela é decimal
    apenas se for única e seguida de no máximo dois dígitos. Falhas voltam como
    Err, nunca como zero.
    """
    cleaned = _NON_PRICE_CHARS.sub("", text)
    if not cleaned:
        return Err(InvalidAmount(f"No digits in price text: {text!r}", text))

    has_comma = "," in cleaned
    has_dot = "." in cleaned

    if has_comma and has_dot:
        decimal_sep = "," if cleaned.rfind(",") > cleaned.rfind(".") else "."
        grouping_sep = "." if decimal_sep == "," else ","
        literal = cleaned.replace(grouping_sep, "").replace(decimal_sep, ".")
    elif has_comma:
        commas = cleaned.count(",")
        whole, _, fraction = cleaned.partition(",")
        if commas == 1 and len(fraction) <= 2:
            literal = f"{whole}.{fraction}"
        elif strict and commas == 1 and len(fraction) == 3:
            return Err(
                AmbiguousGrouping(
                    f"Comma may be grouping or decimal separator: {text!r}", text
                )
            )
        else:
            literal = cleaned.replace(",", "")
    else:
        literal = cleaned

    try:
        return Ok(Decimal(literal))
    except InvalidOperation:
        return Err(InvalidAmount(f"Invalid price format: {text!r}", text))


def parse_price(value: str, strict: bool = False) -> Decimal:
    """Igual a parse_amount, mas lança InvalidAmount/AmbiguousGrouping em vez de Err."""
    return parse_amount(value, strict=strict).unwrap()


def format_amount(amount: Decimal | int | float) -> str:
    """
    Formata um valor com duas casas decimais fixas, sem agrupamento nem símbolo.
    Ex.: Decimal("1234.5") -> "1234.50".
    """
    # repr() mantém 1234.5 como "1234.5", sem a expansão binária do float
    value = Decimal(repr(amount)) if isinstance(amount, float) else Decimal(amount)
    if not value.is_finite():
        raise ValueError(f"Amount must be finite: {amount!r}")
    if value < 0:
        raise ValueError(f"Amount must not be negative: {amount!r}")

    # precisão para todos os dígitos inteiros, os centavos e o arredondamento para cima
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        quantized = value.quantize(CENTS, rounding=ROUND_HALF_UP)
        if quantized.is_zero():
            quantized = abs(quantized)
    return f"{quantized:f}"
