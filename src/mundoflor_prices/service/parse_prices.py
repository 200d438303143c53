import csv
import logging
from pathlib import Path

from mundoflor_prices.config import Settings
from mundoflor_prices.domain.models import Ok, PriceRow
from mundoflor_prices.infrastructure.storefront.price_extractor import (
    DEFAULT_PRICE_SELECTORS,
    extract_price_texts,
)
from mundoflor_prices.utils.money import format_amount, parse_amount

logger = logging.getLogger(__name__)

CSV_HEADERS = ["raw_text", "amount", "error"]


def run_parse(settings: Settings) -> list[PriceRow]:
    logger.info(
        "Iniciando normalização de preços | valores=%s | html=%s | estrito=%s | arquivo_saída=%s",
        len(settings.values),
        settings.html_file,
        settings.strict,
        settings.output,
    )

    raw_texts = list(settings.values)
    if settings.html_file:
        raw_texts.extend(_read_html_prices(settings))

    rows = [_parse_row(text, strict=settings.strict) for text in raw_texts]

    invalid = sum(1 for row in rows if row.error)
    logger.info(
        "Preços processados | total=%s | válidos=%s | inválidos=%s",
        len(rows),
        len(rows) - invalid,
        invalid,
    )

    output_path = Path(settings.output)
    _write_csv(rows, output_path)
    logger.info("CSV gerado | caminho=%s", output_path)
    return rows


def _read_html_prices(settings: Settings) -> list[str]:
    html_path = Path(settings.html_file)
    page_source = html_path.read_text(encoding="utf-8")
    logger.info("Snapshot HTML carregado | caminho=%s | chars=%s", html_path, len(page_source))

    selectors = settings.selectors or DEFAULT_PRICE_SELECTORS
    texts = extract_price_texts(page_source, selectors)
    logger.info("Textos de preço extraídos | total=%s", len(texts))
    return texts


def _parse_row(text: str, strict: bool) -> PriceRow:
    result = parse_amount(text, strict=strict)
    if isinstance(result, Ok):
        return PriceRow(
            raw_text=text,
            amount=result.value,
            formatted=format_amount(result.value),
            error=None,
        )

    logger.warning(
        "Preço não interpretado | texto=%r | erro=%s | motivo=%s",
        text,
        type(result.error).__name__,
        result.error,
    )
    return PriceRow(raw_text=text, amount=None, formatted=None, error=type(result.error).__name__)


def _write_csv(rows: list[PriceRow], output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=CSV_HEADERS)
        writer.writeheader()
        for row in rows:
            writer.writerow(
                {
                    "raw_text": row.raw_text,
                    "amount": row.formatted or "",
                    "error": row.error or "",
                }
            )
