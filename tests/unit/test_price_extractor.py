from pathlib import Path

import pytest

from mundoflor_prices.domain.errors import ExtractionError
from mundoflor_prices.infrastructure.storefront.price_extractor import (
    extract_first_price_text,
    extract_price_texts,
)

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


def _fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def test_extract_skips_struck_original_price() -> None:
    texts = extract_price_texts(_fixture("product_page.html"))
    assert texts == ["$ 95.500,00", "$ 60.000,00"]


def test_wrapping_selector_does_not_include_struck_price() -> None:
    texts = extract_price_texts(_fixture("product_page.html"), selectors=[".price"])
    assert texts == ["$ 95.500,00", "$ 60.000,00"]


def test_falls_back_to_next_selector() -> None:
    texts = extract_price_texts(_fixture("cart_page.html"))
    assert texts == ["$1,234.56", "$ 45,50", "Consultar"]


def test_custom_selector_chain() -> None:
    page = _fixture("cart_page.html")
    assert extract_first_price_text(page, selectors=[".grand-total", ".cart-total"]) == "$1,280.06"


def test_nested_matches_are_counted_once() -> None:
    html = '<div class="precio">$ <span class="precio">12,50</span></div>'
    assert extract_price_texts(html, selectors=[".precio"]) == ["$ 12,50"]


def test_no_price_raises_extraction_error() -> None:
    with pytest.raises(ExtractionError):
        extract_price_texts("<html><body><h1>Carrito vacío</h1></body></html>")
