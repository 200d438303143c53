from __future__ import annotations

import logging
from typing import Iterable, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from mundoflor_prices.domain.errors import ExtractionError

logger = logging.getLogger(__name__)

# Ordem de fallback usada pelas páginas de produto e carrinho da loja (WooCommerce).
DEFAULT_PRICE_SELECTORS: tuple[str, ...] = (
    ".woocommerce-Price-amount",
    ".product-price",
    ".precio",
    ".price",
    ".amount",
)


def extract_price_texts(
    page_source: str, selectors: Sequence[str] = DEFAULT_PRICE_SELECTORS
) -> list[str]:
    """
    Extrai os textos de preço de um snapshot HTML.
    Usa o primeiro seletor da cadeia que encontrar algum texto; preços riscados
    (<del>, preço original de item em promoção) são ignorados.
    """
    soup = BeautifulSoup(page_source, "lxml")
    for struck in soup.find_all("del"):
        struck.decompose()

    for selector in selectors:
        texts = _collect_texts(soup.select(selector))
        if texts:
            logger.debug("Preços encontrados | seletor=%s | total=%s", selector, len(texts))
            return texts
        logger.debug("Seletor sem preços | seletor=%s", selector)

    raise ExtractionError(f"No price text found for selectors {list(selectors)}")


def extract_first_price_text(
    page_source: str, selectors: Sequence[str] = DEFAULT_PRICE_SELECTORS
) -> str:
    return extract_price_texts(page_source, selectors)[0]


def _collect_texts(elements: Iterable[Tag]) -> list[str]:
    texts: list[str] = []
    taken: set[int] = set()
    for element in elements:
        # marcação aninhada (<span class="price"><span class="amount">) conta uma vez só
        if any(id(parent) in taken for parent in element.parents):
            continue
        text = _normalize_whitespace(element.get_text(" ", strip=True))
        if not text:
            continue
        taken.add(id(element))
        texts.append(text)
    return texts


def _normalize_whitespace(value: str) -> str:
    return " ".join(value.split())
