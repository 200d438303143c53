import argparse
import sys

from pydantic import ValidationError

from mundoflor_prices.config import LOG_LEVELS, Settings
from mundoflor_prices.logging_conf import setup_logging
from mundoflor_prices.service.parse_prices import run_parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mundoflor-prices",
        description="Normaliza textos de preço da loja (ex: '$45.000', '€ 1.234,56') em valores com duas casas decimais.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "values",
        nargs="*",
        help="Textos de preço a interpretar (ex: '$1,234.56').",
    )

    parser.add_argument(
        "--html",
        dest="html_file",
        default=None,
        help="Snapshot HTML de uma página de produto/carrinho de onde extrair os preços.",
    )

    parser.add_argument(
        "--selector",
        dest="selectors",
        action="append",
        default=None,
        help="Seletor CSS de preço; repita para montar a cadeia de fallback (padrão: seletores WooCommerce).",
    )

    parser.add_argument(
        "--output",
        default="prices.csv",
        help="Caminho e nome do arquivo CSV onde os preços serão salvos.",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Recusa textos como '1,234' em que a vírgula pode ser milhar ou decimal.",
    )

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=list(LOG_LEVELS),
        help="Define o nível de detalhamento dos logs de execução.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings(
            values=args.values,
            html_file=args.html_file,
            selectors=args.selectors,
            output=args.output,
            log_level=args.log_level,
            strict=args.strict,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    setup_logging(settings.log_level)

    try:
        rows = run_parse(settings)
    except Exception as exc:
        print(f"❌ Error: {exc}", file=sys.stderr)
        sys.exit(1)

    for row in rows:
        print(f"{row.raw_text}\t{row.formatted or 'INVALID'}")
