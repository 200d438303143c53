import logging


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    # Avisos do BeautifulSoup (ex.: MarkupResemblesLocatorWarning) passam pelo logging
    logging.captureWarnings(True)

    noisy = [
        "charset_normalizer",
        "chardet",
    ]
    for name in noisy:
        logging.getLogger(name).setLevel(logging.WARNING)
