from pathlib import Path

import pytest

from mundoflor_prices import cli


def test_main_prints_formatted_amounts(tmp_path, capsys) -> None:
    output = Path(tmp_path) / "prices.csv"
    cli.main(["$1,234.56", "123,45", "abc", "--output", str(output)])

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["$1,234.56\t1234.56", "123,45\t123.45", "abc\tINVALID"]
    assert output.exists()


def test_main_without_source_is_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 2


def test_main_exits_on_missing_html(tmp_path, capsys) -> None:
    missing = Path(tmp_path) / "missing.html"
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--html", str(missing), "--output", str(Path(tmp_path) / "out.csv")])
    assert exc_info.value.code == 1
    assert "Error" in capsys.readouterr().err


def test_build_parser_collects_selector_chain() -> None:
    args = cli.build_parser().parse_args(["--selector", ".a", "--selector", ".b", "--strict", "$1"])
    assert args.selectors == [".a", ".b"]
    assert args.strict is True
    assert args.values == ["$1"]
