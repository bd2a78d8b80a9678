import pandas as pd

from config.config import CONVERTER_CONFIG
from main import build_parser, main


def test_main_prints_samples(capsys):
    args = build_parser().parse_args([])
    assert main(args) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[0] == "(250+50)*(5-4) ~ 250 50 + 5 4 - * == 300.0"
    assert lines[1] == "(50*2)-(25+5)/3 ~ 50 2 * 25 5 + 3 / - == 90.0"


def test_main_right_associative(capsys):
    args = build_parser().parse_args(["--right_associative_power", "2^3^2"])
    assert main(args) == 0
    assert capsys.readouterr().out.strip() == "2^3^2 ~ 2 3 2 ^ ^ == 512.0"


def test_main_reports_failures(capsys):
    args = build_parser().parse_args(["1+2)", "1+1"])
    assert main(args) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("1+2) !! ")
    assert out[1] == "1+1 ~ 1 1 + == 2.0"


def test_main_lenient(capsys):
    args = build_parser().parse_args(["--lenient", "(1+2"])
    assert main(args) == 0


def test_main_writes_csv(tmp_path):
    path = tmp_path / "results.csv"
    args = build_parser().parse_args(["--csv_path", str(path), "3+4"])
    assert main(args) == 0
    frame = pd.read_csv(path)
    assert frame['result'].iloc[0] == 7.0


def test_main_with_right_associative_config(monkeypatch, capsys):
    monkeypatch.setitem(CONVERTER_CONFIG, 'right_associative_power', True)
    args = build_parser().parse_args(["2^3^2"])
    assert main(args) == 0
    assert capsys.readouterr().out.strip() == "2^3^2 ~ 2 3 2 ^ ^ == 512.0"


def test_main_successful_rows_after_failure(capsys):
    args = build_parser().parse_args(["1+", "2*3", "(4", "5-1"])
    assert main(args) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[1] == "2*3 ~ 2 3 * == 6.0"
    assert out[3] == "5-1 ~ 5 1 - == 4.0"
    assert "nan" not in out[1] + out[3]
