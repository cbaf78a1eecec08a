# tests/test_cli.py

from calzh import cli


def test_day_shorthand(capsys):
    assert cli.main(["2020-01-25"]) == 0
    out = capsys.readouterr().out
    assert "二〇二〇年正月初一" in out
    assert "春节" in out

def test_day_full(capsys):
    assert cli.main(["day", "2020-01-25", "--full", "--attr", "lodge"]) == 0
    out = capsys.readouterr().out
    assert "彭祖百忌" in out
    assert "xiu: 室" in out

def test_lunar_negative_month(capsys):
    assert cli.main(["lunar", "2020", "-4", "1"]) == 0
    assert "2020-05-23" in capsys.readouterr().out

def test_terms(capsys):
    assert cli.main(["terms", "2020"]) == 0
    assert "2020-02-04  立春" in capsys.readouterr().out

def test_months(capsys):
    assert cli.main(["months", "2020"]) == 0
    out = capsys.readouterr().out
    assert "闰四" in out
    assert "2020-05-23" in out

def test_round_trip_diag(capsys):
    assert cli.main(["diag", "round-trip", "--N", "50"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out

def test_pretty_month(capsys):
    assert cli.main(["pretty-month", "--lunar", "2020", "4", "--leap"]) == 0
    assert "M=4L" in capsys.readouterr().out
