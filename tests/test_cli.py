import itertools

import pytest

from bowling import cli


def test_auto_game_prints_final_score(capsys):
    assert cli.main(["--auto", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Start of play - YOU vs BOT - 10 frames")
    assert "Final Score: YOU vs BOT" in out
    assert any(banner in out for banner in ("YOU WIN!", "BOT WINS!", "IT'S A TIE!"))


def test_auto_game_is_reproducible(capsys):
    cli.main(["--auto", "--seed", "8"])
    first = capsys.readouterr().out
    cli.main(["--auto", "--seed", "8"])
    assert capsys.readouterr().out == first


def test_human_strikes_every_frame(monkeypatch, capsys):
    answers = itertools.repeat("x")
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    assert cli.main(["--name", "Ann", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Final Score: Ann vs BOT 300 - " in out
    assert "Ann, frame 10: STRIKE!" in out


def test_human_input_is_retried(monkeypatch, capsys):
    answers = itertools.chain(["11", "abc", "4"], itertools.repeat("0"))
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    assert cli.main(["--seed", "2"]) == 0
    out = capsys.readouterr().out
    assert out.count("Invalid input. Please try again.") == 2
    assert "YOU, frame 1: 4 PINS" in out


def test_rejects_bad_names(capsys):
    assert cli.main(["--name", "R2D2"]) == 2
    assert "Invalid input" in capsys.readouterr().out


@pytest.mark.parametrize(
    "raw, standing, expected",
    [("x", 10, 10), ("X", 4, 4), ("0", 10, 0), (" 7 ", 10, 7)],
)
def test_parse_pins(raw, standing, expected):
    assert cli.parse_pins(raw, standing) == expected


@pytest.mark.parametrize("raw, standing", [("11", 10), ("5", 4), ("-1", 10), ("two", 10)])
def test_parse_pins_rejects(raw, standing):
    with pytest.raises(ValueError):
        cli.parse_pins(raw, standing)


@pytest.mark.parametrize("name, ok", [("Ann", True), ("Mary Jo", True), ("", False), ("B0T", False)])
def test_is_valid_name(name, ok):
    assert cli.is_valid_name(name) is ok
