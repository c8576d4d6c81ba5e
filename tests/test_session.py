"""Tests for the interactive session, driven through an in-memory console."""

import io

import pytest
from rich.console import Console

from pocketcalc.config import SessionConfig
from pocketcalc.session import (
    ILLEGAL_MESSAGE,
    RETRY_MESSAGE,
    evaluate_line,
    print_welcome,
    read_expression,
    run_session,
)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None)


def output(console: Console) -> str:
    return console.file.getvalue()


def make_reader(lines):
    """read_line stand-in: yields lines, then EOF. Records prompts seen."""
    it = iter(lines)
    prompts = []

    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    read_line.prompts = prompts
    return read_line


# --- Welcome ---

def test_welcome_lists_operators_and_quit_keys(console):
    print_welcome(console)
    out = output(console)
    assert "This calculator supports the following operations: + - * /" in out
    assert "To quit at any time, enter q or Q." in out


# --- evaluate_line ---

def test_result_line_echoes_raw_input(console):
    assert evaluate_line("2+3*4-5/5", console) == pytest.approx(13.0)
    assert "2+3*4-5/5=13" in output(console)


def test_result_line_keeps_inner_spaces(console):
    evaluate_line("1 + 1", console)
    assert "1 + 1=2" in output(console)


def test_result_uses_six_significant_digits(console):
    evaluate_line("1/3", console)
    assert "1/3=0.333333" in output(console)


def test_division_by_zero_line(console):
    assert evaluate_line("5/0", console) is None
    out = output(console)
    assert "Error: Dividing by zero is not allowed." in out
    assert ILLEGAL_MESSAGE in out
    assert "5/0=" not in out


def test_missing_operand_line(console):
    assert evaluate_line("8*+9", console) is None
    out = output(console)
    assert "Error: Missing operand." in out
    assert ILLEGAL_MESSAGE in out


# --- read_expression ---

def test_read_expression_reprompts_until_valid(console):
    reader = make_reader(["", "2+a", "1+1"])
    assert read_expression(console, reader) == "1+1"
    out = output(console)
    assert "Error: You did not enter an input." in out
    assert "Error: a is not valid input." in out
    assert out.count(RETRY_MESSAGE) == 2
    assert reader.prompts == ["Enter an expression: "] * 3


def test_read_expression_quit_beats_validation(console):
    # 'q' plus invalid characters still quits without a diagnostic
    assert read_expression(console, make_reader(["2+q!"])) is None
    assert RETRY_MESSAGE not in output(console)


def test_read_expression_eof(console):
    assert read_expression(console, make_reader([])) is None


def test_read_expression_custom_prompt(console):
    reader = make_reader(["4"])
    read_expression(console, reader, SessionConfig(prompt="> "))
    assert reader.prompts == ["> "]


# --- run_session ---

def test_session_evaluates_until_quit(console):
    reader = make_reader(["34+5*12-311/8", "5/0", "10-3+2", "Q", "1+1"])
    assert run_session(console, reader) == 0
    out = output(console)
    assert "34+5*12-311/8=55.125" in out
    assert ILLEGAL_MESSAGE in out
    assert "10-3+2=9" in out
    # nothing after the quit request is read
    assert "1+1=2" not in out


def test_session_recovers_after_illegal_calculation(console):
    run_session(console, make_reader(["8*+9", "8*9", "q"]))
    out = output(console)
    assert "Error: Missing operand." in out
    assert "8*9=72" in out


def test_session_ends_on_eof(console):
    assert run_session(console, make_reader(["2*2"])) == 0
    assert "2*2=4" in output(console)


def test_session_ends_on_keyboard_interrupt(console):
    def read_line(prompt):
        raise KeyboardInterrupt
    assert run_session(console, read_line) == 0


# --- Long input ---

def test_session_survives_long_chain(console):
    line = "+".join(["1"] * 5001)
    assert run_session(console, make_reader([line, "2*3", "q"])) == 0
    out = output(console)
    assert f"{line}=5001" in out
    assert "2*3=6" in out
