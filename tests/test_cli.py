"""Tests for the typer CLI."""

from typer.testing import CliRunner

from pocketcalc.__main__ import app

runner = CliRunner()


# --- eval ---

def test_eval_prints_result():
    result = runner.invoke(app, ["eval", "2+3*4-5/5"])
    assert result.exit_code == 0
    assert "2+3*4-5/5=13" in result.output


def test_eval_division_by_zero_exits_1():
    result = runner.invoke(app, ["eval", "5/0"])
    assert result.exit_code == 1
    assert "Dividing by zero is not allowed" in result.output


def test_eval_invalid_character_exits_1():
    result = runner.invoke(app, ["eval", "2+a"])
    assert result.exit_code == 1
    assert "a is not valid input" in result.output


def test_eval_empty_exits_1():
    result = runner.invoke(app, ["eval", "  "])
    assert result.exit_code == 1
    assert "did not enter an input" in result.output


# --- explain ---

def test_explain_shows_tree_and_result():
    result = runner.invoke(app, ["explain", "2+3*4-5/5"])
    assert result.exit_code == 0
    assert "3*4-5/5" in result.output
    assert "2+3*4-5/5=13" in result.output


def test_explain_flags_missing_operand():
    result = runner.invoke(app, ["explain", "8*+9"])
    assert result.exit_code == 1
    assert "(missing operand)" in result.output
    assert "Missing operand" in result.output


# --- operators ---

def test_operators_table():
    result = runner.invoke(app, ["operators"])
    assert result.exit_code == 0
    for name in ("addition", "subtraction", "multiplication", "division"):
        assert name in result.output


# --- repl ---

def test_repl_session():
    result = runner.invoke(app, ["repl"], input="1+1\n2+a\n6/4\nq\n")
    assert result.exit_code == 0
    assert "supports the following operations" in result.output
    assert "1+1=2" in result.output
    assert "Invalid input. Please try again." in result.output
    assert "6/4=1.5" in result.output


def test_repl_ends_on_eof():
    result = runner.invoke(app, ["repl"], input="3*3\n")
    assert result.exit_code == 0
    assert "3*3=9" in result.output


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "Usage" in result.output
