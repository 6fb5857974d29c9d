"""End-to-end tests of the stack calculator."""

import io

import pytest

from calc import Calculator
from config import MAX_NESTING
from command import Command, CommandCall
from errors import ErrorKind
from polynomial_parser import parse_polynomial


def run(text):
    out, err = io.StringIO(), io.StringIO()
    Calculator(out, err).run(io.StringIO(text))
    return out.getvalue(), err.getvalue()


@pytest.fixture
def calc():
    return Calculator(io.StringIO(), io.StringIO())


def feed(calc, text):
    for nr, line in enumerate(text.splitlines(), start=1):
        calc.process_line(line, nr)


# --- reference scenarios ---

def test_add_with_one_element_underflows():
    assert run("1\nADD\n") == ("", "ERROR 2 STACK UNDERFLOW\n")


def test_print_sum():
    assert run("(1,2)+(3,0)\nPRINT\n") == ("(1,2)+(3,0)\n", "")


def test_deg_by_on_empty_stack_underflows():
    assert run("DEG_BY 0\n") == ("", "ERROR 1 STACK UNDERFLOW\n")


def test_deg_by_bad_variable():
    assert run("DEG_BY x\n") == ("", "ERROR 1 DEG BY WRONG VARIABLE\n")


def test_at_on_product_of_two_variables():
    assert run("((1,1),1)\nAT 2\nPRINT\n") == ("(2,1)\n", "")


def test_at_on_second_variable_alone():
    assert run("((1,1),0)\nAT 2\nPRINT\n") == ("(1,1)\n", "")


# --- stack discipline ---

def test_underflow_leaves_stack_unchanged(calc):
    feed(calc, "(1,1)\nADD\nMUL\nSUB\nIS_EQ")
    assert len(calc.stack) == 1
    assert calc.stack[0].to_string() == "(1,1)"
    assert calc.err.getvalue() == "".join(
        f"ERROR {n} STACK UNDERFLOW\n" for n in range(2, 6)
    )


@pytest.mark.parametrize(
    "name", ["IS_COEFF", "IS_ZERO", "CLONE", "NEG", "DEG", "PRINT", "POP", "DEG_BY 1", "AT 1", "COMPOSE 0"]
)
def test_single_operand_commands_underflow(name):
    assert run(name + "\n") == ("", "ERROR 1 STACK UNDERFLOW\n")


def test_compose_needs_k_plus_one(calc):
    feed(calc, "1\n2\nCOMPOSE 2")
    assert calc.err.getvalue() == "ERROR 3 STACK UNDERFLOW\n"
    assert len(calc.stack) == 2


def test_compose_huge_argument_underflows():
    assert run("1\nCOMPOSE 18446744073709551615\n") == ("", "ERROR 2 STACK UNDERFLOW\n")


def test_error_lines_do_not_touch_stack(calc):
    feed(calc, "1\n(1,2\nFOO\nAT x\nCOMPOSE\nDEG_BY")
    assert [p.to_string() for p in calc.stack] == ["1"]
    assert calc.err.getvalue() == (
        "ERROR 2 WRONG POLY\n"
        "ERROR 3 WRONG COMMAND\n"
        "ERROR 4 AT WRONG VALUE\n"
        "ERROR 5 COMPOSE WRONG PARAMETER\n"
        "ERROR 6 DEG BY WRONG VARIABLE\n"
    )


# --- commands ---

def test_zero_and_inspection():
    out, err = run("ZERO\nIS_ZERO\nIS_COEFF\nDEG\nDEG_BY 0\nDEG_BY 1\n")
    assert out == "1\n1\n-1\n-1\n0\n"
    assert err == ""


def test_inspection_of_sum():
    out, _ = run("((1,2),3)+(1,1)\nIS_ZERO\nIS_COEFF\nDEG\nDEG_BY 0\nDEG_BY 1\nDEG_BY 7\n")
    assert out == "0\n0\n5\n3\n2\n0\n"


def test_add_mul_sub():
    assert run("(1,1)+(1,0)\n(1,1)+(-1,0)\nMUL\nPRINT\n")[0] == "(1,2)+(-1,0)\n"
    assert run("(1,1)\n(2,0)\nADD\nPRINT\n")[0] == "(1,1)+(2,0)\n"
    assert run("5\n3\nSUB\nPRINT\n")[0] == "2\n"


def test_clone_neg_add_gives_zero():
    assert run("((1,2),3)+(1,1)\nCLONE\nNEG\nADD\nIS_ZERO\nPRINT\n")[0] == "1\n0\n"


def test_is_eq_keeps_operands(calc):
    feed(calc, "(1,2)+(3,0)\n(3,0)+(1,2)\nIS_EQ\n(1,1)\nIS_EQ")
    assert calc.out.getvalue() == "1\n0\n"
    assert len(calc.stack) == 3


def test_print_and_pop(calc):
    feed(calc, "1\n2\nPRINT\nPOP\nPRINT\nPOP\nPRINT")
    assert calc.out.getvalue() == "2\n1\n"
    assert calc.err.getvalue() == "ERROR 7 STACK UNDERFLOW\n"
    assert calc.stack == []


def test_at_replaces_top():
    assert run("(1,2)+(3,0)\nAT -2\nPRINT\nIS_COEFF\n")[0] == "7\n1\n"


def test_compose_square():
    assert run("(1,1)+(1,0)\n(1,2)\nCOMPOSE 1\nPRINT\n")[0] == "(1,2)+(2,1)+(1,0)\n"


def test_compose_substitute_order(calc):
    feed(calc, "2\n3\n(1,1)+((10,1),0)\nCOMPOSE 2\nPRINT")
    assert calc.out.getvalue() == "32\n"
    assert len(calc.stack) == 1


def test_compose_zero_keeps_polynomial():
    assert run("((1,1),1)\nCOMPOSE 0\nPRINT\n")[0] == "((1,1),1)\n"


def test_wrapping_arithmetic():
    assert run("9223372036854775807\n1\nADD\nPRINT\n")[0] == "-9223372036854775808\n"


# --- input handling ---

def test_comments_and_blank_lines_are_skipped():
    out, err = run("# comment\n\n1\nPRINT\nFOO\n")
    assert out == "1\n"
    assert err == "ERROR 5 WRONG COMMAND\n"


def test_last_line_without_newline():
    assert run("3\nPRINT") == ("3\n", "")


def test_run_empties_stack():
    calc = Calculator(io.StringIO(), io.StringIO())
    calc.run(["1", "2"])
    assert calc.stack == []


def test_run_command_reports_error_kind(calc):
    assert calc.run_command(CommandCall(Command.ADD)) is ErrorKind.STACK_UNDERFLOW
    calc.stack.append(parse_polynomial("(1,1)"))
    assert calc.run_command(CommandCall(Command.CLONE)) is None
    assert len(calc.stack) == 2


# --- deeply nested polynomials ---

def nested(depth, coeff="1", exp="1"):
    return "(" * depth + coeff + f",{exp})" * depth


def test_commands_on_deepest_polynomial():
    d = MAX_NESTING
    text = "\n".join([
        nested(d), "CLONE", "IS_EQ", "DEG", "DEG_BY 99", "MUL", "DEG", "PRINT",
        nested(d), "CLONE", "ADD", "PRINT", "NEG", "IS_ZERO", "AT 3", "PRINT",
        "COMPOSE 0", "IS_COEFF", "1", "PRINT",
    ]) + "\n"
    out, err = run(text)
    assert err == ""
    assert out.splitlines() == [
        "1", "100", "1", "200", nested(d, exp="2"),
        nested(d, coeff="2"), "0", nested(d - 1, coeff="-6"),
        "0", "1",
    ]


def test_too_deep_polynomial_is_reported_and_run_continues():
    out, err = run(nested(MAX_NESTING + 1) + "\n1\nPRINT\n")
    assert out == "1\n"
    assert err == "ERROR 1 WRONG POLY\n"
