import pytest

from calc.errors import CalcError, MissingOperand, MissingOperands, NothingToUndo, UnknownToken
from calc.rpn_evaluator import Calc, Format, evaluate_all, feed, new_engine, render
from calc.token_system import classify


@pytest.mark.parametrize("text,value", [
    ("2", 2.0),
    ("2 2 +", 4.0),
    ("2 2 -", 0.0),
    ("2 2 *", 4.0),
    ("2 2 /", 1.0),
    ("2 3 ^", 8.0),
    ("4 sqrt", 2.0),
    ("2 3 ^ 2 ^", 64.0),
    ("2 3 2 ^ ^", 512.0),
])
def test_postfix(text, value):
    assert Calc.postfix(text).evaluate_all() == [value]


@pytest.mark.parametrize("text,value", [
    ("2", 2.0),
    ("2 + 2", 4.0),
    ("2 - 2", 0.0),
    ("2 * 2", 4.0),
    ("2 / 2", 1.0),
    ("sqrt 4", 2.0),
    ("2 ^ 3 ^ 2", 512.0),
    ("3 + 4 * 2 / ( 1 - 5 ) ^ 2 ^ 3", 3.0001220703125),
])
def test_infix(text, value):
    assert Calc.infix(text).evaluate_all() == [value]


@pytest.mark.parametrize("infix", [
    "3 + 4 * 2 / ( 1 - 5 ) ^ 2 ^ 3",
    "(1 + 2) * sqrt(16) - 2 ^ 0.5",
    "10 / 4 / 5",
    "1.5*(2+3)",
])
def test_infix_matches_rendered_postfix(infix):
    calc = Calc.infix(infix)
    assert Calc.postfix(str(calc)) == calc


@pytest.mark.parametrize("text,output", [
    ("2", ""),
    ("2 2 +", "2 2"),
    ("2 2 -", "2 2"),
    ("2 2 *", "2 2"),
    ("2 2 /", "2 2"),
    ("2 2 ^", "2 2"),
    ("4 sqrt", "4"),
    ("1 2 + 3 *", "1 2 + 3"),
])
def test_undo(text, output):
    assert str(Calc.postfix(f"{text} undo")) == output


def test_undo_restores_previous_rendering():
    before = Calc.postfix("5 1 2 +")
    after = Calc.postfix("5 1 2 + *")
    after.input("undo")
    assert str(after) == str(before)


@pytest.mark.parametrize("text,error,message", [
    ("_", UnknownToken, "Unknown token: _"),
    ("+", MissingOperands, "Missing operands"),
    ("1 +", MissingOperand, "Missing operand"),
    ("-", MissingOperands, "Missing operands"),
    ("2 -", MissingOperand, "Missing operand"),
    ("*", MissingOperands, "Missing operands"),
    ("3 *", MissingOperand, "Missing operand"),
    ("/", MissingOperands, "Missing operands"),
    ("4 /", MissingOperand, "Missing operand"),
    ("^", MissingOperands, "Missing operands"),
    ("4 ^", MissingOperand, "Missing operand"),
    ("sqrt", MissingOperand, "Missing operand"),
    ("undo", NothingToUndo, "Nothing to undo"),
])
def test_errors(text, error, message):
    with pytest.raises(error) as excinfo:
        Calc.postfix(text)
    assert str(excinfo.value) == message
    assert isinstance(excinfo.value, CalcError)
    assert isinstance(excinfo.value, ValueError)


def test_unknown_token_keeps_text():
    with pytest.raises(UnknownToken) as excinfo:
        Calc.infix("2 + x")
    assert excinfo.value.token == "x"


def test_error_stops_processing_and_keeps_partial_state():
    calc = Calc.empty()
    with pytest.raises(UnknownToken):
        calc.input("1 2 + oops 3")
    assert str(calc) == "1 2 +"


def test_failing_operator_leaves_stack_untouched():
    calc = Calc.postfix("7")
    with pytest.raises(MissingOperand):
        calc.parse_token(classify("+"))
    assert str(calc) == "7"
    calc.input("3 +")
    assert calc.evaluate_all() == [10.0]


def test_groups_are_ignored_by_stack_machine():
    calc = Calc.postfix("( 2 3 ) +")
    assert calc.evaluate_all() == [5.0]
    assert Calc.infix("( 1 + 2").evaluate_all() == [3.0]


@pytest.mark.parametrize("a,b", [
    ("2 2 +", "2 2 *"),
    ("1 1 +", "4 2 /"),
    ("3 2 ^", "81 sqrt"),
])
def test_equality_by_value(a, b):
    assert Calc.postfix(a) == Calc.postfix(b)


def test_inequality():
    assert Calc.postfix("2 2 +") != Calc.postfix("4 2 /")
    assert Calc.postfix("1 2") != Calc.postfix("3")
    assert Calc.empty() == Calc.empty()


def test_multiple_results_stay_on_stack():
    calc = Calc.postfix("1 2 3 +")
    assert len(calc) == 2
    assert calc.evaluate_all() == [1.0, 5.0]
    assert str(calc) == "1 2 3 +"


def test_clone_is_independent():
    calc = Calc.postfix("1 2 +")
    copy = calc.clone()
    copy.input("undo")
    assert str(calc) == "1 2 +"
    assert str(copy) == "1 2"


def test_input_accepts_format_names():
    calc = Calc.empty()
    calc.input("1+2", "infix")
    calc.input("3 *", "POSTFIX")
    assert calc.evaluate_all() == [9.0]
    with pytest.raises(ValueError):
        calc.input("1", "prefix")


def test_functional_interface():
    engine = new_engine()
    feed(engine, "2 + 3", Format.INFIX)
    feed(engine, "4")
    assert render(engine) == "2 3 + 4"
    assert evaluate_all(engine) == [5.0, 4.0]


def test_symbol_aliases():
    assert Calc.infix("6 ÷ 3 × 2").evaluate_all() == [4.0]


def test_deep_postfix_chain():
    text = "1" + " 1 +" * 5000
    calc = Calc.postfix(text)
    assert calc.evaluate_all() == [5001.0]
    assert str(calc) == text

    copy = calc.clone()
    copy.input("undo")
    assert copy.evaluate_all() == [5000.0, 1.0]
    assert calc.evaluate_all() == [5001.0]
