import pytest

from dsakit.infix import (
    StackUnderflowError,
    evaluate_postfix,
    infix_to_postfix,
    main,
    priority,
)


def test_priority_ordering():
    assert priority("+") == priority("-")
    assert priority("*") == priority("/") == priority("%")
    assert priority("+") < priority("*") < priority("^")
    assert priority("(") == priority("x")


def test_source_example_letters():
    assert infix_to_postfix("(A+B)*(C+D)") == "AB+CD+*"


def test_source_example_digits():
    postfix = infix_to_postfix("7 8 + 3 2 + /")
    assert postfix == "7832+/+"
    assert evaluate_postfix(postfix) == 8


def test_letters_cannot_be_evaluated():
    with pytest.raises(StackUnderflowError):
        evaluate_postfix("AB+CD+*")


def test_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_blanks_and_tabs_ignored():
    assert infix_to_postfix("1 +\t2") == infix_to_postfix("1+2")


def test_unmatched_close_raises():
    with pytest.raises(StackUnderflowError):
        infix_to_postfix("1+2)")


def test_power():
    assert evaluate_postfix("23^") == 8


def test_division_truncates_toward_zero():
    assert evaluate_postfix("05-2/") == -2


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("10/")


def test_empty_postfix_underflows():
    with pytest.raises(StackUnderflowError):
        evaluate_postfix("")


def test_unknown_operator():
    with pytest.raises(ValueError):
        evaluate_postfix("12&")


def test_round_trip_single_digit():
    assert evaluate_postfix(infix_to_postfix("(5)")) == 5


def test_main_success(capsys):
    assert main(["7 8 + 3 2 + /"]) == 0
    out = capsys.readouterr().out
    assert "Postfix : 7832+/+" in out
    assert "Value of expression : 8" in out


def test_main_underflow(capsys):
    assert main(["(A+B)*(C+D)"]) == 1
    out = capsys.readouterr().out
    assert "Postfix : AB+CD+*" in out
    assert "Stack underflow" in out