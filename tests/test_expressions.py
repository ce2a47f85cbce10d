import io

import pytest

from structkit.expressions import (
    ExpressionError,
    evaluate_infix,
    evaluate_postfix,
    evaluate_prefix,
    infix_to_postfix,
    infix_to_prefix,
    main,
    postfix_to_infix,
    postfix_to_prefix,
    prefix_to_infix,
    prefix_to_postfix,
)

INFIX_SAMPLES = [
    "a+b*c",
    "(a+b)*c",
    "a-b-c",
    "(a+b)*(c-d)/e",
    "a*(b+c*(d-e))",
    "x/y+z*w-v",
]


def test_evaluate_infix_respects_precedence():
    assert evaluate_infix("2+3*4") == 2 + 3 * 4


def test_evaluate_infix_parentheses_and_multidigit():
    assert evaluate_infix("(12 + 30) * 2") == (12 + 30) * 2


def test_evaluate_infix_left_associative_subtraction():
    assert evaluate_infix("20-5-3") == 20 - 5 - 3


def test_evaluation_agrees_across_notations():
    infix = evaluate_infix("(7+5)*3-8/2")
    postfix = evaluate_postfix("7 5 + 3 * 8 2 / -")
    prefix = evaluate_prefix("- * + 7 5 3 / 8 2")
    assert infix == postfix == prefix


def test_division_truncates_towards_zero():
    assert evaluate_postfix("0 7 - 2 /") == -3
    assert evaluate_prefix("/ - 0 7 2") == evaluate_postfix("0 7 - 2 /")


def test_evaluate_postfix_multidigit():
    assert evaluate_postfix("12 30 +") == 12 + 30


def test_evaluate_prefix_operand_order():
    assert evaluate_prefix("- 9 4") == 9 - 4
    assert evaluate_prefix("/ 9 2") == 9 // 2


def test_infix_to_postfix_pinned():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_power_is_left_associative():
    assert infix_to_postfix("a^b^c") == "ab^c^"


def test_infix_to_prefix_pinned():
    assert infix_to_prefix("(a+b)*c") == "*+abc"


def test_whitespace_is_ignored():
    assert infix_to_postfix("a + b * c") == infix_to_postfix("a+b*c")
    assert infix_to_prefix(" ( a + b ) * c ") == infix_to_prefix("(a+b)*c")


@pytest.mark.parametrize("infix", INFIX_SAMPLES)
def test_postfix_to_prefix_matches_direct_conversion(infix):
    assert postfix_to_prefix(infix_to_postfix(infix)) == infix_to_prefix(infix)


@pytest.mark.parametrize("infix", INFIX_SAMPLES)
def test_prefix_to_postfix_matches_direct_conversion(infix):
    assert prefix_to_postfix(infix_to_prefix(infix)) == infix_to_postfix(infix)


@pytest.mark.parametrize("infix", INFIX_SAMPLES)
def test_parenthesised_infix_round_trips(infix):
    rebuilt = postfix_to_infix(infix_to_postfix(infix))
    assert prefix_to_infix(infix_to_prefix(infix)) == rebuilt
    assert infix_to_postfix(rebuilt) == infix_to_postfix(infix)


def test_postfix_to_infix_wraps_each_operation():
    result = postfix_to_infix("ab+c*")
    assert result.count("(") == 2
    assert result.startswith("((a+b)")


def test_missing_operand_raises():
    with pytest.raises(ExpressionError):
        evaluate_postfix("+")
    with pytest.raises(ExpressionError):
        prefix_to_infix("*a")


def test_empty_expression_raises():
    with pytest.raises(ExpressionError):
        evaluate_postfix("")
    with pytest.raises(ExpressionError):
        infix_to_prefix("")


def test_unbalanced_parentheses_raise():
    with pytest.raises(ExpressionError):
        evaluate_infix("(1+2")
    with pytest.raises(ExpressionError):
        infix_to_postfix("a+b)")
    with pytest.raises(ExpressionError):
        infix_to_prefix("(a+b")


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        evaluate_infix("1/0")


def test_main_with_argument(capsys):
    assert main(["evaluate-infix", "2+3*4"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "Evaluation of this infix expression gives : " + str(2 + 3 * 4)


def test_main_reads_single_word_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a+b c\n"))
    assert main(["infix-to-postfix"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enter an infix expression : ")
    assert out.strip().endswith(": " + infix_to_postfix("a+b"))


def test_main_reads_whole_line_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("12 30 +\n"))
    assert main(["evaluate-postfix"]) == 0
    out = capsys.readouterr().out
    assert out.strip().endswith(str(12 + 30))


def test_main_reports_errors(capsys):
    assert main(["evaluate-postfix", "+"]) == 1
    assert "error" in capsys.readouterr().err