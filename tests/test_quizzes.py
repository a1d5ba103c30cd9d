import pytest

from ferrisdrill.drills.quizzes import (
    Append,
    ReportCard,
    Trim,
    Uppercase,
    calculate_price_of_apples,
    transformer,
)


@pytest.mark.parametrize(
    "quantity, price",
    [(35, 70), (40, 80), (41, 41), (65, 65)],
)
def test_apple_prices(quantity, price):
    assert calculate_price_of_apples(quantity) == price


def test_transformer_works():
    output = transformer([
        ("hello", Uppercase()),
        (" all roads lead to rome! ", Trim()),
        ("foo", Append(1)),
        ("bar", Append(5)),
    ])
    assert output == [
        "HELLO",
        "all roads lead to rome!",
        "foobar",
        "barbarbarbarbarbar",
    ]


def test_append_zero_times_keeps_string():
    assert transformer([("foo", Append(0))]) == ["foo"]


def test_append_negative_rejected():
    with pytest.raises(ValueError):
        Append(-1)


def test_unknown_command_rejected():
    with pytest.raises(TypeError):
        transformer([("foo", "shout")])


def test_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.report() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.report() == "Gary Plotter (11) - achieved a grade of A+"


def test_integral_float_grade_shown_without_fraction():
    card = ReportCard(grade=5.0, student_name="Ann", student_age=10)
    assert card.report() == "Ann (10) - achieved a grade of 5"


def test_age_out_of_range_rejected():
    with pytest.raises(ValueError):
        ReportCard(grade="B", student_name="Ann", student_age=256)