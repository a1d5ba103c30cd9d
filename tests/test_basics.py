import pytest

from ferrisdrill.drills.basics import (
    Wrapper,
    array_and_vec,
    bigger,
    compose_me,
    current_favorite_color,
    foo_if_fizz,
    is_a_color_word,
    is_even,
    longest,
    maybe_icecream,
    replace_me,
    sale_price,
    square,
    trim_me,
    vec_loop,
    vec_map,
)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_is_true_when_even():
    assert is_even(2) is True


def test_is_false_when_odd():
    assert is_even(3) is False


def test_sale_price_odd_and_even():
    assert sale_price(51) == 48
    assert sale_price(50) == 40


def test_square():
    assert square(3) == 9


def test_favorite_color():
    assert current_favorite_color() == "blue"


@pytest.mark.parametrize("word,expected", [
    ("green", True), ("blue", True), ("red", True), ("purple", False),
])
def test_is_a_color_word(word, expected):
    assert is_a_color_word(word) is expected


def test_trim_a_string():
    assert trim_me("Hello!     ") == "Hello!"
    assert trim_me("  What's up!") == "What's up!"
    assert trim_me("   Hola!  ") == "Hola!"


def test_compose_a_string():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"


def test_array_and_vec_similarity():
    fixed, values = array_and_vec()
    assert list(fixed) == values
    assert fixed == (10, 20, 30, 40)


def test_vec_loop_doubles_in_place():
    values = [2, 4, 6, 8, 10]
    result = vec_loop(values)
    assert result == [4, 8, 12, 16, 20]
    assert result is values


def test_vec_map_returns_new_list():
    values = [2, 4, 6, 8, 10]
    assert vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]


def test_store_int_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_check_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_raw_icecream_value():
    assert maybe_icecream(12) == 5


def test_icecream_rejects_negative_hour():
    with pytest.raises(ValueError):
        maybe_icecream(-1)


def test_longest():
    assert longest("abcd", "xyz") == "abcd"
    assert longest("long string is long", "xyz") == "long string is long"


def test_longest_prefers_second_on_tie():
    assert longest("abc", "xyz") == "xyz"


def test_longest_counts_bytes():
    assert longest("é", "ab") == "ab"
    assert longest("éé", "abc") == "éé"