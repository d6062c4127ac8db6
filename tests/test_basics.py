import pytest

from exerciser.homeworks.basics import (
    bigger,
    current_favorite_course,
    describe_array,
    describe_cat,
    describe_character,
    describe_number,
    favorite_fruits,
    fizz_if_foo,
    greeting,
    is_a_color_word,
    is_even,
    loop_lines,
    nice_slice,
    sale_price,
    second_of,
    square,
)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert fizz_if_foo("fizz") == "foo"


def test_bar_for_fuzz():
    assert fizz_if_foo("fuzz") == "bar"


def test_default_to_baz():
    assert fizz_if_foo("literally anything") == "baz"


def test_slice_out_of_array():
    assert nice_slice([1, 2, 3, 4, 5]) == [2, 3, 4]


def test_indexing_tuple():
    assert second_of((1, 2, 3)) == 2


def test_loop_lines():
    assert loop_lines(3) == ["Loop! number 1", "Loop! number 2", "Loop! number 3"]
    assert loop_lines(0) == []


def test_sale_price_even_and_odd():
    assert sale_price(50) == 40
    assert sale_price(51) == 48


def test_is_even():
    assert is_even(4)
    assert not is_even(5)


def test_square():
    assert square(3) == 9


def test_greeting():
    assert greeting(True, False) == ["Good morning!"]
    assert greeting(False, False) == []


@pytest.mark.parametrize(
    ("character", "expected"),
    [("C", "Alphabetical!"), ("7", "Numerical!"), ("#", "Neither alphabetic nor numeric!")],
)
def test_describe_character(character, expected):
    assert describe_character(character) == expected


def test_describe_character_requires_one_character():
    with pytest.raises(ValueError):
        describe_character("ab")


def test_describe_array():
    assert describe_array([2, 5]) == "Meh, I eat arrays like that for breakfast."
    assert describe_array(list(range(100))) == "Wow, that's a big array!"


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_favorite_fruits_iterates_in_order():
    fruits = favorite_fruits()
    assert next(fruits) == "banana"
    assert next(fruits) == "custard apple"
    assert next(fruits) == "avocado"
    assert next(fruits) == "peach"
    assert next(fruits) == "raspberry"
    assert next(fruits, None) is None


def test_strings():
    assert current_favorite_course() == "Solana"
    assert is_a_color_word("green")
    assert not is_a_color_word("purple")


def test_describe_number():
    assert describe_number(42) == "x is not ten!"
    assert describe_number(10) == "x is ten!"