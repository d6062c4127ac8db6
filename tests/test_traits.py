from datetime import datetime, timedelta, timezone

import pytest

from exerciser.homeworks.traits import (
    append_bar,
    favorite_snacks,
    is_even,
    make_sausage,
    seconds_since_epoch,
)


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"


def test_append_bar_leaves_original_list():
    original = ["Foo"]
    append_bar(original)
    assert original == ["Foo"]


def test_append_bar_rejects_other_types():
    with pytest.raises(TypeError):
        append_bar(3)


def test_make_sausage():
    assert make_sausage() == "sausage!"


def test_favorite_snacks():
    assert favorite_snacks() == "favorite snacks: Pear and Cucumber"


def test_seconds_since_epoch():
    now = datetime(1970, 1, 1, 0, 1, 30, 500000, tzinfo=timezone.utc)
    assert seconds_since_epoch(now) == 90


def test_seconds_since_epoch_naive_is_utc():
    assert seconds_since_epoch(datetime(1970, 1, 2)) == 86400


def test_seconds_since_epoch_other_zone():
    zone = timezone(timedelta(hours=1))
    assert seconds_since_epoch(datetime(1970, 1, 1, 2, 0, tzinfo=zone)) == 3600


def test_seconds_before_epoch():
    with pytest.raises(ValueError, match="before UNIX EPOCH"):
        seconds_since_epoch(datetime(1969, 12, 31, tzinfo=timezone.utc))


def test_is_true_when_even():
    assert is_even(4)


def test_is_false_when_odd():
    assert not is_even(5)