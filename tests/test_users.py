import pytest

from filecaches.users import UserData, change_user, get_name, multiply


def test_change_user_returns_fixed_user():
    original = UserData("Ada", "Lovelace", 36, [1, 2])
    changed = change_user(original)
    assert changed == UserData("Larry", "Page", 67, [15, 10, 20])


def test_change_user_does_not_mutate_input():
    original = UserData("Ada", "Lovelace", 36, [1, 2])
    change_user(original)
    assert original == UserData("Ada", "Lovelace", 36, [1, 2])


def test_get_name_joins_names(capsys):
    user = UserData("Ada", "Lovelace", 36, [])
    assert get_name(user) == "Ada Lovelace"
    assert capsys.readouterr().out == "Hello World\n"


def test_get_name_of_changed_user():
    assert get_name(change_user(UserData("x", "y", 1))) == "Larry Page"


@pytest.mark.parametrize("a,b", [(2.0, 3.5), (-1.25, 4.0), (0.5, 0.5)])
def test_multiply_is_commutative(a, b):
    assert multiply(a, b) == multiply(b, a)


@pytest.mark.parametrize("x", [0.0, 1.5, -7.25, 1e10])
def test_multiply_identity_and_zero(x):
    assert multiply(x, 1.0) == x
    assert multiply(x, 0.0) == 0.0