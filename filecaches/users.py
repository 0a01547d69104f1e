"""A small user record and the operations exposed on it."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class UserData:
    """A user with a name, an age and a list of grades."""

    first_name: str
    last_name: str
    age: int
    grades: list[int] = field(default_factory=list)


def change_user(user: UserData) -> UserData:
    """Return a fixed replacement user, whatever was passed in."""
    return UserData(first_name="Larry", last_name="Page", age=67, grades=[15, 10, 20])


def get_name(user: UserData) -> str:
    """Greet on stdout and return the user's full name."""
    print("Hello World")
    return f"{user.first_name} {user.last_name}"


def multiply(a: float, b: float) -> float:
    """Return the product of ``a`` and ``b``."""
    return a * b