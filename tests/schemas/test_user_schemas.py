"""User Schemas: email format and length, name bounds."""

import pytest
from pydantic import ValidationError

from app.schemas.user import UserCreate


def test_valid_user():
    user = UserCreate(email="alice@example.com", name="Alice")
    assert user.email == "alice@example.com"


def test_email_kept_exactly_as_sent():
    user = UserCreate(email="Pat@Example.COM", name="Pat")
    assert user.email == "Pat@Example.COM"


@pytest.mark.parametrize("email", ["plainaddress", "@example.com", "a@"])
def test_invalid_email_rejected(email):
    with pytest.raises(ValidationError):
        UserCreate(email=email, name="A")


def test_overlong_email_rejected():
    with pytest.raises(ValidationError):
        UserCreate(email=("a" * 60 + ".") * 4 + "@example.com", name="A")


@pytest.mark.parametrize("name", ["", "n" * 101])
def test_name_bounds(name):
    with pytest.raises(ValidationError):
        UserCreate(email="a@example.com", name=name)


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        UserCreate(email="a@example.com", name="A", role="admin")
