import pytest

from usersearch.models import User


@pytest.fixture
def users():
    return [
        User(id=1, name="Alice", address="1 Elm", items=["pen"], pincode="11111"),
        User(id=2, name="Bob", address="2 Oak", items=["pencil"], pincode="22222"),
        User(id=13, name="Carol Penn", address="13 Pine Road", items=["stapler"], pincode="31313"),
        User(id="4", name="Dave", address="4 Birch (rear)", items=["ink", "paper"], pincode="40404"),
    ]
