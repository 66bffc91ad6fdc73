"""Typed properties, enforced at construction time by pydantic."""

from fasthtml.common import *
from pydantic import BaseModel, ValidationError

QUESTION = ("Write a method in a class that accepts type-hinted parameters and demonstrate "
            "how it works with different data types.")


class UserM(BaseModel):
    id: int
    name: str
    email: str
    phone: int
    weight: float
    height: float


def details(user: UserM):
    return Div(
        H3("User Details"),
        P(f"No_ : {user.id}"),
        P(f"Name : {user.name}"),
        P(f"Email Address : {user.email}"),
        P(f"Phone Number : {user.phone}"),
        P(f"Weight : {user.weight} kg"),
        P(f"Height : {user.height} cms"),
    )


def render():
    yield H4(QUESTION)

    user = UserM(id=1, name="Tom", email="tom@email.com", phone=9998887777, weight=65.84, height=143.29)
    yield details(user)

    # Numeric strings are coerced to the declared types.
    coerced = UserM(id="2", name="Ann", email="ann@email.com", phone="9998886666", weight="58", height="160.5")
    yield details(coerced)

    try:
        UserM(id="three", name="Bob", email="bob@email.com", phone="n/a", weight=70.0, height=170.0)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        yield P(f"Rejected: invalid {fields}", cls="text-danger")
