"""Customer aggregate.

Customers are plain records: orders only ever hold a customer's id.
Field rules mirror what the storefront collects at sign-up.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from backoffice.domain.exceptions import ValidationError, ValidationReason

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_CPF_RE = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$")
_PHONE_RE = re.compile(r"^\(\d{2}\) \d{4,5}-\d{4}$")


def _invalid(message: str) -> ValidationError:
    return ValidationError(message, ValidationReason.INVALID_CUSTOMER)


def _check_length(label: str, value: str, low: int, high: int) -> str:
    value = (value or "").strip()
    if not low <= len(value) <= high:
        raise _invalid(f"{label} must be between {low} and {high} characters")
    return value


def _check_email(email: str) -> str:
    email = (email or "").strip()
    if not _EMAIL_RE.match(email):
        raise _invalid(f"Invalid email: {email!r}")
    return email


def _check_phone(phone: str) -> str:
    phone = (phone or "").strip()
    if not _PHONE_RE.match(phone):
        raise _invalid("Phone must look like (XX) XXXXX-XXXX or (XX) XXXX-XXXX")
    return phone


@dataclass
class Customer:
    """Aggregate root for customers.

    Email and CPF uniqueness span all customers, so they are checked by
    the application handlers against the repository, not here.
    """

    id: int | None
    name: str
    email: str
    cpf: str
    phone: str
    birth_date: date
    address: str

    @staticmethod
    def create(
        name: str,
        email: str,
        cpf: str,
        phone: str,
        birth_date: date,
        address: str,
        today: date | None = None,
    ) -> Customer:
        cpf = (cpf or "").strip()
        if not _CPF_RE.match(cpf):
            raise _invalid("CPF must be formatted as xxx.xxx.xxx-xx")
        if birth_date >= (today or date.today()):
            raise _invalid("Birth date must be in the past")
        return Customer(
            id=None,
            name=_check_length("Name", name, 3, 100),
            email=_check_email(email),
            cpf=cpf,
            phone=_check_phone(phone),
            birth_date=birth_date,
            address=_check_length("Address", address, 3, 255),
        )

    def update_contact(
        self,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> None:
        """Change contact details; fields left as None are kept."""
        if name is not None:
            self.name = _check_length("Name", name, 3, 100)
        if email is not None:
            self.email = _check_email(email)
        if phone is not None:
            self.phone = _check_phone(phone)
        if address is not None:
            self.address = _check_length("Address", address, 3, 255)
