# server/forms.py
"""
Field-level checks for the client form.

These run before anything reaches the registry: required fields, email
shape and a numeric phone of fixed length. Uniqueness of the email is the
registry's job, not this module's.
"""
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, EmailStr, ValidationError, field_validator

import config
from client_registry import Client, ClientDraft

REQUIRED_MSG = "Este campo es obligatorio."
EMAIL_MSG = "Debe ser un correo electrónico válido."

FIELD_LABELS = {"name": "Nombre", "email": "Correo electrónico", "phone": "Teléfono"}


class ClientForm(BaseModel):
    name: str
    email: EmailStr
    phone: str

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def strip_and_require(cls, v):
        if v is None:
            raise ValueError(REQUIRED_MSG)
        v = str(v).strip()
        if not v:
            raise ValueError(REQUIRED_MSG)
        return v

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        if not (v.isascii() and v.isdigit()):
            raise ValueError("Solo se permiten dígitos.")
        if len(v) != config.PHONE_LENGTH:
            raise ValueError(f"Debe tener exactamente {config.PHONE_LENGTH} dígitos.")
        return v

    def to_draft(self) -> ClientDraft:
        return ClientDraft(name=self.name, email=self.email, phone=self.phone)

    def to_client(self, client_id: int) -> Client:
        return Client(id=client_id, name=self.name, email=self.email, phone=self.phone)


def validate_form(data: Dict[str, Any]) -> Tuple[Optional[ClientForm], Dict[str, str]]:
    """Validate raw form fields.

    Returns the parsed form and an empty dict, or None and one message per
    offending field.
    """
    try:
        return ClientForm(**data), {}
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "form"
            msg = err["msg"]
            if err["type"] == "missing":
                msg = REQUIRED_MSG
            # pydantic prefixes messages raised from our validators
            elif msg.startswith("Value error, "):
                msg = msg[len("Value error, "):]
            elif field == "email":
                msg = EMAIL_MSG
            errors.setdefault(field, msg)
        return None, errors
