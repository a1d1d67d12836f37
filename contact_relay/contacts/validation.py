"""Explicit validation of contact submissions.

``validate_contact_payload`` runs before anything touches the store and
returns either a :class:`ContactSubmission` or a :class:`ValidationFailure`;
it never raises for bad input.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from contact_relay.contacts.api.serializers import ContactSubmissionSerializer

REQUIRED_FIELDS: tuple[str, ...] = ("name", "email", "message")

# DRF error codes that mean "the value is not there".
_MISSING_CODES = frozenset({"required", "null", "blank"})


class FailureReason(enum.Enum):
    MISSING_FIELDS = "missing_fields"
    INVALID_PAYLOAD = "invalid_payload"


@dataclass(frozen=True)
class ContactSubmission:
    name: str
    email: str
    message: str


@dataclass(frozen=True)
class ValidationFailure:
    reason: FailureReason
    fields: tuple[str, ...] = ()


def validate_contact_payload(payload: Any) -> ContactSubmission | ValidationFailure:
    if not isinstance(payload, Mapping):
        return ValidationFailure(FailureReason.INVALID_PAYLOAD)

    serializer = ContactSubmissionSerializer(data=payload)
    if serializer.is_valid():
        data = serializer.validated_data
        return ContactSubmission(
            name=data["name"],
            email=data["email"],
            message=data["message"],
        )

    missing: list[str] = []
    invalid: list[str] = []
    for field in REQUIRED_FIELDS:
        errors = serializer.errors.get(field)
        if not errors:
            continue
        codes = {getattr(err, "code", None) for err in errors}
        if codes & _MISSING_CODES:
            missing.append(field)
        else:
            invalid.append(field)

    if missing:
        return ValidationFailure(FailureReason.MISSING_FIELDS, tuple(missing))
    return ValidationFailure(FailureReason.INVALID_PAYLOAD, tuple(invalid))
