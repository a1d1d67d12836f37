"""Persistence gateway for contact messages.

Views receive a store object instead of reaching for the model manager, so
tests can swap in :class:`InMemoryContactMessageStore`. Store faults are
never caught here; callers decide how to surface them.
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING
from typing import Protocol
from typing import runtime_checkable

from django.utils import timezone

from contact_relay.contacts.models import ContactMessage

if TYPE_CHECKING:  # import for type checking only
    from contact_relay.contacts.validation import ContactSubmission


@runtime_checkable
class ContactMessageGateway(Protocol):
    def insert(self, submission: ContactSubmission) -> ContactMessage: ...

    def list_all_sorted_by_recency(self) -> list[ContactMessage]: ...


class ContactMessageStore:
    """ORM-backed store; one statement per call, no explicit transaction."""

    def insert(self, submission: ContactSubmission) -> ContactMessage:
        return ContactMessage.objects.create(
            name=submission.name,
            email=submission.email,
            message=submission.message,
        )

    def list_all_sorted_by_recency(self) -> list[ContactMessage]:
        return list(ContactMessage.objects.order_by("-created_at", "-id"))


class InMemoryContactMessageStore:
    """Process-local store with the same contract, used by tests."""

    def __init__(self) -> None:
        self._records: list[ContactMessage] = []
        self._ids = itertools.count(1)

    def insert(self, submission: ContactSubmission) -> ContactMessage:
        now = timezone.now()
        record = ContactMessage(
            id=next(self._ids),
            name=submission.name,
            email=submission.email,
            message=submission.message,
            created_at=now,
            updated_at=now,
        )
        self._records.append(record)
        return record

    def list_all_sorted_by_recency(self) -> list[ContactMessage]:
        return sorted(
            self._records,
            key=lambda r: (r.created_at, r.id),
            reverse=True,
        )

    def __len__(self) -> int:
        return len(self._records)
