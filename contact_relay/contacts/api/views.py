from __future__ import annotations

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from contact_relay.contacts.store import ContactMessageGateway
from contact_relay.contacts.store import ContactMessageStore
from contact_relay.contacts.validation import ValidationFailure
from contact_relay.contacts.validation import validate_contact_payload
from contact_relay.core.exceptions import ContactValidationError
from contact_relay.core.exceptions import InternalError

from .serializers import ContactCreatedSerializer
from .serializers import ContactMessageSerializer
from .serializers import ContactSubmissionSerializer
from .serializers import ErrorSerializer

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Message saved successfully!"


class ContactMessageView(APIView):
    """Create and list contact-form submissions.

    - post: validate the payload, store it, answer 201
    - get: every stored submission, newest first

    Pass ``store=`` to ``as_view`` to use another gateway; otherwise the
    ORM-backed store is used.
    """

    store: ContactMessageGateway | None = None

    def get_store(self) -> ContactMessageGateway:
        if self.store is None:
            self.store = ContactMessageStore()
        return self.store

    @extend_schema(
        request=ContactSubmissionSerializer,
        responses={
            201: ContactCreatedSerializer,
            400: ErrorSerializer,
            500: ErrorSerializer,
        },
    )
    def post(self, request):
        result = validate_contact_payload(request.data)
        if isinstance(result, ValidationFailure):
            logger.info(
                "Rejected contact submission (%s): %s",
                result.reason.value,
                ", ".join(result.fields) or "-",
            )
            raise ContactValidationError

        try:
            record = self.get_store().insert(result)
        except Exception as exc:
            logger.exception("❌ Error saving message")
            raise InternalError from exc

        logger.info("Saved contact message %s", record.pk)
        return Response({"message": SAVED_MESSAGE}, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={200: ContactMessageSerializer(many=True), 500: ErrorSerializer},
    )
    def get(self, request):
        try:
            records = self.get_store().list_all_sorted_by_recency()
        except Exception as exc:
            logger.exception("❌ Error retrieving messages")
            raise InternalError from exc

        data = ContactMessageSerializer(records, many=True).data
        return Response(data)
