from __future__ import annotations

from rest_framework import serializers

from contact_relay.contacts.models import ContactMessage


class StrictCharField(serializers.CharField):
    """CharField that refuses numbers instead of coercing them to text."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class ContactSubmissionSerializer(serializers.Serializer):
    """Inbound contact-form payload. Surrounding whitespace is stripped."""

    name = StrictCharField()
    email = StrictCharField()
    message = StrictCharField()


class ContactMessageSerializer(serializers.ModelSerializer):
    """Read serializer; timestamps use the frontend's camelCase keys."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)  # noqa: N815
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)  # noqa: N815

    class Meta:
        model = ContactMessage
        fields = (
            "id",
            "name",
            "email",
            "message",
            "createdAt",
            "updatedAt",
        )
        read_only_fields = fields


class ContactCreatedSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
