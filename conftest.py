import pytest
from rest_framework.test import APIClient

from contact_relay.contacts.store import InMemoryContactMessageStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def memory_store() -> InMemoryContactMessageStore:
    return InMemoryContactMessageStore()
