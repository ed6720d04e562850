"""Shared fixtures: cipher, context, and a management client over a mocked session."""

import json
from typing import Any, Dict, Optional
from unittest.mock import Mock

import pytest
import requests

from mgmtops.infrastructure.secrets import SecretCipher
from mgmtops.providers.azure.auth.context import AzureContext
from mgmtops.providers.azure.infrastructure.management_client import (
    ManagementClient,
    TransportResponse,
)

SUBSCRIPTION_ID = "00000000-0000-0000-0000-000000000001"
ENDPOINT = "https://management.example.test"
OPERATION_LINK = f"{ENDPOINT}/subscriptions/{SUBSCRIPTION_ID}/providers/Microsoft.Sql/locations/westus/importExportOperationResults/op-1"


def make_http_response(
    status_code: int,
    body: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Mock:
    """A stand-in for requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.headers = headers or {}
    if body is None:
        response.text = ""
    elif isinstance(body, str):
        response.text = body
    else:
        response.text = json.dumps(body)
    return response


def make_transport_response(
    status_code: int = 200,
    body: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> TransportResponse:
    return TransportResponse(status_code, headers, json.dumps(body) if body is not None else "")


@pytest.fixture
def cipher():
    return SecretCipher(SecretCipher.generate_key())


@pytest.fixture
def credential():
    credential = Mock()
    credential.get_token.return_value = Mock(token="test-token")
    return credential


@pytest.fixture
def azure_context(credential):
    return AzureContext(
        subscription_id=SUBSCRIPTION_ID,
        endpoint=ENDPOINT,
        scope=f"{ENDPOINT}/.default",
        credential=credential,
    )


@pytest.fixture
def mock_session():
    return Mock(spec=requests.Session)


@pytest.fixture
def management_client(azure_context, mock_session):
    return ManagementClient(azure_context, timeout=5.0, session=mock_session)


@pytest.fixture
def fake_management_client():
    """A ManagementClient double for communicator-level tests."""
    client = Mock(spec=ManagementClient)
    client.subscription_path.side_effect = (
        lambda *segments: f"/subscriptions/{SUBSCRIPTION_ID}/" + "/".join(segments)
    )
    return client


@pytest.fixture
def http_response():
    """Factory for requests.Response stand-ins."""
    return make_http_response


@pytest.fixture
def transport_response():
    """Factory for TransportResponse objects."""
    return make_transport_response


@pytest.fixture
def operation_link():
    return OPERATION_LINK
