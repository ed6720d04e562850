"""Tests for the management HTTP client."""

import pytest
import requests

from mgmtops.infrastructure.exceptions import TransportError
from mgmtops.providers.azure.infrastructure.management_client import TransportResponse


@pytest.mark.unit
class TestManagementClient:
    def test_send_issues_one_authorized_request(self, management_client, mock_session, http_response):
        mock_session.request.return_value = http_response(200, {"name": "x"})

        response = management_client.send(
            "PUT", "/subscriptions/s/thing", "2021-11-01", {"a": 1}
        )

        mock_session.request.assert_called_once()
        args, kwargs = mock_session.request.call_args
        assert args == ("PUT", "https://management.example.test/subscriptions/s/thing")
        assert kwargs["params"] == {"api-version": "2021-11-01"}
        assert kwargs["json"] == {"a": 1}
        assert kwargs["headers"]["Authorization"] == "Bearer test-token"
        assert response.body == {"name": "x"}

    def test_poll_uses_link_verbatim(self, management_client, mock_session, http_response, operation_link):
        mock_session.request.return_value = http_response(200, {"status": "InProgress"})

        management_client.poll(operation_link)

        args, kwargs = mock_session.request.call_args
        assert args == ("GET", operation_link)
        assert kwargs["params"] is None

    def test_non_success_raises_transport_error_with_raw_body(
        self, management_client, mock_session, http_response
    ):
        mock_session.request.return_value = http_response(400, '{"code":"X","message":"Y"}')

        with pytest.raises(TransportError) as exc_info:
            management_client.send("GET", "/x", "v")

        assert exc_info.value.status_code == 400
        assert exc_info.value.body == '{"code":"X","message":"Y"}'
        assert mock_session.request.call_count == 1

    def test_connection_failure_raises_transport_error(self, management_client, mock_session):
        mock_session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(TransportError) as exc_info:
            management_client.send("GET", "/x", "v")

        assert exc_info.value.status_code is None

    def test_subscription_path(self, management_client):
        path = management_client.subscription_path("resourceGroups", "rg", "/providers/X/y/", "n")

        assert path == (
            "/subscriptions/00000000-0000-0000-0000-000000000001/resourceGroups/rg/providers/X/y/n"
        )

    def test_default_session_has_no_retries(self, azure_context):
        from mgmtops.providers.azure.infrastructure.management_client import ManagementClient

        client = ManagementClient(azure_context)

        adapter = client._session.get_adapter("https://management.example.test")
        assert adapter.max_retries.total == 0


@pytest.mark.unit
class TestTransportResponse:
    def test_operation_link_prefers_async_operation_header(self):
        response = TransportResponse(
            202, {"Location": "https://location", "Azure-AsyncOperation": "https://async"}
        )

        assert response.operation_link == "https://async"

    def test_operation_link_falls_back_to_location(self):
        response = TransportResponse(202, {"location": "https://location"})

        assert response.operation_link == "https://location"

    def test_body_of_empty_or_invalid_text_is_empty(self):
        assert TransportResponse(202, {}, "").body == {}
        assert TransportResponse(200, {}, "not json").body == {}
        assert TransportResponse(200, {}, "[1, 2]").body == {}
