"""Tests for application wiring."""

import pytest

from mgmtops.bootstrap import Application
from mgmtops.config.manager import ConfigurationManager
from mgmtops.infrastructure.exceptions import ConfigurationError
from mgmtops.infrastructure.secrets import SecretCipher


@pytest.mark.unit
class TestApplication:
    def _app(self, environ, credential, mock_session, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        return Application(
            config_manager=ConfigurationManager(environ=environ),
            credential=credential,
            session=mock_session,
        )

    def test_adapters_share_one_client(self, credential, mock_session, tmp_path, monkeypatch):
        monkeypatch.setenv("MGMTOPS_SECRET_KEY", SecretCipher.generate_key())
        app = self._app(
            {"MGMTOPS_AZURE__SUBSCRIPTION_ID": "sub-1"}, credential, mock_session, tmp_path, monkeypatch
        )

        gateway = app.application_gateway_adapter()
        cluster = app.service_fabric_adapter()
        app.import_export_adapter()
        app.peer_asn_adapter()

        assert app.context.subscription_id == "sub-1"
        assert app.client is app.client
        assert gateway._fail_on_missing_redirect is False
        assert cluster._fail_on_missing_node_type is True

    def test_missing_subscription_is_a_configuration_error(
        self, credential, mock_session, tmp_path, monkeypatch
    ):
        app = self._app({}, credential, mock_session, tmp_path, monkeypatch)

        with pytest.raises(ConfigurationError):
            app.peer_asn_adapter()

    def test_poller_uses_configured_polling(self, credential, mock_session, tmp_path, monkeypatch):
        app = self._app(
            {"MGMTOPS_POLLING__INTERVAL_SECONDS": "3"}, credential, mock_session, tmp_path, monkeypatch
        )

        poller = app.poller(lambda handle: None)

        assert poller._interval == 3.0
        assert poller._timeout == 3600.0
