"""
Podwatch - Provider Factory Tests
"""

from unittest.mock import MagicMock

from podwatch.alerting import factory
from podwatch.alerting.factory import create_provider, get_providers, register_provider
from podwatch.alerting.slack import SlackProvider


class TestProviderFactory:
    """Tests for building providers by name."""

    def test_create_slack(self, app_context):
        provider = create_provider("slack", {"webhook": "testtest"}, app_context)

        assert isinstance(provider, SlackProvider)

    def test_name_is_case_insensitive(self, app_context):
        provider = create_provider("Slack", {"webhook": "testtest"}, app_context)

        assert provider is not None

    def test_unknown_provider(self, app_context):
        assert create_provider("pigeon", {"webhook": "x"}, app_context) is None

    def test_unconfigured_provider(self, app_context):
        assert create_provider("slack", None, app_context) is None

    def test_get_providers_skips_unconfigured(self, app_context, monkeypatch):
        """Only providers that could be built are returned."""
        stub = MagicMock()
        stub.name = "Stub"
        monkeypatch.setitem(factory.PROVIDERS, "stub", lambda config, ctx: stub)
        monkeypatch.setitem(factory.PROVIDERS, "broken", lambda config, ctx: None)

        providers = get_providers(
            {"slack": {"webhook": "testtest"}, "stub": {}, "broken": {}},
            app_context,
        )

        assert len(providers) == 2
        assert isinstance(providers[0], SlackProvider)
        assert providers[1] is stub

    def test_register_provider(self, app_context, monkeypatch):
        monkeypatch.setattr(factory, "PROVIDERS", dict(factory.PROVIDERS))
        builder = MagicMock(return_value="provider")

        register_provider("Teams", builder)

        assert create_provider("teams", {"url": "x"}, app_context) == "provider"
        builder.assert_called_once_with({"url": "x"}, app_context)
