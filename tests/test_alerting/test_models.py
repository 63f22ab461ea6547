"""
Podwatch - Alerting Model Tests
"""

from podwatch.alerting.models import (
    AppContext,
    ProviderConfig,
    SlackMessage,
    resolve_provider_config,
)
from podwatch.core.config import Settings, SlackFallbacks


class TestResolveProviderConfig:
    """Tests for merging config mappings with environment fallbacks."""

    def test_explicit_values(self):
        config = resolve_provider_config({
            "token": "xoxb-1",
            "webhook": "https://hooks.slack.com/x",
            "channel": "#alerts",
            "title": "Title",
            "text": "Text",
        })

        assert config == ProviderConfig(
            token="xoxb-1",
            webhook="https://hooks.slack.com/x",
            channel="#alerts",
            title="Title",
            text="Text",
        )

    def test_empty_mapping(self):
        assert resolve_provider_config({}) == ProviderConfig()

    def test_empty_strings_fall_back(self, monkeypatch):
        """Empty strings in the mapping count as unset."""
        monkeypatch.setenv("SLACK_WEBHOOK", "https://hooks.slack.com/env")

        config = resolve_provider_config({"webhook": ""})

        assert config.webhook == "https://hooks.slack.com/env"

    def test_title_and_text_have_no_fallback(self, monkeypatch):
        monkeypatch.setenv("SLACK_TITLE", "ignored")
        monkeypatch.setenv("SLACK_TEXT", "ignored")

        config = resolve_provider_config({})

        assert config.title is None
        assert config.text is None

    def test_explicit_fallbacks(self):
        """Fallbacks can be passed in instead of read from the environment."""
        fallbacks = SlackFallbacks(SLACK_TOKEN="xoxb-s", SLACK_CHANNEL="#s")

        config = resolve_provider_config({}, fallbacks=fallbacks)

        assert config.token == "xoxb-s"
        assert config.channel == "#s"
        assert config.webhook is None


class TestSlackMessage:
    """Tests for webhook payload conversion."""

    def test_empty_message(self):
        assert SlackMessage().to_dict() == {}

    def test_full_message(self):
        blocks = [{"type": "divider"}]

        payload = SlackMessage(text="t", blocks=blocks, channel="#c").to_dict()

        assert payload == {"channel": "#c", "text": "t", "blocks": blocks}


class TestAppContext:
    def test_from_settings(self):
        context = AppContext.from_settings(Settings(CLUSTER_NAME="prod-eu"))

        assert context.cluster_name == "prod-eu"
