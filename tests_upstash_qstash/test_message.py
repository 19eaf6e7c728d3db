"""
Tests for message.py
Logic testing: Decision/Branch, Boundary Value coverage
"""
import pytest
from pydantic import ValidationError

from upstash_qstash.errors import PublishRequestError
from upstash_qstash.message import PublishRequest, PublishResult, PublishSettings


class TestPublishSettings:
    """Tests for PublishSettings.as_headers."""

    # Boundary: nothing set, nothing sent
    def test_empty(self):
        assert PublishSettings().as_headers() == {}

    # Path: every option maps to its header
    def test_all_options(self):
        settings = PublishSettings(
            delay="10s",
            retries=3,
            cron="*/5 * * * *",
            callback="https://example.com/callback",
            deduplication_id="order-42",
            headers={"X-Forwarded": "yes"},
        )
        assert settings.as_headers() == {
            "Upstash-Delay": "10s",
            "Upstash-Retries": "3",
            "Upstash-Cron": "*/5 * * * *",
            "Upstash-Callback": "https://example.com/callback",
            "Upstash-Deduplication-Id": "order-42",
            "X-Forwarded": "yes",
        }

    # Boundary: zero retries is sent, not dropped
    def test_zero_retries(self):
        assert PublishSettings(retries=0).as_headers() == {"Upstash-Retries": "0"}

    # Error Path: negative retries
    def test_negative_retries(self):
        with pytest.raises(PublishRequestError, match=">= 0"):
            PublishSettings(retries=-1)

    # Error Path: non-int retries
    @pytest.mark.parametrize("retries", ["3", 1.5, True])
    def test_non_int_retries(self, retries):
        with pytest.raises(PublishRequestError, match="must be an int"):
            PublishSettings(retries=retries)

    # Error Path: values that would split or corrupt the header block
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"delay": "10s\r\nX-Evil: 1"},
            {"cron": "* * * * *\n"},
            {"callback": "https://ex\u00e4mple.com/cb"},
            {"deduplication_id": "id\0"},
            {"headers": {"X-Note": "a\nb"}},
            {"headers": {"X-Bad\r": "v"}},
            {"delay": 10},
        ],
    )
    def test_unsendable_header_values(self, kwargs):
        with pytest.raises(PublishRequestError, match="header"):
            PublishSettings(**kwargs)


class TestPublishRequest:
    """Tests for PublishRequest validation."""

    def test_valid(self):
        request = PublishRequest("https://example.com/hook", {"a": 1})
        assert request.destination == "https://example.com/hook"
        assert request.settings == PublishSettings()

    # Path: None settings normalized
    def test_none_settings(self):
        assert PublishRequest("topic", {}, None).settings == PublishSettings()

    # Error Path: blank destination
    @pytest.mark.parametrize("destination", ["", "   ", None])
    def test_blank_destination(self, destination):
        with pytest.raises(PublishRequestError, match="destination is required"):
            PublishRequest(destination, {"a": 1})


class TestPublishResult:
    """Tests for PublishResult parsing."""

    def test_from_wire(self):
        result = PublishResult.model_validate({"messageId": "msg_123"})
        assert result == PublishResult(message_id="msg_123")
        assert result.url is None
        assert result.deduplicated is False

    # Path: unknown fields tolerated
    def test_unknown_fields_ignored(self):
        result = PublishResult.model_validate(
            {"messageId": "msg_1", "url": "https://example.com", "somethingNew": 7}
        )
        assert result.message_id == "msg_1"
        assert result.url == "https://example.com"

    # Error Path: missing id
    def test_missing_message_id(self):
        with pytest.raises(ValidationError):
            PublishResult.model_validate({"url": "https://example.com"})

    # State: immutable
    def test_frozen(self):
        result = PublishResult(message_id="msg_1")
        with pytest.raises(ValidationError):
            result.message_id = "other"
