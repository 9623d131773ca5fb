"""Tests for the delivery coordinator's per-channel failure isolation."""

from unittest.mock import patch

import requests
from notifications.channel import register_channel
from notifications.channel.port import ChannelDeliveryError, ChannelPort, DeliveryPayload
from notifications.notification.dispatch import deliver
from notifications.notification.notification import Notification, NotificationType
from protean import current_domain


def _payload(user_id="user-disp-1", **overrides):
    defaults = {
        "user_id": user_id,
        "notification_type": NotificationType.CLIP_APPROVED.value,
        "title": "Clip Approved",
        "message": "Your clip has been approved! You earned $25.50.",
    }
    defaults.update(overrides)
    return DeliveryPayload(**defaults)


def _inbox(user_id):
    return current_domain.repository_for(Notification)._dao.query.filter(user_id=user_id).all().items


class _RecordingChannel(ChannelPort):
    name = "recording"

    def __init__(self):
        self.sent = []

    def send(self, payload):
        self.sent.append(payload)


class _BrokenChannel(ChannelPort):
    name = "broken"

    def send(self, payload):
        raise RuntimeError("socket closed")


class TestDeliverInApp:
    def test_in_app_creates_notification(self):
        outcomes = deliver(_payload(), ["in_app"])

        assert [o.to_dict() for o in outcomes] == [{"channel": "in_app", "success": True}]
        stored = _inbox("user-disp-1")
        assert len(stored) == 1
        assert stored[0].title == "Clip Approved"
        assert stored[0].is_read is False

    def test_redelivery_creates_duplicate(self):
        deliver(_payload(user_id="user-dup"), ["in_app"])
        deliver(_payload(user_id="user-dup"), ["in_app"])
        assert len(_inbox("user-dup")) == 2


class TestPartialFailure:
    def test_discord_unreachable_does_not_affect_in_app(self, monkeypatch):
        monkeypatch.setenv("DISCORD_SERVICE_URL", "http://discord-service:3003")
        with patch(
            "notifications.channel.discord.requests.post",
            side_effect=requests.ConnectionError("Connection refused"),
        ):
            outcomes = deliver(_payload(user_id="user-part"), ["in_app", "discord"])

        assert outcomes[0].channel == "in_app"
        assert outcomes[0].success is True
        assert outcomes[1].channel == "discord"
        assert outcomes[1].success is False
        assert outcomes[1].error
        assert len(_inbox("user-part")) == 1

    def test_failure_on_first_channel_still_attempts_the_rest(self):
        recorder = _RecordingChannel()
        register_channel("broken", _BrokenChannel())
        register_channel("recording", recorder)

        outcomes = deliver(_payload(), ["broken", "recording"])

        assert outcomes[0].success is False
        assert outcomes[0].error == "socket closed"
        assert outcomes[1].success is True
        assert len(recorder.sent) == 1

    def test_every_channel_failing_still_returns_outcomes(self):
        register_channel("broken", _BrokenChannel())
        outcomes = deliver(_payload(), ["broken", "nope"])
        assert [o.success for o in outcomes] == [False, False]

    def test_outcomes_follow_requested_order(self):
        register_channel("recording", _RecordingChannel())
        outcomes = deliver(_payload(), ["recording", "in_app", "recording"])
        assert [o.channel for o in outcomes] == ["recording", "in_app", "recording"]


class TestUnknownChannel:
    def test_unknown_channel_reports_failure(self):
        outcomes = deliver(_payload(), ["carrier_pigeon"])
        assert [o.to_dict() for o in outcomes] == [
            {"channel": "carrier_pigeon", "success": False, "error": "Unknown channel"}
        ]


class TestInAppStoreFailure:
    def test_store_failure_becomes_channel_failure(self):
        with patch(
            "notifications.channel.in_app.create_notification",
            side_effect=RuntimeError("database unavailable"),
        ):
            outcomes = deliver(_payload(), ["in_app"])

        assert outcomes[0].success is False
        assert outcomes[0].error == "database unavailable"


class TestChannelDeliveryError:
    def test_carries_channel_and_cause(self):
        cause = TimeoutError("timed out")
        err = ChannelDeliveryError("discord", cause)
        assert err.channel == "discord"
        assert err.cause is cause
        assert str(err) == "discord delivery failed: timed out"
