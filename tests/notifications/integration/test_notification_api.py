"""Integration tests for Notifications API endpoints."""

from datetime import UTC, datetime, timedelta

from fastapi.testclient import TestClient
from notifications.notification.notification import Notification, NotificationType
from protean import current_domain


def _get_test_client():
    """Build a minimal FastAPI test client with notifications routes."""
    from fastapi import FastAPI
    from notifications.api.errors import register_exception_handlers
    from notifications.api.routes import router

    app = FastAPI()
    app.include_router(router)
    register_exception_handlers(app)
    return TestClient(app)


def _auth(user_id):
    return {"X-User-Id": user_id}


def _create_notification(user_id="user-api-1", minutes_ago=0, **overrides):
    defaults = {
        "user_id": user_id,
        "notification_type": NotificationType.CLIP_APPROVED.value,
        "title": "Clip Approved",
        "message": "Your clip has been approved! You earned $25.50.",
        "metadata": {"clip_id": "clip-1"},
        "created_at": datetime.now(UTC) - timedelta(minutes=minutes_ago),
    }
    defaults.update(overrides)
    n = Notification.create(**defaults)
    current_domain.repository_for(Notification).add(n)
    return str(n.id)


class TestAuthentication:
    def test_missing_user_header_is_rejected(self):
        client = _get_test_client()
        resp = client.get("/notifications")
        assert resp.status_code == 401


# ---------------------------------------------------------------
# Listing
# ---------------------------------------------------------------
class TestListNotifications:
    def test_empty_inbox(self):
        client = _get_test_client()
        resp = client.get("/notifications", headers=_auth("user-empty"))
        assert resp.status_code == 200
        assert resp.json() == {"notifications": [], "total": 0, "limit": 20, "offset": 0}

    def test_lists_newest_first(self):
        _create_notification(title="Older", minutes_ago=10)
        _create_notification(title="Newer", minutes_ago=1)
        client = _get_test_client()

        data = client.get("/notifications", headers=_auth("user-api-1")).json()

        assert data["total"] == 2
        assert [n["title"] for n in data["notifications"]] == ["Newer", "Older"]

    def test_uses_camel_case_keys(self):
        nid = _create_notification()
        client = _get_test_client()

        item = client.get("/notifications", headers=_auth("user-api-1")).json()["notifications"][0]

        assert item["id"] == nid
        assert item["userId"] == "user-api-1"
        assert item["type"] == NotificationType.CLIP_APPROVED.value
        assert item["isRead"] is False
        assert item["readAt"] is None
        assert item["createdAt"] is not None
        assert item["metadata"] == {"clip_id": "clip-1"}

    def test_never_shows_other_users_notifications(self):
        _create_notification(user_id="user-a")
        _create_notification(user_id="user-b")
        client = _get_test_client()

        data = client.get("/notifications", headers=_auth("user-a")).json()

        assert data["total"] == 1
        assert all(n["userId"] == "user-a" for n in data["notifications"])

    def test_pagination(self):
        for i in range(5):
            _create_notification(user_id="user-page", title=f"N{i}", minutes_ago=10 - i)
        client = _get_test_client()

        data = client.get("/notifications?limit=2&offset=2", headers=_auth("user-page")).json()

        assert data["total"] == 5
        assert data["limit"] == 2
        assert data["offset"] == 2
        assert [n["title"] for n in data["notifications"]] == ["N2", "N1"]

    def test_limit_out_of_range_is_validation_error(self):
        client = _get_test_client()
        resp = client.get("/notifications?limit=101", headers=_auth("user-api-1"))
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_negative_offset_is_validation_error(self):
        client = _get_test_client()
        resp = client.get("/notifications?offset=-1", headers=_auth("user-api-1"))
        assert resp.status_code == 400


class TestUnreadCount:
    def test_counts_unread_only(self):
        _create_notification()
        _create_notification()
        _create_notification(user_id="user-other")
        client = _get_test_client()

        resp = client.get("/notifications/unread-count", headers=_auth("user-api-1"))

        assert resp.status_code == 200
        assert resp.json() == {"count": 2}


# ---------------------------------------------------------------
# Mark read
# ---------------------------------------------------------------
class TestMarkRead:
    def test_mark_single_notification(self):
        nid = _create_notification()
        client = _get_test_client()

        resp = client.post("/notifications/mark-read", json={"notificationId": nid}, headers=_auth("user-api-1"))

        assert resp.status_code == 200
        data = resp.json()
        assert data["id"] == nid
        assert data["isRead"] is True
        assert data["readAt"] is not None

    def test_accepts_snake_case_body(self):
        nid = _create_notification()
        client = _get_test_client()

        resp = client.post("/notifications/mark-read", json={"notification_id": nid}, headers=_auth("user-api-1"))

        assert resp.status_code == 200
        assert resp.json()["isRead"] is True

    def test_mark_all(self):
        _create_notification()
        _create_notification()
        other = _create_notification(user_id="user-other")
        client = _get_test_client()

        resp = client.post("/notifications/mark-read", json={"markAll": True}, headers=_auth("user-api-1"))

        assert resp.status_code == 200
        assert resp.json() == {"count": 2}
        count = client.get("/notifications/unread-count", headers=_auth("user-api-1")).json()
        assert count == {"count": 0}
        assert current_domain.repository_for(Notification).get(other).is_read is False

    def test_mark_other_users_notification_is_forbidden(self):
        nid = _create_notification(user_id="owner")
        client = _get_test_client()

        resp = client.post("/notifications/mark-read", json={"notificationId": nid}, headers=_auth("intruder"))

        assert resp.status_code == 403
        assert resp.json()["error"]["code"] == "FORBIDDEN"
        assert current_domain.repository_for(Notification).get(nid).is_read is False

    def test_mark_missing_notification(self):
        client = _get_test_client()
        resp = client.post("/notifications/mark-read", json={"notificationId": "missing"}, headers=_auth("user-api-1"))
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"

    def test_empty_body_takes_no_action(self):
        _create_notification()
        client = _get_test_client()

        resp = client.post("/notifications/mark-read", json={}, headers=_auth("user-api-1"))

        assert resp.status_code == 200
        assert "No action taken" in resp.json()["message"]
        assert client.get("/notifications/unread-count", headers=_auth("user-api-1")).json() == {"count": 1}


# ---------------------------------------------------------------
# Delete
# ---------------------------------------------------------------
class TestDeleteNotification:
    def test_delete_owned(self):
        nid = _create_notification()
        client = _get_test_client()

        resp = client.delete(f"/notifications/{nid}", headers=_auth("user-api-1"))

        assert resp.status_code == 204
        data = client.get("/notifications", headers=_auth("user-api-1")).json()
        assert data["total"] == 0

    def test_delete_missing(self):
        client = _get_test_client()
        resp = client.delete("/notifications/does-not-exist", headers=_auth("user-api-1"))
        assert resp.status_code == 404

    def test_delete_other_users_notification(self):
        nid = _create_notification(user_id="owner")
        client = _get_test_client()

        resp = client.delete(f"/notifications/{nid}", headers=_auth("intruder"))

        assert resp.status_code == 403
        assert current_domain.repository_for(Notification).get(nid) is not None
