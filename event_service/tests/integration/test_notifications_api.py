from __future__ import annotations

from event_service.app.crud.events import guest_crud
from shared.helpers.email_helper import EmailHelper


class RecordingMailer:
    def __init__(self) -> None:
        self.sent: list[dict] = []

    def send_email(self, **kwargs) -> bool:
        self.sent.append(kwargs)
        return True


def test_event_creation_notifies_creator(client, auth_headers) -> None:
    client.post(
        "/api/events/create",
        json={"name_title": "Garden brunch", "venue_details_id": 1,
              "date": "2026-05-01T10:00:00Z", "time": "10:00", "max_capacity": 12},
        headers=auth_headers,
    )

    items = client.get("/api/admin/notifications/getByAuth", headers=auth_headers).json()["data"]["items"]
    assert len(items) == 1
    assert items[0]["notification_type_id"] == 1
    assert "Garden brunch" in items[0]["notification_txt"]
    assert items[0]["is_read"] is False


def test_message_notifies_receiver_not_sender(client, auth_headers, other_user_headers) -> None:
    created = client.post("/api/master/messages/create",
                          json={"receiver_id": 2, "messages_txt": "Hi there"}, headers=auth_headers)
    assert created.json()["data"]["sender_id"] == 1

    sender_items = client.get("/api/admin/notifications/getByAuth",
                              headers=auth_headers).json()["data"]["items"]
    receiver_items = client.get("/api/admin/notifications/getByAuth",
                                headers=other_user_headers).json()["data"]["items"]
    assert sender_items == []
    assert [i["notification_type_id"] for i in receiver_items] == [2]


def test_contacting_a_vendor_notifies_the_user(client, auth_headers) -> None:
    created = client.post(
        "/api/contact-vendor/create",
        json={"vendor_id": 7, "event_id": 1, "topic": "Catering quote", "description": "40 guests"},
        headers=auth_headers,
    )
    assert created.json()["data"]["user_id"] == 1

    items = client.get("/api/admin/notifications/getByAuth", headers=auth_headers).json()["data"]["items"]
    assert [i["notification_type_id"] for i in items] == [3]


def test_mark_as_read(client, auth_headers) -> None:
    client.post("/api/master/messages/create",
                json={"receiver_id": 1, "messages_txt": "Note to self"}, headers=auth_headers)

    response = client.put("/api/admin/notifications/markAsRead/1", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["data"]["is_read"] is True
    unread = client.get("/api/admin/notifications/getAll", params={"is_read": "false"},
                        headers=auth_headers).json()["data"]
    assert unread["items"] == []


def test_guest_with_email_receives_invitation(client, auth_headers, db_session, monkeypatch) -> None:
    client.post(
        "/api/events/create",
        json={"name_title": "Launch night", "venue_details_id": 1, "street_address": "1 Main St",
              "date": "2026-09-01T19:00:00Z", "time": "19:00", "max_capacity": 80},
        headers=auth_headers,
    )
    mailer = RecordingMailer()
    monkeypatch.setattr(guest_crud, "EmailHelper", lambda: EmailHelper(mailer=mailer))

    created = client.post("/api/guests/create",
                          json={"event_id": 1, "name": "Lee", "email": "lee@example.com"},
                          headers=auth_headers)

    assert created.status_code == 201
    assert len(mailer.sent) == 1
    assert mailer.sent[0]["recipients"] == ["lee@example.com"]
    assert "Launch night" in mailer.sent[0]["subject"]


def test_invitation_failure_does_not_fail_guest_creation(client, auth_headers, monkeypatch) -> None:
    client.post(
        "/api/events/create",
        json={"name_title": "Launch night", "venue_details_id": 1,
              "date": "2026-09-01T19:00:00Z", "time": "19:00", "max_capacity": 80},
        headers=auth_headers,
    )

    class BrokenMailer:
        def send_email(self, **kwargs):
            raise OSError("smtp down")

    monkeypatch.setattr(guest_crud, "EmailHelper", lambda: EmailHelper(mailer=BrokenMailer()))

    created = client.post("/api/guests/create",
                          json={"event_id": 1, "name": "Lee", "email": "lee@example.com"},
                          headers=auth_headers)

    assert created.status_code == 201
    assert created.json()["data"]["guest_id"] == 1
