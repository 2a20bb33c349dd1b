from __future__ import annotations

import pytest

from event_service.app.models.events.guest import Guest


def event_payload(**overrides) -> dict:
    payload = {
        "name_title": "Rooftop birthday",
        "venue_details_id": 3,
        "date": "2026-11-20T18:00:00Z",
        "time": "18:00",
        "max_capacity": 40,
        "tags": ["birthday", "rooftop"],
        "description": "Sunset party with friends",
    }
    payload.update(overrides)
    return payload


@pytest.mark.parametrize(
    "path",
    [
        "/api/event-types/getById/99",
        "/api/admin/coupon-codes/getById/99",
        "/api/admin/payment-methods/getById/99",
        "/api/events/getById/99",
        "/api/guests/getById/99",
        "/api/event-entry-tickets/getById/99",
        "/api/event-discussion-chat/getById/99",
        "/api/vibescard-studio/getById/99",
        "/api/vendor/business-information/getById/99",
        "/api/contact-vendor/getById/99",
        "/api/catering-marketplace/getById/99",
        "/api/master/decorations/getById/99",
        "/api/master/messages/getById/99",
        "/api/admin/notifications/getById/99",
        "/api/master/transactions/getById/99",
    ],
)
def test_unknown_id_is_not_found(client, auth_headers, path: str) -> None:
    response = client.get(path, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["status"] == "Failure"


def test_requests_without_token_are_rejected(client) -> None:
    assert client.get("/api/events/getAll").status_code == 401


def test_requests_with_bad_token_are_rejected(client) -> None:
    response = client.get("/api/events/getAll", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_health_needs_no_token(client) -> None:
    assert client.get("/health").json()["status"] == "healthy"


def test_create_then_fetch_returns_submitted_fields(client, auth_headers) -> None:
    payload = event_payload()
    created = client.post("/api/events/create", json=payload, headers=auth_headers)
    assert created.status_code == 201

    data = client.get("/api/events/getById/1", headers=auth_headers).json()["data"]
    assert data["event_id"] == 1
    assert data["name_title"] == payload["name_title"]
    assert data["venue_details_id"] == 3
    assert data["max_capacity"] == 40
    assert data["tags"] == ["birthday", "rooftop"]
    assert data["event_visibility"] == "Public"


def test_soft_delete_hides_record_and_lists_it_as_inactive(client, auth_headers) -> None:
    client.post("/api/events/create", json=event_payload(), headers=auth_headers)

    deleted = client.delete("/api/events/delete/1", headers=auth_headers)
    assert deleted.status_code == 200
    assert deleted.json()["data"]["status"] is False

    assert client.get("/api/events/getById/1", headers=auth_headers).status_code == 404
    active = client.get("/api/events/getAll", headers=auth_headers).json()["data"]
    assert active["items"] == []
    inactive = client.get("/api/events/getAll", params={"status": "false"},
                          headers=auth_headers).json()["data"]
    assert [i["event_id"] for i in inactive["items"]] == [1]


def test_soft_deleted_record_can_be_restored(client, auth_headers) -> None:
    client.post("/api/events/create", json=event_payload(), headers=auth_headers)
    client.delete("/api/events/delete/1", headers=auth_headers)

    restored = client.put("/api/events/update", json={"event_id": 1, "status": True},
                          headers=auth_headers)

    assert restored.status_code == 200
    assert client.get("/api/events/getById/1", headers=auth_headers).status_code == 200


def test_delete_twice_is_not_found(client, auth_headers) -> None:
    client.post("/api/events/create", json=event_payload(), headers=auth_headers)
    client.delete("/api/events/delete/1", headers=auth_headers)

    assert client.delete("/api/events/delete/1", headers=auth_headers).status_code == 404


def test_hard_delete_removes_row(client, auth_headers, db_session) -> None:
    client.post("/api/guests/create", json={"event_id": 1, "name": "Ana"}, headers=auth_headers)

    deleted = client.delete("/api/guests/delete/1", headers=auth_headers)

    assert deleted.status_code == 200
    assert deleted.json()["data"]["name"] == "Ana"
    assert client.get("/api/guests/getById/1", headers=auth_headers).status_code == 404
    assert db_session.query(Guest).count() == 0


def test_update_of_unknown_record_is_not_found(client, auth_headers) -> None:
    response = client.put("/api/master/decorations/update",
                          json={"decorations_id": 42, "brand_name": "Acme"}, headers=auth_headers)

    assert response.status_code == 404


def test_pagination_metadata(client, auth_headers) -> None:
    for n in range(5):
        client.post("/api/admin/payment-methods/create",
                    json={"payment_method": f"Method {n}"}, headers=auth_headers)

    response = client.get("/api/admin/payment-methods/getAll",
                          params={"page": 2, "limit": 2}, headers=auth_headers)

    data = response.json()["data"]
    assert len(data["items"]) == 2
    assert data["pagination"] == {
        "currentPage": 2,
        "totalPages": 3,
        "totalItems": 5,
        "itemsPerPage": 2,
        "hasNextPage": True,
        "hasPrevPage": True,
    }


def test_sort_by_whitelisted_field(client, auth_headers) -> None:
    for name, price in [("Balloons", 20), ("Lights", 80), ("Flowers", 50)]:
        client.post("/api/master/decorations/create",
                    json={"decorations_name": name, "decorations_price": price}, headers=auth_headers)

    response = client.get("/api/master/decorations/getAll",
                          params={"sortBy": "decorations_price", "sortOrder": "asc"},
                          headers=auth_headers)

    names = [i["decorations_name"] for i in response.json()["data"]["items"]]
    assert names == ["Balloons", "Flowers", "Lights"]


@pytest.mark.parametrize(
    "params",
    [{"page": 0}, {"limit": 500}, {"sortBy": "password"}, {"sortOrder": "up"}, {"search": "x" * 101}],
)
def test_invalid_list_parameters_are_rejected(client, auth_headers, params: dict) -> None:
    response = client.get("/api/master/decorations/getAll", params=params, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["status"] == "Failure"


def test_exact_match_filter(client, auth_headers) -> None:
    for event_id in (1, 1, 2):
        client.post("/api/event-entry-tickets/create",
                    json={"event_id": event_id, "title": "General", "price": 15, "total_seats": 50},
                    headers=auth_headers)

    response = client.get("/api/event-entry-tickets/getAll", params={"event_id": 1},
                          headers=auth_headers)

    assert response.json()["data"]["pagination"]["totalItems"] == 2


def test_event_type_names_are_unique_ignoring_case(client, auth_headers) -> None:
    client.post("/api/event-types/create", json={"name": "Wedding", "emoji": "W"}, headers=auth_headers)

    duplicate = client.post("/api/event-types/create", json={"name": "wedding", "emoji": "W"},
                            headers=auth_headers)

    assert duplicate.status_code == 400


def test_editing_a_chat_message_marks_it_edited(client, auth_headers) -> None:
    created = client.post("/api/event-discussion-chat/create",
                          json={"event_id": 1, "message": "See you at 6"}, headers=auth_headers)
    assert created.json()["data"]["is_edited"] is False
    assert created.json()["data"]["user_id"] == 1

    updated = client.put("/api/event-discussion-chat/update",
                         json={"event_discussion_chat_id": 1, "message": "See you at 7"},
                         headers=auth_headers)

    data = updated.json()["data"]
    assert data["message"] == "See you at 7"
    assert data["is_edited"] is True
    assert data["edited_at"] is not None


def test_non_integer_id_is_a_validation_error(client, auth_headers) -> None:
    assert client.get("/api/events/getById/abc", headers=auth_headers).status_code == 400


def test_search_treats_wildcards_literally(client, auth_headers) -> None:
    for name in ("50% off bundle", "500 roses", "gold_arch", "goldenarch"):
        client.post("/api/master/decorations/create", json={"decorations_name": name, "decorations_price": 10},
                    headers=auth_headers)

    percent = client.get("/api/master/decorations/getAll", params={"search": "50%"},
                         headers=auth_headers)
    underscore = client.get("/api/master/decorations/getAll", params={"search": "gold_"},
                            headers=auth_headers)

    assert [i["decorations_name"] for i in percent.json()["data"]["items"]] == ["50% off bundle"]
    assert [i["decorations_name"] for i in underscore.json()["data"]["items"]] == ["gold_arch"]


@pytest.mark.parametrize("email", ["a@b.c...", "not-an-email", "lee@@example.com"])
def test_guest_email_must_be_valid(client, auth_headers, email: str) -> None:
    response = client.post("/api/guests/create",
                           json={"event_id": 1, "name": "Ana", "email": email}, headers=auth_headers)

    assert response.status_code == 400


def test_vendor_business_email_must_be_valid(client, auth_headers) -> None:
    response = client.post(
        "/api/vendor/business-information/create",
        json={"vendor_id": 1, "business_name": "Bloom Co", "business_email": "a@b.c...",
              "business_phone": "5551234567"},
        headers=auth_headers,
    )

    assert response.status_code == 400
