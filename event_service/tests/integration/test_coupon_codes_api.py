from __future__ import annotations

BASE = "/api/admin/coupon-codes"


def coupon_payload(**overrides) -> dict:
    payload = {
        "code": "WELCOME10",
        "name": "Welcome discount",
        "description": "Ten percent off the first booking",
        "price": 10,
        "min_order_amount": 50,
        "max_discount_amount": 25,
        "usage_limit": 100,
        "valid_from": "2026-01-01T00:00:00Z",
        "valid_until": "2026-12-31T00:00:00Z",
    }
    payload.update(overrides)
    return payload


def test_first_coupon_gets_id_one_and_is_fetchable_by_legacy_route(client, auth_headers) -> None:
    created = client.post(f"{BASE}/create", json=coupon_payload(), headers=auth_headers)

    assert created.status_code == 201
    body = created.json()
    assert body["status"] == "Success"
    assert body["data"]["coupon_code_id"] == 1
    assert body["data"]["created_by"] == 1
    assert body["data"]["status"] is True

    fetched = client.get(f"{BASE}/getCouponCodeById/1", headers=auth_headers)
    assert fetched.status_code == 200
    data = fetched.json()["data"]
    assert data["code"] == "WELCOME10"
    assert data["usage_limit"] == 100
    assert data["used_count"] == 0


def test_public_ids_increase_and_are_not_reused_after_delete(client, auth_headers) -> None:
    client.post(f"{BASE}/create", json=coupon_payload(code="ONE111"), headers=auth_headers)
    client.delete(f"{BASE}/deleteCouponCodeById/1", headers=auth_headers)
    second = client.post(f"{BASE}/create", json=coupon_payload(code="TWO222"), headers=auth_headers)

    assert second.json()["data"]["coupon_code_id"] == 2


def test_duplicate_code_is_rejected(client, auth_headers) -> None:
    client.post(f"{BASE}/create", json=coupon_payload(), headers=auth_headers)
    duplicate = client.post(f"{BASE}/create", json=coupon_payload(name="Other"), headers=auth_headers)

    assert duplicate.status_code == 400
    assert duplicate.json()["status"] == "Failure"
    assert "already exists" in duplicate.json()["message"]


def test_validity_window_is_checked_on_create(client, auth_headers) -> None:
    response = client.post(
        f"{BASE}/create",
        json=coupon_payload(valid_from="2026-06-01T00:00:00Z", valid_until="2026-01-01T00:00:00Z"),
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert "valid_until" in response.json()["message"]


def test_validity_window_is_checked_on_update(client, auth_headers) -> None:
    client.post(f"{BASE}/create", json=coupon_payload(), headers=auth_headers)

    response = client.put(
        f"{BASE}/updateCouponCodeById",
        json={"coupon_code_id": 1, "valid_until": "2025-01-01T00:00:00Z"},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_partial_update_leaves_other_fields_alone(client, auth_headers) -> None:
    client.post(f"{BASE}/create", json=coupon_payload(), headers=auth_headers)

    response = client.put(f"{BASE}/update", json={"coupon_code_id": 1, "name": "Renamed"},
                          headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Renamed"
    assert data["code"] == "WELCOME10"
    assert data["description"] == "Ten percent off the first booking"
    assert data["usage_limit"] == 100
    assert data["updated_by"] == 1


def test_missing_required_fields_return_field_errors(client, auth_headers) -> None:
    response = client.post(f"{BASE}/create", json={"code": "X"}, headers=auth_headers)

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "Failure"
    fields = {e["field"] for e in body["data"]}
    assert {"code", "name", "price", "valid_from"} <= fields


def test_search_matches_code_and_name(client, auth_headers) -> None:
    client.post(f"{BASE}/create", json=coupon_payload(code="SUMMER25", name="Summer sale"),
                headers=auth_headers)
    client.post(f"{BASE}/create", json=coupon_payload(code="WINTER25", name="Winter sale"),
                headers=auth_headers)

    response = client.get(f"{BASE}/getAll", params={"search": "summer"}, headers=auth_headers)

    items = response.json()["data"]["items"]
    assert [i["code"] for i in items] == ["SUMMER25"]


def test_get_by_auth_only_lists_callers_coupons(client, auth_headers, other_user_headers) -> None:
    client.post(f"{BASE}/create", json=coupon_payload(code="MINE01"), headers=auth_headers)
    client.post(f"{BASE}/create", json=coupon_payload(code="THEIRS"), headers=other_user_headers)

    response = client.get(f"{BASE}/getCouponCodeByAuth", headers=other_user_headers)

    items = response.json()["data"]["items"]
    assert [i["code"] for i in items] == ["THEIRS"]
