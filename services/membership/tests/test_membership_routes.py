"""Tests for the membership HTTP routes."""

from datetime import datetime, timezone
from decimal import Decimal

BASE_URL = "/api/v1/memberships"


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestCreateRoute:
    def test_created(self, client, make_payload):
        response = client.post(BASE_URL, json=make_payload(validFrom="2024-01-31T00:00:00Z"))

        assert response.status_code == 201
        body = response.json()
        membership = body["membership"]
        assert membership["id"] == 1
        assert membership["name"] == "Gold"
        assert membership["paymentMethod"] == "cash"
        assert membership["billingInterval"] == "monthly"
        assert membership["billingPeriods"] == 6
        assert membership["state"] == "active"
        assert membership["assignedBy"] == "Admin"
        assert membership["userId"] == 2000
        assert Decimal(str(membership["recurringPrice"])) == Decimal("50")
        assert _parse(membership["validFrom"]) == datetime(2024, 1, 31, tzinfo=timezone.utc)
        assert _parse(membership["validUntil"]) == datetime(2024, 7, 31, tzinfo=timezone.utc)

        periods = body["periods"]
        assert len(periods) == 6
        assert {p["membershipId"] for p in periods} == {1}
        assert {p["state"] for p in periods} == {"planned"}
        assert periods[0]["start"] == membership["validFrom"]
        assert periods[-1]["end"] == membership["validUntil"]

    def test_cash_price_limit(self, client, make_payload):
        response = client.post(BASE_URL, json=make_payload(recurringPrice=150, validFrom=None))

        assert response.status_code == 400
        assert response.json() == {"detail": "cashPriceBelow100", "kind": "CashPriceExceedsLimit"}
        assert client.get(BASE_URL).json() == []

    def test_out_of_range_periods(self, client, make_payload):
        response = client.post(BASE_URL, json=make_payload(billingPeriods=13))

        assert response.status_code == 400
        assert response.json()["kind"] == "BillingPeriodsOutOfRange"

    def test_body_must_be_an_object(self, client):
        response = client.post(BASE_URL, json=["Gold"])

        assert response.status_code == 400
        assert response.json()["detail"] == "invalidRequestBody"

    def test_validity_out_of_range(self, client, make_payload):
        payload = make_payload(billingInterval="yearly", billingPeriods=10, validFrom="9995-01-01T00:00:00Z")

        response = client.post(BASE_URL, json=payload)

        assert response.status_code == 400
        assert response.json() == {"detail": "validityOutOfRange", "kind": "InvalidFieldValue"}
        assert client.get(BASE_URL).json() == []

    def test_price_is_rounded_to_the_cent(self, client, make_payload):
        response = client.post(BASE_URL, json=make_payload(recurringPrice=19.999))

        assert response.status_code == 201
        assert Decimal(str(response.json()["membership"]["recurringPrice"])) == Decimal("20.00")

    def test_credit_card_is_serialized_with_a_space(self, client, make_payload):
        response = client.post(BASE_URL, json=make_payload(paymentMethod="credit-card", recurringPrice=300))

        assert response.json()["membership"]["paymentMethod"] == "credit card"


class TestReadRoutes:
    def test_list(self, client, make_payload):
        client.post(BASE_URL, json=make_payload(name="A"))
        client.post(BASE_URL, json=make_payload(name="B", billingInterval="weekly", billingPeriods=2))

        response = client.get(BASE_URL)

        assert response.status_code == 200
        body = response.json()
        assert [item["membership"]["name"] for item in body] == ["A", "B"]
        assert [len(item["periods"]) for item in body] == [6, 2]

    def test_get_one(self, client, make_payload):
        client.post(BASE_URL, json=make_payload())

        response = client.get(f"{BASE_URL}/1")

        assert response.status_code == 200
        assert response.json()["membership"]["id"] == 1

    def test_get_missing(self, client):
        response = client.get(f"{BASE_URL}/42")

        assert response.status_code == 404
        assert response.json()["kind"] == "MembershipNotFound"


class TestTerminateRoute:
    def test_terminate_then_conflict(self, client, make_payload):
        client.post(BASE_URL, json=make_payload())

        first = client.post(f"{BASE_URL}/1/terminate")
        second = client.post(f"{BASE_URL}/1/terminate")

        assert first.status_code == 204
        assert second.status_code == 409
        assert second.json() == {
            "detail": "membershipAlreadyTerminated",
            "kind": "AlreadyTerminalState",
        }
        item = client.get(f"{BASE_URL}/1").json()
        assert item["membership"]["state"] == "terminated"
        assert {p["state"] for p in item["periods"]} == {"terminated"}

    def test_terminate_missing(self, client):
        response = client.post(f"{BASE_URL}/7/terminate")

        assert response.status_code == 404
        assert response.json()["detail"] == "membershipNotFound"
