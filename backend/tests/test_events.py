"""Event creation, single-record access and scoped listing.

Covers:
- Provider assignment from the catalog, never from the request body
- Company name taken from the requester's profile
- Three-distinct-dates and postal-code validation
- Role capability: only requesters create
- Existence before ownership on single-record fetch
- Listing scoped to the caller's own events
"""
from datetime import datetime, timedelta

from conftest import EYE_SCREENING, NUTRITION_TALK


class TestEventCreate:
    def test_create_event(self, make_event, users, catalog, proposed_dates):
        resp = make_event()
        assert resp.status_code == 201, resp.text
        data = resp.json()["data"]
        assert data["status"] == "pending"
        assert data["remarks"] == ""
        assert data["confirmedDate"] is None
        assert data["eventTypeId"] == catalog[NUTRITION_TALK].event_type_id
        assert data["eventType"]["name"] == NUTRITION_TALK
        assert data["location"] == {"postalCode": "50000", "streetName": "1 Wellness Way"}
        assert [datetime.fromisoformat(d) for d in data["proposedDates"]] == proposed_dates
        assert data["requesterId"] == users["hr_acme"].user_id
        assert data["requester"]["username"] == "hr_acme"

    def test_provider_comes_from_event_type(self, make_event, users, catalog):
        for name, event_type in catalog.items():
            data = make_event(event_type=name).json()["data"]
            assert data["providerId"] == event_type.provider_id
            assert data["provider"]["id"] == event_type.provider_id

    def test_caller_cannot_choose_provider_or_company(self, make_event, users):
        resp = make_event(
            providerId=users["vendor_fitlife"].user_id,
            vendor=users["vendor_fitlife"].user_id,
            requesterCompanyName="Evil Corp",
            companyName="Evil Corp",
        )
        assert resp.status_code == 201
        data = resp.json()["data"]
        assert data["providerId"] == users["vendor_healthplus"].user_id
        assert data["requesterCompanyName"] == "Acme Corporation"

    def test_company_name_from_profile(self, make_event):
        data = make_event(requester="hr_globex").json()["data"]
        assert data["requesterCompanyName"] == "Globex Industries"

    def test_duplicate_dates_rejected(self, make_event):
        resp = make_event(dates=["2025-06-01T00:00:00Z", "2025-06-01T00:00:00Z", "2025-06-02T00:00:00Z"])
        assert resp.status_code == 400
        assert resp.json() == {"error": "All 3 proposed dates must be different"}

    def test_same_instant_different_offset_is_duplicate(self, make_event):
        resp = make_event(dates=["2025-06-01T08:00:00+08:00", "2025-06-01T00:00:00Z", "2025-06-02T00:00:00Z"])
        assert resp.status_code == 400

    def test_same_day_different_times_allowed(self, make_event):
        resp = make_event(dates=["2025-06-01T09:00:00Z", "2025-06-01T14:00:00Z", "2025-06-02T09:00:00Z"])
        assert resp.status_code == 201

    def test_wrong_number_of_dates(self, make_event, proposed_dates):
        resp = make_event(dates=proposed_dates[:2])
        assert resp.status_code == 400
        assert resp.json() == {"error": "Exactly 3 proposed dates are required"}
        four = proposed_dates + [proposed_dates[-1] + timedelta(days=1)]
        assert make_event(dates=four).status_code == 400

    def test_unparseable_date(self, make_event):
        resp = make_event(dates=["not-a-date", "2025-06-01T14:00:00Z", "2025-06-02T09:00:00Z"])
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_postal_code_required(self, make_event):
        resp = make_event(location={"streetName": "Somewhere"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Postal code is required"}
        assert make_event(location={"postalCode": "   "}).status_code == 400

    def test_street_name_optional(self, make_event):
        data = make_event(location={"postalCode": "50000"}).json()["data"]
        assert data["location"] == {"postalCode": "50000", "streetName": ""}

    def test_missing_location(self, client, headers, catalog, proposed_dates):
        resp = client.post("/api/events", json={
            "eventTypeId": catalog[NUTRITION_TALK].event_type_id,
            "proposedDates": [d.isoformat() for d in proposed_dates],
        }, headers=headers["hr_acme"])
        assert resp.status_code == 400
        assert resp.json() == {"error": "Postal code is required"}

    def test_unknown_event_type(self, client, headers, proposed_dates):
        resp = client.post("/api/events", json={
            "eventTypeId": "no-such-type",
            "proposedDates": [d.isoformat() for d in proposed_dates],
            "location": {"postalCode": "50000"},
        }, headers=headers["hr_acme"])
        assert resp.status_code == 404
        assert resp.json() == {"error": "Event type not found"}

    def test_provider_cannot_create(self, make_event, headers):
        resp = make_event(requester="vendor_healthplus")
        assert resp.status_code == 403
        assert resp.json() == {"error": "Not authorized"}

    def test_requires_authentication(self, client, catalog, proposed_dates):
        resp = client.post("/api/events", json={
            "eventTypeId": catalog[NUTRITION_TALK].event_type_id,
            "proposedDates": [d.isoformat() for d in proposed_dates],
            "location": {"postalCode": "50000"},
        })
        assert resp.status_code == 401


class TestEventFetch:
    def test_requester_and_provider_can_fetch(self, client, headers, make_event):
        event = make_event().json()["data"]
        for who in ("hr_acme", "vendor_healthplus"):
            resp = client.get(f"/api/events/{event['id']}", headers=headers[who])
            assert resp.status_code == 200
            assert resp.json()["data"]["id"] == event["id"]

    def test_other_parties_forbidden(self, client, headers, make_event):
        event = make_event().json()["data"]
        for who in ("hr_globex", "vendor_wellcare"):
            resp = client.get(f"/api/events/{event['id']}", headers=headers[who])
            assert resp.status_code == 403
            assert resp.json() == {"error": "Not authorized"}

    def test_missing_event_is_not_found_for_everyone(self, client, headers, make_event):
        make_event()
        for who in ("hr_acme", "hr_globex", "vendor_wellcare"):
            resp = client.get("/api/events/does-not-exist", headers=headers[who])
            assert resp.status_code == 404
            assert resp.json() == {"error": "Event not found"}


class TestEventListing:
    def test_requesters_only_see_their_own(self, client, headers, users, make_event):
        make_event(requester="hr_acme")
        make_event(requester="hr_acme", event_type=EYE_SCREENING)
        make_event(requester="hr_globex")

        for who, expected in (("hr_acme", 2), ("hr_globex", 1)):
            body = client.get("/api/events", headers=headers[who]).json()
            assert body["totalEvents"] == expected
            assert {e["requesterId"] for e in body["data"]} == {users[who].user_id}

    def test_providers_only_see_events_routed_to_them(self, client, headers, users, make_event):
        make_event(requester="hr_acme")
        make_event(requester="hr_globex")
        make_event(requester="hr_acme", event_type=EYE_SCREENING)

        for who, expected in (("vendor_healthplus", 2), ("vendor_wellcare", 1), ("vendor_fitlife", 0)):
            body = client.get("/api/events", headers=headers[who]).json()
            assert body["totalEvents"] == expected
            assert all(e["providerId"] == users[who].user_id for e in body["data"])

    def test_most_recent_first(self, client, headers, make_event, proposed_dates):
        first = make_event().json()["data"]
        second = make_event(dates=[d + timedelta(days=10) for d in proposed_dates]).json()["data"]
        ids = [e["id"] for e in client.get("/api/events", headers=headers["hr_acme"]).json()["data"]]
        assert ids == [second["id"], first["id"]]
