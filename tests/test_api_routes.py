"""HTTP-level tests through httpx against the ASGI app"""
from conftest import passenger_payload

ALICE = {"X-User-Id": "alice"}
BOB = {"X-User-Id": "bob"}
ADMIN = {"X-User-Id": "admin-1"}


def booking_payload(seeded, seat_numbers, passengers=None, **overrides):
    payload = {
        "flightId": seeded.flight_id,
        "cabinClass": "economy",
        "passengers": passenger_payload(len(seat_numbers) if passengers is None else passengers),
        "seatIds": [seeded.seats[n] for n in seat_numbers],
        "paymentMethod": "card",
    }
    payload.update(overrides)
    return payload


async def create_booking(client, seeded, seat_numbers, headers=ALICE):
    response = await client.post("/api/bookings", json=booking_payload(seeded, seat_numbers), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


# ==================== Catalog ====================

async def test_list_airports(client, seeded):
    response = await client.get("/api/airports")

    assert response.status_code == 200
    assert [a["code"] for a in response.json()] == ["BOM", "DEL", "JFK", "LHR"]


async def test_list_airlines(client, seeded):
    response = await client.get("/api/airlines")

    assert response.status_code == 200
    assert response.json()[0]["code"] == "AI"


async def test_search_flights(client, seeded):
    response = await client.get(
        "/api/flights/search", params={"origin": "del", "destination": "BOM", "date": "2030-01-15"}
    )

    assert response.status_code == 200
    flights = response.json()
    assert {f["flightNumber"] for f in flights} == {"AI101", "AI999"}
    first = flights[0]
    assert first["originAirport"]["code"] == "DEL"
    assert first["destinationAirport"]["code"] == "BOM"
    assert first["airline"]["code"] == "AI"
    assert first["economyPrice"] == "100.00"


async def test_search_with_no_matches_returns_empty_list(client, seeded):
    response = await client.get(
        "/api/flights/search", params={"origin": "JFK", "destination": "LHR", "date": "2025-12-25"}
    )

    assert response.status_code == 200
    assert response.json() == []


async def test_search_missing_params_is_bad_request(client, seeded):
    response = await client.get("/api/flights/search", params={"origin": "DEL"})

    assert response.status_code == 400


async def test_get_flight(client, seeded):
    response = await client.get(f"/api/flights/{seeded.flight_id}")

    assert response.status_code == 200
    assert response.json()["flightNumber"] == "AI101"


async def test_get_unknown_flight(client, seeded):
    response = await client.get("/api/flights/99999")

    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


async def test_seat_map(client, seeded):
    response = await client.get(f"/api/flights/{seeded.flight_id}/seats")

    assert response.status_code == 200
    data = response.json()
    assert data["totalSeats"] == 10
    assert data["availableSeats"] == 10
    assert set(data["cabins"]) == {"economy", "business"}


async def test_seat_map_filtered_by_cabin(client, seeded):
    response = await client.get(
        f"/api/flights/{seeded.flight_id}/seats", params={"cabinClass": "business"}
    )

    assert response.status_code == 200
    assert [s["seatNumber"] for s in response.json()["seats"]] == ["3A", "3B"]


async def test_seat_map_reflects_booking(client, seeded):
    await create_booking(client, seeded, ["7A", "7B"])

    response = await client.get(f"/api/flights/{seeded.flight_id}/seats")

    assert response.json()["availableSeats"] == 8


# ==================== Bookings ====================

async def test_create_booking(client, seeded):
    data = await create_booking(client, seeded, ["7A", "7B"])

    assert len(data["pnr"]) == 6
    assert data["userKey"] == "user:alice"
    assert data["status"] == "confirmed"
    assert data["paymentStatus"] == "paid"
    assert data["totalAmount"] == "252.00"
    assert data["surgeApplied"] is False
    assert data["priceBreakdown"]["total"] == "252.00"
    assert [p["seatNumber"] for p in data["passengers"]] == ["7A", "7B"]


async def test_guest_session_booking(client, seeded):
    data = await create_booking(client, seeded, ["7A"], headers={"X-Session-Id": "abc"})

    assert data["userKey"] == "guest:session:abc"


async def test_double_booking_conflict(client, seeded):
    await create_booking(client, seeded, ["7A"])

    response = await client.post("/api/bookings", json=booking_payload(seeded, ["7A"]), headers=BOB)

    assert response.status_code == 409


async def test_booking_unknown_flight(client, seeded):
    response = await client.post(
        "/api/bookings", json=booking_payload(seeded, ["7A"], flightId=99999), headers=ALICE
    )

    assert response.status_code == 404


async def test_booking_seat_passenger_mismatch(client, seeded):
    response = await client.post(
        "/api/bookings", json=booking_payload(seeded, ["7A"], passengers=2), headers=ALICE
    )

    assert response.status_code == 400


async def test_booking_without_passengers(client, seeded):
    response = await client.post(
        "/api/bookings", json=booking_payload(seeded, [], passengers=0), headers=ALICE
    )

    assert response.status_code == 400


async def test_booking_cancelled_flight(client, seeded):
    response = await client.post(
        "/api/bookings",
        json=booking_payload(seeded, ["7A"], flightId=seeded.cancelled_flight_id),
        headers=ALICE,
    )

    assert response.status_code == 400


async def test_get_booking_owner_only(client, seeded):
    booking = await create_booking(client, seeded, ["7A"])

    assert (await client.get(f"/api/bookings/{booking['id']}", headers=ALICE)).status_code == 200
    assert (await client.get(f"/api/bookings/{booking['id']}", headers=BOB)).status_code == 403
    assert (await client.get(f"/api/bookings/{booking['id']}", headers=ADMIN)).status_code == 200
    assert (await client.get("/api/bookings/99999", headers=ALICE)).status_code == 404


async def test_list_my_bookings(client, seeded):
    await create_booking(client, seeded, ["7A"], headers=ALICE)
    await create_booking(client, seeded, ["7B"], headers=BOB)

    response = await client.get("/api/bookings", headers=ALICE)

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["bookings"][0]["userKey"] == "user:alice"


async def test_cancel_booking(client, seeded):
    booking = await create_booking(client, seeded, ["7A", "7B"])

    response = await client.patch(f"/api/bookings/{booking['id']}/cancel", headers=ALICE)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Booking cancelled"
    assert data["status"] == "cancelled"
    assert data["releasedSeats"] == 2

    again = await client.patch(f"/api/bookings/{booking['id']}/cancel", headers=ALICE)
    assert again.status_code == 200
    assert again.json()["message"] == "Booking already cancelled"
    assert again.json()["releasedSeats"] == 0


async def test_cancel_by_other_user_forbidden(client, seeded):
    booking = await create_booking(client, seeded, ["7A"])

    response = await client.patch(f"/api/bookings/{booking['id']}/cancel", headers=BOB)

    assert response.status_code == 403
    after = await client.get(f"/api/bookings/{booking['id']}", headers=ALICE)
    assert after.json()["status"] == "confirmed"


async def test_cancel_unknown_booking(client, seeded):
    response = await client.patch("/api/bookings/99999/cancel", headers=ALICE)

    assert response.status_code == 404


# ==================== Admin ====================

async def test_admin_routes_require_admin(client, seeded):
    assert (await client.get("/api/admin/bookings", headers=ALICE)).status_code == 403
    assert (await client.get("/api/admin/flights")).status_code == 403


async def test_admin_lists_everything(client, seeded):
    await create_booking(client, seeded, ["7A"], headers=ALICE)
    await create_booking(client, seeded, ["7B"], headers=BOB)

    bookings = await client.get("/api/admin/bookings", headers=ADMIN)
    flights = await client.get("/api/admin/flights", headers=ADMIN)

    assert bookings.status_code == 200
    assert bookings.json()["total"] == 2
    assert flights.status_code == 200
    assert len(flights.json()) == 2


# ==================== Ops ====================

async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "X-Trace-ID" in response.headers


async def test_metrics(client):
    response = await client.get("/metrics")

    assert response.status_code == 200
    assert "http_requests_total" in response.text
