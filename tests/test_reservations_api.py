"""Tests for the reservation endpoints"""

from datetime import date, time

import pytest
from httpx import AsyncClient

from tests.conftest import TOMORROW, NEXT_TUESDAY, LAST_MONDAY, add_reservation


@pytest.mark.asyncio
async def test_create_reservation(client: AsyncClient, reservation_payload):
    """A valid reservation is created booked"""
    response = await client.post("/reservations", json=reservation_payload)
    
    assert response.status_code == 201
    data = response.json()
    assert data["reservation_id"] > 0
    assert data["first_name"] == "A"
    assert data["last_name"] == "B"
    assert data["mobile_number"] == "555"
    assert data["reservation_date"] == TOMORROW
    assert data["reservation_time"] == "12:00:00"
    assert data["people"] == 2
    assert data["status"] == "booked"


@pytest.mark.asyncio
async def test_create_reservation_with_data_envelope(client: AsyncClient, reservation_payload):
    response = await client.post("/reservations", json={"data": reservation_payload})
    
    assert response.status_code == 201
    assert response.json()["status"] == "booked"


@pytest.mark.asyncio
async def test_create_reservation_with_booked_status(client: AsyncClient, reservation_payload):
    reservation_payload["status"] = "booked"
    
    response = await client.post("/reservations", json=reservation_payload)
    
    assert response.status_code == 201


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "changes, error",
    [
        ({"first_name": ""}, "MissingField"),
        ({"first_name": ["A"]}, "InvalidType"),
        ({"mobile_number": {"n": 1}}, "InvalidType"),
        ({"last_name": 7}, "InvalidType"),
        ({"people": 10**20}, "InvalidType"),
        ({"people": "4"}, "InvalidType"),
        ({"reservation_date": "2023-1-5"}, "InvalidFormat"),
        ({"reservation_time": "25:00"}, "InvalidFormat"),
        ({"reservation_date": NEXT_TUESDAY}, "ClosedDay"),
        ({"reservation_date": LAST_MONDAY}, "PastDate"),
        ({"reservation_time": "10:00"}, "OutsideHours"),
        ({"reservation_time": "21:45"}, "OutsideHours"),
        ({"status": "seated"}, "InvalidStatus"),
        ({"status": "finished"}, "InvalidStatus"),
    ],
)
async def test_create_reservation_rejections(client: AsyncClient, reservation_payload, changes, error):
    """Rejected requests answer 400 and write nothing"""
    reservation_payload.update(changes)
    
    response = await client.post("/reservations", json=reservation_payload)
    
    assert response.status_code == 400
    body = response.json()
    assert body["status"] == 400
    assert body["error"] == error
    assert body["message"]
    
    listing = await client.get("/reservations")
    assert listing.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("reservation_time", ["10:30", "21:30"])
async def test_create_reservation_hours_boundaries(client: AsyncClient, reservation_payload, reservation_time):
    reservation_payload["reservation_time"] = reservation_time
    
    response = await client.post("/reservations", json=reservation_payload)
    
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_create_reservation_missing_field_message(client: AsyncClient, reservation_payload):
    del reservation_payload["reservation_date"]
    del reservation_payload["people"]
    
    response = await client.post("/reservations", json=reservation_payload)
    
    assert response.status_code == 400
    assert response.json()["message"] == "reservation_date is required"


@pytest.mark.asyncio
async def test_create_reservation_requires_object_body(client: AsyncClient):
    response = await client.post("/reservations", json=["not", "an", "object"])
    
    assert response.status_code == 422
    assert response.json()["status"] == 422


@pytest.mark.asyncio
async def test_get_reservation(client: AsyncClient, booked_reservation):
    response = await client.get(f"/reservations/{booked_reservation.reservation_id}")
    
    assert response.status_code == 200
    data = response.json()
    assert data["first_name"] == "Rick"
    assert data["reservation_time"] == "18:30:00"


@pytest.mark.asyncio
async def test_get_missing_reservation(client: AsyncClient):
    response = await client.get("/reservations/99")
    
    assert response.status_code == 404
    assert response.json() == {
        "status": 404,
        "message": "reservation 99 does not exist",
        "error": "NotFound",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("reservation_id", ["abc", "0", "-1", "1.5", str(10**20)])
async def test_get_reservation_with_unusable_id(client: AsyncClient, booked_reservation, reservation_id):
    response = await client.get(f"/reservations/{reservation_id}")
    
    assert response.status_code == 404
    assert response.json() == {
        "status": 404,
        "message": f"reservation {reservation_id} does not exist",
        "error": "NotFound",
    }


@pytest.mark.asyncio
async def test_list_reservations_by_date(client: AsyncClient, test_db):
    """Listing a day skips finished reservations and sorts by time"""
    late = await add_reservation(test_db, first_name="Late")
    early = await add_reservation(test_db, first_name="Early", reservation_time=time(11, 0))
    await add_reservation(test_db, first_name="Done", status="finished")
    await add_reservation(test_db, first_name="Other day", reservation_date=date(2030, 1, 4))
    
    response = await client.get("/reservations", params={"date": TOMORROW})
    
    assert response.status_code == 200
    ids = [item["reservation_id"] for item in response.json()]
    assert ids == [early.reservation_id, late.reservation_id]


@pytest.mark.asyncio
async def test_list_reservations_rejects_bad_date(client: AsyncClient):
    response = await client.get("/reservations", params={"date": "tomorrow"})
    
    assert response.status_code == 400
    assert response.json()["error"] == "InvalidFormat"


@pytest.mark.asyncio
async def test_search_reservations_by_mobile_number(client: AsyncClient, test_db):
    match = await add_reservation(test_db, mobile_number="(202) 555-0164")
    await add_reservation(test_db, mobile_number="808-555-0199")
    
    response = await client.get("/reservations", params={"mobile_number": "2025550"})
    
    assert response.status_code == 200
    assert [item["reservation_id"] for item in response.json()] == [match.reservation_id]


@pytest.mark.asyncio
@pytest.mark.parametrize("term", ["%", "_", "2025550%"])
async def test_search_treats_wildcards_literally(client: AsyncClient, test_db, term):
    await add_reservation(test_db, mobile_number="(202) 555-0164")
    await add_reservation(test_db, mobile_number="808-555-0199")
    
    response = await client.get("/reservations", params={"mobile_number": term})
    
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_update_status(client: AsyncClient, booked_reservation):
    response = await client.put(
        f"/reservations/{booked_reservation.reservation_id}/status",
        json={"data": {"status": "cancelled"}},
    )
    
    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"


@pytest.mark.asyncio
async def test_update_status_unknown(client: AsyncClient, booked_reservation):
    response = await client.put(
        f"/reservations/{booked_reservation.reservation_id}/status",
        json={"status": "archived"},
    )
    
    assert response.status_code == 400
    assert response.json()["error"] == "UnknownStatus"


@pytest.mark.asyncio
async def test_update_status_of_finished_reservation(client: AsyncClient, test_db):
    reservation = await add_reservation(test_db, status="finished")
    
    response = await client.put(
        f"/reservations/{reservation.reservation_id}/status",
        json={"status": "finished"},
    )
    
    assert response.status_code == 400
    assert response.json()["error"] == "TerminalStatus"


@pytest.mark.asyncio
async def test_update_status_missing_reservation(client: AsyncClient):
    response = await client.put("/reservations/42/status", json={"status": "seated"})
    
    assert response.status_code == 404
    assert response.json()["message"] == "reservation 42 does not exist"


@pytest.mark.asyncio
async def test_update_reservation(client: AsyncClient, booked_reservation, reservation_payload):
    reservation_payload.update(first_name="Morty", people=3, reservation_time="19:15")
    
    response = await client.put(
        f"/reservations/{booked_reservation.reservation_id}",
        json=reservation_payload,
    )
    
    assert response.status_code == 200
    data = response.json()
    assert data["reservation_id"] == booked_reservation.reservation_id
    assert data["first_name"] == "Morty"
    assert data["people"] == 3
    assert data["reservation_time"] == "19:15:00"
    assert data["status"] == "booked"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["seated", "finished", "cancelled"])
async def test_update_requires_booked(client: AsyncClient, test_db, reservation_payload, status):
    reservation = await add_reservation(test_db, status=status)
    
    response = await client.put(f"/reservations/{reservation.reservation_id}", json=reservation_payload)
    
    assert response.status_code == 400
    assert response.json()["error"] == "NotBooked"


@pytest.mark.asyncio
async def test_update_runs_validation_rules(client: AsyncClient, booked_reservation, reservation_payload):
    reservation_payload["people"] = "3"
    
    response = await client.put(
        f"/reservations/{booked_reservation.reservation_id}",
        json=reservation_payload,
    )
    
    assert response.status_code == 400
    assert response.json()["error"] == "InvalidType"
    assert booked_reservation.people == 4


@pytest.mark.asyncio
async def test_update_missing_reservation(client: AsyncClient, reservation_payload):
    response = await client.put("/reservations/42", json=reservation_payload)
    
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
