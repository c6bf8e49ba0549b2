import pytest
from fastapi.testclient import TestClient

from dispatch import CarTimings
from server.app import DispatchManager, create_app


@pytest.fixture
def client() -> TestClient:
    manager = DispatchManager(timings=CarTimings(travel_seconds=1, door_dwell_seconds=1))
    return TestClient(create_app(manager))


def test_state(client):
    response = client.get("/state")
    assert response.status_code == 200
    cars = response.json()["cars"]
    assert cars["passenger"]["floor"] == 1
    assert cars["service"]["motion_state"] == "idle"


def test_passenger_round_trip(client):
    assert client.post("/passenger/up", json={"origin_floor": 1, "destination_floor": 5}).status_code == 200
    assert client.post("/passenger/down", json={"origin_floor": 4, "destination_floor": 2}).status_code == 200
    response = client.post("/passenger/up", json={"origin_floor": 3, "destination_floor": 6})
    assert response.json()["cars"]["passenger"]["pending"] == 6

    body = client.post("/passenger/run").json()
    assert body["visited"] == [3, 5, 6, 4, 2]
    assert body["cars"]["passenger"]["floor"] == 2
    assert body["events"][-1]["event"] == "idle"
    names = [event["event"] for event in body["events"]]
    assert names.count("reverse") == 1
    assert names.count("dwell") == 5


def test_service_run(client):
    client.post("/service", json={"destination_floor": 13})
    client.post("/service", json={"origin_floor": 13, "destination_floor": 2})
    body = client.post("/service/run").json()
    assert body["visited"] == [13, 2]


def test_invalid_request_is_rejected(client):
    response = client.post("/passenger/up", json={"origin_floor": 3, "destination_floor": 3})
    assert response.status_code == 400


def test_emergency(client):
    client.post("/passenger/up", json={"destination_floor": 8})
    body = client.post("/emergency").json()
    assert [(e["car"], e["event"]) for e in body["events"]] == [
        ("passenger", "door_open"),
        ("passenger", "emergency"),
        ("service", "door_open"),
        ("service", "emergency"),
    ]
    for car in body["cars"].values():
        assert car["floor"] == 1
        assert car["door_state"] == "open"
        assert car["emergency_active"] is True
        assert car["pending"] == 0


def test_stream_sends_state_on_connect(client):
    with client.websocket_connect("/ws/stream") as websocket:
        assert "cars" in websocket.receive_json()
