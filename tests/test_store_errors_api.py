import pytest
from bson import ObjectId

from clinic_api.exceptions import StoreError
from clinic_api.persistence.store import DocumentStore


class FailingRepo:
    async def create(self, data):
        raise StoreError("Database error while trying to create document")

    async def list_all(self):
        raise StoreError("Database error while trying to list documents")

    async def get(self, resource_id):
        raise StoreError("Database error while trying to read document")

    async def update(self, resource_id, changes):
        raise StoreError("Database error while trying to update document")

    async def delete(self, resource_id):
        raise StoreError("Database error while trying to delete document")


BODIES = {
    "appointments": {"patientName": "A", "doctorName": "B", "date": "2024-01-01"},
    "doctors": {"name": "House", "specialization": "Diagnostics", "phone": "555"},
    "patients": {"name": "Ann", "age": 30, "gender": "Female"},
}


@pytest.fixture
def failing_client(client):
    client.app.state.store = DocumentStore(
        appointments=FailingRepo(),
        doctors=FailingRepo(),
        patients=FailingRepo(),
        backend="mongo",
    )
    return client


@pytest.mark.parametrize("resource", sorted(BODIES))
def test_store_failure_status_per_operation(failing_client, resource):
    rid = str(ObjectId())
    calls = [
        (failing_client.post(f"/api/{resource}", json=BODIES[resource]), 400),
        (failing_client.put(f"/api/{resource}/{rid}", json={}), 400),
        (failing_client.get(f"/api/{resource}"), 500),
        (failing_client.delete(f"/api/{resource}/{rid}"), 500),
    ]
    for res, status in calls:
        assert res.status_code == status
        body = res.json()
        assert body["success"] is False
        assert body["data"] is None
        assert body["error"]


def test_error_envelope_documented_in_openapi(client):
    spec = client.get("/openapi.json").json()
    assert "ErrorResponse" in spec["components"]["schemas"]
    responses = spec["paths"]["/api/patients"]["post"]["responses"]
    assert responses["400"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
