import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from clinic_api.db.models import Appointment, Patient
from clinic_api.exceptions import StoreError
from clinic_api.infrastructure.persistence.mongo.repositories.beanie_repository import BeanieRepository


class FakeQuery:
    def __init__(self, owner):
        self.owner = owner

    async def to_list(self):
        if self.owner.error:
            raise self.owner.error
        return []

    async def delete(self):
        if self.owner.error:
            raise self.owner.error
        return type("R", (), {"deleted_count": self.owner.deleted})()

    async def update(self, expression, response_type=None):
        if self.owner.error:
            raise self.owner.error
        self.owner.updates.append(expression)
        return self.owner.stored


class FakeDocument:
    model_fields = {"id": None, "revision_id": None, "name": None}

    class Settings:
        name = "fakes"

    error = None
    deleted = 0
    stored = None

    def __init__(self, **data):
        self.id = ObjectId()
        self.data = data

    def model_dump(self, include=None):
        return {k: v for k, v in self.data.items() if include is None or k in include}

    async def insert(self):
        if self.error:
            raise self.error

    @classmethod
    def find_all(cls):
        return FakeQuery(cls)

    @classmethod
    def find_one(cls, query):
        return FakeQuery(cls)

    @classmethod
    async def get(cls, oid):
        if cls.error:
            raise cls.error
        return cls.stored


def make_fake(**attrs):
    attrs.setdefault("updates", [])
    return type("Fake", (FakeDocument,), attrs)


def test_fields_exclude_bookkeeping():
    assert set(BeanieRepository(Appointment).fields) == {"patientName", "doctorName", "date"}
    assert BeanieRepository(Patient).collection_name == "patients"


@pytest.mark.asyncio
async def test_malformed_id_is_absent_without_store_access():
    repo = BeanieRepository(make_fake(error=ServerSelectionTimeoutError("down")))
    assert await repo.get("not-an-id") is None
    assert await repo.update("not-an-id", {"name": "x"}) is None
    assert await repo.delete("not-an-id") is False


@pytest.mark.asyncio
async def test_store_failure_becomes_store_error():
    repo = BeanieRepository(make_fake(error=ServerSelectionTimeoutError("down")))
    with pytest.raises(StoreError) as exc:
        await repo.list_all()
    assert exc.value.status_code == 500
    with pytest.raises(StoreError):
        await repo.create({"name": "x"})
    with pytest.raises(StoreError):
        await repo.update(str(ObjectId()), {"name": "x"})
    with pytest.raises(StoreError):
        await repo.delete(str(ObjectId()))


@pytest.mark.asyncio
async def test_uninitialized_collection_becomes_store_error():
    # init_beanie never ran, as when MongoDB is unreachable at startup
    repo = BeanieRepository(Appointment)
    with pytest.raises(StoreError):
        await repo.create({"patientName": "A", "doctorName": "B", "date": "2024-01-01"})
    with pytest.raises(StoreError):
        await repo.list_all()


@pytest.mark.asyncio
async def test_create_returns_record_with_id():
    repo = BeanieRepository(make_fake())
    out = await repo.create({"name": "House"})
    assert ObjectId.is_valid(out["id"])
    assert out["name"] == "House"


@pytest.mark.asyncio
async def test_update_issues_one_set():
    stored = FakeDocument(name="Wilson")
    fake = make_fake(stored=stored)
    out = await BeanieRepository(fake).update(str(stored.id), {"name": "Wilson"})
    assert fake.updates == [{"$set": {"name": "Wilson"}}]
    assert out == {"id": str(stored.id), "name": "Wilson"}


@pytest.mark.asyncio
async def test_update_of_vanished_document_is_absent():
    fake = make_fake(stored=None)
    assert await BeanieRepository(fake).update(str(ObjectId()), {"name": "x"}) is None
    assert fake.updates == [{"$set": {"name": "x"}}]


@pytest.mark.asyncio
async def test_empty_update_reads_current_document():
    stored = FakeDocument(name="Cuddy")
    fake = make_fake(stored=stored)
    out = await BeanieRepository(fake).update(str(stored.id), {})
    assert out["name"] == "Cuddy"
    assert fake.updates == []


@pytest.mark.asyncio
async def test_delete_reports_whether_a_document_went_away():
    assert await BeanieRepository(make_fake(deleted=1)).delete(str(ObjectId())) is True
    assert await BeanieRepository(make_fake()).delete(str(ObjectId())) is False
    assert await BeanieRepository(make_fake()).get(str(ObjectId())) is None
