import pytest
from bson import ObjectId

from app.core.errors import EmployeeAlreadyExistsError, MalformedIdentifierError
from app.models.company_schema import Company
from app.models.employee_schema import EmployeeCreate, EmployeeUpdate


def _employee(name="Marcus", gender="male", employee_id=None):
    return EmployeeCreate(id=employee_id, name=name, age=22, gender=gender, salary=50)


class TestEmployeeRepository:
    @pytest.mark.asyncio
    async def test_create_generates_id(self, employee_repository):
        created = await employee_repository.create(_employee())

        assert ObjectId.is_valid(created.id)
        assert await employee_repository.find(ObjectId(created.id)) == created

    @pytest.mark.asyncio
    async def test_create_keeps_supplied_id(self, employee_repository):
        employee_id = str(ObjectId())

        created = await employee_repository.create(_employee(employee_id=employee_id))

        assert created.id == employee_id

    @pytest.mark.asyncio
    async def test_create_rejects_duplicate_id(self, employee_repository):
        employee_id = str(ObjectId())
        await employee_repository.create(_employee(employee_id=employee_id))

        with pytest.raises(EmployeeAlreadyExistsError):
            await employee_repository.create(_employee(name="Theo", employee_id=employee_id))

    @pytest.mark.asyncio
    async def test_create_rejects_malformed_id(self, employee_repository):
        with pytest.raises(MalformedIdentifierError):
            await employee_repository.create(_employee(employee_id="123"))

    @pytest.mark.asyncio
    async def test_find_all_keeps_insertion_order(self, employee_repository):
        names = ["Marcus", "Theo", "Linne"]
        for name in names:
            await employee_repository.create(_employee(name=name))

        assert [e.name for e in await employee_repository.find_all()] == names

    @pytest.mark.asyncio
    async def test_find_many_skips_unknown_ids(self, employee_repository):
        created = await employee_repository.create(_employee())

        found = await employee_repository.find_many([ObjectId(created.id), ObjectId()])

        assert found == {created.id: created}

    @pytest.mark.asyncio
    async def test_update_unknown_returns_none(self, employee_repository):
        update = EmployeeUpdate(name="Theo", age=30, gender="male", salary=1)

        assert await employee_repository.update(ObjectId(), update) is None

    @pytest.mark.asyncio
    async def test_delete_all(self, employee_repository):
        for name in ["Marcus", "Theo"]:
            await employee_repository.create(_employee(name=name))

        assert await employee_repository.delete_all() == 2
        assert await employee_repository.find_all() == []

    @pytest.mark.asyncio
    async def test_delete(self, employee_repository):
        created = await employee_repository.create(_employee())

        assert await employee_repository.delete(ObjectId(created.id)) is True
        assert await employee_repository.delete(ObjectId(created.id)) is False
        assert await employee_repository.find(ObjectId(created.id)) is None


class TestCompanyRepository:
    @pytest.mark.asyncio
    async def test_create_and_find(self, company_repository):
        ids = [str(ObjectId()), str(ObjectId())]

        created = await company_repository.create(Company(companyName="OOCL", employeesId=ids))
        found = await company_repository.find(ObjectId(created.companyId))

        assert found.companyName == "OOCL"
        assert found.employeesId == ids

    @pytest.mark.asyncio
    async def test_find_all_with_skip_and_limit(self, company_repository):
        for name in ["Facebook", "Google", "Apple"]:
            await company_repository.create(Company(companyName=name))

        page = await company_repository.find_all(skip=1, limit=1)

        assert [c.companyName for c in page] == ["Google"]
        assert await company_repository.count() == 3

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, company_repository):
        created = await company_repository.create(
            Company(companyName="Facebook", employeesId=[str(ObjectId())])
        )

        updated = await company_repository.update(
            ObjectId(created.companyId), Company(companyName="Meta", employeesId=[])
        )
        stored = await company_repository.find(ObjectId(created.companyId))

        assert updated.companyId == created.companyId
        assert stored.companyName == "Meta"
        assert stored.employeesId == []

    @pytest.mark.asyncio
    async def test_delete_all(self, company_repository):
        await company_repository.create(Company(companyName="Facebook"))
        await company_repository.create(Company(companyName="Google"))

        assert await company_repository.delete_all() == 2
        assert await company_repository.find_all() == []
