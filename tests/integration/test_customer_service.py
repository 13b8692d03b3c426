"""Integration tests for CustomerService against SQLite."""

import pytest

from carrental.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    InvalidEntityError,
)
from tests.integration.builders import make_customer


@pytest.mark.asyncio
async def test_create_and_get_customer(services):
    customer = await services.customers.create_customer(make_customer())
    assert customer.id is not None
    assert await services.customers.get_customer(customer.id) == customer


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name, surname, phone_number",
    [("", "Kurcik", "123"), ("Lukas", "", "123"), ("Lukas", "Kurcik", ""), (None, "Kurcik", "123")],
)
async def test_create_customer_rejects_empty_fields(services, name, surname, phone_number):
    with pytest.raises(InvalidEntityError):
        await services.customers.create_customer(make_customer(name, surname, phone_number))


@pytest.mark.asyncio
async def test_customers_need_not_be_unique(services):
    await services.customers.create_customer(make_customer())
    await services.customers.create_customer(make_customer())
    assert len(await services.customers.find_all_customers()) == 2


@pytest.mark.asyncio
async def test_create_customer_with_id_is_caller_error(services):
    customer = make_customer()
    customer.id = 3
    with pytest.raises(InvalidArgumentError):
        await services.customers.create_customer(customer)


@pytest.mark.asyncio
async def test_update_customer(services):
    customer = await services.customers.create_customer(make_customer())
    customer.phone_number = "+420777000111"
    await services.customers.update_customer(customer)
    assert (await services.customers.get_customer(customer.id)).phone_number == "+420777000111"

    ghost = make_customer()
    ghost.id = 999
    with pytest.raises(EntityNotFoundError):
        await services.customers.update_customer(ghost)


@pytest.mark.asyncio
async def test_delete_customer(services):
    customer = await services.customers.create_customer(make_customer())
    await services.customers.delete_customer(customer)

    with pytest.raises(EntityNotFoundError):
        await services.customers.get_customer(customer.id)
    with pytest.raises(EntityNotFoundError):
        await services.customers.delete_customer(customer)


@pytest.mark.asyncio
async def test_find_customers_by_name_and_surname(services):
    lukas = await services.customers.create_customer(make_customer("Lukas", "Kurcik"))
    simon = await services.customers.create_customer(make_customer("Simon", "Balaz"))
    other_lukas = await services.customers.create_customer(make_customer("Lukas", "Balaz"))

    assert await services.customers.find_customers_by_name("Lukas") == [lukas, other_lukas]
    assert await services.customers.find_customers_by_surname("Balaz") == [simon, other_lukas]
    with pytest.raises(InvalidArgumentError):
        await services.customers.find_customers_by_surname(None)
