"""Unit tests for RentManager construction and pre-I/O validation."""

from datetime import date

import pytest

from carrental.application.interfaces import CarLookup, CustomerLookup
from carrental.application.services import RentManager
from carrental.domain.entities import Car, Customer, Rent
from carrental.domain.exceptions import (
    ConfigurationError,
    ErrorKind,
    InvalidArgumentError,
    InvalidEntityError,
)


class FakeCarLookup(CarLookup):
    async def get_car(self, car_id: int) -> Car:
        return Car("Skoda", f"BA{car_id:03d}AA", id=car_id)


class FakeCustomerLookup(CustomerLookup):
    async def get_customer(self, customer_id: int) -> Customer:
        return Customer("Jan", "Novak", "+421900000000", id=customer_id)


def _no_io_session_factory():
    raise AssertionError("store must not be touched")


def _unused_repository_factory(session):
    raise AssertionError("repository must not be built")


@pytest.fixture
def manager() -> RentManager:
    return RentManager(
        _no_io_session_factory,
        _unused_repository_factory,
        car_lookup=FakeCarLookup(),
        customer_lookup=FakeCustomerLookup(),
    )


def _valid_rent(**overrides) -> Rent:
    fields = dict(
        customer=Customer("Jan", "Novak", "+421900000000", id=1),
        car=Car("Skoda", "BA001AA", id=1),
        price_per_day=250,
        beginning_date=date(2016, 3, 9),
        expected_return_date=date(2016, 3, 19),
    )
    fields.update(overrides)
    return Rent(**fields)


def test_missing_car_lookup_fails_at_construction():
    with pytest.raises(ConfigurationError) as exc_info:
        RentManager(
            _no_io_session_factory,
            _unused_repository_factory,
            car_lookup=None,
            customer_lookup=FakeCustomerLookup(),
        )
    assert exc_info.value.kind is ErrorKind.CONFIGURATION
    assert "car_lookup" in str(exc_info.value)


def test_missing_customer_lookup_fails_at_construction():
    with pytest.raises(ConfigurationError, match="customer_lookup"):
        RentManager(
            _no_io_session_factory,
            _unused_repository_factory,
            car_lookup=FakeCarLookup(),
            customer_lookup=None,
        )


@pytest.mark.asyncio
async def test_create_none_is_caller_error(manager):
    with pytest.raises(InvalidArgumentError):
        await manager.create_rent(None)


@pytest.mark.asyncio
async def test_create_with_id_set_is_caller_error(manager):
    with pytest.raises(InvalidArgumentError):
        await manager.create_rent(_valid_rent(id=4))


@pytest.mark.asyncio
async def test_update_without_id_is_caller_error(manager):
    with pytest.raises(InvalidArgumentError):
        await manager.update_rent(_valid_rent())


@pytest.mark.asyncio
async def test_delete_without_id_is_caller_error(manager):
    with pytest.raises(InvalidArgumentError):
        await manager.delete_rent(_valid_rent())
    with pytest.raises(InvalidArgumentError):
        await manager.delete_rent(None)


@pytest.mark.asyncio
async def test_get_with_none_id_is_caller_error(manager):
    with pytest.raises(InvalidArgumentError):
        await manager.get_rent(None)


@pytest.mark.asyncio
async def test_find_for_unsaved_entities_is_caller_error(manager):
    with pytest.raises(InvalidArgumentError):
        await manager.find_rents_for_car(Car("Skoda", "BA001AA"))
    with pytest.raises(InvalidArgumentError):
        await manager.find_rents_for_customer(Customer("Jan", "Novak", "+421900000000"))
    with pytest.raises(InvalidArgumentError):
        await manager.find_rents_for_car(None)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"customer": None},
        {"customer": Customer("Jan", "Novak", "+421900000000")},
        {"car": None},
        {"car": Car("Skoda", "BA001AA")},
        {"price_per_day": 0},
        {"price_per_day": -10},
        {"beginning_date": None},
        {"expected_return_date": date(2016, 3, 8)},
        {"real_return_date": date(2016, 3, 8)},
    ],
    ids=[
        "no-customer",
        "unsaved-customer",
        "no-car",
        "unsaved-car",
        "zero-price",
        "negative-price",
        "no-beginning",
        "expected-before-beginning",
        "returned-before-beginning",
    ],
)
async def test_invalid_fields_rejected_before_any_io(manager, overrides):
    with pytest.raises(InvalidEntityError) as exc_info:
        await manager.create_rent(_valid_rent(**overrides))
    assert exc_info.value.kind is ErrorKind.INVALID_ENTITY

    with pytest.raises(InvalidEntityError):
        await manager.update_rent(_valid_rent(id=1, **overrides))
