import json
import logging

import pytest

from itemchain.core.exceptions import (
    AlreadyExistsError, DecodeError, InvalidValueError, MotiveRejectedError, NotFoundError
)
from itemchain.domains.catalog.services import CatalogService
from itemchain.domains.ledger import codec
from itemchain.domains.ledger.entities import Asset
from itemchain.domains.ledger.services import LedgerService


async def _create_asset(ledger: LedgerService, asset_id: str = "A1", owner: str = "alice") -> Asset:
    return await ledger.create_asset(asset_id, "book", "Dune", "1965-08-01", 20, owner)


def test_asset_wire_shape_and_decode() -> None:
    asset = Asset("A1", "book", "Dune", "1965-08-01", 20, "alice")
    data = codec.encode(asset)

    assert json.loads(data) == {
        "ID": "A1",
        "tipo": "book",
        "title": "Dune",
        "date": "1965-08-01",
        "price": 20,
        "owner": "alice",
        "validate": True,
    }
    assert codec.decode(data) == asset


def test_asset_decode_rejects_catalog_record() -> None:
    data = b'{"ID":"O1","tipo":"book","title":"Dune","creationdate":"d","price":1,"original":true}'

    with pytest.raises(DecodeError):
        codec.decode(data, key="O1")


async def test_create_and_read_asset(ledger: LedgerService) -> None:
    asset = await _create_asset(ledger)

    assert asset.validated
    assert await ledger.read_asset("A1") == asset


async def test_create_asset_twice_fails(ledger: LedgerService) -> None:
    await _create_asset(ledger)

    with pytest.raises(AlreadyExistsError):
        await _create_asset(ledger, owner="bob")

    assert (await ledger.read_asset("A1")).owner == "alice"


async def test_change_owner_in_place(ledger: LedgerService) -> None:
    await _create_asset(ledger)

    asset = await ledger.change_owner("A1", "bob")

    assert asset.owner == "bob"
    assert (await ledger.read_asset("A1")).owner == "bob"


async def test_change_price(ledger: LedgerService) -> None:
    await _create_asset(ledger)

    assert (await ledger.change_price("A1", 35)).price == 35
    with pytest.raises(InvalidValueError):
        await ledger.change_price("A1", -1)
    assert (await ledger.read_asset("A1")).price == 35


async def test_missing_asset(ledger: LedgerService) -> None:
    with pytest.raises(NotFoundError):
        await ledger.read_asset("A404")
    with pytest.raises(NotFoundError):
        await ledger.change_owner("A404", "bob")


async def test_void_is_a_soft_delete(ledger: LedgerService, store) -> None:
    await _create_asset(ledger)

    voided = await ledger.void_asset("A1", 0)

    assert not voided.validated
    assert await store.get("A1") is not None
    with pytest.raises(NotFoundError):
        await ledger.read_asset("A1")
    assert (await ledger.read_asset("A1", include_voided=True)).is_voided


async def test_voided_asset_cannot_be_mutated(ledger: LedgerService) -> None:
    await _create_asset(ledger)
    await ledger.void_asset("A1", 1)

    with pytest.raises(NotFoundError):
        await ledger.change_owner("A1", "bob")
    with pytest.raises(NotFoundError):
        await ledger.void_asset("A1", 0)
    with pytest.raises(AlreadyExistsError):
        await _create_asset(ledger)


async def test_void_with_other_motive_is_rejected(ledger: LedgerService) -> None:
    await _create_asset(ledger)

    with pytest.raises(MotiveRejectedError):
        await ledger.void_asset("A1", 2)

    assert (await ledger.read_asset("A1")).validated


async def test_list_assets_hides_voided(ledger: LedgerService) -> None:
    await _create_asset(ledger, "A1")
    await _create_asset(ledger, "A2", owner="bob")
    await ledger.void_asset("A2", 0)

    assert [a.id for a in await ledger.list_assets()] == ["A1"]
    assert sorted(a.id for a in await ledger.list_assets(include_voided=True)) == ["A1", "A2"]


async def test_catalog_records_abort_ledger_listing(
    ledger: LedgerService, catalog: CatalogService
) -> None:
    await catalog.create_item("O1", "book", "Dune", "1965-08-01", 20)

    with pytest.raises(DecodeError):
        await ledger.list_assets()


async def test_rejected_asset_operations_are_logged(ledger: LedgerService, caplog) -> None:
    caplog.set_level(logging.WARNING)
    await _create_asset(ledger, "A1")
    await ledger.void_asset("A1", 0)

    with pytest.raises(NotFoundError):
        await ledger.read_asset("A1")
    with pytest.raises(NotFoundError):
        await ledger.read_asset("A404")
    with pytest.raises(InvalidValueError):
        await ledger.change_price("A1", -5)

    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len(messages) == 3
    assert any("A1" in m and "voided" in m for m in messages)
    assert any("A404" in m for m in messages)
