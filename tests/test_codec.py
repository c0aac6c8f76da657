import json

import pytest

from itemchain.core.exceptions import DecodeError
from itemchain.domains.catalog import codec
from itemchain.domains.catalog.entities import Item, ItemCopy


ITEM = Item(id="ART-1", category="painting", title="Sunrise", creation_date="2023-05-01", price=100)
COPY = ItemCopy(copy_id="CP-1", original_id="ART-1", owner="bob", purchase_date="2024-01-01", rating=4)


@pytest.mark.parametrize("record", [ITEM, COPY])
def test_decode_restores_encoded_record(record) -> None:
    assert codec.decode(codec.encode(record)) == record


def test_item_wire_shape() -> None:
    payload = json.loads(codec.encode(ITEM))

    assert payload == {
        "ID": "ART-1",
        "tipo": "painting",
        "title": "Sunrise",
        "creationdate": "2023-05-01",
        "price": 100,
        "original": True,
    }


def test_copy_wire_shape() -> None:
    payload = json.loads(codec.encode(COPY))

    assert payload == {
        "IDcopy": "CP-1",
        "Item": "ART-1",
        "owner": "bob",
        "purchasedate": "2024-01-01",
        "puntuation": 4,
        "original": False,
    }


def test_decode_accepts_foreign_field_order() -> None:
    data = b'{"original":false,"puntuation":0,"purchasedate":"d","owner":"o","Item":"ART-1","IDcopy":"CP-9"}'

    assert codec.decode(data) == ItemCopy(
        copy_id="CP-9", original_id="ART-1", owner="o", purchase_date="d", rating=0
    )


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"not json",
        b"\xc3\x28",
        b"[1, 2, 3]",
        b'"ART-1"',
    ],
)
def test_decode_rejects_non_object_payloads(data: bytes) -> None:
    with pytest.raises(DecodeError):
        codec.decode(data)


def test_decode_requires_boolean_discriminant() -> None:
    payload = json.loads(codec.encode(ITEM))

    del payload["original"]
    with pytest.raises(DecodeError, match="original"):
        codec.decode(json.dumps(payload).encode())

    payload["original"] = "true"
    with pytest.raises(DecodeError, match="original"):
        codec.decode(json.dumps(payload).encode())


def test_decode_does_not_guess_kind_from_fields() -> None:
    # Поля копии с дискриминантом оригинала - ошибка, а не копия
    payload = json.loads(codec.encode(COPY))
    payload["original"] = True

    with pytest.raises(DecodeError):
        codec.decode(json.dumps(payload).encode())


@pytest.mark.parametrize(
    "field, value",
    [
        ("price", "100"),
        ("price", True),
        ("price", 1.5),
        ("title", 7),
    ],
)
def test_decode_is_strict_about_field_types(field: str, value) -> None:
    payload = json.loads(codec.encode(ITEM))
    payload[field] = value

    with pytest.raises(DecodeError):
        codec.decode(json.dumps(payload).encode())


def test_decode_rejects_missing_and_unknown_fields() -> None:
    payload = json.loads(codec.encode(COPY))
    del payload["owner"]
    with pytest.raises(DecodeError):
        codec.decode(json.dumps(payload).encode())

    payload = json.loads(codec.encode(COPY))
    payload["validate"] = True
    with pytest.raises(DecodeError):
        codec.decode(json.dumps(payload).encode())


def test_decode_error_carries_key() -> None:
    with pytest.raises(DecodeError) as exc_info:
        codec.decode(b"{}", key="ART-1")

    assert exc_info.value.key == "ART-1"
    assert "ART-1" in str(exc_info.value)


def test_encode_rejects_unknown_types() -> None:
    with pytest.raises(TypeError):
        codec.encode({"ID": "ART-1"})
