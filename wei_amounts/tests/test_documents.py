from __future__ import annotations

import json
from pathlib import Path

import pytest

import wei_amounts.core.config as config
from wei_amounts.core.documents import (
    load_document,
    normalize_amounts,
    normalize_document,
)
from wei_amounts.core.errors import InvalidMagnitude, UnknownUnit

_YAML_DOC = """\
tx:
  value: 1.5 ether
  gas_price: 30gwei
  nonce: 7
transfers:
  - amount: 1_000
    memo: first
  - amount: "2 gwei"
"""


def _write(tmp_path: Path, name: str, text: str) -> Path:
    p = tmp_path / name
    p.write_text(text)
    return p


def test_load_document_reads_yaml_and_json(tmp_path: Path) -> None:
    yaml_path = _write(tmp_path, "doc.yaml", "a: 1\n")
    json_path = _write(tmp_path, "doc.json", '{"a": 1}')
    assert load_document(yaml_path) == {"a": 1}
    assert load_document(json_path) == {"a": 1}


def test_normalize_amounts_walks_nested_structures() -> None:
    data = {"outer": [{"amount": "1 gwei", "other": "1 gwei"}], "amount": 5}
    out = normalize_amounts(data, ["amount"])
    assert out == {
        "outer": [{"amount": "1000000000", "other": "1 gwei"}],
        "amount": "5",
    }
    # input is left untouched
    assert data["outer"][0]["amount"] == "1 gwei"


def test_normalize_document_uses_configured_fields(
    tmp_path: Path, restore_global_config: None
) -> None:
    path = _write(tmp_path, "tx.yml", _YAML_DOC)
    config.set_config({})

    out = normalize_document(path)
    assert out["tx"] == {
        "value": "1500000000000000000",
        "gas_price": "30000000000",
        "nonce": 7,
    }
    assert out["transfers"] == [
        {"amount": "1000", "memo": "first"},
        {"amount": "2000000000"},
    ]

    config.set_config({"amounts": {"fields": ["nonce"]}})
    out = normalize_document(path)
    assert out["tx"]["nonce"] == "7"
    assert out["tx"]["value"] == "1.5 ether"


def test_normalize_document_explicit_fields(tmp_path: Path) -> None:
    path = _write(tmp_path, "tx.json", json.dumps({"fee": "3 gwei", "value": "x"}))
    assert normalize_document(path, ["fee"]) == {"fee": "3000000000", "value": "x"}


def test_normalize_failure_names_field_path() -> None:
    data = {"transfers": [{"amount": "1"}, {"amount": "1.5 wei"}]}
    with pytest.raises(InvalidMagnitude) as exc_info:
        normalize_amounts(data, ["amount"])
    assert "at transfers[1].amount" in exc_info.value.__notes__

    with pytest.raises(UnknownUnit):
        normalize_amounts({"amount": "1 finney"}, ["amount"])
