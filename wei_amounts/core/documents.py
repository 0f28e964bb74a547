from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from wei_amounts.core.codec import format_amount, parse_amount
from wei_amounts.core.config import get_amount_fields
from wei_amounts.core.errors import WeiAmountError

_YAML_SUFFIXES = (".yaml", ".yml")


def load_document(path: str | Path) -> Any:
    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in _YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def normalize_amounts(data: Any, fields: Iterable[str], *, _path: str = "") -> Any:
    """Return a copy of ``data`` with every amount field in canonical wei form.

    A field is any mapping key listed in ``fields`` whose value is a scalar;
    nested mappings and lists are walked. Failures propagate with a note
    naming the dotted path of the offending field.
    """
    names = fields if isinstance(fields, (set, frozenset)) else frozenset(fields)
    if isinstance(data, dict):
        out: dict[Any, Any] = {}
        for key, value in data.items():
            path = f"{_path}.{key}" if _path else str(key)
            if key in names and not isinstance(value, (dict, list)):
                out[key] = _canonical(value, path)
            else:
                out[key] = normalize_amounts(value, names, _path=path)
        return out
    if isinstance(data, list):
        return [
            normalize_amounts(item, names, _path=f"{_path}[{i}]")
            for i, item in enumerate(data)
        ]
    return data


def _canonical(value: Any, path: str) -> str:
    try:
        wei = parse_amount(value)
    except WeiAmountError as exc:
        logger.warning(f"Invalid amount at {path}: {exc}")
        exc.add_note(f"at {path}")
        raise
    canonical = format_amount(wei)
    logger.debug(f"{path}: {value!r} -> {canonical}")
    return canonical


def normalize_document(
    path: str | Path, fields: Iterable[str] | None = None
) -> Any:
    data = load_document(path)
    return normalize_amounts(data, get_amount_fields() if fields is None else fields)
