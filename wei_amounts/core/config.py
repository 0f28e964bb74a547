import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

_CONFIG_ENV_KEY = "WEI_AMOUNTS_CONFIG_PATH"
_LOG_LEVEL_ENV_KEY = "WEI_AMOUNTS_LOG_LEVEL"
_DEFAULT_CONFIG_FILENAME = "config.json"

DEFAULT_AMOUNT_FIELDS = (
    "value",
    "amount",
    "gas_price",
    "max_fee_per_gas",
    "max_priority_fee_per_gas",
)


def _find_project_root(start: Path) -> Path | None:
    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / "pyproject.toml").exists():
            return parent
    return None


def _project_root() -> Path | None:
    return _find_project_root(Path.cwd()) or _find_project_root(Path(__file__).parent)


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path).expanduser()

    env_path = os.getenv(_CONFIG_ENV_KEY, "").strip()
    if env_path:
        p = Path(env_path).expanduser()
        if p.is_absolute():
            return p
        root = _project_root()
        return (root / p) if root else p

    root = _project_root()
    return (root / _DEFAULT_CONFIG_FILENAME) if root else Path(_DEFAULT_CONFIG_FILENAME)


def load_config_json(
    path: str | Path | None = None, *, require_exists: bool = False
) -> dict[str, Any]:
    cfg_path = resolve_config_path(path)
    if not cfg_path.exists():
        if require_exists:
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
        return {}
    try:
        data = json.loads(cfg_path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning(f"Ignoring unreadable config {cfg_path}: {exc}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {cfg_path}: top level is not an object")
        return {}
    return data


CONFIG: dict[str, Any] = load_config_json()


def set_config(config: dict[str, Any]) -> None:
    """Replace the global CONFIG dict in-place.

    This allows code that imported CONFIG at module import time to see updates.
    """
    CONFIG.clear()
    CONFIG.update(config)


def load_config(
    path: str | Path | None = None, *, require_exists: bool = False
) -> None:
    """Load config from disk into the global CONFIG dict."""
    set_config(load_config_json(path, require_exists=require_exists))


def _section(name: str) -> dict[str, Any]:
    section = CONFIG.get(name)
    return section if isinstance(section, dict) else {}


def get_amount_fields() -> list[str]:
    fields = _section("amounts").get("fields")
    if isinstance(fields, list) and fields:
        return [str(f) for f in fields]
    return list(DEFAULT_AMOUNT_FIELDS)


def get_log_level() -> str:
    level = _section("logging").get("level")
    if level:
        return str(level).strip().upper()
    return os.environ.get(_LOG_LEVEL_ENV_KEY, "INFO").strip().upper()
