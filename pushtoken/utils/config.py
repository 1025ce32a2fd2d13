"""Supplier configuration loading from files and the environment."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pushtoken.errors import ConfigurationError
from pushtoken.models.config import SupplierConfig

CONFIG_SECTION = "pushtoken"
ENV_PREFIX = "PUSHTOKEN_"
_ENV_FIELDS = ("issuer", "key_id", "signature_format", "deterministic")
_TRUTHY = {"1", "true", "yes", "on"}


def _validate(payload: Mapping[str, Any], source: str) -> SupplierConfig:
    try:
        return SupplierConfig.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid supplier configuration in {source}: {exc}") from exc


def load_config_payload(path: Path) -> dict[str, Any]:
    """Load a JSON or YAML configuration mapping."""
    suffix = path.suffix.lower()
    try:
        with open(path, encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) if suffix in {".yaml", ".yml"} else json.load(handle)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read supplier configuration at {path}: {exc}") from exc
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Malformed supplier configuration at {path}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Supplier configuration at {path} must be a mapping/object")
    return payload


def load_supplier_config(path: str | Path) -> SupplierConfig:
    """Load a ``SupplierConfig`` from a JSON or YAML file.

    The settings may sit at the top level or under a ``pushtoken`` key.
    """
    resolved = Path(path)
    payload = load_config_payload(resolved)
    section = payload.get(CONFIG_SECTION, payload)
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{CONFIG_SECTION}' section in {resolved} must be a mapping")
    return _validate(section, str(resolved))


def supplier_config_from_env(environ: Mapping[str, str] | None = None) -> SupplierConfig:
    """Build a ``SupplierConfig`` from ``PUSHTOKEN_*`` environment variables."""
    env = os.environ if environ is None else environ
    payload: dict[str, Any] = {}
    for field in _ENV_FIELDS:
        raw = env.get(f"{ENV_PREFIX}{field.upper()}")
        if raw is None:
            continue
        if field == "deterministic":
            payload[field] = raw.strip().lower() in _TRUTHY
        elif field == "signature_format":
            payload[field] = raw.strip().lower()
        else:
            payload[field] = raw.strip()
    return _validate(payload, "environment")
