"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to deploy, crontab and role settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- Crontab flags left empty are derived from identifier/environment after load
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional
import dataclasses
import json
import logging
import os

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeploySettings:
    """Release bookkeeping of the application being deployed."""
    application: str = "app"
    deploy_to: str = ""
    release_host: str = ""
    current_release: str = ""
    previous_release: str = ""


@dataclass(frozen=True)
class CrontabSettings:
    """How the crontab command is invoked on the target hosts."""
    roles: tuple[str, ...] = ("db",)
    command: str = "whenever"
    identifier: str = ""
    environment: str = "production"
    variables: str = ""
    update_flags: str = ""
    clear_flags: str = ""
    path: str = ""


@dataclass(frozen=True)
class CronfleetConfig:
    """Root configuration for the cronfleet application."""
    deploy: DeploySettings = field(default_factory=DeploySettings)
    crontab: CrontabSettings = field(default_factory=CrontabSettings)
    roles: dict[str, tuple[str, ...]] = field(default_factory=dict)
    log_level: str = "WARNING"


def _env_override(data: dict, prefix: str = "CRONFLEET") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern CRONFLEET_SECTION_KEY.
    For example: CRONFLEET_CRONTAB_ROLES=app,db, CRONFLEET_DEPLOY_APPLICATION=shop
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        parts = key[len(prefix) + 1:].lower().split("_", 1)
        if len(parts) == 2 and parts[0] in ("deploy", "crontab"):
            section, field_name = parts
            if not isinstance(data.get(section), dict):
                data[section] = {}
            data[section][field_name] = value
        else:
            data["_".join(parts)] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            return json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}


def _split_csv(value) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(v.strip() for v in value.split(",") if v.strip())
    return tuple(value)


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}

    for f in dataclasses.fields(cls):
        if f.name not in filtered:
            continue
        if f.type == "tuple[str, ...]":
            filtered[f.name] = _split_csv(filtered[f.name])
        elif isinstance(filtered[f.name], str):
            if f.type == "int":
                filtered[f.name] = int(filtered[f.name])
            elif f.type == "bool":
                filtered[f.name] = filtered[f.name].lower() in ("true", "1", "yes")

    return cls(**filtered)


def _build_role_map(data) -> dict[str, tuple[str, ...]]:
    """Role map in the form {"app": ["web1", "deploy@web2:2222"], ...}."""
    if not isinstance(data, dict):
        logger.warning("Ignoring roles section: expected an object, got %r", data)
        return {}
    return {str(role): _split_csv(hosts) for role, hosts in data.items()}


def _derive_crontab(crontab: CrontabSettings, deploy: DeploySettings) -> CrontabSettings:
    identifier = crontab.identifier or deploy.application
    variables = crontab.variables or f"environment={crontab.environment}"
    return replace(
        crontab,
        identifier=identifier,
        variables=variables,
        update_flags=crontab.update_flags
        or f"--update-crontab {identifier} --set {variables}",
        clear_flags=crontab.clear_flags or f"--clear-crontab {identifier}",
    )


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "CRONFLEET",
) -> CronfleetConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (CRONFLEET_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to cronfleet.json in CWD.
        env_prefix: Environment variable prefix. Defaults to CRONFLEET.
    """
    config_path = Path(path) if path else Path("cronfleet.json")
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    deploy = _build_sub_config(DeploySettings, data.get("deploy", {}))
    crontab = _build_sub_config(CrontabSettings, data.get("crontab", {}))

    return CronfleetConfig(
        deploy=deploy,
        crontab=_derive_crontab(crontab, deploy),
        roles=_build_role_map(data.get("roles", {})),
        log_level=data.get("log_level", "WARNING"),
    )
