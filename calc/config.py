from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .calculator import Calculator
from .errors import ConfigError, HolderResolveError
from .holder import DataHolder, HolderFactory
from .logs import LOG_LEVELS

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")
_CFG_FILE = "calc.yaml"

_KNOWN_KEYS = {"holder", "log_level"}


@dataclass(frozen=True)
class CalcConfig:
    holder: Optional[str] = None   # "package.module:attr"; None -> DataHolder
    log_level: Optional[str] = None  # None -> not set in calc.yaml


def cfg_path(root: Path) -> Path:
    return (root / _CFG_FILE).resolve()


def load_config(root: Path) -> CalcConfig:
    """
    Read calc.yaml from the given root.

    A missing file yields the defaults.

    Raises:
        ConfigError: malformed YAML, non-mapping document, unknown keys
                     or values of the wrong type.
    """
    p = cfg_path(root)
    if not p.is_file():
        return CalcConfig()
    try:
        raw = _yaml.load(p.read_text(encoding="utf-8"))
    except YAMLError as e:
        raise ConfigError(f"{p}: invalid YAML: {e}") from e
    if raw is None:
        return CalcConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"{p}: must be a mapping with keys: holder?, log_level?")

    unknown = sorted(set(map(str, raw)) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{p}: unknown keys: {', '.join(unknown)}")

    holder = raw.get("holder")
    if holder is not None and (not isinstance(holder, str) or not holder.strip()):
        raise ConfigError(f"{p}: holder: expected non-empty string, got {holder!r}")

    level = raw.get("log_level")
    if level is not None and (not isinstance(level, str) or level.upper() not in LOG_LEVELS):
        raise ConfigError(f"{p}: log_level: expected one of {', '.join(LOG_LEVELS)}, got {level!r}")

    return CalcConfig(holder=holder.strip() if holder else None, log_level=level.upper() if level else None)


def resolve_holder_factory(ref: Optional[str]) -> HolderFactory:
    """
    Turn a 'module:attr' reference into a collaborator factory.

    The attribute may be dotted ("pkg.mod:Outer.make"). None means the
    built-in DataHolder.
    """
    if ref is None:
        return DataHolder

    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise HolderResolveError(f"Invalid holder reference '{ref}'. Expected 'module:attr'")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise HolderResolveError(f"Cannot import holder module '{module_name}': {e}") from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise HolderResolveError(f"Holder '{ref}': '{part}' not found") from e

    if not callable(target):
        raise HolderResolveError(f"Holder '{ref}' is not callable")

    logger.info("Resolved holder factory %s", ref)
    return target


def make_calculator(root: Path, cfg: Optional[CalcConfig] = None) -> Calculator:
    cfg = cfg or load_config(root)
    return Calculator(holder_factory=resolve_holder_factory(cfg.holder))


__all__ = [
    "CalcConfig",
    "cfg_path",
    "load_config",
    "resolve_holder_factory",
    "make_calculator",
]
