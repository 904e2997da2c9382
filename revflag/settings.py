"""Parsing and saving of the ``key = value`` settings file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum

from .util import is_numerical, location, log_error, log_success, read_file

_INT64_MAX = (1 << 63) - 1


class ValueType(IntEnum):
    """Kind of value a settings key holds."""

    UNKNOWN = 0
    INTEGER = 1
    STRING = 2


@dataclass(frozen=True)
class ConfigValue:
    """A typed settings value."""

    type: ValueType = ValueType.UNKNOWN
    value: int | str = 0

    def __str__(self) -> str:
        if self.type is ValueType.UNKNOWN:
            return "UNKNOWN"
        return str(self.value)


@dataclass
class ParsedConfig:
    """Result of parsing a settings file."""

    damaged: bool = False
    errors: list[str] = field(default_factory=list)
    values: dict[str, ConfigValue] = field(default_factory=dict)


EXPECTED_ARGS: dict[str, ValueType] = {
    "w": ValueType.INTEGER,
    "h": ValueType.INTEGER,
    "bpp": ValueType.INTEGER,
    "save": ValueType.INTEGER,
    "save_path": ValueType.STRING,
}

DEFAULTS: dict[str, ConfigValue] = {
    "w": ConfigValue(ValueType.INTEGER, 300),
    "h": ConfigValue(ValueType.INTEGER, 200),
    "bpp": ConfigValue(ValueType.INTEGER, 32),
    "save": ConfigValue(ValueType.INTEGER, 1),
    "save_path": ConfigValue(ValueType.STRING, "./"),
}


def create_cfg_value(cfg: ParsedConfig, token: str, value_type: ValueType) -> ConfigValue:
    """Build a value of ``value_type`` from ``token``.

    A non-numerical integer token may name an already parsed integer key,
    whose value is then reused. Otherwise the value is UNKNOWN.
    """
    if value_type == ValueType.INTEGER:
        if not is_numerical(token):
            existing = cfg.values.get(token)
            if existing is not None and existing.type == value_type:
                return existing
            return ConfigValue(ValueType.UNKNOWN, 0)
        if not token:
            raise ValueError("empty integer value")
        number = int(token)
        if number > _INT64_MAX:
            raise ValueError(f"integer value {token} is out of range")
        return ConfigValue(ValueType.INTEGER, number)
    if value_type == ValueType.STRING:
        return ConfigValue(ValueType.STRING, token)
    return ConfigValue(ValueType.UNKNOWN, 0)


def config_fill_defaults(cfg: ParsedConfig) -> None:
    """Fill missing or unknown values with defaults, marking ``cfg`` damaged."""
    for key, default in DEFAULTS.items():
        current = cfg.values.get(key)
        if current is None or current.type is ValueType.UNKNOWN:
            cfg.damaged = True
            cfg.values[key] = default


def _commit(cfg: ParsedConfig, path, line: int, col: int, key: str, token: str) -> None:
    expected = EXPECTED_ARGS[key]
    value = cfg.values.setdefault(key, create_cfg_value(cfg, token, expected))
    if value.type != expected:
        cfg.errors.append(
            location(path, line, col) + f" error: invalid value for key '{token}'"
        )


def parse_config(path: str | os.PathLike) -> ParsedConfig:
    """Parse the settings file at ``path`` and fill in defaults."""
    cfg = ParsedConfig()
    line, col = 1, 0
    reset_col = comment = lvalue = rvalue = False
    new_entry = ""
    token = ""

    for ch in read_file(path).decode("utf-8", errors="surrogateescape"):
        if reset_col:
            reset_col = False
        else:
            col += 1
        if comment and ch != "\n":
            continue

        if ch == "=":
            if not lvalue:
                cfg.errors.append(
                    location(path, line, col) + " error: can't set unknown settings key"
                )
                continue
            if token not in EXPECTED_ARGS:
                cfg.errors.append(
                    location(path, line, col)
                    + f" error: unexpected settings key '{token}'"
                )
                continue
            new_entry = token
            token = ""
            rvalue = True
            lvalue = False
        elif ch in "#\n":
            if ch == "\n":
                comment = False
                line += 1
                col = 0
                reset_col = True
            else:
                comment = True
            if rvalue:
                _commit(cfg, path, line, col, new_entry, token)
                token = ""
                rvalue = False
        elif ch in " \t\v" and not (
            rvalue and EXPECTED_ARGS[new_entry] is ValueType.STRING
        ):
            continue
        else:
            token += ch
            if not rvalue:
                lvalue = True

    config_fill_defaults(cfg)
    return cfg


def save_config(cfg: ParsedConfig, path: str | os.PathLike) -> None:
    """Write the values of ``cfg`` to ``path`` as ``key = value`` lines."""
    try:
        with open(path, "w", encoding="utf-8", errors="surrogateescape") as handle:
            for key, value in cfg.values.items():
                handle.write(f"{key} = {value}\n")
    except OSError:
        log_error(f"failed to save config to '{os.fspath(path)}'")
        return
    log_success(f"successfully saved config to '{os.fspath(path)}'")