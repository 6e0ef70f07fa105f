"""Declarative mapping between JSON objects and dataclass models."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Callable

from binancekit.util import BinanceError

_MISSING = dataclasses.MISSING


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def wire(key: str | None = None, *, parse: Callable[[Any], Any] | None = None, default: Any = _MISSING):
    """Declare a model field stored under ``key`` (camelCase of its name if omitted)."""
    return dataclasses.field(default=default, metadata={"wire": key, "parse": parse})


def parse_string_or_float(value: Any) -> float:
    """Read a number sent either as a JSON number or as a decimal string."""
    if isinstance(value, bool):
        raise BinanceError(f"expected a string or a number, got {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        if value == "INF":
            return math.inf
        if value != value.strip() or "_" in value:
            raise BinanceError(f"invalid float literal: {value!r}")
        try:
            return float(value)
        except ValueError as exc:
            raise BinanceError(f"invalid float literal: {value!r}") from exc
    raise BinanceError(f"expected a string or a number, got {value!r}")


def parse_optional_string_or_float(value: Any) -> float | None:
    """Like :func:`parse_string_or_float`, for a field that may be absent."""
    return parse_string_or_float(value)


def parse_string_or_bool(value: Any) -> bool:
    """Read a boolean sent either as a JSON boolean or as "true"/"false"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value == "true":
            return True
        if value == "false":
            return False
        raise BinanceError(f"provided string was not `true` or `false`: {value!r}")
    raise BinanceError(f"expected a string or a boolean, got {value!r}")


def format_string_or_float(value: float | int) -> str:
    """Render a number as a plain decimal string without exponent notation."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_optional(value: float | None) -> str | None:
    return None if value is None else format_string_or_float(value)


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


_FORMATTERS: dict[Callable[[Any], Any], Callable[[Any], Any]] = {
    parse_string_or_float: format_string_or_float,
    parse_optional_string_or_float: _format_optional,
    parse_string_or_bool: _format_bool,
}


def _dump(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_dump(item) for item in value]
    if isinstance(value, dict):
        return {key: _dump(item) for key, item in value.items()}
    return value


def _wire_fields(cls: type) -> list[dataclasses.Field]:
    return [f for f in dataclasses.fields(cls) if f.init and not f.metadata.get("skip")]


def _key(field: dataclasses.Field) -> str:
    return field.metadata.get("wire") or _camel(field.name)


class Model:
    """Base for dataclass models read from and written to JSON-shaped data.

    A field declared with ``metadata={"skip": True}`` is never read or written.
    """

    @classmethod
    def from_dict(cls, data: Any):
        """Build an instance from a JSON object, or from an array in field order."""
        fields = _wire_fields(cls)
        if isinstance(data, (list, tuple)):
            if len(data) != len(fields):
                raise BinanceError(
                    f"invalid length {len(data)}, expected {len(fields)} elements for {cls.__name__}"
                )
            data = {_key(f): item for f, item in zip(fields, data)}
        if not isinstance(data, Mapping):
            raise BinanceError(f"expected an object for {cls.__name__}, got {type(data).__name__}")
        values: dict[str, Any] = {}
        for field in fields:
            key = _key(field)
            parse = field.metadata.get("parse")
            if key not in data:
                if field.default is not _MISSING:
                    values[field.name] = field.default
                elif field.default_factory is not _MISSING:
                    values[field.name] = field.default_factory()
                else:
                    raise BinanceError(f"missing field `{key}` in {cls.__name__}")
                continue
            raw = data[key]
            if parse is None or (raw is None and field.default is None):
                values[field.name] = raw
            else:
                values[field.name] = parse(raw)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of this instance."""
        out: dict[str, Any] = {}
        for field in _wire_fields(type(self)):
            value = getattr(self, field.name)
            formatter = _FORMATTERS.get(field.metadata.get("parse"))
            if formatter is not None and value is not None:
                out[_key(field)] = formatter(value)
            else:
                out[_key(field)] = _dump(value)
        return out