"""Basklass för DTO:er som byggs från ShipEngines JSON-svar.

Konverteringen är strikt: okända nycklar, saknade obligatoriska fält och
värden av fel typ ger ShipEngineConversionError i stället för ett
halvfyllt objekt.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from ..errors import ShipEngineConversionError

M = TypeVar("M", bound="Model")

_NONE_TYPE = type(None)


class Model:
    """Gemensam from_dict/to_dict för alla DTO-dataclasses."""

    @classmethod
    def from_dict(cls: Type[M], record: Any) -> M:
        name = cls.__name__
        if not isinstance(record, Mapping):
            raise ShipEngineConversionError(
                name, f"förväntade ett objekt, fick {type(record).__name__}"
            )

        hints = get_type_hints(cls)
        known = {f.name: f for f in dataclasses.fields(cls)}

        unknown = sorted(set(record) - set(known))
        if unknown:
            raise ShipEngineConversionError(
                name, f"okända fält: {', '.join(map(str, unknown))}"
            )

        values = {}
        for field_name, f in known.items():
            if field_name not in record:
                if _is_required(f):
                    raise ShipEngineConversionError(
                        name, "obligatoriskt fält saknas", field_name
                    )
                continue
            values[field_name] = _convert(
                name, field_name, hints[field_name], record[field_name]
            )
        return cls(**values)

    def to_dict(self) -> dict:
        """Returnerar objektet i samma form som API:ts JSON."""
        return {
            f.name: _unconvert(getattr(self, f.name))
            for f in dataclasses.fields(self)
        }


def to_objects(records: Any, model: Type[M]) -> list[M]:
    """Konverterar en lista med råa poster, i samma ordning."""
    if not isinstance(records, list):
        raise ShipEngineConversionError(
            model.__name__, f"förväntade en lista, fick {type(records).__name__}"
        )
    return [model.from_dict(record) for record in records]


def _is_required(f: dataclasses.Field) -> bool:
    return (
        f.default is dataclasses.MISSING
        and f.default_factory is dataclasses.MISSING
    )


def _convert(model: str, field_name: str, tp: Any, value: Any) -> Any:
    origin = get_origin(tp)

    if origin is Union:
        if value is None:
            return None
        args = [a for a in get_args(tp) if a is not _NONE_TYPE]
        return _convert(model, field_name, args[0], value)

    if tp is Any:
        return value

    if value is None:
        raise ShipEngineConversionError(model, "null är inte tillåtet", field_name)

    if origin is list or tp is list:
        if not isinstance(value, list):
            raise _type_error(model, field_name, "lista", value)
        args = get_args(tp)
        if not args:
            return list(value)
        return [_convert(model, field_name, args[0], item) for item in value]

    if origin is dict or tp is dict:
        if not isinstance(value, Mapping):
            raise _type_error(model, field_name, "objekt", value)
        return dict(value)

    if isinstance(tp, type) and issubclass(tp, Model):
        return tp.from_dict(value)

    if tp is bool:
        if not isinstance(value, bool):
            raise _type_error(model, field_name, "bool", value)
        return value

    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _type_error(model, field_name, "heltal", value)
        return value

    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _type_error(model, field_name, "tal", value)
        return float(value)

    if tp is str:
        if not isinstance(value, str):
            raise _type_error(model, field_name, "sträng", value)
        return value

    raise ShipEngineConversionError(model, f"typen {tp!r} stöds inte", field_name)


def _type_error(model: str, field_name: str, expected: str, value: Any):
    return ShipEngineConversionError(
        model, f"förväntade {expected}, fick {type(value).__name__}", field_name
    )


def _unconvert(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, list):
        return [_unconvert(v) for v in value]
    return value
