"""Derive pydantic insert validators from mapped SQLAlchemy tables.

An insert validator admits the columns a caller is allowed to supply when a
row is created. Columns are either allow-listed with ``pick`` or dropped with
``omit``; everything the validator does not admit (system-assigned ids and
timestamps included) is rejected as an extra field.

Field rules follow the column definition:

* ``NOT NULL`` columns without a default are required,
* nullable columns become ``Optional[...]`` defaulting to ``None``,
* columns with a Python or server default may be left out.

Primitive types are validated strictly so ``"1024"`` is not accepted for a
``Float`` column and ``5`` is not accepted for a ``Text`` column.
"""

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic.alias_generators import to_camel
from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, Numeric, String, inspect

from .database import Base

logger = logging.getLogger(__name__)

# Checked in order: Float is a Numeric, Text is a String
_COLUMN_TYPES: tuple[tuple[type, Any], ...] = (
    (Boolean, bool),
    (Integer, int),
    (Float, float),
    (Numeric, float),
    (DateTime, datetime),
    # Any JSON value except null
    (JSON, Union[Dict[str, Any], List[Any], str, int, float, bool]),
    (String, str),
)


class InsertSchema(BaseModel):
    """Base class for derived insert validators.

    Accepts camelCase (wire) or snake_case (attribute) keys and rejects any key
    that is not an admitted field.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


def python_type_for(column: Column) -> Any:
    for sa_type, python_type in _COLUMN_TYPES:
        if isinstance(column.type, sa_type):
            return python_type
    raise TypeError(f"Unsupported column type {column.type!r} for column {column.name!r}")


def is_required(column: Column) -> bool:
    return not column.nullable and column.default is None and column.server_default is None


def _field_for(column: Column) -> tuple[Any, Any]:
    python_type = python_type_for(column)
    primitive = python_type in (bool, int, float, str, datetime)
    constraints: dict[str, Any] = {}
    if primitive:
        constraints["strict"] = True

    if is_required(column):
        return python_type, Field(..., **constraints)

    if column.nullable:
        return Optional[python_type], Field(default=None, **constraints)

    # NOT NULL with a default: may be omitted but not set to null
    return python_type, Field(default=None, **constraints)


def create_insert_schema(
    table: type[Base],
    *,
    pick: Optional[Iterable[str]] = None,
    omit: Optional[Iterable[str]] = None,
    name: Optional[str] = None,
) -> type[InsertSchema]:
    """Build the insert validator for ``table``.

    ``pick`` keeps only the named attributes, ``omit`` drops the named
    attributes. Attribute names are the mapped (snake_case) names.
    """
    if pick is not None and omit is not None:
        raise ValueError("pick and omit are mutually exclusive")

    mapper = inspect(table)
    columns = {attr.key: attr.columns[0] for attr in mapper.column_attrs}

    selection = set(pick) if pick is not None else set(omit or ())
    unknown = selection - columns.keys()
    if unknown:
        raise ValueError(f"{table.__name__} has no column(s): {', '.join(sorted(unknown))}")

    if pick is not None:
        admitted = [key for key in columns if key in selection]
    else:
        admitted = [key for key in columns if key not in selection]

    fields = {key: _field_for(columns[key]) for key in admitted}
    schema_name = name or f"Insert{table.__name__}"
    logger.debug("Derived %s from %s with fields %s", schema_name, table.__tablename__, admitted)

    return create_model(schema_name, __base__=InsertSchema, **fields)
