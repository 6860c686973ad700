"""
Domain Schemas

Polars schema for employee frames and the record → frame conversion.
"""

from typing import Iterable

import polars as pl

from .models import Employee

EMPLOYEE_SCHEMA = pl.Schema(
    [
        ("id", pl.Int64()),
        ("name", pl.String()),
        ("rating", pl.Int64()),
        ("position_type", pl.String()),
    ]
)


def employees_to_polars(employees: Iterable[Employee]) -> pl.DataFrame:
    """Convert employee records to a Polars DataFrame"""
    records = [
        {
            "id": employee.id,
            "name": employee.name,
            "rating": employee.rating,
            "position_type": employee.position_type.value,
        }
        for employee in employees
    ]
    return pl.DataFrame(records, schema=EMPLOYEE_SCHEMA)
