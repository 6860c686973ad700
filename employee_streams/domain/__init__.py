"""
Domain Layer - Employee Value Types

Immutable records consumed by the transformation layer.
"""

from .models import Employee, PositionType
from .schemas import EMPLOYEE_SCHEMA, employees_to_polars

__all__ = ["Employee", "PositionType", "EMPLOYEE_SCHEMA", "employees_to_polars"]
