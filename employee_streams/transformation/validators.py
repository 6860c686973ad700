"""
Employee Validators - Transform Layer

Pure functions for validating employee frames.
Ensures data quality and schema compliance.
"""

import polars as pl
from typing import Dict, Any
from ..domain.models import PositionType
from ..domain.schemas import EMPLOYEE_SCHEMA
import logging

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["id", "name", "rating", "position_type"]


def validate_employee_schema(df: pl.DataFrame) -> bool:
    """
    Validate employee data matches expected schema

    Args:
        df: Employee DataFrame

    Returns:
        bool: True if valid, raises exception if invalid
    """
    if df.schema != EMPLOYEE_SCHEMA:
        raise ValueError(f"Schema mismatch: expected {EMPLOYEE_SCHEMA}, got {df.schema}")

    # Check for null values in required fields
    for field in REQUIRED_FIELDS:
        null_count = df.select(pl.col(field).is_null().sum()).item()
        if null_count > 0:
            raise ValueError(
                f"Null values found in required field '{field}': {null_count}"
            )

    logger.info(f"Employee schema validation passed: {df.height} records")
    return True


def validate_data_quality(df: pl.DataFrame) -> Dict[str, Any]:
    """
    Validate data quality and return quality metrics

    Args:
        df: Employee DataFrame

    Returns:
        Dict: Quality metrics and validation results
    """
    logger.info("Validating data quality for employees")

    quality_metrics = {
        "total_records": df.height,
        "null_counts": {},
        "duplicate_counts": {},
        "data_types": df.schema,
    }

    for column in df.columns:
        null_count = df.select(pl.col(column).is_null().sum()).item()
        quality_metrics["null_counts"][column] = null_count

    quality_metrics["duplicate_counts"]["employee"] = df.height - df.unique().height
    quality_metrics["duplicate_counts"]["name"] = (
        df.height - df.get_column("name").n_unique()
    )

    for column, null_count in quality_metrics["null_counts"].items():
        if null_count > 0:
            logger.warning(f"Column '{column}' has {null_count} null values")

    for key, duplicate_count in quality_metrics["duplicate_counts"].items():
        if duplicate_count > 0:
            logger.warning(f"Duplicate records found for '{key}': {duplicate_count}")

    logger.info("Data quality validation completed for employees")
    return quality_metrics


def validate_business_rules(df: pl.DataFrame) -> bool:
    """
    Validate business rules for employee data

    Args:
        df: Employee DataFrame

    Returns:
        bool: True if all business rules pass
    """
    logger.info("Validating business rules for employees")

    known_positions = [position.value for position in PositionType]
    invalid_positions = df.filter(
        pl.col("position_type").is_null()
        | ~pl.col("position_type").is_in(known_positions)
    ).height
    if invalid_positions > 0:
        raise ValueError(
            f"Found {invalid_positions} employees with unknown position types"
        )

    empty_names = df.filter(
        pl.col("name").is_null() | (pl.col("name") == "")
    ).height
    if empty_names > 0:
        raise ValueError(f"Found {empty_names} employees with empty names")

    negative_ratings = df.filter(pl.col("rating") < 0).height
    if negative_ratings > 0:
        logger.warning(f"Found {negative_ratings} employees with negative ratings")

    logger.info("Business rules validation passed for employees")
    return True
