"""
Employee Transformers - Collection Processing Operations

Pure functions over sequences of employee records.
Each call builds its own Polars frame from the input; the input
sequences are never mutated and nothing is cached between calls.
"""

import polars as pl
from itertools import chain
from typing import List, Dict, Any, Sequence
from ..domain.models import Employee, PositionType
from ..domain.schemas import employees_to_polars
from ..errors import InvalidArgumentError
import logging

logger = logging.getLogger(__name__)

EFFECTIVE_RATING_THRESHOLD = 50

ROW_INDEX = "row_nr"
EMPLOYEE_COLUMNS = ["id", "name", "rating", "position_type"]


def _indexed_frame(employees: Sequence[Employee]) -> pl.DataFrame:
    """Build an employee frame carrying each record's position in the input"""
    return employees_to_polars(employees).with_row_index(ROW_INDEX)


def _select_records(
    employees: Sequence[Employee], df: pl.DataFrame
) -> List[Employee]:
    """Map the row index of a frame back to the caller's records"""
    return [employees[i] for i in df.get_column(ROW_INDEX).to_list()]


def filter_by_rating_above(
    employees: Sequence[Employee], threshold: int = EFFECTIVE_RATING_THRESHOLD
) -> List[Employee]:
    """
    Get distinct employees rated above a threshold

    Args:
        employees: Employee records, possibly with duplicates
        threshold: Exclusive lower bound on rating

    Returns:
        List[Employee]: Distinct employees in first-occurrence order
    """
    logger.info(f"Filtering employees with rating > {threshold}")

    employees = list(employees)
    filtered_df = (
        _indexed_frame(employees)
        .unique(subset=EMPLOYEE_COLUMNS, keep="first", maintain_order=True)
        .filter(pl.col("rating") > threshold)
    )

    logger.info(f"Filtered to {filtered_df.height} of {len(employees)} employees")
    return _select_records(employees, filtered_df)


def format_low_rated(
    employees: Sequence[Employee], threshold: int = EFFECTIVE_RATING_THRESHOLD
) -> List[str]:
    """
    Format employees rated below a threshold as "name=rating"

    Args:
        employees: Employee records
        threshold: Exclusive upper bound on rating

    Returns:
        List[str]: One entry per matching employee, in input order
    """
    logger.info(f"Formatting employees with rating < {threshold}")

    entries = (
        employees_to_polars(employees)
        .filter(pl.col("rating") < threshold)
        .select(pl.format("{}={}", pl.col("name"), pl.col("rating")).alias("entry"))
        .get_column("entry")
        .to_list()
    )

    logger.info(f"Formatted {len(entries)} low rated employees")
    return entries


def average_rating(employees: Sequence[Employee]) -> float:
    """Mean rating of all employees, 0.0 for an empty input"""
    mean = employees_to_polars(employees).get_column("rating").mean()
    return float(mean) if mean is not None else 0.0


def merge_and_rank(departments: Sequence[Sequence[Employee]]) -> List[Employee]:
    """
    Merge employees of several departments and rank them by rating

    An employee listed in more than one department appears once.

    Args:
        departments: Employee lists, one per department

    Returns:
        List[Employee]: Distinct employees sorted by rating, highest first
    """
    logger.info(f"Merging employees from {len(departments)} departments")

    employees = list(chain.from_iterable(departments))
    ranked_df = (
        _indexed_frame(employees)
        .unique(subset=EMPLOYEE_COLUMNS, keep="first", maintain_order=True)
        .sort("rating", descending=True, maintain_order=True)
    )

    logger.info(f"Ranked {ranked_df.height} distinct employees")
    return _select_records(employees, ranked_df)


def paginate(employees: Sequence[Employee], number: int, size: int) -> List[Employee]:
    """
    Get one page of employees

    Args:
        employees: Employee records
        number: Page number, starting at 1
        size: Page size

    Returns:
        List[Employee]: Up to `size` employees, empty past the last page

    Raises:
        InvalidArgumentError: If the page number is not positive or the size is negative
    """
    if number <= 0:
        logger.error(f"❌ Invalid page number: {number}")
        raise InvalidArgumentError("page number", number)
    if size < 0:
        logger.error(f"❌ Invalid page size: {size}")
        raise InvalidArgumentError("page size", size)

    employees = list(employees)
    offset = (number - 1) * size
    page_df = _indexed_frame(employees).slice(offset, size)

    logger.info(f"Page {number} (size {size}) holds {page_df.height} employees")
    return _select_records(employees, page_df)


def join_names(employees: Sequence[Employee]) -> str:
    """Names as "[name1, name2, ...]" in input order"""
    return "[" + ", ".join(employee.name for employee in employees) + "]"


def has_duplicate_names(employees: Sequence[Employee]) -> bool:
    """
    Check whether any two employees share a name

    Args:
        employees: Employee records

    Returns:
        bool: True as soon as a name repeats (case-sensitive)
    """
    seen_names = set()
    for employee in employees:
        if employee.name in seen_names:
            logger.info(f"Duplicate employee name found: {employee.name}")
            return True
        seen_names.add(employee.name)
    return False


def average_rating_by_position(
    employees: Sequence[Employee],
) -> Dict[PositionType, float]:
    """
    Average rating per position type

    Args:
        employees: Employee records

    Returns:
        Dict[PositionType, float]: Only positions present in the input
    """
    logger.info("Averaging ratings by position type")

    grouped_df = (
        employees_to_polars(employees)
        .group_by("position_type", maintain_order=True)
        .agg(pl.col("rating").mean().alias("rating_mean"))
    )

    averages = {
        PositionType(position): float(rating_mean)
        for position, rating_mean in grouped_df.iter_rows()
    }
    logger.info(f"Averaged ratings for {len(averages)} positions")
    return averages


def _group_by_effectiveness(
    employees: Sequence[Employee], threshold: int
) -> pl.DataFrame:
    """Group employees on whether their rating exceeds the threshold"""
    return (
        employees_to_polars(employees)
        .with_columns((pl.col("rating") > threshold).alias("effective"))
        .group_by("effective", maintain_order=True)
        .agg(
            [
                pl.len().alias("count"),
                pl.col("name").alias("names"),
            ]
        )
    )


def count_by_effectiveness(
    employees: Sequence[Employee], threshold: int = EFFECTIVE_RATING_THRESHOLD
) -> Dict[bool, int]:
    """
    Count effective and ineffective employees

    Args:
        employees: Employee records
        threshold: Employees rated above this are effective

    Returns:
        Dict[bool, int]: Count per partition, empty partitions omitted
    """
    logger.info(f"Counting employees by effectiveness (threshold={threshold})")

    grouped_df = _group_by_effectiveness(employees, threshold)
    return {
        effective: count
        for effective, count in grouped_df.select(["effective", "count"]).iter_rows()
    }


def names_by_effectiveness(
    employees: Sequence[Employee], threshold: int = EFFECTIVE_RATING_THRESHOLD
) -> Dict[bool, str]:
    """
    Names of effective and ineffective employees

    Args:
        employees: Employee records
        threshold: Employees rated above this are effective

    Returns:
        Dict[bool, str]: ", "-joined names per partition, empty partitions omitted
    """
    logger.info(f"Joining employee names by effectiveness (threshold={threshold})")

    grouped_df = _group_by_effectiveness(employees, threshold).with_columns(
        pl.col("names").list.join(", ")
    )
    return {
        effective: names
        for effective, names in grouped_df.select(["effective", "names"]).iter_rows()
    }


def get_summary_stats(employees: Sequence[Employee]) -> Dict[str, Any]:
    """
    Get summary statistics for employee records

    Args:
        employees: Employee records

    Returns:
        Dict: Summary statistics
    """
    logger.info("Generating summary stats for employees")

    df = employees_to_polars(employees)
    ratings = df.get_column("rating")

    stats = {
        "total_employees": df.height,
        "unique_employees": df.unique().height,
        "unique_names": df.get_column("name").n_unique(),
        "rating_mean": float(ratings.mean()) if df.height else 0.0,
        "rating_min": ratings.min(),
        "rating_max": ratings.max(),
        "effective_count": df.filter(
            pl.col("rating") > EFFECTIVE_RATING_THRESHOLD
        ).height,
        "positions": sorted(df.get_column("position_type").unique().to_list()),
    }

    logger.info(f"Generated summary stats: {list(stats.keys())}")
    return stats
