"""
Shared fixtures for the employee transformation tests
"""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from employee_streams.coreutils.logging import setup_logging
from employee_streams.domain.models import Employee, PositionType

setup_logging(level="INFO")


def make_employee(id, name, rating, position_type=PositionType.DEVELOPER):
    """Build an employee record with a default position"""
    return Employee(id=id, name=name, rating=rating, position_type=position_type)


@pytest.fixture
def paged_employees():
    """Ten employees: ids 1..10, names Name1..Name10, ratings 11..20"""
    return [make_employee(i, f"Name{i}", 10 + i) for i in range(1, 11)]


@pytest.fixture
def mixed_employees():
    """Employees across positions and both sides of the effectiveness threshold"""
    return [
        make_employee(1, "Ivan", 80, PositionType.DEVELOPER),
        make_employee(2, "Olga", 45, PositionType.ANALYST),
        make_employee(3, "John", 50, PositionType.DEVELOPER),
        make_employee(4, "Anna", 92, PositionType.MANAGER),
        make_employee(5, "Petr", 12, PositionType.ANALYST),
        make_employee(1, "Ivan", 80, PositionType.DEVELOPER),
    ]
