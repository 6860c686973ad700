"""Employee data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Range of the Int64 frame columns
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class PositionType(str, Enum):
    """Job role held by an employee."""

    DEVELOPER = "DEVELOPER"
    ANALYST = "ANALYST"
    TESTER = "TESTER"
    MANAGER = "MANAGER"
    DESIGNER = "DESIGNER"


class Employee(BaseModel):
    """Employee record with value semantics over all fields"""

    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ..., ge=INT64_MIN, le=INT64_MAX, description="Employee identifier"
    )
    name: str = Field(..., description="Employee name")
    rating: int = Field(
        ..., ge=INT64_MIN, le=INT64_MAX, description="Effectiveness rating"
    )
    position_type: PositionType = Field(..., description="Job role")

    def __str__(self) -> str:
        return (
            f"Employee{{id={self.id}, name='{self.name}', rating={self.rating}, "
            f"position_type={self.position_type.value}}}"
        )
