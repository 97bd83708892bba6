"""Time constraint use cases."""

from .create_constraint import (
    ConstraintResponse,
    CreateConstraintRequest,
    CreateConstraintUseCase,
)
from .delete_constraint import (
    DeleteConstraintRequest,
    DeleteConstraintResponse,
    DeleteConstraintUseCase,
)
from .toggle_constraint import ToggleConstraintRequest, ToggleConstraintUseCase

__all__ = [
    "ConstraintResponse",
    "CreateConstraintRequest",
    "CreateConstraintUseCase",
    "DeleteConstraintRequest",
    "DeleteConstraintResponse",
    "DeleteConstraintUseCase",
    "ToggleConstraintRequest",
    "ToggleConstraintUseCase",
]
