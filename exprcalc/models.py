"""Pydantic schemas for variable declarations supplied from outside the program."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VariableDeclaration(BaseModel):
    """One symbol-table entry: a display name and the slot's starting value.

    Attributes:
        name: Display name used by the renderer. Need not be unique.
        initial: Value seeded into the state buffer at the variable's index.

    Example:
        >>> VariableDeclaration(name="a", initial=2)
        VariableDeclaration(name='a', initial=2.0)
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Display name of the variable.")
    initial: float = Field(default=0.0, description="Initial state value.")
