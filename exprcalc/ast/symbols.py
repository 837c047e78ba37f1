from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from ..models import VariableDeclaration
from .nodes import Variable

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class OutOfRangeError(IndexError):
    """Raised when a variable index is not valid for a table or state buffer.

    Attributes:
        index: The offending index.
        size: Number of slots the container actually holds.
        container: ``"symbol table"`` or ``"state buffer"``.
        path: Sub-node the lookup was made for (``"root"`` outside a traversal).
    """

    index: int
    size: int
    container: str
    path: str = "root"

    def __str__(self) -> str:
        return f"{self.path}: index {self.index} out of range for {self.container} of size {self.size}"


def check_index(index: int, size: int, container: str, path: str = "root") -> int:
    if not 0 <= index < size:
        raise OutOfRangeError(index=index, size=size, container=container, path=path)
    return index


class SymbolTable:
    """Append-only registry of variable names and their initial values.

    The Nth declared name belongs to index N of every state buffer seeded by
    :meth:`initial_state`. Names are never removed or renumbered, and the table
    never holds on to a buffer it has handed out.
    """

    def __init__(self) -> None:
        self._names: list[str] = []
        self._initial: list[float] = []

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"SymbolTable(names={self._names!r})"

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    def declare(self, name: str, initial: float) -> Variable:
        index = len(self._names)
        self._names.append(str(name))
        self._initial.append(float(initial))
        logger.debug("Declared variable %r at index %d (initial=%r)", name, index, initial)
        return Variable(index)

    def declare_all(
        self, declarations: Iterable[VariableDeclaration | Mapping[str, Any]]
    ) -> list[Variable]:
        """Validate every record first, then declare them in order."""

        parsed = [
            item if isinstance(item, VariableDeclaration) else VariableDeclaration.model_validate(item)
            for item in declarations
        ]
        return [self.declare(item.name, item.initial) for item in parsed]

    def name_of(self, variable: Variable, path: str = "root") -> str:
        check_index(variable.index, len(self._names), "symbol table", path)
        return self._names[variable.index]

    def index_of(self, name: str) -> Variable:
        try:
            return Variable(self._names.index(name))
        except ValueError:
            raise KeyError(f"Unknown variable name: {name!r}") from None

    def initial_state(self) -> np.ndarray:
        return np.array(self._initial, dtype=np.float64)
