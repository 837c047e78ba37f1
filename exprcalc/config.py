"""Configuration objects for expression limits and rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Runtime safeguards and display settings for expression evaluation.

    Attributes:
        max_ast_depth: Maximum allowed expression nesting depth.
        max_ast_nodes: Maximum number of nodes in one expression tree, or
            ``None`` for no cap. Depth alone bounds the recursion.
        constant_format: ``format()`` spec used to render constants. The
            default ``"g"`` prints six significant digits and drops a
            trailing ``.0``, so ``2.0`` renders as ``2``.
    """

    max_ast_depth: int = 256
    max_ast_nodes: int | None = None
    constant_format: str = "g"
