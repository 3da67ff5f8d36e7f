"""Graph storage helpers."""

from graphsolve.graph.matrix import CostMatrix

__all__ = ["CostMatrix"]
