"""Move-choosing strategies that consume the legal-move interface."""

from chessgrid.engine.random_mover import RandomMover

__all__ = ["RandomMover"]
