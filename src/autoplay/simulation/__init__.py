"""
Simulation module - the harness that drives games with bots.

Provides step() for a single ply and simulate() for a whole game.
"""

from autoplay.simulation.harness import SimulationResult, simulate, step

__all__ = [
    "SimulationResult",
    "simulate",
    "step",
]
