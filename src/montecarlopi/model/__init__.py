"""
The MODEL layer contains the value types of the simulation.
It has NO knowledge of how trials are scheduled or reported.
It deals with Randomness, Geometry, and per-Trial bookkeeping.
"""
from montecarlopi.model.geometry_primitives import Circle, Point, Square
from montecarlopi.model.random_source import RandomSource
from montecarlopi.model.trial import Trial

__all__ = ["Circle", "Point", "RandomSource", "Square", "Trial"]
