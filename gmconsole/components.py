"""Data components attached to entities on the map."""

from dataclasses import dataclass


@dataclass
class SensorTrace:
    """Signature an entity presents to sensors."""

    biological: float = 0.0
    electrical: float = 0.0
    gravitational: float = 0.0
    size_x: float = 0.0
    size_y: float = 0.0


@dataclass
class SubsystemSensor:
    """A sensor subsystem with a detection range and noise floor."""

    range: float = 0.0
    noise_floor: float = 0.0