"""Energy check-ins: slider scaling, suggestions and the energy log."""

from neurolearn.energy.tracker import (
    EnergyLogEntry,
    energy_suggestion,
    log_energy,
    recent_energy,
    scale_energy,
)

__all__ = ["EnergyLogEntry", "energy_suggestion", "log_energy", "recent_energy", "scale_energy"]
