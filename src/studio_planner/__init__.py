"""studio-planner: class calendar and movement sequencing for Pilates studios."""

__version__ = "0.1.0"
