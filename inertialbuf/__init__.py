"""In-memory circular buffer of 17-sensor inertial measurements, with a demo command."""

__version__ = "0.1.0"
__all__ = ["__version__"]