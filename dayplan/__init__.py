"""Day planner scheduling package."""

from dayplan.core.logger import setup_logger

__version__ = "0.1.0"

__all__ = ["__version__", "setup_logger"]
