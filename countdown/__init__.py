"""countdown: show the time remaining until a date on the command line."""

from .breakdown import DurationBreakdown, Precision, format_breakdown, partition
from .cli import main

__version__ = "0.1.0"

__all__ = [
    "DurationBreakdown",
    "Precision",
    "format_breakdown",
    "partition",
    "main",
    "__version__",
]
