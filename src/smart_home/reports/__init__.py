"""
Report strategies for smart-home.

Concrete reporters are supplied by the host application; this package only
defines the Reporter contract consumed by House.create_report.
"""

from .base import Reporter

__all__ = [
    "Reporter",
]
