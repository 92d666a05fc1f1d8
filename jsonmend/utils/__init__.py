"""
jsonmend configuration utilities.
"""

from .config import ParseLimits, RepairOptions, resolve_options

__all__ = ["ParseLimits", "RepairOptions", "resolve_options"]
