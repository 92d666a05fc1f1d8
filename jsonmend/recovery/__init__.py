"""
jsonmend repair diagnostics.

This module provides the repair log that records each corrective action.
"""

from .log import RepairAction, RepairEvent, RepairLog, RepairResult

__all__ = ["RepairAction", "RepairEvent", "RepairLog", "RepairResult"]
