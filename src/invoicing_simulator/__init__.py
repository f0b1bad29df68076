"""Invoicing Simulator Module - selection state and derived views."""

from .selection import SelectionState
from .simulator import InvoicingSimulator

__all__ = ["InvoicingSimulator", "SelectionState"]
