"""Utilities for printing shell syntax trees as shell source code."""

from .writer import Printer, SinkError, fprint, print_node

__all__ = ["Printer", "SinkError", "fprint", "print_node"]
