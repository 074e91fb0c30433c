#!/usr/bin/env python3
"""
Operations Package - Clean Excel Operations
Organized by concern, not by random utility growth
"""

from .cell_operations import CellOperations

__all__ = [
    'CellOperations',
]
