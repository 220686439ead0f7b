"""
Gillis Analyzer Package

First-occurrence bookkeeping of variable names, used for reporting.

Author: xwest
"""

from .symbol_table import VariableTable, collect_variables

__all__ = [
    "VariableTable",
    "collect_variables",
]
