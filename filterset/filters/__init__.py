"""
FilterSet - Filters Module
"""

from __future__ import annotations

from filterset.filters.operations import Operation
from filterset.filters.variants import FilterVariant
from filterset.filters.registry import variant_for, supported
from filterset.filters.filter import Filter, FilterSpec
from filterset.filters.compiler import compile_filter
from filterset.filters.filter_set import FilterSet

__all__ = [
    "Operation",
    "FilterVariant",
    "variant_for",
    "supported",
    "Filter",
    "FilterSpec",
    "compile_filter",
    "FilterSet",
]
