"""Supplier search module."""

from .serp import (
    find_suppliers,
    find_suppliers_async,
    resolve_result_count,
    SupplierSearchError,
    SearchConfigError,
    UpstreamHTTPError,
)
from .mapper import map_result_to_supplier
from .models import SupplierCandidate
from .query import build_query

__all__ = [
    "find_suppliers",
    "find_suppliers_async",
    "resolve_result_count",
    "SupplierSearchError",
    "SearchConfigError",
    "UpstreamHTTPError",
    "map_result_to_supplier",
    "SupplierCandidate",
    "build_query",
]
