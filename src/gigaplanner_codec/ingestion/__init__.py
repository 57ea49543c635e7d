"""Catalog ingestion from the planner's JSON data files."""

from __future__ import annotations

from gigaplanner_codec.ingestion.catalog_loader import CATALOG_FILES, CatalogLoader


__all__ = [
    "CATALOG_FILES",
    "CatalogLoader",
]
