"""Schema loading exports."""

from .bulk_loader import discover_schema_files, load_schemas

__all__ = ["discover_schema_files", "load_schemas"]
