"""Name mapping exports."""

from .qualified_names import (
    SCHEMA_FILE_EXTENSION,
    fullname_for_path,
    make_fullname,
    schema_path_for,
    split_fullname,
)

__all__ = [
    "SCHEMA_FILE_EXTENSION",
    "fullname_for_path",
    "make_fullname",
    "schema_path_for",
    "split_fullname",
]
