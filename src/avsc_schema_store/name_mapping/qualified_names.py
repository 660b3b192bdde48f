"""Qualified name composition and name <-> path mapping."""

from __future__ import annotations

from pathlib import Path

SCHEMA_FILE_EXTENSION = ".avsc"


def make_fullname(name: str, namespace: str | None = None) -> str:
    """Compose a qualified name the way Avro does.

    A name that already contains a dot is fully qualified and the namespace is
    ignored. An empty namespace is the null namespace.
    """
    if "." in name or not namespace:
        return name
    return f"{namespace}.{name}"


def split_fullname(fullname: str) -> tuple[str | None, str]:
    """Return (namespace, simple name) for a qualified name."""
    namespace, _, simple_name = fullname.rpartition(".")
    return (namespace or None), simple_name


def schema_path_for(root: Path | str, fullname: str) -> Path:
    """Map a qualified name to the schema file that should define it.

    Args:
      root: Directory holding the schema tree.
      fullname: Dotted qualified name, e.g. ``com.example.Foo``.

    Returns:
      ``<root>/com/example/Foo.avsc``. The filesystem is not consulted.
    """
    *namespace_parts, simple_name = fullname.split(".")
    return Path(root).joinpath(*namespace_parts, simple_name + SCHEMA_FILE_EXTENSION)


def fullname_for_path(root: Path | str, path: Path | str) -> str:
    """Recover the qualified name implied by a schema file location."""
    candidate = Path(path)
    if candidate.suffix != SCHEMA_FILE_EXTENSION:
        raise ValueError(f"Schema files must use the {SCHEMA_FILE_EXTENSION} extension: {path}")
    try:
        relative = candidate.relative_to(Path(root))
    except ValueError as exc:
        raise ValueError(f"Schema file {path} is not located under {root}") from exc
    return ".".join(relative.with_suffix("").parts)
