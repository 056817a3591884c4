#!/usr/bin/env python3
"""
Discover schema files and version directories under a source root.

Usage:
    python discover_schemas.py [src_dir]
"""

import sys
from functools import cmp_to_key
from pathlib import Path
from typing import List, Optional

from constants import SCHEMA_EXTENSION, SRC_DIR, VERSION_PATTERN


def read_schema_files(directory: Path, prefix: str = "") -> List[str]:
    """
    Recursively collect JSON files under a directory.

    Returns relative, forward-slash separated paths sorted by string value.
    Raises if the directory is missing or unreadable.
    """
    results = []
    for entry in Path(directory).iterdir():
        relative = f"{prefix}{entry.name}"
        if entry.is_dir():
            results.extend(read_schema_files(entry, f"{relative}/"))
            continue
        if entry.is_file() and entry.name.endswith(SCHEMA_EXTENSION):
            results.append(relative)
    return sorted(results)


def parse_version(name: str) -> Optional[int]:
    """Return the integer in a `v<digits>` name, or None."""
    match = VERSION_PATTERN.match(name)
    if not match:
        return None
    return int(match.group(1))


def compare_versions(a: str, b: str) -> int:
    """Three-way compare: numeric when both parse, string order otherwise."""
    num_a = parse_version(a)
    num_b = parse_version(b)
    if num_a is not None and num_b is not None:
        left, right = num_a, num_b
    else:
        left, right = a, b
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def sort_versions(names: List[str]) -> List[str]:
    return sorted(names, key=cmp_to_key(compare_versions))


def list_versions(src_dir: Path) -> List[str]:
    """List `v<digits>` subdirectories of the source root, oldest first."""
    names = [
        p.name for p in Path(src_dir).iterdir()
        if p.is_dir() and VERSION_PATTERN.match(p.name)
    ]
    return sort_versions(names)


def main():
    src_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else SRC_DIR
    if not src_dir.is_dir():
        print(f"Error: Source directory not found: {src_dir}", file=sys.stderr)
        sys.exit(1)

    for version in list_versions(src_dir):
        files = read_schema_files(src_dir / version)
        print(f"{version}: {len(files)} schemas")
        for rel in files:
            print(f"  {rel}")


if __name__ == "__main__":
    main()
