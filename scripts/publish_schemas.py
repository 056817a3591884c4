#!/usr/bin/env python3
"""
Copy versioned schemas into the public directory.

Each version directory is mirrored under public/<version>/. The newest
version that contains a given file is also copied to the public root, so
public/<file> always serves the latest copy.

Legacy layout: when no version yields any schema but the fallback
directory exists, its files become the unversioned set.

Usage:
    python publish_schemas.py [src_dir] [out_dir]
"""

import shutil
import sys
import time
from pathlib import Path
from typing import Any, Dict, List

from constants import DEFAULT_FALLBACK_VERSION, PUBLIC_DIR, SRC_DIR
from discover_schemas import list_versions, read_schema_files


def log(message: str, level: str = "INFO") -> None:
    """Print log message with timestamp."""
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{timestamp}] [{level}] {message}", file=sys.stderr)


def ensure_dir(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)


def copy_schemas(src_dir: Path, dest_dir: Path, files: List[str]) -> int:
    """Copy relative paths from src_dir to dest_dir, overwriting."""
    ensure_dir(dest_dir)
    for rel in files:
        dest = dest_dir / rel
        ensure_dir(dest.parent)
        shutil.copyfile(src_dir / rel, dest)
    return len(files)


def resolve_latest(versions: List[str], files_by_version: Dict[str, List[str]]) -> Dict[str, str]:
    """Map each relative path to the last version (in order) containing it."""
    latest: Dict[str, str] = {}
    for version in versions:
        for rel in files_by_version.get(version, []):
            latest[rel] = version
    return latest


def copy_latest(src_dir: Path, out_dir: Path, latest: Dict[str, str]) -> int:
    ensure_dir(out_dir)
    for rel, version in sorted(latest.items()):
        dest = out_dir / rel
        ensure_dir(dest.parent)
        shutil.copyfile(src_dir / version / rel, dest)
    return len(latest)


def publish(
    src_dir: Path,
    out_dir: Path,
    fallback_version: str = DEFAULT_FALLBACK_VERSION,
    quiet: bool = False,
) -> Dict[str, Any]:
    """
    Publish every version under src_dir into out_dir.

    Returns a report dict with versions, files_by_version, latest,
    unversioned, fallback_used and copied.
    """
    src_dir = Path(src_dir)
    out_dir = Path(out_dir)
    ensure_dir(out_dir)

    versions = list_versions(src_dir)
    if not quiet:
        log(f"Found {len(versions)} version directories in {src_dir}")

    files_by_version: Dict[str, List[str]] = {}
    copied = 0
    for version in versions:
        files = read_schema_files(src_dir / version)
        files_by_version[version] = files
        copied += copy_schemas(src_dir / version, out_dir / version, files)
        if not quiet:
            log(f"  {version}: {len(files)} schemas")

    latest = resolve_latest(versions, files_by_version)

    fallback_used = False
    fallback_dir = src_dir / fallback_version
    if not latest and fallback_dir.is_dir():
        log(f"No versioned schemas, falling back to {fallback_dir}", "WARN")
        latest = {rel: fallback_version for rel in read_schema_files(fallback_dir)}
        fallback_used = True

    copied += copy_latest(src_dir, out_dir, latest)

    return {
        "versions": versions,
        "files_by_version": files_by_version,
        "latest": latest,
        "unversioned": sorted(latest),
        "fallback_used": fallback_used,
        "copied": copied,
    }


def main():
    src_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else SRC_DIR
    out_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else PUBLIC_DIR
    if not src_dir.is_dir():
        print(f"Error: Source directory not found: {src_dir}", file=sys.stderr)
        sys.exit(1)

    report = publish(src_dir, out_dir)
    print(f"Published {len(report['unversioned'])} latest schemas "
          f"across {len(report['versions'])} versions to {out_dir}")


if __name__ == "__main__":
    main()
