#!/usr/bin/env python3
"""
Build the public schema site.

Copies every version directory under src/ into public/<version>/, copies
the latest copy of each schema to public/, and writes public/index.html.

Usage:
    python build_site.py
    python build_site.py --src schemas --out site --base-url https://example.test/
    SCHEMA_BASE_URL=https://example.test/ python build_site.py --clean
"""

import argparse
import shutil
import sys
from pathlib import Path
from typing import List, Optional

from constants import CONFIG_FILE
from publish_schemas import log, publish
from render_index import render_index, write_index
from site_config import ConfigError, load_config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Publish versioned JSON schemas as a static site")
    p.add_argument("--src", type=Path, help="Schema source root (default: src/)")
    p.add_argument("--out", type=Path, help="Output directory (default: public/)")
    p.add_argument("--base-url", help="Base URL shown on the index page")
    p.add_argument("--fallback-version", help="Legacy directory used when no versioned schemas exist")
    p.add_argument("--config", type=Path, default=CONFIG_FILE, help="YAML config file")
    p.add_argument("--clean", action="store_true", help="Remove the output directory first")
    p.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    return p.parse_args(argv)


def build(config, clean: bool = False, quiet: bool = False) -> dict:
    src_dir = config["src"]
    out_dir = config["out"]

    if clean and out_dir.exists():
        if not quiet:
            log(f"Removing {out_dir}")
        shutil.rmtree(out_dir)

    report = publish(src_dir, out_dir, config["fallback_version"], quiet=quiet)
    page = render_index(
        report["unversioned"],
        report["latest"],
        report["versions"],
        report["files_by_version"],
        config["base_url"],
        title=config["title"],
        description=config["description"],
    )
    index_path = write_index(out_dir, page)
    if not quiet:
        log(f"Index written to {index_path}")
    return report


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config, overrides={
            "src": args.src,
            "out": args.out,
            "base_url": args.base_url,
            "fallback_version": args.fallback_version,
        })
    except ConfigError as e:
        log(str(e), "ERROR")
        return 2

    if not config["src"].is_dir():
        log(f"Source directory not found: {config['src']}", "ERROR")
        return 1

    try:
        report = build(config, clean=args.clean, quiet=args.quiet)
    except OSError as e:
        log(f"Build failed: {e}", "ERROR")
        return 1

    print(f"Generated {len(report['unversioned'])} schemas in {config['out']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
