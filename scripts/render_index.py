"""
Render the public index page listing latest and versioned schemas.
"""

import html
from pathlib import Path
from typing import Dict, List

from constants import INDEX_FILENAME, SITE_DESCRIPTION, SITE_TITLE

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{title}</title>
    <style>
      body {{
        font-family: Arial, Helvetica, sans-serif;
        margin: 2rem;
        max-width: 720px;
        line-height: 1.5;
      }}
      code {{
        background: #f6f8fa;
        padding: 0.1rem 0.25rem;
        border-radius: 4px;
      }}
      .version {{
        color: #57606a;
        font-size: 0.9em;
      }}
    </style>
  </head>
  <body>
    <h1>{title}</h1>
    <p>{description}</p>
    <h2>Latest</h2>
    <ul>
{latest_items}
    </ul>
{version_sections}
    <p>Base URL: <code>{base_url}</code></p>
  </body>
</html>
"""

SECTION_TEMPLATE = """    <section>
      <h2>{version}</h2>
      <ul>
{items}
      </ul>
    </section>"""


def latest_item(rel: str, version: str) -> str:
    name = html.escape(rel)
    return (f'      <li><a href="/{name}">{name}</a> '
            f'<span class="version">({html.escape(version)})</span></li>')


def version_item(version: str, rel: str) -> str:
    name = html.escape(rel)
    href = html.escape(f"{version}/{rel}")
    return f'        <li><a href="/{href}">{name}</a></li>'


def render_index(
    unversioned: List[str],
    latest: Dict[str, str],
    versions: List[str],
    files_by_version: Dict[str, List[str]],
    base_url: str,
    title: str = SITE_TITLE,
    description: str = SITE_DESCRIPTION,
) -> str:
    """
    Build the index HTML.

    The base URL is shown verbatim; filenames are escaped so literal
    names stay well-formed.
    """
    latest_items = "\n".join(latest_item(rel, latest[rel]) for rel in unversioned)

    sections = []
    for version in versions:
        items = "\n".join(version_item(version, rel) for rel in files_by_version.get(version, []))
        sections.append(SECTION_TEMPLATE.format(version=html.escape(version), items=items))

    return PAGE_TEMPLATE.format(
        title=html.escape(title),
        description=html.escape(description),
        latest_items=latest_items,
        version_sections="\n".join(sections),
        base_url=base_url,
    )


def write_index(out_dir: Path, page: str) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / INDEX_FILENAME
    path.write_text(page, encoding="utf-8")
    return path
