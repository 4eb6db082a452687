#!/usr/bin/env python3
"""Write the pages the static site build has to pre-render as a JSON manifest."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from sitei18n.backend.domain import RouteKey  # noqa: E402
from sitei18n.backend.localization import RouteTable, get_route_table  # noqa: E402

DEFAULT_OUTPUT = REPO_ROOT / "build" / "static-paths.json"


def build_manifest(table: RouteTable) -> dict:
    catalog = table.catalog
    return {
        "default_locale": catalog.default_locale,
        "locales": list(catalog.locales),
        "home": {locale: table.build_path(RouteKey.HOME, locale) for locale in catalog.locales},
        "slugs": {locale: list(table.list_slugs(locale)) for locale in catalog.locales},
        "pages": [
            {
                "locale": page.locale,
                "route_key": page.route_key.value,
                "slug": page.slug,
                "path": page.path,
                "alternates": table.alternates(page.route_key),
            }
            for page in table.static_paths()
        ],
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="Manifest destination")
    args = parser.parse_args(argv)

    manifest = build_manifest(get_route_table())

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(
        json.dumps(manifest, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    print(f"Wrote {len(manifest['pages'])} page(s) to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
