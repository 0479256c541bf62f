#!/usr/bin/env python3
import argparse
import sys
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.core.config import settings
from src.core.reference import CITIES
from src.db.session import SessionLocal
from src.services.activity_service import list_sitemap_activities
from src.services.sitemap import build_sitemap_entries, render_sitemap_xml


def main() -> int:
    parser = argparse.ArgumentParser(description="Write the site's sitemap.xml to disk.")
    parser.add_argument("--output", default=str(PROJECT_ROOT / "sitemap.xml"), help="Destination file.")
    parser.add_argument("--base-url", default=settings.public_base_url, help="Public origin of the site.")
    args = parser.parse_args()

    with SessionLocal() as db:
        activities = list_sitemap_activities(db)

    entries = build_sitemap_entries(args.base_url, activities, CITIES, now=datetime.utcnow())
    output_path = Path(args.output)
    output_path.write_text(render_sitemap_xml(entries), encoding="utf-8")
    print(f"Wrote {len(entries)} URLs ({len(activities)} activities) to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
