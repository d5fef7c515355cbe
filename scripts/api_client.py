"""Lightweight REST client for the podium API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


VIEWS = ("flow", "heatmap", "choropleth")


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch views from the podium REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("view", nargs="?", choices=VIEWS, help="View to fetch")
    parser.add_argument("--top-k", type=int, default=None, help="Override the view's top-K size")
    parser.add_argument(
        "--feature",
        action="append",
        default=[],
        help="Map feature name to fill (choropleth only, repeatable)",
    )
    parser.add_argument("--list-views", action="store_true", help="List configured views and exit")
    parser.add_argument("--export-path", type=Path, help="Download the view as CSV to this path")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_views:
            resp = client.get("/views")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if not args.view:
            raise SystemExit("view is required unless --list-views is given")

        params: dict[str, object] = {}
        if args.top_k is not None:
            params["top_k"] = args.top_k

        if args.export_path:
            resp = client.get(f"/views/{args.view}/export", params=params)
            resp.raise_for_status()
            args.export_path.write_bytes(resp.content)
            print(f"Saved {args.view} CSV to {args.export_path}")
            return

        if args.view == "choropleth" and args.feature:
            params["feature"] = args.feature
        resp = client.get(f"/views/{args.view}", params=params)
        if resp.status_code >= 400:
            raise SystemExit(f"Request failed ({resp.status_code}): {resp.text}")
        print(json.dumps(resp.json(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
