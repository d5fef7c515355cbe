"""Command-line interface for computing views from source CSVs."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from podium.config import VIEW_NAMES
from podium.config_loader import SourceProfile
from podium.ingest import SourceLoadError
from podium.views import export_view_to_csv, load_view


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute Olympic result views from CSV tables")
    parser.add_argument("view", choices=VIEW_NAMES, help="View to compute")
    parser.add_argument("--data-dir", type=Path, default=Path("data"), help="Directory holding the source CSVs")
    parser.add_argument("--load-profile", type=Path, default=None, help="Load source profile JSON")
    parser.add_argument("--save-profile", type=Path, default=None, help="Save source profile JSON")
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Column override as table.field=column (e.g., medals.medal_type=medal)",
    )
    parser.add_argument(
        "--reversed",
        action="append",
        default=[],
        help="Name order override as table=true|false (true means 'LAST First')",
    )
    parser.add_argument("--top-k", type=int, default=None, help="Keep this many countries/disciplines")
    parser.add_argument("--format", choices=("json", "csv"), default="json", help="Output format")
    parser.add_argument("--output", type=Path, default=None, help="Output path (stdout if omitted)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g., DEBUG, INFO)")
    return parser.parse_args(argv)


def _apply_overrides(profile: SourceProfile, columns: list[str], orders: list[str]) -> SourceProfile:
    for entry in columns:
        if "=" not in entry or "." not in entry.split("=", 1)[0]:
            raise ValueError(f"Invalid column entry '{entry}', expected table.field=column")
        target, column = entry.split("=", 1)
        table, field = target.split(".", 1)
        profile.source(table.strip()).mapping[field.strip()] = column.strip()
    for entry in orders:
        if "=" not in entry:
            raise ValueError(f"Invalid reversed entry '{entry}', expected table=true|false")
        table, flag = entry.split("=", 1)
        profile.source(table.strip()).reversed = flag.strip().lower() in {"1", "true", "yes", "y"}
    return profile


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    profile = SourceProfile.load(args.load_profile) if args.load_profile else SourceProfile()
    profile = _apply_overrides(profile, args.column, args.reversed)
    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved source profile to {args.save_profile}")

    try:
        view = load_view(args.view, args.data_dir, profile=profile, top_k=args.top_k)
    except SourceLoadError as exc:
        raise SystemExit(f"Cannot compute {args.view} view: {exc}") from exc

    if args.format == "csv":
        text = export_view_to_csv(view)
    else:
        text = json.dumps(asdict(view), indent=2, ensure_ascii=False)

    if args.output:
        args.output.write_text(text, encoding="utf-8")
        print(f"Wrote {args.view} view to {args.output}")
    else:
        print(text)


if __name__ == "__main__":
    main()
