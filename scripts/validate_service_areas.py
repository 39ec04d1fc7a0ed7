"""
Validate Service Area Polygons.

Checks an exported/imported list of service areas before it is saved:
1. Every polygon is well-formed GeoJSON (optionally with closed rings)
2. Optionally reports which area would serve a given lat/lng

Input file is a JSON array of {"id", "name", "polygon", "active"} records.

Usage:
    python scripts/validate_service_areas.py areas.json
    python scripts/validate_service_areas.py areas.json --strict --lat 40.44 --lng -79.99
"""
import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from rolloff.schemas.serviceability import ServiceArea
from rolloff.services.serviceability_service import check_serviceability, polygon_errors


def load_areas(path: Path) -> list:
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of service areas")
    return data


def validate(records: list, strict: bool = False):
    """Split records into valid ServiceArea objects and (label, errors) pairs."""
    valid = []
    invalid = []
    for i, record in enumerate(records):
        label = f"#{i} {record.get('name', '<unnamed>')}" if isinstance(record, dict) else f"#{i}"
        if not isinstance(record, dict):
            invalid.append((label, ["Record must be an object"]))
            continue

        errors = polygon_errors(record.get("polygon"), require_closed=strict)
        if errors:
            invalid.append((label, errors))
            continue

        try:
            area = ServiceArea(
                id=str(record.get("id", i)),
                name=record.get("name", f"Area {i}"),
                polygon=record["polygon"],
                active=record.get("active", True),
            )
        except ValidationError as e:
            invalid.append((label, [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            ]))
            continue

        valid.append(area)
    return valid, invalid


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate service area polygons")
    parser.add_argument("path", type=Path, help="JSON file with a list of service areas")
    parser.add_argument("--strict", action="store_true", help="Require closed rings (first point == last)")
    parser.add_argument("--lat", type=float, help="Latitude to check against the valid areas")
    parser.add_argument("--lng", type=float, help="Longitude to check against the valid areas")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        records = load_areas(args.path)
    except (OSError, ValueError) as e:
        print(f"❌ {e}")
        return 1

    valid, invalid = validate(records, strict=args.strict)

    print("=" * 70)
    print(f"Service areas: {len(records)} total, {len(valid)} valid, {len(invalid)} invalid")
    print("=" * 70)
    for label, errors in invalid:
        print(f"  ❌ {label}")
        for error in errors:
            print(f"     - {error}")

    if args.lat is not None and args.lng is not None:
        result = check_serviceability(args.lat, args.lng, valid)
        marker = "✅" if result.is_serviceable else "⊘"
        print(f"\n{marker} ({args.lat}, {args.lng}): {result.message}")

    return 1 if invalid else 0


if __name__ == "__main__":
    sys.exit(main())
