#!/usr/bin/env python3
"""
Generate a realistic sample assessment through the API.
Creates one property with a handful of rooms and posts a full walk-through
of readings, a few per metric per room, with natural-looking spread.
"""
import argparse
import random

import requests

# Configuration
API_URL = "http://localhost:8000"

ROOMS = ["Primary Bedroom", "Kids Bedroom", "Kitchen", "Living Room", "Primary Bath"]

# Realistic ranges for each metric per room type
# Base values with some variation per room
ROOM_PROFILES = {
    "Primary Bedroom": {
        "CO2": {"base": 1050, "noise": 120},
        "PM2.5": {"base": 7, "noise": 1.5},
        "PM10": {"base": 18, "noise": 4},
        "VOCs": {"base": 150, "noise": 40},
        "Humidity": {"base": 52, "noise": 3},
        "Temperature": {"base": 72, "noise": 1},
        "Mag Field": {"base": 0.6, "noise": 0.2},
        "Electric Field": {"base": 0.4, "noise": 0.1},
        "RF": {"base": 0.08, "noise": 0.03},
    },
    "Kids Bedroom": {
        "CO2": {"base": 950, "noise": 100},
        "PM2.5": {"base": 8, "noise": 2},
        "Humidity": {"base": 50, "noise": 3},
        "Temperature": {"base": 73, "noise": 1},
        "Electric Field": {"base": 1.1, "noise": 0.3},
        "RF": {"base": 0.3, "noise": 0.1},
    },
    "Kitchen": {
        "CO2": {"base": 1350, "noise": 150},
        "PM2.5": {"base": 18, "noise": 5},
        "PM10": {"base": 38, "noise": 8},
        "VOCs": {"base": 360, "noise": 80},
        "Humidity": {"base": 58, "noise": 4},
        "Temperature": {"base": 76, "noise": 1.5},
        "TDS": {"base": 310, "noise": 20},
        "Free Chlorine": {"base": 1.0, "noise": 0.15},
        "pH": {"base": 7.8, "noise": 0.2},
        "Mag Field": {"base": 2.4, "noise": 0.6},
    },
    "Living Room": {
        "CO2": {"base": 880, "noise": 80},
        "PM2.5": {"base": 9, "noise": 2},
        "PM10": {"base": 22, "noise": 5},
        "Humidity": {"base": 49, "noise": 3},
        "Temperature": {"base": 74, "noise": 1},
        "Electric Field": {"base": 0.9, "noise": 0.2},
        "RF": {"base": 0.6, "noise": 0.2},
    },
    "Primary Bath": {
        "Humidity": {"base": 63, "noise": 5},
        "TDS": {"base": 290, "noise": 20},
        "Free Chlorine": {"base": 0.9, "noise": 0.15},
        "pH": {"base": 7.6, "noise": 0.2},
    },
}


def generate_value(profile: dict) -> float:
    """Draw one reading around the profile base; readings are never negative."""
    return max(0.0, random.gauss(profile["base"], profile["noise"]))


def post(path: str, payload: dict) -> dict:
    res = requests.post(f"{API_URL}{path}", json=payload, timeout=10)
    res.raise_for_status()
    return res.json()


def main():
    global API_URL

    parser = argparse.ArgumentParser(description="Post a sample home assessment to the Home Health API")
    parser.add_argument("--api-url", default=API_URL, help="Base URL of the API")
    parser.add_argument("--address", default="4411 Montrose Blvd", help="Street address of the sample property")
    parser.add_argument("--passes", type=int, default=3, help="Readings per metric per room")
    parser.add_argument("--seed", type=int, help="Random seed for repeatable output")
    args = parser.parse_args()

    API_URL = args.api_url.rstrip("/")
    if args.seed is not None:
        random.seed(args.seed)

    print("=" * 60)
    print("Sample Assessment Generator")
    print("=" * 60)

    prop = post("/properties", {"address": args.address, "city": "Houston", "state": "TX"})
    property_id = prop["id"]
    print(f"Property {property_id} ({args.address})")

    total = 0
    for name in ROOMS:
        room = post(f"/properties/{property_id}/rooms", {"name": name})
        profile = ROOM_PROFILES[name]

        count = 0
        for metric, metric_profile in profile.items():
            for _ in range(args.passes):
                payload = {
                    "metric": metric,
                    "value": round(generate_value(metric_profile), 2),
                    "room_id": room["id"],
                }
                res = requests.post(f"{API_URL}/properties/{property_id}/measurements", json=payload, timeout=10)
                if res.status_code == 201:
                    count += 1
                else:
                    print(f"  Error: {res.status_code} {res.text}")

        total += count
        print(f"  {name}: recorded {count} readings ({len(profile)} metrics × {args.passes} passes)")

    report = requests.get(f"{API_URL}/properties/{property_id}/report", timeout=10).json()

    print(f"\n{'=' * 60}")
    print(f"SUCCESS: Recorded {total:,} readings")
    print(f"Overall: {report['overall_score']} ({report['overall_label']})")
    for category in report["categories"]:
        print(f"  {category['category']:<6} {category['score']!s:>5}  {category['summary']}")
    print("=" * 60)


if __name__ == "__main__":
    main()
