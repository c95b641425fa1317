#!/usr/bin/env python3
"""Dashboard Resolver Explorer

Run this locally to see the response shapes of every resolver action
without deploying. Flags come from an in-memory store.
Usage: python3 scripts/invoke_local.py [--dataset williams2025] [--onboarded]
"""

import argparse
import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from lambdas.dashboard import fixtures  # noqa: E402  (path set above)
from lambdas.dashboard.handler import ACTIONS, dispatch  # noqa: E402
from lambdas.dashboard.storage import InMemoryFlagStore  # noqa: E402

SAMPLE_EVENTS = [
    {"action": "getAllParts"},
    {"payload": {"action": "getRaceCalendar"}},
    {"action": "getDriverNames"},
    {"action": "checkInitialLoad"},
    {"action": "testConnection"},
    {"action": "getInventory", "filter": "albon"},
    {"action": "getInventory", "payload": {"category": "Brakes"}},
    {"action": "getCriticalAlerts"},
    {"action": "getPartHistory", "query": "PIT-101"},
    {"action": "getDriverAssignments"},
    {"action": "totallyUnknown"},
    {},
]


def show(event, result):
    print(f"\n{'='*60}")
    print(f"EVENT {json.dumps(event)}")
    print("=" * 60)

    if isinstance(result, list):
        print(f"Records returned: {len(result)}")
        if result:
            print(f"\nSample record keys: {list(result[0].keys())}")
            print("\nFirst record:")
            print(json.dumps(result[0], indent=2, ensure_ascii=False))
    else:
        print(json.dumps(result, indent=2, ensure_ascii=False))


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--dataset", default=fixtures.DEFAULT_DATASET, choices=sorted(fixtures.DATASETS))
    parser.add_argument("--onboarded", action="store_true", help="set the onboardingComplete flag")
    args = parser.parse_args()

    store = InMemoryFlagStore({"onboardingComplete": True} if args.onboarded else {})
    dataset = fixtures.get_dataset(args.dataset)

    print("Dashboard Resolver Explorer")
    print(f"Dataset: {dataset.name}, actions: {', '.join(ACTIONS)}\n")

    for event in SAMPLE_EVENTS:
        show(event, dispatch(event, store=store, dataset=dataset))

    print("\nDone!")


if __name__ == "__main__":
    main()
