from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Allow running from repo root without installing as a package.
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from event_contracts.contracts.errors import RoutingIntegrityError
from event_contracts.contracts.integrity import check_routing_integrity
from event_contracts.contracts.routing import CONSUMER_GROUP_STREAMS, SERVICE_CONSUMER_RECOMMENDATIONS
from event_contracts.contracts.streams import STREAMS_BY_SERVICE
from event_contracts.contracts.subscriptions import build_subscription_plan
from event_contracts.core.settings import load_settings


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("check_routing")


def _table() -> dict:
    return {
        "streams_by_service": {k.value: [s.value for s in v] for k, v in STREAMS_BY_SERVICE.items()},
        "consumer_group_streams": {k.value: [s.value for s in v] for k, v in CONSUMER_GROUP_STREAMS.items()},
        "service_consumer_recommendations": {
            k.value: [g.value for g in v] for k, v in SERVICE_CONSUMER_RECOMMENDATIONS.items()
        },
    }


def _print_plan(plan_dict: dict) -> None:
    print(plan_dict["service"])
    for group, streams in plan_dict["groups"].items():
        print(f"  {group}: {', '.join(streams) if streams else '(none)'}")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Check the routing table and print it.")
    ap.add_argument("--service", help="print the subscription plan of one service")
    ap.add_argument("--settings", help="print the plan of the service configured in this settings file")
    ap.add_argument("--json", action="store_true", help="emit JSON instead of text")
    args = ap.parse_args(argv)

    try:
        check_routing_integrity()
    except RoutingIntegrityError as e:
        for problem in e.problems:
            logger.error("%s", problem)
        return 1
    logger.info("routing table ok")

    if args.settings:
        plan = load_settings(args.settings).subscription_plan()
    elif args.service:
        plan = build_subscription_plan(args.service)
        if plan is None:
            logger.error("unknown service: %s", args.service)
            return 2
    else:
        plan = None

    if plan is not None:
        out = plan.to_dict()
        if args.json:
            print(json.dumps(out, indent=2))
        else:
            _print_plan(out)
        return 0

    table = _table()
    if args.json:
        print(json.dumps(table, indent=2))
    else:
        for section, rows in table.items():
            print(section)
            for key, values in rows.items():
                print(f"  {key}: {', '.join(values) if values else '(none)'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
