"""Dashboard resolver Lambda

Invoked directly by the dashboard front end. The event names an action
(``event["action"]`` or ``event["payload"]["action"]``) and the resolver
returns the matching fixture data. Unknown or missing actions fall back to
the full parts list.

The only external read is the ``onboardingComplete`` flag in SSM Parameter
Store, used by ``checkInitialLoad``.
"""

import logging
import os
from datetime import datetime, timedelta, timezone

import boto3

from lambdas.dashboard import fixtures
from lambdas.dashboard.categories import classify_part
from lambdas.dashboard.storage import SSMFlagStore

# ──────────────────────────────────────────────
# Configuration
# ──────────────────────────────────────────────
PARTS_DATASET = os.environ.get("PARTS_DATASET", fixtures.DEFAULT_DATASET)
SSM_PARAM_PREFIX = os.environ.get("SSM_PARAM_PREFIX", "/pitlane-ledger/dev/")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

DEFAULT_ACTION = "getAllParts"
ONBOARDING_FLAG = "onboardingComplete"
CRITICAL_LIFE_THRESHOLD = 20
SEARCH_FIELDS = ("name", "pitlaneStatus", "key", "assignment")

logger = logging.getLogger()
logger.setLevel(LOG_LEVEL)


# ──────────────────────────────────────────────
# AWS Client Singletons (warm start reuse)
# ──────────────────────────────────────────────
_ssm_client = None


def get_ssm_client():
    global _ssm_client
    if _ssm_client is None:
        _ssm_client = boto3.client("ssm")
    return _ssm_client


def get_flag_store():
    return SSMFlagStore(get_ssm_client(), SSM_PARAM_PREFIX)


# ──────────────────────────────────────────────
# Event parsing
# ──────────────────────────────────────────────
def get_payload(event):
    payload = event.get("payload")
    return payload if isinstance(payload, dict) else {}


def extract_action(event):
    """Top-level action, then payload action, then the default."""
    action = event.get("action") or get_payload(event).get("action")
    return action if isinstance(action, str) and action else DEFAULT_ACTION


def extract_param(event, name):
    return event.get(name) or get_payload(event).get(name)


# ──────────────────────────────────────────────
# Actions
# ──────────────────────────────────────────────
class Resolver:
    """Action handlers bound to one flag store and dataset."""

    def __init__(self, store, dataset):
        self.store = store
        self.dataset = dataset

    def parts(self):
        return fixtures.generate_parts(self.dataset)

    def get_all_parts(self, event):
        parts = self.parts()
        logger.info("getAllParts returning %d parts", len(parts))
        return parts

    def get_race_calendar(self, event):
        return [dict(entry) for entry in fixtures.RACE_CALENDAR]

    def get_driver_names(self, event):
        return dict(self.dataset.drivers)

    def check_initial_load(self, event):
        if self.store is None:
            self.store = get_flag_store()
        has_onboarded = self.store.get_flag(ONBOARDING_FLAG)
        return not has_onboarded

    def test_connection(self, event):
        return {
            "status": "SUCCESS",
            "message": "Pit Boss is online. All systems nominal.",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def get_inventory(self, event):
        parts = self.parts()
        text = extract_param(event, "filter")
        category = extract_param(event, "category")

        if isinstance(text, str) and text:
            needle = text.lower()
            parts = [
                part for part in parts
                if any(needle in part[field].lower() for field in SEARCH_FIELDS)
            ]
        if isinstance(category, str) and category:
            wanted = category.lower()
            parts = [part for part in parts if classify_part(part["name"]).lower() == wanted]

        logger.info("getInventory filter=%r category=%r matched %d parts", text, category, len(parts))
        return parts

    def get_critical_alerts(self, event):
        return [
            part for part in self.parts()
            if "DAMAGED" in part["pitlaneStatus"] or part["life"] < CRITICAL_LIFE_THRESHOLD
        ]

    def get_part_history(self, event):
        query = extract_param(event, "query")
        part = next((p for p in self.parts() if query in (p["key"], p["name"])), None)
        if part is None:
            return {"error": f"Part '{query}' not found."}

        now = datetime.now(timezone.utc)
        return {
            "part": part,
            "history": [
                {"date": now.isoformat(), "action": "INSPECTION",
                 "details": "Routine check passed", "user": "Chief Mechanic"},
                {"date": (now - timedelta(days=1)).isoformat(), "action": "INSTALL",
                 "details": f"Fitted to {part['assignment']}", "user": "Mechanic A"},
                {"date": (now - timedelta(days=7)).isoformat(), "action": "RECEIVE",
                 "details": "Arrived at track", "user": "Logistics Mgr"},
            ],
        }

    def get_driver_assignments(self, event):
        return {slot: dict(info) for slot, info in fixtures.DRIVER_ASSIGNMENTS.items()}


ACTIONS = {
    "getAllParts": Resolver.get_all_parts,
    "getRaceCalendar": Resolver.get_race_calendar,
    "getDriverNames": Resolver.get_driver_names,
    "checkInitialLoad": Resolver.check_initial_load,
    "testConnection": Resolver.test_connection,
    "getInventory": Resolver.get_inventory,
    "getCriticalAlerts": Resolver.get_critical_alerts,
    "getPartHistory": Resolver.get_part_history,
    "getDriverAssignments": Resolver.get_driver_assignments,
}


def dispatch(event, context=None, store=None, dataset=None):
    """Resolve one event to its response value.

    The SSM flag store is only built when an action needs it and no store
    was injected. Flag store failures (StoreUnavailable) propagate.
    """
    if not isinstance(event, dict):
        event = {}
    if dataset is None:
        dataset = fixtures.get_dataset(PARTS_DATASET)

    action = extract_action(event)
    method = ACTIONS.get(action)
    if method is None:
        logger.info("Unknown action %r, defaulting to %s", action, DEFAULT_ACTION)
        method = ACTIONS[DEFAULT_ACTION]
    else:
        logger.info("Action: %s", action)

    return method(Resolver(store, dataset), event)


def lambda_handler(event, context):
    """Entry point for direct invocation."""
    if context is not None:
        logger.debug("Request id: %s", getattr(context, "aws_request_id", None))
    return dispatch(event or {}, context)
