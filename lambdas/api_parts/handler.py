"""REST API - GET /parts

Forwards ``?action=`` (or the ``{action}`` path parameter) to the dashboard
resolver and returns its result as a JSON response.
"""

import json
import logging

from lambdas.dashboard.handler import dispatch
from lambdas.dashboard.storage import StoreUnavailable

logger = logging.getLogger()

HEADERS = {"Content-Type": "application/json", "Access-Control-Allow-Origin": "*"}


def json_response(status_code, body):
    return {
        "statusCode": status_code,
        "headers": dict(HEADERS),
        "body": json.dumps(body),
    }


def build_dispatch_event(event):
    """Translate an API Gateway proxy event into a resolver event."""
    params = dict(event.get("queryStringParameters") or {})
    path_params = event.get("pathParameters") or {}
    if not params.get("action") and path_params.get("action"):
        params["action"] = path_params["action"]
    return params


def lambda_handler(event, context, store=None):
    resolver_event = build_dispatch_event(event or {})
    try:
        result = dispatch(resolver_event, context, store=store)
    except StoreUnavailable:
        logger.exception("Flag store unavailable for action %s", resolver_event.get("action"))
        return json_response(503, {"error": "store unavailable"})

    return json_response(200, result)
