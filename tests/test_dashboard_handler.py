"""Tests for the dashboard resolver's action dispatch."""

import pytest

from lambdas.dashboard import fixtures, handler
from lambdas.dashboard.storage import InMemoryFlagStore, StoreUnavailable


def _without_timestamps(parts):
    return [{k: v for k, v in p.items() if k != "lastUpdated"} for p in parts]


def test_driver_names(flag_store) -> None:
    result = handler.dispatch({"action": "getDriverNames"}, store=flag_store)
    assert result == {"car1": "Alex Albon", "car2": "Carlos Sainz"}


def test_race_calendar_from_payload_action(flag_store) -> None:
    result = handler.dispatch({"payload": {"action": "getRaceCalendar"}}, store=flag_store)

    assert len(result) == 3
    assert result[0] == {
        "round": 1,
        "race": "Bahrain GP",
        "date": "2025-03-02",
        "location": "Sakhir",
        "weather": "Clear, 28°C",
    }
    assert [entry["round"] for entry in result] == [1, 2, 3]


def test_top_level_action_wins_over_payload(flag_store) -> None:
    event = {"action": "getDriverNames", "payload": {"action": "getRaceCalendar"}}
    assert handler.dispatch(event, store=flag_store) == {"car1": "Alex Albon", "car2": "Carlos Sainz"}


def test_empty_action_falls_through_to_payload(flag_store) -> None:
    event = {"action": "", "payload": {"action": "getDriverNames"}}
    assert handler.dispatch(event, store=flag_store)["car1"] == "Alex Albon"


def test_empty_event_returns_all_parts(flag_store) -> None:
    default = handler.dispatch({}, store=flag_store)
    explicit = handler.dispatch({"action": "getAllParts"}, store=flag_store)

    assert len(default) == 50
    assert _without_timestamps(default) == _without_timestamps(explicit)
    assert _without_timestamps(default) == _without_timestamps(fixtures.get_mock_parts())


def test_unknown_action_returns_all_parts(flag_store) -> None:
    result = handler.dispatch({"action": "totallyUnknown"}, store=flag_store)
    assert _without_timestamps(result) == _without_timestamps(fixtures.get_mock_parts())


def test_non_dict_payload_is_ignored(flag_store) -> None:
    result = handler.dispatch({"payload": "getDriverNames"}, store=flag_store)
    assert len(result) == 50


def test_parts_only_actions_do_not_touch_the_store(flag_store) -> None:
    handler.dispatch({"action": "getAllParts"}, store=flag_store)
    handler.dispatch({"action": "getRaceCalendar"}, store=flag_store)
    assert flag_store.reads == []


@pytest.mark.parametrize(
    "flags, expected",
    [
        ({}, True),
        ({"onboardingComplete": False}, True),
        ({"onboardingComplete": True}, False),
    ],
)
def test_check_initial_load(flags, expected) -> None:
    store = InMemoryFlagStore(flags)

    assert handler.dispatch({"action": "checkInitialLoad"}, store=store) is expected
    assert store.reads == ["onboardingComplete"]


def test_store_failure_propagates(failing_store) -> None:
    with pytest.raises(StoreUnavailable):
        handler.dispatch({"action": "checkInitialLoad"}, store=failing_store)


def test_dataset_can_be_switched(flag_store) -> None:
    result = handler.dispatch({}, store=flag_store, dataset=fixtures.WILLIAMS_2025)
    assert len(result) == 80
    assert result[0]["key"] == "PIT-0001"


def test_test_connection(flag_store) -> None:
    result = handler.dispatch({"action": "testConnection"}, store=flag_store)
    assert result["status"] == "SUCCESS"
    assert "timestamp" in result


def test_inventory_text_filter(flag_store) -> None:
    result = handler.dispatch({"action": "getInventory", "filter": "ALBON"}, store=flag_store)

    assert len(result) == 18
    assert {p["assignment"] for p in result} == {"Car 1 (Albon)"}


def test_inventory_filter_from_payload_matches_key(flag_store) -> None:
    event = {"action": "getInventory", "payload": {"filter": "pit-10"}}
    result = handler.dispatch(event, store=flag_store)
    assert [p["id"] for p in result] == [f"pu-{n}" for n in range(1, 9)]


def test_inventory_category_filter(flag_store) -> None:
    event = {"action": "getInventory", "category": "brakes"}
    result = handler.dispatch(event, store=flag_store)
    assert [p["id"] for p in result] == ["br-1", "br-2", "br-3"]


def test_inventory_without_filters_returns_everything(flag_store) -> None:
    assert len(handler.dispatch({"action": "getInventory"}, store=flag_store)) == 50


def test_critical_alerts(flag_store) -> None:
    result = handler.dispatch({"action": "getCriticalAlerts"}, store=flag_store)
    assert [p["id"] for p in result] == ["pu-4"]


def test_critical_alerts_include_scrapped_parts(flag_store) -> None:
    result = handler.dispatch({"action": "getCriticalAlerts"}, store=flag_store, dataset=fixtures.WILLIAMS_2025)
    ids = {p["id"] for p in result}

    assert {"fl-6", "sus-9", "cl-2"} <= ids
    assert {"ch-4", "fw-8", "fw-9", "fw-10", "br-7", "hl-4"} <= ids
    assert len(ids) == 9


def test_part_history_by_key(flag_store) -> None:
    result = handler.dispatch({"action": "getPartHistory", "query": "PIT-104"}, store=flag_store)

    assert result["part"]["id"] == "pu-4"
    assert [h["action"] for h in result["history"]] == ["INSPECTION", "INSTALL", "RECEIVE"]
    assert result["history"][1]["details"] == "Fitted to Unassigned"


def test_part_history_by_name(flag_store) -> None:
    event = {"action": "getPartHistory", "payload": {"query": "Floor Plank Wooden"}}
    assert handler.dispatch(event, store=flag_store)["part"]["key"] == "PIT-502"


def test_part_history_unknown_part(flag_store) -> None:
    result = handler.dispatch({"action": "getPartHistory", "query": "PIT-999"}, store=flag_store)
    assert result == {"error": "Part 'PIT-999' not found."}


def test_driver_assignments(flag_store) -> None:
    result = handler.dispatch({"action": "getDriverAssignments"}, store=flag_store)
    assert result["car1"]["driver"] == "Alex Albon"
    assert result["reserve"] == {"driver": "Franco Colapinto"}


def test_lambda_handler_uses_configured_store(monkeypatch) -> None:
    store = InMemoryFlagStore({"onboardingComplete": True})
    monkeypatch.setattr(handler, "get_flag_store", lambda: store)

    assert handler.lambda_handler({"action": "checkInitialLoad"}, None) is False
    assert handler.lambda_handler(None, None)[0]["id"] == "pu-1"


def test_default_flag_store_uses_prefix(monkeypatch) -> None:
    monkeypatch.setattr(handler, "_ssm_client", object())
    store = handler.get_flag_store()
    assert store.parameter_name("onboardingComplete") == handler.SSM_PARAM_PREFIX + "onboardingComplete"


def test_non_string_action_falls_back_to_parts(flag_store) -> None:
    result = handler.dispatch({"action": ["getDriverNames"]}, store=flag_store)
    assert len(result) == 50


def test_non_string_payload_action_falls_back_to_parts(flag_store) -> None:
    result = handler.dispatch({"payload": {"action": {"name": "getRaceCalendar"}}}, store=flag_store)
    assert result[0]["id"] == "pu-1"


def test_string_event_falls_back_to_parts() -> None:
    result = handler.lambda_handler("getDriverNames", None)
    assert len(result) == 50
    assert result[0]["key"] == "PIT-101"
