from unittest.mock import Mock

import requests

import test_api
from config import LEAVE_TYPES, PUBLIC_HOLIDAY_TASK_ID


def test_leave_tasks_reports_each_configured_task(make_response):
    session = Mock()
    missing = next(iter(LEAVE_TYPES))

    def get(url, timeout=None):
        if url.endswith(f"/tasks/{missing}"):
            return make_response(404)
        return make_response(200, json_data={"name": "Leave", "active": True})

    session.get.side_effect = get

    results = test_api.test_leave_tasks(session)

    assert set(results) == set(LEAVE_TYPES) | {PUBLIC_HOLIDAY_TASK_ID}
    assert results[missing] is False
    assert results[PUBLIC_HOLIDAY_TASK_ID] is True
    assert "/workspaces/2427707/projects/163203548/tasks/" in session.get.call_args.args[0]


def test_workspace_and_project_handles_transport_errors():
    session = Mock()
    session.get.side_effect = requests.exceptions.ConnectionError("offline")

    assert test_api.test_workspace_and_project(session) is False


def test_task_mappings_are_keyed_by_id(make_response):
    session = Mock()
    session.get.return_value = make_response(
        200,
        json_data=[
            {"id": 1, "name": "ALG-74: Annual Leave", "active": True},
            {"id": 2, "name": "ALG-78: Public Holiday", "active": True},
        ],
    )

    mappings = test_api.get_task_mappings(session)

    assert mappings == {1: "ALG-74: Annual Leave", 2: "ALG-78: Public Holiday"}
