from unittest.mock import Mock

import pytest

import leave


@pytest.fixture
def leave_config():
    return leave.build_leave_config("secret-token", "Annual leave", 44300214)


@pytest.fixture
def toggl_logger():
    return leave.TogglTimeLogger("https://api.track.toggl.com/", "secret-token")


@pytest.fixture
def make_response():
    def _make_response(status_code, text="", json_data=None):
        response = Mock()
        response.status_code = status_code
        response.text = text
        response.json.return_value = json_data
        return response

    return _make_response
