#!/usr/bin/env python3
"""
Toggl Leave Logging Script - Configuration

This file contains configuration settings for the Toggl Track API.
Update the workspace and project settings below before running the main script.
"""

CONFIG = {
    "base_url": "https://api.track.toggl.com",
    "api_token": "",  # Leave empty to be prompted (or pass -t)
    "workspace_id": 2427707,
    "project_id": 163203548,
    "created_with": "toggl with wings",
    "duration_seconds": 27360,  # 7.6 hours
    "start_hour": 9,
    "request_timeout": None,
    "halt_on_failure": True,
}

# South Australian public holidays
HOLIDAYS = {
    "2024-12-24": "Christmas Eve",
    "2024-12-25": "Christmas Day",
    "2024-12-26": "Proclamation Day",
    "2024-12-31": "New Year's Eve",
    "2025-01-01": "New Year's Day",
    "2025-01-27": "Australia Day",
    "2025-03-10": "Adelaide Cup Day",
    "2025-04-18": "Good Friday",
    "2025-04-19": "Easter Saturday",
    "2025-04-20": "Easter Sunday",
    "2025-04-21": "Easter Monday",
    "2025-04-25": "ANZAC Day",
    "2025-06-09": "King's Birthday",
    "2025-10-06": "Labour Day",
    "2025-12-25": "Christmas Day",
    "2025-12-26": "Proclamation Day",
    "2025-12-31": "New Year's Eve",
    "2026-01-01": "New Year's Day",
    "2026-01-26": "Australia Day",
    "2026-03-09": "Adelaide Cup Day",
    "2026-04-03": "Good Friday",
    "2026-04-04": "Easter Saturday",
    "2026-04-05": "Easter Sunday",
    "2026-04-06": "Easter Monday",
    "2026-04-25": "ANZAC Day",
    "2026-06-08": "King's Birthday",
    "2026-10-05": "Labour Day",
    "2026-12-25": "Christmas Day",
    "2026-12-26": "Proclamation Day",
    "2026-12-31": "New Year's Eve",
}

LEAVE_TYPES = {
    44300214: "ALG-74: Annual Leave",
    44300239: "ALG-75: Personal Leave",
    44300160: "ALG-110: Unpaid Leave",
}

PUBLIC_HOLIDAY_TASK_ID = 44300245
PUBLIC_HOLIDAY_PREFIX = "ALG-78: "

# None uses the machine's local timezone
DEFAULT_TIMEZONE = None
