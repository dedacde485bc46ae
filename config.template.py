#!/usr/bin/env python3
"""
Toggl Leave Logging Script - Configuration Template

This file contains configuration template for the Toggl Track API.
Copy this file to config.py and update the values below before running the main script.

Run 'python test_api.py -t <api_token>' after configuration to get suggested
leave type mappings and verify your setup.
"""

CONFIG = {
    "base_url": "https://api.track.toggl.com",

    # API token from https://track.toggl.com/profile (bottom of the page).
    # Leave empty to be prompted on every run, or pass it with -t.
    "api_token": "",

    # Workspace and project the leave entries are recorded against
    "workspace_id": 1234567,
    "project_id": 123456789,

    # Shown by Toggl as the client that created the entry
    "created_with": "toggl with wings",

    # Length of every entry in seconds (27360 = 7.6 hours)
    "duration_seconds": 27360,

    # Local hour the entries start at
    "start_hour": 9,

    # Seconds to wait for Toggl before giving up; None waits forever
    "request_timeout": None,

    # Stop at the first day Toggl rejects (use --keep-going to override)
    "halt_on_failure": True,
}

# Public holiday date (YYYY-MM-DD) to label mappings
# Days listed here are recorded against PUBLIC_HOLIDAY_TASK_ID instead of the
# selected leave type. Keys must be unique.
HOLIDAYS = {
    "2025-01-01": "New Year's Day",
    "2025-12-25": "Christmas Day",
    # Add more holidays as needed
}

# Toggl task ID to leave type label mappings
# Run 'python test_api.py' to get the suggested mappings from your project
LEAVE_TYPES = {
    11111111: "Annual Leave",
    22222222: "Personal Leave",
    # Add more leave types as needed
}

# Toggl task ID and description prefix used for public holidays
PUBLIC_HOLIDAY_TASK_ID = 33333333
PUBLIC_HOLIDAY_PREFIX = "Public Holiday: "

# Timezone the start hour is interpreted in, e.g. "Australia/Adelaide".
# None uses the machine's local timezone.
DEFAULT_TIMEZONE = None

# Configuration Instructions:
#
# 1. Get API Token:
#    - Log into Toggl Track
#    - Go to https://track.toggl.com/profile
#    - Scroll to the bottom and reveal the API token
#
# 2. Find Workspace and Project IDs:
#    - Open the project in Toggl Track
#    - Check URL: /<workspace_id>/projects/<project_id>/team
#    - Update workspace_id and project_id above
#
# 3. Find Leave Task IDs:
#    - Run: python test_api.py -t <api_token>
#    - Copy the suggested LEAVE_TYPES from the output
#    - Set PUBLIC_HOLIDAY_TASK_ID to the public holiday task
#
# 4. Test Configuration:
#    - Run: python test_api.py -t <api_token>
#    - Verify connection and permissions
#    - All leave tasks should show as accessible
