#!/usr/bin/env python3
"""
Toggl Leave Logging Script

This script records leave time entries in Toggl Track for every working day
in a date range. Weekends are skipped and public holidays are recorded
against the public holiday task instead of the selected leave type.
"""

import argparse
import re
import sys
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import requests
from requests.auth import HTTPBasicAuth
from config import (
    CONFIG,
    HOLIDAYS,
    LEAVE_TYPES,
    PUBLIC_HOLIDAY_TASK_ID,
    PUBLIC_HOLIDAY_PREFIX,
    DEFAULT_TIMEZONE,
)

WEEKEND = "weekend"
PUBLIC_HOLIDAY = "public_holiday"
ORDINARY_DAY = "ordinary_day"

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = r"\d{4}-\d{2}-\d{2}"


def parse_date(value):
    """Parse a date string in the strict 'YYYY-MM-DD' format."""
    if not isinstance(value, str) or not re.fullmatch(DATE_PATTERN, value):
        raise ValueError(f"Date must be in format 'YYYY-MM-DD', got '{value}'")

    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise ValueError(f"Invalid date values: {e}")


def is_valid_date(value):
    try:
        parse_date(value)
    except ValueError:
        return False
    return True


def is_valid_end_date(start, end):
    """End date must be a valid date strictly after the start date."""
    if not is_valid_date(start) or not is_valid_date(end):
        return False
    return parse_date(end) > parse_date(start)


def iter_dates(start, end):
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def classify_day(day, holidays=HOLIDAYS):
    """Return (kind, label) for a date.

    Weekends win over the holiday table, so a holiday listed on a Saturday
    is still skipped as a weekend.
    """
    if day.weekday() >= 5:
        return WEEKEND, None

    label = holidays.get(day.strftime(DATE_FORMAT))
    if label is not None:
        return PUBLIC_HOLIDAY, label

    return ORDINARY_DAY, None


def format_start_time(day, hour, timezone_name=None):
    """Return `hour`:00 local time on `day` as an ISO-8601 UTC timestamp."""
    local_start = datetime(day.year, day.month, day.day, hour, 0)

    if timezone_name:
        local_start = local_start.replace(tzinfo=ZoneInfo(timezone_name))
    else:
        local_start = local_start.astimezone()

    return local_start.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def build_leave_config(api_token, description, tid, holidays=HOLIDAYS):
    return {
        "holidays": holidays,
        "api_token": api_token,
        "description": description,
        "tid": tid,
    }


def build_time_entry(day, kind, label, leave_config, timezone_name=DEFAULT_TIMEZONE):
    """Build the Toggl time entry payload for a single working day."""
    if kind == PUBLIC_HOLIDAY:
        description = f"{PUBLIC_HOLIDAY_PREFIX}{label}"
        task_id = PUBLIC_HOLIDAY_TASK_ID
    else:
        description = leave_config["description"]
        task_id = leave_config["tid"]

    # Duration is the same for every entry, including part-time days
    return {
        "created_with": CONFIG["created_with"],
        "description": description,
        "duration": CONFIG["duration_seconds"],
        "pid": CONFIG["project_id"],
        "wid": CONFIG["workspace_id"],
        "tid": task_id,
        "start": format_start_time(day, CONFIG["start_hour"], timezone_name),
    }


def describe_entry(kind, label, task_id):
    """Label shown to the user once an entry has been recorded."""
    if kind == PUBLIC_HOLIDAY:
        return f"{PUBLIC_HOLIDAY_PREFIX}{label}"
    return LEAVE_TYPES.get(task_id, f"task {task_id}")


def preview_date_range(start, end, leave_config):
    """Show how each day in the range will be handled without recording anything."""
    print("\n" + "=" * 60)
    print("LEAVE PREVIEW")
    print("=" * 60)

    plan = {WEEKEND: [], PUBLIC_HOLIDAY: [], ORDINARY_DAY: []}

    for day in iter_dates(start, end):
        kind, label = classify_day(day, leave_config["holidays"])
        plan[kind].append(day)

        formatted_day = day.strftime(f"{DATE_FORMAT} (%a)")
        if kind == WEEKEND:
            print(f"  ⏭️  {formatted_day}  weekend, will be skipped")
        elif kind == PUBLIC_HOLIDAY:
            print(f"  🎉 {formatted_day}  {PUBLIC_HOLIDAY_PREFIX}{label}")
        else:
            print(f"  • {formatted_day}  {leave_config['description']}")

    hours = CONFIG["duration_seconds"] / 3600
    entries = len(plan[PUBLIC_HOLIDAY]) + len(plan[ORDINARY_DAY])

    print(f"\n" + "=" * 60)
    print("SUMMARY:")
    print(f"  Leave days: {len(plan[ORDINARY_DAY])}")
    print(f"  Public holidays: {len(plan[PUBLIC_HOLIDAY])}")
    print(f"  Weekend days (skipped): {len(plan[WEEKEND])}")
    print(f"  Entries to record: {entries} ({entries * hours:g} hrs)")
    print("=" * 60)

    return plan


class TogglTimeLogger:
    """Handles time logging operations for Toggl Track."""

    def __init__(self, base_url, api_token, timeout=None):
        self.base_url = base_url.rstrip("/")
        self.api_token = api_token
        self.timeout = timeout
        self.session = requests.Session()
        self._setup_authentication()

    def _setup_authentication(self):
        """Setup API token authentication for API requests."""
        self.session.auth = HTTPBasicAuth(self.api_token, "api_token")
        self.session.headers.update({"Content-Type": "application/json"})

    def create_time_entry(self, payload):
        """Create a single time entry and report how the request went."""
        url = f"{self.base_url}/api/v9/time_entries"

        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            print(f"  Error creating time entry: {e}")
            return {"success": False, "status_code": None, "error": e}

        if response.status_code != 200:
            print(f"  Response: {response.text[:200]}")
            return {
                "success": False,
                "status_code": response.status_code,
                "error": None,
            }

        return {"success": True, "status_code": response.status_code, "error": None}

    def process_date_range(
        self,
        start,
        end,
        leave_config,
        halt_on_failure=True,
        timezone_name=DEFAULT_TIMEZONE,
    ):
        """Record one entry per working day from start to end, inclusive.

        Days are submitted strictly in order and only after the previous
        request has finished. With halt_on_failure the first rejected or
        failed day stops the run, leaving later days untouched.
        """
        recorded = []
        skipped = []
        failed = []
        halted = False

        print(
            f"\nRecording leave from {start.strftime(DATE_FORMAT)} to {end.strftime(DATE_FORMAT)}"
        )
        print("=" * 60)

        current = start
        while current <= end:
            formatted_day = current.strftime(DATE_FORMAT)
            print(f"\nProcessing {formatted_day} ({current.strftime('%A')})...")

            kind, label = classify_day(current, leave_config["holidays"])

            if kind == WEEKEND:
                print(f"  ⏭️  Skipping {formatted_day} since it's the weekend")
                skipped.append(current)
                current += timedelta(days=1)
                continue

            payload = build_time_entry(
                current, kind, label, leave_config, timezone_name
            )
            result = self.create_time_entry(payload)

            if result["success"]:
                print(
                    f"  ✓ Recorded {formatted_day} as {describe_entry(kind, label, payload['tid'])}"
                )
                recorded.append(current)
            else:
                if result["status_code"] is not None:
                    print(f"  ✗ Failed with status code {result['status_code']}!")
                else:
                    print("  ✗ Failed!")
                failed.append(current)

                if halt_on_failure:
                    halted = True
                    break

            current += timedelta(days=1)

        print(f"\n" + "=" * 60)
        print(
            f"SUMMARY: {len(recorded)} recorded, {len(skipped)} skipped, {len(failed)} failed"
        )
        print("=" * 60)

        if halted:
            print(
                f"\n⚠ Stopped at {failed[-1].strftime(DATE_FORMAT)}. Later days were not processed."
            )
            print(
                "Check Toggl for entries already recorded before re-running, "
                "otherwise they will be duplicated."
            )
        else:
            print("\nAll done!")

        return {
            "recorded": recorded,
            "skipped": skipped,
            "failed": failed,
            "halted": halted,
        }


def get_api_token_input():
    """Get the Toggl API token, which is required."""
    while True:
        token = input(
            "What is your Toggl API key? Visit https://track.toggl.com/profile "
            "and scroll to the bottom to get the key: "
        ).strip()
        if token:
            return token
        print("API Key is required!")


def get_start_date_input():
    while True:
        value = input("When does your holidays start? (YYYY-MM-DD): ").strip()
        if is_valid_date(value):
            return value
        print("Invalid date, needs to be in YYYY-MM-DD format.")


def get_end_date_input(start):
    """Get an end date that comes strictly after the start date."""
    while True:
        value = input("When does your holidays end? (YYYY-MM-DD): ").strip()
        if not is_valid_date(value):
            print("Invalid date, needs to be in YYYY-MM-DD format.")
        elif not is_valid_end_date(start, value):
            print("End date should come after start date!")
        else:
            return value


def get_leave_type_input():
    """Get the leave type from a numbered menu and return its task ID."""
    options = list(LEAVE_TYPES.items())

    print("\nWhat's your leave type?")
    for i, (_, label) in enumerate(options, 1):
        print(f"  {i}. {label}")

    while True:
        choice = input(f"Select leave type (1-{len(options)}): ").strip()
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            task_id, label = options[int(choice) - 1]
            print(f"Selected leave type: {label}")
            return task_id
        print(f"Invalid choice. Please select 1-{len(options)}.")


def get_description_input(default):
    """Get the entry description, falling back to the leave type label."""
    while True:
        description = input(
            f"Add a description to the entries (press Enter for '{default}'): "
        ).strip()
        if not description:
            description = default
        if description:
            return description
        print("Description can't be empty.")


def get_yes_no_input(prompt):
    """Get yes/no input from user, only allowing 'y' or 'n'."""
    while True:
        response = input(f"{prompt} (y/n): ").strip().lower()
        if response in ["y", "n"]:
            return response == "y"
        else:
            print("Please enter 'y' for yes or 'n' for no.")


def collect_instructions(args):
    """Prompt for everything not already supplied (and valid) on the command line."""
    api_token = args.token or CONFIG.get("api_token") or get_api_token_input()

    if is_valid_date(args.start):
        start = args.start
    else:
        if args.start:
            print(f"Warning: ignoring start date '{args.start}', it is not YYYY-MM-DD")
        start = get_start_date_input()

    if is_valid_end_date(start, args.end):
        end = args.end
    else:
        if args.end:
            print(
                f"Warning: ignoring end date '{args.end}', it must be YYYY-MM-DD and after {start}"
            )
        end = get_end_date_input(start)

    leave_type = get_leave_type_input()
    description = get_description_input(LEAVE_TYPES[leave_type])

    return {
        "api_token": api_token,
        "start": start,
        "end": end,
        "leave_type": leave_type,
        "description": description,
    }


def cancel():
    print("\nCancelled.")
    sys.exit(0)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Record leave and public holiday entries in Toggl Track."
    )
    parser.add_argument("-t", "--token", help="Toggl API token")
    parser.add_argument("-s", "--start", help="First day of leave (YYYY-MM-DD)")
    parser.add_argument("-e", "--end", help="Last day of leave (YYYY-MM-DD)")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue with the next day when Toggl rejects an entry",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be recorded without sending anything",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main execution function."""
    args = parse_args(argv)

    print("\nToggl With Wings")
    print("=" * 40)
    print("Helper for recording holiday entries.")

    try:
        instructions = collect_instructions(args)
    except (KeyboardInterrupt, EOFError):
        cancel()

    start = parse_date(instructions["start"])
    end = parse_date(instructions["end"])

    leave_config = build_leave_config(
        instructions["api_token"],
        instructions["description"],
        instructions["leave_type"],
    )

    preview_date_range(start, end, leave_config)

    if args.dry_run:
        print("\nDry run complete. No entries were recorded.")
        return

    try:
        proceed = get_yes_no_input("\nProceed with recording these entries?")
    except (KeyboardInterrupt, EOFError):
        cancel()

    if not proceed:
        cancel()

    logger = TogglTimeLogger(
        CONFIG["base_url"],
        leave_config["api_token"],
        timeout=CONFIG.get("request_timeout"),
    )
    halt_on_failure = CONFIG.get("halt_on_failure", True) and not args.keep_going

    logger.process_date_range(start, end, leave_config, halt_on_failure=halt_on_failure)


if __name__ == "__main__":
    main()
