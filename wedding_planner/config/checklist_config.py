"""
Checklist Configuration
This config defines the default wedding checklist seeded for every new profile.
Used by the profile-created hook and the backfill script.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

# Phases in display order, furthest from the wedding first
PHASES = [
    "12+ Months Before",
    "8-12 Months Before",
    "4-8 Months Before",
    "2-4 Months Before",
    "1-2 Months Before",
    "1 Week Before",
]

# Default task text per phase
DEFAULT_TASKS: Dict[str, List[str]] = {
    "12+ Months Before": [
        "Set your wedding date",
        "Determine your budget",
        "Create guest list (rough estimate)",
        "Research and book venue",
        "Hire wedding planner (optional)",
        "Start shopping for wedding dress",
        "Research photographers",
        "Book photographer",
        "Research caterers",
        "Book caterer",
    ],
    "8-12 Months Before": [
        "Send save the dates",
        "Register for gifts",
        "Book officiant",
        "Book florist",
        "Book band/DJ",
        "Order wedding dress",
        "Book transportation",
        "Plan honeymoon",
        "Book honeymoon",
        "Engagement party planning",
    ],
    "4-8 Months Before": [
        "Order invitations",
        "Plan bachelor/bachelorette parties",
        "Book hair and makeup artists",
        "Choose wedding cake",
        "Plan rehearsal dinner",
        "Shop for wedding rings",
        "Plan ceremony details",
        "Choose wedding party attire",
        "Book accommodations for guests",
        "Apply for marriage license",
    ],
    "2-4 Months Before": [
        "Send wedding invitations",
        "Finalize guest list",
        "Order wedding favors",
        "Plan seating arrangements",
        "Write wedding vows",
        "Schedule dress fittings",
        "Confirm all vendors",
        "Create wedding day timeline",
        "Plan wedding day emergency kit",
        "Confirm honeymoon details",
    ],
    "1-2 Months Before": [
        "Final dress fitting",
        "Confirm final headcount with caterer",
        "Finalize seating chart",
        "Confirm transportation details",
        "Break in wedding shoes",
        "Prepare wedding day emergency kit",
        "Confirm ceremony and reception details",
        "Get marriage license",
        "Prepare vendor payments",
        "Delegate wedding day responsibilities",
    ],
    "1 Week Before": [
        "Confirm all vendor arrival times",
        "Pack for honeymoon",
        "Prepare wedding day timeline for vendors",
        "Rehearsal and rehearsal dinner",
        "Get manicure/pedicure",
        "Prepare vendor tip envelopes",
        "Confirm weather backup plans",
        "Rest and relax",
        "Prepare emergency contact list",
        "Final venue walkthrough",
    ],
}


def build_default_task_rows(user_id: str, now: Optional[datetime] = None) -> List[dict]:
    """
    Returns the task rows to insert for a new profile, in template order.
    Format: [
        {"user_id": "...", "task_name": "Set your wedding date",
         "phase": "12+ Months Before", "completed": False, "created_at": "..."},
        ...
    ]
    created_at is stamped one microsecond apart so that listing by creation
    time returns the template order. It comes from the API server clock, which
    TaskService.create_task also uses for custom tasks.
    """
    base = now or datetime.now(timezone.utc)
    rows = []

    for phase in PHASES:
        for task_name in DEFAULT_TASKS[phase]:
            rows.append({
                "user_id": user_id,
                "task_name": task_name,
                "phase": phase,
                "completed": False,
                "created_at": (base + timedelta(microseconds=len(rows))).isoformat(),
            })

    return rows
