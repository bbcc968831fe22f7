"""
loadtable/config/time_config.py
===============================
Defines the working week, the nine daily periods, the reserved break/lunch
periods, room labels, and the column labels of the faculty-workload sheet.
"""

DAYS = ("Mon", "Tue", "Wed", "Thurs", "Fri")

TIME_SLOTS = (
    "8:30-9:20",
    "9:20-10:10",
    "10:10-11:00",
    "11:00-11:50",
    "11:50-12:40",
    "12:40-1:30",
    "1:30-2:20",
    "2:20-3:10",
    "3:10-4:00",
)

BREAK_SLOT = 2
LUNCH_SLOT = 5
BREAK_LABEL = "Break"
LUNCH_LABEL = "LUNCH"

LAB_ROOM_PREFIX = "CSE LAB"
LAB_ROOM_COUNT = 5
THEORY_ROOM = "LT-16"

# leading rows of the workload sheet above the real header
HEADER_ROWS = 5

COLUMNS = {
    "faculty": "Faculty Name",
    "name": "Subject",
    "code": "Sub Code",
    "year": "Year",
    "section": "Sec",
    "lecture_hours": "L",
    "practical_hours": "P",
    "total_load": "Load (L+P)",
}


def get_active_config():
    config = {
        "working_days": list(DAYS),
        "time_slots": list(TIME_SLOTS),

        # reserved periods, written before anything is scheduled
        "break_slot": BREAK_SLOT,
        "lunch_slot": LUNCH_SLOT,
        "break_label": BREAK_LABEL,
        "lunch_label": LUNCH_LABEL,

        # rooms: labs get "CSE LAB <1..count>", theory always the same hall
        "lab_room_prefix": LAB_ROOM_PREFIX,
        "lab_room_count": LAB_ROOM_COUNT,
        "theory_room": THEORY_ROOM,

        # workload sheet layout
        "header_rows": HEADER_ROWS,
        "columns": dict(COLUMNS),
    }
    return config
