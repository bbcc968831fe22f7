"""
loadtable/io/export.py
======================
Writes a generated timetable out as the JSON response body or as a CSV grid
(one row per period, one column per day).
"""

import json
import logging

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Timetable generated successfully"


def timetable_payload(timetable):
    return {"message": SUCCESS_MESSAGE, "timetable": timetable.to_dict()}


def export_json(timetable, path, indent=2):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(timetable_payload(timetable), f, indent=indent)
    logger.info("wrote timetable JSON to %s", path)


def export_csv(timetable, path):
    timetable.to_frame().to_csv(path)
    logger.info("wrote timetable grid to %s", path)
