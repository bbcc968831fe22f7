"""
loadtable/scheduler/workload.py
Turns raw faculty-workload rows (one per subject taught) into Subject records.
Rows missing faculty, subject or code are dropped; unreadable hour counts become 0.
"""

import logging
import re
from collections.abc import Mapping

import pandas as pd

from loadtable.config.time_config import get_active_config
from loadtable.models.subject import Subject

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _is_blank(v):
    if v is None:
        return True
    if isinstance(v, str):
        return not v.strip()
    try:
        return bool(pd.isna(v))
    except (TypeError, ValueError):
        return False


def _to_text(v):
    if _is_blank(v):
        return ""
    # Excel hands back whole numbers as floats (year 3 -> 3.0)
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v).strip()


def _to_int(v, default=0):
    if _is_blank(v) or isinstance(v, bool):
        return default
    try:
        n = int(float(v))
    except (TypeError, ValueError, OverflowError):
        m = _LEADING_INT.match(str(v))
        if not m:
            return default
        n = int(m.group(1))
    return max(n, 0)


def _iter_rows(rows):
    if isinstance(rows, pd.DataFrame):
        for record in rows.to_dict(orient="records"):
            yield record
        return
    if isinstance(rows, (str, bytes, Mapping)) or not hasattr(rows, "__iter__"):
        raise ValueError("rows must be a DataFrame or an iterable of mappings")
    for row in rows:
        if not isinstance(row, Mapping):
            raise ValueError(f"workload row must be a mapping, got {type(row).__name__}")
        yield row


def subject_from_row(row, columns):
    """Build a Subject from one row, or None when an identity field is missing."""
    faculty = row.get(columns["faculty"])
    name = row.get(columns["name"])
    code = row.get(columns["code"])
    if _is_blank(faculty) or _is_blank(name) or _is_blank(code):
        return None

    name = _to_text(name)
    return Subject(
        code=_to_text(code),
        name=name,
        faculty=_to_text(faculty),
        year=_to_text(row.get(columns["year"])),
        section=_to_text(row.get(columns["section"])),
        lecture_hours=_to_int(row.get(columns["lecture_hours"])),
        practical_hours=_to_int(row.get(columns["practical_hours"])),
        total_load=_to_int(row.get(columns["total_load"])),
        is_lab=Subject.name_is_lab(name),
    )


def normalize_rows(rows, config=None):
    config = config or get_active_config()
    columns = config.get("columns", get_active_config()["columns"])

    subjects = []
    dropped = 0
    for row in _iter_rows(rows):
        subject = subject_from_row(row, columns)
        if subject is None:
            dropped += 1
            continue
        subjects.append(subject)

    logger.debug("normalized %d subjects, dropped %d rows", len(subjects), dropped)
    return subjects
