"""
loadtable/models/timetable.py
=============================
Weekly grid of sessions (day -> nine periods) plus the flat subject summary
returned alongside it.
"""

from dataclasses import dataclass, asdict

import pandas as pd


@dataclass(frozen=True)
class Session:
    subject: str
    faculty: str
    code: str
    section: str
    room: str

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ReservedCell:
    label: str  # "Break" or "LUNCH"

    def to_dict(self):
        return {"subject": self.label, "faculty": "-", "code": "-", "room": "-"}


@dataclass(frozen=True)
class SummaryEntry:
    code: str
    name: str
    faculty: str
    section: str
    type: str  # "Lab" / "Theory"

    @classmethod
    def from_subject(cls, subject):
        return cls(
            code=subject.code,
            name=subject.name,
            faculty=subject.faculty,
            section=subject.section,
            type=subject.session_type,
        )


class Timetable:
    def __init__(self, days, time_slots):
        self.days = list(days)
        self.time_slots = list(time_slots)
        self.schedule = {d: [None] * len(self.time_slots) for d in self.days}
        self.subjects = []
        # periods placed per subject, aligned with self.subjects
        self.assigned_hours = []

    # ---------- cells ----------
    def cell(self, day, slot):
        return self.schedule[day][slot]

    def is_empty(self, day, slot):
        return self.schedule[day][slot] is None

    def place(self, day, slot, value):
        if not self.is_empty(day, slot):
            raise ValueError(f"cell {day} {self.time_slots[slot]} is already occupied")
        self.schedule[day][slot] = value

    def reserve(self, slot, label):
        for day in self.days:
            self.place(day, slot, ReservedCell(label))

    def sessions(self):
        """Yield (day, slot, session) for every cell holding a class, in grid order."""
        for day in self.days:
            for slot, value in enumerate(self.schedule[day]):
                if isinstance(value, Session):
                    yield day, slot, value

    def hours_for(self, subject):
        """Count cells with this subject's code, faculty and section.

        Identical workload rows share that identity, so their cells are counted
        together here; assigned_hours holds the per-row figure.
        """
        return sum(
            1 for _, _, s in self.sessions()
            if s.code == subject.code and s.faculty == subject.faculty and s.section == subject.section
        )

    # ---------- output ----------
    def to_dict(self):
        return {
            "schedule": {
                day: [None if value is None else value.to_dict() for value in self.schedule[day]]
                for day in self.days
            },
            "subjects": [asdict(entry) for entry in self.subjects],
        }

    def to_frame(self):
        def render(value):
            if value is None:
                return ""
            if isinstance(value, ReservedCell):
                return value.label
            return f"{value.code} - {value.subject} ({value.faculty}, {value.room})"

        data = {day: [render(v) for v in self.schedule[day]] for day in self.days}
        df = pd.DataFrame(data, index=self.time_slots)
        df.index.name = "Slot"
        return df
