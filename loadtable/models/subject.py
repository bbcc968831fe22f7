"""
loadtable/models/subject.py
===========================
Dataclass model for one schedulable subject (one faculty teaching one
subject to one section), built from a workload row.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Subject:
    code: str
    name: str
    faculty: str
    year: str = ""
    section: str = ""
    lecture_hours: int = 0
    practical_hours: int = 0
    total_load: int = 0
    is_lab: bool = False  # set once from the name by the normalizer

    @staticmethod
    def name_is_lab(name):
        """Labs are recognised by naming convention: 'lab' anywhere in the name."""
        return "lab" in str(name).lower()

    @property
    def required_hours(self):
        return self.practical_hours if self.is_lab else self.lecture_hours

    @property
    def session_type(self):
        return "Lab" if self.is_lab else "Theory"
