"""
loadtable/scheduler/timetable_scheduler.py

Greedy weekly timetable builder.
- break and lunch periods written first, never overwritten
- labs placed before theory, heavier load first within each group
- labs take two back-to-back periods on one day, theory takes single periods
- a faculty member or section already booked at a period index on any day
  blocks that index on every day
- subjects that run out of free periods are left short, no error
"""

import logging
import random

from loadtable.config.time_config import (
    BREAK_LABEL,
    BREAK_SLOT,
    DAYS,
    LUNCH_LABEL,
    LUNCH_SLOT,
    TIME_SLOTS,
    get_active_config,
)
from loadtable.models.room import RoomAllocator
from loadtable.models.timetable import Session, SummaryEntry, Timetable

logger = logging.getLogger(__name__)


class TimetableScheduler:
    def __init__(self, config=None, seed=None, rng=None):
        self.config = config or get_active_config()
        self.days = self.config.get("working_days", list(DAYS))
        self.time_slots = self.config.get("time_slots", list(TIME_SLOTS))

        self.break_slot = self.config.get("break_slot", BREAK_SLOT)
        self.lunch_slot = self.config.get("lunch_slot", LUNCH_SLOT)
        self.break_label = self.config.get("break_label", BREAK_LABEL)
        self.lunch_label = self.config.get("lunch_label", LUNCH_LABEL)

        self.rng = rng if rng is not None else random.Random(seed)
        self.rooms = RoomAllocator(self.config, self.rng)

    # ---------- helpers ----------
    def _new_timetable(self):
        timetable = Timetable(self.days, self.time_slots)
        timetable.reserve(self.break_slot, self.break_label)
        timetable.reserve(self.lunch_slot, self.lunch_label)
        return timetable

    def _order_subjects(self, subjects):
        # labs need two free periods in a row, so they claim space first
        return sorted(subjects, key=lambda s: (not s.is_lab, -s.total_load))

    def _is_slot_available(self, timetable, day, slot, faculty, section):
        if not timetable.is_empty(day, slot):
            return False
        # the period index is shared across the week for faculty and section
        for d in self.days:
            booked = timetable.cell(d, slot)
            if isinstance(booked, Session) and (booked.faculty == faculty or booked.section == section):
                return False
        return True

    def _make_session(self, subject):
        return Session(
            subject=subject.name,
            faculty=subject.faculty,
            code=subject.code,
            section=subject.section,
            room=self.rooms.room_for(subject.is_lab),
        )

    # ---------- placement ----------
    def _place_lab(self, timetable, subject, hours_needed):
        hours_assigned = 0
        for day in self.days:
            if hours_assigned >= hours_needed:
                break
            for slot in range(len(self.time_slots) - 2):
                if hours_assigned >= hours_needed:
                    break
                if (self._is_slot_available(timetable, day, slot, subject.faculty, subject.section) and
                        self._is_slot_available(timetable, day, slot + 1, subject.faculty, subject.section)):
                    session = self._make_session(subject)
                    timetable.place(day, slot, session)
                    timetable.place(day, slot + 1, session)
                    hours_assigned += 2
        return hours_assigned

    def _place_theory(self, timetable, subject, hours_needed):
        hours_assigned = 0
        for day in self.days:
            if hours_assigned >= hours_needed:
                break
            for slot in range(len(self.time_slots)):
                if hours_assigned >= hours_needed:
                    break
                if self._is_slot_available(timetable, day, slot, subject.faculty, subject.section):
                    timetable.place(day, slot, self._make_session(subject))
                    hours_assigned += 1
        return hours_assigned

    # ---------- main scheduling ----------
    def generate(self, subjects):
        timetable = self._new_timetable()
        ordered = self._order_subjects(subjects)
        assigned = []

        for subject in ordered:
            hours_needed = subject.required_hours
            if subject.is_lab:
                hours_assigned = self._place_lab(timetable, subject, hours_needed)
            else:
                hours_assigned = self._place_theory(timetable, subject, hours_needed)
            if hours_assigned < hours_needed:
                logger.debug("%s (%s, %s) placed %d of %d hours",
                             subject.code, subject.faculty, subject.section or "-",
                             hours_assigned, hours_needed)
            assigned.append(hours_assigned)

        timetable.subjects = [SummaryEntry.from_subject(s) for s in ordered]
        timetable.assigned_hours = assigned
        logger.info("generated timetable for %d subjects", len(ordered))
        return timetable
