"""
loadtable/models/room.py
========================
Room labelling for placed sessions. Labs draw a room number uniformly from
the configured lab rooms; theory always goes to the lecture hall.
"""

import random


class RoomAllocator:
    def __init__(self, config, rng=None):
        self.lab_prefix = config.get("lab_room_prefix", "CSE LAB")
        self.lab_count = config.get("lab_room_count", 5)
        self.theory_room = config.get("theory_room", "LT-16")
        # anything with randint(a, b); a seeded random.Random for reproducible runs
        self.rng = rng if rng is not None else random.Random()

    def lab_room(self):
        return f"{self.lab_prefix} {self.rng.randint(1, self.lab_count)}"

    def room_for(self, is_lab):
        return self.lab_room() if is_lab else self.theory_room
