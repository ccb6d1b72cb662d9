"""Shared enums for models."""

from enum import Enum


class StoryState(str, Enum):
    """Well-known story states.

    The state column accepts any string; these are the values the tracker
    itself assigns or recognises.
    """

    OPEN = "open"
    STARTED = "started"
    FINISHED = "finished"
    DELIVERED = "delivered"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
