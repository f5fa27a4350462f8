"""
Hobby Planner Domain Entities
"""

from .enums import SessionType
from .session import Session
from .attendee import Attendee

__all__ = [
    "SessionType",
    "Session",
    "Attendee",
]
