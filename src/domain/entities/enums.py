"""
Hobby Planner Domain Enums
"""

from enum import Enum


class SessionType(str, Enum):
    """Session visibility"""

    public = "public"
    private = "private"
