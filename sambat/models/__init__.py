"""
Data Models Package

This package contains the Pydantic models shared by the calendar engine
and its callers.
"""

from sambat.models.date import (
    DEFAULT_ANCHOR,
    AnchorCorrespondence,
    BsDate,
)

__all__ = [
    "DEFAULT_ANCHOR",
    "AnchorCorrespondence",
    "BsDate",
]
