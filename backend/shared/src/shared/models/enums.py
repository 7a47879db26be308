"""Enumeration types for TinyHouse data models."""

from enum import Enum


class ListingType(str, Enum):
    """Kind of property a listing describes."""

    APARTMENT = "APARTMENT"
    HOUSE = "HOUSE"


class UploadStatus(str, Enum):
    """Status reported by the image upload control."""

    UPLOADING = "uploading"
    DONE = "done"
    ERROR = "error"
