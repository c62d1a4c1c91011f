# File: tests/future_types.py
# Classes whose annotations are all strings, one of them naming an undefined type.

from __future__ import annotations

from typing import ClassVar, Optional


class Street:
    name: str = ""


class Location:
    city: str = ""
    street: Street = None


class Supplier:
    location: Location
    agency: UndefinedAgency  # noqa: F821
    parent: Optional[Supplier] = None
    code: str = ""
    registry: ClassVar[dict] = {}


class SupplierDto:
    location_city: str = ""
    location_street_name: str = ""
    agency_name: str = ""
    parent_code: str = ""
    code: str = ""
