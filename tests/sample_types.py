# File: tests/sample_types.py
# Source and destination classes shared by the introspection, builder and CLI tests.

from dataclasses import dataclass
from typing import ClassVar, List, Optional


class Country:
    name: str = ""
    code: str = ""


class Address:
    street: str = ""
    city: str = ""
    country: Optional[Country] = None


class Order:
    total: float = 0.0


class Customer:
    """Source exposing accessor methods, an annotated attribute and a property."""

    email: str
    registry: ClassVar[dict] = {}

    def __init__(self, first_name: str = "", last_name: str = "", email: str = "",
                 address: Optional[Address] = None):
        self._first_name = first_name
        self._last_name = last_name
        self.email = email
        self._address = address

    def get_first_name(self) -> str:
        return self._first_name

    def get_address(self) -> Address:
        return self._address

    def get_orders(self) -> List[Order]:
        return []

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    def rename(self, first_name: str) -> None:
        self._first_name = first_name

    def _secret(self) -> str:
        return "hidden"


class CustomerDto:
    """Destination with plain attributes and a setter method."""

    first_name: str = ""
    full_name: str = ""
    address_city: str = ""
    address_country_name: str = ""
    orders_total: float = 0.0
    age: int = 0

    def set_email(self, value: str) -> None:
        self.email = value

    @property
    def display(self) -> str:
        return self.full_name


class Employee:
    name: str = ""
    manager: Optional["Employee"] = None


class EmployeeDto:
    name: str = ""
    manager_name: str = ""
    manager_manager_name: str = ""


class Contractor:
    agency: "UndefinedAgency"
    name: str = ""


class ContractorDto:
    agency_name: str = ""
    name: str = ""


@dataclass
class Product:
    name: str
    price: float


@dataclass
class OrderLine:
    product: Product
    quantity: int


@dataclass
class OrderLineDto:
    product_name: str = ""
    product_price: float = 0.0
    quantity: int = 0


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x: int = 0, y: int = 0):
        self.x = x
        self.y = y


class BaseEntity:
    id: int = 0

    def get_label(self) -> str:
        return "base"


class DerivedEntity(BaseEntity):
    label_text: str = ""

    def get_label(self, upper: bool) -> str:
        return "derived"


not_a_class = 42


class Labelled:
    label: str = ""


class RelabelledEntity(Labelled):
    def label(self, value: str) -> None:
        self._label = value


class LegacyCustomer:
    """Attributes only assigned in ``__init__``."""

    def __init__(self, name: str = "", address: Optional[Address] = None):
        self.name = name
        self.address = address
        self.tags = []
        self._cache = {}


class LegacyCustomerDto:
    def __init__(self):
        self.name = None
        self.address_city = None
