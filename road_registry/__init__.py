"""road_registry package: Person records, demerit points and licence suspension rules."""

from road_registry.address import Address
from road_registry.config import RegistryConfig
from road_registry.errors import (
    BusinessRuleViolation,
    NotFound,
    OperationResult,
    Reason,
    RegistryError,
    StoreFailure,
    ValidationError,
)
from road_registry.file_store import FileOffenseStore, FilePersonStore
from road_registry.offense import OffenseEntry
from road_registry.person import Person, PersonPatch
from road_registry.registry import Registry
from road_registry.stores import InMemoryOffenseStore, InMemoryPersonStore, OffenseStore, PersonStore
from road_registry.suspension import SuspensionDecision, SuspensionRule

__all__ = [
    "Address",
    "BusinessRuleViolation",
    "FileOffenseStore",
    "FilePersonStore",
    "InMemoryOffenseStore",
    "InMemoryPersonStore",
    "NotFound",
    "OffenseEntry",
    "OffenseStore",
    "OperationResult",
    "Person",
    "PersonPatch",
    "PersonStore",
    "Reason",
    "Registry",
    "RegistryConfig",
    "RegistryError",
    "StoreFailure",
    "SuspensionDecision",
    "SuspensionRule",
    "ValidationError",
]
