"""
errors.py - Failure taxonomy and operation results for the road registry.

Lifecycle checks raise one of the RegistryError subclasses below; the
Registry facade converts them into an OperationResult so that callers never
see an engine failure as an exception.

Module: road_registry.errors
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from road_registry.person import Person
    from road_registry.suspension import SuspensionDecision

__all__ = [
    'Reason',
    'RegistryError',
    'ValidationError',
    'BusinessRuleViolation',
    'NotFound',
    'StoreFailure',
    'OperationResult',
]


class Reason(str, Enum):
    """Reason codes attached to every rejected operation."""
    INVALID_PERSON_ID = "invalid_person_id"
    INVALID_NAME = "invalid_name"
    INVALID_ADDRESS = "invalid_address"
    INVALID_BIRTHDATE = "invalid_birthdate"
    INVALID_OFFENSE_DATE = "invalid_offense_date"
    INVALID_POINTS = "invalid_points"
    DUPLICATE_PERSON_ID = "duplicate_person_id"
    MINOR_ADDRESS_LOCKED = "minor_address_locked"
    BIRTHDATE_CHANGE_NOT_ISOLATED = "birthdate_change_not_isolated"
    PERSON_ID_LOCKED = "person_id_locked"
    PERSON_NOT_FOUND = "person_not_found"
    STORE_FAILURE = "store_failure"


class RegistryError(Exception):
    """
    Base class for registry failures.

    Attributes:
        reason (Reason): Machine readable reason code.
        message (str): Human readable description.
    """
    default_reason: Reason = Reason.STORE_FAILURE

    def __init__(self, reason: Optional[Reason] = None, message: str = ""):
        self.reason: Reason = reason or self.default_reason
        self.message: str = message or self.reason.value.replace('_', ' ')
        super().__init__(self.message)


class ValidationError(RegistryError):
    """Syntactic rule violation: identifier, name, address, date or points shape."""

    def __init__(self, reason: Reason, message: str = ""):
        super().__init__(reason, message)


class BusinessRuleViolation(RegistryError):
    """Semantic rule violation against the stored record."""

    def __init__(self, reason: Reason, message: str = ""):
        super().__init__(reason, message)


class NotFound(RegistryError):
    """The referenced person is not in the store."""
    default_reason = Reason.PERSON_NOT_FOUND


class StoreFailure(RegistryError):
    """The underlying persistence I/O failed."""
    default_reason = Reason.STORE_FAILURE


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a public registry operation.

    Attributes:
        success (bool): True if the operation completed.
        reason (Optional[Reason]): Reason code when rejected.
        error_type (Optional[str]): Failure category (ValidationError, BusinessRuleViolation,
            NotFound or StoreFailure) when rejected.
        message (str): Description of the outcome.
        person (Optional[Person]): The record as persisted, on success.
        decision (Optional[SuspensionDecision]): Suspension computation for demerit additions.
    """
    success: bool
    reason: Optional[Reason] = None
    error_type: Optional[str] = None
    message: str = ""
    person: Optional['Person'] = None
    decision: Optional['SuspensionDecision'] = None

    def __bool__(self) -> bool:
        return self.success

    @property
    def status(self) -> str:
        """'Success' or 'Failed'."""
        return "Success" if self.success else "Failed"

    @classmethod
    def ok(cls, person: Optional['Person'] = None, decision: Optional['SuspensionDecision'] = None,
           message: str = "") -> OperationResult:
        return cls(success=True, person=person, decision=decision, message=message)

    @classmethod
    def failed(cls, error: RegistryError) -> OperationResult:
        return cls(
            success=False,
            reason=error.reason,
            error_type=type(error).__name__,
            message=error.message,
        )
