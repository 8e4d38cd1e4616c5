"""
registry.py - Public operations of the road registry.

Wires the person and offense stores to the lifecycle checks and the
suspension rule, and reports every rejection as an OperationResult.

Module: road_registry.registry
"""
from __future__ import annotations

__all__ = ['Registry']

import logging
from dataclasses import replace
from datetime import date as _date
from pathlib import Path
from typing import Callable, List, Optional

from .config import RegistryConfig
from .errors import OperationResult, RegistryError
from .file_store import FileOffenseStore, FilePersonStore
from .lifecycle import check_create, check_offense, check_update, require_person, stored_birth_date
from .offense import OffenseEntry
from .person import Person, PersonPatch
from .stores import InMemoryOffenseStore, InMemoryPersonStore, OffenseStore, PersonStore
from .suspension import SuspensionRule

logger = logging.getLogger(__name__)


class Registry:
    """
    Public operations of the road registry.

    Every operation returns an OperationResult; validation, business rule,
    not-found and store failures are reported through it rather than raised.
    """

    def __init__(
        self,
        person_store: PersonStore,
        offense_store: OffenseStore,
        config: Optional[RegistryConfig] = None,
        today: Optional[Callable[[], _date]] = None,
    ) -> None:
        """
        Initialize the registry with its stores.

        Args:
            person_store: Storage for person records
            offense_store: Storage for offense entries
            config: Rule configuration. If None, uses the bundled config.yaml
            today: Callable returning the current date (defaults to date.today)
        """
        self.person_store = person_store
        self.offense_store = offense_store
        self.config = config or RegistryConfig()
        self.today = today or _date.today
        self.suspension_rule = SuspensionRule.from_config(self.config)

    @classmethod
    def from_config(cls, config: Optional[RegistryConfig] = None, config_yaml: Optional[Path] = None,
                    today: Optional[Callable[[], _date]] = None) -> Registry:
        """
        Build a file-backed registry using the data paths in the configuration.

        Args:
            config: Configuration instance; takes precedence over config_yaml
            config_yaml: Path to a YAML config file
            today: Callable returning the current date
        """
        if config is None:
            config = RegistryConfig.from_yaml(config_yaml) if config_yaml else RegistryConfig()
        return cls(
            person_store=FilePersonStore(config.person_path),
            offense_store=FileOffenseStore(config.offense_path),
            config=config,
            today=today,
        )

    @classmethod
    def in_memory(cls, config: Optional[RegistryConfig] = None,
                  today: Optional[Callable[[], _date]] = None) -> Registry:
        return cls(InMemoryPersonStore(), InMemoryOffenseStore(), config=config, today=today)

    def _rejected(self, operation: str, subject: str, error: RegistryError) -> OperationResult:
        logger.info(f"{operation} rejected for {subject}: {error.reason.value} ({error.message})")
        return OperationResult.failed(error)

    def add_person(self, candidate: Person) -> OperationResult:
        """
        Add a new person.

        The record is stored with suspended=False regardless of the candidate value.

        Args:
            candidate: Proposed record

        Returns:
            OperationResult with the stored person on success
        """
        try:
            check_create(candidate, self.person_store, self.today())
            person = replace(candidate, suspended=False)
            self.person_store.put(person)
        except RegistryError as e:
            return self._rejected("add_person", candidate.person_id, e)
        logger.info(f"Added {person}")
        return OperationResult.ok(person=person)

    def update_personal_details(self, existing_id: str, candidate: Person) -> OperationResult:
        """
        Replace the personal details of an existing person.

        The suspension status is always carried over from the stored record.
        A changed identifier moves the record to the new key. Offense history is
        not re-keyed: entries recorded under the old identifier stay under it and
        no longer count towards the renamed person.

        Args:
            existing_id: Identifier of the stored record
            candidate: Proposed replacement details

        Returns:
            OperationResult with the stored person on success
        """
        try:
            existing = require_person(self.person_store, existing_id)
            check_update(existing, candidate, self.person_store, self.today(), minor_age=self.config.minor_age)
            person = replace(candidate, suspended=existing.suspended)
            self.person_store.replace(existing_id, person)
        except RegistryError as e:
            return self._rejected("update_personal_details", existing_id, e)
        logger.info(f"Updated {existing_id} -> {person}")
        return OperationResult.ok(person=person)

    def patch_personal_details(self, existing_id: str, patch: PersonPatch) -> OperationResult:
        """Apply a PersonPatch to the stored record and update it under the same rules."""
        try:
            existing = require_person(self.person_store, existing_id)
        except RegistryError as e:
            return self._rejected("patch_personal_details", existing_id, e)
        return self.update_personal_details(existing_id, patch.apply(existing))

    def add_demerit_points(self, person_id: str, offense_date: str, points: int) -> OperationResult:
        """
        Record an offense and recompute the person's suspension status.

        The person record is written before the offense entry. If the second
        write fails the first is not rolled back: the person keeps the new
        suspension status while the offense log lacks the entry.

        Args:
            person_id: Identifier of the offending person
            offense_date: Offense date, DD-MM-YYYY, not in the future
            points: Demerit points, 1 to 6

        Returns:
            OperationResult with the updated person and the SuspensionDecision on success
        """
        try:
            parsed_date = check_offense(offense_date, points, self.today(),
                                        self.config.min_points, self.config.max_points)
            existing = require_person(self.person_store, person_id)
            entry = OffenseEntry(person_id=person_id, offense_date=parsed_date, points=points)
            history = self.offense_store.list_entries(person_id) + [entry]
            decision = self.suspension_rule.evaluate(history, parsed_date, stored_birth_date(existing))
            person = existing.with_suspension(decision.suspended)
            self.person_store.put(person)
            self.offense_store.append_entry(entry)
        except RegistryError as e:
            return self._rejected("add_demerit_points", str(person_id), e)
        logger.info(
            f"Added {points} demerit points for {person_id} on {offense_date}: "
            f"{decision.total_points} points in window, suspended={decision.suspended}"
        )
        return OperationResult.ok(person=person, decision=decision)

    def get_person(self, person_id: str) -> Optional[Person]:
        return self.person_store.get(person_id)

    def get_demerit_points(self, person_id: str) -> List[OffenseEntry]:
        """All offense entries recorded for a person, oldest first."""
        return sorted(self.offense_store.list_entries(person_id), key=lambda e: e.offense_date)

    def is_suspended(self, person_id: str) -> bool:
        person = self.person_store.get(person_id)
        return bool(person and person.suspended)
