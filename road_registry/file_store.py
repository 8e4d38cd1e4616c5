"""
file_store.py - Flat-file storage for people and demerit points.

Handles reading and writing the two registry data files:
    - people.txt: one person per line, fields separated by '###'
      (id###first###last###address###birthdate###suspended)
    - demerit_points.txt: one offense per line, 'id|DD-MM-YYYY|points'

Person fields use '###' so that the '|' inside addresses never collides with
the record separator.

Module: road_registry.file_store
"""

import csv
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from .errors import StoreFailure
from .offense import OffenseEntry
from .person import Person

logger = logging.getLogger(__name__)

PERSON_DELIMITER = "###"
_DELIMITER_CHAR = "#"
OFFENSE_DELIMITER = "|"
PERSON_MIN_FIELDS = 5


def _ensure_parent_dir(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f'Could not create data directory {path.parent}: {e}')
        raise StoreFailure(message=f'Could not create data directory {path.parent}: {e}') from e


class FilePersonStore:
    """
    PersonStore on a '###'-delimited text file.

    The file is read on every lookup so that external edits are picked up;
    writes rewrite the whole file except for a plain insert, which appends.

    Attributes:
        person_file (Path): Path to the people file.
    """

    def __init__(self, person_file: Union[str, Path]):
        self.person_file = Path(person_file)
        _ensure_parent_dir(self.person_file)

    @staticmethod
    def format_line(person: Person) -> str:
        """
        Serialise a person as one delimited line (without newline).

        Raises:
            StoreFailure: If a field contains the delimiter or a line break, or starts or
                ends with '#' (it would merge with the neighbouring delimiter).
        """
        values = [person.person_id, person.first_name, person.last_name, person.address, person.birthdate]
        for value in values:
            if (PERSON_DELIMITER in value or '\n' in value or '\r' in value
                    or value.startswith(_DELIMITER_CHAR) or value.endswith(_DELIMITER_CHAR)):
                raise StoreFailure(message=f'Field {value!r} of {person.person_id} cannot be stored in {PERSON_DELIMITER}-delimited file')
        values.append('true' if person.suspended else 'false')
        return PERSON_DELIMITER.join(values)

    @staticmethod
    def parse_line(line: str) -> Optional[Person]:
        """
        Parse one line of the people file.

        Args:
            line (str): Line without its newline.
        Returns:
            Optional[Person]: The record, or None if the line has too few fields.
        """
        parts = line.split(PERSON_DELIMITER)
        if len(parts) < PERSON_MIN_FIELDS:
            return None
        suspended = len(parts) > PERSON_MIN_FIELDS and parts[5].strip().lower() == 'true'
        return Person(
            person_id=parts[0],
            first_name=parts[1],
            last_name=parts[2],
            address=parts[3],
            birthdate=parts[4],
            suspended=suspended,
        )

    def read_people(self) -> Dict[str, Person]:
        """
        Read every person from the file.

        The first line for an identifier wins. Malformed lines are skipped.

        Returns:
            Dict[str, Person]: People keyed by identifier, in file order.
        """
        people: Dict[str, Person] = {}
        if not os.path.exists(self.person_file):
            return people
        try:
            with open(self.person_file, 'r', encoding='utf-8') as f:
                for line_num, line in enumerate(f, start=1):
                    line = line.rstrip('\r\n')
                    if not line:
                        continue
                    person = self.parse_line(line)
                    if person is None:
                        logger.warning(f'Skipping malformed line {line_num} in {self.person_file}')
                        continue
                    people.setdefault(person.person_id, person)
        except OSError as e:
            logger.error(f'Error reading person file {self.person_file}: {e}')
            raise StoreFailure(message=f'Error reading person file: {e}') from e
        return people

    def write_people(self, people: Dict[str, Person]) -> None:
        lines = [self.format_line(p) for p in people.values()]
        try:
            with open(self.person_file, 'w', encoding='utf-8') as f:
                for line in lines:
                    f.write(line + '\n')
        except OSError as e:
            logger.error(f'Error writing person file {self.person_file}: {e}')
            raise StoreFailure(message=f'Error writing person file: {e}') from e

    def get(self, person_id: str) -> Optional[Person]:
        return self.read_people().get(person_id)

    def exists(self, person_id: str) -> bool:
        return self.get(person_id) is not None

    def put(self, person: Person) -> None:
        people = self.read_people()
        if person.person_id in people:
            people[person.person_id] = person
            self.write_people(people)
            return
        line = self.format_line(person)
        try:
            with open(self.person_file, 'a', encoding='utf-8') as f:
                f.write(line + '\n')
        except OSError as e:
            logger.error(f'Error saving person to file {self.person_file}: {e}')
            raise StoreFailure(message=f'Error saving person to file: {e}') from e

    def replace(self, old_id: str, person: Person) -> None:
        """Replace the line for old_id in place, keeping the position of the record in the file."""
        people = self.read_people()
        updated: Dict[str, Person] = {}
        for person_id, existing in people.items():
            if person_id == old_id:
                updated[person.person_id] = person
            elif person_id != person.person_id:
                updated[person_id] = existing
        if old_id not in people:
            updated[person.person_id] = person
        self.write_people(updated)


class FileOffenseStore:
    """
    OffenseStore on a '|'-delimited text file, read and written with the csv module.

    Attributes:
        offense_file (Path): Path to the demerit points file.
    """

    def __init__(self, offense_file: Union[str, Path]):
        self.offense_file = Path(offense_file)
        _ensure_parent_dir(self.offense_file)

    def read_entries(self) -> List[OffenseEntry]:
        """
        Read every offense entry from the file, skipping malformed lines.

        Returns:
            List[OffenseEntry]: Entries in file order.
        """
        entries: List[OffenseEntry] = []
        if not os.path.exists(self.offense_file):
            return entries
        try:
            with open(self.offense_file, newline='', encoding='utf-8') as f:
                csv_reader = csv.reader(f, delimiter=OFFENSE_DELIMITER)
                for row in csv_reader:
                    if not row:
                        continue
                    try:
                        entry = OffenseEntry.from_dict(
                            {'person_id': row[0], 'offense_date': row[1], 'points': row[2]}
                        )
                    except (IndexError, TypeError, ValueError):
                        logger.warning(f'Skipping malformed line {csv_reader.line_num} in {self.offense_file}')
                        continue
                    entries.append(entry)
        except csv.Error as e:
            logger.error(f'CSV error reading demerit points file {self.offense_file}: {e}')
            raise StoreFailure(message=f'CSV error reading demerit points file: {e}') from e
        except OSError as e:
            logger.error(f'Error reading demerit points file {self.offense_file}: {e}')
            raise StoreFailure(message=f'Error reading demerit points file: {e}') from e
        return entries

    def list_entries(self, person_id: str) -> List[OffenseEntry]:
        return [e for e in self.read_entries() if e.person_id == person_id]

    def append_entry(self, entry: OffenseEntry) -> None:
        row = entry.as_dict()
        try:
            with open(self.offense_file, 'a', newline='', encoding='utf-8') as f:
                csv_writer = csv.writer(f, delimiter=OFFENSE_DELIMITER, lineterminator='\n')
                csv_writer.writerow([row['person_id'], row['offense_date'], row['points']])
        except csv.Error as e:
            logger.error(f'CSV error saving demerit points: {e}')
            raise StoreFailure(message=f'CSV error saving demerit points: {e}') from e
        except OSError as e:
            logger.error(f'Error saving demerit points to file {self.offense_file}: {e}')
            raise StoreFailure(message=f'Error saving demerit points to file: {e}') from e
