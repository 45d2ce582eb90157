"""
JSON Record Loader.

Reads the training record set: a JSON array of people, each with a
nested array of completions.

    [
      {
        "name": "Alice",
        "completions": [
          {"name": "X-Ray Safety", "timestamp": "07/01/2023", "expires": "10/15/2023"}
        ]
      }
    ]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from training_reports.domain.entities import Person
from training_reports.resilience.error_handler import ParseError

logger = logging.getLogger(__name__)

_PEOPLE = TypeAdapter(List[Person])


class JsonRecordLoader:
    """Loads people and their completions from a JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Initialize loader.

        Args:
            path: Location of the JSON record set
        """
        self.path = Path(path)

    def load(self) -> List[Person]:
        """
        Load all people in file order.

        Raises:
            ParseError: If the file is missing, is not UTF-8 JSON, or does
                        not match the expected people/completions shape
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                raw = json.load(f)
        except OSError as e:
            raise ParseError(f"Cannot read {self.path}: {e}", self.path) from e
        except UnicodeDecodeError as e:
            raise ParseError(f"{self.path} is not UTF-8 text: {e}", self.path) from e
        except json.JSONDecodeError as e:
            raise ParseError(f"Malformed JSON in {self.path}: {e}", self.path) from e

        try:
            people = _PEOPLE.validate_python(raw)
        except ValidationError as e:
            raise ParseError(
                f"Invalid record set in {self.path}: "
                f"{e.error_count()} validation error(s)\n{e}",
                self.path,
            ) from e

        logger.info(f"Loaded {len(people)} people from {self.path}")
        return people
