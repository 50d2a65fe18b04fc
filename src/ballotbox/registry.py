"""Voter registry: registration rules, duplicate checks and lookups."""

import logging
from typing import Any, Iterable, Iterator, List, Optional

from . import config
from .errors import DuplicatePhone, ValidationError
from .models import Voter

logger = logging.getLogger(__name__)


def validate_registration(
    name: str, age: Any, gender: str, phone: str, district: str
) -> List[str]:
    """Check every registration rule and return all failure messages.

    An empty list means the input is acceptable. An age that is not an
    integer fails the age rule. Rules are checked in a fixed
    order and never short-circuit.
    """
    errors = []
    if len(name.split()) < config.MIN_NAME_WORDS:
        errors.append(f"Name must have at least {config.MIN_NAME_WORDS} words.")
    # bool is an int subclass but never a valid age
    if (
        isinstance(age, bool)
        or not isinstance(age, int)
        or age <= config.MIN_AGE_EXCLUSIVE
    ):
        errors.append(f"Age must be greater than {config.MIN_AGE_EXCLUSIVE}.")
    if not gender:
        errors.append("Please select gender.")
    if not phone.startswith(config.PHONE_PREFIX):
        errors.append(f"Phone number must start with {config.PHONE_PREFIX}.")
    if not district:
        errors.append("Please select a district.")
    return errors


class VoterRegistry:
    """Ordered collection of voters keyed by phone number."""

    def __init__(self, voters: Optional[Iterable[Voter]] = None):
        self._voters: List[Voter] = list(voters or [])

    def __len__(self) -> int:
        return len(self._voters)

    def __iter__(self) -> Iterator[Voter]:
        return iter(self._voters)

    def register(
        self,
        name: str,
        age: Optional[int],
        gender: str,
        phone: str,
        district: str,
    ) -> Voter:
        """Add a new voter.

        Raises DuplicatePhone before any validation when the phone is taken,
        otherwise ValidationError carrying every failing rule.
        """
        name = (name or "").strip()
        phone = (phone or "").strip()
        gender = gender or ""
        district = district or ""

        if self.find_by_phone(phone) is not None:
            raise DuplicatePhone(phone)

        errors = validate_registration(name, age, gender, phone, district)
        if errors:
            raise ValidationError(errors)

        voter = Voter(
            name=name, age=age, gender=gender, phone=phone, district=district
        )
        self._voters.append(voter)
        logger.info("registered voter %s (%s)", phone, district)
        return voter

    def find_by_phone(self, phone: str) -> Optional[Voter]:
        return next((v for v in self._voters if v.phone == phone), None)

    def list_voters(self) -> List[Voter]:
        return list(self._voters)

    def get(self, index: int) -> Voter:
        """Return the voter at ``index`` in registration order."""
        if index < 0 or index >= len(self._voters):
            raise IndexError(f"no voter at index {index}")
        return self._voters[index]
