"""The Person entity"""

import datetime
import logging

from dateutil.relativedelta import relativedelta

from aspects import registry
from aspects.core.entity import BaseEntity, invariant
from aspects.exceptions import InvalidStateError, ValidationError
from aspects.fields import Date, Reference, String
from aspects.utils import today

logger = logging.getLogger(__name__)


class Person(BaseEntity):
    """A person, identified by a generated `id`.

    Persons are frozen: every attribute is supplied at construction and only
    read afterwards. `age` is derived from `birth_date` on every access and
    is never stored. Names are kept exactly as given, markup included.
    """

    first_name = String(max_length=50, required=True, sanitize=False)
    last_name = String(max_length=50, required=True, sanitize=False)
    birth_date = Date(required=True)
    parent = Reference("Person")

    class Meta:
        frozen = True

    @invariant.post
    def birth_date_cannot_be_in_the_future(self):
        if self.birth_date > today():
            raise ValidationError({"birth_date": ["cannot be in the future"]})

    @property
    def full_name(self) -> str:
        """First and last name, separated by a single space"""
        return f"{self.first_name} {self.last_name}"

    @property
    def age(self) -> int:
        """Age in whole years as of today"""
        return self.age_on(today())

    def age_on(self, on: datetime.date) -> int:
        """Age in whole years on the date `on`.

        A year is only counted once its anniversary of `birth_date` is reached.
        Persons born on Feb 29 reach their anniversary on Feb 28 in non-leap
        years.
        """
        if isinstance(on, datetime.datetime):
            on = on.date()

        if on < self.birth_date:
            logger.debug(f"Age of {self} requested on {on}, before {self.birth_date}")
            raise InvalidStateError(
                f"{self.full_name} was not born yet on {on.isoformat()}"
            )

        return relativedelta(on, self.birth_date).years


registry.register("Person", Person)
