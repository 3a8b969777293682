"""
Exceptions raised by the people facade

Store and connectivity failures are not wrapped: pymongo's own
``PyMongoError`` subclasses (``DuplicateKeyError``, ``ConnectionFailure``...)
reach the caller unchanged.
"""

from typing import Any, Optional


class PeopleError(Exception):
    """Base class for errors raised by this package"""


class PersonValidationError(PeopleError):
    """A payload or argument was rejected before reaching the store"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidPersonIdError(PersonValidationError):
    """The given identifier is not a valid ObjectId"""

    def __init__(self, person_id: Any):
        super().__init__(f"Invalid person id: {person_id!r}", field="_id")
        self.person_id = person_id


class PersonNotFoundError(PeopleError):
    """No person exists with the given identifier"""

    def __init__(self, person_id: Any):
        super().__init__(f"Person not found: {person_id}")
        self.person_id = person_id
