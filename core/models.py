"""
Data models for the people facade
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Union

from bson import ObjectId
from bson.errors import InvalidId

from .constants import (
    FIELD_ID, FIELD_NAME, FIELD_AGE, FIELD_FAVORITE_FOODS, FIELD_EMAIL
)
from .errors import PersonValidationError, InvalidPersonIdError


PersonId = Union[ObjectId, str]


def parse_person_id(person_id: PersonId) -> ObjectId:
    """Convert an ObjectId or its 24-hex string form, rejecting anything else"""
    if isinstance(person_id, ObjectId):
        return person_id
    if not isinstance(person_id, str):
        raise InvalidPersonIdError(person_id)
    try:
        return ObjectId(person_id)
    except (InvalidId, TypeError):
        raise InvalidPersonIdError(person_id) from None


def normalize_name(name: Any) -> str:
    """Names are stored and matched with surrounding whitespace trimmed"""
    if not isinstance(name, str) or not name.strip():
        raise PersonValidationError("Name is required", field=FIELD_NAME)
    return name.strip()


def validate_age(age: Any) -> Optional[int]:
    """Age is optional, but when given it must be a plain integer"""
    if age is None:
        return None
    # bool is an int subclass
    if isinstance(age, bool) or not isinstance(age, int):
        raise PersonValidationError(f"age must be an integer, got {age!r}", field=FIELD_AGE)
    return age


@dataclass
class Person:
    """A person record as stored in the people collection"""

    name: str
    age: Optional[int] = None
    favorite_foods: List[str] = field(default_factory=list)
    email: Optional[str] = None

    def __post_init__(self):
        """Normalise and validate fields"""
        self.name = normalize_name(self.name)

        self.age = validate_age(self.age)

        if not isinstance(self.favorite_foods, (list, tuple)) or not all(
            isinstance(food, str) for food in self.favorite_foods
        ):
            raise PersonValidationError(
                "favoriteFoods must be a list of strings", field=FIELD_FAVORITE_FOODS
            )
        self.favorite_foods = list(self.favorite_foods)

        if self.email is not None:
            if not isinstance(self.email, str):
                raise PersonValidationError("email must be a string", field=FIELD_EMAIL)
            self.email = self.email.strip() or None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'Person':
        """Build from a caller supplied payload; unknown keys are dropped"""
        if not isinstance(payload, dict):
            raise PersonValidationError(f"Person payload must be a mapping, got {type(payload).__name__}")
        if FIELD_ID in payload:
            raise PersonValidationError("_id is assigned by the store", field=FIELD_ID)

        favorite_foods = payload.get(FIELD_FAVORITE_FOODS)
        if favorite_foods is None:
            favorite_foods = []

        return cls(
            name=payload.get(FIELD_NAME),
            age=payload.get(FIELD_AGE),
            favorite_foods=favorite_foods,
            email=payload.get(FIELD_EMAIL),
        )

    def to_document(self) -> Dict[str, Any]:
        """Convert to the stored document layout, omitting absent optionals"""
        document: Dict[str, Any] = {
            FIELD_NAME: self.name,
            FIELD_FAVORITE_FOODS: list(self.favorite_foods),
        }
        if self.age is not None:
            document[FIELD_AGE] = self.age
        if self.email is not None:
            document[FIELD_EMAIL] = self.email
        return document

