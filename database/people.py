"""
People Repository - CRUD facade over the people collection

Every method is a coroutine that either returns its result or raises.
Validation problems raise ``PersonValidationError`` before the store is
reached; pymongo errors are logged and re-raised unchanged.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, List, Sequence

from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from core.constants import (
    FIELD_ID, FIELD_NAME, FIELD_AGE, FIELD_FAVORITE_FOODS, FIELD_EMAIL,
    DEFAULT_ADDED_FOOD, DEFAULT_UPDATED_AGE, DEFAULT_CHAINED_FOOD, DEFAULT_CHAINED_LIMIT
)
from core.errors import PersonNotFoundError, PersonValidationError
from core.models import Person, PersonId, normalize_name, parse_person_id, validate_age
from core.utils import get_logger, describe_person

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeleteSummary:
    """Outcome of a bulk delete"""
    deleted_count: int
    acknowledged: bool = True


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise PersonValidationError(f"{field} must be a string, got {value!r}", field=field)
    return value


class PeopleRepository:
    """Data access facade for Person documents"""

    def __init__(self, collection):
        self.collection = collection

    async def ensure_indexes(self) -> None:
        """Create the people collection indexes"""
        # Sparse so that records without an email never collide
        await self.collection.create_index(FIELD_EMAIL, unique=True, sparse=True)
        await self.collection.create_index(FIELD_NAME)
        logger.info("✅ People indexes created successfully")

    # ============== CREATE ==============

    async def create_and_save_person(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create and save a single person"""
        document = Person.from_payload(payload).to_document()
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Error saving person: {e}")
            raise

        document[FIELD_ID] = result.inserted_id
        logger.info(f"Person saved successfully: {describe_person(document)}")
        return document

    async def create_many_people(self, payloads: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Create multiple people in one batch"""
        documents = [Person.from_payload(payload).to_document() for payload in payloads]
        if not documents:
            return []

        try:
            result = await self.collection.insert_many(documents)
        except PyMongoError as e:
            logger.error(f"Error creating people: {e}")
            raise

        for document, inserted_id in zip(documents, result.inserted_ids):
            document[FIELD_ID] = inserted_id
        logger.info(f"Multiple people created: {len(documents)}")
        return documents

    # ============== READ ==============

    async def find_people_by_name(self, name: str) -> List[Dict[str, Any]]:
        """Find all people with exactly the given name"""
        name = normalize_name(name)
        try:
            people = await self.collection.find({FIELD_NAME: name}).to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error finding people by name {name!r}: {e}")
            raise

        logger.info(f"People found for {name!r}: {len(people)}")
        return people

    async def find_one_person_by_food(self, food: str) -> Optional[Dict[str, Any]]:
        """Find the first person whose favorite foods contain the given food"""
        _require_text(food, FIELD_FAVORITE_FOODS)
        try:
            person = await self.collection.find_one({FIELD_FAVORITE_FOODS: food})
        except PyMongoError as e:
            logger.error(f"Error finding person by food {food!r}: {e}")
            raise

        logger.info(f"Person found by food {food!r}: {describe_person(person)}")
        return person

    async def find_person_by_id(self, person_id: PersonId) -> Optional[Dict[str, Any]]:
        """Find a person by _id"""
        object_id = parse_person_id(person_id)
        try:
            person = await self.collection.find_one({FIELD_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding person by id {object_id}: {e}")
            raise

        logger.info(f"Person found by id: {describe_person(person)}")
        return person

    async def count_people(self, query: Optional[Dict[str, Any]] = None) -> int:
        """Count people matching a query"""
        try:
            return await self.collection.count_documents(query or {})
        except PyMongoError as e:
            logger.error(f"Error counting people: {e}")
            raise

    # ============== UPDATE ==============

    async def update_person_food(self, person_id: PersonId,
                                 food: str = DEFAULT_ADDED_FOOD) -> Dict[str, Any]:
        """Append a food to a person's favorites and return the updated person

        A single atomic $push rather than load, edit and save, so concurrent
        appends to the same person are not lost.
        """
        object_id = parse_person_id(person_id)
        _require_text(food, FIELD_FAVORITE_FOODS)
        try:
            person = await self.collection.find_one_and_update(
                {FIELD_ID: object_id},
                {"$push": {FIELD_FAVORITE_FOODS: food}},
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            logger.error(f"Error in update person food {object_id}: {e}")
            raise

        if person is None:
            logger.error(f"Error in update person food: person {object_id} not found")
            raise PersonNotFoundError(object_id)

        logger.info(f"Person updated successfully: {describe_person(person)}")
        return person

    async def update_person_age(self, name: str,
                                age: int = DEFAULT_UPDATED_AGE) -> Optional[Dict[str, Any]]:
        """Set the age of the first person with the given name"""
        name = normalize_name(name)
        age = validate_age(age)
        if age is None:
            raise PersonValidationError("age is required", field=FIELD_AGE)

        try:
            person = await self.collection.find_one_and_update(
                {FIELD_NAME: name},
                {"$set": {FIELD_AGE: age}},
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            logger.error(f"Error updating person age for {name!r}: {e}")
            raise

        logger.info(f"Person age updated: {describe_person(person)}")
        return person

    # ============== DELETE ==============

    async def remove_person_by_id(self, person_id: PersonId) -> Optional[Dict[str, Any]]:
        """Delete a person by _id, returning the removed document or None"""
        object_id = parse_person_id(person_id)
        try:
            person = await self.collection.find_one_and_delete({FIELD_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error removing person {object_id}: {e}")
            raise

        logger.info(f"Person removed: {describe_person(person)}")
        return person

    async def remove_all_people_by_name(self, name: str) -> DeleteSummary:
        """Delete every person with the given name"""
        name = normalize_name(name)
        try:
            result = await self.collection.delete_many({FIELD_NAME: name})
        except PyMongoError as e:
            logger.error(f"Error removing people named {name!r}: {e}")
            raise

        summary = DeleteSummary(deleted_count=result.deleted_count, acknowledged=result.acknowledged)
        logger.info(f"People removed for {name!r}: {summary.deleted_count}")
        return summary

    # ============== CHAINED QUERY ==============

    async def find_burrito_lovers(self, food: str = DEFAULT_CHAINED_FOOD,
                                  limit: int = DEFAULT_CHAINED_LIMIT) -> List[Dict[str, Any]]:
        """Find people who like a food, sorted by name, limited, without age"""
        _require_text(food, FIELD_FAVORITE_FOODS)
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise PersonValidationError(f"limit must be a positive integer, got {limit!r}")

        try:
            cursor = self.collection.find(
                {FIELD_FAVORITE_FOODS: food},
                {FIELD_AGE: 0}
            ).sort(FIELD_NAME, ASCENDING).limit(limit)
            people = await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error(f"Error finding {food} lovers: {e}")
            raise

        logger.info(f"{food.capitalize()} lovers found: {[p.get(FIELD_NAME) for p in people]}")
        return people
