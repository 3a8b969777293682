# pylint: disable=redefined-outer-name

from typing import Any, Dict, List

import pytest
from mongomock_motor import AsyncMongoMockClient

from database.people import PeopleRepository


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    return AsyncMongoMockClient()


@pytest.fixture
def people_collection(mongo_client: AsyncMongoMockClient):
    return mongo_client["people_crud_test"]["people"]


@pytest.fixture
async def people(people_collection) -> PeopleRepository:
    repository = PeopleRepository(people_collection)
    await repository.ensure_indexes()
    return repository


@pytest.fixture
def burrito_payloads() -> List[Dict[str, Any]]:
    return [
        {"name": "Bob", "age": 30, "favoriteFoods": ["burritos", "tacos"]},
        {"name": "Alice", "age": 28, "favoriteFoods": ["sushi", "burritos", "pizza"]},
        {"name": "Charlie", "age": 26, "favoriteFoods": ["hamburger", "burritos"]},
        {"name": "Mary", "age": 35, "favoriteFoods": ["salad", "pasta"]},
    ]
