# pylint: disable=redefined-outer-name

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from core.errors import InvalidPersonIdError, PersonNotFoundError, PersonValidationError
from database.people import DeleteSummary, PeopleRepository


# ============== CREATE ==============

async def test_create_without_name_fails_before_reaching_store(people: PeopleRepository):
    with pytest.raises(PersonValidationError):
        await people.create_and_save_person({"age": 25})
    assert await people.count_people() == 0


async def test_create_with_only_name_assigns_distinct_ids(people: PeopleRepository):
    first = await people.create_and_save_person({"name": "John Doe"})
    second = await people.create_and_save_person({"name": "John Doe"})

    assert isinstance(first["_id"], ObjectId)
    assert first["_id"] != second["_id"]
    assert first["favoriteFoods"] == []
    assert "age" not in first


async def test_create_many_yields_one_record_per_payload(people: PeopleRepository, burrito_payloads):
    created = await people.create_many_people(burrito_payloads)

    assert len(created) == len(burrito_payloads)
    assert len({person["_id"] for person in created}) == len(burrito_payloads)
    assert [person["name"] for person in created] == [p["name"] for p in burrito_payloads]
    assert await people.count_people() == len(burrito_payloads)


async def test_create_many_with_empty_sequence(people: PeopleRepository):
    assert await people.create_many_people([]) == []


async def test_create_many_validates_every_payload_first(people: PeopleRepository):
    with pytest.raises(PersonValidationError):
        await people.create_many_people([{"name": "Alice"}, {"age": 3}])
    assert await people.count_people() == 0


async def test_duplicate_email_is_a_store_error(people: PeopleRepository):
    await people.create_and_save_person({"name": "Alice", "email": "a@example.com"})
    with pytest.raises(DuplicateKeyError):
        await people.create_and_save_person({"name": "Alicia", "email": "a@example.com"})


async def test_people_without_email_do_not_collide(people: PeopleRepository):
    await people.create_and_save_person({"name": "Alice"})
    await people.create_and_save_person({"name": "Bob"})
    assert await people.count_people() == 2


# ============== READ ==============

async def test_find_by_name_returns_exactly_the_matching_record(people: PeopleRepository):
    alice = await people.create_and_save_person({"name": "Alice", "age": 28})
    await people.create_and_save_person({"name": "Bob"})

    found = await people.find_people_by_name("Alice")

    assert [person["_id"] for person in found] == [alice["_id"]]


async def test_find_by_name_without_match_is_empty(people: PeopleRepository):
    assert await people.find_people_by_name("Nobody") == []


async def test_find_one_by_food(people: PeopleRepository, burrito_payloads):
    await people.create_many_people(burrito_payloads)

    found = await people.find_one_person_by_food("pizza")

    assert found is not None
    assert "pizza" in found["favoriteFoods"]


async def test_find_one_by_food_without_match_is_none(people: PeopleRepository, burrito_payloads):
    await people.create_many_people(burrito_payloads)
    assert await people.find_one_person_by_food("lasagna") is None


async def test_round_trip_keeps_food_order(people: PeopleRepository):
    foods = ["sushi", "burritos", "pizza", "sushi"]
    created = await people.create_and_save_person({"name": "Alice", "favoriteFoods": foods})

    found = await people.find_person_by_id(str(created["_id"]))

    assert found["favoriteFoods"] == foods


async def test_find_by_unknown_id_is_none(people: PeopleRepository):
    assert await people.find_person_by_id(ObjectId()) is None


@pytest.mark.parametrize(
    "operation",
    ["find_person_by_id", "update_person_food", "remove_person_by_id"],
)
async def test_malformed_id_is_a_validation_error(people: PeopleRepository, operation):
    with pytest.raises(InvalidPersonIdError):
        await getattr(people, operation)("not-an-object-id")


# ============== UPDATE ==============

async def test_update_food_appends_hamburger(people: PeopleRepository):
    created = await people.create_and_save_person({"name": "Alice", "favoriteFoods": ["sushi"]})

    updated = await people.update_person_food(created["_id"])

    assert updated["favoriteFoods"] == ["sushi", "hamburger"]
    stored = await people.find_person_by_id(created["_id"])
    assert stored["favoriteFoods"] == ["sushi", "hamburger"]


async def test_update_food_on_missing_person_raises_not_found(people: PeopleRepository):
    missing_id = ObjectId()
    with pytest.raises(PersonNotFoundError) as exc_info:
        await people.update_person_food(missing_id)
    assert exc_info.value.person_id == missing_id


async def test_update_age_sets_and_returns_new_age(people: PeopleRepository, burrito_payloads):
    await people.create_many_people(burrito_payloads)

    updated = await people.update_person_age("Bob", 20)

    assert updated["name"] == "Bob"
    assert updated["age"] == 20
    [stored] = await people.find_people_by_name("Bob")
    assert stored["age"] == 20


async def test_update_age_defaults_to_twenty(people: PeopleRepository):
    await people.create_and_save_person({"name": "Bob", "age": 30})
    updated = await people.update_person_age("Bob")
    assert updated["age"] == 20


async def test_update_age_without_match_is_none(people: PeopleRepository):
    assert await people.update_person_age("Bob", 20) is None


async def test_update_age_rejects_non_integer(people: PeopleRepository):
    with pytest.raises(PersonValidationError):
        await people.update_person_age("Bob", "twenty")


# ============== DELETE ==============

async def test_remove_by_id_returns_removed_document(people: PeopleRepository):
    created = await people.create_and_save_person({"name": "Alice"})

    removed = await people.remove_person_by_id(created["_id"])

    assert removed["_id"] == created["_id"]
    assert await people.find_person_by_id(created["_id"]) is None


async def test_remove_by_unknown_id_is_benign(people: PeopleRepository):
    assert await people.remove_person_by_id(ObjectId()) is None


async def test_remove_all_by_name_counts_and_is_repeatable(people: PeopleRepository):
    await people.create_many_people([{"name": "Mary"}, {"name": "Mary"}, {"name": "Bob"}])

    first = await people.remove_all_people_by_name("Mary")
    second = await people.remove_all_people_by_name("Mary")

    assert first == DeleteSummary(deleted_count=2)
    assert second.deleted_count == 0
    assert await people.count_people() == 1


# ============== CHAINED QUERY ==============

async def test_burrito_lovers_sorted_limited_and_without_age(people: PeopleRepository, burrito_payloads):
    await people.create_many_people(burrito_payloads)

    lovers = await people.find_burrito_lovers()

    assert [person["name"] for person in lovers] == ["Alice", "Bob"]
    assert all("age" not in person for person in lovers)
    assert all("burritos" in person["favoriteFoods"] for person in lovers)


async def test_chained_query_with_other_food_and_limit(people: PeopleRepository, burrito_payloads):
    await people.create_many_people(burrito_payloads)

    lovers = await people.find_burrito_lovers("burritos", limit=3)

    assert [person["name"] for person in lovers] == ["Alice", "Bob", "Charlie"]


async def test_chained_query_rejects_non_positive_limit(people: PeopleRepository):
    with pytest.raises(PersonValidationError):
        await people.find_burrito_lovers(limit=0)


# ============== NAME MATCHING ==============

async def test_name_filters_trim_like_stored_names(people: PeopleRepository):
    created = await people.create_and_save_person({"name": " Alice ", "age": 28})

    found = await people.find_people_by_name(" Alice ")
    updated = await people.update_person_age("  Alice", 20)
    summary = await people.remove_all_people_by_name("Alice  ")

    assert [person["_id"] for person in found] == [created["_id"]]
    assert updated["age"] == 20
    assert summary.deleted_count == 1


@pytest.mark.parametrize(
    "operation",
    ["find_people_by_name", "update_person_age", "remove_all_people_by_name"],
)
async def test_blank_name_filter_is_a_validation_error(people: PeopleRepository, operation):
    with pytest.raises(PersonValidationError):
        await getattr(people, operation)("   ")
