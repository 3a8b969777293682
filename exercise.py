#!/usr/bin/env python3
"""
People CRUD Exercise - MongoDB Version
Main Entry Point

Runs every facade operation once, in order, feeding each step's output into
the steps that depend on it.
"""

import sys
import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional

from config import LOG_LEVEL
from core.constants import (
    FIELD_ID, SAMPLE_PERSON, SAMPLE_PEOPLE,
    DEFAULT_ADDED_FOOD, DEFAULT_UPDATED_AGE, DEFAULT_CHAINED_FOOD
)
from core.utils import setup_logging, get_logger
from database.mongodb import MongoDB
from database.people import PeopleRepository

logger = get_logger(__name__)


class StepFailed(Exception):
    """Raised internally when a step a later step depends on has failed"""


class Exercise:
    """Sequential walk through the people facade"""

    def __init__(self, people: PeopleRepository):
        self.people = people
        self.results: Dict[str, Any] = {}
        self.errors: Dict[str, Exception] = {}

    async def _step(self, number: int, name: str, call: Callable[[], Awaitable[Any]]) -> Any:
        logger.info(f"Step {number}: {name}...")
        try:
            result = await call()
        except Exception as e:
            logger.error(f"❌ Step {number} ({name}) failed: {e}")
            self.errors[name] = e
            raise StepFailed(name) from e
        self.results[name] = result
        return result

    async def run(self) -> Dict[str, Any]:
        """Run all steps; returns step name -> result for the steps that succeeded"""
        logger.info("=== MONGODB PEOPLE OPERATIONS ===")

        try:
            await self._step(1, "create_and_save_person",
                             lambda: self.people.create_and_save_person(dict(SAMPLE_PERSON)))
            await self._step(2, "create_many_people",
                             lambda: self.people.create_many_people([dict(p) for p in SAMPLE_PEOPLE]))
        except StepFailed:
            # Everything below reads the seeded data
            return self.results

        await self._run_lookup_chain()

        for number, name, call in (
            (7, "update_person_age",
             lambda: self.people.update_person_age("Bob", DEFAULT_UPDATED_AGE)),
            (10, "find_burrito_lovers",
             lambda: self.people.find_burrito_lovers(DEFAULT_CHAINED_FOOD)),
            (9, "remove_all_people_by_name",
             lambda: self.people.remove_all_people_by_name("Mary")),
        ):
            try:
                await self._step(number, name, call)
            except StepFailed:
                continue

        await self._remove_found_person()

        logger.info("=== ALL STEPS COMPLETED ===")
        return self.results

    async def _run_lookup_chain(self) -> None:
        try:
            await self._step(3, "find_people_by_name",
                             lambda: self.people.find_people_by_name("Alice"))
        except StepFailed:
            pass

        try:
            by_food = await self._step(4, "find_one_person_by_food",
                                       lambda: self.people.find_one_person_by_food("pizza"))
            if not by_food:
                logger.warning("No pizza lover found, skipping id lookup and food update")
                return

            found = await self._step(5, "find_person_by_id",
                                     lambda: self.people.find_person_by_id(by_food[FIELD_ID]))
            if not found:
                logger.warning(f"Person {by_food[FIELD_ID]} vanished, skipping food update")
                return

            await self._step(6, "update_person_food",
                             lambda: self.people.update_person_food(found[FIELD_ID], DEFAULT_ADDED_FOOD))
        except StepFailed:
            return

    async def _remove_found_person(self) -> None:
        target: Optional[Dict[str, Any]] = self.results.get("update_person_food")
        if not target:
            return
        try:
            await self._step(8, "remove_person_by_id",
                             lambda: self.people.remove_person_by_id(target[FIELD_ID]))
        except StepFailed:
            pass


async def run_exercise(people: PeopleRepository) -> Dict[str, Any]:
    """Run the exercise against an already connected people facade"""
    return await Exercise(people).run()


async def _main() -> Dict[str, Any]:
    async with MongoDB() as mongo:
        return await run_exercise(mongo.people)


def main():
    """Main entry point"""
    setup_logging(LOG_LEVEL)

    try:
        asyncio.run(_main())
    except KeyboardInterrupt:
        logger.info("👋 Received keyboard interrupt")
    except Exception as e:
        logger.critical(f"💥 Fatal error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        logger.info("🏁 Exercise process ended")


if __name__ == "__main__":
    main()
