"""Development catalogue: shoppers, things for sale, and their favorites."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from flask_sqlalchemy import SQLAlchemy

from storefront.models import Favorite, Thing, User
from storefront.seeds.plan import SeedPlan
from storefront.seeds.seeder import RowSpec, Seeded, seed

LOGGER = logging.getLogger(__name__)

USERS: dict[str, dict[str, Any]] = {
    "god": {
        "email": "god@example.com",
        "name": "So many names",
        "password": "1234",
    },
    "barack": {
        "name": "Barack Obama",
        "email": "barack@example.gov",
        "password": "1234",
    },
}

THINGS: dict[str, dict[str, Any]] = {
    "santa": {
        "name": "Santa Claus",
        "price": 9999,
        "description": "We will do your Christmas shopping, wrap each present neatly, and write out heartfelt, personalized Christmas cards",
    },
    "fairy": {
        "name": "Tooth Fairy",
        "price": 999,
        "description": "We will retrieve a crisp, new five dollar bill from the bank, place the bill under your child's pillow, and dispose of the tooth in an eco-friendly manner",
    },
    "bunny": {
        "name": "Easter Bunny",
        "price": 4999,
        "description": "We will purchase an appropriate amount of pastel candy, place the candy in plastic eggs, and hide the eggs around your house",
    },
    "krampus": {
        "name": "Krampus",
        "price": 19999,
        "description": "We will don half-goat/half-demon attire, follow your child around, and repeatedly frighten them for a period of 24 hours",
    },
    "cupid": {
        "name": "Cupid",
        "price": 5499,
        "description": "We will purchase the trendiest pack valentines from CVS, tape each one to a small box of candy hearts, and write out heartfelt, personalized messages to each child in the class",
    },
    "greatpumpkin": {
        "name": "Great Pumpkin",
        "price": 4499,
        "description": "We will hand sew the perfect costume for your child, purchase the exact right amount of candy, and answer your door when the trick-or-treaters arrive",
    },
}

# (user key, thing key) pairs; rows are keyed "<user> loves <thing>".
FAVORITE_PAIRS: tuple[tuple[str, str], ...] = (
    ("barack", "bunny"),
    ("barack", "santa"),
    ("god", "krampus"),
    ("god", "bunny"),
)


def favorite_rows(
    *, users: Mapping[str, User], things: Mapping[str, Thing]
) -> dict[str, dict[str, Any]]:
    """Build favorites join rows from the already-created users and things.

    Ids are deferred, so a user or thing missing from its collection only
    fails the rows that reference it.
    """
    return {
        f"{user_key} loves {thing_key}": {
            "user_id": lambda user_key=user_key: users[user_key].id,
            "thing_id": lambda thing_key=thing_key: things[thing_key].id,
        }
        for user_key, thing_key in FAVORITE_PAIRS
    }


FAVORITES = favorite_rows


@dataclass(frozen=True, slots=True)
class SeedSpecs:
    """Row specification tables for one seeding run."""

    users: RowSpec = field(default_factory=lambda: USERS)
    things: RowSpec = field(default_factory=lambda: THINGS)
    favorites: RowSpec = favorite_rows


# Seeders over the default tables, for callers that want to run one collection.
users = seed(User, USERS)
things = seed(Thing, THINGS)
favorites = seed(Favorite, favorite_rows)


def build_plan(specs: SeedSpecs | None = None) -> SeedPlan:
    """Return the users -> things -> favorites plan for ``specs``."""
    specs = specs or SeedSpecs()
    return (
        SeedPlan()
        .add("users", seed(User, specs.users))
        .add("things", seed(Thing, specs.things))
        .add("favorites", seed(Favorite, specs.favorites), depends_on=("users", "things"))
    )


def seed_everything(
    database: SQLAlchemy, *, specs: SeedSpecs | None = None
) -> dict[str, Seeded | None]:
    """Seed every collection in one session and commit.

    A collection that failed as a whole maps to ``None``; failed rows are
    listed on :attr:`Seeded.errors` of their collection.
    """
    session = database.session
    results = build_plan(specs).run(session)
    session.commit()
    LOGGER.info("Seeding finished: %s", summarize(results))
    return results


def summarize(results: Mapping[str, Seeded | None]) -> dict[str, dict[str, int]]:
    """Count created and failed rows per collection.

    ``aborted`` is 1 for a collection whose seeder returned ``None``.
    """
    summary: dict[str, dict[str, int]] = {}
    for name, seeded in results.items():
        if seeded is None:
            summary[name] = {"created": 0, "failed": 0, "aborted": 1}
            continue
        summary[name] = {"created": len(seeded), "failed": len(seeded.errors), "aborted": 0}
    return summary


__all__ = [
    "FAVORITES",
    "THINGS",
    "USERS",
    "SeedSpecs",
    "build_plan",
    "favorite_rows",
    "favorites",
    "seed_everything",
    "summarize",
    "things",
    "users",
]
