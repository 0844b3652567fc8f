"""Database seeding: keyed row seeders, a dependency-ordered plan, and the catalogue."""

from __future__ import annotations

from storefront.seeds.plan import SeedPlan, SeedPlanError, SeedStep
from storefront.seeds.seed_data import (
    FAVORITES,
    THINGS,
    USERS,
    SeedSpecs,
    build_plan,
    seed_everything,
    summarize,
)
from storefront.seeds.seeder import BadRow, Seeded, Seeder, SeedError, seed

__all__ = [
    "BadRow",
    "FAVORITES",
    "SeedError",
    "SeedPlan",
    "SeedPlanError",
    "SeedSpecs",
    "SeedStep",
    "Seeded",
    "Seeder",
    "THINGS",
    "USERS",
    "build_plan",
    "seed",
    "seed_everything",
    "summarize",
]
