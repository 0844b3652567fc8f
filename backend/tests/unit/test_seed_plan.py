"""Tests for dependency-ordered seed plans."""

from __future__ import annotations

import pytest

from storefront.models import Favorite, Thing, User
from storefront.seeds.plan import SeedPlan, SeedPlanError
from storefront.seeds.seeder import Seeded, seed


class _Recorder:
    """Seeder stand-in that records the ``others`` it was called with."""

    def __init__(self, name, calls, result=None):
        self.name = name
        self.calls = calls
        self.result = {} if result is None else result

    def __call__(self, session, others=None):
        self.calls.append((self.name, dict(others or {})))
        return self.result


def test_order_puts_dependencies_first():
    calls: list = []
    plan = (
        SeedPlan()
        .add("favorites", _Recorder("favorites", calls), depends_on=("users", "things"))
        .add("users", _Recorder("users", calls))
        .add("things", _Recorder("things", calls))
    )

    order = plan.order()

    assert order.index("users") < order.index("favorites")
    assert order.index("things") < order.index("favorites")
    assert set(order) == {"users", "things", "favorites"}


def test_ready_steps_follow_registration_order():
    plan = (
        SeedPlan()
        .add("b", _Recorder("b", []), depends_on=("c",))
        .add("a", _Recorder("a", []))
        .add("c", _Recorder("c", []))
    )

    assert plan.order() == ["a", "c", "b"]


def test_add_rejects_duplicate_names():
    plan = SeedPlan().add("users", _Recorder("users", []))

    with pytest.raises(SeedPlanError, match="already registered"):
        plan.add("users", _Recorder("users", []))


def test_unknown_dependency_is_reported():
    plan = SeedPlan().add("favorites", _Recorder("favorites", []), depends_on=("users",))

    with pytest.raises(SeedPlanError, match="unknown step\\(s\\): users"):
        plan.order()


def test_cycle_is_reported():
    plan = (
        SeedPlan()
        .add("a", _Recorder("a", []), depends_on=("b",))
        .add("b", _Recorder("b", []), depends_on=("a",))
    )

    with pytest.raises(SeedPlanError, match="dependency cycle"):
        plan.order()


def test_run_passes_dependency_results_as_others():
    calls: list = []
    users_result = {"ann": object()}
    plan = (
        SeedPlan()
        .add("users", _Recorder("users", calls, users_result))
        .add("favorites", _Recorder("favorites", calls), depends_on=("users",))
    )

    results = plan.run(session=None)

    assert calls == [("users", {}), ("favorites", {"users": users_result})]
    assert results["users"] is users_result


def test_run_forwards_aborted_dependency_as_none():
    calls: list = []
    plan = (
        SeedPlan()
        .add("users", lambda session, others=None: None)
        .add("favorites", _Recorder("favorites", calls), depends_on=("users",))
    )

    results = plan.run(session=None)

    assert results["users"] is None
    assert calls == [("favorites", {"users": None})]


def test_steps_returns_a_copy():
    plan = SeedPlan().add("users", _Recorder("users", []))

    plan.steps.clear()

    assert list(plan.steps) == ["users"]


def test_run_seeds_real_collections(session):
    plan = (
        SeedPlan()
        .add("users", seed(User, {"ann": {"email": "ann@example.com", "password": "pw"}}))
        .add("things", seed(Thing, {"lamp": {"name": "Lamp", "price": 500}}))
        .add(
            "favorites",
            seed(
                Favorite,
                lambda *, users, things: {
                    "ann loves lamp": {
                        "user_id": users["ann"].id,
                        "thing_id": things["lamp"].id,
                    }
                },
            ),
            depends_on=("users", "things"),
        )
    )

    results = plan.run(session)

    assert all(isinstance(result, Seeded) for result in results.values())
    assert results["favorites"]["ann loves lamp"].user is results["users"]["ann"]
