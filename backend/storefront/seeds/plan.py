"""Dependency-ordered execution of named seeders."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from graphlib import CycleError, TopologicalSorter

from sqlalchemy.orm import Session

from storefront.seeds.seeder import SeedError, Seeded, Seeder

LOGGER = logging.getLogger(__name__)


class SeedPlanError(SeedError):
    """Raised when the plan has a cycle, an unknown dependency or a duplicate name."""


@dataclass(frozen=True, slots=True)
class SeedStep:
    """One named seeder and the names of the steps it reads from."""

    name: str
    seeder: Seeder
    depends_on: tuple[str, ...] = ()


class SeedPlan:
    """Run named seeders in foreign-key order.

    Each step receives the results of the steps it depends on as ``others``,
    so a function-form seeder only builds its rows once those collections
    exist.
    """

    def __init__(self) -> None:
        self._steps: dict[str, SeedStep] = {}

    def add(self, name: str, seeder: Seeder, *, depends_on: Iterable[str] = ()) -> SeedPlan:
        """Register ``seeder`` under ``name``. Returns the plan for chaining."""
        if name in self._steps:
            raise SeedPlanError(f"Seed step {name!r} is already registered")
        self._steps[name] = SeedStep(name=name, seeder=seeder, depends_on=tuple(depends_on))
        return self

    @property
    def steps(self) -> dict[str, SeedStep]:
        return dict(self._steps)

    def order(self) -> list[str]:
        """Return step names so that every step follows its dependencies.

        Steps whose dependencies are satisfied in the same round run in
        registration order.
        """
        sorter: TopologicalSorter[str] = TopologicalSorter()
        position = {name: index for index, name in enumerate(self._steps)}
        for step in self._steps.values():
            missing = [dep for dep in step.depends_on if dep not in self._steps]
            if missing:
                raise SeedPlanError(
                    f"Seed step {step.name!r} depends on unknown step(s): {', '.join(missing)}"
                )
            sorter.add(step.name, *step.depends_on)
        try:
            sorter.prepare()
        except CycleError as exc:
            cycle = " -> ".join(exc.args[1]) if len(exc.args) > 1 else ""
            raise SeedPlanError(f"Seed plan has a dependency cycle: {cycle}") from exc

        order: list[str] = []
        while sorter.is_active():
            ready = sorted(sorter.get_ready(), key=position.__getitem__)
            order.extend(ready)
            sorter.done(*ready)
        return order

    def run(self, session: Session) -> dict[str, Seeded | None]:
        """Execute every step once and return the results keyed by step name."""
        results: dict[str, Seeded | None] = {}
        for name in self.order():
            step = self._steps[name]
            others = {dep: results[dep] for dep in step.depends_on}
            LOGGER.debug("Running seed step %s", name, extra={"collection": name})
            results[name] = step.seeder(session, others)
        return results


__all__ = ["SeedPlan", "SeedPlanError", "SeedStep"]
