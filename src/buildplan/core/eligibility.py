"""Build eligibility.

An item should be built iff all of its build conditions hold and every one of
its internal dependencies should be built too. Ineligibility propagates up the
dependency chain: an app whose library needs a missing package is skipped even
when the app itself has no conditions.
"""

import logging
from collections.abc import Iterator

from buildplan.core.errors import LikelyCycleError
from buildplan.core.item import Condition, Identity, Item
from buildplan.core.packages.abc import PackageOracle
from buildplan.core.registry import ItemRegistry

logger = logging.getLogger(__name__)


class EligibilityEvaluator:
    """Evaluates should_build for items of one registry.

    Decisions are memoised for the lifetime of the evaluator, i.e. one
    evaluation pass against a fixed set of installed packages.
    """

    def __init__(self, registry: ItemRegistry, packages: PackageOracle) -> None:
        self._registry = registry
        self._packages = packages
        self._decisions: dict[Identity, bool] = {}

    def conditions_hold(self, item: Item) -> bool:
        """Check the item's own build conditions, ignoring its dependencies."""
        for condition in item.build_if:
            if condition is Condition.PKGS_INSTALLED:
                missing = [p for p in item.packages if not self._packages.is_installed(p)]
                if missing:
                    logger.debug("%s: missing packages %s", item.label, missing)
                    return False
        return True

    def _deps(self, item: Item) -> Iterator[Item]:
        for dep in item.internal_deps:
            yield self._registry.resolve(dep, referenced_by=item)

    def _record(self, item: Item, decision: bool) -> None:
        logger.debug("should_build(%s) = %s", item.label, decision)
        self._decisions[item.identity] = decision

    def should_build(self, item: Item) -> bool:
        """Decide whether item should be built.

        Dependencies are decided depth-first on an explicit stack. A frame
        stops visiting its dependencies as soon as its own decision is False.

        Raises:
            UnknownItemError: If item or one of its deps is not registered
            LikelyCycleError: If the dependency walk loops back on itself
        """
        start = self._registry.resolve(item)
        decision = self._decisions.get(start.identity)
        if decision is not None:
            return decision

        path: list[Item] = [start]
        on_path: set[Identity] = {start.identity}
        stack: list[Iterator[Item]] = [self._deps(start)]
        verdicts: list[bool] = [self.conditions_hold(start)]

        while stack:
            dep = next(stack[-1], None) if verdicts[-1] else None
            if dep is None:
                done = path.pop()
                on_path.discard(done.identity)
                stack.pop()
                verdict = verdicts.pop()
                self._record(done, verdict)
                if verdicts:
                    verdicts[-1] = verdict
                continue

            if dep.identity in on_path:
                index = next(i for i, p in enumerate(path) if p.identity == dep.identity)
                cycle = [p.label for p in path[index:]] + [dep.label]
                raise LikelyCycleError(start.label, " -> ".join(cycle))

            known = self._decisions.get(dep.identity)
            if known is not None:
                verdicts[-1] = known
                continue

            path.append(dep)
            on_path.add(dep.identity)
            stack.append(self._deps(dep))
            verdicts.append(self.conditions_hold(dep))

        return self._decisions[start.identity]


def should_build(registry: ItemRegistry, item: Item, packages: PackageOracle) -> bool:
    """Single-shot eligibility check for one item."""
    return EligibilityEvaluator(registry, packages).should_build(item)
