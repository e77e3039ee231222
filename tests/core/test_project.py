"""Tests for ProjectPlan."""

from buildplan.core.item import ItemKind, lib
from tests.test_utils.sample_project import sample_plan


def test_plan_lists_eligible_items_in_declaration_order() -> None:
    plan = sample_plan(installed=["zlib"])

    assert plan.libs_names == ["core", "io"]
    assert plan.apps_names == ["tool"]


def test_plan_skips_ineligible_items() -> None:
    plan = sample_plan(installed=[])

    assert plan.libs_names == ["core"]
    assert plan.apps_names == []
    assert plan.should_build(lib("io")) is False
    # Ineligible items remain declared and ordered
    assert [item.label for item in plan.topologically_sorted()] == ["lib core", "lib io", "app tool"]


def test_plan_queries() -> None:
    plan = sample_plan()

    assert plan.qualified_name("core") == "solvuu_core"
    assert plan.lib_deps_all(ItemKind.APP, "tool") == [lib("core"), lib("io")]
    assert plan.pkgs_deps(ItemKind.APP, "tool") == ["cmdliner"]
    assert plan.pkgs_deps_all(ItemKind.LIB, "io") == ["core_kernel", "zlib"]


def test_packages_for_eligible_items_only() -> None:
    plan = sample_plan(installed=[])

    assert plan.packages_for(plan.libs) == ["core_kernel"]
    assert plan.all_packages() == ["cmdliner", "core_kernel", "zlib"]


def test_plan_on_long_chain() -> None:
    items = [lib("l0")] + [lib(f"l{i}", internal_deps=[lib(f"l{i - 1}")]) for i in range(1, 3000)]

    plan = sample_plan(items=items)

    assert len(plan.libs) == 3000
    assert plan.topologically_sorted()[0] == lib("l0")
