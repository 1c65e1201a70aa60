"""Target selection.

Decides which workspace modules get a version record: source modules of
kind generic or executable, optionally restricted to a set of names.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import Module, ModuleKind

ELIGIBLE_KINDS = frozenset({ModuleKind.GENERIC, ModuleKind.EXECUTABLE})


def resolve_targets(modules: Sequence[Module], selected: Sequence[str]) -> list[Module]:
    """Return the modules to process, in workspace order.

    Args:
        modules: All modules in the workspace, in host order.
        selected: Names to restrict to. Empty means every module. Names that
                  don't match any module are ignored.

    Returns:
        Eligible modules. Configuration-only modules and test modules are
        always left out. Duplicates in the input are kept.
    """
    candidates = list(modules)
    if selected:
        candidates = [module for module in candidates if module.name in selected]

    return [
        module
        for module in candidates
        if module.is_source and module.kind in ELIGIBLE_KINDS
    ]
