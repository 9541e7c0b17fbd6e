"""Registry of resettable module-level singletons.

Modules that keep a process-wide instance (``settings.cfg``) register a
function that rebuilds it, so the test suite can start every test from a
freshly read environment.
"""

from __future__ import annotations

from collections.abc import Callable

ResetFn = Callable[[], None]

_reset_fns: list[ResetFn] = []


def register_singleton(reset_fn: ResetFn) -> ResetFn:
    """Register *reset_fn* once; returns it so it can be used as a decorator."""
    if reset_fn not in _reset_fns:
        _reset_fns.append(reset_fn)
    return reset_fn


def reset_all_singletons() -> None:
    """Rebuild every registered singleton, in registration order."""
    for fn in list(_reset_fns):
        fn()
