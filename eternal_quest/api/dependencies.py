"""Request-scoped access to the one ledger the server owns.

``create_app``'s lifespan installs a :class:`LedgerManager` on startup and
clears it on shutdown; routes receive it through ``Depends(get_ledger_manager)``.
Tests install a manager directly with :func:`set_ledger_manager`.
"""

from __future__ import annotations

from eternal_quest.api.ledger_manager import LedgerManager

_ledger_manager: LedgerManager | None = None


class LedgerUnavailableError(RuntimeError):
    """A route ran outside the app lifespan, so no ledger is installed."""


def set_ledger_manager(manager: LedgerManager | None) -> LedgerManager | None:
    """Install *manager* (or clear it with None) and return the one it replaced."""
    global _ledger_manager
    previous, _ledger_manager = _ledger_manager, manager
    return previous


def get_ledger_manager() -> LedgerManager:
    if _ledger_manager is None:
        raise LedgerUnavailableError(
            "No quest ledger is installed; build the app with create_app() and "
            "serve it so its lifespan can open the ledger."
        )
    return _ledger_manager
