"""A minimal subnet store of transaction lists."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

_KEY = 1


@dataclass
class Transaction:
    i: int


@dataclass
class Transactions:
    transactions: list[int] = field(default_factory=list)
    next_id: int = 0


class Subnet:
    """Keeps a single transaction list under a fixed key."""

    def __init__(self) -> None:
        self.transaction_list = Transactions()
        self._ts: dict[int, Transactions] = {}

    def set(self) -> None:
        """Create the list on first call; afterwards append a transaction id."""
        stored = self._ts.get(_KEY)
        if stored is None:
            self._ts[_KEY] = Transactions()
        else:
            updated = copy.deepcopy(stored)
            updated.transactions.append(2)
            self._ts[_KEY] = updated

    def get(self) -> bool:
        """Whether the list exists."""
        return _KEY in self._ts

    def list(self) -> Transactions | None:
        """A copy of the stored list, or None."""
        stored = self._ts.get(_KEY)
        return copy.deepcopy(stored) if stored is not None else None