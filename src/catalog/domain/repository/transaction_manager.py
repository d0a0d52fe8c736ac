"""Abstract multi-document commit facility.

Not every storage deployment can commit several documents atomically.
Callers ask ``supports_atomic_commit()`` first and only enter
``atomic()`` when the answer is yes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class TransactionManager(ABC):

    @abstractmethod
    def supports_atomic_commit(self) -> bool:
        """True if writes inside ``atomic()`` commit or roll back together."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Scope whose writes become visible only if the block exits cleanly.

        An exception leaving the block discards every write made inside it
        and is re-raised unchanged.
        """
