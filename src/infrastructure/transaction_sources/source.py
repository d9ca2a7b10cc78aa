from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from domain.models import Page


class PageCursor(ABC):
    """Forward-only cursor over pages of a user's transaction history."""

    @abstractmethod
    def initialize(self) -> "PageCursor":
        raise NotImplementedError

    @abstractmethod
    def has_next(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_next(self) -> Page | None:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Page]:
        while self.has_next():
            page = self.get_next()
            if page is None:
                return
            yield page
