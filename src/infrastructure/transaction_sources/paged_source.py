from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from domain.errors import ParseError
from domain.models import Page
from domain.schemas import DEFAULT_ENDPOINT, TransactionSearchResponse
from infrastructure.http_client import JsonHttpClient
from infrastructure.transaction_sources.source import PageCursor

logger = logging.getLogger(__name__)


class PagedTransactionSource(PageCursor):
    """
    Lazily walks the paginated transaction search endpoint for one user.

    Only the most recently fetched page is held. The first request carries no
    page parameter and the server answers with its default page; that page is
    reused instead of being requested again when the cursor reaches it.
    """

    def __init__(
        self,
        user_id: int,
        endpoint_base: str = DEFAULT_ENDPOINT,
        client: JsonHttpClient | None = None,
    ) -> None:
        self.user_id = user_id
        self.endpoint_base = endpoint_base
        self._client = client or JsonHttpClient()
        self._current_page_number = 0
        self._cache: Page | None = None

    @property
    def current_page_number(self) -> int:
        return self._current_page_number

    @property
    def last_fetched_page(self) -> Page | None:
        return self._cache

    def initialize(self) -> "PagedTransactionSource":
        self._current_page_number = 0
        self._cache = None
        self._cache = self._fetch(None)
        logger.info(
            "PagedTransactionSource initialized user_id=%s server_page=%d total_pages=%d total=%d",
            self.user_id,
            self._cache.page_number,
            self._cache.total_pages,
            self._cache.total_records,
        )
        return self

    def has_next(self) -> bool:
        return self._cache is not None and self._current_page_number < self._cache.total_pages

    def get_next(self) -> Page | None:
        if not self.has_next():
            return None

        self._current_page_number += 1
        if self._current_page_number != self._cache.page_number:
            self._cache = self._fetch(self._current_page_number)
        return self._cache

    def _fetch(self, page_number: int | None) -> Page:
        params: dict[str, Any] = {"userId": self.user_id}
        if page_number is not None:
            params["page"] = page_number

        body = self._client.get_json(self.endpoint_base, params)
        try:
            page = TransactionSearchResponse.model_validate(body).to_page()
        except PydanticValidationError as exc:
            raise ParseError(
                f"Transaction search payload did not match expected schema (page={page_number}): {exc}"
            ) from exc

        logger.debug(
            "PagedTransactionSource fetched user_id=%s page=%d records=%d",
            self.user_id,
            page.page_number,
            len(page.records),
        )
        return page
