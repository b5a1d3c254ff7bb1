from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from routine_finder.config.model import GlobalConfig
from routine_finder.core.exceptions import SourceFetchError
from routine_finder.services.storage import StorageBackend
from routine_finder.validation.errors import ValidationError
from routine_finder.validation.payload_validation import validate_rows_payload

logger = logging.getLogger(__name__)

CACHE_KEY = "routineData.json"


class RowOrigin(str, enum.Enum):
    REMOTE = "remote"
    CACHE = "cache"
    EMPTY = "empty"


@dataclass(frozen=True)
class LoadedRows:
    rows: List[Dict[str, Any]] = field(default_factory=list)
    origin: RowOrigin = RowOrigin.EMPTY


class ScheduleSource:
    """
    Produces the row collection handed to the query engine.

    Order of preference:
    1. the spreadsheet endpoint (and the cache is refreshed with what it returned)
    2. the cached copy of the last good fetch
    3. an empty collection

    The core never sees a failure: every fetch/cache problem is logged here and
    turned into a fallback. Without a storage backend the cache steps are skipped.

    An injected client is owned by the caller and left open; otherwise a
    client is opened and closed around each fetch.
    """

    def __init__(
        self,
        config: GlobalConfig,
        storage: Optional[StorageBackend],
        client: Optional[httpx.Client] = None,
    ):
        self.config = config
        self.storage = storage
        self._client = client

    @property
    def source_url(self) -> str:
        return self.config.source_url_template.format(
            sheet_id=quote(self.config.sheet_id, safe=""),
            sheet_name=quote(self.config.sheet_name, safe=""),
        )

    # -------------------------------------------------------------------------
    # Remote
    # -------------------------------------------------------------------------
    def fetch_remote(self) -> List[Dict[str, Any]]:
        """
        GET the rows from the spreadsheet endpoint.

        :raises SourceFetchError: on transport errors, non-2xx responses or a non-JSON body
        :raises ValidationError: if the JSON is not an array of row objects
        """
        url = self.source_url
        try:
            if self._client is not None:
                response = self._client.get(url, timeout=self.config.request_timeout)
            else:
                with httpx.Client(timeout=self.config.request_timeout) as client:
                    response = client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise SourceFetchError(f"Could not fetch {url}: {e}") from e
        except ValueError as e:
            raise SourceFetchError(f"Response from {url} is not JSON: {e}") from e

        validate_rows_payload(payload)
        return payload

    # -------------------------------------------------------------------------
    # Cache
    # -------------------------------------------------------------------------
    def read_cache(self) -> List[Dict[str, Any]]:
        if self.storage is None or not self.storage.exists(CACHE_KEY):
            return []

        try:
            payload = json.loads(self.storage.read_bytes(CACHE_KEY).decode("utf-8"))
            validate_rows_payload(payload)
        except (OSError, UnicodeDecodeError, ValueError, ValidationError):
            logger.exception("Ignoring unreadable row cache", extra={"cache_key": CACHE_KEY})
            return []

        return payload

    def write_cache(self, rows: List[Dict[str, Any]]) -> None:
        if self.storage is None:
            return
        data = json.dumps(rows, ensure_ascii=False).encode("utf-8")
        self.storage.write_bytes(CACHE_KEY, data)

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------
    def load_rows(self) -> LoadedRows:
        try:
            rows = self.fetch_remote()
        except (SourceFetchError, ValidationError) as e:
            logger.warning(
                "Remote schedule unavailable; falling back to cache",
                extra={"url": self.source_url, "error": str(e)},
            )
        else:
            try:
                self.write_cache(rows)
            except OSError:
                logger.exception("Could not refresh row cache", extra={"cache_key": CACHE_KEY})
            logger.info("Loaded schedule rows", extra={"origin": RowOrigin.REMOTE.value, "n_rows": len(rows)})
            return LoadedRows(rows=rows, origin=RowOrigin.REMOTE)

        cached = self.read_cache()
        if cached:
            logger.info("Loaded schedule rows", extra={"origin": RowOrigin.CACHE.value, "n_rows": len(cached)})
            return LoadedRows(rows=cached, origin=RowOrigin.CACHE)

        logger.warning("No schedule rows available; starting with an empty routine")
        return LoadedRows()
