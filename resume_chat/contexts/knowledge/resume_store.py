"""
Swappable holder for the active résumé record.

The store starts with the built-in default record and makes at most one attempt per
session to replace it from a source document. Readers always see a complete record:
replacement is a single reference swap.

Sources:
- http(s) URL: fetched with httpx, body parsed as JSON
- *.json path: parsed with json
- *.yaml / *.yml path: loaded with OmegaConf
"""

import json
import time
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import httpx
import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from resume_chat.contexts.knowledge.defaults import DEFAULT_RESUME
from resume_chat.contexts.knowledge.logger import (
    _log_debug,
    log_load_failure,
    log_load_result,
    log_load_start,
)
from resume_chat.contexts.knowledge.resume_record import ResumeRecord
from resume_chat.exceptions import ResumeLoadError

YAML_SUFFIXES = {".yaml", ".yml"}


class ResumeStore:
    """
    Owns the current ResumeRecord.

    Attributes:
        source: URL or filesystem path of the source document (None = never load)
    """

    def __init__(
        self,
        source: Optional[Union[str, Path]] = None,
        default: Optional[ResumeRecord] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            source: URL or path of the résumé document
            default: Record active until a load succeeds (default: built-in record)
            http_transport: Optional httpx transport (used to stub the network)
        """
        self.source = str(source) if source else None
        self._record = default if default is not None else ResumeRecord.from_dict(DEFAULT_RESUME)
        self._http_transport = http_transport
        self._load_attempted = False

    @property
    def record(self) -> ResumeRecord:
        """The active record."""
        return self._record

    @property
    def load_attempted(self) -> bool:
        return self._load_attempted

    def replace(self, record: Union[ResumeRecord, Mapping[str, Any]]) -> ResumeRecord:
        """
        Swap in a new record wholesale (no merge with the current one).

        Args:
            record: ResumeRecord, or a mapping in source-document shape

        Returns:
            The record now active
        """
        if not isinstance(record, ResumeRecord):
            record = ResumeRecord.from_dict(record)
        self._record = record
        _log_debug(f"Record replaced ('{record.personal.name}')")
        return record

    async def load(self) -> ResumeRecord:
        """
        Load the source document once and make it the active record.

        Any failure (network error, non-success status, malformed payload) is logged and
        swallowed; the current record stays active. Later calls do not fetch again.

        Returns:
            The active record after the attempt
        """
        if self._load_attempted or not self.source:
            return self._record
        self._load_attempted = True

        log_load_start(self.source)
        start = time.time()
        try:
            document = await self._fetch_document(self.source)
        except ResumeLoadError as e:
            log_load_failure(self.source, e)
            return self._record

        record = self.replace(document)
        log_load_result(self.source, record, time.time() - start)
        return record

    # =========================================================================
    # FETCH HELPERS
    # =========================================================================

    async def _fetch_document(self, source: str) -> Mapping[str, Any]:
        if source.startswith(("http://", "https://")):
            document = await self._fetch_url(source)
        else:
            document = _read_document(Path(source))

        if not isinstance(document, Mapping):
            raise ResumeLoadError(
                f"Résumé document must be an object, got {type(document).__name__}", source
            )
        return document

    async def _fetch_url(self, url: str) -> Any:
        try:
            async with httpx.AsyncClient(transport=self._http_transport) as client:
                response = await client.get(url, headers={"Cache-Control": "no-store"})
        except httpx.HTTPError as e:
            raise ResumeLoadError("Failed to fetch résumé", url, e) from e

        if not response.is_success:
            raise ResumeLoadError(f"Résumé fetch returned HTTP {response.status_code}", url)

        try:
            return response.json()
        except ValueError as e:
            raise ResumeLoadError("Résumé response is not valid JSON", url, e) from e


def _read_document(path: Path) -> Any:
    """Read a JSON or YAML résumé file from disk."""
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError, yaml.YAMLError, OmegaConfBaseException) as e:
        raise ResumeLoadError("Failed to read résumé file", str(path), e) from e
