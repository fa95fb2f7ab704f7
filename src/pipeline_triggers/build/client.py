"""HTTP client for the build information service.

Wraps a ``requests.Session`` so network calls stay out of the trigger code and
tests can inject a mocked session.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)


class BuildInfoError(RuntimeError):
    """The build information service could not answer a lookup."""


class BuildServiceClient:
    """Small wrapper around the build service REST endpoints we need."""

    def __init__(
        self,
        *,
        base_url: str,
        token: str = "",
        timeout_seconds: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url.strip():
            raise ValueError("Build service base URL is required")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

        self._base_url = base_url.strip().rstrip("/")
        self._timeout = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "User-Agent": "pipeline-triggers",
            }
        )
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def _builds_url(self, *segments: str) -> str:
        path = "/".join(segments)
        return f"{self._base_url}/builds/{path}"

    def build_status_url(self, *, build_number: int | str, master: str, job: str) -> str:
        # Folder jobs ("team/service/build") keep their slashes.
        return self._builds_url(
            "status",
            quote(str(build_number), safe=""),
            quote(master, safe=""),
            quote(job, safe="/"),
        )

    def property_file_url(
        self, *, build_number: int | str, file_name: str, master: str, job: str
    ) -> str:
        return self._builds_url(
            "properties",
            quote(str(build_number), safe=""),
            quote(file_name, safe=""),
            quote(master, safe=""),
            quote(job, safe="/"),
        )

    def get_build(self, *, build_number: int | str, master: str, job: str) -> dict[str, Any]:
        url = self.build_status_url(build_number=build_number, master=master, job=job)
        return self._get_object(url)

    def get_property_file(
        self, *, build_number: int | str, file_name: str, master: str, job: str
    ) -> dict[str, Any]:
        url = self.property_file_url(
            build_number=build_number, file_name=file_name, master=master, job=job
        )
        return self._get_object(url)

    def _get_object(self, url: str) -> dict[str, Any]:
        logger.debug("Requesting build information", extra={"url": url})
        try:
            resp = self._session.get(url, timeout=self._timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise BuildInfoError(f"Build service request failed: {url}: {e}") from e
        except ValueError as e:
            raise BuildInfoError(f"Build service returned invalid JSON: {url}") from e

        if not isinstance(data, dict):
            raise BuildInfoError(
                f"Build service returned {type(data).__name__}, expected an object: {url}"
            )
        return data

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> BuildServiceClient:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()
