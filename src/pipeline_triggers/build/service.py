from __future__ import annotations

import logging
from typing import Any, Protocol

from pipeline_triggers.build.client import BuildInfoError, BuildServiceClient
from pipeline_triggers.model.build_event import BuildEvent

logger = logging.getLogger(__name__)


class BuildInfoService(Protocol):
    """Looks up metadata for a build identified by a ``BuildEvent``.

    Implementations may perform network I/O and may raise; callers in this
    package never catch those errors.
    """

    def get_build_info(self, build_event: BuildEvent) -> dict[str, Any]: ...

    def get_properties(
        self, build_event: BuildEvent, property_file: str | None
    ) -> dict[str, Any]: ...


class RemoteBuildInfoService:
    """``BuildInfoService`` backed by the build service REST API."""

    def __init__(self, client: BuildServiceClient) -> None:
        self._client = client

    def get_build_info(self, build_event: BuildEvent) -> dict[str, Any]:
        build_number = _require_build_number(build_event)
        logger.debug(
            "Fetching build info",
            extra={
                "master": build_event.master,
                "job": build_event.job,
                "build_number": build_number,
            },
        )
        return self._client.get_build(
            build_number=build_number, master=build_event.master, job=build_event.job
        )

    def get_properties(
        self, build_event: BuildEvent, property_file: str | None
    ) -> dict[str, Any]:
        if not property_file:
            return {}
        build_number = _require_build_number(build_event)
        logger.debug(
            "Fetching build properties",
            extra={
                "master": build_event.master,
                "job": build_event.job,
                "build_number": build_number,
                "property_file": property_file,
            },
        )
        return self._client.get_property_file(
            build_number=build_number,
            file_name=property_file,
            master=build_event.master,
            job=build_event.job,
        )


def _require_build_number(build_event: BuildEvent) -> int | str:
    if build_event.build_number is None or build_event.build_number == "":
        raise BuildInfoError(
            f"Cannot look up build for {build_event.master}/{build_event.job}: "
            "no build number"
        )
    return build_event.build_number
