"""Build information lookups used to enrich manual triggers."""

from pipeline_triggers.build.client import BuildInfoError, BuildServiceClient
from pipeline_triggers.build.service import BuildInfoService, RemoteBuildInfoService

__all__ = [
    "BuildInfoError",
    "BuildInfoService",
    "BuildServiceClient",
    "RemoteBuildInfoService",
]
