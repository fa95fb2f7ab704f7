from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Build:
    number: int | str | None = None


@dataclass(frozen=True, slots=True)
class BuildProject:
    name: str
    last_build: Build


@dataclass(frozen=True, slots=True)
class BuildEvent:
    """A synthetic record identifying one build on a build master.

    Manual triggers carry build provenance inline; this is the shape the build
    information service expects to look that build up.
    """

    master: str
    project: BuildProject

    @property
    def job(self) -> str:
        return self.project.name

    @property
    def build_number(self) -> int | str | None:
        return self.project.last_build.number
