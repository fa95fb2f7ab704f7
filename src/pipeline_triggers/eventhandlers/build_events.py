"""Derive a build event from a manual trigger.

Manual triggers imitate build-triggered runs by carrying master, job and build
number inline instead of arriving with a separate build event. When both master
and job are present we rebuild the event the build service expects.
"""

from __future__ import annotations

from pipeline_triggers.model.build_event import Build, BuildEvent, BuildProject
from pipeline_triggers.model.trigger import Trigger


def extract_build_event(trigger: Trigger) -> BuildEvent | None:
    master = trigger.master
    job = trigger.job
    if not master or not job:
        return None

    return BuildEvent(
        master=master,
        project=BuildProject(name=job, last_build=Build(number=trigger.build_number)),
    )
