from __future__ import annotations

from pipeline_triggers.model.pipeline import Pipeline


def pipeline_matches(application: str, name_or_id: str, pipeline: Pipeline) -> bool:
    """Return True if ``pipeline`` is the one a manual request names.

    Comparison is exact and case-sensitive. Disabled pipelines never match.
    """

    return (
        not pipeline.disabled
        and pipeline.application == application
        and (pipeline.name == name_or_id or pipeline.id == name_or_id)
    )
