"""Pipeline Triggers.

Resolves manual execution requests to the pipeline they name:
- event type classification and conversion
- pipeline matching by application + name-or-id
- trigger construction with optional build metadata enrichment
"""

__version__ = "0.1.0"

from pipeline_triggers.config import TriggerSettings

__all__ = ["__version__", "TriggerSettings"]
