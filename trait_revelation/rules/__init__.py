"""
Revelation triggers as declarative data.

Separates which events can expose which traits from the engine that acts on them.
"""

from .triggers import (
    RevelationTrigger,
    ALL_TRIGGERS,
    get_triggers_for_event,
    get_trigger_for_trait,
)

__all__ = [
    "RevelationTrigger",
    "ALL_TRIGGERS",
    "get_triggers_for_event",
    "get_trigger_for_trait",
]
