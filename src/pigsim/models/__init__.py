"""pigsim game models.

This module exports the core data structures and action primitives.
"""

from .actions import (
    ACTIONS,
    ActionFn,
    ActionKind,
    ActionResult,
    apply_action,
    roll,
    stay,
)
from .score import Score

__all__ = [
    # Enums
    "ActionKind",
    # Models
    "Score",
    # Action primitives
    "ACTIONS",
    "ActionFn",
    "ActionResult",
    "apply_action",
    "roll",
    "stay",
]
