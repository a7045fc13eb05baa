"""
GLYERAL - diabetes medication recommendations with physician review.

A deterministic rule engine proposes medications from a patient profile; a
physician accepts, modifies or rejects each one and every action is audited.
"""

from glyeral.engine import RecommendationEngine, evaluate
from glyeral.errors import (
    AlreadyActionedError,
    AuditTrailError,
    BlockedRecommendationError,
    GlyeralError,
    UnverifiedRecommendationError,
)

__version__ = "0.1.0"

__all__ = [
    "AlreadyActionedError",
    "AuditTrailError",
    "BlockedRecommendationError",
    "GlyeralError",
    "RecommendationEngine",
    "UnverifiedRecommendationError",
    "evaluate",
]
