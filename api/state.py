"""
Process-local service objects shared by the routes.

Routes receive these through FastAPI dependencies so tests can swap them with
app.dependency_overrides.
"""

from typing import Optional

from glyeral.chat import ChatAssistant
from glyeral.config import Settings, load_settings
from glyeral.decisions import AuditStore, DecisionRecorder
from glyeral.engine import RecommendationEngine
from glyeral.utils.logging import get_logger


logger = get_logger("api.state")

_settings: Optional[Settings] = None
_engine: Optional[RecommendationEngine] = None
_recorder: Optional[DecisionRecorder] = None
_assistant: Optional[ChatAssistant] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def get_engine() -> RecommendationEngine:
    global _engine
    if _engine is None:
        _engine = RecommendationEngine()
    return _engine


def get_recorder() -> DecisionRecorder:
    """The shared decision recorder, backed by the configured audit file."""
    global _recorder
    if _recorder is None:
        audit_path = get_settings().audit_path
        _recorder = DecisionRecorder(AuditStore(storage_path=audit_path))
        logger.info(f"Audit trail: {audit_path or 'in memory'}")
    return _recorder


def get_assistant() -> ChatAssistant:
    global _assistant
    if _assistant is None:
        _assistant = ChatAssistant()
    return _assistant


def reset_state():
    """Drop all shared objects; the next request rebuilds them."""
    global _settings, _engine, _recorder, _assistant
    _settings = None
    _engine = None
    _recorder = None
    _assistant = None
