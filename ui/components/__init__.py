"""
UI components for the GLYERAL application.

This module contains reusable Streamlit rendering components.
"""

from ui.components.audit import render_audit_trail
from ui.components.chat import render_chat_panel
from ui.components.intake import render_intake_step
from ui.components.recommendations import render_generate, render_recommendations
from ui.components.sidebar import render_login, render_sidebar

__all__ = [
    "render_audit_trail",
    "render_chat_panel",
    "render_generate",
    "render_intake_step",
    "render_login",
    "render_recommendations",
    "render_sidebar",
]
