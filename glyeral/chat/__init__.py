"""Canned chat assistant for the recommendation screen."""

from glyeral.chat.assistant import ChatAssistant

__all__ = ["ChatAssistant"]
