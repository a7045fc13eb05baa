"""Chat panel for the GLYERAL UI."""

import streamlit as st

from glyeral.chat import ChatAssistant
from glyeral.models import DrugRecommendation

HISTORY_KEY = "chat_history"


def render_chat_panel(assistant: ChatAssistant, recommendations: list[DrugRecommendation]):
    """Render the assistant conversation with quick-prompt chips."""
    st.markdown("### 💬 Ask GLYERAL")
    history = st.session_state.setdefault(HISTORY_KEY, [])

    pending = None
    chips = assistant.quick_chips(recommendations)
    cols = st.columns(len(chips))
    for i, (col, chip) in enumerate(zip(cols, chips)):
        if col.button(chip.label, key=f"chip_{i}"):
            pending = chip.message

    for role, text in history:
        with st.chat_message(role):
            st.markdown(text)

    prompt = st.chat_input("Ask about the recommendations...")
    message = prompt or pending
    if message:
        reply = assistant.respond(message, recommendations)
        history.append(("user", message))
        history.append(("assistant", reply.response))
        st.rerun()
