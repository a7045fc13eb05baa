"""Audit trail table for the GLYERAL UI."""

import streamlit as st

from glyeral.decisions import AuditStore
from ui.config import AUDIT_STATUS_FILTERS


def render_audit_trail(store: AuditStore, patient_id: str | None = None):
    """Render audit entries, newest first, with a status filter."""
    st.markdown("### 📋 Audit Trail")

    cols = st.columns([2, 1])
    status = cols[0].radio("Status", AUDIT_STATUS_FILTERS, horizontal=True, label_visibility="collapsed")
    only_patient = cols[1].toggle("This patient only", value=patient_id is not None, disabled=patient_id is None)

    entries = store.list_entries(status=status, patient_id=patient_id if only_patient else None)
    if not entries:
        st.info("No audit entries match this filter.")
        return

    st.dataframe(
        [
            {
                "Log ID": entry.log_id,
                "Time": entry.display_time,
                "Status": entry.status,
                "Medications": entry.meds,
                "Confidence": f"{entry.confidence}%",
                "Action": entry.action,
                "Patient": entry.patient_id or "",
            }
            for entry in entries
        ],
        use_container_width=True,
        hide_index=True,
    )
