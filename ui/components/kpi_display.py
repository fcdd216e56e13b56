import os, sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from typing import Any, Dict
import streamlit as st


def render_kpis(kpis: Dict[str, Any]) -> None:
    if not isinstance(kpis, dict):
        st.warning("KPIs unavailable")
        return
    cols = st.columns(4)
    def metric(c, label, key):
        if key in kpis:
            c.metric(label, kpis.get(key))
    metric(cols[0], "Scheduled", "scheduled")
    metric(cols[1], "Unscheduled", "unscheduled")
    metric(cols[2], "Makespan (min)", "makespan")
    metric(cols[3], "Utilization %", "utilization")
