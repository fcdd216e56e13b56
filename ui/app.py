import os, sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
import json
from typing import Any, Dict, List
import streamlit as st
import pandas as pd
import requests

from ui.api_client import ApiClient
from ui.components.platform_gantt import render_platform_gantt
from ui.components.kpi_display import render_kpis

st.set_page_config(page_title="Rail Yard Contention", layout="wide")
st.title("Rail Yard: Platforms, Deadlocks & Routes")

client = ApiClient()


def call_api(fn, *args, **kwargs) -> Dict[str, Any] | None:
    # Show transport failures on the page instead of crashing the run
    try:
        return fn(*args, **kwargs)
    except requests.RequestException as e:
        st.error(f"API error: {e}")
        return None


def default_trains() -> List[Dict[str, Any]]:
    # 101 -> 102 -> 103 -> 101 wait on each other's tracks
    return [
        {"id": 101, "arrival_time": 0, "departure_time": 10, "current_track": 0, "waiting_for_track": 1, "available_seats": 40},
        {"id": 102, "arrival_time": 5, "departure_time": 15, "current_track": 1, "waiting_for_track": 2, "available_seats": 12},
        {"id": 103, "arrival_time": 10, "departure_time": 20, "current_track": 2, "waiting_for_track": 0, "available_seats": 75},
        {"id": 104, "arrival_time": 12, "departure_time": 30, "current_track": 3, "available_seats": 5},
    ]


if "trains_text" not in st.session_state:
    st.session_state["trains_text"] = json.dumps(default_trains(), indent=2)

trains_text = st.text_area("Trains JSON (processed in this order)", st.session_state["trains_text"], height=300)
platforms = st.number_input("Platforms", min_value=0, value=3, step=1)

try:
    trains = json.loads(trains_text)
except json.JSONDecodeError as e:
    st.error(f"Invalid JSON: {e}")
    st.stop()

tab_sched, tab_dead, tab_route = st.tabs(["Platforms", "Deadlock", "Routes"])

with tab_sched:
    data = call_api(client.schedule, trains, platforms=int(platforms)) if st.button("Schedule", type="primary", key="schedule") else None
    if data is not None:
        render_kpis(data.get("kpis", {}))
        if data.get("unscheduled"):
            st.warning("No platform for trains: " + ", ".join(str(t) for t in data["unscheduled"]))
        gantt = data.get("gantt", [])
        if gantt:
            st.plotly_chart(render_platform_gantt(gantt), use_container_width=True)
        st.dataframe(pd.DataFrame(data.get("trains", [])), use_container_width=True)
        st.caption(f"Platform free times: {data.get('platform_free_at')}")

with tab_dead:
    c1, c2 = st.columns(2)
    with c1:
        data = call_api(client.detect_deadlock, trains) if st.button("Detect deadlock", key="detect") else None
        if data is not None:
            if data.get("deadlocked"):
                st.error("Deadlock detected.")
            else:
                st.success("No deadlock detected.")
            st.json({"wait_for_graph": data.get("wait_for_graph")})
    with c2:
        data = call_api(client.resolve_deadlock, trains) if st.button("Resolve (delay one train)", key="resolve") else None
        if data is not None:
            if data.get("status") == "delayed":
                st.warning(f"Train {data['delayed_train_id']} delayed by {data['delay']} minutes.")
                # Feed the delayed departure back into the editor
                st.session_state["trains_text"] = json.dumps(data["trains"], indent=2)
            else:
                st.info("No deadlock detected to resolve.")

with tab_route:
    st.caption("Station graph edges")
    edges_text = st.text_area("Edges JSON", json.dumps([
        {"src": 0, "dst": 1, "weight": 5},
        {"src": 1, "dst": 2, "weight": 10},
    ], indent=2), height=150, key="edges")
    stations = st.number_input("Stations", min_value=1, value=3, step=1)
    source = st.number_input("Source station", min_value=0, value=0, step=1)
    if st.button("Shortest distances", key="distances"):
        data = None
        try:
            edges = json.loads(edges_text)
        except json.JSONDecodeError as e:
            st.error(f"Invalid edges JSON: {e}")
        else:
            data = call_api(client.distances, int(stations), edges, int(source))
        if data is None:
            pass
        elif "error" in data:
            st.error(data["error"])
        else:
            df = pd.DataFrame({
                "station": list(range(len(data["distances"]))),
                "distance": ["unreachable" if d is None else d for d in data["distances"]],
            })
            st.dataframe(df, use_container_width=True)

st.markdown("---")
st.header("Timetable")
timetable = call_api(client.timetable) if st.button("Load timetable", key="timetable") else None
if timetable is not None:
    rows = timetable.get("rows", [])
    st.dataframe(pd.DataFrame(rows), use_container_width=True)
