import os, sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from typing import Any, Dict, List
import pandas as pd
import plotly.express as px


def render_platform_gantt(gantt: List[Dict[str, Any]]):
    # Bars are plain minute offsets; timeline needs datetimes, so anchor at the epoch
    df = pd.DataFrame(gantt)
    df["start_ts"] = pd.to_datetime(df["start"], unit="m")
    df["end_ts"] = pd.to_datetime(df["end"], unit="m")
    fig = px.timeline(
        df,
        x_start="start_ts",
        x_end="end_ts",
        y="platform",
        color="train",
        custom_data=["train", "start", "end"],
    )
    fig.update_yaxes(autorange="reversed")
    fig.update_traces(hovertemplate="Train=%{customdata[0]}<br>Platform=%{y}<br>Arrive=%{customdata[1]}<br>Depart=%{customdata[2]}")
    return fig
