from typing import Any

import pandas as pd
import plotly.graph_objects as go

from borehole.schemas.reading import Reading

FIELDS = ("water_level", "temperature", "ph", "turbidity")

SERIES = {
    "water_level": ("Water Level (%)", "rgba(75,192,192,1)"),
    "temperature": ("Temperature (°C)", "rgba(255,99,132,1)"),
    "ph": ("pH Level", "rgba(54,162,235,1)"),
    "turbidity": ("Turbidity (NTU)", "rgba(153,102,255,1)"),
}

CARD_TITLES = {
    "water_level": "Water Level",
    "temperature": "Temperature",
    "ph": "pH Level",
    "turbidity": "Turbidity",
}

ALL_CLEAR = "All systems normal"


def format_cards(reading: Reading) -> dict[str, str]:
    return {
        CARD_TITLES["water_level"]: f"{reading.water_level:.2f}%",
        CARD_TITLES["temperature"]: f"{reading.temperature:.2f}°C",
        CARD_TITLES["ph"]: f"{reading.ph:.2f}",
        CARD_TITLES["turbidity"]: f"{reading.turbidity:.2f} NTU",
    }


def banner(alert: str | None) -> tuple[str, str]:
    """Return ``(level, text)`` for the alert banner."""
    if alert:
        return "error", alert
    return "success", ALL_CLEAR


def history_frame(history: list[Reading]) -> pd.DataFrame:
    df = pd.DataFrame([reading.model_dump() for reading in history], columns=list(FIELDS))
    df.insert(0, "sample", range(1, len(df) + 1))
    return df


def build_history_figure(history: list[Reading]) -> go.Figure:
    df = history_frame(history)
    fig = go.Figure()
    for field in FIELDS:
        label, color = SERIES[field]
        fig.add_trace(
            go.Scatter(
                x=df["sample"].tolist(),
                y=df[field].tolist(),
                mode="lines+markers",
                name=label,
                line=dict(color=color),
            )
        )
    fig.update_layout(
        title="Sensor Data Over Time",
        xaxis_title="Sample",
        legend_title_text="",
        hovermode="x unified",
    )
    return fig


def summarize(history: list[Reading]) -> dict[str, Any]:
    df = history_frame(history)
    summary: dict[str, Any] = {"count": len(df)}
    for field in FIELDS:
        if df.empty:
            summary[field] = {"average": None, "min": None, "max": None}
            continue
        column = df[field]
        summary[field] = {
            "average": round(float(column.mean()), 2),
            "min": round(float(column.min()), 2),
            "max": round(float(column.max()), 2),
        }
    return summary


def readings_log(history: list[Reading], rows: int) -> pd.DataFrame:
    """Latest ``rows`` readings, newest first, with display column names."""
    df = history_frame(history).tail(rows).iloc[::-1]
    return df.rename(columns={"sample": "Sample", **{field: SERIES[field][0] for field in FIELDS}}).round(2)
