import streamlit as st
from streamlit_autorefresh import st_autorefresh

st.set_page_config(page_title="Borehole Monitoring Dashboard", layout="wide")

try:
    from borehole.core.config import Settings

    settings = Settings.from_env()
except ValueError as exc:
    st.error(f"Invalid configuration: {exc}")
    st.stop()

from borehole.services.generator import make_rng
from borehole.services.report import (
    CARD_TITLES,
    FIELDS,
    banner,
    build_history_figure,
    format_cards,
    readings_log,
    summarize,
)
from borehole.services.sampling import SamplingSession
from borehole.utils.logger import setup_logging

logger = setup_logging(settings)


def get_session() -> SamplingSession:
    if "sampling" not in st.session_state:
        st.session_state["sampling"] = SamplingSession(
            rng=make_rng(settings.random_seed),
            interval_ms=settings.sample_interval_ms,
        )
        logger.info("New dashboard session")
    return st.session_state["sampling"]


session = get_session()

with st.sidebar:
    st.header("Settings")
    live = st.checkbox("Live sampling", value=True)
    st.caption(f"New reading every {session.interval_ms / 1000:g} seconds")
    if st.button("Reset session", width="stretch"):
        session.reset()

if live:
    session.mount()
    fire_count = st_autorefresh(interval=session.interval_ms, key=session.timer_key)
    session.on_timer(fire_count)
else:
    session.unmount()

st.title(settings.page_title)

cards = format_cards(session.current)
columns = st.columns(len(cards))
for column, (title, value) in zip(columns, cards.items()):
    column.metric(title, value)

level, text = banner(session.alert)
if level == "error":
    st.error(text)
else:
    st.success(text)

st.subheader("Sensor Data Over Time")
if not session.history:
    st.info("Waiting for the first reading")
st.plotly_chart(build_history_figure(session.history), width="stretch")

st.subheader("Session Statistics")
summary = summarize(session.history)
st.caption(f"{summary['count']} readings this session")
if summary["count"]:
    for stat_col, field in zip(st.columns(len(FIELDS)), FIELDS):
        stats = summary[field]
        stat_col.write(f"**{CARD_TITLES[field]}**")
        stat_col.write(f"avg {stats['average']:.2f} · min {stats['min']:.2f} · max {stats['max']:.2f}")

    st.subheader("Latest Readings")
    st.dataframe(readings_log(session.history, settings.log_rows), hide_index=True, width="stretch")
