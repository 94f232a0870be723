import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = "../dashboard/app.py"


@pytest.fixture
def app(monkeypatch) -> AppTest:
    monkeypatch.setenv("LOG_FILE", "")
    for name in ("SAMPLE_INTERVAL_MS", "RANDOM_SEED", "PAGE_TITLE", "LOG_ROWS"):
        monkeypatch.delenv(name, raising=False)
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_page_starts_sampling_with_all_clear(app):
    session = app.session_state["sampling"]
    assert session.mounted
    assert session.history == []
    assert app.title[0].value == "Borehole Monitoring Dashboard"
    assert [metric.value for metric in app.metric] == ["0.00%", "0.00°C", "0.00", "0.00 NTU"]
    assert app.success[0].value == "All systems normal"


def test_turning_live_sampling_off_unmounts(app):
    session = app.session_state["sampling"]
    session.on_timer(2)
    assert len(session.history) == 2

    app.sidebar.checkbox[0].uncheck().run()

    assert not app.exception
    assert app.session_state["sampling"].mounted is False
    assert session.on_timer(10) == 0
    app.run()
    assert len(app.session_state["sampling"].history) == 2


def test_reset_button_clears_history(app):
    session = app.session_state["sampling"]
    session.on_timer(3)
    assert len(session.history) == 3

    app.sidebar.button[0].click().run()

    assert not app.exception
    assert app.session_state["sampling"].history == []


def test_invalid_config_stops_the_page(monkeypatch):
    monkeypatch.setenv("LOG_FILE", "")
    monkeypatch.setenv("SAMPLE_INTERVAL_MS", "0")
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()

    assert at.error[0].value.startswith("Invalid configuration")
    assert "SAMPLE_INTERVAL_MS" in at.error[0].value
    assert len(at.title) == 0
