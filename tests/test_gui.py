"""Smoke tests for the Streamlit app, run headless with AppTest."""

from __future__ import annotations

from pathlib import Path

from streamlit.testing.v1 import AppTest

from webcv.cleaner import normalize

GUI = str(Path(__file__).resolve().parents[1] / "webcv" / "gui.py")


def test_generate_disabled_without_upload() -> None:
    at = AppTest.from_file(GUI).run(timeout=30)
    assert not at.exception
    button = at.button[0]
    assert button.label == "Generate Web CV"
    assert button.disabled
    assert any("will appear here" in m.value for m in at.markdown)


def test_profile_panel_renders_without_errors() -> None:
    at = AppTest.from_file(GUI)
    at.session_state["profile"] = normalize({"name": "Ada Lovelace", "skills": "Mathematics"})
    at.run(timeout=30)
    assert not at.exception
    assert not at.error
    assert not any("will appear here" in m.value for m in at.markdown)
