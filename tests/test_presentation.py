"""
Tests for header text helpers, the theme store and the variant presets
"""
from datetime import datetime

import pytest

from chat_core.models import DateStyle, ReplyStrings
from chat_core.services.greeting import (
    format_clock,
    format_date,
    format_turn_time,
    greeting_for,
)
from chat_core.services.theme import PARAM_KEY, SESSION_KEY, ThemeStore, theme_css
from chat_core.variants import CLASSIC, STUDIO, VARIANTS, get_variant

NOW = datetime(2026, 10, 5, 15, 4, 9)


@pytest.mark.parametrize(
    "hour, expected",
    [
        (0, "Good Night!"),
        (4, "Good Night!"),
        (5, "Good Morning!"),
        (11, "Good Morning!"),
        (12, "Good Afternoon!"),
        (16, "Good Afternoon!"),
        (17, "Good Evening!"),
        (20, "Good Evening!"),
        (21, "Good Night!"),
        (23, "Good Night!"),
    ],
)
def test_greeting_boundaries(hour, expected):
    assert greeting_for(hour) == expected


def test_date_formats():
    assert format_date(NOW) == "Monday, October 5, 2026"
    assert format_date(NOW, DateStyle.SHORT) == "Mon, Oct 5, 2026"


def test_clock_formats():
    assert format_clock(NOW) == "03:04:09 PM"
    assert format_clock(NOW, seconds=False) == "03:04 PM"
    assert format_turn_time(NOW) == "03:04 PM"


class TestThemeStore:
    def test_dark_by_default(self):
        session = {}
        theme = ThemeStore(session)

        assert theme.is_dark is True
        assert session[SESSION_KEY] is True
        assert theme.icon == "🌞"

    def test_toggle_flips_and_returns_new_value(self):
        theme = ThemeStore({})

        assert theme.toggle() is False
        assert theme.is_dark is False
        assert theme.icon == "🌙"
        assert theme.toggle() is True

    def test_session_value_survives_new_store(self):
        session = {}
        ThemeStore(session).toggle()

        assert ThemeStore(session).is_dark is False

    def test_params_mirror_choice(self):
        params = {}
        theme = ThemeStore({}, params)

        theme.toggle()

        assert params[PARAM_KEY] == "light"

    def test_params_seed_initial_value(self):
        assert ThemeStore({}, {PARAM_KEY: "light"}).is_dark is False
        assert ThemeStore({}, {PARAM_KEY: "dark"}).is_dark is True

    def test_no_params_written_without_persistence(self):
        session = {}
        ThemeStore(session).toggle()

        assert PARAM_KEY not in session

    def test_scopes_are_independent(self):
        session, params = {}, {}
        classic = ThemeStore(session, scope="classic")
        studio = ThemeStore(session, params, scope="studio")

        classic.toggle()

        assert classic.is_dark is False
        assert studio.is_dark is True
        assert ThemeStore(session, params, scope="studio").is_dark is True
        assert params == {}

    def test_css_differs_per_theme(self):
        dark, light = theme_css(True), theme_css(False)

        assert dark.strip().startswith("<style>")
        assert "#0f172a" in dark
        assert dark != light


class TestVariants:
    def test_both_presets_registered(self):
        assert set(VARIANTS) == {"classic", "studio"}
        assert get_variant("studio") is STUDIO

    def test_unknown_variant(self):
        with pytest.raises(KeyError, match="classic"):
            get_variant("retro")

    def test_strings_are_distinct_constants(self):
        assert CLASSIC.strings.error_text == "Error: Could not fetch response."
        assert STUDIO.strings.error_text.startswith("Apologies")
        assert CLASSIC.strings != STUDIO.strings

    def test_only_studio_persists_theme(self):
        assert STUDIO.persist_theme and not CLASSIC.persist_theme

    @pytest.mark.parametrize("fallback, error", [("", "x"), ("x", "  ")])
    def test_reply_strings_must_be_non_empty(self, fallback, error):
        with pytest.raises(ValueError):
            ReplyStrings(fallback_text=fallback, error_text=error)
