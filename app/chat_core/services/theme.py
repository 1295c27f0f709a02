"""
Purpose: Dark/light theme choice and the CSS that applies it.

The choice lives in the Streamlit session mapping, one entry per scope
(page). When a params mapping (st.query_params) is given, it is also
mirrored to ?theme=dark|light so a reload keeps it.
"""

from __future__ import annotations
from typing import MutableMapping, Optional

SESSION_KEY = "theme_is_dark"
PARAM_KEY = "theme"

PALETTES = {
    True: {
        "bg": "#0f172a",
        "surface": "#1e293b",
        "text": "#e2e8f0",
        "accent": "#22d3ee",
        "user_bubble": "#2563eb",
    },
    False: {
        "bg": "#f8fafc",
        "surface": "#ffffff",
        "text": "#0f172a",
        "accent": "#0891b2",
        "user_bubble": "#dbeafe",
    },
}


class ThemeStore:
    def __init__(
        self,
        session: MutableMapping,
        params: Optional[MutableMapping] = None,
        *,
        scope: str = "",
    ) -> None:
        self._session = session
        self._params = params
        self._key = f"{SESSION_KEY}_{scope}" if scope else SESSION_KEY
        if self._key not in self._session:
            self._session[self._key] = self._initial()

    def _initial(self) -> bool:
        if self._params is not None:
            return self._params.get(PARAM_KEY, "dark") != "light"
        return True

    @property
    def is_dark(self) -> bool:
        return bool(self._session[self._key])

    def toggle(self) -> bool:
        """Flip the theme; returns the new is_dark value."""
        value = not self.is_dark
        self._session[self._key] = value
        if self._params is not None:
            self._params[PARAM_KEY] = "dark" if value else "light"
        return value

    @property
    def icon(self) -> str:
        return "🌞" if self.is_dark else "🌙"


def theme_css(is_dark: bool) -> str:
    """Build the <style> block injected with st.html."""
    p = PALETTES[bool(is_dark)]
    return f"""
<style>
.stApp {{
    background: {p['bg']};
    color: {p['text']};
}}
.stApp [data-testid="stChatMessage"] {{
    background: {p['surface']};
    border-radius: 12px;
}}
.stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp li {{
    color: {p['text']};
}}
.highlight-accent {{
    color: {p['accent']};
    font-weight: 700;
}}
.feature-card {{
    background: {p['surface']};
    border: 1px solid {p['accent']}33;
    border-radius: 12px;
    padding: 0.75rem 1rem;
}}
</style>
"""
