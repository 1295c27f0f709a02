"""
UI layer
Purpose: Streamlit-only glue. Renders the two chat pages, collects user input,
and delegates every send to the session controller. Keeps UI concerns (layout,
theme, clock) separate from the request/reply logic so that logic can be unit
tested without Streamlit.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional

import streamlit as st

from chat_core.config import get_settings
from chat_core.controller import ChatSessionController
from chat_core.logging_config import configure_logging
from chat_core.models import Author, ChatVariant, SessionState
from chat_core.services.greeting import (
    format_clock,
    format_date,
    format_turn_time,
    greeting_for,
)
from chat_core.services.llm_gemini import GeminiLLMClient
from chat_core.services.theme import ThemeStore, theme_css
from chat_core.ui_state import LLMSlot, SendGuard
from chat_core.variants import CLASSIC, STUDIO, VARIANTS

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("chat_app")

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="Gemini Chat",
    page_icon="🤖",
    layout="centered",
)

# ---------------------------
# UI constants
# ---------------------------
FEATURES = [
    ("&lt;/&gt;", "Code Help", "Get coding solutions in multiple languages"),
    ("?", "Knowledge", "Answers to your general questions"),
    ("💡", "Fast Responses", "Quick and accurate information"),
]
AVATARS = {Author.USER: "🧑‍💻", Author.ASSISTANT: "🤖"}

# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
llm_slot = LLMSlot(
    st_session, lambda key: GeminiLLMClient(key, settings.llm_settings())
)


# ---------------------------
# Helpers
# ---------------------------
def controller_key(variant: ChatVariant) -> str:
    return f"controller_{variant.key}"


def get_controller(variant: ChatVariant) -> Optional[ChatSessionController]:
    """Return this page's controller, creating it once the LLM client exists."""
    key = controller_key(variant)
    if st_session.get(key) is None and llm_slot.client is not None:
        st_session[key] = ChatSessionController(llm_slot.client, variant.strings)
        logger.info("New %s session", variant.key)
    return st_session.get(key)


def ensure_llm(api_key: str) -> None:
    """Build the Gemini client, again whenever the entered key changes."""
    try:
        client, rebuilt = llm_slot.ensure(api_key)
    except RuntimeError as e:
        st.error(f"Gemini client init failed: {e}")
        st.stop()
    if rebuilt:
        for variant in VARIANTS.values():
            controller = st_session.get(controller_key(variant))
            if controller is not None:
                controller.llm = client


def draw_transcript(placeholder, state: SessionState, variant: ChatVariant) -> None:
    """Redraw the whole conversation, plus the typing indicator while pending."""
    with placeholder.container():
        if variant.show_timestamps:
            status = "🟡 Typing..." if state.pending else "🟢 Online"
            st.caption(status)

        if not len(state.transcript) and not state.pending:
            st.markdown("✨ **Ask me anything!**")

        for turn in state.transcript:
            with st.chat_message(turn.author.value, avatar=AVATARS[turn.author]):
                if variant.show_timestamps:
                    sender = "You" if turn.author == Author.USER else "AI"
                    st.caption(f"{sender} · {format_turn_time(turn.created_at)}")
                st.markdown(turn.text)

        if state.pending:
            with st.chat_message(Author.ASSISTANT.value, avatar=AVATARS[Author.ASSISTANT]):
                st.markdown("_…_")


@st.fragment(run_every="1s")
def header_clock(variant: ChatVariant) -> None:
    now = datetime.now()
    st.markdown(f"**{format_clock(now, seconds=variant.clock_seconds)}**")
    if variant.header_date:
        st.caption(format_date(now, variant.date_style))


def render_header(variant: ChatVariant, theme: ThemeStore) -> None:
    left, mid, right = st.columns([4, 2, 1], vertical_alignment="center")
    with left:
        st.markdown(f"## 🤖 {variant.title}")
    with mid:
        header_clock(variant)
    with right:
        st.button(
            theme.icon,
            key=f"theme_toggle_{variant.key}",
            help="Toggle theme",
            on_click=theme.toggle,
        )


def render_welcome(variant: ChatVariant) -> None:
    now = datetime.now()
    st.markdown(f"# {greeting_for(now.hour)}")
    if not variant.header_date:
        st.caption(format_date(now, variant.date_style))
    st.html(f'<h3 class="highlight-accent">{variant.tagline}</h3>')
    if not variant.welcome_cards:
        return
    st.markdown(
        "I'm here to help with any questions you have. Ask me about coding, "
        "general knowledge, or anything else that comes to mind."
    )
    for col, (icon, title, text) in zip(st.columns(len(FEATURES)), FEATURES):
        with col:
            st.html(
                f'<div class="feature-card"><div>{icon}</div>'
                f"<strong>{title}</strong><p>{text}</p></div>"
            )


def render_chat_page(variant: ChatVariant) -> None:
    theme = ThemeStore(
        st_session,
        st.query_params if variant.persist_theme else None,
        scope=variant.key,
    )
    guard = SendGuard(st_session, variant.key)
    interrupted = guard.consume_interrupted()
    st.html(theme_css(theme.is_dark))

    controller = get_controller(variant)
    if controller is None:
        st.info("Please enter your Gemini API key in the sidebar to continue.")
        st.stop()

    with st.sidebar:
        st.markdown("## Session Controls")
        if st.button(
            "🧹 Clear conversation",
            key=f"reset_{variant.key}",
            disabled=controller.pending,
        ):
            if controller.reset():
                st.rerun()

    render_header(variant, theme)
    if not controller.transcript:
        render_welcome(variant)
    st.divider()

    body = st.empty()
    draw_transcript(body, controller.state, variant)

    raw = st.chat_input(
        variant.input_placeholder,
        key=f"chat_input_{variant.key}",
        disabled=controller.pending,
    )
    # a rerun during the previous wait leaves the guard set; that input is dropped
    if raw is not None and not interrupted:
        controller.update_draft(raw)
        unsubscribe = controller.subscribe(
            lambda state: draw_transcript(body, state, variant)
        )
        guard.begin()
        try:
            accepted = asyncio.run(controller.submit(raw))
        finally:
            unsubscribe()
        guard.end()
        if accepted:
            st.rerun()

    st.caption("Powered by Gemini AI.")


def classic_page() -> None:
    render_chat_page(CLASSIC)


def studio_page() -> None:
    render_chat_page(STUDIO)


# ---------------------------
# SIDEBAR: API key
# ---------------------------
with st.sidebar:
    st.markdown("# Settings")
    api_key = settings.gemini_api_key
    if not api_key:
        st.markdown("## Gemini API Key Required")
        api_key = st.text_input(
            "Enter your API key",
            type="password",
            help="We do not store your key. It stays in your session only.",
        )
    if api_key:
        ensure_llm(api_key)
    st.caption(f"Model: **{settings.gemini_model}**")
    st.divider()

# ---------------------------
# Pages
# ---------------------------
pages = st.navigation(
    [
        st.Page(classic_page, title=CLASSIC.title, icon="💬", default=True),
        st.Page(studio_page, title=STUDIO.title, icon="✨", url_path=STUDIO.url_path),
    ]
)
pages.run()
