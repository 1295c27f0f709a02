"""
The two chat page presets. They share one controller and differ only in
literal reply strings and presentation options.
"""

from __future__ import annotations

from .models import ChatVariant, DateStyle, ReplyStrings

CLASSIC = ChatVariant(
    key="classic",
    title="ChatBot",
    strings=ReplyStrings(
        fallback_text="🤖 No response",
        error_text="Error: Could not fetch response.",
    ),
    input_placeholder="Type your message...",
    tagline="Your AI Assistant",
    url_path="",
    show_timestamps=False,
    persist_theme=False,
    date_style=DateStyle.LONG,
    clock_seconds=True,
    header_date=False,
    welcome_cards=True,
)

STUDIO = ChatVariant(
    key="studio",
    title="Chat - AI",
    strings=ReplyStrings(
        fallback_text="No response",
        error_text=(
            "Apologies, I'm unable to process your request at the moment. "
            "Please try again later."
        ),
    ),
    input_placeholder="Start your conversation here...",
    tagline="How can I assist your journey of discovery today?",
    url_path="chatbot",
    show_timestamps=True,
    persist_theme=True,
    date_style=DateStyle.SHORT,
    clock_seconds=False,
    header_date=True,
    welcome_cards=False,
)

VARIANTS = {v.key: v for v in (CLASSIC, STUDIO)}


def get_variant(key: str) -> ChatVariant:
    try:
        return VARIANTS[key]
    except KeyError:
        raise KeyError(
            f"Unknown chat variant {key!r}; expected one of {sorted(VARIANTS)}"
        ) from None
