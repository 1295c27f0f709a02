"""
Tests for the rerun-spanning session bookkeeping used by the Streamlit layer
"""
import pytest

from chat_core.ui_state import LLMSlot, SendGuard, key_signature


class TestSendGuard:
    def test_fresh_session_is_not_interrupted(self):
        assert SendGuard({}, "classic").consume_interrupted() is False

    def test_completed_send_is_not_interrupted(self):
        session = {}
        guard = SendGuard(session, "classic")

        guard.begin()
        guard.end()

        assert SendGuard(session, "classic").consume_interrupted() is False

    def test_rerun_during_send_drops_next_input_once(self):
        session = {}
        guard = SendGuard(session, "classic")

        guard.begin()
        # the script run is interrupted here, end() never runs

        next_run = SendGuard(session, "classic")
        assert next_run.consume_interrupted() is True
        assert SendGuard(session, "classic").consume_interrupted() is False

    def test_scopes_are_independent(self):
        session = {}
        SendGuard(session, "studio").begin()

        assert SendGuard(session, "classic").consume_interrupted() is False
        assert SendGuard(session, "studio").consume_interrupted() is True


class FakeFactory:
    def __init__(self):
        self.keys = []

    def __call__(self, api_key):
        if not api_key:
            raise RuntimeError("Missing GEMINI_API_KEY")
        self.keys.append(api_key)
        return object()


class TestLLMSlot:
    def test_builds_once_per_key(self):
        factory = FakeFactory()
        slot = LLMSlot({}, factory)

        first, rebuilt = slot.ensure("key-1")
        again, rebuilt_again = slot.ensure("key-1")

        assert rebuilt is True
        assert rebuilt_again is False
        assert again is first
        assert factory.keys == ["key-1"]

    def test_new_key_rebuilds_client(self):
        factory = FakeFactory()
        session = {}
        slot = LLMSlot(session, factory)
        first, _ = slot.ensure("typo-key")

        second, rebuilt = LLMSlot(session, factory).ensure("right-key")

        assert rebuilt is True
        assert second is not first
        assert slot.client is second
        assert factory.keys == ["typo-key", "right-key"]

    def test_key_itself_is_not_stored(self):
        session = {}
        LLMSlot(session, FakeFactory()).ensure("secret-key")

        assert "secret-key" not in session.values()
        assert session[LLMSlot.SIG_KEY] == key_signature("secret-key")

    def test_factory_error_leaves_no_client(self):
        factory = FakeFactory()
        session = {}
        slot = LLMSlot(session, factory)
        slot.ensure("key-1")

        with pytest.raises(RuntimeError):
            slot.ensure("")

        assert slot.client is None
        # a later valid key builds again
        _, rebuilt = slot.ensure("key-1")
        assert rebuilt is True
