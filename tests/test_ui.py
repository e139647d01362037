"""Tests for the Textual TUI, driven through the pilot."""
import pytest

from conftest import FakeResponder, RecordingClipboard
from relaychat.transcript import MessageKind
from relaychat.ui import (
    ChatInputBar,
    DebugPanel,
    LogLevel,
    MessageView,
    RelayChatApp,
    WelcomePanel,
)


async def send(app, pilot, text: str) -> None:
    app.query_one(ChatInputBar).set_text(text)
    await pilot.press("enter")
    await pilot.pause()


class TestRelayChatApp:
    """End-to-end behaviour of the chat screen."""

    @pytest.mark.asyncio
    async def test_welcome_shown_when_empty(self):
        app = RelayChatApp(responder=FakeResponder())
        async with app.run_test() as pilot:
            await pilot.pause()

            assert app.query_one(WelcomePanel).display
            assert len(app.query(MessageView)) == 0

    @pytest.mark.asyncio
    async def test_exchange_renders_both_messages(self):
        responder = FakeResponder(payload={"response": "hi there"})
        app = RelayChatApp(responder=responder)
        async with app.run_test() as pilot:
            await send(app, pilot, "hello")
            await app.workers.wait_for_complete()
            await pilot.pause()

            contents = [view.message.content for view in app.query(MessageView)]
            assert contents == ["hello", "hi there"]
            assert not app.query_one(WelcomePanel).display
            assert responder.prompts == ["hello"]

    @pytest.mark.asyncio
    async def test_pending_disables_input_and_shows_stop(self):
        responder = FakeResponder(gated=True)
        app = RelayChatApp(responder=responder)
        async with app.run_test() as pilot:
            await send(app, pilot, "hello")
            await responder.started.wait()
            await pilot.pause()

            assert app.controller.is_pending
            assert app.query_one("#chat-input").disabled
            assert app.query_one("#stop-btn").display
            assert not app.query_one("#send-btn").display
            assert app.query_one("#thinking").display

            responder.release.set()
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert not app.controller.is_pending
            assert not app.query_one("#chat-input").disabled
            assert not app.query_one("#thinking").display

    @pytest.mark.asyncio
    async def test_stop_appends_stopped_notice(self):
        responder = FakeResponder(gated=True)
        app = RelayChatApp(responder=responder)
        async with app.run_test() as pilot:
            await send(app, pilot, "hello")
            await responder.started.wait()
            await pilot.pause()
            app.action_stop_response()
            await app.workers.wait_for_complete()
            await pilot.pause()

            views = list(app.query(MessageView))
            assert views[-1].message.kind == MessageKind.CANCELLED
            assert views[-1].has_class("stopped-message")
            assert len(views[-1].query(".copy-btn")) == 0

    @pytest.mark.asyncio
    async def test_clear_chat_restores_welcome(self):
        app = RelayChatApp(responder=FakeResponder())
        async with app.run_test() as pilot:
            await send(app, pilot, "hello")
            await app.workers.wait_for_complete()
            await pilot.pause()

            await pilot.press("ctrl+k")
            await pilot.pause()

            assert app.controller.messages == ()
            assert app.query_one(WelcomePanel).display

    @pytest.mark.asyncio
    async def test_suggested_prompt_fills_input(self):
        app = RelayChatApp(responder=FakeResponder())
        async with app.run_test() as pilot:
            app.query_one(WelcomePanel).post_message(WelcomePanel.PromptSelected("Tell me a joke"))
            await pilot.pause()

            assert app.query_one("#chat-input").value == "Tell me a joke"
            assert app.controller.messages == ()

    @pytest.mark.asyncio
    async def test_copy_last_response_uses_clipboard(self):
        clipboard = RecordingClipboard()
        app = RelayChatApp(responder=FakeResponder(payload={"output": "copy me"}))
        async with app.run_test() as pilot:
            app.controller.set_clipboard(clipboard)
            await send(app, pilot, "hello")
            await app.workers.wait_for_complete()
            await pilot.pause()

            app.action_copy_last_response()

            assert clipboard.copied == ["copy me"]

    @pytest.mark.asyncio
    async def test_log_level_shows_panel(self):
        app = RelayChatApp(responder=FakeResponder(), log_level="info")
        async with app.run_test() as pilot:
            await pilot.pause()

            panel = app.query_one(DebugPanel)
            assert panel.display
            assert panel.log_level == LogLevel.INFO

    @pytest.mark.asyncio
    async def test_log_panel_filters_below_threshold(self):
        app = RelayChatApp(responder=FakeResponder(), log_level="warning")
        async with app.run_test() as pilot:
            await pilot.pause()
            panel = app.query_one(DebugPanel)
            before = len(panel.lines)

            panel.log_entry("TUI", "quiet", LogLevel.DEBUG)
            await pilot.pause()
            assert len(panel.lines) == before

            panel.log_entry("TUI", "loud", LogLevel.ERROR)
            await pilot.pause()
            assert len(panel.lines) == before + 1

    @pytest.mark.asyncio
    async def test_ctrl_d_toggles_log_panel(self):
        app = RelayChatApp(responder=FakeResponder())
        async with app.run_test() as pilot:
            await pilot.pause()
            panel = app.query_one(DebugPanel)
            assert not panel.display

            await pilot.press("ctrl+d")
            await pilot.pause()
            assert panel.display

            await pilot.press("ctrl+d")
            await pilot.pause()
            assert not panel.display
