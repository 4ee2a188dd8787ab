"""Tests for the Textual dialog shell."""

from __future__ import annotations

import pytest
from textual.widgets import Input

from chatbot_cli.models.task import Todo
from chatbot_cli.ui.textual_app import ChatBotApp
from chatbot_cli.utils.ui import responses


async def submit(pilot, line: str) -> None:
    pilot.app.query_one("#user-input", Input).value = line
    await pilot.press("enter")
    await pilot.pause()


@pytest.mark.asyncio
async def test_greets_on_mount(session):
    app = ChatBotApp(session)
    async with app.run_test():
        assert app.transcript == [("bot", responses.welcome(), False)]
        assert app.focused is app.query_one("#user-input", Input)


@pytest.mark.asyncio
async def test_startup_message_is_an_error(session):
    app = ChatBotApp(session, startup_message="LOADING ERROR\nbad line")
    async with app.run_test():
        assert app.transcript[1] == ("bot", "LOADING ERROR\nbad line", True)


@pytest.mark.asyncio
async def test_submit_runs_command(session):
    app = ChatBotApp(session)
    async with app.run_test() as pilot:
        await submit(pilot, "todo read book")

        assert app.transcript[1] == ("user", "todo read book", False)
        speaker, text, is_error = app.transcript[2]
        assert speaker == "bot"
        assert text.startswith("Got it. I've added this task:")
        assert not is_error
        assert app.query_one("#user-input", Input).value == ""
    assert session.tasks.get(0) == Todo(description="read book")


@pytest.mark.asyncio
async def test_error_response_flagged(session):
    app = ChatBotApp(session)
    async with app.run_test() as pilot:
        await submit(pilot, "delete 3")
        assert app.transcript[-1][2] is True


@pytest.mark.asyncio
async def test_blank_input_ignored(session):
    app = ChatBotApp(session)
    async with app.run_test() as pilot:
        await submit(pilot, "   ")
        assert len(app.transcript) == 1


@pytest.mark.asyncio
async def test_bye_exits_and_saves(session, store):
    app = ChatBotApp(session)
    async with app.run_test() as pilot:
        await submit(pilot, "todo read book")
        app.query_one("#user-input", Input).value = "bye"
        await pilot.press("enter")

    assert app.transcript[-1] == ("bot", responses.farewell(), False)
    assert store.path.read_text(encoding="utf-8") == "[T][ ] read book\n"
