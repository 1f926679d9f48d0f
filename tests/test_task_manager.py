# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/4 09:20
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Background handler tasks and the shutdown drain
"""
import asyncio
from unittest.mock import AsyncMock, Mock, patch

import pytest
from telegram import Update, Message, Chat, User
from telegram.error import NetworkError

from models import TranslationResult
from mybot import task_manager
from mybot.handlers.message_handler import handle_message

CHAT_ID = -987654


class ClosingBot:
    """Bot double whose HTTP client refuses requests once shut down."""

    def __init__(self):
        self.sent = []
        self.closed = False

    async def send_message(self, chat_id, text):
        if self.closed:
            raise NetworkError("HTTPXRequest is not initialized")
        self.sent.append(("sendMessage", chat_id, text))

    async def send_chat_action(self, chat_id, action):
        if self.closed:
            raise NetworkError("HTTPXRequest is not initialized")
        self.sent.append(("sendChatAction", chat_id, action))

    async def shutdown(self):
        self.closed = True


def make_update(text: str) -> Update:
    update = Mock(spec=Update)
    message = Mock(spec=Message)
    message.text = text

    user = Mock(spec=User)
    user.first_name = "Azad"
    message.from_user = user

    chat = Mock(spec=Chat)
    chat.id = CHAT_ID
    message.chat = chat

    update.message = message
    update.effective_message = message
    update.effective_chat = chat
    return update


async def slow_translate(source_text: str) -> TranslationResult:
    await asyncio.sleep(0.05)
    return TranslationResult(text="ئەز باشم", ok=True)


class TestShutdownDrain:

    @pytest.fixture(autouse=True)
    def fresh_registry(self, monkeypatch):
        monkeypatch.setattr(task_manager, "_active_tasks", set())

    @pytest.mark.asyncio
    async def test_in_flight_reply_is_sent_before_bot_shutdown(self):
        import main

        bot = ClosingBot()
        context = Mock()
        context.bot = bot
        application = Mock()
        application.bot = bot

        with patch('mybot.handlers.message_handler.translation_service') as mock_translation:
            mock_translation.translate = AsyncMock(side_effect=slow_translate)

            await handle_message(make_update("I am fine"), context)

            # Application.run_polling: stop() -> post_stop -> shutdown() -> post_shutdown
            await main.drain_active_tasks(application)
            await bot.shutdown()

        assert ("sendMessage", CHAT_ID, "ئەز باشم") in bot.sent

    @pytest.mark.asyncio
    async def test_wait_for_all_tasks_without_tasks(self):
        assert await task_manager.wait_for_all_tasks(timeout=0.1) is True

    @pytest.mark.asyncio
    async def test_wait_for_all_tasks_times_out(self):
        task = task_manager.fire_and_forget(asyncio.sleep(1), name="sleeper")

        assert await task_manager.wait_for_all_tasks(timeout=0.01) is False

        task.cancel()

    @pytest.mark.asyncio
    async def test_fire_and_forget_failure_is_dropped(self):
        async def boom():
            raise RuntimeError("typing failed")

        task = task_manager.fire_and_forget(boom(), name="boom")
        await asyncio.gather(task, return_exceptions=True)
        await asyncio.sleep(0)

        assert task not in task_manager._active_tasks


class TestDrainRegistration:

    def test_drain_runs_as_post_stop(self, monkeypatch):
        import main

        mock_settings = Mock(
            has_telegram_bot_token=True, has_gemini_api_key=True, GEMINI_MODEL="gemini-test"
        )
        monkeypatch.setattr(main, "settings", mock_settings)

        main.main()

        application = mock_settings.get_default_application.return_value
        # post_shutdown runs after the bot's HTTP client is closed, too late to reply
        assert application.post_stop is main.drain_active_tasks
