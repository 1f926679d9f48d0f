# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 22:30
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Thin layer between python-telegram-bot and the message router.
"""
from typing import List

from loguru import logger
from telegram import Bot, Update
from telegram.constants import ChatAction, MessageLimit

from models import IncomingMessage

MAX_MESSAGE_LENGTH = MessageLimit.MAX_TEXT_LENGTH


def extract_incoming_message(update: Update) -> IncomingMessage | None:
    message = update.message
    if not message or not message.chat:
        return None

    sender = message.from_user
    return IncomingMessage(
        chat_id=message.chat.id,
        sender_display_name=sender.first_name if sender else "",
        text=message.text,
    )


def split_message_text(text: str, limit: int = MAX_MESSAGE_LENGTH) -> List[str]:
    """按 Telegram 单条消息长度上限切分文本，尽量在换行处断开"""
    chunks = []
    while len(text) > limit:
        cut = text.rfind("\n", 0, limit)
        if cut <= 0:
            cut = limit
        chunks.append(text[:cut])
        text = text[cut:].lstrip("\n")
    if text:
        chunks.append(text)
    return chunks


class ChatGateway:
    def __init__(self, bot: Bot):
        self._bot = bot

    async def send_message(self, chat_id: int, text: str) -> bool:
        """发送纯文本消息，超长文本拆分为多条。失败只记录日志，不抛出。"""
        try:
            for chunk in split_message_text(text):
                await self._bot.send_message(chat_id=chat_id, text=chunk)
            return True
        except Exception as err:
            logger.error(f"Failed to send message to chat {chat_id}: {err}")
            return False

    async def send_typing_indicator(self, chat_id: int) -> None:
        try:
            await self._bot.send_chat_action(chat_id=chat_id, action=ChatAction.TYPING)
        except Exception as err:
            logger.debug(f"Failed to send typing indicator to chat {chat_id}: {err}")
