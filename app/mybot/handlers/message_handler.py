# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 22:45
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : The main message handler routing chat messages to the translator.
"""
from loguru import logger
from telegram import Update
from telegram.ext import ContextTypes

from models import IncomingMessage
from mybot.services import translation_service
from mybot.services.chat_gateway import ChatGateway, extract_incoming_message
from mybot.task_manager import fire_and_forget, non_blocking_handler
from prompts import WELCOME_TEXT


async def route_message(message: IncomingMessage, gateway: ChatGateway) -> None:
    """
    Per-message classifier. There is no state across messages.

    - no text: ignored (stickers, photos, ...)
    - /start: welcome text
    - any other /command: ignored
    - anything else: translated, exactly one reply to the same chat
    """
    if not message.text:
        return

    if message.is_start_command:
        await gateway.send_message(message.chat_id, WELCOME_TEXT)
        return

    if message.is_command:
        return

    logger.info(f'Received message from {message.sender_display_name}: "{message.text}"')
    fire_and_forget(
        gateway.send_typing_indicator(message.chat_id), name=f"typing-{message.chat_id}"
    )

    result = await translation_service.translate(message.text)

    await gateway.send_message(message.chat_id, result.text)
    if result.ok:
        logger.info(f'Sent translation: "{result.text}"')
    else:
        logger.info(f'Sent fallback answer to chat {message.chat_id}: "{result.text}"')


@non_blocking_handler("handle_message")
async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    incoming = extract_incoming_message(update)
    if not incoming:
        return

    await route_message(incoming, ChatGateway(context.bot))
