# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 23:00
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Badini translator bot entrypoint
"""
import sys

from loguru import logger
from telegram import Update, BotCommand
from telegram.ext import Application, MessageHandler, filters

from mybot.handlers.message_handler import handle_message
from mybot.task_manager import wait_for_all_tasks
from settings import settings, LOG_DIR
from utils import init_log

init_log(
    runtime=LOG_DIR.joinpath("runtime.log"),
    error=LOG_DIR.joinpath("error.log"),
    serialize=LOG_DIR.joinpath("serialize.log"),
)


async def setup_bot_commands(application: Application):
    """设置机器人的命令菜单"""
    commands = [BotCommand("start", "Start the Badini translator")]

    try:
        await application.bot.set_my_commands(commands)
        logger.success(f"Bot command menu set: {[f'/{cmd.command}' for cmd in commands]}")
    except Exception as e:
        logger.error(f"Failed to set bot command menu: {e}")


async def drain_active_tasks(application: Application):
    await wait_for_all_tasks(timeout=settings.GEMINI_REQUEST_TIMEOUT)


def main() -> None:
    """Start the bot."""
    if not settings.has_telegram_bot_token:
        logger.critical("FATAL: Telegram Bot Token is not provided! The bot cannot start.")
        sys.exit(1)

    if not settings.has_gemini_api_key:
        logger.warning("GEMINI_API_KEY is missing, every translation will answer with an error")

    logger.info(f"🤖 Starting Multilingual Badini Translator Bot (model={settings.GEMINI_MODEL})")

    application = settings.get_default_application()
    application.post_init = setup_bot_commands
    application.post_stop = drain_active_tasks

    # /start 也走同一个路由，由 route_message 统一分类
    application.add_handler(MessageHandler(filters.UpdateType.MESSAGE, handle_message))

    # run_polling 自行处理 SIGINT/SIGTERM；post_stop 在 bot 的 HTTP 客户端关闭之前执行
    logger.success("✅ Bot is running and listening for messages!")
    application.run_polling(allowed_updates=[Update.MESSAGE])


if __name__ == "__main__":
    main()
