from pathlib import Path
from urllib.request import getproxies

import dotenv
from loguru import logger
from pydantic import SecretStr, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from telegram.ext import Application

dotenv.load_dotenv()


PROJECT_DIR = Path(__file__).parent
LOG_DIR = PROJECT_DIR.joinpath("logs")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, extra="ignore", frozen=True
    )

    TELEGRAM_BOT_TOKEN: SecretStr = Field(
        default="", description="Bot API token issued by https://t.me/BotFather. Required."
    )

    GEMINI_API_KEY: SecretStr = Field(
        default="",
        description="Generative Language API key. Without it every translation answers with a configuration error.",
    )

    GEMINI_BASE_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Generative Language API root",
    )

    GEMINI_MODEL: str = Field(
        default="gemini-2.5-flash-preview-05-20", description="Model used for generateContent"
    )

    GEMINI_REQUEST_TIMEOUT: float = Field(
        default=120.0,
        description="Timeout (seconds) of a single generateContent call. Long sentences can take a while.",
    )

    HTTP_REQUEST_TIMEOUT: float = Field(
        default=75.0, description="Timeout (seconds) for Telegram Bot API calls."
    )

    @property
    def has_telegram_bot_token(self) -> bool:
        return bool(self.TELEGRAM_BOT_TOKEN.get_secret_value().strip())

    @property
    def has_gemini_api_key(self) -> bool:
        return bool(self.GEMINI_API_KEY.get_secret_value().strip())

    def get_default_application(self) -> Application:
        _base_builder = (
            Application.builder()
            .token(self.TELEGRAM_BOT_TOKEN.get_secret_value())
            .connect_timeout(self.HTTP_REQUEST_TIMEOUT)
            .write_timeout(self.HTTP_REQUEST_TIMEOUT)
            .read_timeout(self.HTTP_REQUEST_TIMEOUT)
        )
        if proxy_url := getproxies().get("http"):
            logger.success(f"Using proxy: {proxy_url}")
            application = _base_builder.proxy(proxy_url).get_updates_proxy(proxy_url).build()
        else:
            application = _base_builder.build()

        return application


settings = Settings()  # type: ignore
