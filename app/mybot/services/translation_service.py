# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 22:10
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Service for translating user text into Badini via Gemini.
"""
import httpx
from loguru import logger
from pydantic import ValidationError

from gemini import GeminiClient
from gemini.models import GenerateContentPayload
from models import TranslationRequest, TranslationResult
from mybot.services.dialect_corrections import apply_dialect_corrections
from prompts import BADINI_SYSTEM_INSTRUCTION

MISSING_API_KEY_ANSWER = "Error: The bot is not configured correctly. Missing API Key."
UPSTREAM_FAILURE_ANSWER = "Sorry, I couldn't get a translation right now."
TRANSPORT_FAILURE_ANSWER = "An error occurred while translating. Please try again."
NOT_AVAILABLE_ANSWER = "Translation not available."


def _redact(text: str, secret: str) -> str:
    return text.replace(secret, "***") if secret else text


async def translate(source_text: str, client: GeminiClient | None = None) -> TranslationResult:
    """
    将任意语种的文本翻译为 Badini 库尔德语

    单次尝试，不重试。所有失败都在这里被转换为固定的提示文本，不会向调用方抛出异常。
    """
    client = client or GeminiClient()
    request = TranslationRequest(source_text=source_text)

    if not client.has_api_key:
        logger.error("Gemini API key is missing, skipping translation request")
        return TranslationResult(text=MISSING_API_KEY_ANSWER)

    payload = GenerateContentPayload.from_text(
        request.source_text, system_instruction=BADINI_SYSTEM_INSTRUCTION
    )

    try:
        result = await client.generate_content(payload)
    except httpx.HTTPStatusError as err:
        status_code = err.response.status_code
        body = _redact(err.response.text, client.api_key)
        # 429 与 5xx 多为暂时性故障；其余 4xx 通常意味着 key 或请求本身有问题
        if status_code == 429 or status_code >= 500:
            logger.warning(f"Gemini API error status: {status_code} - body: {body}")
        else:
            logger.error(f"Gemini API error status: {status_code} - body: {body}")
        return TranslationResult(text=UPSTREAM_FAILURE_ANSWER)
    except ValidationError as err:
        logger.warning(f"Unexpected generateContent response shape: {err.error_count()} errors")
        return TranslationResult(text=NOT_AVAILABLE_ANSWER)
    except Exception as err:
        logger.error(
            f"Error calling Gemini API: {type(err).__name__} - {_redact(str(err), client.api_key)}"
        )
        return TranslationResult(text=TRANSPORT_FAILURE_ANSWER)

    translation = (result.first_text or "").strip()
    if not translation:
        logger.warning(f"Gemini returned no text - candidates={len(result.candidates or [])}")
        return TranslationResult(text=NOT_AVAILABLE_ANSWER)

    return TranslationResult(text=apply_dialect_corrections(translation), ok=True)
