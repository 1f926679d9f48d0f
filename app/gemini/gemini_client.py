# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 21:40
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Generative Language API (Gemini) REST client
"""
import httpx
from httpx import AsyncClient
from loguru import logger

from gemini.models import GenerateContentPayload, GenerateContentResponse
from settings import settings


class GeminiClient:
    def __init__(
        self,
        api_key: str = settings.GEMINI_API_KEY.get_secret_value(),
        model: str = settings.GEMINI_MODEL,
        base_url: str = settings.GEMINI_BASE_URL,
        timeout: float = settings.GEMINI_REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key.strip() if api_key else ""
        self.model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"/models/{self.model}:generateContent"

    async def generate_content(self, payload: GenerateContentPayload) -> GenerateContentResponse:
        """
        单次调用 generateContent

        API key 仅以 `key` query 参数传递，不写入日志。

        Raises:
            httpx.HTTPStatusError: 非 2xx 响应
            httpx.HTTPError: 网络层错误（超时、DNS、连接重置）
            ValueError: 2xx 响应体不是 JSON
            pydantic.ValidationError: JSON 结构与响应模型冲突
        """
        async with AsyncClient(
            base_url=self._base_url, timeout=self._timeout, transport=self._transport
        ) as client:
            response = await client.post(
                self.endpoint, params={"key": self.api_key}, json=payload.dumps_params()
            )
            response.raise_for_status()
            result = response.json()

        logger.debug(f"generateContent finished: model={self.model} status={response.status_code}")
        return GenerateContentResponse.model_validate(result)
