# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 21:15
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Request-scoped entities passed between the gateway, router and translator
"""
from pydantic import BaseModel, Field


class IncomingMessage(BaseModel):
    chat_id: int
    sender_display_name: str = Field(default="", description="发送者的 first_name，仅用于日志")
    text: str | None = Field(default=None, description="贴纸、图片等非文本消息为 None")

    @property
    def is_command(self) -> bool:
        return bool(self.text) and self.text.startswith("/")

    @property
    def is_start_command(self) -> bool:
        return bool(self.text) and self.text.startswith("/start")


class TranslationRequest(BaseModel):
    source_text: str = Field(min_length=1)


class TranslationResult(BaseModel):
    text: str = Field(description="模型译文（已校正）或固定的错误提示，永不为空")
    ok: bool = Field(default=False, description="仅当 text 来自模型输出时为 True")
