# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 21:31
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : generateContent request/response bodies
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str | None = None


class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: str | None = None
    parts: List[Part] | None = Field(default_factory=list)


class SystemInstruction(BaseModel):
    parts: List[Part]


class GenerateContentPayload(BaseModel):
    contents: List[Content]
    system_instruction: SystemInstruction = Field(serialization_alias="systemInstruction")

    @classmethod
    def from_text(cls, text: str, system_instruction: str) -> "GenerateContentPayload":
        return cls(
            contents=[Content(parts=[Part(text=text)])],
            system_instruction=SystemInstruction(parts=[Part(text=system_instruction)]),
        )

    def dumps_params(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Content | None = None
    finish_reason: str | None = Field(default=None, alias="finishReason")


class GenerateContentResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    candidates: List[Candidate] | None = Field(default_factory=list)

    @property
    def first_text(self) -> str | None:
        """candidates[0].content.parts[0].text, or None when any link of the chain is missing"""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if not content or not content.parts:
            return None
        return content.parts[0].text
