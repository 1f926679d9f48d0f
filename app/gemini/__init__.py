# -*- coding: utf-8 -*-
from .gemini_client import GeminiClient

__all__ = ["GeminiClient"]
