# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 22:02
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Sorani -> Badini safety net applied to every model answer
"""
from typing import List, Tuple

# (Sorani, Badini), applied in order
DIALECT_CORRECTIONS: List[Tuple[str, str]] = [
    # "I"
    ("من ", "ئەز "),
    # "How are you"
    ("چۆنی", "چاوانی"),
]


def apply_dialect_corrections(text: str) -> str:
    for wrong, right in DIALECT_CORRECTIONS:
        text = text.replace(wrong, right)
    return text
