# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 10:12
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Sorani -> Badini safety net
"""
import pytest

from mybot.services.dialect_corrections import apply_dialect_corrections


class TestDialectCorrections:

    def test_pronoun_is_replaced_everywhere(self):
        text = "من دچم بازار. من خانی دبینم"
        corrected = apply_dialect_corrections(text)

        assert "من " not in corrected
        assert corrected.count("ئەز ") == 2
        assert corrected == "ئەز دچم بازار. ئەز خانی دبینم"

    def test_greeting_is_replaced(self):
        assert apply_dialect_corrections("چۆنی؟") == "چاوانی؟"

    def test_pronoun_without_trailing_space_is_kept(self):
        # only the standalone word followed by a space is rewritten
        assert apply_dialect_corrections("ئەو من") == "ئەو من"

    def test_badini_text_is_untouched(self):
        text = "ناڤێ تە چیە؟"
        assert apply_dialect_corrections(text) == text

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "hello world",
            "من چۆنی",
            "من من من ",
            "چۆنیچۆنی من \nمن ",
            "ئەز چاوانی",
        ],
    )
    def test_idempotent(self, text):
        once = apply_dialect_corrections(text)
        assert apply_dialect_corrections(once) == once
