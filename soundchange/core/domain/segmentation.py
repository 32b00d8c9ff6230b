# soundchange\core\domain\segmentation.py
"""
Greedy segmentation of raw text into phonemes.

At each position the longest inventory symbol that matches wins, so a
language with both ``t`` and ``ts`` reads ``tsa`` as ``ts`` + ``a``.
Characters that start no symbol become placeholder phonemes with no
features; this keeps boundary marks and class letters from aborting
segmentation.
"""

from __future__ import annotations

from typing import List

import structlog

from soundchange.core.domain.models import Language, Phoneme

logger = structlog.get_logger()


def segment_word(text: str, language: Language) -> List[Phoneme]:
    """Splits ``text`` into phonemes of ``language``; whitespace is skipped."""
    symbols = sorted({s for s in language.symbols if s}, key=len, reverse=True)
    phonemes: List[Phoneme] = []
    index = 0

    while index < len(text):
        if text[index].isspace():
            index += 1
            continue
        symbol = next((s for s in symbols if text.startswith(s, index)), None)
        if symbol is None:
            logger.debug("unknown_symbol", text=text, char=text[index], position=index)
            phonemes.append(Phoneme(text[index]))
            index += 1
            continue
        phonemes.append(language.find_symbol(symbol))
        index += len(symbol)

    return phonemes


def join_phonemes(phonemes) -> str:
    return "".join(p.symbol for p in phonemes)
