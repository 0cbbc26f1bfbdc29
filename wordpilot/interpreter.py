"""Turn raw model output into a :class:`CorrectionResult`.

The model marks words it could not translate as ``**word**``. The scanner
below walks the output once, left to right, switching between an outside
state and an inside-span state on every ``**`` it meets:

- the first ``**`` opens a span, the next ``**`` closes it, so spans never
  nest (``**a **b** c**`` gives the spans ``"a "`` and ``" c"``);
- a span cannot cross a line break (LF, CR, U+2028 or U+2029), and an
  opener that is never closed is kept as literal text;
- ``****`` is an empty span and records ``""``.
"""

from typing import List, Tuple

from .models import CorrectionResult

MARKER = "**"
LINE_BREAKS = frozenset("\n\r\u2028\u2029")
ASCII_MAX = 0x7F


def scan_markers(raw: str) -> Tuple[str, List[str]]:
    """Return ``(text_without_markers, marked_words)`` for ``raw``."""
    out: List[str] = []
    words: List[str] = []
    span: List[str] = []
    inside = False
    i = 0
    n = len(raw)

    while i < n:
        if raw.startswith(MARKER, i):
            if inside:
                word = "".join(span)
                words.append(word)
                out.append(word)
                inside = False
            else:
                span = []
                inside = True
            i += len(MARKER)
            continue

        ch = raw[i]
        if not inside:
            out.append(ch)
        elif ch in LINE_BREAKS:
            out.append(MARKER)
            out.extend(span)
            out.append(ch)
            inside = False
        else:
            span.append(ch)
        i += 1

    if inside:
        out.append(MARKER)
        out.extend(span)

    return "".join(out), words


def _count_non_ascii(text: str) -> int:
    return sum(1 for ch in text if ord(ch) > ASCII_MAX)


def detect_translation_occurred(original: str, corrected: str) -> bool:
    """Guess whether the model translated instead of only correcting.

    A mostly non-Latin input turning into mostly Latin output is a strong
    signal. A length change above 40% is a weaker one and heavy corrections
    can trip it.
    """
    if len(original) == 0:
        return False

    non_latin_original = _count_non_ascii(original)
    non_latin_corrected = _count_non_ascii(corrected)

    if non_latin_original > len(original) * 0.3 and non_latin_corrected < len(corrected) * 0.1:
        return True

    length_ratio = abs(len(original) - len(corrected)) / len(original)
    return length_ratio > 0.4


def interpret(original: str, raw_model_output: str) -> CorrectionResult:
    corrected, words = scan_markers(raw_model_output)
    return CorrectionResult(
        corrected_text=corrected,
        is_translated=detect_translation_occurred(original, corrected),
        untranslatable_words=tuple(words),
    )
