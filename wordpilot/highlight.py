import re
from typing import Iterable, List, NamedTuple


class Segment(NamedTuple):
    text: str
    highlighted: bool


def highlight_segments(text: str, words: Iterable[str]) -> List[Segment]:
    """Split ``text`` so every whole-word occurrence of ``words`` is highlighted.

    Matching is by text, not by span position: a word that also appears
    outside the span the model marked gets highlighted there as well.
    """
    unique = sorted({w for w in words if w.strip()}, key=len, reverse=True)
    if not text or not unique:
        return [Segment(text, False)] if text else []

    alternatives = "|".join(re.escape(w) for w in unique)
    # lookarounds instead of \b so words starting or ending in punctuation still match
    pattern = re.compile(rf"(?<!\w)(?:{alternatives})(?!\w)")

    segments: List[Segment] = []
    pos = 0
    for match in pattern.finditer(text):
        if match.start() > pos:
            segments.append(Segment(text[pos:match.start()], False))
        segments.append(Segment(match.group(0), True))
        pos = match.end()
    if pos < len(text):
        segments.append(Segment(text[pos:], False))
    return segments
