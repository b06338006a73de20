from __future__ import annotations

import json

from gemini_ocr.domain.errors import NoDataError
from gemini_ocr.domain.models import (
    BoxPoint,
    Location,
    OcrContent,
    OcrResult,
    WordsResultItem,
)


def box_points_from_location(location: Location) -> list[BoxPoint]:
    """Return the four corners clockwise from the top-left."""

    right = location.left + location.width
    bottom = location.top + location.height
    return [
        BoxPoint(location.left, location.top),
        BoxPoint(right, location.top),
        BoxPoint(right, bottom),
        BoxPoint(location.left, bottom),
    ]


def parse_response(raw_response: str) -> OcrResult:
    try:
        data = json.loads(raw_response)
    except json.JSONDecodeError as exc:
        raise NoDataError(raw_response) from exc

    first_part = _first_part(data)
    if first_part is None:
        raise NoDataError(raw_response)

    words_result = first_part.get("words_result")
    if isinstance(words_result, list):
        try:
            return _from_words_result(words_result)
        except (ValueError, OverflowError) as exc:
            # NaN / Infinity coordinates
            raise NoDataError(raw_response) from exc

    text = first_part.get("text")
    if text is None:
        raise NoDataError(raw_response)
    return OcrResult(contents=[OcrContent(text=line) for line in str(text).split("\n")])


def _from_words_result(entries: list) -> OcrResult:
    result = OcrResult()
    for entry in entries:
        item = _words_result_item(entry)
        content = OcrContent(text=item.words)
        for point in box_points_from_location(item.location):
            # (0, 0) marks a missing location
            if point.x == 0 and point.y == 0:
                continue
            content.box_points.append(point)
        result.contents.append(content)
    return result


def _words_result_item(entry: object) -> WordsResultItem:
    if not isinstance(entry, dict):
        return WordsResultItem()
    raw_location = entry.get("location")
    if not isinstance(raw_location, dict):
        raw_location = {}
    location = Location(
        top=_as_int(raw_location.get("top")),
        left=_as_int(raw_location.get("left")),
        width=_as_int(raw_location.get("width")),
        height=_as_int(raw_location.get("height")),
    )
    words = entry.get("words")
    return WordsResultItem(words=words if isinstance(words, str) else "", location=location)


def _as_int(value: object) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def _first_part(data: object) -> dict | None:
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    candidate = candidates[0]
    if not isinstance(candidate, dict):
        return None
    content = candidate.get("content")
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts:
        return None
    first = parts[0]
    return first if isinstance(first, dict) else None
