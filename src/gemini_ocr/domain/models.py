from __future__ import annotations

from dataclasses import dataclass, field

from gemini_ocr.domain.languages import LangEnum


@dataclass(frozen=True)
class OcrRequest:
    image_bytes: bytes
    language: LangEnum = LangEnum.AUTO


@dataclass(frozen=True)
class BoxPoint:
    x: int
    y: int


@dataclass
class OcrContent:
    text: str
    box_points: list[BoxPoint] = field(default_factory=list)


@dataclass
class OcrResult:
    contents: list[OcrContent] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(content.text for content in self.contents)


@dataclass(frozen=True)
class Location:
    top: int = 0
    left: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class WordsResultItem:
    words: str = ""
    location: Location = field(default_factory=Location)
