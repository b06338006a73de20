from __future__ import annotations

import base64
from dataclasses import dataclass
from urllib.parse import urlsplit

from gemini_ocr.domain.errors import PromptConfigurationError
from gemini_ocr.domain.gemini_settings import DEFAULT_MODEL, GeminiSettings, clamp_temperature
from gemini_ocr.domain.languages import language_name
from gemini_ocr.domain.models import OcrRequest
from gemini_ocr.domain.prompts import TARGET_PLACEHOLDER, Prompt, PromptItem

IMAGE_MIME_TYPE = "image/png"

SAFETY_SETTINGS: tuple[dict[str, str], ...] = (
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "threshold": "BLOCK_NONE"},
)

# Structured-output schema for the words_result shape. Not sent with requests.
WORDS_RESULT_SCHEMA: dict = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "words": {"type": "STRING"},
            "location": {
                "type": "OBJECT",
                "properties": {
                    "top": {"type": "NUMBER"},
                    "left": {"type": "NUMBER"},
                    "width": {"type": "NUMBER"},
                    "height": {"type": "NUMBER"},
                },
            },
        },
    },
}


@dataclass(frozen=True)
class GeminiRequest:
    url: str
    body: dict
    model: str
    # Clamped but not transmitted; see DESIGN.md.
    temperature: float


def resolve_model(model: str | None) -> str:
    cleaned = (model or "").strip()
    return cleaned or DEFAULT_MODEL


def build_endpoint(base_url: str, model: str, api_key: str) -> str:
    cleaned = base_url.strip()
    parts = urlsplit(cleaned)
    if not parts.netloc:
        parts = urlsplit(f"https://{cleaned}")
    return f"{parts.scheme}://{parts.netloc}/v1beta/models/{model}:generateContent?key={api_key}"


def render_prompt_items(prompt: Prompt, target_language: str) -> list[PromptItem]:
    """Copy prompt items with every ``$target`` replaced by the language name."""

    rendered = []
    for item in prompt.items:
        copied = item.clone()
        copied.content = copied.content.replace(TARGET_PLACEHOLDER, target_language)
        rendered.append(copied)
    return rendered


def build_contents(items: list[PromptItem], image_bytes: bytes) -> list[dict]:
    if not items:
        raise PromptConfigurationError("Prompt configuration empty")
    *context_items, user_item = items
    contents: list[dict] = [
        {"role": item.role, "parts": [{"text": item.content}]} for item in context_items
    ]
    contents.append(
        {
            "role": "user",
            "parts": [
                {
                    "inline_data": {
                        "mime_type": IMAGE_MIME_TYPE,
                        "data": base64.b64encode(image_bytes).decode("ascii"),
                    }
                },
                {"text": user_item.content},
            ],
        }
    )
    return contents


def build_request(
    request: OcrRequest, settings: GeminiSettings, prompt: Prompt | None
) -> GeminiRequest:
    if prompt is None:
        raise PromptConfigurationError("Prompt configuration incomplete")
    model = resolve_model(settings.model)
    items = render_prompt_items(prompt, language_name(request.language))
    body = {
        "contents": build_contents(items, request.image_bytes),
        "safetySettings": [dict(entry) for entry in SAFETY_SETTINGS],
    }
    return GeminiRequest(
        url=build_endpoint(settings.url, model, settings.api_key),
        body=body,
        model=model,
        temperature=clamp_temperature(settings.temperature),
    )
