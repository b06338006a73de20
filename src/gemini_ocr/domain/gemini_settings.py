from __future__ import annotations

from dataclasses import dataclass, field

from gemini_ocr.domain.prompts import (
    PromptSet,
    default_prompts,
    prompt_set_from_payload,
    prompt_set_to_payload,
)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_MODEL = "gemini-flash-latest"
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0


@dataclass
class GeminiSettings:
    url: str = DEFAULT_BASE_URL
    api_key: str = ""
    model: str = DEFAULT_MODEL
    temperature: float = 1.0
    prompts: PromptSet = field(default_factory=default_prompts)


def clamp_temperature(temperature: float) -> float:
    """Clamp a temperature value to the 0..2 range."""

    if temperature < MIN_TEMPERATURE:
        return MIN_TEMPERATURE
    if temperature > MAX_TEMPERATURE:
        return MAX_TEMPERATURE
    return temperature


def settings_to_payload(settings: GeminiSettings) -> dict:
    return {
        "Url": settings.url,
        "ApiKey": settings.api_key,
        "Model": settings.model,
        "Temperature": settings.temperature,
        "Prompts": prompt_set_to_payload(settings.prompts),
    }


def settings_from_payload(data: dict) -> GeminiSettings:
    temperature = data.get("Temperature", 1.0)
    try:
        temperature = float(temperature)
    except (TypeError, ValueError):
        temperature = 1.0
    prompts = data.get("Prompts")
    return GeminiSettings(
        url=str(data.get("Url") or DEFAULT_BASE_URL),
        api_key=str(data.get("ApiKey") or ""),
        model=str(data.get("Model") or ""),
        temperature=temperature,
        prompts=prompt_set_from_payload(prompts) if prompts is not None else default_prompts(),
    )
