from __future__ import annotations

import logging
from dataclasses import fields, replace

from gemini_ocr.domain.gemini_settings import (
    GeminiSettings,
    settings_from_payload,
    settings_to_payload,
)
from gemini_ocr.domain.prompts import Prompt, PromptItem
from gemini_ocr.ports.settings_storage_port import SettingsStoragePort, StorageSlot

logger = logging.getLogger(__name__)


class SettingsService:
    """Owns the live settings object and writes every change back to storage."""

    def __init__(
        self,
        storage: SettingsStoragePort,
        slot: StorageSlot = StorageSlot.GEMINI_OCR,
        defaults: GeminiSettings | None = None,
    ) -> None:
        self._storage = storage
        self._slot = slot
        self._defaults = defaults
        self._settings: GeminiSettings | None = None

    @property
    def settings(self) -> GeminiSettings:
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> GeminiSettings:
        payload = self._storage.load_settings(self._slot)
        if payload is not None:
            settings = settings_from_payload(payload)
        elif self._defaults is not None:
            settings = replace(self._defaults, prompts=self._defaults.prompts.clone())
        else:
            settings = GeminiSettings()
        if self._settings is None:
            self._settings = settings
        else:
            # Keep the same object so adapters holding it see reloaded values.
            for settings_field in fields(GeminiSettings):
                setattr(self._settings, settings_field.name, getattr(settings, settings_field.name))
        return self._settings

    def save(self) -> None:
        self._storage.save_settings(self._slot, settings_to_payload(self.settings))
        logger.info("Saved settings for slot %s", self._slot.value)

    def update_connection(
        self,
        url: str | None = None,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
    ) -> GeminiSettings:
        settings = self.settings
        if url is not None:
            settings.url = url.strip()
        if api_key is not None:
            settings.api_key = api_key.strip()
        if model is not None:
            settings.model = model.strip()
        if temperature is not None:
            settings.temperature = float(temperature)
        self.save()
        return settings

    def list_prompts(self) -> list[Prompt]:
        return list(self.settings.prompts.prompts)

    def active_prompt(self) -> Prompt | None:
        return self.settings.prompts.active

    def select_prompt(self, name: str) -> Prompt:
        prompts = self.settings.prompts
        prompts.select(prompts.index_of(name))
        self.save()
        return prompts.active

    def add_prompt(self, name: str, items: list[PromptItem], select: bool = False) -> Prompt:
        name = self._new_prompt_name(name)
        prompts = self.settings.prompts
        index = prompts.add(Prompt(name=name, items=[item.clone() for item in items]))
        if select:
            prompts.select(index)
        self.save()
        return prompts.prompts[index]

    def rename_prompt(self, name: str, new_name: str) -> Prompt:
        prompts = self.settings.prompts
        prompt = prompts.prompts[prompts.index_of(name)]
        if new_name.strip() == prompt.name:
            return prompt
        prompt.name = self._new_prompt_name(new_name)
        self.save()
        return prompt

    def update_prompt(self, name: str, items: list[PromptItem]) -> Prompt:
        prompts = self.settings.prompts
        prompt = prompts.prompts[prompts.index_of(name)]
        prompt.items = [item.clone() for item in items]
        self.save()
        return prompt

    def remove_prompt(self, name: str) -> Prompt:
        prompts = self.settings.prompts
        removed = prompts.remove(prompts.index_of(name))
        self.save()
        return removed

    def _new_prompt_name(self, name: str) -> str:
        name = name.strip()
        if not name:
            raise ValueError("Prompt name is required.")
        if any(prompt.name == name for prompt in self.settings.prompts.prompts):
            raise ValueError(f"Prompt already exists: {name}")
        return name
