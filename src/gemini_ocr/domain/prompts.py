from __future__ import annotations

from dataclasses import dataclass, field

TARGET_PLACEHOLDER = "$target"


@dataclass
class PromptItem:
    role: str
    content: str

    def clone(self) -> PromptItem:
        return PromptItem(role=self.role, content=self.content)


@dataclass
class Prompt:
    name: str
    items: list[PromptItem] = field(default_factory=list)

    def clone(self) -> Prompt:
        return Prompt(name=self.name, items=[item.clone() for item in self.items])


@dataclass
class PromptSet:
    """Ordered prompts with a single active entry tracked by index."""

    prompts: list[Prompt] = field(default_factory=list)
    active_index: int | None = None

    def __post_init__(self) -> None:
        self._normalize_active()

    @property
    def active(self) -> Prompt | None:
        if self.active_index is None:
            return None
        return self.prompts[self.active_index]

    def select(self, index: int) -> None:
        if index < 0 or index >= len(self.prompts):
            raise ValueError(f"Prompt index out of range: {index}")
        self.active_index = index

    def index_of(self, name: str) -> int:
        for index, prompt in enumerate(self.prompts):
            if prompt.name == name:
                return index
        raise ValueError(f"Prompt not found: {name}")

    def add(self, prompt: Prompt) -> int:
        self.prompts.append(prompt)
        self._normalize_active()
        return len(self.prompts) - 1

    def remove(self, index: int) -> Prompt:
        if index < 0 or index >= len(self.prompts):
            raise ValueError(f"Prompt index out of range: {index}")
        removed = self.prompts.pop(index)
        if self.active_index is not None:
            if index < self.active_index:
                self.active_index -= 1
            elif index == self.active_index:
                self.active_index = None
        self._normalize_active()
        return removed

    def clone(self) -> PromptSet:
        return PromptSet(
            prompts=[prompt.clone() for prompt in self.prompts],
            active_index=self.active_index,
        )

    def _normalize_active(self) -> None:
        if not self.prompts:
            self.active_index = None
            return
        if self.active_index is None or not 0 <= self.active_index < len(self.prompts):
            self.active_index = 0


def default_prompts() -> PromptSet:
    return PromptSet(
        prompts=[
            Prompt(
                name="default",
                items=[
                    PromptItem(
                        role="user",
                        content=(
                            "You are a specialized OCR engine that accurately extracts "
                            "each text from the image."
                        ),
                    ),
                    PromptItem(
                        role="user",
                        content=(
                            "Please recognize the text in the picture, the language in "
                            "the picture is $target, return the recognized text only."
                        ),
                    ),
                ],
            ),
            Prompt(
                name="translate",
                items=[
                    PromptItem(
                        role="user",
                        content=(
                            "Recognize the text in the picture and translate it into "
                            "$target. Return only the translated text, one line per "
                            "source line."
                        ),
                    ),
                ],
            ),
        ],
        active_index=0,
    )


def prompt_set_to_payload(prompt_set: PromptSet) -> list[dict]:
    return [
        {
            "Name": prompt.name,
            "Items": [{"Role": item.role, "Content": item.content} for item in prompt.items],
            "IsEnabled": index == prompt_set.active_index,
        }
        for index, prompt in enumerate(prompt_set.prompts)
    ]


def prompt_set_from_payload(data: object) -> PromptSet:
    """Build a prompt set from its persisted shape.

    The first entry flagged ``IsEnabled`` becomes active; when none is
    flagged the first prompt is selected.
    """

    if not isinstance(data, list):
        return PromptSet()
    prompts: list[Prompt] = []
    active_index: int | None = None
    for entry in data:
        if not isinstance(entry, dict):
            continue
        items = []
        for raw_item in entry.get("Items") or []:
            if not isinstance(raw_item, dict):
                continue
            items.append(
                PromptItem(
                    role=str(raw_item.get("Role", "user")),
                    content=str(raw_item.get("Content", "")),
                )
            )
        if entry.get("IsEnabled") is True and active_index is None:
            active_index = len(prompts)
        prompts.append(Prompt(name=str(entry.get("Name", "")), items=items))
    return PromptSet(prompts=prompts, active_index=active_index)
