import pytest

from gemini_ocr.domain.prompts import (
    Prompt,
    PromptItem,
    PromptSet,
    default_prompts,
    prompt_set_from_payload,
    prompt_set_to_payload,
)


def _prompt(name: str) -> Prompt:
    return Prompt(name=name, items=[PromptItem(role="user", content=name)])


def test_prompt_set_defaults_to_first_prompt() -> None:
    prompts = PromptSet(prompts=[_prompt("a"), _prompt("b")])
    assert prompts.active_index == 0
    assert prompts.active.name == "a"


def test_empty_prompt_set_has_no_active_prompt() -> None:
    prompts = PromptSet()
    assert prompts.active is None


def test_select_moves_the_active_tag() -> None:
    prompts = PromptSet(prompts=[_prompt("a"), _prompt("b"), _prompt("c")])
    prompts.select(2)
    assert prompts.active.name == "c"
    with pytest.raises(ValueError):
        prompts.select(3)


def test_remove_keeps_active_prompt_when_earlier_entry_removed() -> None:
    prompts = PromptSet(prompts=[_prompt("a"), _prompt("b"), _prompt("c")], active_index=2)
    prompts.remove(0)
    assert prompts.active.name == "c"


def test_remove_active_prompt_falls_back_to_first() -> None:
    prompts = PromptSet(prompts=[_prompt("a"), _prompt("b")], active_index=1)
    prompts.remove(1)
    assert prompts.active.name == "a"
    prompts.remove(0)
    assert prompts.active is None


def test_payload_marks_exactly_one_enabled() -> None:
    prompts = PromptSet(prompts=[_prompt("a"), _prompt("b"), _prompt("c")], active_index=1)
    payload = prompt_set_to_payload(prompts)
    assert [entry["IsEnabled"] for entry in payload] == [False, True, False]
    assert payload[1] == {
        "Name": "b",
        "Items": [{"Role": "user", "Content": "b"}],
        "IsEnabled": True,
    }


def test_payload_round_trip_restores_active_prompt() -> None:
    prompts = PromptSet(prompts=[_prompt("a"), _prompt("b")], active_index=1)
    restored = prompt_set_from_payload(prompt_set_to_payload(prompts))
    assert restored == prompts


def test_from_payload_uses_first_enabled_entry() -> None:
    restored = prompt_set_from_payload(
        [
            {"Name": "a", "Items": [], "IsEnabled": False},
            {"Name": "b", "Items": [], "IsEnabled": True},
            {"Name": "c", "Items": [], "IsEnabled": True},
        ]
    )
    assert restored.active.name == "b"


def test_from_payload_ignores_non_list() -> None:
    assert prompt_set_from_payload({"Name": "a"}).prompts == []


def test_default_prompts_use_target_placeholder() -> None:
    prompts = default_prompts()
    assert prompts.active is not None
    assert "$target" in prompts.active.items[-1].content


def test_clone_is_independent() -> None:
    prompt = _prompt("a")
    copied = prompt.clone()
    copied.items[0].content = "changed"
    assert prompt.items[0].content == "a"
