from __future__ import annotations

import argparse
import json
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

from gemini_ocr.adapters.sqlite_settings_storage import SQLiteSettingsStorage
from gemini_ocr.container import default_settings
from gemini_ocr.domain.prompts import PromptItem
from gemini_ocr.services.settings_service import SettingsService


def _print_prompts(service: SettingsService) -> None:
    active = service.active_prompt()
    for prompt in service.list_prompts():
        marker = "*" if prompt is active else " "
        print(f"{marker} {prompt.name} ({len(prompt.items)} items)")


def _read_items(path: str) -> list[PromptItem]:
    raw_items = json.loads(Path(path).read_text())
    if not isinstance(raw_items, list):
        raise SystemExit("Prompt items file must be a JSON list.")
    return [
        PromptItem(role=str(item.get("role", "user")), content=str(item.get("content", "")))
        for item in raw_items
        if isinstance(item, dict)
    ]


def main() -> None:
    from gemini_ocr.settings import SQLITE_PATH

    parser = argparse.ArgumentParser()
    parser.add_argument("--sqlite", default=SQLITE_PATH, help="SQLite settings DB path.")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List prompts; the active one is starred.")
    select = sub.add_parser("select", help="Make a prompt active.")
    select.add_argument("name")
    add = sub.add_parser("add", help="Add a prompt from a JSON file of {role, content} items.")
    add.add_argument("name")
    add.add_argument("items_json")
    add.add_argument("--select", action="store_true")
    update = sub.add_parser("update", help="Replace a prompt's items from a JSON file.")
    update.add_argument("name")
    update.add_argument("items_json")
    rename = sub.add_parser("rename", help="Rename a prompt.")
    rename.add_argument("name")
    rename.add_argument("new_name")
    remove = sub.add_parser("remove", help="Remove a prompt.")
    remove.add_argument("name")
    args = parser.parse_args()

    service = SettingsService(SQLiteSettingsStorage(args.sqlite), defaults=default_settings())
    service.load()

    if args.command == "select":
        service.select_prompt(args.name)
    elif args.command == "add":
        service.add_prompt(args.name, _read_items(args.items_json), select=args.select)
    elif args.command == "update":
        service.update_prompt(args.name, _read_items(args.items_json))
    elif args.command == "rename":
        service.rename_prompt(args.name, args.new_name)
    elif args.command == "remove":
        service.remove_prompt(args.name)
    _print_prompts(service)


if __name__ == "__main__":
    main()
