from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

from gemini_ocr.container import build_services
from gemini_ocr.domain.languages import parse_language


def main() -> None:
    from gemini_ocr.settings import SQLITE_PATH

    parser = argparse.ArgumentParser()
    parser.add_argument("image", help="Path to the image file.")
    parser.add_argument("--language", default="auto", help="Target language, e.g. zh-Hans.")
    parser.add_argument("--prompt", default=None, help="Select this prompt before running.")
    parser.add_argument("--sqlite", default=SQLITE_PATH, help="SQLite settings DB path.")
    parser.add_argument("--json", action="store_true", help="Print contents with box points.")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    services = build_services(args.sqlite)
    if args.prompt:
        services["settings_service"].select_prompt(args.prompt)

    result = services["ocr_service"].recognize_file(
        args.image, language=parse_language(args.language)
    )
    if args.json:
        print(
            json.dumps(
                [asdict(content) for content in result.contents],
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        print(result.text)


if __name__ == "__main__":
    main()
