import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from config import get_out_dir
from cookbook_entry import CookbookRecipeBuilder, InvalidRecipeError
from logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise SystemExit(f"Input file not found: {source}")
    return path.read_text(encoding="utf-8")


def load_payload(path: Optional[str]) -> Dict[str, Any]:
    if not path:
        return {}
    try:
        data = json.loads(read_text(path))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Payload is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit("Payload must be a JSON object.")
    return data


def output_stem(title: str) -> str:
    return title.replace("/", "-").strip()[:80] or "recipe"


def main(argv: Optional[list] = None) -> int:
    load_dotenv()
    configure_logging()
    ap = argparse.ArgumentParser(description="Normalize generated recipe text into a cookbook entry.")
    ap.add_argument("input", help="Raw recipe text file, or - for stdin")
    ap.add_argument("--payload", help="JSON file with client-supplied recipe fields")
    ap.add_argument("--out-dir", help="Output directory (defaults to $RECIPE_OUT_DIR or ./out)")
    ap.add_argument("--print", dest="print_json", action="store_true", help="Also print the JSON document")
    args = ap.parse_args(argv)

    raw_text = read_text(args.input)
    payload = load_payload(args.payload)
    logger.info("Normalizing %d chars of recipe text", len(raw_text))

    try:
        recipe = CookbookRecipeBuilder().build(payload, raw_text)
    except InvalidRecipeError as exc:
        raise SystemExit(str(exc)) from exc

    out_dir = get_out_dir(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    stem = output_stem(recipe.title)
    document = recipe.to_document()

    md_path = out_dir / f"{stem}.md"
    md_path.write_text(recipe.content + "\n", encoding="utf-8")
    json_path = out_dir / f"{stem}.json"
    json_path.write_text(json.dumps(document, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote %s and %s", md_path, json_path)

    if args.print_json:
        print(json.dumps(document, ensure_ascii=False, indent=2))
    else:
        print("Markdown:", md_path)
        print("Document:", json_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
