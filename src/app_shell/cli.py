import argparse
import json
import logging
import sys
from pathlib import Path

from src.app_shell.bootstrap import seed_store
from src.app_shell.context import ServiceContext
from src.rules.loader import load_rules

logger = logging.getLogger("cli")

DEFAULT_RULES_PATH = Path(__file__).resolve().parents[2] / "organizer.yaml"


def handle_serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


def handle_check_rules(args: argparse.Namespace) -> int:
    try:
        rules = load_rules(Path(args.path))
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"{e}")
        return 1

    print(f"Rules OK: {rules.project.slug} v{rules.project.rules_version}")
    print(f"Seed: {'enabled' if rules.seed.enabled else 'disabled'}, {len(rules.seed.tabs)} tabs")
    return 0


def handle_seed_preview(args: argparse.Namespace) -> int:
    rules_path = Path(args.path)
    if not rules_path.exists():
        logger.error(f"Rules file {rules_path} not found.")
        return 1

    ctx = ServiceContext.create(load_rules(rules_path))
    seed_store(ctx)

    data = {
        "tabs": [t.model_dump(by_alias=True) for t in ctx.tab_service.get_all()],
        "sections": [s.model_dump(by_alias=True) for s in ctx.section_service.get_all()],
        "bookmarks": [b.model_dump(by_alias=True) for b in ctx.bookmark_service.get_all()],
        "settings": ctx.settings_service.get().model_dump(by_alias=True),
    }
    print(json.dumps(data, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bookmark-tabs", description="Bookmark Tabs CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve_parser.add_argument("--log-level", default="INFO")

    check_parser = subparsers.add_parser("check-rules", help="Validate a rules file")
    check_parser.add_argument("--path", default=str(DEFAULT_RULES_PATH))

    preview_parser = subparsers.add_parser("seed-preview", help="Print the seeded data as JSON")
    preview_parser.add_argument("--path", default=str(DEFAULT_RULES_PATH))

    return parser


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        handle_serve(args)
    elif args.command == "check-rules":
        sys.exit(handle_check_rules(args))
    elif args.command == "seed-preview":
        sys.exit(handle_seed_preview(args))


if __name__ == "__main__":
    main()
