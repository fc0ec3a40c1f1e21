import argparse
import logging
import sys
from pathlib import Path
from uuid import UUID

from src.adapters.http_probe import ping
from src.adapters.local_storage import LocalFileStorage
from src.components.assets import create_image_url_resolver
from src.components.render import create_paging_link_builder
from src.components.render_posts import create_post_renderer
from src.components.site import create_site_helpers
from src.core.errors import ConfigurationError, InvalidArgumentError
from src.core.ports.storage import StorageError
from src.rules.loader import load_rules
from src.rules.models import Rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: str) -> Rules:
    rules_path = Path(path)
    if not rules_path.exists():
        logger.info(f"Rules file {path} not found, using defaults.")
        return Rules()
    return load_rules(rules_path)


def handle_link_tags(rules: Rules, args: argparse.Namespace) -> None:
    builder = create_paging_link_builder(rules.paging)
    tags = builder.link_tags(args.total, args.page_size, args.url, args.page)
    print(tags.render())


def handle_render(rules: Rules, args: argparse.Namespace) -> None:
    if args.file == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(args.file).read_text(encoding="utf-8")
    print(create_post_renderer(rules.render).render(raw))


def handle_avatar(rules: Rules, args: argparse.Namespace) -> None:
    storage = LocalFileStorage(
        rules.storage.base_path,
        public_prefix=rules.storage.public_prefix,
        create_dirs=False,
    )
    resolver = create_image_url_resolver(storage, rules.images)
    print(resolver.resolve_avatar_url(args.file, args.email, args.owner_id, args.size))


def handle_themes(rules: Rules, args: argparse.Namespace) -> None:
    for folder in create_site_helpers(rules.site).theme_folders(args.root):
        print(folder)


def handle_static(rules: Rules, args: argparse.Namespace) -> int:
    is_static = create_site_helpers(rules.site).is_static_resource(args.path)
    print("static" if is_static else "page")
    return 0 if is_static else 1


def handle_rss(rules: Rules, args: argparse.Namespace) -> None:
    print(create_site_helpers(rules.site).category_rss_url(args.slug))


def handle_ping(rules: Rules, args: argparse.Namespace) -> int:
    up = ping(args.url, timeout=rules.probe.timeout_seconds)
    print("up" if up else "down")
    return 0 if up else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="forumkit page helpers CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # link-tags
    tags_parser = subparsers.add_parser("link-tags", help="Print canonical/next/prev tags")
    tags_parser.add_argument("--total", type=int, required=True, help="Total item count")
    tags_parser.add_argument("--page-size", type=int, required=True, help="Items per page")
    tags_parser.add_argument("--url", required=True, help="Listing URL without page parameter")
    tags_parser.add_argument("--page", default=None, help="Current page indicator")

    # render
    render_parser = subparsers.add_parser("render", help="Render post markup to HTML")
    render_parser.add_argument("file", help="Markup file, or - for stdin")

    # avatar
    avatar_parser = subparsers.add_parser("avatar", help="Resolve a member avatar URL")
    avatar_parser.add_argument("--email", required=True)
    avatar_parser.add_argument("--owner-id", type=UUID, required=True, help="Member UUID")
    avatar_parser.add_argument("--size", type=int, default=50)
    avatar_parser.add_argument("--file", default="", help="Stored avatar file name")

    # themes
    themes_parser = subparsers.add_parser("themes", help="List installed theme folders")
    themes_parser.add_argument("--root", default=None, help="Theme root (defaults to rules)")

    # static
    static_parser = subparsers.add_parser("static", help="Classify a request path")
    static_parser.add_argument("path", help="Request path, query string allowed")

    # rss
    rss_parser = subparsers.add_parser("rss", help="Print a category RSS feed URL")
    rss_parser.add_argument("slug", help="Category slug")

    # ping
    ping_parser = subparsers.add_parser("ping", help="Check a URL answers HEAD")
    ping_parser.add_argument("url")

    args = parser.parse_args(argv)

    try:
        rules = get_rules(args.rules)

        if args.command == "link-tags":
            handle_link_tags(rules, args)
        elif args.command == "render":
            handle_render(rules, args)
        elif args.command == "avatar":
            handle_avatar(rules, args)
        elif args.command == "themes":
            handle_themes(rules, args)
        elif args.command == "static":
            return handle_static(rules, args)
        elif args.command == "rss":
            handle_rss(rules, args)
        elif args.command == "ping":
            return handle_ping(rules, args)
    except InvalidArgumentError as e:
        logger.error(f"Invalid argument: {e}")
        return 2
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except StorageError as e:
        logger.error(f"Storage error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
