"""
CLI tests.

Runs main() in-process and checks stdout and exit codes.
"""

from __future__ import annotations

from pathlib import Path
from uuid import uuid4

import pytest

from src.app_shell import cli
from src.components.assets import gravatar_url
from tests.conftest import PROJECT_ROOT

RULES = str(PROJECT_ROOT / "rules.yaml")


def run_cli(*args: str) -> int:
    return cli.main(["--rules", RULES, *args])


class TestLinkTags:
    def test_middle_page(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = run_cli(
            "link-tags", "--total", "95", "--page-size", "10", "--url", "/c/news", "--page", "5"
        )

        assert code == 0
        assert capsys.readouterr().out == (
            '<link href="/c/news?p=5" rel="canonical" />\n'
            '<link href="/c/news?p=6" rel="next" />\n'
            '<link href="/c/news?p=4" rel="prev" />\n'
        )

    def test_single_page_keeps_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_cli("link-tags", "--total", "5", "--page-size", "10", "--url", "/c/news")

        assert capsys.readouterr().out == '<link href="/c/news" rel="canonical" />\n\n\n'

    def test_malformed_page(self) -> None:
        code = run_cli(
            "link-tags", "--total", "95", "--page-size", "10", "--url", "/x", "--page", "abc"
        )
        assert code == 2

    def test_bad_page_size(self) -> None:
        assert run_cli("link-tags", "--total", "95", "--page-size", "0", "--url", "/x") == 2


class TestRender:
    def test_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        post = tmp_path / "post.md"
        post.write_text("Hello **world**\n\n    x = 1\n", encoding="utf-8")

        assert run_cli("render", str(post)) == 0
        out = capsys.readouterr().out
        assert "<strong>world</strong>" in out
        assert '<pre class="prettyprint">' in out


class TestAvatar:
    def test_gravatar_fallback(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = run_cli("avatar", "--email", "ada@example.com", "--owner-id", str(uuid4()))

        assert code == 0
        assert capsys.readouterr().out.strip() == gravatar_url("ada@example.com", 50)

    def test_stored_file(self, capsys: pytest.CaptureFixture[str]) -> None:
        owner = uuid4()
        run_cli(
            "avatar", "--email", "a@b.c", "--owner-id", str(owner),
            "--size", "32", "--file", "me.png",
        )

        assert capsys.readouterr().out.strip() == (
            f"/content/uploads/{owner}/me.png?width=32&crop=0,0,32,32"
        )

    def test_bad_size(self) -> None:
        code = run_cli("avatar", "--email", "a@b.c", "--owner-id", str(uuid4()), "--size", "0")
        assert code == 2

    def test_unsafe_file_name(self) -> None:
        """Storage errors exit cleanly instead of raising."""
        code = run_cli(
            "avatar", "--email", "a@b.c", "--owner-id", str(uuid4()), "--file", "../x.png"
        )
        assert code == 1


class TestThemes:
    def test_lists_non_base_folders(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        for name in ("light", "dark", "base", "base-dark"):
            (tmp_path / name).mkdir()

        assert run_cli("themes", "--root", str(tmp_path)) == 0
        assert capsys.readouterr().out.split() == ["dark", "light"]

    def test_missing_root(self, tmp_path: Path) -> None:
        assert run_cli("themes", "--root", str(tmp_path / "absent")) == 1


class TestSite:
    def test_static(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli("static", "/scripts/app.js?v=3") == 0
        assert capsys.readouterr().out.strip() == "static"

    def test_page(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli("static", "/topics/hello") == 1
        assert capsys.readouterr().out.strip() == "page"

    def test_rss(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli("rss", "news") == 0
        assert capsys.readouterr().out.strip() == "/category/rss/news"

    def test_site_rules_applied(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        rules = tmp_path / "rules.yaml"
        rules.write_text(
            "site:\n"
            "  category_url_identifier: boards\n"
            "  static_extensions: [\".webp\"]\n"
            f"  theme_root: {tmp_path / 'themes'}\n"
        )
        (tmp_path / "themes" / "Metro").mkdir(parents=True)

        assert cli.main(["--rules", str(rules), "rss", "news"]) == 0
        assert cli.main(["--rules", str(rules), "static", "/a.webp"]) == 0
        assert cli.main(["--rules", str(rules), "static", "/site.css"]) == 1
        assert cli.main(["--rules", str(rules), "themes"]) == 0
        assert capsys.readouterr().out.split() == ["/boards/rss/news", "static", "page", "Metro"]

    def test_blank_slug(self) -> None:
        assert run_cli("rss", " ") == 2


class TestPing:
    def test_up(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr(cli, "ping", lambda url, timeout: True)

        assert run_cli("ping", "https://forum.example.com") == 0
        assert capsys.readouterr().out.strip() == "up"

    def test_down(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(cli, "ping", lambda url, timeout: False)

        assert run_cli("ping", "https://forum.example.com") == 1
        assert capsys.readouterr().out.strip() == "down"


class TestRules:
    def test_missing_rules_file_uses_defaults(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = cli.main(
            ["--rules", str(tmp_path / "none.yaml"), "link-tags"]
            + ["--total", "1", "--page-size", "1", "--url", "/x"]
        )

        assert code == 0
        assert capsys.readouterr().out.startswith('<link href="/x" rel="canonical" />')

    def test_invalid_rules_file(self, tmp_path: Path) -> None:
        bad = tmp_path / "rules.yaml"
        bad.write_text("probe:\n  timeout_seconds: -1\n")

        assert cli.main(["--rules", str(bad), "themes"]) == 1
