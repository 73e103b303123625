from pathlib import Path

from click.testing import CliRunner

from folio import __version__
from folio.cli import cli


def create_project(root: Path, posts: int = 10) -> Path:
    (root / "folio.yaml").write_text(
        "title: meronz\nhero:\n  title: Hello!\nposts_per_page: 8\nprojects_per_page: 2\n",
        encoding="utf-8",
    )
    posts_dir = root / "content" / "posts"
    posts_dir.mkdir(parents=True)
    for n in range(1, posts + 1):
        featured = "true" if n == 3 else "false"
        (posts_dir / f"post-{n:02d}.md").write_text(
            f"---\ntitle: Post {n}\npublishDate: 2024-01-{n:02d}\n"
            f"isFeatured: {featured}\ntags: [news]\n---\nBody\n",
            encoding="utf-8",
        )
    projects_dir = root / "content" / "projects"
    projects_dir.mkdir(parents=True)
    (projects_dir / "tool.md").write_text(
        "---\ntitle: Tool\npublishDate: 2023-05-01\nisFeatured: true\n---\n",
        encoding="utf-8",
    )
    return root


def test_list_pages(monkeypatch, tmp_path):
    monkeypatch.chdir(create_project(tmp_path))
    runner = CliRunner()

    result = runner.invoke(cli, ["list", "posts"], catch_exceptions=False)
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[0] == "2024-01-10  Post 10"
    assert "2024-01-03  Post 3  [featured]" in lines
    assert lines[-1] == "Page 1 of 2"
    assert len(lines) == 9

    result = runner.invoke(cli, ["list", "posts", "--page", "2"])
    assert result.output.strip().splitlines() == [
        "2024-01-02  Post 2",
        "2024-01-01  Post 1",
        "Page 2 of 2",
    ]

    result = runner.invoke(cli, ["list", "posts", "--page", "5"])
    assert result.exit_code == 0
    assert "No items." in result.output


def test_list_featured_and_bad_page(monkeypatch, tmp_path):
    monkeypatch.chdir(create_project(tmp_path))
    runner = CliRunner()

    result = runner.invoke(cli, ["list", "posts", "--featured"])
    assert result.output.strip().splitlines() == [
        "2024-01-03  Post 3  [featured]",
        "Page 1 of 1",
    ]

    result = runner.invoke(cli, ["list", "posts", "--page", "0"])
    assert result.exit_code == 2
    assert "Page numbers start at 1" in result.output


def test_home_and_tags(monkeypatch, tmp_path):
    monkeypatch.chdir(create_project(tmp_path))
    runner = CliRunner()

    result = runner.invoke(cli, ["home"], catch_exceptions=False)
    assert result.exit_code == 0
    assert "meronz" in result.output
    assert "Featured projects" in result.output
    assert "2023-05-01  Tool" in result.output
    assert "2024-01-03  Post 3" in result.output

    result = runner.invoke(cli, ["tags"], catch_exceptions=False)
    assert result.output.strip() == "news  10 items, 2 pages"


def test_empty_project(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["list", "projects"], catch_exceptions=False)
    assert result.output.strip() == "No items."
    result = runner.invoke(cli, ["tags"], catch_exceptions=False)
    assert result.output.strip() == "No tags."
    result = runner.invoke(cli, ["home"], catch_exceptions=False)
    assert "Featured" not in result.output


def test_errors_are_reported(monkeypatch, tmp_path):
    monkeypatch.chdir(create_project(tmp_path))
    runner = CliRunner()

    (tmp_path / "content" / "posts" / "broken.md").write_text(
        "---\ntitle: No date\n---\n", encoding="utf-8"
    )
    result = runner.invoke(cli, ["list", "posts"])
    assert result.exit_code == 1
    assert "Invalid content" in result.output
    assert "broken.md" in result.output

    (tmp_path / "folio.yaml").write_text("posts_per_page: 0\n", encoding="utf-8")
    result = runner.invoke(cli, ["home"])
    assert result.exit_code == 1
    assert "posts_per_page" in result.output


def test_version_and_verbose(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert __version__ in result.output
    result = runner.invoke(cli, ["--verbose", "list", "posts"])
    assert result.exit_code == 0


def test_module_main_entrypoint():
    from folio.__main__ import main

    assert callable(main)
