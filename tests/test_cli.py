import sqlite3

from typer.testing import CliRunner

from cli import app

runner = CliRunner()


def test_init_db_creates_posts_table(tmp_path):
    path = tmp_path / "cli.db"

    result = runner.invoke(app, ["init-db", "--database-url", f"sqlite+aiosqlite:///{path}"])

    assert result.exit_code == 0, result.output
    with sqlite3.connect(path) as conn:
        tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    assert "posts" in tables
