"""
Tests for the command line entry point.
"""

from unittest.mock import patch

from sqlalchemy import create_engine, inspect

from userapi import cli
from userapi.core.config import settings


class TestParser:
    """Tests for argument parsing."""

    def test_serve_defaults_from_settings(self) -> None:
        args = cli.build_parser().parse_args(["serve"])
        assert args.host == settings.host
        assert args.port == settings.port
        assert args.func is cli.cmd_serve

    def test_serve_port_override(self) -> None:
        args = cli.build_parser().parse_args(["serve", "--port", "8080"])
        assert args.port == 8080


class TestCommands:
    """Tests for the sub-commands."""

    def test_init_db_creates_users_table(self, tmp_path, monkeypatch) -> None:
        url = f"sqlite:///{tmp_path / 'cli.db'}"
        monkeypatch.setattr(settings, "database_url", url)

        cli.main(["init-db"])

        engine = create_engine(url)
        assert "users" in inspect(engine).get_table_names()
        engine.dispose()

    def test_serve_runs_uvicorn(self) -> None:
        with patch("uvicorn.run") as run:
            cli.main(["serve", "--host", "127.0.0.1", "--port", "9000"])
        run.assert_called_once_with(
            "userapi.main:app", host="127.0.0.1", port=9000, reload=False
        )
