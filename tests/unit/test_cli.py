"""Tests des commandes CLI (typer) sur le container de test."""

from unittest.mock import MagicMock, patch

from dependency_injector import providers
from sqlmodel import Session

from typer.testing import CliRunner

from cinecatalog.main import app

runner = CliRunner()


class TestReferenceDataCommands:
    def test_add_genre(self, container):
        with patch("cinecatalog.main.container", container):
            result = runner.invoke(app, ["add-genre", "Action"])

        assert result.exit_code == 0
        assert "Action" in result.output
        assert [g.name for g in container.genre_service().list_genres()] == ["Action"]

    def test_add_genre_duplicate_fails(self, container):
        with patch("cinecatalog.main.container", container):
            runner.invoke(app, ["add-genre", "Action"])
            result = runner.invoke(app, ["add-genre", "ACTION"])

        assert result.exit_code == 1

    def test_add_and_list_languages(self, container):
        with patch("cinecatalog.main.container", container):
            added = runner.invoke(app, ["add-language", "Português"])
            listed = runner.invoke(app, ["languages"])

        assert added.exit_code == 0
        assert listed.exit_code == 0
        assert "Português" in listed.output


class TestInfoCommands:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "CineCatalog v" in result.output

    def test_info_shows_database(self, container):
        with patch("cinecatalog.main.container", container):
            result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "sqlite://" in result.output


class TestCommandSessions:
    """Chaque commande ouvre une seule session et la ferme."""

    @staticmethod
    def _tracked_sessions(container):
        opened = []

        def open_session():
            session = Session(container.engine())
            session.close = MagicMock(wraps=session.close)
            opened.append(session)
            return session

        return opened, providers.Callable(open_session)

    def test_add_genre_uses_one_closed_session(self, container):
        opened, provider = self._tracked_sessions(container)

        with patch("cinecatalog.main.container", container), container.session.override(provider):
            result = runner.invoke(app, ["add-genre", "Action"])

        assert result.exit_code == 0
        assert len(opened) == 1
        opened[0].close.assert_called_once()

    def test_duplicate_genre_still_closes_session(self, container):
        with patch("cinecatalog.main.container", container):
            runner.invoke(app, ["add-genre", "Action"])
        opened, provider = self._tracked_sessions(container)

        with patch("cinecatalog.main.container", container), container.session.override(provider):
            result = runner.invoke(app, ["add-genre", "ACTION"])

        assert result.exit_code == 1
        assert len(opened) == 1
        opened[0].close.assert_called_once()

    def test_language_commands_close_sessions(self, container):
        opened, provider = self._tracked_sessions(container)

        with patch("cinecatalog.main.container", container), container.session.override(provider):
            runner.invoke(app, ["add-language", "English"])
            result = runner.invoke(app, ["languages"])

        assert result.exit_code == 0
        assert len(opened) == 2
        for session in opened:
            session.close.assert_called_once()
