"""Unit tests for settings loading."""

from commentary.config import AdminSettings, Settings
from commentary.domain.value import SortDirection


class TestSettings:
    """Tests for Settings."""

    def test_nested_environment_variables(self, monkeypatch):
        """Nested sections are set with the double underscore delimiter."""
        monkeypatch.setenv("COMMENTS__NEW_NEED_CHECK", "false")
        monkeypatch.setenv("COMMENTS__DEFAULT_SORT_DIRECTION", "asc")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/c")

        settings = Settings()

        assert settings.comments.new_need_check is False
        assert settings.comments.default_sort_direction == SortDirection.ASC
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/c"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("COMMENTS__STRICT_TREE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.comments.strict_tree is False
        assert settings.comments.reply_template == "replying to {parent_author}: {content}"


class TestAdminSettings:
    """Tests for AdminSettings."""

    def test_display_name_prefers_nickname(self):
        assert AdminSettings(username="root", nickname="Ryan").display_name == "Ryan"
        assert AdminSettings(username="root").display_name == "root"
