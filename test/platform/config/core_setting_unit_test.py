"""Unit tests for Settings loading"""

from pathlib import Path

from pydantic import ValidationError
import pytest

from src.platform.config.core_setting import _PROJECT_ROOT, Settings


class TestCorsOrigins:
    @pytest.mark.unit
    def test_comma_separated_from_dotenv(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)
        env_file = tmp_path / '.env'
        env_file.write_text('BACKEND_CORS_ORIGINS=http://localhost:3000, https://seats.example.com\n')

        settings = Settings(_env_file=env_file)

        assert settings.BACKEND_CORS_ORIGINS == ['http://localhost:3000', 'https://seats.example.com']

    @pytest.mark.unit
    def test_comma_separated_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', 'http://a.test,http://b.test')

        settings = Settings(_env_file=None)

        assert settings.BACKEND_CORS_ORIGINS == ['http://a.test', 'http://b.test']

    @pytest.mark.unit
    def test_json_list_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', '["http://localhost:3000"]')

        settings = Settings(_env_file=None)

        assert settings.BACKEND_CORS_ORIGINS == ['http://localhost:3000']

    @pytest.mark.unit
    def test_shipped_env_example_loads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)

        settings = Settings(_env_file=_PROJECT_ROOT / '.env.example')

        assert settings.BACKEND_CORS_ORIGINS == ['http://localhost:3000']


class TestSeatLayout:
    @pytest.mark.unit
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.TOTAL_SEATS == 80
        assert settings.SEATS_PER_ROW == 7
        assert settings.MAX_ALLOCATION_ATTEMPTS == 3

    @pytest.mark.unit
    @pytest.mark.parametrize('name', ['TOTAL_SEATS', 'SEATS_PER_ROW'])
    def test_non_positive_layout_rejected(self, monkeypatch: pytest.MonkeyPatch, name: str) -> None:
        monkeypatch.setenv(name, '0')

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.unit
    def test_database_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('POSTGRES_SERVER', 'db')
        monkeypatch.setenv('POSTGRES_DB', 'seats')

        settings = Settings(_env_file=None)

        assert settings.DATABASE_URL_ASYNC.startswith('postgresql+asyncpg://')
        assert settings.DATABASE_URL_ASYNC.endswith('@db:5432/seats')
