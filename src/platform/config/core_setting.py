from pathlib import Path
from typing import Annotated, List, Literal

from pydantic import TypeAdapter, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Seat Booking Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []  # comma-separated or JSON list

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return TypeAdapter(List[str]).validate_json(v)
        elif isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Seating chart layout (fixed at chart creation)
    TOTAL_SEATS: int = 80
    SEATS_PER_ROW: int = 7

    @field_validator('TOTAL_SEATS', 'SEATS_PER_ROW')
    @classmethod
    def check_positive_layout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('Seating chart layout values must be positive')
        return v

    # Booking
    MAX_ALLOCATION_ATTEMPTS: int = 3  # allocate + compare-and-commit rounds per request

    @field_validator('MAX_ALLOCATION_ATTEMPTS')
    @classmethod
    def check_attempts(cls, v: int) -> int:
        if v < 1:
            raise ValueError('MAX_ALLOCATION_ATTEMPTS must be at least 1')
        return v

    # Seat store backend: 'memory' keeps the chart in-process, 'database' uses PostgreSQL
    SEAT_STORE_BACKEND: Literal['memory', 'database'] = 'memory'

    # PostgreSQL Configuration
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: str = 'postgres'
    POSTGRES_DB: str = 'seat_booking'

    # Connection Pool Configuration
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 3600  # seconds
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}'
            f'@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )


settings = Settings()  # type: ignore
