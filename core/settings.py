import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === Приложение ===
    APP_NAME: str = 'hr-contract'

    # === Логирование ===
    LOG_LEVEL: str = 'INFO'
    LOG_FORMAT: str = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'

    # === Текстовое представление ===
    NO_DEPARTMENT_MARKER: str = 'N/A'

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,  # В .env можно использовать как верхний, так и нижний регистр
    )

    @field_validator('LOG_LEVEL')
    @classmethod
    def check_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f'Неизвестный уровень логирования: {v}')
        return v

    def log_level(self) -> int:
        """Числовой уровень логирования для модуля logging."""
        return logging.getLevelNamesMapping()[self.LOG_LEVEL]


# Singleton - Единственный экземпляр настроек на всё приложение
settings = Settings()
