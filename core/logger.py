import logging

from core.settings import settings


def setup_logger(
    name: str,
    level: int = logging.INFO,
    fmt: str = '%(levelname)s | %(name)s | %(message)s',
) -> logging.Logger:
    """
    Настроить именованный логгер.

    Повторный вызов не добавляет второй обработчик, меняется только уровень.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    return logger


# Глобальный экземпляр
logger = setup_logger(
    settings.APP_NAME,
    level=settings.log_level(),
    fmt=settings.LOG_FORMAT,
)
