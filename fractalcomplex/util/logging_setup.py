"""
Logging Setup — Конфигурация логгера пакета fractalcomplex

Все модули пакета пишут в логгер "fractalcomplex" или его дочерние логгеры
("fractalcomplex.contracts" и т.д.). Численное ядро (core.math) не логирует:
логируются только загрузка схем и прочие операции с I/O.

По умолчанию пакет не навешивает handlers; приложение вызывает
configure_logging один раз при старте.
"""

import logging
import logging.handlers
from typing import Optional

_LOGGER_NAME = "fractalcomplex"


def get_logger(child: Optional[str] = None) -> logging.Logger:
    """
    Логгер пакета или его дочерний логгер.

    Args:
        child: Суффикс дочернего логгера (например, 'contracts')

    Returns:
        logging.Logger "fractalcomplex" или "fractalcomplex.<child>"
    """
    logger = logging.getLogger(_LOGGER_NAME)
    if child:
        return logger.getChild(child)
    return logger


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s.%(msecs)03dZ %(levelname)s %(name)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


def configure_logging(
    *,
    level: int = logging.INFO,
    console: bool = True,
    log_file: Optional[str] = None,
    rotate_bytes: int = 5 * 1024 * 1024,
    rotate_count: int = 5,
) -> logging.Logger:
    """
    Настройка handlers логгера пакета.

    Повторный вызов заменяет ранее установленные handlers (старые закрываются).
    Логгер перестаёт передавать записи в root (propagate=False).

    Args:
        level: Уровень логгера и всех handlers
        console: Добавить StreamHandler (stderr)
        log_file: Путь к файлу лога; None — без файла
        rotate_bytes: Размер файла до ротации (RotatingFileHandler)
        rotate_count: Количество хранимых ротированных файлов

    Returns:
        Настроенный логгер "fractalcomplex"
    """
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    fmt = _build_formatter()
    if console:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)
    if log_file:
        fh = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=rotate_bytes, backupCount=rotate_count, encoding="utf-8"
        )
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger
