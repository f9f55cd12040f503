from __future__ import annotations

__all__: List[str] = []

import sys
from abc import ABC, ABCMeta
from enum import IntEnum
from threading import Lock
from typing import Any, Dict, List, Optional

import loguru

_PACKAGE = __name__.partition('.')[0]

# silent until the application opts in with logger.set_level
loguru.logger.disable(_PACKAGE)


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


def _loguru_format(record: loguru.Record) -> str:
    return (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level.name: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>\n{exception}"
    )


class SingletonMeta(ABCMeta):
    _instances: Dict[object, Any] = {}
    _lock: Lock = Lock()

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        with cls._lock:
            if cls not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[cls] = instance
        return cls._instances[cls]


class Singleton(ABC, metaclass=SingletonMeta):
    ...


class Logger(Singleton):
    """
    Package logger, a thin layer over loguru.

    The records of this package are disabled at import and no handler of the application is touched.
    ``set_level`` enables them and writes them to stderr through a sink filtered on this package.
    """

    __slots__ = ('__id', '__level')

    def __init__(self) -> None:
        self.__level = int(LogLevel.ERROR)
        self.__id: Optional[int] = None

    @property
    def level(self) -> int:
        """Current minimum level of the stderr sink"""
        return self.__level

    def set_level(self, level: int) -> None:
        """
        Enable the records of this package and (re)install the stderr sink filtering at ``level``

        :param level:       A LogLevel or any loguru severity number
        """
        self._remove_sink()
        self.__level = int(level)
        self.__id = loguru.logger.add(
            sys.stderr, level=self.__level, format=_loguru_format, filter=_PACKAGE, backtrace=False, diagnose=False
        )
        loguru.logger.enable(_PACKAGE)

    def disable(self) -> None:
        """Silence the records of this package again and remove the stderr sink"""
        self._remove_sink()
        loguru.logger.disable(_PACKAGE)

    @property
    def enabled(self) -> bool:
        """Whether the records of this package are emitted"""
        return self.__id is not None

    def _remove_sink(self) -> None:
        if self.__id is not None:
            loguru.logger.remove(self.__id)
            self.__id = None

    def trace(self, message: str, /, *args: Any, depth: int = 1, lazy: bool = False) -> None:
        loguru.logger.opt(depth=depth, lazy=lazy).trace(message, *args)

    def debug(self, message: str, /, *args: Any, depth: int = 1) -> None:
        loguru.logger.opt(depth=depth).debug(message, *args)

    def warning(self, message: str, /, *args: Any, depth: int = 1) -> None:
        loguru.logger.opt(depth=depth).warning(message, *args)


logger = Logger()
