"""Exceptions raised by pycolourspace"""

__all__ = ['ColourError', 'FormatError', 'DomainError']


class ColourError(ValueError):
    """Base class of the errors raised when building colour values"""

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({str(self)!r})'


class FormatError(ColourError):
    """Malformed textual or packed colour representation"""


class DomainError(ColourError):
    """Argument outside the closed range defined by a colour model"""
