"""
Converter interface.

A converter takes the path of an input file (or directory) and returns the
path of what it produced. Converters are looked up through
csh2sh.registry and share no state with each other.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union


PathLike = Union[str, Path]


class Converter(ABC):
    """Base class for everything registered in a ConverterRegistry."""

    @abstractmethod
    def convert(self, input_path: PathLike) -> Path:
        """
        Convert the input and return the output path.

        Raises:
            ConversionError: Or one of its subclasses
        """
        raise NotImplementedError


__all__ = ["Converter", "PathLike"]
