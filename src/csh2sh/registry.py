"""
Converter registry: (input extension, target kind) -> converter factory.

    registry = build_default_registry()
    converter = registry.get_converter("deploy.csh", "sh")
    output = converter.convert("deploy.csh")

Lookups are case-insensitive ("SCRIPT.CSH" / "SH" work). Every lookup builds
a fresh converter from its factory, so registered converters never share
state.

The default registry is built and validated at import time: a broken
registration fails immediately instead of on first use.
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from csh2sh.converter import Converter, PathLike
from csh2sh.encoding import EncodingConverter
from csh2sh.errors import UnsupportedConversionError
from csh2sh.transpiler import ScriptTranspiler


ConverterFactory = Callable[[], Converter]

ENCODING_EXTENSIONS = ["sql", "java", "js", "jsp", "xhtml", "html", "txt"]


def _normalize_extension(extension: str) -> str:
    return extension.lower().lstrip(".")


def file_extension(filename: PathLike) -> Optional[str]:
    """Extension of a file name without the dot, or None."""
    suffix = Path(filename).suffix
    return suffix[1:] if suffix else None


class ConverterRegistry:
    """Static mapping from (extension, kind) to converter factories."""

    def __init__(self):
        self._factories: Dict[str, Dict[str, ConverterFactory]] = {}

    def register(self, extension: str, kind: str, factory: ConverterFactory) -> None:
        """
        Register a factory for an input extension and a target kind.

        Args:
            extension: Source file extension, with or without the dot
            kind: Target conversion kind (e.g. "sh", "encoding")
            factory: Zero-argument callable returning a Converter
        """
        ext_key = _normalize_extension(extension)
        kind_key = kind.lower()
        self._factories.setdefault(ext_key, {})[kind_key] = factory

    def pairs(self) -> List[Tuple[str, str]]:
        """All registered (extension, kind) pairs, sorted."""
        return sorted(
            (ext, kind)
            for ext, kinds in self._factories.items()
            for kind in kinds
        )

    def kinds_for(self, extension: str) -> List[str]:
        return sorted(self._factories.get(_normalize_extension(extension), {}))

    def get_converter(self, input_path: PathLike, kind: str) -> Converter:
        """
        Build the converter for an input file and a target kind.

        Raises:
            UnsupportedConversionError: If nothing is registered for the combination
        """
        extension = file_extension(input_path)
        if extension is None or _normalize_extension(extension) not in self._factories:
            raise UnsupportedConversionError(f"No available converters for {input_path}")

        ext_key = _normalize_extension(extension)
        factory = self._factories[ext_key].get(kind.lower())
        if factory is None:
            raise UnsupportedConversionError(f"No conversion from {ext_key} to {kind.lower()}")
        return factory()

    def validate(self) -> None:
        """
        Check that every registered factory builds a Converter.

        Raises:
            UnsupportedConversionError: On the first broken registration
        """
        for ext, kinds in self._factories.items():
            for kind, factory in kinds.items():
                if not callable(factory):
                    raise UnsupportedConversionError(f"Factory for {ext} -> {kind} is not callable")
                converter = factory()
                if not isinstance(converter, Converter):
                    raise UnsupportedConversionError(
                        f"Factory for {ext} -> {kind} returned {type(converter).__name__}, not a Converter"
                    )


def build_default_registry() -> ConverterRegistry:
    """Registry with the C shell transpiler and the encoding converter."""
    registry = ConverterRegistry()
    registry.register("csh", "sh", ScriptTranspiler)
    for ext in ENCODING_EXTENSIONS:
        registry.register(ext, "encoding", EncodingConverter)
    registry.validate()
    return registry


DEFAULT_REGISTRY = build_default_registry()


def get_converter(input_path: PathLike, kind: str) -> Converter:
    """Look up a converter in the default registry."""
    return DEFAULT_REGISTRY.get_converter(input_path, kind)


__all__ = [
    "ConverterRegistry",
    "ConverterFactory",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    "file_extension",
    "get_converter",
]
