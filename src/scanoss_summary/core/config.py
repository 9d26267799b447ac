# config.py
# SPDX-License-Identifier: MIT
"""Configuration for summary generation.

Holds the detected-license mapping and logging settings, loadable from JSON
or TOML::

    license_ref_tool = "scanoss"

    [detected_license_mapping]
    "BSD (Three Clause License)" = "BSD-3-Clause"

    [logging]
    level = "DEBUG"
"""
from __future__ import annotations

import json
import logging
import sys
try:  # pragma: no cover - optional dependency
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    try:
        import tomli as tomllib  # type: ignore[assignment]
    except Exception:  # pragma: no cover
        tomllib = None  # type: ignore[assignment]
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import IO, Any, Dict, Mapping, Optional, Type, TypeVar

from .licenses import DEFAULT_LICENSE_REF_TOOL
from .log import PACKAGE_LOGGER_NAME, get_logger

__all__ = [
    "LoggingConfig",
    "SummaryConfig",
    "load_config_from_path",
]

T = TypeVar("T")


@dataclass(slots=True)
class LoggingConfig:
    """Controls the package logger; set propagate/logger_name to integrate
    with host apps.
    """
    level: int | str = "INFO"
    propagate: bool = False
    fmt: Optional[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logger_name: str = PACKAGE_LOGGER_NAME

    def apply(self, stream: IO[str] | None = None) -> logging.Logger:
        """Set the level and attach one stream handler (stderr by default).

        Calling this again reuses the handler, pointing it at ``stream`` when
        one is given.
        """
        logger = get_logger(self.logger_name or PACKAGE_LOGGER_NAME)
        level = self.level
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.INFO)
        logger.setLevel(level)
        logger.propagate = self.propagate

        handler = next((h for h in logger.handlers if isinstance(h, logging.StreamHandler)), None)
        if handler is None:
            handler = logging.StreamHandler(stream or sys.stderr)
            logger.addHandler(handler)
        elif stream is not None:
            handler.setStream(stream)
        handler.setFormatter(logging.Formatter(fmt=self.fmt))
        return logger


@dataclass(slots=True)
class SummaryConfig:
    """
    Settings for turning SCANOSS results into a scan summary.

    Attributes:
        detected_license_mapping (dict[str, str]): Exact-string renames for
            detected license names, applied after validation.
        license_ref_tool (str): Tool tag used in ``LicenseRef-<tool>-<name>``.
        logging (LoggingConfig): Package logger settings.
    """
    detected_license_mapping: Dict[str, str] = field(default_factory=dict)
    license_ref_tool: str = DEFAULT_LICENSE_REF_TOOL
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        if not self.license_ref_tool or not self.license_ref_tool.strip():
            raise ValueError("license_ref_tool must be a non-empty string.")
        for key, value in self.detected_license_mapping.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(
                    "detected_license_mapping must map strings to strings; "
                    f"got {key!r} -> {value!r}."
                )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detected_license_mapping": dict(self.detected_license_mapping),
            "license_ref_tool": self.license_ref_tool,
            "logging": {f.name: getattr(self.logging, f.name) for f in fields(self.logging)},
        }

    @classmethod
    def from_dict(cls: Type[T], data: Mapping[str, Any] | None) -> T:
        """Build a config from a mapping, rejecting unknown keys.

        Raises:
            ValueError: If ``data`` contains keys this config does not know.
        """
        if data is None:
            return cls()  # type: ignore[call-arg]
        _reject_unknown(cls, data, context=cls.__name__)
        kwargs: Dict[str, Any] = {}
        if "detected_license_mapping" in data:
            kwargs["detected_license_mapping"] = dict(data["detected_license_mapping"] or {})
        if "license_ref_tool" in data:
            kwargs["license_ref_tool"] = str(data["license_ref_tool"])
        if "logging" in data:
            logging_data = data["logging"] or {}
            _reject_unknown(LoggingConfig, logging_data, context="logging")
            kwargs["logging"] = LoggingConfig(**logging_data)
        cfg = cls(**kwargs)  # type: ignore[call-arg]
        cfg.validate()  # type: ignore[attr-defined]
        return cfg

    @classmethod
    def from_json(cls: Type[T], path: Path | str) -> T:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.from_dict(payload)  # type: ignore[attr-defined]

    @classmethod
    def from_toml(cls: Type[T], path: Path | str) -> T:
        if tomllib is None:
            raise RuntimeError(
                "TOML support requires Python 3.11+ (tomllib) or installing the 'tomli' package."
            )
        data = tomllib.loads(Path(path).read_bytes().decode("utf-8"))
        if not isinstance(data, Mapping):
            raise TypeError(f"Top-level TOML document must be a mapping; got {type(data).__name__}.")
        return cls.from_dict(data)  # type: ignore[attr-defined]


def _reject_unknown(cfg_type: Type[Any], options: Mapping[str, Any], *, context: str) -> None:
    allowed = {f.name for f in fields(cfg_type)}
    unknown = sorted(k for k in options if k not in allowed)
    if unknown:
        raise ValueError(
            f"Unsupported options for {context}: {', '.join(unknown)}. "
            f"Allowed keys: {', '.join(sorted(allowed))}"
        )


def load_config_from_path(path: str | Path) -> SummaryConfig:
    """Load a :class:`SummaryConfig` from a ``.toml`` or ``.json`` file.

    Raises:
        ValueError: If the file extension is not ``.toml`` or ``.json``.
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".toml":
        return SummaryConfig.from_toml(p)
    if suffix == ".json":
        return SummaryConfig.from_json(p)
    raise ValueError(f"Unsupported config extension {p.suffix!r}; expected .toml or .json.")
