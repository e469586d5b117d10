from __future__ import annotations

import os
from dataclasses import dataclass

APP_NAME = "vttmerge"
APP_VERSION = "1.0.0"
DEFAULT_INPUT_SUFFIX = ".vtt"
DEFAULT_OUTPUT_NAME = "output.srt"
DEFAULT_INPUT_ENCODING = "utf-8-sig"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_LEVEL_ENV = "VTTMERGE_LOG_LEVEL"


@dataclass(frozen=True)
class AppConfig:
    input_suffix: str
    output_name: str
    encoding: str
    log_level: str


def normalize_input_suffix(value: str) -> str:
    suffix = value.strip()
    if not suffix or suffix == ".":
        raise ValueError("Input suffix must not be empty.")
    return suffix if suffix.startswith(".") else f".{suffix}"


def normalize_output_name(value: str) -> str:
    name = value.strip()
    if not name or "/" in name or "\\" in name or name in {".", ".."}:
        raise ValueError(f"Output name must be a plain file name, got '{value}'")
    return name


def normalize_encoding(value: str) -> str:
    encoding = value.strip().lower()
    if not encoding:
        raise ValueError("Encoding must not be empty.")
    return encoding


def normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise ValueError(
            f"Unsupported log level '{value}'. Allowed: {sorted(SUPPORTED_LOG_LEVELS)}"
        )
    return level


def resolve_log_level(custom_level: str | None = None) -> str:
    if custom_level is not None:
        return normalize_log_level(custom_level)
    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_level:
        return normalize_log_level(env_level)
    return DEFAULT_LOG_LEVEL


def build_app_config(
    *,
    input_suffix: str = DEFAULT_INPUT_SUFFIX,
    output_name: str = DEFAULT_OUTPUT_NAME,
    encoding: str = DEFAULT_INPUT_ENCODING,
    log_level: str | None = None,
) -> AppConfig:
    return AppConfig(
        input_suffix=normalize_input_suffix(input_suffix),
        output_name=normalize_output_name(output_name),
        encoding=normalize_encoding(encoding),
        log_level=resolve_log_level(log_level),
    )
