"""User configuration for preq.

The optional ``config.json`` lives in the platform user config directory
(``PREQ_CONFIG`` overrides the path) and is validated with Pydantic models.
Credentials may also come from the environment, which takes precedence.

Example:
    >>> from pathlib import Path
    >>> load_config(Path("missing.json"), environ={}).bitbucket.api_url
    'https://api.bitbucket.org/2.0'
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Mapping

from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .services.errors import ValidationFailedError

APP_NAME = "preq"
CONFIG_FILENAME = "config.json"
DEFAULT_BITBUCKET_API_URL = "https://api.bitbucket.org/2.0"
DEFAULT_TIMEOUT_SECONDS = 30.0

ENV_CONFIG_PATH = "PREQ_CONFIG"
ENV_BITBUCKET_USERNAME = "PREQ_BITBUCKET_USERNAME"
ENV_BITBUCKET_APP_PASSWORD = "PREQ_BITBUCKET_APP_PASSWORD"


class BitbucketSection(BaseModel):
    """Bitbucket Cloud API settings.

    Attributes:
        username: Account username used for basic auth.
        app_password: App password paired with ``username``.
        api_url: REST API base URL.
        timeout_seconds: Per-request timeout.
    """

    model_config = ConfigDict(extra="ignore")

    username: str | None = None
    app_password: str | None = None
    api_url: str = DEFAULT_BITBUCKET_API_URL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    @field_validator("username", "app_password", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("api_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().rstrip("/") or DEFAULT_BITBUCKET_API_URL
        return value


class PreqConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    bitbucket: BitbucketSection = Field(default_factory=BitbucketSection)


def default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    override = env.get(ENV_CONFIG_PATH, "").strip()
    if override:
        return Path(override).expanduser()
    return Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME


def _read_payload(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            payload = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise ValidationFailedError(f"failed to read config {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValidationFailedError(f"config {path} must contain a JSON object")
    return payload


def load_config(
    path: Path | None = None, *, environ: Mapping[str, str] | None = None
) -> PreqConfig:
    """Load the user config and apply environment overrides.

    Args:
        path: Config file path; defaults to ``default_config_path()``.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        Parsed configuration. A missing file yields defaults.

    Raises:
        ValidationFailedError: When the file is unreadable or invalid.
    """
    env = os.environ if environ is None else environ
    config_path = path or default_config_path(env)
    payload = _read_payload(config_path)
    try:
        config = PreqConfig.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailedError(
            f"invalid config {config_path}: {exc.error_count()} error(s)",
            recovery_hint=str(exc),
        ) from exc

    overrides: dict[str, str] = {}
    username = env.get(ENV_BITBUCKET_USERNAME, "").strip()
    if username:
        overrides["username"] = username
    app_password = env.get(ENV_BITBUCKET_APP_PASSWORD, "").strip()
    if app_password:
        overrides["app_password"] = app_password
    if overrides:
        config = config.model_copy(
            update={"bitbucket": config.bitbucket.model_copy(update=overrides)}
        )
    return config
