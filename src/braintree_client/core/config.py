"""
Configuration objects and helpers for the Braintree client.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .env import build_environment
from .errors import ConfigError

__all__ = [
    "BraintreeConfig",
    "ConfigError",
    "ConfigParameters",
    "Environment",
    "load_braintree_config",
]

DEFAULT_TIMEOUT_SECONDS = 60

_PARAMETER_TO_ENV_KEY = {
    "environment": "BRAINTREE_ENVIRONMENT",
    "merchant_id": "BRAINTREE_MERCHANT_ID",
    "public_key": "BRAINTREE_PUBLIC_KEY",
    "private_key": "BRAINTREE_PRIVATE_KEY",
    "base_url": "BRAINTREE_BASE_URL",
    "timeout_seconds": "BRAINTREE_TIMEOUT_SECONDS",
}


class Environment(enum.Enum):
    DEVELOPMENT = "development"
    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def base_url(self) -> str:
        return _BASE_URLS[self]

    @classmethod
    def parse(cls, value: "Environment | str") -> "Environment":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        try:
            return cls(name)
        except ValueError as exc:
            choices = ", ".join(env.value for env in cls)
            raise ConfigError(
                f"BRAINTREE_ENVIRONMENT must be one of {choices}, got '{value}'"
            ) from exc


_BASE_URLS = {
    Environment.DEVELOPMENT: "http://localhost:3000",
    Environment.SANDBOX: "https://api.sandbox.braintreegateway.com:443",
    Environment.PRODUCTION: "https://api.braintreegateway.com:443",
}


def _stringify(value: Any) -> str:
    if isinstance(value, Environment):
        return value.value
    return str(value)


@dataclass(frozen=True)
class ConfigParameters:
    """
    Explicit parameter bundle for constructing :class:`BraintreeConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_braintree_config`.
    """

    environment: Optional[Environment | str] = None
    merchant_id: Optional[str] = None
    public_key: Optional[str] = None
    private_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout_seconds: Optional[int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ConfigParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown configuration parameter '{key}'") from exc
        overrides[env_key] = _stringify(value)
    return overrides


def _required(values: Mapping[str, str], key: str) -> str:
    raw = values.get(key)
    if raw is None:
        raise ConfigError(f"{key} must be provided")
    value = raw.strip()
    if not value:
        raise ConfigError(f"{key} must not be empty")
    return value


def _positive_int(raw: str, key: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got '{raw}'") from exc
    if value <= 0:
        raise ConfigError(f"{key} must be greater than zero")
    return value


@dataclass(frozen=True)
class BraintreeConfig:
    environment: Environment
    merchant_id: str
    public_key: str
    private_key: str
    base_url: str
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    @property
    def merchant_url(self) -> str:
        return f"{self.base_url}/merchants/{self.merchant_id}"

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION

    def __repr__(self) -> str:
        return (
            f"BraintreeConfig(environment={self.environment.value!r}, "
            f"merchant_id={self.merchant_id!r}, public_key={self.public_key!r}, "
            f"base_url={self.base_url!r}, timeout_seconds={self.timeout_seconds!r})"
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "BraintreeConfig":
        environment = Environment.parse(values.get("BRAINTREE_ENVIRONMENT", "sandbox"))

        merchant_id = _required(values, "BRAINTREE_MERCHANT_ID")
        public_key = _required(values, "BRAINTREE_PUBLIC_KEY")
        private_key = _required(values, "BRAINTREE_PRIVATE_KEY")

        base_url = (values.get("BRAINTREE_BASE_URL") or "").strip()
        if not base_url:
            base_url = environment.base_url
        base_url = base_url.rstrip("/")

        timeout_seconds = _positive_int(
            values.get("BRAINTREE_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)),
            "BRAINTREE_TIMEOUT_SECONDS",
        )

        return cls(
            environment=environment,
            merchant_id=merchant_id,
            public_key=public_key,
            private_key=private_key,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ConfigParameters] = None,
        environment: Optional[Environment | str] = None,
        merchant_id: Optional[str] = None,
        public_key: Optional[str] = None,
        private_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[int | str] = None,
    ) -> "BraintreeConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "environment": environment,
                "merchant_id": merchant_id,
                "public_key": public_key,
                "private_key": private_key,
                "base_url": base_url,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        variables = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(variables.variables)


def load_braintree_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ConfigParameters] = None,
    environment: Optional[Environment | str] = None,
    merchant_id: Optional[str] = None,
    public_key: Optional[str] = None,
    private_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> BraintreeConfig:
    """
    Convenience wrapper that mirrors :meth:`BraintreeConfig.from_env`.

    The configuration can be provided entirely through environment variables,
    a ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return BraintreeConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        environment=environment,
        merchant_id=merchant_id,
        public_key=public_key,
        private_key=private_key,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
    )
