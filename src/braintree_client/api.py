"""
Public, high-level helpers for building a configured gateway.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import BraintreeGateway
from .core.config import (
    BraintreeConfig,
    ConfigError,
    ConfigParameters,
    Environment,
    load_braintree_config,
)

__all__ = [
    "BraintreeConfig",
    "BraintreeGateway",
    "ConfigError",
    "ConfigParameters",
    "Environment",
    "create_gateway",
    "load_braintree_config",
]


def create_gateway(
    *,
    config: Optional[BraintreeConfig] = None,
    session: Optional[requests.Session] = None,
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
) -> BraintreeGateway:
    """
    Construct a :class:`BraintreeGateway`.

    Callers can either supply a ready-made :class:`BraintreeConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            environment,
            merchant_id,
            public_key,
            private_key,
            base_url,
            timeout_seconds,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built BraintreeConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_braintree_config(
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
    return BraintreeGateway(cfg, session=session)
