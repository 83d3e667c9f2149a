"""
Configuration Resolver - Turns raw trigger configuration into ResolvedMetadata.

All validation happens here, before any network I/O, so a bad trigger fails
at construction and never mid-poll.
"""

from __future__ import annotations

from ..domain import ConfigurationError, ResolvedMetadata, ScalerConfig
from .parsing import parse_bool, parse_int, split_and_trim

DEFAULT_UNSAFE_SSL = False


def get_from_auth_or_meta(
    config: ScalerConfig, key: str, required: bool = True
) -> str | None:
    """
    Look a field up in the auth params, then in the trigger metadata.

    Auth params always win when both define the key. Empty strings count as
    absent.

    Raises:
        ConfigurationError: If required and neither source defines the key
    """
    for source in (config.auth_params, config.trigger_metadata):
        value = source.get(key)
        if value:
            return value
    if required:
        raise ConfigurationError(f"no {key} given", field=key)
    return None


def _split_required(value: str, sep: str, key: str) -> tuple[str, ...]:
    tokens = split_and_trim(value, sep)
    if not any(tokens):
        raise ConfigurationError(f"no {key} given", field=key)
    return tuple(tokens)


def _split_addresses(value: str) -> tuple[str, ...]:
    addresses = _split_required(value, ",", "addresses")
    if not all(addresses):
        raise ConfigurationError(
            f"addresses '{value}' contains an empty endpoint", field="addresses"
        )
    return addresses


def parse_parameter(token: str) -> tuple[str, str]:
    """
    Split one "key:value" parameter token on its first colon.

    The value may itself hold colons: "from:2024-01-01T00:00:00" gives
    ("from", "2024-01-01T00:00:00").

    Raises:
        ConfigurationError: If the token has no colon or an empty key
    """
    parts = [part.strip() for part in token.split(":", 1)]
    if len(parts) != 2 or not parts[0]:
        raise ConfigurationError(
            f"parameter '{token}' must be of the form key:value", field="parameters"
        )
    return parts[0], parts[1]


def _parse_parameters(raw: str | None) -> tuple[str, ...]:
    if raw is None:
        return ()
    tokens = split_and_trim(raw, ";")
    for token in tokens:
        if token:
            parse_parameter(token)
    return tuple(tokens)


def _resolve_password(config: ScalerConfig) -> str | None:
    password = config.auth_params.get("password")
    if password:
        return password
    env_name = config.trigger_metadata.get("passwordFromEnv")
    if env_name:
        return config.resolved_env.get(env_name) or None
    return None


def _resolve_metadata(config: ScalerConfig) -> ResolvedMetadata:
    addresses = _split_addresses(get_from_auth_or_meta(config, "addresses"))

    unsafe_ssl = DEFAULT_UNSAFE_SSL
    raw_unsafe_ssl = config.trigger_metadata.get("unsafeSsl")
    if raw_unsafe_ssl is not None:
        try:
            unsafe_ssl = parse_bool(raw_unsafe_ssl)
        except ValueError as exc:
            raise ConfigurationError(f"error parsing unsafeSsl: {exc}", field="unsafeSsl") from exc

    raw_index = get_from_auth_or_meta(config, "index", required=False)
    if raw_index is None:
        raw_index = get_from_auth_or_meta(config, "indexes", required=False)
    if raw_index is None:
        raise ConfigurationError("no index given", field="index")
    indexes = _split_required(raw_index, ";", "index")

    search_template_name = get_from_auth_or_meta(config, "searchTemplateName")
    parameters = _parse_parameters(config.trigger_metadata.get("parameters"))
    value_location = get_from_auth_or_meta(config, "valueLocation")

    raw_target = get_from_auth_or_meta(config, "targetValue")
    try:
        target_value = parse_int(raw_target)
    except ValueError as exc:
        raise ConfigurationError(
            f"targetValue parsing error {exc}", field="targetValue"
        ) from exc

    return ResolvedMetadata(
        addresses=addresses,
        indexes=indexes,
        search_template_name=search_template_name,
        value_location=value_location,
        target_value=target_value,
        parameters=parameters,
        unsafe_ssl=unsafe_ssl,
        username=get_from_auth_or_meta(config, "username", required=False),
        password=_resolve_password(config),
    )


def resolve_metadata(config: ScalerConfig) -> ResolvedMetadata:
    """
    Validate config and build the scaler's ResolvedMetadata.

    Raises:
        ConfigurationError: Naming the offending field in .field
    """
    try:
        return _resolve_metadata(config)
    except ConfigurationError as exc:
        raise ConfigurationError(
            f"error parsing elasticsearch metadata: {exc}", field=exc.field
        ) from exc


__all__ = [
    "DEFAULT_UNSAFE_SSL",
    "get_from_auth_or_meta",
    "parse_parameter",
    "resolve_metadata",
]
