import os
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from src.music_api.runtime.config.config_data import ConfigData
from src.music_api.runtime.config.config_template import load_templated_yaml


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


def load_default_config() -> ConfigData:
    """Load config.yaml (or the file named by MUSIC_API_CONFIG).

    Falls back to built-in defaults when the file does not exist.
    """
    config_path = Path(os.getenv("MUSIC_API_CONFIG", "config.yaml"))
    if not config_path.exists():
        logger.warning("{} not found; using default configuration", config_path)
        return ConfigData()
    return load_templated_yaml(config_path)


# Global configuration instance, loaded once at import
_default_context = AppContext(config=load_default_config())


# Context variable for application context
_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=_default_context
)


def get_context() -> AppContext:
    """Get the current application context.

    Returns:
        AppContext: The current application context containing configuration.
    """
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Set the current application context.

    Args:
        context: AppContext instance to set as current.
    """
    return _app_context.set(context)


def _recursive_model_dump_exclude_unset(model: BaseModel) -> dict:
    """Recursively dump a Pydantic model keeping only explicitly set fields.

    A nested model is included as soon as any of its own fields (at any
    depth) was explicitly set, or when the nested model itself was passed
    explicitly.

    Args:
        model: The Pydantic model to dump

    Returns:
        dict: Dictionary containing only explicitly set fields at all levels
    """
    result = {}

    # Fields passed explicitly at this level
    explicitly_set_fields = model.model_fields_set

    for field_name in model.__class__.model_fields:
        field_value = getattr(model, field_name)

        if isinstance(field_value, BaseModel):
            # Descend first so deep overrides bubble up to this level
            nested_result = _recursive_model_dump_exclude_unset(field_value)
            if nested_result or field_name in explicitly_set_fields:
                result[field_name] = nested_result or field_value.model_dump()
        elif field_name in explicitly_set_fields:
            # Plain value that was explicitly set
            result[field_name] = field_value

    return result


def _recursive_dict_merge(base_dict: dict, override_dict: dict) -> dict:
    """Recursively merge two dictionaries, values from override_dict winning.

    Args:
        base_dict: The base dictionary to merge into
        override_dict: The override dictionary to merge from

    Returns:
        dict: The merged dictionary
    """
    result = base_dict.copy()

    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            # Both sides are sections: merge them key by key
            result[key] = _recursive_dict_merge(result[key], value)
        else:
            # Override or new key
            result[key] = value

    return result


def _merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    """Merge the explicitly set values of override_config into base_config.

    Args:
        base_config: The base ConfigData instance.
        override_config: The override ConfigData instance.
    Returns:
        ConfigData: The merged ConfigData instance, validated again.
    """
    base_dict = base_config.model_dump()
    override_dict = _recursive_model_dump_exclude_unset(override_config)
    merged_dict = _recursive_dict_merge(base_dict, override_dict)
    return ConfigData.model_validate(merged_dict)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Context manager for temporarily overriding the application context.

    Only the fields explicitly set on ``config_override`` replace values of the
    current configuration; everything else is inherited.

    Args:
        config_override: Optional ConfigData instance. ``None`` leaves the
            current context untouched.

    Example:
        override = ConfigData(pagination=PaginationConfig(default_size=10))
        with with_context(override):
            assert get_config().pagination.default_size == 10
            # other pagination and database fields are inherited
    """
    if config_override is None:
        # No overrides, just yield current context
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged_config = _merge_configs(get_context().config, config_override)
    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield
    finally:
        # Restore whatever context was active before entering
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the entire current application configuration.

    Args:
        config: ConfigData instance to set as current.
    """
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    """Convenience function to get the current configuration.

    Returns:
        ConfigData: The current configuration from the app context.
    """
    return get_context().config
