from __future__ import annotations

import importlib
import warnings
from pathlib import Path
from typing import Any

from bindwire.type_checks import is_runtime_class

_SETTINGS_MODULES = ("pydantic_settings", "pydantic.v1")

_PYDANTIC_V1_WARNING_PATTERN = (
    r"Core Pydantic V1 functionality isn't compatible with Python 3\.14 or greater\."
)


def _load_settings_bases(module_names: tuple[str, ...]) -> tuple[type[Any], ...]:
    """Collect the distinct ``BaseSettings`` classes exposed by the importable modules."""
    bases: list[type[Any]] = []
    for module_name in module_names:
        with warnings.catch_warnings():
            # importing pydantic.v1 warns on newer interpreters
            warnings.filterwarnings("ignore", message=_PYDANTIC_V1_WARNING_PATTERN)
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                continue
        base_settings = getattr(module, "BaseSettings", None)
        if isinstance(base_settings, type) and base_settings not in bases:
            bases.append(base_settings)
    return tuple(bases)


SETTINGS_BASES: tuple[type[Any], ...] = _load_settings_bases(_SETTINGS_MODULES)


def is_pydantic_settings_subclass(candidate: object) -> bool:
    """Return whether a class is a supported Pydantic settings model.

    Both ``pydantic_settings.BaseSettings`` and legacy
    ``pydantic.v1.BaseSettings`` are recognized when available. If Pydantic is
    not installed, this function returns ``False`` for every candidate.

    Args:
        candidate: Object to test.

    Returns:
        ``True`` when ``candidate`` is a runtime class and subclasses any
        discovered settings base; otherwise ``False``.

    """
    if not is_runtime_class(candidate):
        return False
    try:
        return any(issubclass(candidate, base) for base in SETTINGS_BASES)
    except TypeError:
        return False


class PydanticSettingsFactory:
    """Host object factory that loads Pydantic settings models from their sources.

    Settings models read their values from the environment and dotenv files
    rather than from constructor arguments, so the container must not try to
    inject their fields. Bind them like any other type; the model is loaded
    once per singleton binding and may still declare ``@inject`` methods.

    Examples:
        .. code-block:: python

            class GitSettings(BaseSettings):
                model_config = SettingsConfigDict(env_prefix="GIT_")

                auto_fetch: bool = True


            container = Container(host_object_factory=PydanticSettingsFactory(env_file=".env"))
            container.bind(GitSettings)
            settings = container.get_instance(GitSettings)

    """

    def __init__(self, *, env_file: str | Path | None = None) -> None:
        """Configure how settings models are loaded.

        Args:
            env_file: Dotenv file read in addition to the environment. Uses the
                model's own configuration when omitted.

        """
        self._env_file = env_file

    def owns(self, cls: type[Any]) -> bool:
        """Return whether ``cls`` is a Pydantic settings model."""
        return is_pydantic_settings_subclass(cls)

    def construct(self, cls: type[Any]) -> Any:
        """Load a settings model from the environment (and env file, when configured)."""
        if self._env_file is None:
            return cls()
        return cls(_env_file=self._env_file)


__all__ = [
    "SETTINGS_BASES",
    "PydanticSettingsFactory",
    "is_pydantic_settings_subclass",
]
