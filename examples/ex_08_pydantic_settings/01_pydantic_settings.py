"""Pydantic settings as host objects.

``PydanticSettingsFactory`` loads ``BaseSettings`` models from the
environment instead of injecting their fields, and the container caches
them like any other singleton.
"""

from __future__ import annotations

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from bindwire import Container, inject
from bindwire.integrations.pydantic_settings import PydanticSettingsFactory


class GitSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EXAMPLE_GIT_")

    remote: str = "origin"
    auto_fetch: bool = True


class GitManager:
    @inject
    def __init__(self, settings: GitSettings) -> None:
        self.settings = settings


def main() -> None:
    os.environ["EXAMPLE_GIT_REMOTE"] = "upstream"

    container = Container(host_object_factory=PydanticSettingsFactory())
    container.bind(GitSettings)

    manager = container.create_instance(GitManager)
    print(f"remote={manager.settings.remote}")  # => remote=upstream
    print(f"auto_fetch={manager.settings.auto_fetch}")  # => auto_fetch=True

    same = manager.settings is container.get_instance(GitSettings)
    print(f"singleton={same}")  # => singleton=True


if __name__ == "__main__":
    main()
