import tomllib
from pathlib import Path
from typing import Annotated

import tomlkit
from pydantic import BaseModel, Field, HttpUrl, WebsocketUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tick_helper.logging import logger
from tick_helper.types.aliases import ChainId

CONFIG_DIR = Path.home() / ".config" / "tick_helper"
CONFIG_FILE = CONFIG_DIR / "config.toml"


class QuerySettings(BaseModel):
    # Tick spacings on either side of the current tick scanned when no range is given
    range_multiplier: Annotated[int, Field(ge=0)] = 10


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TICK_HELPER_")

    query: QuerySettings = QuerySettings()
    rpc: dict[
        ChainId,
        HttpUrl | WebsocketUrl | Path,
    ] = {}

    @field_validator("rpc", mode="after")
    def validate_paths(
        cls,  # noqa: N805
        rpc_dict: dict[ChainId, HttpUrl | WebsocketUrl | Path],
    ) -> dict[ChainId, HttpUrl | WebsocketUrl | Path]:
        """
        Validate the endpoints.

        This will convert all file paths to an absolute reference, leaving HTTP and WS URLs as-is.
        """

        return {
            chain_id: endpoint.expanduser().absolute() if isinstance(endpoint, Path) else endpoint
            for chain_id, endpoint in rpc_dict.items()
        }


def load_config_from_file(config_path: Path) -> Settings:
    return Settings.model_validate(
        tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(mode="json"),
        ),
    )


if CONFIG_FILE.exists():
    settings = load_config_from_file(CONFIG_FILE)
    logger.debug(f"Loaded configuration from {CONFIG_FILE}.")
else:
    settings = Settings()
