from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from licensedb.core import constants


class Settings(BaseSettings):
    PROJECT_NAME: str = "licensedb"

    # Remote database
    SCANCODE_LICENSEDB_URL: str = constants.SCANCODE_LICENSEDB_URL
    SCANCODE_LICENSEDB_PATH: str = constants.SCANCODE_LICENSEDB_PATH

    # Directory layout
    METADATA_EXTENSION: str = constants.METADATA_EXTENSION
    COMPANION_EXTENSION: str = constants.COMPANION_EXTENSION
    INDEX_FILE_NAME: str = constants.INDEX_FILE_NAME

    # Git Settings
    GIT_EXECUTABLE: str = "git"
    GIT_CLONE_DEPTH: Optional[int] = 1  # None clones the full history
    GIT_CLONE_TIMEOUT: Optional[float] = None

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_prefix="LICENSEDB_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
