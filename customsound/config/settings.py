from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from customsound.utils.paths import get_install_dir, sounds_dir_for

# We use 'BaseSettings' from pydantic-settings.
# This allows us to tweak the mod from environment variables (or a .env file)
# without touching config.json. For example CUSTOMSOUND_LOG_LEVEL=DEBUG.


class CustomSoundSettings(BaseSettings):
    """
    Runtime settings of the mod. config.json holds the sounds; this holds
    where to find them and how to behave around them.
    """
    model_config = SettingsConfigDict(
        env_prefix="CUSTOMSOUND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    install_dir: Optional[str] = Field(None, description="Override the detected install directory")
    config_filename: str = Field("config.json", description="Name of the sound group file")
    sounds_subdir: str = Field("sounds", description="Folder holding the sound files")

    log_name: str = Field("CustomSound", description="Diagnostics log file name, without .log")
    log_level: str = Field("INFO", description="Logging level")
    log_to_file: bool = Field(True, description="Append diagnostics to <install>/<log_name>.log")
    dump_config: bool = Field(True, description="Log the validated configuration as JSON")

    drop_invalid_groups: bool = Field(
        False,
        description="Drop groups whose configured sound files are all missing"
    )
    trigger_action: str = Field("Quack", description="Input action the mod takes over")

    @property
    def base_dir(self) -> str:
        """
        The directory config.json, sounds/ and the log live in.
        """
        if self.install_dir is not None:
            return self.install_dir
        return get_install_dir()

    @property
    def sounds_dir(self) -> str:
        return sounds_dir_for(self.base_dir, self.sounds_subdir)


def get_settings(**overrides) -> CustomSoundSettings:
    """
    Creates a CustomSoundSettings object from environment variables,
    with keyword overrides taking precedence.
    """
    return CustomSoundSettings(**overrides)
