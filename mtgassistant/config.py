from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

STATIC_DIR = Path(__file__).parent / "static"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MTGASSISTANT_")

    app_name: str = "mtgassistant"

    # Environment variables in the path are expanded when the log is opened
    log_file: str = (
        r"${USERPROFILE}\AppData\LocalLow\Wizards Of The Coast\MTGA\output_log.txt"
    )
    mtg_data: Path = Path(
        r"C:\Program Files (x86)\Wizards of the Coast\MTGA\MTGA_Data\Downloads\Data"
    )
    language: str = "EN"

    # Comma separated set codes; STD for all Standard sets, ALL for every set
    enabled_sets: str = "STD"

    landing_page: Path = STATIC_DIR / "boostertracking.html"
    json_output: bool = True
    max_upload_bytes: int = 100 << 20


settings = Settings()
