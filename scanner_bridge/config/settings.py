from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "scanner_bridge"
    db_username: str = "scanner_bridge"
    db_password: str = "secret"

    http_host: str = "0.0.0.0"
    http_port: int = 5000

    naps2_path: str = r"C:\Program Files\NAPS2\NAPS2.Console.exe"
    default_profile_name: str = "Duplex ADF Scanner(K76)"
    scan_drivers: list[str] = ["wia", "twain"]
    scan_timeout_seconds: int = 300
    device_list_timeout_seconds: int = 30

    profiles_source_path: Path = Path("profiles.xml")
    naps2_config_dir: Path | None = None
    scan_temp_dir: Path | None = None

    storage_dir: Path = Path("./scans")
    pdf_engine: str = "pymupdf"
