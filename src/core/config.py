from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    app_name: str = "toulouse-activities"
    app_env: str = "dev"
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    mysql_host: str = "127.0.0.1"
    mysql_port: int = 3306
    mysql_user: str = "root"
    mysql_password: str = ""
    mysql_db: str = "toulouse_activities"
    database_url: str | None = None

    log_level: str = "INFO"

    site_name: str = "Activités Toulouse"
    base_url: str = "https://activityaround.vercel.app"
    sitemap_revalidate_seconds: int = 3600

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
    )

    @property
    def mysql_host_resolved(self) -> str:
        host = (self.mysql_host or "").strip()
        if host.lower() in {"localhost", "::1", "[::1]"}:
            return "127.0.0.1"
        return host

    @property
    def mysql_dsn(self) -> str:
        return (
            f"mysql+pymysql://{self.mysql_user}:{self.mysql_password}"
            f"@{self.mysql_host_resolved}:{self.mysql_port}/{self.mysql_db}"
        )

    @property
    def sqlalchemy_url(self) -> str:
        url = (self.database_url or "").strip()
        return url or self.mysql_dsn

    @property
    def public_base_url(self) -> str:
        return self.base_url.strip().rstrip("/")


settings = Settings()
