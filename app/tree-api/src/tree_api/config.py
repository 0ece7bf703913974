from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Repository
    repo_url: str = "https://github.com/yigitkabak/aperium-repo.git"
    repo_name: str | None = None
    clone_depth: int = 1
    clone_timeout: float = 300
    clone_prefix: str = "aperium_api_clone_"

    # Analyzed sub-paths
    modules_path: str = "modules"
    repository_path: str = "repo/packs"

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"


settings = Settings()
