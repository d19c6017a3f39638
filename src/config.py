from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "D2C Store"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./d2cstore.db"

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    api_base_url: Optional[str] = None
    api_timeout: float = 10.0

    cors_origins: List[str] = ["*"]

    product_fetch_limit: int = 500
    related_products_limit: int = 5
    category_rail_size: int = 10
    category_grid_size: int = 12

    user_id_file: str = ".d2cstore_user_id"
    user_id_cookie: str = "user_id"

    @property
    def resolved_api_base_url(self) -> str:
        if self.api_base_url:
            return self.api_base_url.rstrip("/")
        return f"http://localhost:{self.api_port}"


settings = Settings()
