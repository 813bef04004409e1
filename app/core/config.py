from pydantic_settings import BaseSettings
import os


class Settings(BaseSettings):
    port: int = 3000
    host: str = "0.0.0.0"
    log_level: str = "INFO"
    environment: str = "local"
    api_prefix: str = "/api"

    # Shared secret expected verbatim in the Authorization header
    auth_token: str = "secret-token"

    # Load the three sample products on startup
    seed_products: bool = True

    @property
    def products_path(self) -> str:
        """Path prefix guarded by the authentication middleware."""
        return f"{self.api_prefix.rstrip('/')}/products"

    class Config:
        env_file = f"config/{os.getenv('ENV', 'local')}.env"
        case_sensitive = False


settings = Settings()
