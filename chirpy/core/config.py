from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CHIRPY_", env_file=".env", extra="ignore")

    db_path: str = Field(default="database.json", description="JSON snapshot file")
    jwt_secret: str = Field(default="", description="HS256 signing secret for access/refresh tokens")
    polka_api_key: str = Field(default="", description="API key expected on Polka webhooks")

    access_token_ttl_seconds: int = Field(default=60 * 60, gt=0)
    refresh_token_ttl_seconds: int = Field(default=60 * 24 * 60 * 60, gt=0)

    bcrypt_rounds: int = Field(default=12, ge=4, le=31, description="bcrypt cost factor")
    max_chirp_length: int = Field(default=140, gt=0)

    log_level: str = Field(default="INFO")

settings = Settings()
