from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    REQUIRE_FX_VOL_SHIFT_TYPE: bool = False
    ALLOW_DUPLICATE_LABELS: bool = False
    STRESS_CONFIG_PATH: str = ""
    MAX_UPLOAD_BYTES: int = 5_000_000
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
