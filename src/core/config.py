from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    app_name: str = Field("cashflow-invoice-backend", alias="APP_NAME")
    app_env: str = Field("dev", alias="APP_ENV")

    # LLM (optional) - OpenAI-compatible chat completions endpoint
    llm_base_url: str | None = Field(default=None, alias="LLM_BASE_URL")
    llm_api_key: str | None = Field(default=None, alias="LLM_API_KEY")
    llm_deployment: str | None = Field(default=None, alias="LLM_DEPLOYMENT")
    llm_timeout_seconds: float = Field(30.0, alias="LLM_TIMEOUT_SECONDS")

    # Invoice storage
    database_path: str = Field("data/cashflow.sqlite", alias="DATABASE_PATH")
    seed_demo_data: bool = Field(True, alias="SEED_DEMO_DATA")

    # Uploaded files are kept here after processing
    upload_dir: str = Field("uploads", alias="UPLOAD_DIR")

    # CORS allowed origins (comma-separated list for production deployment)
    cors_origins: str = Field("http://localhost:3000,http://127.0.0.1:3000", alias="CORS_ORIGINS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

settings = Settings()
