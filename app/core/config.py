from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings loaded in from env vars"""
    model_config = SettingsConfigDict(case_sensitive=False, env_file='.env',extra="ignore")

    frontend_url: str = "http://localhost:5173"

    # key is appended directly, so the url must end with "?key="
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent?key="
    gemini_api_key: str = ""
    gemini_timeout: float = 60.0

    app_name: str = "Email Writer API"
    debug: bool = False

settings = Settings()
