from pathlib import Path

from pydantic import PrivateAttr
from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    app_name: str = "Sri Sai Financial Services"
    debug: bool = False
    log_level: str = "INFO"

    backend_url: str = "http://localhost:5000"
    admin_login_path: str = "/api/admin/login"
    session_secret: str = "dev-change-me"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Display format for submittedAt in the admin table
    date_format: str = "%d/%m/%Y"

    contact_phone: str = "+91 8660871116"
    contact_email: str = "srisai.financialservices@gmail.com"
    contact_instagram: str = "srisai_financial_services"
    contact_address: str = "Sri Sai Financial Services, Main Road, Bangalore, Karnataka"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    _backend_base: str = PrivateAttr(default="")

    def model_post_init(self, __context: object) -> None:
        object.__setattr__(self, "_backend_base", self.backend_url.rstrip("/"))

    @property
    def backend_base(self) -> str:
        return self._backend_base


settings = Settings()
