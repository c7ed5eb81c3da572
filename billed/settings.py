import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from billed.models.session import Session, UserType

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="BILLED_", extra="ignore")

    store_backend: str = "memory"

    api_url: str = "http://localhost:5678"
    api_timeout: float = 10.0  # seconds

    storage_backend: str = "local"
    storage_local_path: str = "./receipts"
    storage_prefix: str = "receipts"

    # JSON as stored by the web app under the "user" key; wins over the fields below.
    user: str = ""
    user_type: str = "Employee"
    user_email: str = ""
    user_token: str = ""

    log_level: str = "INFO"
    log_json: bool = False

    def session(self) -> Session:
        if self.user:
            return Session.from_json(self.user)
        if not self.user_email:
            logger.warning(
                "BILLED_USER_EMAIL is not set, bills will be submitted without an owner email. "
                "Set BILLED_USER_EMAIL in your environment or .env file."
            )
        return Session(
            type=UserType(self.user_type),
            email=self.user_email or None,
            token=self.user_token or None,
        )


settings = Settings()
