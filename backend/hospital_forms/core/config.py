# hospital_forms/core/config.py
from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache
from typing import List, Literal, Optional, Union

class Settings(BaseSettings):
    # —–– Environnement
    ENVIRONMENT: Literal["development", "production"] = Field("production")
    LOG_LEVEL: str = Field("INFO")

    # —–– SMTP
    SMTP_HOST: str = Field("smtp.gmail.com")
    SMTP_PORT: int = Field(465)
    SMTP_SECURITY: Optional[Literal["ssl", "starttls", "none"]] = Field(None)
    SMTP_USER: Optional[str] = Field(None)
    SMTP_PASS: Optional[str] = Field(None)
    SMTP_FROM: Optional[str] = Field(None)
    SMTP_TIMEOUT_SECONDS: float = Field(30.0, gt=0)
    SMTP_VERIFY_ON_STARTUP: bool = Field(True)

    # —–– Notifications
    ADMIN_EMAIL: Optional[str] = Field(None)

    # —–– CORS
    CORS_ORIGINS: Union[str, List[str]] = Field(default="*")
    CORS_ALLOW_CREDENTIALS: bool = Field(False)

    # —–– Identité de l'hôpital (emails)
    HOSPITAL_NAME: str = Field("Apex Hospital")
    HOSPITAL_ADDRESS: str = Field(
        "Plot No 1 and 6, Vijapur Rd, opp. to Galaxy Panache, Yamini Nagar, "
        "Swami Vivekanand Nagar 2, Solapur, Maharashtra 413007"
    )
    HOSPITAL_PHONE: str = Field("0217 260 0603")

    # —–– Fuseau horaire
    TIME_ZONE: str = Field("Asia/Kolkata")

    class Config:
        case_sensitive = True
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def cors_list(self) -> List[str]:
        if isinstance(self.CORS_ORIGINS, list):
            return self.CORS_ORIGINS
        return [origin.strip() for origin in str(self.CORS_ORIGINS).split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def smtp_configured(self) -> bool:
        return bool(self.SMTP_USER and self.SMTP_PASS)

    def smtp_security(self) -> str:
        # 465 = SSL implicite, sinon STARTTLS
        if self.SMTP_SECURITY:
            return self.SMTP_SECURITY
        return "ssl" if self.SMTP_PORT == 465 else "starttls"


@lru_cache
def get_settings():
    return Settings()


settings = get_settings()
