# cctvlog/core/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Configurações globais do serviço de registro de incidentes CCTV.

    Variáveis aceitas no .env:
    - cctv_db_host, cctv_db_port, cctv_db_user, cctv_db_password, cctv_db_name
      (ou DATABASE_URL completa)
    - ALERT_SOURCES (lista JSON), DEFAULT_DEVICES_FILE
    - ADMIN_PASSWORD / ADMIN_PASSWORD_HASH, JWT_*
    - ALLOW_ANONYMOUS_DEV_MODE, LOG_LEVEL, CORS_ORIGINS
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "CCTV Downtime Log"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # ------------------------------------------------------------------
    # Banco
    # ------------------------------------------------------------------
    cctv_db_host: str = "localhost"
    cctv_db_port: int = 5432
    cctv_db_user: str = "cctv"
    cctv_db_password: str = "cctv123"
    cctv_db_name: str = "cctv_report"

    DATABASE_URL: Optional[str] = Field(
        default=None,
        alias="DATABASE_URL",
    )

    # ------------------------------------------------------------------
    # Incidentes / registro de devices
    # ------------------------------------------------------------------
    ALERT_SOURCES: List[str] = [
        "System Monitor",
        "Manual Check",
        "User Report",
        "Email Alert",
        "SMS Gateway",
    ]

    # JSON com a lista de devices "padrão" usada pelo import de defaults
    DEFAULT_DEVICES_FILE: Optional[str] = None

    # ------------------------------------------------------------------
    # Autenticação do admin (uma única credencial, sem contas de usuário)
    # ------------------------------------------------------------------
    ADMIN_PASSWORD: Optional[str] = None
    ADMIN_PASSWORD_HASH: Optional[str] = None

    JWT_SECRET_KEY: str = "change-me-in-production"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "cctvlog"
    JWT_AUDIENCE: str = "cctvlog-admin"

    # sem token => admin fictício (apenas dev/teste)
    ALLOW_ANONYMOUS_DEV_MODE: bool = False

    # ==================================================================
    # Propriedades derivadas
    # ==================================================================

    @property
    def database_url(self) -> str:
        """
        URL async do banco para o SQLAlchemy.

        Prioridade:
        1) se DATABASE_URL estiver setada no .env, usa ela
        2) senão, monta a partir de cctv_db_* e garante +asyncpg
        """
        url = self.DATABASE_URL
        if not url:
            url = (
                f"postgresql+asyncpg://"
                f"{self.cctv_db_user}:{self.cctv_db_password}"
                f"@{self.cctv_db_host}:{self.cctv_db_port}/{self.cctv_db_name}"
            )

        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)

        return url


settings = Settings()
