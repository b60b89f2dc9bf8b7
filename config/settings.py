import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

# Always load .env from the project folder
load_dotenv(dotenv_path=os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"))


@dataclass
class Settings:
    port: int = 3000
    db_host: str = "db"
    db_port: int = 5432
    db_name: str = "appdb"
    db_user: str = "appuser"
    db_password: str = "apppass"
    db_pool_size: int = 10
    database_url: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def sqlalchemy_url(self) -> str:
        """DATABASE_URL wins over the individual DB_* parts."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )


def load_settings() -> Settings:
    """Read configuration from the environment."""
    origins = os.getenv("CORS_ORIGINS", "*")

    return Settings(
        port=int(os.getenv("PORT", "3000")),
        db_host=os.getenv("DB_HOST", "db"),
        db_port=int(os.getenv("DB_PORT", "5432")),
        db_name=os.getenv("DB_NAME", "appdb"),
        db_user=os.getenv("DB_USER", "appuser"),
        db_password=os.getenv("DB_PASSWORD", "apppass"),
        db_pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
        database_url=os.getenv("DATABASE_URL") or None,
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
