import os
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel
from sqlalchemy.engine import URL

load_dotenv()  # load variables from .env


def env(name: str, default: str) -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v


class Settings(BaseModel):
    db_host: str = "localhost"
    db_user: str = "root"
    db_password: str = "asd123"
    db_name: str = "test_db"
    database_url: Optional[str] = None
    db_echo: bool = True
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            db_host=env("DB_HOST", "localhost"),
            db_user=env("DB_USER", "root"),
            db_password=env("DB_PASSWORD", "asd123"),
            db_name=env("DB_NAME", "test_db"),
            database_url=os.getenv("DATABASE_URL") or None,
            db_echo=env("DB_ECHO", "true"),
            port=env("PORT", "3000"),
            log_level=env("LOG_LEVEL", "INFO").upper(),
        )

    def sqlalchemy_url(self) -> Union[str, URL]:
        """DATABASE_URL wins; otherwise a MySQL URL is built from the DB_* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "mysql+pymysql",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            database=self.db_name,
        )
