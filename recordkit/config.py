import os
from pydantic import BaseModel


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in ("0", "false", "no", "off")


class Settings(BaseModel):
    DATA_DIR: str = os.getenv("RECORDKIT_DATA_DIR", ".")
    LOG_LEVEL: str = os.getenv("RECORDKIT_LOG_LEVEL", "WARNING")
    ATOMIC_SAVE: bool = _env_flag("RECORDKIT_ATOMIC_SAVE", "1")
    TICK_INTERVAL: float = float(os.getenv("RECORDKIT_TICK_INTERVAL", "1.0"))

settings = Settings()
