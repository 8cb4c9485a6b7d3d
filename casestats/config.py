from dataclasses import dataclass
import os

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Settings:
    app_name: str
    log_level: str
    input_encoding: str


def get_settings() -> Settings:
    return Settings(
        app_name=os.getenv("APP_NAME", "casestats"),
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
        input_encoding=os.getenv("INPUT_ENCODING", "utf-8"),
    )
