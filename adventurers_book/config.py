from pathlib import Path

from pydantic_settings import BaseSettings

DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    app_name: str = "Adventurer's Book API"
    database_url: str = "sqlite:///./adventurers_book.db"
    debug: bool = False
    log_level: str = "INFO"

    # Leveling curve: XP to advance from level L is base * L ** exponent
    adventurer_xp_base: int = 500
    proficiency_xp_base: int = 300
    xp_curve_exponent: int = 2

    mentor_directory_path: Path = DATA_DIR / "mentors.json"

    class Config:
        env_file = ".env"


settings = Settings()
