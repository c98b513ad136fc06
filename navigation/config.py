import os  # lets us read environment variables (from the OS)
from functools import (
    lru_cache,  # tiny built-in cache; we use it to reuse one Settings object
)

from dotenv import load_dotenv  # loads variables from a local .env file
from pydantic import BaseModel  # Pydantic gives us a typed, validated settings class

load_dotenv()  # read .env and put those key=value pairs into environment variables


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):  # our typed container for config values
    # IANA timezone that decides what "today" is
    # change effect: shifts to-date windows and the current-month fallback range
    app_timezone: str = os.getenv("APP_TIMEZONE", "UTC")

    # the stored view range preference (a frequency code like "1M" or "last30")
    # change effect: default period used by get_view_range()
    view_range: str = os.getenv("VIEW_RANGE", "1M")

    # first day of the financial year as MM-DD, e.g. "04-06" for a UK tax year
    # change effect: moves yearly report boundaries (only with custom_fiscal_year)
    fiscal_year_start: str = os.getenv("FISCAL_YEAR_START", "01-01")

    # when false the financial year is the calendar year, whatever fiscal_year_start says
    custom_fiscal_year: bool = _env_flag("CUSTOM_FISCAL_YEAR")

    # locale handed to the label provider
    locale: str = os.getenv("LOCALE", "en_US")


@lru_cache  # make sure Settings() is created once and reused (fast + consistent)
def get_settings() -> Settings:
    return Settings()  # build from env (already loaded by load_dotenv())
