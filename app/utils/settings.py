from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

class Settings:

    zipcode_range_start: int = int(os.getenv("ZIPCODE_RANGE_START", "20170"))
    zipcode_range_end: int = int(os.getenv("ZIPCODE_RANGE_END", "20179"))

    hub_store_id: str | None = os.getenv("HUB_STORE_ID")
    hub_access_token: str | None = os.getenv("HUB_ACCESS_TOKEN")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def zipcode_range(self) -> tuple[int, int]:
        return self.zipcode_range_start, self.zipcode_range_end

    @property
    def hub_auth_enabled(self) -> bool:
        return bool(self.hub_access_token)

settings = Settings()
