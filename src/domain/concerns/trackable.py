from datetime import datetime
from typing import Optional

from src.domain.base import utcnow


class TrackableMixin:
    def track_sign_in(self, ip: Optional[str], now: Optional[datetime] = None) -> None:
        self.last_sign_in_at = now or utcnow()
        self.last_sign_in_ip = ip
