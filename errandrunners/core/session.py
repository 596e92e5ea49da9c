"""Session management: each customer session owns one cart"""

import uuid
from datetime import datetime
from typing import Optional
from dataclasses import dataclass, field

from ..models.checkout import DeliveryDetails
from ..services.cart_store import CartStore
from ..services.reminders import CartReminderScheduler


@dataclass
class CustomerSession:
    """Customer app session"""
    session_id: str
    created_at: datetime
    updated_at: datetime
    cart: CartStore = field(default_factory=CartStore)
    reminders: CartReminderScheduler = field(default_factory=CartReminderScheduler)
    delivery: Optional[DeliveryDetails] = None

    def __post_init__(self):
        self.reminders.attach(self.cart)

    def touch(self) -> None:
        self.updated_at = datetime.utcnow()

    def set_delivery(self, delivery: DeliveryDetails) -> None:
        """Remember the customer's delivery address"""
        self.delivery = delivery
        self.touch()


class SessionManager:
    """Manages customer sessions"""

    def __init__(self, reminders_enabled: bool = True, max_age_hours: int = 24):
        self.sessions: dict[str, CustomerSession] = {}
        self.reminders_enabled = reminders_enabled
        self.max_age_hours = max_age_hours

    def create_session(self) -> CustomerSession:
        """Create a new session, dropping idle ones first"""
        self.cleanup_old_sessions()
        now = datetime.utcnow()
        session = CustomerSession(
            session_id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            reminders=CartReminderScheduler(enabled=self.reminders_enabled),
        )
        self.sessions[session.session_id] = session
        return session

    def get_session(self, session_id: str) -> Optional[CustomerSession]:
        """Get session by ID"""
        return self.sessions.get(session_id)

    def get_or_create_session(self, session_id: Optional[str] = None) -> CustomerSession:
        """Get existing session or create new one"""
        if session_id and session_id in self.sessions:
            return self.sessions[session_id]
        return self.create_session()

    def delete_session(self, session_id: str) -> bool:
        """Delete a session, dropping its pending reminders"""
        session = self.sessions.pop(session_id, None)
        if not session:
            return False
        session.reminders.cancel()
        session.reminders.detach()
        return True

    def cleanup_old_sessions(self, max_age_hours: Optional[int] = None) -> int:
        """Remove sessions idle for longer than max_age_hours"""
        if max_age_hours is None:
            max_age_hours = self.max_age_hours
        now = datetime.utcnow()
        old_sessions = [
            sid for sid, session in self.sessions.items()
            if (now - session.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for sid in old_sessions:
            self.delete_session(sid)
        return len(old_sessions)
