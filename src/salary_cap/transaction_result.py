"""
Cap Transaction Results

User-facing cap operations (signings, releases, tags, restructures,
extensions) report through ``CapTransactionResult`` instead of raising, so
callers can show the message.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class CapTransactionResult:
    """Outcome of a user-facing cap transaction."""
    success: bool
    message: str
    cap_hit: Optional[float] = None
    dead_money_current: float = 0.0
    dead_money_next: float = 0.0
    cap_savings: float = 0.0
    details: Dict[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def failure(cls, message: str, **details) -> 'CapTransactionResult':
        return cls(success=False, message=message, details=details)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'message': self.message,
            'cap_hit': self.cap_hit,
            'dead_money_current': self.dead_money_current,
            'dead_money_next': self.dead_money_next,
            'cap_savings': self.cap_savings,
            **self.details,
        }
