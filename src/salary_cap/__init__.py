"""
Salary Cap System

Cap ledger for every team: contract cap hits, dead money books,
rollover, tags and contract transactions.

Core Components:
- CapCalculator: Mathematical operations for cap calculations
- CapLedger: Team cap recalculation and dead money bookkeeping
- CapValidator: Signing and compliance validation
- ContractManager: Releases, restructures and extensions
- TagManager: Franchise/transition tags and fifth-year options
"""

from .cap_calculator import CapCalculator
from .cap_ledger import CapLedger
from .cap_validator import CapValidator
from .contract_manager import ContractManager
from .tag_manager import TagManager
from .transaction_result import CapTransactionResult

__version__ = "1.0.0"

__all__ = [
    "CapCalculator",
    "CapLedger",
    "CapValidator",
    "ContractManager",
    "TagManager",
    "CapTransactionResult",
]
