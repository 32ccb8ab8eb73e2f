"""
Business logic for loyalty accounts.

Accounts are created explicitly and are never deleted.  The balance is
bookkeeping only: it changes through ``set_balance`` (and, when legacy
accrual is enabled, through ``credit`` on order placement).
"""

import logging
import math
import threading
from decimal import Decimal
from typing import Dict, Iterable, Optional

from ..core.errors import AlreadyExistsError, InvalidBalanceError, NotFoundError
from ..schemas.loyalty import LoyaltyAccount, LoyaltyAccountCreate

logger = logging.getLogger(__name__)


class LoyaltyService:
    """In‑memory ledger of loyalty accounts keyed by loyalty number."""

    def __init__(self, accounts: Iterable[LoyaltyAccount] = ()) -> None:
        self._lock = threading.RLock()
        self._accounts: Dict[str, LoyaltyAccount] = {}
        for account in accounts:
            self._insert(account)

    def _insert(self, account: LoyaltyAccount) -> LoyaltyAccount:
        if account.loyalty_number in self._accounts:
            raise AlreadyExistsError("Loyalty account already exists")
        self._accounts[account.loyalty_number] = account
        return account

    def _get(self, loyalty_number: str) -> LoyaltyAccount:
        account = self._accounts.get(loyalty_number)
        if account is None:
            raise NotFoundError("Loyalty account not found")
        return account

    def create(self, data: LoyaltyAccountCreate) -> LoyaltyAccount:
        """Register a new account.

        Raises ``AlreadyExistsError`` if the loyalty number is taken; the
        existing account is left as it was.
        """
        with self._lock:
            account = self._insert(
                LoyaltyAccount(name=data.name, loyalty_number=data.loyalty_number, balance=data.balance)
            )
            logger.info("Created loyalty account %s", account.loyalty_number)
            return account.model_copy()

    def get_account(self, loyalty_number: str) -> LoyaltyAccount:
        with self._lock:
            return self._get(loyalty_number).model_copy()

    def get_balance(self, loyalty_number: str) -> float:
        with self._lock:
            return self._get(loyalty_number).balance

    def set_balance(self, loyalty_number: str, balance: float) -> LoyaltyAccount:
        """Overwrite the balance of an existing account.

        The account lookup happens first, so an unknown loyalty number
        is reported as ``NotFoundError`` even when ``balance`` is also
        invalid.
        """
        with self._lock:
            account = self._get(loyalty_number)
            if not math.isfinite(balance):
                raise InvalidBalanceError("Balance must be a finite number")
            if balance < 0:
                raise InvalidBalanceError()
            account.balance = balance
            logger.info("Set balance of loyalty account %s to %s", loyalty_number, balance)
            return account.model_copy()

    def credit(self, loyalty_number: str, amount: float) -> Optional[LoyaltyAccount]:
        """Add ``amount`` to an account's balance if the account exists.

        Returns the updated account or ``None`` when no account is
        registered under ``loyalty_number``.
        """
        with self._lock:
            account = self._accounts.get(loyalty_number)
            if account is None:
                return None
            account.balance = float(Decimal(str(account.balance)) + Decimal(str(amount)))
            logger.info("Credited %s to loyalty account %s", amount, loyalty_number)
            return account.model_copy()
