"""Transaction generator for household spending."""

import random
from datetime import date, timedelta
from typing import Iterator

from kakeibo.generators.base import BaseGenerator
from kakeibo.models import Transaction, TransactionType


class TransactionGenerator(BaseGenerator):
    """Generate synthetic household transactions."""

    # category id -> (min, max) amount in yen
    EXPENSE_CATEGORIES = {
        "food": (300, 8000),
        "daily": (200, 5000),
        "transport": (150, 3000),
        "entertainment": (1000, 15000),
        "clothing": (2000, 30000),
        "medical": (500, 10000),
    }
    INCOME_CATEGORIES = {
        "refund": (100, 5000),
        "bonus": (10000, 100000),
    }
    INCOME_RATE = 0.05

    def generate(
        self,
        account_id: str,
        transaction_date: date,
        payment_method_id: str | None = None,
    ) -> Transaction:
        """Generate a single transaction.

        Parameters
        ----------
        account_id : str
            Funding account.
        transaction_date : date
            Purchase date.
        payment_method_id : str | None
            Card used, if any.

        Returns
        -------
        Transaction
            Generated transaction; always unsettled.
        """
        if random.random() < self.INCOME_RATE:
            tx_type = TransactionType.INCOME
            categories = self.INCOME_CATEGORIES
        else:
            tx_type = TransactionType.EXPENSE
            categories = self.EXPENSE_CATEGORIES

        category_id = random.choice(list(categories))
        low, high = categories[category_id]

        return Transaction(
            id=self.new_id(),
            type=tx_type,
            amount=random.randint(low, high) // 10 * 10 or 10,
            date=transaction_date,
            category_id=category_id,
            account_id=account_id,
            payment_method_id=payment_method_id,
            memo=self.fake.company() if random.random() < 0.3 else None,
        )

    def generate_between(
        self,
        account_id: str,
        start_date: date,
        end_date: date,
        count: int,
        payment_method_id: str | None = None,
    ) -> Iterator[Transaction]:
        """Generate ``count`` transactions dated within ``[start_date, end_date]``."""
        span = (end_date - start_date).days
        for _ in range(count):
            day = start_date + timedelta(days=random.randint(0, max(span, 0)))
            yield self.generate(account_id, day, payment_method_id)
