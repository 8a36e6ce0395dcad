"""Recurring payment and savings goal generators."""

import random
from datetime import date

from kakeibo.engine.months import add_months, shift_month, to_year_month
from kakeibo.generators.base import BaseGenerator
from kakeibo.models import PeriodType, RecurringPayment, SavingsGoal, TransactionType


class RecurringPaymentGenerator(BaseGenerator):
    """Generate subscriptions, bills and salaries."""

    # name -> (type, category id, amount, period type, period value)
    TEMPLATES = [
        ("家賃", TransactionType.EXPENSE, "housing", 85000, PeriodType.MONTHS, 1),
        ("電気代", TransactionType.EXPENSE, "utilities", 7000, PeriodType.MONTHS, 1),
        ("水道代", TransactionType.EXPENSE, "utilities", 4500, PeriodType.MONTHS, 2),
        ("携帯電話", TransactionType.EXPENSE, "communication", 3300, PeriodType.MONTHS, 1),
        ("動画配信", TransactionType.EXPENSE, "entertainment", 1490, PeriodType.MONTHS, 1),
        ("ジム", TransactionType.EXPENSE, "health", 7700, PeriodType.MONTHS, 1),
        ("自動車保険", TransactionType.EXPENSE, "insurance", 42000, PeriodType.MONTHS, 12),
        ("コンタクトレンズ", TransactionType.EXPENSE, "medical", 2800, PeriodType.DAYS, 14),
        ("給与", TransactionType.INCOME, "salary", 280000, PeriodType.MONTHS, 1),
    ]

    def generate(
        self,
        anchor: date,
        account_id: str | None = None,
        payment_method_id: str | None = None,
    ) -> RecurringPayment:
        """Generate a recurring payment anchored on ``anchor``.

        Roughly one in five gets an override for the month after the
        anchor month.
        """
        name, tx_type, category_id, amount, period_type, period_value = random.choice(
            self.TEMPLATES
        )

        overrides: dict[str, int] = {}
        if random.random() < 0.2:
            overrides[shift_month(to_year_month(anchor), 1)] = amount + random.randint(1, 20) * 100

        return RecurringPayment(
            id=self.new_id(),
            name=name,
            type=tx_type,
            amount=amount,
            period_type=period_type,
            period_value=period_value,
            category_id=category_id,
            account_id=account_id,
            payment_method_id=payment_method_id,
            monthly_overrides=overrides,
            start_date=anchor,
        )


class SavingsGoalGenerator(BaseGenerator):
    """Generate savings goals spanning several months."""

    GOALS = [
        ("旅行", "plane", (100000, 400000)),
        ("新しいパソコン", "laptop", (150000, 300000)),
        ("引っ越し", "home", (200000, 600000)),
        ("緊急資金", "shield", (300000, 1000000)),
    ]

    def generate(self, start: date) -> SavingsGoal:
        """Generate a goal starting in ``start``'s month, 3-18 months long."""
        name, icon, (low, high) = random.choice(self.GOALS)
        span = random.randint(3, 18)
        start_month = to_year_month(start)
        target_date = add_months(start.replace(day=1), span - 1).replace(day=28)

        excluded: set[str] = set()
        if span > 4 and random.random() < 0.5:
            excluded.add(shift_month(start_month, random.randint(1, span - 2)))

        return SavingsGoal(
            id=self.new_id(),
            name=name,
            target_amount=random.randint(low // 1000, high // 1000) * 1000,
            start_month=start_month,
            target_date=target_date,
            excluded_months=frozenset(excluded),
            icon=icon,
            color=self.color(),
        )
