"""Household scenario for a complete month-by-month finance snapshot."""

import logging
import random
from datetime import date, timedelta

from kakeibo.config import ScenarioConfig
from kakeibo.generators.household import (
    AccountGenerator,
    PaymentMethodGenerator,
    RecurringPaymentGenerator,
    SavingsGoalGenerator,
    TransactionGenerator,
)
from kakeibo.models import AccountType, BillingType
from kakeibo.store.household import HouseholdDataStore

logger = logging.getLogger(__name__)


class HouseholdScenario:
    """Generate a household with accounts, cards, spending and obligations.

    This scenario creates:
    - Asset accounts owned by household members
    - Monthly credit cards (and the odd debit card) debiting bank accounts
    - Card purchase history over the last ``history_days`` days
    - Recurring bills and salaries, charged to cards or accounts
    - Savings goals starting this month
    """

    MEMBERS = ["common", "me", "partner"]

    def __init__(
        self,
        config: ScenarioConfig | None = None,
        today: date | None = None,
        seed: int | None = None,
        locale: str = "ja_JP",
    ) -> None:
        """Initialize household scenario.

        Parameters
        ----------
        config : ScenarioConfig | None
            Record counts (defaults to ``ScenarioConfig()``).
        today : date | None
            Reference date the history ends on (default: today).
        seed : int | None
            Random seed for reproducibility.
        locale : str
            Faker locale for names and memos.
        """
        self.config = config or ScenarioConfig()
        self.today = today or date.today()
        self.seed = seed

        if seed is not None:
            random.seed(seed)

        self.store = HouseholdDataStore()
        self._account_gen = AccountGenerator(seed=seed, locale=locale)
        self._payment_method_gen = PaymentMethodGenerator(seed=seed, locale=locale)
        self._transaction_gen = TransactionGenerator(seed=seed, locale=locale)
        self._recurring_gen = RecurringPaymentGenerator(seed=seed, locale=locale)
        self._savings_gen = SavingsGoalGenerator(seed=seed, locale=locale)

    def generate(self) -> HouseholdDataStore:
        """Generate all data for the household scenario.

        Returns
        -------
        HouseholdDataStore
            Store containing all generated data.
        """
        logger.info(
            "Starting household scenario %r: %d accounts, %d cards",
            self.config.name,
            self.config.num_accounts,
            self.config.num_cards,
        )

        self._generate_accounts()
        self._generate_payment_methods()
        self._generate_card_history()
        self._generate_recurring_payments()
        self._generate_savings_goals()

        logger.info(
            "Generated household: %d accounts, %d payment_methods, "
            "%d transactions, %d recurring_payments, %d savings_goals",
            *self.store.summary().values(),
        )

        return self.store

    def _generate_accounts(self) -> None:
        for i in range(max(self.config.num_accounts, 1)):
            account = self._account_gen.generate(member_id=random.choice(self.MEMBERS), order=i)
            self.store.add_account(account)

    def _generate_payment_methods(self) -> None:
        accounts = self.store.accounts.get_all()
        banks = [a for a in accounts if a.type == AccountType.BANK] or accounts

        for i in range(self.config.num_cards):
            account = random.choice(banks)
            # first card is always a monthly credit card
            billing_type = BillingType.MONTHLY if i == 0 else None
            pm = self._payment_method_gen.generate(
                account.id, billing_type=billing_type, member_id=account.member_id
            )
            self.store.add_payment_method(pm)

    def _generate_card_history(self) -> None:
        start = self.today - timedelta(days=self.config.history_days)
        for pm in self.store.payment_methods.get_all():
            for tx in self._transaction_gen.generate_between(
                pm.linked_account_id,
                start,
                self.today,
                self.config.transactions_per_card,
                payment_method_id=pm.id,
            ):
                self.store.add_transaction(tx)

    def _generate_recurring_payments(self) -> None:
        accounts = self.store.accounts.get_all()
        cards = self.store.payment_methods.get_all()

        for _ in range(self.config.num_recurring):
            anchor = self.today - timedelta(days=random.randint(0, self.config.history_days))
            if cards and random.random() < 0.5:
                pm = random.choice(cards)
                rp = self._recurring_gen.generate(
                    anchor, account_id=pm.linked_account_id, payment_method_id=pm.id
                )
            else:
                rp = self._recurring_gen.generate(anchor, account_id=random.choice(accounts).id)
            self.store.add_recurring_payment(rp)

    def _generate_savings_goals(self) -> None:
        for _ in range(self.config.num_savings_goals):
            self.store.add_savings_goal(self._savings_gen.generate(self.today))
