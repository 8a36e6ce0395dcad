"""Account and payment method generators."""

import random

from kakeibo.generators.base import BaseGenerator
from kakeibo.models import (
    Account,
    AccountType,
    BillingType,
    PaymentMethod,
    PaymentMethodType,
)


class AccountGenerator(BaseGenerator):
    """Generate synthetic asset accounts.

    Account types:
    - BANK: salary/checking account (most common, ~60%)
    - CASH: wallet (~25%)
    - EMONEY: prepaid e-money balance (~15%)
    """

    ACCOUNT_TYPES = list(AccountType)
    ACCOUNT_TYPE_WEIGHTS = [0.25, 0.60, 0.15]

    BANK_NAMES = ["みずほ銀行", "三菱UFJ銀行", "三井住友銀行", "ゆうちょ銀行", "楽天銀行"]
    EMONEY_NAMES = ["Suica", "PASMO", "nanaco", "WAON", "PayPay"]

    def generate(self, member_id: str = "common", order: int | None = None) -> Account:
        """Generate a single account.

        Parameters
        ----------
        member_id : str
            Household member owning the account.
        order : int | None
            Display order.

        Returns
        -------
        Account
            Generated account.
        """
        account_type = random.choices(self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1)[0]

        if account_type == AccountType.BANK:
            name = random.choice(self.BANK_NAMES)
            balance = random.randint(50, 3000) * 1000
        elif account_type == AccountType.EMONEY:
            name = random.choice(self.EMONEY_NAMES)
            balance = random.randint(0, 200) * 100
        else:
            name = "財布"
            balance = random.randint(0, 500) * 100

        return Account(
            id=self.new_id(),
            name=name,
            type=account_type,
            balance=balance,
            color=self.color(),
            member_id=member_id,
            order=order,
        )


class PaymentMethodGenerator(BaseGenerator):
    """Generate synthetic card-style payment methods."""

    CARD_NAMES = ["楽天カード", "三井住友カード", "JCBカード", "イオンカード", "dカード"]

    def generate(
        self,
        linked_account_id: str | None,
        billing_type: BillingType | None = None,
        member_id: str = "common",
    ) -> PaymentMethod:
        """Generate a payment method debiting ``linked_account_id``.

        Monthly credit cards get a realistic cycle: closing on the 5th,
        15th, 20th, 25th or month end, paid 1-2 months later.
        """
        billing_type = billing_type or random.choices(
            [BillingType.MONTHLY, BillingType.IMMEDIATE], weights=[0.8, 0.2], k=1
        )[0]

        if billing_type == BillingType.IMMEDIATE:
            return PaymentMethod(
                id=self.new_id(),
                name=f"{self.fake.last_name()}デビット",
                type=PaymentMethodType.DEBIT_CARD,
                billing_type=billing_type,
                linked_account_id=linked_account_id,
                member_id=member_id,
                color=self.color(),
            )

        closing_day = random.choice([5, 15, 20, 25, 31])
        return PaymentMethod(
            id=self.new_id(),
            name=random.choice(self.CARD_NAMES),
            type=PaymentMethodType.CREDIT_CARD,
            billing_type=billing_type,
            linked_account_id=linked_account_id,
            closing_day=closing_day,
            payment_day=random.choice([4, 10, 26, 27]),
            payment_month_offset=random.choices([1, 2], weights=[0.8, 0.2], k=1)[0],
            member_id=member_id,
            color=self.color(),
        )
