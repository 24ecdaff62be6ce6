"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from networth_forecast.domain.constants import ASSET, LIABILITY


def validate_balance_sign(
    classification: str,
    balance: Decimal,
    account_name: str,
    logger: Logger,
) -> None:
    """Warn when balances violate expected sign conventions.

    Both assets and liabilities are stored as positive amounts; a negative
    balance usually means a mis-recorded account.

    Args:
        classification: ``asset`` or ``liability``.
        balance: Raw balance amount.
        account_name: Account name used in the warning.
        logger: Logger used for warnings.
    """
    if classification == ASSET and balance < 0:
        logger.warning(
            f"Asset balance is negative for account={account_name}: {balance}"
        )
    if classification == LIABILITY and balance < 0:
        logger.warning(
            f"Liability balance is negative for account={account_name}: {balance}"
        )


__all__ = ["validate_balance_sign"]
