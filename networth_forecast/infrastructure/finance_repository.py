"""SQLAlchemy-backed repository for family finance data."""

from datetime import date

from sqlalchemy import text

from networth_forecast.application.ports.database import DatabaseEnginePort
from networth_forecast.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from networth_forecast.domain.models import (
    AccountBalanceRow,
    ExchangeRateRow,
    Family,
    NetWorthSnapshotRow,
    Period,
    Series,
    TransactionEntryRow,
)
from networth_forecast.domain.services import build_net_worth_series
from networth_forecast.utils.date_utils import truncate_date
from networth_forecast.utils.decimal_utils import coerce_decimal

_INTERVALS = ("day", "week", "month", "quarter", "year")


class SqlAlchemyFinanceRepository(FinanceRepositoryPort):
    """Repository backed by SQLAlchemy for families, accounts and entries.

    Also serves historical net worth series, which are built from the
    per-bucket balance snapshots.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_family(self, family_id: str) -> Family:
        query = text(
            """
            SELECT id, name, currency
            FROM families
            WHERE id = :family_id
            LIMIT 1
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"family_id": family_id}).first()
        if not row:
            raise RuntimeError(f"Missing family: {family_id}")
        return Family(id=str(row.id), name=row.name, currency=row.currency)

    def fetch_account_balances(
        self,
        family_id: str,
    ) -> list[AccountBalanceRow]:
        query = text(
            """
            SELECT a.id AS account_id,
                   a.name AS name,
                   a.classification AS classification,
                   a.status AS status,
                   a.currency AS currency,
                   COALESCE(a.balance, 0) AS balance
            FROM accounts a
            WHERE a.family_id = :family_id
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"family_id": family_id}).all()
        balances = [
            AccountBalanceRow(
                account_id=str(row.account_id),
                name=row.name,
                classification=row.classification,
                status=row.status,
                currency=row.currency,
                balance=coerce_decimal(row.balance),
            )
            for row in rows
        ]
        return sorted(
            balances,
            key=lambda row: (row.name.lower(), row.account_id),
        )

    def fetch_net_worth_snapshots(
        self,
        family_id: str,
        start_date: date,
        end_date: date,
        interval: str,
        target_currency: str,
    ) -> list[NetWorthSnapshotRow]:
        if interval not in _INTERVALS:
            raise ValueError(f"Unsupported interval: {interval}")
        params = {
            "family_id": family_id,
            "start_date": start_date,
            "end_date": end_date,
            "interval": interval,
            "target_currency": target_currency,
        }
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(self._build_snapshots_query(), params).all()
        snapshots = [
            NetWorthSnapshotRow(
                date=row.date,
                asset_total=coerce_decimal(row.asset_total),
                liability_total=coerce_decimal(row.liability_total),
            )
            for row in rows
        ]
        return sorted(snapshots, key=lambda row: row.date)

    def fetch_net_worth_series(
        self,
        family: Family,
        period: Period,
        interval: str,
    ) -> Series:
        """Return the family's net worth per interval bucket over a period."""
        snapshots = self.fetch_net_worth_snapshots(
            family.id,
            truncate_date(period.start_date, interval),
            period.end_date,
            interval,
            family.currency,
        )
        return build_net_worth_series(
            snapshots,
            period=period,
            interval=interval,
            currency=family.currency,
        )

    def fetch_transaction_entries(
        self,
        family_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[TransactionEntryRow]:
        query = self._build_entries_query(start_date, end_date)
        params = self._build_date_params(start_date, end_date)
        params["family_id"] = family_id
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        entries = [
            TransactionEntryRow(
                entry_id=str(row.entry_id),
                date=row.date,
                name=row.name or "",
                amount=coerce_decimal(row.amount),
                currency=row.currency,
                kind=row.kind,
                excluded=bool(row.excluded),
                account_status=row.account_status,
                category_id=(
                    str(row.category_id)
                    if row.category_id is not None
                    else None
                ),
                category_name=row.category_name,
                allows_negative_expenses=bool(row.allows_negative_expenses),
            )
            for row in rows
        ]
        return sorted(entries, key=lambda row: (row.date, row.entry_id))

    def fetch_exchange_rates(
        self,
        target_currency: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[ExchangeRateRow]:
        base_sql = """
        SELECT date, from_currency, to_currency, rate
        FROM exchange_rates
        WHERE to_currency = :target_currency
        """
        if start_date:
            base_sql += " AND date >= :start_date"
        if end_date:
            base_sql += " AND date <= :end_date"
        params = self._build_date_params(start_date, end_date)
        params["target_currency"] = target_currency
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(base_sql), params).all()
        rates = [
            ExchangeRateRow(
                date=row.date,
                from_currency=row.from_currency,
                to_currency=row.to_currency,
                rate=coerce_decimal(row.rate),
            )
            for row in rows
        ]
        return sorted(rates, key=lambda row: (row.date, row.from_currency))

    @staticmethod
    def _build_date_params(
        start_date: date | None,
        end_date: date | None,
    ) -> dict[str, date]:
        params: dict[str, date] = {}
        if start_date:
            params["start_date"] = start_date
        if end_date:
            params["end_date"] = end_date
        return params

    @staticmethod
    def _build_entries_query(
        start_date: date | None,
        end_date: date | None,
    ):
        base_sql = """
        SELECT ae.id AS entry_id,
               ae.date AS date,
               ae.name AS name,
               ae.amount AS amount,
               ae.currency AS currency,
               ae.excluded AS excluded,
               t.kind AS kind,
               a.status AS account_status,
               c.id AS category_id,
               c.name AS category_name,
               COALESCE(c.allows_negative_expenses, false)
                   AS allows_negative_expenses
        FROM transactions t
        JOIN entries ae
          ON ae.entryable_id = t.id AND ae.entryable_type = 'Transaction'
        JOIN accounts a ON a.id = ae.account_id
        LEFT JOIN categories c ON c.id = t.category_id
        WHERE a.family_id = :family_id
        """
        if start_date:
            base_sql += " AND ae.date >= :start_date"
        if end_date:
            base_sql += " AND ae.date <= :end_date"
        return text(base_sql)

    @staticmethod
    def _build_snapshots_query():
        # Latest balance per account and bucket, converted at that day's rate.
        return text(
            """
            WITH bucketed AS (
                SELECT DISTINCT ON (b.account_id, date_trunc(:interval, b.date))
                       b.account_id AS account_id,
                       date_trunc(:interval, b.date) AS bucket,
                       b.date AS date,
                       b.balance * COALESCE(NULLIF(er.rate, 0), 1) AS balance,
                       a.classification AS classification
                FROM balances b
                JOIN accounts a ON a.id = b.account_id
                LEFT JOIN exchange_rates er ON (
                    er.date = b.date AND
                    er.from_currency = b.currency AND
                    er.to_currency = :target_currency
                )
                WHERE a.family_id = :family_id
                  AND a.status IN ('draft', 'active')
                  AND b.date >= :start_date
                  AND b.date <= :end_date
                ORDER BY b.account_id, date_trunc(:interval, b.date), b.date DESC
            )
            SELECT MAX(date)::date AS date,
                   COALESCE(SUM(CASE WHEN classification = 'asset'
                       THEN balance ELSE 0 END), 0) AS asset_total,
                   COALESCE(SUM(CASE WHEN classification = 'liability'
                       THEN ABS(balance) ELSE 0 END), 0) AS liability_total
            FROM bucketed
            GROUP BY bucket
            ORDER BY bucket
            """
        )


__all__ = ["SqlAlchemyFinanceRepository"]
