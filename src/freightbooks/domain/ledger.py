"""Ledger builder.

Rolls journal lines up into per-account ledgers with running balances. The
general ledger and the subsidiary ledger of a single account share the same
grouping, ordering and accumulation code, so an account's figures are always
identical in both views.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from freightbooks.domain.entities import ZERO, JournalEntry, LedgerAccount, LedgerLine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostedLine:
    """A journal line flattened together with its entry's date and description."""

    date: date
    description: str
    debit: Decimal
    credit: Decimal
    account_name: str


def flatten_entries(entries: Iterable[JournalEntry]) -> list[PostedLine]:
    """Flatten journal entries into posted lines, preserving emission order."""
    return [
        PostedLine(
            date=entry.date,
            description=entry.description,
            debit=line.debit,
            credit=line.credit,
            account_name=line.account_name,
        )
        for entry in entries
        for line in entry.lines
    ]


def group_by_account(lines: Iterable[PostedLine]) -> dict[str, list[PostedLine]]:
    grouped: dict[str, list[PostedLine]] = defaultdict(list)
    for line in lines:
        grouped[line.account_name].append(line)
    return dict(grouped)


def roll_up_account(account_name: str, lines: Sequence[PostedLine]) -> LedgerAccount:
    """Order an account's lines by date and accumulate its running balance.

    The sort is stable, so lines sharing a date keep their emission order.
    The balance accumulates debit minus credit from zero.
    """
    running_balance = ZERO
    total_debit = ZERO
    total_credit = ZERO
    ledger_lines = []
    for line in sorted(lines, key=lambda posted: posted.date):
        running_balance += line.debit - line.credit
        total_debit += line.debit
        total_credit += line.credit
        ledger_lines.append(
            LedgerLine(
                date=line.date,
                description=line.description,
                debit=line.debit,
                credit=line.credit,
                balance=running_balance,
            )
        )

    return LedgerAccount(
        account_name=account_name,
        entries=tuple(ledger_lines),
        total_debit=total_debit,
        total_credit=total_credit,
        final_balance=running_balance,
    )


def build_ledger(entries: Iterable[JournalEntry]) -> dict[str, LedgerAccount]:
    """Build the general ledger, keyed and ordered by account name."""
    grouped = group_by_account(flatten_entries(entries))
    ledger = {name: roll_up_account(name, grouped[name]) for name in sorted(grouped)}
    logger.debug("Built ledger with %d accounts", len(ledger))
    return ledger


def build_subsidiary_ledger(entries: Iterable[JournalEntry], account_name: str) -> LedgerAccount:
    """Build the ledger of one account.

    An account with no lines yields an empty ledger with a zero balance.
    """
    grouped = group_by_account(
        line for line in flatten_entries(entries) if line.account_name == account_name
    )
    return roll_up_account(account_name, grouped.get(account_name, []))


def list_accounts(entries: Iterable[JournalEntry]) -> list[str]:
    """Names of every account that appears in the journal, sorted."""
    return sorted({line.account_name for entry in entries for line in entry.lines})


def ledger_period(entries: Iterable[JournalEntry]) -> Optional[tuple[date, date]]:
    """First and last date covered by the journal, or None when it is empty."""
    dates = [entry.date for entry in entries]
    if not dates:
        return None
    return min(dates), max(dates)
