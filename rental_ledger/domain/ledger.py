"""Ledger generation - debit/credit actions per party for a booking or a modification delta"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from rental_ledger.domain.models import Direction, LedgerAction, Party, PricingBreakdown


@dataclass(frozen=True)
class AllocationRule:
    """One row of the allocation table: who, base direction, amount formula"""

    party: Party
    direction: Direction
    amount: Callable[[PricingBreakdown], int]


# Output order follows this table
ALLOCATION_RULES: Tuple[AllocationRule, ...] = (
    AllocationRule(Party.DRIVER, Direction.DEBIT, lambda b: b.price_with_options),
    AllocationRule(Party.OWNER, Direction.CREDIT, lambda b: b.total_price - b.commission),
    AllocationRule(Party.INSURANCE, Direction.CREDIT, lambda b: b.insurance_fee),
    AllocationRule(Party.ASSISTANCE, Direction.CREDIT, lambda b: b.assistance_fee),
    AllocationRule(
        Party.PLATFORM,
        Direction.CREDIT,
        lambda b: b.platform_fee + b.deductible_reduction_fee,
    ),
)


def normalize(direction: Direction, raw_amount: int) -> Tuple[Direction, int]:
    """Negative amounts flip the direction so the emitted amount is never negative"""
    if raw_amount < 0:
        return direction.opposite, -raw_amount
    return direction, raw_amount


def generate_actions(extract: Callable[[AllocationRule], int]) -> List[LedgerAction]:
    """Apply `extract` to every allocation rule and normalize the result"""
    actions = []
    for rule in ALLOCATION_RULES:
        direction, amount = normalize(rule.direction, extract(rule))
        actions.append(LedgerAction(party=rule.party, direction=direction, amount=amount))
    return actions


def actions_for_booking(breakdown: PricingBreakdown) -> List[LedgerAction]:
    """Ledger for a single priced booking"""
    return generate_actions(lambda rule: rule.amount(breakdown))


def actions_for_modification(
    original: PricingBreakdown, modified: PricingBreakdown
) -> List[LedgerAction]:
    """
    Ledger delta between an original and a modified booking.

    The difference is taken on raw amounts, before normalization: a platform
    share going from -50 to -80 is a 30 debit, not a 30 credit.
    """
    return generate_actions(lambda rule: rule.amount(modified) - rule.amount(original))


def reversed_parties(breakdown: PricingBreakdown) -> List[Party]:
    """Parties whose raw per-booking amount is negative (direction will be flipped)"""
    return [rule.party for rule in ALLOCATION_RULES if rule.amount(breakdown) < 0]


def ledger_balance(actions: List[LedgerAction]) -> int:
    """Debit total minus credit total; zero for every generated ledger"""
    debits = sum(a.amount for a in actions if a.direction is Direction.DEBIT)
    credits = sum(a.amount for a in actions if a.direction is Direction.CREDIT)
    return debits - credits
