"""Static rate tables: stamp duty brackets, LMI grid and fixed government fees.

Stamp duty and LMI are tiered lookups. Both follow a "largest key <= target"
contract implemented with a binary search over the sorted keys; the
flat-rate stamp duty override and the 80% LMI cutoff are guard clauses kept
outside the generic search.
"""

from bisect import bisect_left, bisect_right
from dataclasses import dataclass


class RateTableError(LookupError):
    """A rate table has no entry for a value it should always cover."""


@dataclass(frozen=True)
class StampDutyBracket:
    threshold: float
    base: float
    rate_pct: float


@dataclass(frozen=True)
class LmiRateRow:
    lvr_lower_bound: float
    rates: tuple[float, ...]


@dataclass(frozen=True)
class FeeSchedule:
    """Fixed government and lender fees, capitalized into the loan."""

    registration: float = 172
    transfer: float = 463
    other: float = 1_500

    @property
    def total(self) -> float:
        return self.registration + self.transfer + self.other


FEES = FeeSchedule()


# ---------------------------------------------------------------------------
# Stamp duty
# ---------------------------------------------------------------------------

# Above the ceiling the whole value is charged at a flat rate with no base.
STAMP_DUTY_CEILING = 1_455_000
STAMP_DUTY_FLAT_RATE_PCT = 4.54

STAMP_DUTY_BRACKETS: tuple[StampDutyBracket, ...] = (
    StampDutyBracket(0, 0, 1.2),
    StampDutyBracket(200_001, 2_400, 2.2),
    StampDutyBracket(300_001, 4_600, 3.4),
    StampDutyBracket(500_001, 11_400, 4.32),
    StampDutyBracket(750_001, 22_200, 5.9),
    StampDutyBracket(1_000_001, 36_950, 6.4),
)

_BRACKET_THRESHOLDS = [b.threshold for b in STAMP_DUTY_BRACKETS]


def stamp_duty_bracket_for(value: float) -> StampDutyBracket:
    """Return the bracket with the largest threshold <= value.

    The flat-rate override above ``STAMP_DUTY_CEILING`` is not part of the
    search; callers check the ceiling first.
    """
    idx = bisect_right(_BRACKET_THRESHOLDS, value) - 1
    if idx < 0:
        raise RateTableError(f"No stamp duty bracket for value {value!r}")
    return STAMP_DUTY_BRACKETS[idx]


# ---------------------------------------------------------------------------
# Lenders mortgage insurance
# ---------------------------------------------------------------------------

# No LMI at or below this LVR (percent). Not a table row.
LMI_LVR_CUTOFF = 80.0

# Loan size columns: first ceiling >= loan amount wins.
LOAN_TIER_CEILINGS: tuple[float, ...] = (300_000, 500_000, 600_000, 750_000, 1_000_000)

# LVR lower bound (percent) -> premium as a fraction of the loan, per loan tier.
LMI_RATE_TABLE: tuple[LmiRateRow, ...] = (
    LmiRateRow(80.01, (0.00475, 0.00568, 0.00904, 0.00904, 0.00913)),
    LmiRateRow(81.01, (0.00485, 0.00568, 0.00904, 0.00904, 0.00913)),
    LmiRateRow(82.01, (0.00596, 0.00699, 0.00932, 0.01090, 0.01109)),
    LmiRateRow(83.01, (0.00662, 0.00829, 0.00960, 0.01090, 0.01146)),
    LmiRateRow(84.01, (0.00727, 0.00969, 0.01165, 0.01333, 0.01407)),
    LmiRateRow(85.01, (0.00876, 0.01081, 0.01258, 0.01407, 0.01463)),
    LmiRateRow(86.01, (0.00932, 0.01146, 0.01407, 0.01631, 0.01733)),
    LmiRateRow(87.01, (0.01062, 0.01305, 0.01463, 0.01631, 0.01752)),
    LmiRateRow(88.01, (0.01295, 0.01621, 0.01948, 0.02218, 0.02395)),
    LmiRateRow(89.01, (0.01463, 0.01873, 0.02180, 0.02367, 0.02516)),
    LmiRateRow(90.01, (0.02013, 0.02618, 0.03513, 0.03783, 0.03820)),
    LmiRateRow(91.01, (0.02013, 0.02674, 0.03569, 0.03867, 0.03932)),
    LmiRateRow(92.01, (0.02330, 0.03028, 0.03802, 0.04081, 0.04156)),
    LmiRateRow(93.01, (0.02376, 0.03028, 0.03802, 0.04286, 0.04324)),
    LmiRateRow(94.01, (0.02609, 0.03345, 0.03998, 0.04613, 0.04603)),
)

_LVR_BOUNDS = [row.lvr_lower_bound for row in LMI_RATE_TABLE]


def lmi_row(lvr_pct: float) -> LmiRateRow | None:
    """Return the LMI row with the largest lower bound <= ``lvr_pct``.

    Returns None at or below the 80% cutoff, and in the gap between the
    cutoff and the first row. LVRs above the top row use the top row.
    """
    if lvr_pct <= LMI_LVR_CUTOFF:
        return None
    idx = bisect_right(_LVR_BOUNDS, lvr_pct) - 1
    if idx < 0:
        return None
    return LMI_RATE_TABLE[idx]


def lmi_column(loan_amount: float) -> int:
    """Return the loan tier index: first ceiling >= ``loan_amount``.

    Loans above the top ceiling fall back to the last column.
    """
    idx = bisect_left(LOAN_TIER_CEILINGS, loan_amount)
    return min(idx, len(LOAN_TIER_CEILINGS) - 1)


def _check_tables() -> None:
    if STAMP_DUTY_BRACKETS[0].threshold != 0:
        raise RateTableError("Stamp duty brackets must start at 0")
    if _BRACKET_THRESHOLDS != sorted(_BRACKET_THRESHOLDS):
        raise RateTableError("Stamp duty brackets must be sorted by threshold")
    if _LVR_BOUNDS != sorted(_LVR_BOUNDS):
        raise RateTableError("LMI rows must be sorted by LVR lower bound")
    for row in LMI_RATE_TABLE:
        if len(row.rates) != len(LOAN_TIER_CEILINGS):
            raise RateTableError(
                f"LMI row {row.lvr_lower_bound} has {len(row.rates)} rates, "
                f"expected {len(LOAN_TIER_CEILINGS)}"
            )


_check_tables()
