"""Scenario loading and input validation.

Every numeric input passes through ``safe_value``: non-numeric or missing
values fall back to a default and everything else is clamped to the
field's declared range. The engine itself trusts its inputs.
"""

import json
import logging
import math
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

import yaml

from propcalc.params import InvestmentInputs, LoanInputs

logger = logging.getLogger(__name__)

# field -> (min, max)
LOAN_BOUNDS: dict[str, tuple[float, float]] = {
    "property_value": (0, 1_000_000_000),
    "deposit_pct": (0, 100),
    "interest_rate_pct": (0, 100),
    "loan_term_years": (1, 100),
}

INVESTMENT_BOUNDS: dict[str, tuple[float, float]] = {
    "council_rates": (0, 1_000_000),
    "strata_fees": (0, 1_000_000),
    "land_tax": (0, 1_000_000),
    "sinking_fund": (0, 1_000_000),
    "other_costs": (0, 1_000_000),
    "target_weekly_rent": (0, 50_000),
    "capital_growth_pct": (-100, 100),
    "inflation_pct": (-100, 100),
    "horizon_years": (1, 100),
}

_INT_FIELDS = {"loan_term_years", "horizon_years"}


@dataclass(frozen=True)
class Scenario:
    """A complete set of calculator inputs."""

    loan: LoanInputs = field(default_factory=LoanInputs)
    investment: InvestmentInputs = field(default_factory=InvestmentInputs)


def safe_value(raw: object, lo: float, hi: float, default: float) -> float:
    """Parse ``raw`` as a number clamped to [lo, hi], or return ``default``.

    The whole value must parse: trailing text such as ``"600abc"`` is
    rejected and the default used, rather than reading the leading number.
    """
    if raw is None or isinstance(raw, bool):
        return default
    try:
        val = float(raw)
    except (TypeError, ValueError):
        logger.debug("Non-numeric input %r, using default %r", raw, default)
        return default
    if math.isnan(val):
        return default
    return min(hi, max(lo, val))


def _parse_bool(raw: object, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
    return default


def _clean_section(data: dict, cls: type, bounds: dict[str, tuple[float, float]]) -> dict:
    """Validate one section's values against ``cls`` field defaults and ``bounds``."""
    defaults = {f.name: f.default for f in fields(cls)}
    cleaned = {}
    for key, raw in data.items():
        if key not in defaults:
            logger.debug("Ignoring unknown %s field '%s'", cls.__name__, key)
            continue
        default = defaults[key]
        if isinstance(default, bool):
            cleaned[key] = _parse_bool(raw, default)
            continue
        if key == "horizon_years" and raw is None:
            cleaned[key] = None
            continue
        lo, hi = bounds[key]
        fallback = default if default is not None else hi
        val = safe_value(raw, lo, hi, fallback)
        if key in _INT_FIELDS:
            val = int(round(val))
        cleaned[key] = val
    return cleaned


def dict_to_scenario(data: dict | None) -> Scenario:
    """Convert a nested dict to a validated Scenario."""
    data = data or {}
    unknown = set(data) - {"loan", "investment"}
    if unknown:
        raise ValueError(
            f"Unknown config section(s) {sorted(unknown)}. Supported: ['loan', 'investment']"
        )
    loan_data = data.get("loan") or {}
    inv_data = data.get("investment") or {}
    loan = LoanInputs(**_clean_section(loan_data, LoanInputs, LOAN_BOUNDS))
    inv = InvestmentInputs(**_clean_section(inv_data, InvestmentInputs, INVESTMENT_BOUNDS))
    return Scenario(loan=loan, investment=inv)


def scenario_to_dict(scenario: Scenario) -> dict:
    """Convert a Scenario to a serialisable dict."""
    return asdict(scenario)


def parse_config_text(text: str, suffix: str = ".yaml") -> Scenario:
    """Parse scenario text; JSON for a ``.json`` suffix, YAML otherwise."""
    if suffix == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if data is not None and not isinstance(data, dict):
        raise ValueError("Config must be a mapping with 'loan' and 'investment' sections")
    return dict_to_scenario(data)


def load_config(path: str | Path) -> Scenario:
    """Load a scenario from a YAML or JSON file."""
    path = Path(path)
    logger.debug("Loading scenario from %s", path)
    return parse_config_text(path.read_text(), suffix=path.suffix)
