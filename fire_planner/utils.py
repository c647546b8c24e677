import re
import sys
from typing import Optional

from loguru import logger

from fire_planner.core.rates import DEFAULT_CURRENCY_PREFIX, format_currency
from fire_planner.schemas.kpis import FiniteRunway, KPISnapshot
from fire_planner.schemas.profile import FinancialProfile
from fire_planner.schemas.projection import ProjectionSummary

STDERR_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_RATE_FIELDS = ("inflationRate", "realReturnRate", "safeWithdrawalRate")
_MONEY_FIELDS = ("currentNetWorth", "monthlyContribution", "monthlyLivingCost")


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, format=STDERR_FORMAT, level=level, colorize=True)
    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            level=level,
            rotation="10 MB",
        )


def _label(key: str) -> str:
    """currentNetWorth -> Current Net Worth"""
    return re.sub(r"(?<!^)(?=[A-Z])", " ", key).title()


def log_profile(profile: FinancialProfile, prefix: str = DEFAULT_CURRENCY_PREFIX) -> None:
    """Logs the input parameters of a profile."""
    logger.info("--- Financial Profile ---")
    for key, value in profile.model_dump().items():
        if key in _RATE_FIELDS:
            logger.info(f"{_label(key)}: {value:.2f}%")
        elif key in _MONEY_FIELDS:
            logger.info(f"{_label(key)}: {format_currency(value, prefix)}")
        else:
            logger.info(f"{_label(key)}: {value}")
    logger.info("--- End of Financial Profile ---")


def log_results(
    kpis: KPISnapshot,
    summary: ProjectionSummary,
    prefix: str = DEFAULT_CURRENCY_PREFIX,
) -> None:
    """Logs the headline KPI and projection figures."""
    if isinstance(kpis.runwayYears, FiniteRunway):
        runway = f"{kpis.runwayYears.years} years"
    else:
        runway = "unbounded"
    logger.info(
        f"FIRE number {format_currency(kpis.fireNumber, prefix)}, "
        f"gap {format_currency(kpis.wealthGap, prefix)}, runway {runway}"
    )
    if summary.depletionAge is not None:
        logger.warning(f"Money runs out at age {summary.depletionAge}")
    elif summary.finalBalance is not None:
        logger.info(f"Final balance {format_currency(summary.finalBalance, prefix)}")
