"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

from bizdesk.domain.constants import REVENUE_RULE_HALF_OF_COST, REVENUE_RULES
from bizdesk.infrastructure.logging.logger import get_app_logger
from bizdesk.utils.utils import get_project_root

BACKEND_ENV = "BIZDESK_STORE_BACKEND"
JSON_PATH_ENV = "BIZDESK_JSON_PATH"
REVENUE_RULE_ENV = "BIZDESK_REVENUE_RULE"
CASCADE_ENV = "BIZDESK_CASCADE_CLIENT_ORDERS"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class BusinessDeskSettings:
    """Settings for the record store and reporting policy.

    Attributes:
        backend: Store identifier (memory, json, or sqlalchemy).
        json_path: File used by the json backend.
        revenue_rule: Revenue recognition rule applied by every report.
        cascade_client_orders: Whether deleting a client deletes its orders.
    """

    backend: str = "memory"
    json_path: Path | None = None
    revenue_rule: str = REVENUE_RULE_HALF_OF_COST
    cascade_client_orders: bool = True

    @classmethod
    def from_env(cls) -> "BusinessDeskSettings":
        """Build settings from environment variables.

        Returns:
            BusinessDeskSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        backend = os.getenv(BACKEND_ENV, "memory").strip().lower()
        raw_path = os.getenv(JSON_PATH_ENV)
        if raw_path:
            json_path = Path(raw_path).expanduser().resolve()
        else:
            json_path = get_project_root() / "data" / "bizdesk.json"
        revenue_rule = cls._revenue_rule(
            os.getenv(REVENUE_RULE_ENV, REVENUE_RULE_HALF_OF_COST),
            logger=logger,
        )
        cascade = (
            os.getenv(CASCADE_ENV, "true").strip().lower() not in _FALSE_VALUES
        )
        return cls(
            backend=backend,
            json_path=json_path,
            revenue_rule=revenue_rule,
            cascade_client_orders=cascade,
        )

    @staticmethod
    def _revenue_rule(raw_rule: str, logger) -> str:
        """Normalize the revenue rule, falling back to the default.

        Args:
            raw_rule: Raw rule name from the environment.
            logger: Logger used for warnings.

        Returns:
            str: A supported revenue rule name.
        """
        rule = raw_rule.strip().lower()
        if rule in REVENUE_RULES:
            return rule
        logger.warning(
            f"Unknown revenue rule '{raw_rule}'. "
            f"Falling back to {REVENUE_RULE_HALF_OF_COST}."
        )
        return REVENUE_RULE_HALF_OF_COST


__all__ = ["BusinessDeskSettings"]
