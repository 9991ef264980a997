"""
Advertisement request service.

Validates advertiser submissions, enforces one request per IP per rolling
window and forwards everything else to the advertisement_requests table.

The rate-limit check and the insert are two separate round trips with no
lock between them: two concurrent submissions from one IP can both pass.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional

from streamvault.core.config import settings
from streamvault.core.exceptions import (
    RateLimitError,
    StoreError,
    StreamVaultError,
    ValidationError,
)
from streamvault.core.logging import get_logger
from streamvault.db.repositories import AdvertisementRequestStore

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_inr(amount: int) -> str:
    """
    Format a rupee amount with Indian digit grouping.

    Example:
        >>> format_inr(100000000)
        '₹10,00,00,000'
    """
    digits = str(int(amount))
    if len(digits) <= 3:
        return f"₹{digits}"
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return f"₹{','.join(groups)},{tail}"


def parse_budget(value: Any) -> Decimal:
    """Convert a submitted budget (number or numeric string) to Decimal."""
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError("Budget must be a number")
    if not amount.is_finite():
        raise ValidationError("Budget must be a number")
    return amount


class AdvertisementRequestService:
    """
    Business rules for advertisement requests.

    Args:
        store: Table access for advertisement_requests
        clock: Returns the current time; injectable for tests
        budget_min: Inclusive lower budget bound
        budget_max: Inclusive upper budget bound
        rate_limit_window: One request per IP within this window
    """

    def __init__(
        self,
        store: AdvertisementRequestStore,
        clock: Clock = utc_now,
        budget_min: Optional[int] = None,
        budget_max: Optional[int] = None,
        rate_limit_window: Optional[timedelta] = None,
    ):
        self.store = store
        self.clock = clock
        self.budget_min = budget_min if budget_min is not None else settings.AD_BUDGET_MIN
        self.budget_max = budget_max if budget_max is not None else settings.AD_BUDGET_MAX
        self.rate_limit_window = rate_limit_window or timedelta(
            minutes=settings.AD_RATE_LIMIT_WINDOW_MINUTES
        )

    # ========================================
    # Queries
    # ========================================

    async def list_requests(self) -> List[Dict[str, Any]]:
        """All requests, newest first. Store failures yield an empty list."""
        try:
            return await self.store.list_all()
        except StreamVaultError as e:
            logger.error(
                "advertisement_requests_fetch_failed",
                error=e.message,
                error_type=type(e).__name__,
            )
            return []

    async def has_recent_request(self, user_ip: str, since: datetime) -> bool:
        """
        Whether ``user_ip`` submitted at or after ``since``.

        Store failures are logged and reported as False.
        """
        try:
            return await self.store.exists_since(user_ip, since)
        except StreamVaultError as e:
            logger.error(
                "advertisement_recent_check_failed",
                user_ip=user_ip,
                error=e.message,
                error_type=type(e).__name__,
            )
            return False

    # ========================================
    # Commands
    # ========================================

    def validate(self, email: Any, description: Any, budget: Any, user_ip: Any) -> Decimal:
        """
        Check a submission and return the parsed budget.

        Raises:
            ValidationError: Missing field, non-numeric or out-of-range budget
        """
        if not email or not description or not budget or not user_ip:
            raise ValidationError("Missing required fields")

        amount = parse_budget(budget)
        if amount < self.budget_min:
            raise ValidationError(f"Minimum budget is {format_inr(self.budget_min)}")
        if amount > self.budget_max:
            raise ValidationError(f"Maximum budget is {format_inr(self.budget_max)}")
        return amount

    async def create_request(
        self,
        email: Any,
        description: Any,
        budget: Any,
        user_ip: Any,
    ) -> Dict[str, Any]:
        """
        Validate, rate-limit and store a new advertisement request.

        Returns:
            The stored row

        Raises:
            ValidationError: Invalid submission
            RateLimitError: A request from ``user_ip`` exists within the window
            StoreError: The insert failed
        """
        amount = self.validate(email, description, budget, user_ip)

        since = self.clock() - self.rate_limit_window
        if await self.has_recent_request(user_ip, since):
            logger.warning(
                "advertisement_request_rate_limited",
                user_ip=user_ip,
                window_minutes=int(self.rate_limit_window.total_seconds() // 60),
            )
            raise RateLimitError(
                "You can only make one advertisement request every hour. Please try again later."
            )

        try:
            created = await self.store.insert({
                "email": email,
                "description": description,
                "budget": float(amount),
                "user_ip": user_ip,
            })
        except StreamVaultError as e:
            logger.error(
                "advertisement_request_create_failed",
                user_ip=user_ip,
                error=e.message,
                error_type=type(e).__name__,
            )
            raise StoreError("Failed to create advertisement request") from e

        logger.info(
            "advertisement_request_created",
            request_id=created.get("id"),
            user_ip=user_ip,
            budget=float(amount),
        )
        return created

    async def delete_request(self, request_id: str) -> None:
        """
        Delete a request by id.

        Raises:
            StoreError: The delete failed
        """
        try:
            await self.store.delete(request_id)
        except StreamVaultError as e:
            logger.error(
                "advertisement_request_delete_failed",
                request_id=request_id,
                error=e.message,
                error_type=type(e).__name__,
            )
            raise StoreError("Failed to delete advertisement request") from e

        logger.info("advertisement_request_deleted", request_id=request_id)
