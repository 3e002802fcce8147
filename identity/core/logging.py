"""Structured logging configuration for security and application events."""

import logging
import sys
from typing import Any

from identity.core.config import get_settings

settings = get_settings()

_level = logging.getLevelName(settings.LOG_LEVEL.upper())
if not isinstance(_level, int):
    _level = logging.INFO

# Create logger for security events
security_logger = logging.getLogger("identity.security")
security_logger.setLevel(_level)

# Create logger for application events
app_logger = logging.getLogger("identity")
app_logger.setLevel(_level)

# Create console handler with structured format
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(_level)

formatter = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
console_handler.setFormatter(formatter)

# security_logger propagates to app_logger, so only the root of the tree gets a handler
if not app_logger.handlers:
    app_logger.addHandler(console_handler)


def mask_email(email: str | None) -> str:
    """
    Mask email address for logging (show only first 3 chars and domain).

    Args:
        email: Email address to mask.

    Returns:
        Masked email string (e.g., "tes***@example.com").
    """
    if not email or "@" not in email:
        return "***"

    local_part, domain = email.split("@", 1)

    if len(local_part) <= 3:
        masked_local = "*" * len(local_part)
    else:
        masked_local = local_part[:3] + "***"

    return f"{masked_local}@{domain}"


def log_password_compare_failure(user_id: str, email: str | None = None) -> None:
    """
    Log a failed password comparison without any password material.

    Args:
        user_id: User whose password did not match.
        email: User email (will be masked).
    """
    security_logger.warning(
        f"Password compare failed - user_id={user_id}, email={mask_email(email)}"
    )


def log_password_modified(user_id: str) -> None:
    """Log a password change."""
    security_logger.info(f"Password modified - user_id={user_id}")


def log_membership_change(
    action: str,
    user_ids: list[str],
    group_ids: list[str],
    details: dict[str, Any] | None = None,
) -> None:
    """
    Log a group membership change.

    Args:
        action: Action performed (join_group, leave_group).
        user_ids: Users affected.
        group_ids: Groups affected.
        details: Additional details (optional).
    """
    message = f"Membership change - action={action}, user_ids={user_ids}, group_ids={group_ids}"
    if details:
        message += f", details={details}"

    security_logger.info(message)


def log_user_action(
    action: str,
    target_user_id: str,
    details: dict[str, Any] | None = None,
) -> None:
    """
    Log user management action to console.

    Args:
        action: Action type (e.g., 'create_user', 'modify_password').
        target_user_id: Target user ID.
        details: Additional details (optional).
    """
    message = f"User action - action={action}, target_user_id={target_user_id}"
    if details:
        message += f", details={details}"

    security_logger.info(message)
