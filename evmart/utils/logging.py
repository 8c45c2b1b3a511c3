import logging
from typing import Any, Optional

from ..schemas.auth import SessionUser

audit_logger = logging.getLogger("evmart.audit")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attaches a console handler to the ``evmart`` logger tree once."""
    root = logging.getLogger("evmart")
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def log_action(
    user: Optional[SessionUser],
    action: str,
    resource_type: str,
    resource_id: Optional[str] = None,
    details: Optional[Any] = None,
):
    """
    Utility function to record a session lifecycle event on the audit logger.
    'user' is the stored session user, or None when nobody is signed in.
    """
    try:
        audit_logger.info(
            "%s %s",
            action,
            resource_type,
            extra={
                "user_id": user.id if user else None,
                "user_email": user.email if user else None,
                "user_role": user.role_name if user else None,
                "resource_id": resource_id,
                "details": details,
            },
        )
    except Exception as e:
        # Never let audit logging break the calling flow
        logging.getLogger(__name__).error("Failed to write audit log: %s", e)
