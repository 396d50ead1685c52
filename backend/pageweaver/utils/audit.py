import logging
from typing import Optional

logger = logging.getLogger("pageweaver.audit")


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None,
    level: int = logging.INFO,
):
    logger.log(
        level,
        "%s %s=%s %s",
        action,
        entity_type,
        entity_id if entity_id is not None else "-",
        payload or {},
    )
