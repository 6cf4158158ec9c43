"""
Grievance status transitions
"""
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from ..database import GRIEVANCES
from ..exceptions import InvalidStatusError
from ..models.common import get_current_utc_time
from .mongo_service import MongoService

logger = logging.getLogger(__name__)

# Open is only ever set when a grievance is filed
TRANSITION_TARGETS = ("In Progress", "Resolved", "Rejected")
RESOLUTION_STATUSES = ("Resolved", "Rejected")


def build_status_update(status: Any, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Build the update document for moving a grievance to a new status

    Resolved and Rejected stamp resolvedAt; In Progress removes it.
    Any accepted target is allowed from any current status.

    Raises:
        InvalidStatusError: status is not one of TRANSITION_TARGETS
    """
    if not isinstance(status, str) or status not in TRANSITION_TARGETS:
        raise InvalidStatusError(status)

    if status in RESOLUTION_STATUSES:
        return {"$set": {"status": status, "resolvedAt": now or get_current_utc_time()}}
    return {"$set": {"status": status}, "$unset": {"resolvedAt": ""}}


class GrievanceService:

    def __init__(self, mongo: MongoService):
        self.mongo = mongo

    async def update_status(self, grievance_id: str, status: Any) -> Dict[str, Any]:
        update = build_status_update(status)
        doc = await self.mongo.update_document(GRIEVANCES, grievance_id, update)
        logger.info(f"Grievance {grievance_id} moved to {status}")
        return doc
