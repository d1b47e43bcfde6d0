"""In-memory route history — which option a user picked and what it saved."""

import logging
import uuid
from datetime import datetime, timezone

from ecovision.schemas.route import RouteLogCreate, RouteLogResponse

logger = logging.getLogger(__name__)


class RouteLogStore:
    """Per-user route log, held for the life of the process."""

    def __init__(self):
        self._logs: dict[str, list[RouteLogResponse]] = {}

    async def get_route_logs(self, uid: str) -> list[RouteLogResponse]:
        return list(self._logs.get(uid, []))

    async def add_route_log(self, log: RouteLogCreate) -> RouteLogResponse:
        entry = RouteLogResponse(
            id=str(uuid.uuid4()),
            timestamp=datetime.now(timezone.utc),
            **log.model_dump(),
        )
        self._logs.setdefault(log.uid, []).append(entry)
        logger.info(f"Route log added for {log.uid}: {log.picked_route} ({log.saved_co2_kg} kg CO₂ saved)")
        return entry


route_log_store = RouteLogStore()
