# campus_order/services/location_client.py
from typing import List

from campus_order.domain.schemas import Room, University
from campus_order.services.api_client import ApiClient


class LocationClient(ApiClient):
    """Uczelnie i sale, z ktorych budowana jest lista miejsc dostawy."""

    def fetch_universities(self) -> List[University]:
        data = self.get("/universities", error_message="Failed to fetch universities")
        return [University.model_validate(u) for u in data]

    def fetch_rooms(self, university_id: str | None = None) -> List[Room]:
        data = self.get(
            "/rooms",
            params={"universityId": university_id},
            error_message="Failed to fetch rooms",
        )
        return [Room.model_validate(r) for r in data]

    def delivery_locations(self, university_id: str | None = None) -> List[str]:
        return [room.name for room in self.fetch_rooms(university_id)]
