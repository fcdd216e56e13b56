import os
import requests
from typing import Any, Dict, List, Optional


class ApiClient:
    def __init__(self, base_url: Optional[str] = None, timeout: float = 30.0) -> None:
        self.base_url = base_url or os.environ.get("API_BASE", "http://localhost:8000")
        self.timeout = timeout

    def _post(self, path: str, json: Dict[str, Any] | None = None, params: Dict[str, Any] | None = None) -> Dict[str, Any]:
        r = requests.post(f"{self.base_url}{path}", json=json, params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def _get(self, path: str, params: Dict[str, Any] | None = None) -> Dict[str, Any]:
        r = requests.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Platforms
    def schedule(self, trains: List[Dict[str, Any]], platforms: Optional[int] = None) -> Dict[str, Any]:
        body: Dict[str, Any] = {"trains": trains}
        if platforms is not None:
            body["platforms"] = int(platforms)
        return self._post("/schedule", json=body)

    # Deadlock
    def detect_deadlock(self, trains: List[Dict[str, Any]]) -> Dict[str, Any]:
        return self._post("/deadlock/detect", json={"trains": trains})

    def resolve_deadlock(self, trains: List[Dict[str, Any]], delay: Optional[int] = None) -> Dict[str, Any]:
        body: Dict[str, Any] = {"trains": trains}
        if delay is not None:
            body["delay"] = int(delay)
        return self._post("/deadlock/resolve", json=body)

    # Routing
    def distances(self, stations: int, edges: List[Dict[str, int]], source: int) -> Dict[str, Any]:
        return self._post("/routes/distances", json={"stations": stations, "edges": edges, "source": source})

    # Reference data
    def timetable(self) -> Dict[str, Any]:
        return self._get("/timetable")

    def fare(self, train_id: int, train_class: str = "Second") -> Dict[str, Any]:
        return self._get("/fare", params={"train_id": train_id, "train_class": train_class})
