"""
Local fallback catalog.

A small fixed set of Paris points used whenever the live places provider is
not configured or fails. Entries are immutable and shared; callers only ever
receive copies of the list.
"""
from typing import List, Optional, Sequence, Tuple

from domain.models import SearchResult

SAMPLE_POINTS: Tuple[SearchResult, ...] = (
    SearchResult(id=1, name="Eiffel Tower", category="landmark", lat=48.8584, lng=2.2945),
    SearchResult(id=2, name="Louvre Museum", category="museum", lat=48.8606, lng=2.3376),
    SearchResult(id=3, name="Notre-Dame Cathedral", category="historical", lat=48.853, lng=2.3499),
    SearchResult(id=4, name="Arc de Triomphe", category="landmark", lat=48.8738, lng=2.295),
    SearchResult(id=5, name="Sacré-Cœur", category="religious", lat=48.8867, lng=2.3431),
    SearchResult(id=6, name="Paris Walking Tour", category="tour", lat=48.8566, lng=2.3522),
    SearchResult(id=7, name="Montmartre Art Tour", category="tour", lat=48.8867, lng=2.3431),
    SearchResult(id=8, name="Seine River Cruise", category="tour", lat=48.8584, lng=2.2945),
    SearchResult(id=9, name="Paris Food Tour", category="tour", lat=48.8606, lng=2.3376),
    SearchResult(id=10, name="Luxembourg Gardens", category="park", lat=48.8462, lng=2.3371),
)


class LocalCatalog:
    def __init__(self, points: Optional[Sequence[SearchResult]] = None):
        self._points: Tuple[SearchResult, ...] = tuple(points if points is not None else SAMPLE_POINTS)

    def all_points(self) -> List[SearchResult]:
        return list(self._points)

    def get_point(self, point_id: int) -> Optional[SearchResult]:
        for point in self._points:
            if point.id == point_id:
                return point
        return None

    def filter(self, query: str) -> List[SearchResult]:
        """Case-insensitive substring match against name and category."""
        needle = (query or "").lower()
        return [
            point
            for point in self._points
            if needle in point.name.lower() or needle in point.category.lower()
        ]

    def __len__(self) -> int:
        return len(self._points)


_default_catalog: Optional[LocalCatalog] = None


def get_default_catalog() -> LocalCatalog:
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = LocalCatalog()
    return _default_catalog
