"""Vehicle reference cache.

Makes come from static data. Models for a (make, year) pair are fetched from
the remote catalog, cached for a fixed TTL, and replaced by static fallback
lists whenever the remote lookup fails.
"""
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable, Dict, Iterable, List, Optional, Tuple

from autoquote.core.config import settings
from autoquote.core.metrics import cache_hits, cache_misses
from autoquote.schemas.vehicle import VehicleMake, VehicleModel
from autoquote.services.vehicle_data import FALLBACK_MODELS, MAKES, PLACEHOLDER_MODELS

logger = logging.getLogger(__name__)

CACHE_NAME = "vehicle_models"

ModelFetcher = Callable[[str, int], Awaitable[List[VehicleModel]]]
Clock = Callable[[], float]

_MAKES = sorted((VehicleMake(**m) for m in MAKES), key=lambda m: m.name.casefold())


class UnknownMakeError(LookupError):
    def __init__(self, make_id: int):
        super().__init__(f"Unknown vehicle make id {make_id}")
        self.make_id = make_id


@dataclass
class CacheEntry:
    models: List[VehicleModel]
    expires_at: float


def normalize_models(models: Iterable[VehicleModel]) -> List[VehicleModel]:
    """Drop blank names, keep the first record per name, sort by name."""
    seen = set()
    unique = []
    for model in models:
        if not model.name or not model.name.strip():
            continue
        if model.name in seen:
            continue
        seen.add(model.name)
        unique.append(model)
    return sorted(unique, key=lambda m: m.name.casefold())


def fallback_models(make_name: str) -> List[VehicleModel]:
    records = FALLBACK_MODELS.get(make_name, PLACEHOLDER_MODELS)
    return normalize_models(
        VehicleModel(id=model_id, name=name, make_name=make_name)
        for model_id, name in records
    )


class VehicleCatalog:

    def __init__(
        self,
        fetch_models: ModelFetcher,
        clock: Clock = time.time,
        ttl: Optional[float] = None,
        years_back: Optional[int] = None,
    ):
        self._fetch_models = fetch_models
        self._clock = clock
        self.ttl = ttl if ttl is not None else settings.MODEL_CACHE_TTL
        self.years_back = years_back if years_back is not None else settings.VEHICLE_YEARS_BACK
        self._cache: Dict[Tuple[int, int], CacheEntry] = {}

    def current_year(self) -> int:
        return datetime.fromtimestamp(self._clock()).year

    def get_makes(self) -> List[VehicleMake]:
        return list(_MAKES)

    def get_make(self, make_id: int) -> VehicleMake:
        for make in _MAKES:
            if make.id == make_id:
                return make
        raise UnknownMakeError(make_id)

    def vehicle_years(self) -> List[int]:
        """Model years offered by the wizard, newest first."""
        year = self.current_year()
        return list(range(year, year - self.years_back - 1, -1))

    def _cached(self, key: Tuple[int, int]) -> Optional[List[VehicleModel]]:
        entry = self._cache.get(key)
        if entry is None or self._clock() >= entry.expires_at:
            return None
        return entry.models

    def _store(self, key: Tuple[int, int], models: List[VehicleModel]) -> None:
        self._cache[key] = CacheEntry(models=models, expires_at=self._clock() + self.ttl)

    async def get_models(self, make_id: int, year: Optional[int] = None) -> List[VehicleModel]:
        target_year = year if year is not None else self.current_year()
        key = (make_id, target_year)

        cached = self._cached(key)
        if cached is not None:
            cache_hits.labels(cache=CACHE_NAME).inc()
            logger.debug(f"Using cached models for make {make_id}, year {target_year}")
            return list(cached)
        cache_misses.labels(cache=CACHE_NAME).inc()

        make = self.get_make(make_id)
        logger.info(f"Fetching models for {make.name} (id {make_id}), year {target_year}")

        try:
            fetched = await self._fetch_models(make.name, target_year)
            models = normalize_models(
                m.model_copy(update={"make_name": make.name}) for m in fetched
            )
            logger.info(f"Found {len(models)} models for {make.name} {target_year}")
        except Exception as e:
            logger.warning(f"Model lookup failed for {make.name} {target_year}, using fallback: {e}")
            models = fallback_models(make.name)

        self._store(key, models)
        return list(models)
