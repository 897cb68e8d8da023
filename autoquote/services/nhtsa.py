"""Client for the NHTSA vPIC vehicle catalog."""
import logging
import time
from typing import List, Optional
from urllib.parse import quote

import httpx

from autoquote.core.config import settings
from autoquote.core.metrics import vehicle_api_requests, vehicle_api_duration
from autoquote.schemas.vehicle import VehicleModel

logger = logging.getLogger(__name__)


class VehicleLookupError(Exception):
    """The remote catalog could not produce a model list."""


class NHTSAClient:

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.VEHICLE_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.VEHICLE_API_TIMEOUT
        self._transport = transport

    def models_url(self, make_name: str, year: int) -> str:
        make = quote(make_name.lower(), safe="")
        return f"{self.base_url}/vehicles/getmodelsformakeyear/make/{make}/modelyear/{year}"

    async def get_models_for_make_year(self, make_name: str, year: int) -> List[VehicleModel]:
        url = self.models_url(make_name, year)
        start_time = time.time()
        status = "error"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params={"format": "json"})

            if not 200 <= response.status_code < 300:
                raise VehicleLookupError(
                    f"Vehicle catalog returned {response.status_code} for {make_name} {year}"
                )

            models = self._parse_models(response.json(), make_name)
            status = "success"
            logger.info(f"Vehicle catalog returned {len(models)} records for {make_name} {year}")
            return models
        except httpx.TimeoutException as e:
            status = "timeout"
            raise VehicleLookupError(f"Vehicle catalog timed out for {make_name} {year}") from e
        except httpx.HTTPError as e:
            raise VehicleLookupError(f"Vehicle catalog request failed for {make_name} {year}: {e}") from e
        except ValueError as e:
            raise VehicleLookupError(f"Malformed vehicle catalog payload for {make_name} {year}: {e}") from e
        finally:
            vehicle_api_requests.labels(status=status).inc()
            vehicle_api_duration.labels(status=status).observe(time.time() - start_time)

    @staticmethod
    def _parse_models(payload, make_name: str) -> List[VehicleModel]:
        results = payload.get("Results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise ValueError("missing Results list")

        models = []
        for record in results:
            if not isinstance(record, dict):
                raise ValueError(f"unexpected record {record!r}")
            try:
                model_id = int(record["Model_ID"])
            except (KeyError, TypeError) as e:
                raise ValueError(f"record without Model_ID: {record!r}") from e
            models.append(VehicleModel(
                id=model_id,
                name=str(record.get("Model_Name") or ""),
                make_name=make_name,
            ))
        return models
