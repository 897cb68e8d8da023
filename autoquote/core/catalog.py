import logging
from typing import Optional

from autoquote.services.nhtsa import NHTSAClient
from autoquote.services.vehicles import VehicleCatalog

logger = logging.getLogger(__name__)

catalog: Optional[VehicleCatalog] = None

def init_vehicle_catalog() -> VehicleCatalog:
    global catalog
    client = NHTSAClient()
    catalog = VehicleCatalog(fetch_models=client.get_models_for_make_year)
    logger.info(f"Vehicle catalog ready (remote: {client.base_url}, ttl: {catalog.ttl}s)")
    return catalog

def close_vehicle_catalog():
    global catalog
    catalog = None

def get_vehicle_catalog() -> VehicleCatalog:
    global catalog
    if catalog is None:
        raise RuntimeError("Vehicle catalog not initialized. Call init_vehicle_catalog() first.")
    return catalog
