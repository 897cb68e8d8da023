"""Vehicle reference endpoints backing the wizard's vehicle step"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from autoquote.core.catalog import get_vehicle_catalog
from autoquote.schemas.vehicle import MakesOut, ModelsOut, YearsOut
from autoquote.services.vehicles import UnknownMakeError, VehicleCatalog

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("/makes", response_model=MakesOut)
async def list_makes(catalog: VehicleCatalog = Depends(get_vehicle_catalog)):
    return MakesOut(makes=catalog.get_makes())


@router.get("/models", response_model=ModelsOut)
async def list_models(
    make_id: int = Query(...),
    year: Optional[int] = Query(None, ge=1900, le=2100),
    catalog: VehicleCatalog = Depends(get_vehicle_catalog),
):
    try:
        models = await catalog.get_models(make_id, year)
    except UnknownMakeError as e:
        logger.warning(f"Model lookup for unknown make: {e}")
        raise HTTPException(status_code=404, detail=f"Vehicle make with id {make_id} not found")
    return ModelsOut(models=models)


@router.get("/years", response_model=YearsOut)
async def list_years(catalog: VehicleCatalog = Depends(get_vehicle_catalog)):
    return YearsOut(years=catalog.vehicle_years())
