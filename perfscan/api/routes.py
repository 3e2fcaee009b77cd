"""
API route handlers for the performance extraction service
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from fastapi.concurrency import run_in_threadpool

from ..helpers.utils import validate_image_file
from ..helpers.storage import StorageManager
from ..models import PerformanceEntry, PerformanceRecord
from ..ocr.exceptions import ExtractionError
from ..ocr.pipeline import PerformancePipeline
from ..performance import to_int_or_zero, to_float_or_zero, to_optional_int, to_performance_entry
from .schemas import BulkPerformanceIn, ManualPerformanceIn

router = APIRouter()
logger = logging.getLogger(__name__)


def get_pipeline(request: Request) -> PerformancePipeline:
    return request.app.state.pipeline


def get_storage(request: Request) -> StorageManager:
    return request.app.state.storage


@router.get("/healthz")
async def health_check():
    """Health check endpoint"""
    return {"ok": True}


@router.post("/api/ocr/extract")
async def extract_performance(
    file: UploadFile = File(...),
    pipeline: PerformancePipeline = Depends(get_pipeline),
):
    """OCR a results screenshot and return the parsed rows"""
    validate_image_file(file)
    contents = await file.read()

    def log_progress(percent: float) -> None:
        logger.debug(f"   OCR progress for {file.filename}: {percent:.0f}%")

    try:
        records = await run_in_threadpool(pipeline.process_screenshot, contents, log_progress)
    except ExtractionError as e:
        logger.error(f"❌ API: OCR failed for {file.filename}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"❌ API: Exception processing {file.filename}: {type(e).__name__}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error: {str(e)}")

    logger.info(f"📤 API: Returning {len(records)} records for {file.filename}")
    return {
        "records": [r.to_dict() for r in records],
        "total_records": len(records),
    }


@router.post("/api/performances/bulk")
async def add_ocr_performances(
    body: BulkPerformanceIn,
    storage: StorageManager = Depends(get_storage),
):
    """Store a reviewed list of OCR rows, one slot per row"""
    if not body.team_id or not body.records:
        raise HTTPException(status_code=400, detail="No data to submit or no team assigned")

    entries = [
        to_performance_entry(
            PerformanceRecord(**r.model_dump()),
            team_id=body.team_id,
            player_id=body.player_id,
            match_number=body.match_number,
            slot=index + 1,
            map_name=body.map,
            added_by=body.added_by,
        )
        for index, r in enumerate(body.records)
    ]
    storage.store_performances(entries)
    logger.info(f"Stored {len(entries)} OCR performances for team {body.team_id}")
    return {
        "performances": [e.to_dict() for e in entries],
        "total_performances": len(entries),
    }


@router.post("/api/performances")
async def add_performance(
    body: ManualPerformanceIn,
    storage: StorageManager = Depends(get_storage),
):
    """Store a manually entered performance row"""
    if not body.team_id:
        raise HTTPException(status_code=400, detail="You must be assigned to a team")

    entry = PerformanceEntry(
        team_id=body.team_id,
        player_id=body.player_id,
        match_number=to_int_or_zero(body.match_number),
        slot=to_int_or_zero(body.slot),
        map=body.map,
        placement=to_optional_int(body.placement),
        kills=to_int_or_zero(body.kills),
        assists=to_int_or_zero(body.assists),
        damage=to_float_or_zero(body.damage),
        survival_time=to_float_or_zero(body.survival_time),
        added_by=body.added_by,
    )
    storage.store_performance(entry)
    return entry.to_dict()


@router.get("/api/performances")
async def list_performances(
    team_id: Optional[str] = None,
    match_number: Optional[int] = None,
    storage: StorageManager = Depends(get_storage),
):
    entries = storage.list_performances(team_id=team_id, match_number=match_number)
    return {
        "performances": [e.to_dict() for e in entries],
        "total_performances": len(entries),
    }


@router.get("/api/performances/{performance_id}")
async def get_performance(
    performance_id: str,
    storage: StorageManager = Depends(get_storage),
):
    try:
        return storage.get_performance(performance_id).to_dict()
    except KeyError:
        raise HTTPException(status_code=404, detail="Performance not found")
