"""Documentation workshop routes — checklist, live status, and finalize."""

from fastapi import APIRouter, HTTPException

from exportdesk.core.documents import ChecklistBuilder, DocumentStatusTracker, FinalizeBlockedError
from exportdesk.data.reference_tables import TARGET_MARKETS
from exportdesk.schemas.shipment import ChecklistRequest, DocumentStatusRequest

router = APIRouter(prefix="/documents", tags=["Documents"])

checklist_builder = ChecklistBuilder()
status_tracker = DocumentStatusTracker()


@router.get("/markets")
async def list_markets():
    return {"markets": TARGET_MARKETS}


@router.post("/checklist")
async def build_checklist(req: ChecklistRequest):
    """Required documents for an HS code and destination market."""
    checklist = checklist_builder.derive_checklist(req.hs_code, req.destination_market)
    return {
        "hs_code": req.hs_code,
        "destination_market": req.destination_market,
        "documents": [doc.model_dump() for doc in checklist],
    }


@router.post("/status")
async def document_statuses(req: DocumentStatusRequest):
    """Per-document status and checklist progress for the current form values."""
    checklist = checklist_builder.derive_checklist(req.hs_code, req.destination_market)
    statuses = status_tracker.resolve_checklist(checklist, req.context, set(req.filed_ids))
    summary = status_tracker.summarize(checklist, statuses)

    return {
        "statuses": {doc_id: status.value for doc_id, status in statuses.items()},
        "missing_fields": {
            doc.document_id: status_tracker.missing_fields(doc.document_id, req.context)
            for doc in checklist
        },
        "summary": summary.model_dump(),
    }


@router.post("/finalize")
async def finalize_checklist(req: DocumentStatusRequest):
    """File every Ready document once all critical documents are complete."""
    checklist = checklist_builder.derive_checklist(req.hs_code, req.destination_market)
    statuses = status_tracker.resolve_checklist(checklist, req.context, set(req.filed_ids))

    try:
        filed = status_tracker.finalize(checklist, statuses, set(req.filed_ids))
    except FinalizeBlockedError as e:
        raise HTTPException(
            status_code=409,
            detail={"message": str(e), "outstanding_critical": e.outstanding},
        )

    return {
        "filed_ids": [doc.document_id for doc in checklist if doc.document_id in filed],
        "status": "Filed",
    }
