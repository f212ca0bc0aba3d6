"""
Receipt points API endpoints.

GET  /receipts/process        — list all receipts
POST /receipts/process        — submit a receipt, returns its id
GET  /receipts/{id}/points    — points awarded to one receipt
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from receipt_points.schemas import Receipt
from receipt_points.scoring import score_receipt
from receipt_points.store import ReceiptStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


# ── GET /receipts/process ────────────────────────────────────────────────
@router.get("/receipts/process", response_model=list[Receipt])
def list_receipts(store: ReceiptStore = Depends(get_store)):
    receipts = store.list()
    logger.info("Listing %d receipts", len(receipts))
    return receipts


# ── POST /receipts/process ───────────────────────────────────────────────
@router.post("/receipts/process", status_code=201)
def process_receipt(receipt: Receipt, store: ReceiptStore = Depends(get_store)) -> str:
    logger.info(
        "Receipt submitted: retailer=%s  items=%d  total=%.2f",
        receipt.retailer, len(receipt.items), receipt.total,
    )
    receipt_id = store.append(receipt)
    return f"id: {receipt_id}"


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
@router.get("/receipts/{receipt_id}/points")
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)) -> str:
    logger.info("Fetching points for receipt: %s", receipt_id)
    receipt = store.find(receipt_id)
    return f"points: {score_receipt(receipt)}"
