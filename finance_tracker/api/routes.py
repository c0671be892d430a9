"""FastAPI endpoints for the Finance Tracker API.

This module defines the routes for listing transactions with the balance,
creating a single transaction, importing a CSV file of transactions, and health
checks. Domain errors are turned into responses by the handler registered in
``finance_tracker.main``.
"""

from fastapi import APIRouter, Depends, HTTPException, UploadFile

from finance_tracker.api.dependencies import get_settings, get_store
from finance_tracker.core.models import TransactionCreate, TransactionList, TransactionOut
from finance_tracker.core.settings import Settings
from finance_tracker.core.store import BaseStore
from finance_tracker.core.utils import get_logger
from finance_tracker.services import CreateTransactionService, ImportTransactionsService, ListTransactionsService
from finance_tracker.services.file_service import save_upload_file

router = APIRouter()
logger = get_logger("finance-tracker.api")


@router.get(
    "/transactions",
    response_model=TransactionList,
    summary="List transactions and balance",
    description="Return every transaction with its category, and the income, outcome and total balance.",
)
async def list_transactions(store: BaseStore = Depends(get_store)) -> TransactionList:
    """List all transactions with the current balance."""
    return ListTransactionsService(store).execute()


@router.post(
    "/transactions",
    status_code=201,
    response_model=TransactionOut,
    summary="Create a transaction",
    description=(
        "Create one income or outcome transaction. The category is created if it does not exist yet.\n\n"
        "**Response:**\n"
        "- 201 Created: the new transaction.\n"
        "- 400 Bad Request: an outcome larger than the current total balance."
    ),
    responses={
        400: {
            "description": "Insufficient balance.",
            "content": {"application/json": {"example": {"detail": "You do not have enough balance"}}},
        },
    },
)
async def create_transaction(body: TransactionCreate, store: BaseStore = Depends(get_store)) -> TransactionOut:
    """Create a single transaction."""
    logger.info(f"Received create request: title={body.title!r}, type={body.type.value}, value={body.value}")
    transaction = CreateTransactionService(store).execute(body)
    return TransactionOut.model_validate(transaction)


@router.post(
    "/transactions/import",
    status_code=201,
    response_model=list[TransactionOut],
    summary="Import transactions from a CSV file",
    description=(
        "Upload a CSV file with a header line followed by `title,type,value,category` rows. "
        "Rows missing a title, type or value are skipped.\n\n"
        "**Response:**\n"
        "- 201 Created: the imported transactions.\n"
        "- 400 Bad Request: the file is not a CSV or a row is malformed."
    ),
    responses={
        400: {
            "description": "Only CSV files accepted, or malformed CSV.",
            "content": {"application/json": {"example": {"detail": "Only CSV files accepted"}}},
        },
    },
)
async def import_transactions(
    file: UploadFile,
    store: BaseStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> list[TransactionOut]:
    """Store the uploaded CSV and import its transactions."""
    logger.info(f"Received import request: filename={file.filename}")
    if not (file.filename or "").lower().endswith(".csv"):
        logger.warning(f"Rejected file (not CSV): {file.filename}")
        raise HTTPException(400, "Only CSV files accepted")
    path = save_upload_file(file, settings.upload_dir)
    logger.info(f"Saved upload to {path}")
    service = ImportTransactionsService(store, chunk_size=settings.import_chunk_size)
    try:
        transactions = service.execute(path)
    except Exception:
        logger.exception(f"Import of {path} failed, removing upload")
        path.unlink(missing_ok=True)
        raise
    return [TransactionOut.model_validate(t) for t in transactions]


@router.get(
    "/health",
    summary="Health check",
    description="Simple health check endpoint. Returns status ok.",
    response_description="Status ok.",
    responses={200: {"description": "API is healthy.", "content": {"application/json": {"example": {"status": "ok"}}}}},
)
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
