from fastapi import APIRouter, HTTPException, Depends, Request
from fastapi.responses import JSONResponse
from starlette import status

from core.dependencies import get_ledger
from services.ledger_service import Ledger
from utils.logger import logger

router = APIRouter()

@router.get("/expenses/{date}")
async def get_expenses_on(
    date: str,
    ledger: Ledger = Depends(get_ledger)
):
    """Get all expenses recorded on a date."""
    try:
        return list(ledger.expenses_on(date))
        
    except Exception as e:
        logger.error(f"Get expenses error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

@router.post("/expenses")
async def record_expense(
    request: Request,
    ledger: Ledger = Depends(get_ledger)
):
    """Record a new expense."""
    try:
        expense = await request.json()
    except ValueError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Request body must be valid JSON"}
        )
    
    if not isinstance(expense, dict):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Expense must be a JSON object"}
        )
    
    try:
        result = ledger.record(expense)
        
        if not result.success:
            logger.warning(f"Expense rejected: {result.error_message}")
            return JSONResponse(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                content={"error": result.error_message}
            )
        
        logger.info(f"Created expense: {result.expense_id}")
        return {"expense_id": result.expense_id}
        
    except Exception as e:
        logger.error(f"Record expense error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
