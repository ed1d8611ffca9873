from fastapi import Request

from services.ledger_service import Ledger

def get_ledger(request: Request) -> Ledger:
    """Returns the ledger the hosting process attached to the application."""
    return request.app.state.ledger
