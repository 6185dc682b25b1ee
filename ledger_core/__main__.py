"""
Run the API server.

Usage:
    python -m ledger_core
"""

import uvicorn

from ledger_core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "ledger_core.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
    )
