"""GET /_health — database reachability check."""
from fastapi import APIRouter, Depends

from api.tables import get_explorer
from core.explorer import Explorer

router = APIRouter()


@router.get("/_health")
def health_check(explorer: Explorer = Depends(get_explorer)):
    db_up = explorer.db.ping()
    return {
        "response": {
            "status": "ok" if db_up else "degraded",
            "database": "up" if db_up else "down",
            "tables": len(explorer.catalog.tables),
        },
    }
