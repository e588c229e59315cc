"""Generic CRUD routes: /, /{table} and /{table}/{id}."""
from typing import Optional
from fastapi import APIRouter, Depends, Request

from config import settings
from core.errors import NotFound
from core.explorer import Explorer
from core.validator import INT64_MAX

router = APIRouter()


def get_explorer(request: Request) -> Explorer:
    return request.app.state.explorer


async def read_body(request: Request) -> bytes:
    return await request.body()


def parse_int_param(raw: Optional[str], default: int) -> int:
    """Lenient query-param parsing: anything but a non-negative integer gives the default."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if 0 <= value <= INT64_MAX else default


def parse_ident(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise NotFound("record not found")
    value = int(raw)
    if value > INT64_MAX:
        raise NotFound("record not found")
    return value


def envelope(result: dict) -> dict:
    return {"response": result}


@router.get("/")
def list_tables(explorer: Explorer = Depends(get_explorer)):
    return envelope({"tables": explorer.list_tables()})


@router.get("/{table}")
@router.get("/{table}/")
def list_records(
    table: str,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    explorer: Explorer = Depends(get_explorer),
):
    records = explorer.list_records(
        table,
        limit=parse_int_param(limit, settings.DEFAULT_LIMIT),
        offset=parse_int_param(offset, settings.DEFAULT_OFFSET),
    )
    return envelope({"records": records})


@router.get("/{table}/{ident}")
def get_record(table: str, ident: str, explorer: Explorer = Depends(get_explorer)):
    explorer.table(table)
    return envelope({"record": explorer.get_record(table, parse_ident(ident))})


@router.put("/{table}")
@router.put("/{table}/")
@router.put("/{table}/{ident}")
def create_record(
    table: str,
    ident: Optional[str] = None,   # ignored, inserts always get a fresh id
    body: bytes = Depends(read_body),
    explorer: Explorer = Depends(get_explorer),
):
    return envelope(explorer.create_record(table, body))


@router.post("/{table}/{ident}")
def update_record(
    table: str,
    ident: str,
    body: bytes = Depends(read_body),
    explorer: Explorer = Depends(get_explorer),
):
    explorer.table(table)
    return envelope({"updated": explorer.update_record(table, parse_ident(ident), body)})


@router.delete("/{table}/{ident}")
def delete_record(table: str, ident: str, explorer: Explorer = Depends(get_explorer)):
    explorer.table(table)
    return envelope({"deleted": explorer.delete_record(table, parse_ident(ident))})
