from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from app.services.events.base import EventStore
from app.services.events.sync import EventSyncEndpoint, SyncReply

router = APIRouter(tags=["events"])


def get_event_store(request: Request) -> EventStore:
    return request.app.state.event_store


def get_sync_endpoint(store: EventStore = Depends(get_event_store)) -> EventSyncEndpoint:
    return EventSyncEndpoint(store)


def _render(reply: SyncReply) -> Response:
    if reply.media_type == "text/plain":
        return PlainTextResponse(reply.body, status_code=reply.status_code, headers=reply.headers)
    return JSONResponse(reply.body, status_code=reply.status_code, headers=reply.headers)


async def _read_payload(request: Request) -> dict[str, Any]:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
    form = await request.form()
    return dict(form)


@router.get("/init")
async def init_data(endpoint: EventSyncEndpoint = Depends(get_sync_endpoint)) -> Response:
    return _render(await endpoint.seed())


@router.get("/data")
async def load_data(endpoint: EventSyncEndpoint = Depends(get_sync_endpoint)) -> Response:
    return _render(await endpoint.list_events())


@router.post("/data")
async def save_data(
    request: Request,
    endpoint: EventSyncEndpoint = Depends(get_sync_endpoint),
) -> Response:
    payload = await _read_payload(request)
    return _render(await endpoint.mutate(payload))
