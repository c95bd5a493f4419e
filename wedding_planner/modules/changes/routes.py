import asyncio
import logging
from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect, status
from fastapi.concurrency import run_in_threadpool
from wedding_planner.database.supabase_client import get_service_supabase
from wedding_planner.modules.auth.service import AuthService
from wedding_planner.core.dependencies import get_auth_service, is_admin
from wedding_planner.core.notifications import ChangeNotifier, Subscription, get_notifier
from supabase import Client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/changes", tags=["changes"])


async def _forward(websocket: WebSocket, subscription: Subscription) -> None:
    while True:
        message = await subscription.get()
        await websocket.send_json(message)


@router.websocket("/ws")
async def changes_websocket(
    websocket: WebSocket,
    token: str,
    auth_service: AuthService = Depends(get_auth_service),
    supabase: Client = Depends(get_service_supabase),
    notifier: ChangeNotifier = Depends(get_notifier)
):
    """Push {"collection", "event", "owner_id"} whenever one of the caller's collections changes.
    Clients re-fetch the named collection on every message. Admins receive every client's changes."""
    try:
        user_data = await run_in_threadpool(auth_service.get_current_user, token)
    except HTTPException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    admin = await run_in_threadpool(is_admin, user_data, supabase)
    subscription = notifier.subscribe(user_data["id"], all_owners=admin)
    sender = None
    try:
        await websocket.accept()
        logger.info(f"Change feed connected for {user_data['id']}")
        sender = asyncio.create_task(_forward(websocket, subscription))
        while True:
            # Anything the client sends is treated as a keepalive
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        if sender:
            sender.cancel()
        notifier.unsubscribe(subscription)
        logger.info(f"Change feed disconnected for {user_data['id']}")
