"""Home & Debug: static root page and request thread metadata."""

import asyncio
import threading

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["home"])

HOME_TEXT = "Model Service Home Page"


@router.get("/", response_class=PlainTextResponse, summary="Home page")
async def home():
    return HOME_TEXT


@router.get("/debug/thread", summary="Debug thread info")
async def thread_info():
    """Report the thread and asyncio task serving this request."""
    thread = threading.current_thread()
    task = asyncio.current_task()
    return {
        "name": thread.name,
        "id": thread.ident,
        "native_id": thread.native_id,
        "daemon": thread.daemon,
        "task": task.get_name() if task else None,
    }
