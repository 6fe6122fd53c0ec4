"""FastAPI app exposing the Slack events endpoint."""

from __future__ import annotations

import asyncio
import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional, Set
from urllib.parse import parse_qs

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from slack_sdk.signature import SignatureVerifier

from .chat_adapters.i_chat_adapter import IChatAdapter
from .core.ack import Acknowledgement
from .core.config import Config
from .core.dispatcher import InboundDispatcher
from .core.models import DispatchResult

LOGGER = logging.getLogger(__name__)

EVENTS_PATH = "/slack/events"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class SlackEventsEndpoint:
    """Verifies, parses and dispatches requests posted to the events URL."""

    def __init__(
        self,
        dispatcher: InboundDispatcher,
        verifier: SignatureVerifier,
        process_before_response: bool = False,
    ) -> None:
        self._dispatcher = dispatcher
        self._verifier = verifier
        self._process_before_response = process_before_response
        self._pending: Set[asyncio.Task] = set()

    async def __call__(self, request: Request) -> Response:
        body = await request.body()
        if not self._verifier.is_valid_request(body, dict(request.headers)):
            LOGGER.warning("Rejected request with invalid Slack signature")
            return Response(content="Invalid signature", status_code=401)

        payload = parse_payload(body, request.headers.get("content-type"))
        result = await self._run(payload)
        return _to_response(result)

    async def _run(self, payload: Dict[str, Any]) -> DispatchResult:
        ack = Acknowledgement()
        task = asyncio.create_task(self._dispatcher.dispatch(payload, ack))
        if self._process_before_response:
            return await task

        ack_waiter = asyncio.create_task(ack.wait())
        await asyncio.wait({task, ack_waiter}, return_when=asyncio.FIRST_COMPLETED)
        if task.done():
            ack_waiter.cancel()
            return task.result()

        # Acknowledged: answer now and let the handler finish in the background.
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return DispatchResult(body=ack.body)

    async def drain(self) -> None:
        """Wait for handlers still running after their acknowledgement."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)


def parse_payload(body: bytes, content_type: Optional[str]) -> Dict[str, Any]:
    """Decode a JSON body or a form body (with an optional JSON `payload` field)."""
    text = body.decode("utf-8", errors="replace")
    if content_type and content_type.split(";")[0].strip().lower() == FORM_CONTENT_TYPE:
        form = {key: values[0] for key, values in parse_qs(text).items() if values}
        if "payload" not in form:
            return form
        text = form["payload"]
    try:
        payload = json.loads(text) if text.strip() else {}
    except json.JSONDecodeError:
        LOGGER.warning("Received a body that is not valid JSON; treating it as empty")
        return {}
    return payload if isinstance(payload, dict) else {}


def _to_response(result: DispatchResult) -> Response:
    if result.body is not None:
        return JSONResponse(content=result.body, status_code=result.status_code)
    return Response(status_code=result.status_code)


def create_app(
    config: Config,
    chat_adapter: IChatAdapter,
    dispatcher: Optional[InboundDispatcher] = None,
) -> FastAPI:
    """Build the HTTP app around an explicitly constructed chat adapter."""
    endpoint = SlackEventsEndpoint(
        dispatcher=dispatcher or InboundDispatcher(chat_adapter),
        verifier=SignatureVerifier(config.slack_signing_secret),
        process_before_response=config.process_before_response,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        await endpoint.drain()
        await chat_adapter.close()

    app = FastAPI(title="Message Relay", lifespan=lifespan)
    app.state.events_endpoint = endpoint

    @app.post(EVENTS_PATH)
    async def slack_events(request: Request) -> Response:
        return await endpoint(request)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app
