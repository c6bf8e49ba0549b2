from __future__ import annotations

import asyncio
import contextlib
import json
from typing import List, Optional, Set

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from dispatch import (
    CAR_EVENTS,
    CarFactory,
    CarTimings,
    ElevatorError,
    NoSuchCar,
    Request,
    make_external_request,
    make_internal_request,
)
from dispatch.controller import DispatchController


class CallRequest(BaseModel):
    destination_floor: int
    origin_floor: Optional[int] = None

    def to_request(self) -> Request:
        if self.origin_floor is None:
            return make_internal_request(self.destination_floor)
        return make_external_request(self.origin_floor, self.destination_floor)


class DispatchManager:
    """Serializes enqueue and batch phases for HTTP and websocket clients."""

    def __init__(self, timings: Optional[CarTimings] = None) -> None:
        self.controller = DispatchController(CarFactory(timings=timings))
        self.events: List[dict] = []
        self.clients: Set[WebSocket] = set()
        self._lock = asyncio.Lock()
        for name in CAR_EVENTS:
            self.controller.on_event(name, self._recorder(name))

    def _recorder(self, name: str):
        def record(payload: dict) -> None:
            self.events.append({"event": name, **payload})

        return record

    def current_state(self) -> dict:
        return {"cars": self.controller.snapshot()}

    async def submit(self, route: str, call: CallRequest) -> dict:
        async with self._lock:
            request = call.to_request()
            getattr(self.controller, route)(request)
            state = self.current_state()
            state["request"] = request.to_dict()
        await self.broadcast(state)
        return state

    async def run_batch(self, runner: str) -> dict:
        async with self._lock:
            self.events.clear()
            visited = getattr(self.controller, runner)()
            state = self.current_state()
            state["visited"] = visited
            state["events"] = list(self.events)
        await self.broadcast(state)
        return state

    async def emergency(self) -> dict:
        async with self._lock:
            self.events.clear()
            self.controller.trigger_emergency()
            state = self.current_state()
            state["events"] = list(self.events)
        await self.broadcast(state)
        return state

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except WebSocketDisconnect:
                disconnected.add(client)
        for client in disconnected:
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        await websocket.send_text(json.dumps(self.current_state()))

    async def unregister(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)
        with contextlib.suppress(Exception):
            await websocket.close()


def create_app(manager: Optional[DispatchManager] = None) -> FastAPI:
    manager = manager or DispatchManager()
    app = FastAPI(title="LiftDispatch API")
    app.state.manager = manager
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    async def submit(route: str, call: CallRequest) -> dict:
        try:
            return await manager.submit(route, call)
        except NoSuchCar as exc:
            raise HTTPException(status_code=404, detail=str(exc))
        except ElevatorError as exc:
            raise HTTPException(status_code=400, detail=str(exc))

    @app.get("/state")
    async def get_state() -> dict:
        return manager.current_state()

    @app.post("/passenger/up")
    async def passenger_up(call: CallRequest) -> dict:
        return await submit("route_up", call)

    @app.post("/passenger/down")
    async def passenger_down(call: CallRequest) -> dict:
        return await submit("route_down", call)

    @app.post("/service")
    async def service(call: CallRequest) -> dict:
        return await submit("route_service", call)

    @app.post("/passenger/run")
    async def run_passenger() -> dict:
        return await manager.run_batch("run_passenger_batch")

    @app.post("/service/run")
    async def run_service() -> dict:
        return await manager.run_batch("run_service_batch")

    @app.post("/emergency")
    async def emergency() -> dict:
        return await manager.emergency()

    @app.websocket("/ws/stream")
    async def websocket_endpoint(websocket: WebSocket) -> None:
        await manager.register(websocket)
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            await manager.unregister(websocket)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
