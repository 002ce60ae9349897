"""Simulated Horizon contract-event listener."""

import asyncio
import inspect
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Optional, Tuple, Union

import structlog

from creditra.core.config import Settings, get_settings
from creditra.core.metrics import (
    record_horizon_event,
    record_horizon_handler_failure,
    record_horizon_poll,
)
from creditra.domain.entities import HorizonEvent

logger = structlog.get_logger(__name__)

EventHandler = Callable[[HorizonEvent], Union[None, Awaitable[None]]]

SIMULATED_LEDGER = 1000
SIMULATED_WALLET = "G" + "X" * 55


@dataclass(frozen=True)
class HorizonListenerConfig:
    horizon_url: str
    contract_ids: Tuple[str, ...]
    poll_interval_ms: int
    start_ledger: str

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "HorizonListenerConfig":
        s = settings or get_settings()
        return cls(
            horizon_url=s.horizon_url,
            contract_ids=tuple(s.contract_id_list),
            poll_interval_ms=s.poll_interval_ms,
            start_ledger=s.horizon_start_ledger,
        )

    def to_dict(self) -> dict:
        return {
            "horizon_url": self.horizon_url,
            "contract_ids": list(self.contract_ids),
            "poll_interval_ms": self.poll_interval_ms,
            "start_ledger": self.start_ledger,
        }


class HorizonListener:
    """
    Polls Horizon for contract events and fans them out to handlers.

    Polling is simulated: no request leaves the process. When at least
    one contract id is configured, every poll produces one synthetic
    credit_line_created event for the first contract.

    A handler that raises is logged and skipped; the remaining
    handlers still receive the event.
    """

    def __init__(self):
        self._handlers: List[EventHandler] = []
        self._config: Optional[HorizonListenerConfig] = None
        self._task: Optional[asyncio.Task] = None
        self._stop_event: Optional[asyncio.Event] = None

    @property
    def is_running(self) -> bool:
        return self._config is not None

    @property
    def config(self) -> Optional[HorizonListenerConfig]:
        """Active configuration, None while stopped."""
        return self._config

    def on_event(self, handler: EventHandler) -> None:
        """Register a sync or async handler for every dispatched event."""
        self._handlers.append(handler)

    def clear_event_handlers(self) -> None:
        self._handlers.clear()

    async def dispatch(self, event: HorizonEvent) -> None:
        record_horizon_event()
        for handler in list(self._handlers):
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                record_horizon_handler_failure()
                logger.error(
                    "horizon_handler_failed",
                    handler=getattr(handler, "__name__", repr(handler)),
                    ledger=event.ledger,
                    error=str(e),
                    error_type=type(e).__name__,
                )

    async def poll_once(self, config: Optional[HorizonListenerConfig] = None) -> None:
        """
        Run a single simulated poll cycle against the configured contracts.

        Without an explicit config, uses the active one, or settings when
        the listener is stopped.
        """
        config = config or self._config or HorizonListenerConfig.from_settings()
        record_horizon_poll()
        logger.info(
            "horizon_poll",
            horizon_url=config.horizon_url,
            contract_ids=list(config.contract_ids),
            start_ledger=config.start_ledger,
        )

        if not config.contract_ids:
            return

        event = HorizonEvent(
            ledger=SIMULATED_LEDGER,
            timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            contract_id=config.contract_ids[0],
            topics=["credit_line_created"],
            data=json.dumps({"walletAddress": SIMULATED_WALLET}),
        )
        logger.info("horizon_event_received", **event.to_dict())

        await self.dispatch(event)

    async def start(self, config: Optional[HorizonListenerConfig] = None) -> None:
        """
        Poll once immediately, then keep polling on a background task.

        Calling start() on a running listener logs a warning and does nothing.
        """
        if self.is_running:
            logger.warning("horizon_listener_already_running")
            return

        config = config or HorizonListenerConfig.from_settings()
        self._config = config
        # Bound to the running loop, so each start gets its own event.
        self._stop_event = asyncio.Event()
        logger.info("horizon_listener_starting", **config.to_dict())

        await self.poll_once(config)
        self._task = asyncio.create_task(self._run_loop(config, self._stop_event))

        logger.info(
            "horizon_listener_started",
            poll_interval_ms=config.poll_interval_ms,
        )

    async def stop(self) -> None:
        """Stop polling. Calling stop() on a stopped listener logs a warning."""
        if not self.is_running:
            logger.warning("horizon_listener_not_running")
            return

        if self._stop_event is not None:
            self._stop_event.set()
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        self._config = None
        logger.info("horizon_listener_stopped")

    async def _run_loop(
        self,
        config: HorizonListenerConfig,
        stop_event: asyncio.Event,
    ) -> None:
        interval = config.poll_interval_ms / 1000
        while not stop_event.is_set():
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=interval)
            except asyncio.TimeoutError:
                try:
                    await self.poll_once(config)
                except Exception:
                    logger.exception("horizon_poll_failed")
