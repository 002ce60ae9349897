"""Clients for external systems."""

from .horizon_listener import EventHandler, HorizonListener, HorizonListenerConfig

__all__ = [
    "EventHandler",
    "HorizonListener",
    "HorizonListenerConfig",
]
