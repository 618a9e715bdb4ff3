"""
Outcome of an order send.

Sending never raises: every failure is returned as one of the failure
variants below, so attribution problems cannot abort the caller's order flow.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Union


@dataclass(frozen=True)
class SendSuccess:
    """Utmify answered with a 2xx status."""

    response: str
    success: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": True, "response": self.response}


@dataclass(frozen=True)
class ProviderRejected:
    """Utmify answered with a non-2xx status; the body carries its error detail."""

    status_code: int
    error: str
    response: str
    success: bool = field(default=False, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": self.error, "response": self.response}


@dataclass(frozen=True)
class TransportFailure:
    """No response was obtained (connection, timeout, bad URL, serialization)."""

    error: str
    success: bool = field(default=False, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": self.error}


@dataclass(frozen=True)
class InvalidInput:
    """The order handed to the sender did not validate; nothing was sent."""

    error: str
    success: bool = field(default=False, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": self.error}


SendResult = Union[SendSuccess, ProviderRejected, TransportFailure, InvalidInput]
