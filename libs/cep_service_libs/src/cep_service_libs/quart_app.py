"""
Typed Quart application class for the CEP temperature services.

Declares the infrastructure attributes every service sets in its app
factory so handlers can read them without getattr() and None checks.
"""

from __future__ import annotations

from typing import Any

from dishka import AsyncContainer
from opentelemetry.trace import Tracer
from quart import Quart


class ServiceApp(Quart):
    """Quart application with typed service infrastructure.

    Attributes:
        container: Dishka async container, closed at shutdown
        tracer: Service tracer, set when tracing is initialized
        extensions: Standard Quart extensions dict; ``extensions["metrics"]``
            holds the HTTP metric instances read by the metrics middleware
    """

    container: AsyncContainer
    tracer: Tracer | None
    extensions: dict[str, Any]

    def __init__(self, import_name: str, *args: Any, **kwargs: Any) -> None:
        super().__init__(import_name, *args, **kwargs)
        self.tracer = None
