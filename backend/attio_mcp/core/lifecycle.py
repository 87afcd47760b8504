"""Process Lifecycle: single-shot state machine from startup to serving.

Invariants:
    - Transitions only move forward: UNINITIALIZED -> CREDENTIAL_CHECKED
      -> TRANSPORT_CONNECTED -> SERVING
    - check_credential raises MissingCredentialError before any transport exists
    - SERVING has no terminal transition; the process is killed or stdin closes

Design Decisions:
    - Pure object, no IO: main.py owns the transport and exit codes, this only
      decides whether a step is allowed (ADR: Functional Core)
"""

from attio_mcp.core.domain_types import LifecyclePhase
from attio_mcp.core.errors import MissingCredentialError

_NEXT = {
    LifecyclePhase.UNINITIALIZED: LifecyclePhase.CREDENTIAL_CHECKED,
    LifecyclePhase.CREDENTIAL_CHECKED: LifecyclePhase.TRANSPORT_CONNECTED,
    LifecyclePhase.TRANSPORT_CONNECTED: LifecyclePhase.SERVING,
}


class Lifecycle:
    """Tracks the current phase. One instance per process."""

    def __init__(self) -> None:
        self.phase = LifecyclePhase.UNINITIALIZED

    def _advance(self, target: LifecyclePhase) -> None:
        if _NEXT.get(self.phase) != target:
            raise RuntimeError(
                f"Invalid lifecycle transition: {self.phase.value} -> {target.value}"
            )
        self.phase = target

    def check_credential(self, api_key: str | None, variable: str) -> str:
        """Return the credential or raise. Blank values count as absent."""
        if not api_key or not api_key.strip():
            raise MissingCredentialError(variable)
        self._advance(LifecyclePhase.CREDENTIAL_CHECKED)
        return api_key

    def transport_connected(self) -> None:
        self._advance(LifecyclePhase.TRANSPORT_CONNECTED)

    def serving(self) -> None:
        self._advance(LifecyclePhase.SERVING)
