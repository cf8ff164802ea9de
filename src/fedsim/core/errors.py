from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from fedsim.contracts import ForensicArtifact


class EngineIntegrityError(RuntimeError):
    """Raised when a caller breaks the engine contract (not for expected edge cases)."""

    def __init__(self, artifact: ForensicArtifact) -> None:
        super().__init__(artifact.message)
        self.artifact = artifact

    @property
    def error_code(self) -> str:
        return self.artifact.error_code


def build_forensic_artifact(
    engine_scope: str,
    error_code: str,
    message: str,
    state_snapshot: dict[str, object],
    context: dict[str, object] | None = None,
    identifiers: dict[str, str] | None = None,
    causal_fragment: list[str] | None = None,
) -> ForensicArtifact:
    return ForensicArtifact(
        artifact_id=str(uuid4()),
        timestamp=datetime.now(UTC),
        engine_scope=engine_scope,
        error_code=error_code,
        message=message,
        state_snapshot=state_snapshot,
        context=context or {},
        identifiers=identifiers or {},
        causal_fragment=causal_fragment or [],
    )


def integrity_error(engine_scope: str, error_code: str, message: str, **state: object) -> EngineIntegrityError:
    return EngineIntegrityError(
        build_forensic_artifact(
            engine_scope=engine_scope,
            error_code=error_code,
            message=message,
            state_snapshot=dict(state),
            causal_fragment=[engine_scope, error_code.lower()],
        )
    )
