from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class IStatusUseCase(Protocol):
    """Protocol for assembling the system status document."""

    async def get_status(self) -> Dict[str, Any]:
        ...


__all__ = ["IStatusUseCase"]
