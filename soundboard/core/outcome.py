from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from fastapi.concurrency import run_in_threadpool

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a best-effort call: either a value or the contained error."""

    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: T) -> T:
        return self.value if self.ok else default


async def attempt(func: Callable[..., T], *args, **kwargs) -> Outcome[T]:
    """Run a blocking call in the thread pool and capture its failure."""
    try:
        return Outcome(value=await run_in_threadpool(func, *args, **kwargs))
    except Exception as e:
        return Outcome(error=e)
