import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import TypeVar

from ..domain.exceptions import DeadlineExceededError, RequestCancelledError

T = TypeVar("T")


class RequestContext:
	"""Cancellation and deadline shared by every request made under it.

	The deadline is fixed when the context is created, so a context with a
	timeout bounds the total time of all calls that use it, not each call.
	"""

	def __init__(self, timeout: float | None = None):
		self.timeout = timeout
		self._deadline = time.monotonic() + timeout if timeout is not None else None
		self._cancelled = asyncio.Event()

	@classmethod
	def with_timeout(cls, seconds: float) -> "RequestContext":
		return cls(timeout=seconds)

	@property
	def cancelled(self) -> bool:
		return self._cancelled.is_set()

	@property
	def expired(self) -> bool:
		return self._deadline is not None and time.monotonic() >= self._deadline

	def cancel(self) -> None:
		self._cancelled.set()

	def remaining(self) -> float | None:
		if self._deadline is None:
			return None
		return max(0.0, self._deadline - time.monotonic())

	def check(self) -> None:
		if self.cancelled:
			raise RequestCancelledError("Request context was cancelled")
		if self.expired:
			raise DeadlineExceededError(f"Request context deadline of {self.timeout}s exceeded")

	async def run(self, operation: Callable[[], Awaitable[T]]) -> T:
		"""Await ``operation()`` unless the context is cancelled or expires first."""
		self.check()

		task = asyncio.ensure_future(operation())
		waiter = asyncio.ensure_future(self._cancelled.wait())
		try:
			done, _ = await asyncio.wait(
				{task, waiter},
				timeout=self.remaining(),
				return_when=asyncio.FIRST_COMPLETED,
			)
		finally:
			for future in (task, waiter):
				if not future.done():
					future.cancel()

		if task in done:
			return task.result()

		self.check()
		raise DeadlineExceededError(f"Request context deadline of {self.timeout}s exceeded")
