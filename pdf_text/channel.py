"""Method channel dispatching PDF Text requests to background workers.

A request is a method name plus a mapping of arguments. The channel checks
the argument shapes, runs the operation on a worker from a thread pool and
hands back exactly one result per request. Each request opens its own
document handle and discards it afterwards; requests share no state.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .backends.base import PDFBackend
from .config import ChannelConfig
from .exceptions import InvalidArgumentsError, PdfTextException
from .utils import get_doc_page_text, get_doc_text, init_doc

LOGGER = logging.getLogger(__name__)

INIT_DOC = "initDoc"
GET_DOC_PAGE_TEXT = "getDocPageText"
GET_DOC_TEXT = "getDocText"

METHODS = (INIT_DOC, GET_DOC_PAGE_TEXT, GET_DOC_TEXT)


class MethodNotImplementedError(NotImplementedError):
    """Raised when a request names a method the channel does not provide."""

    def __init__(self, method: str) -> None:
        super().__init__(f"Method not implemented: {method}")
        self.method = method


@dataclass(frozen=True)
class MethodResult:
    """Outcome of a single request: a value, a classified error, or not implemented."""

    method: str
    value: Any = None
    error: Optional[PdfTextException] = None
    not_implemented: bool = False

    @property
    def success(self) -> bool:
        return self.error is None and not self.not_implemented

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        if self.not_implemented:
            raise MethodNotImplementedError(self.method)
        return self.value


ResultCallback = Callable[[MethodResult], None]


def _string_arg(arguments: Mapping[str, Any], key: str) -> Optional[str]:
    value = arguments.get(key)
    return value if isinstance(value, str) else None


def _int_arg(arguments: Mapping[str, Any], key: str) -> Optional[int]:
    value = arguments.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _int_list_arg(arguments: Mapping[str, Any], key: str) -> Optional[List[int]]:
    value = arguments.get(key)
    if not isinstance(value, (list, tuple)):
        return None
    if any(isinstance(item, bool) or not isinstance(item, int) for item in value):
        return None
    return list(value)


def _path_and_password(arguments: Mapping[str, Any], message: str) -> Tuple[str, str]:
    path = _string_arg(arguments, "path")
    password = _string_arg(arguments, "password")
    if path is None or password is None:
        raise InvalidArgumentsError(message)
    return path, password


class PdfTextChannel:
    """Dispatches ``initDoc``, ``getDocPageText`` and ``getDocText`` requests."""

    def __init__(
        self,
        config: Optional[ChannelConfig] = None,
        *,
        backend: Optional[PDFBackend] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self.config = config or ChannelConfig()
        LOGGER.setLevel(self.config.log_level)
        self.backend = backend
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self.config.max_workers,
            thread_name_prefix="pdf-text",
        )
        self._handlers: Dict[str, Callable[[Mapping[str, Any]], Any]] = {
            INIT_DOC: self._init_doc,
            GET_DOC_PAGE_TEXT: self._get_doc_page_text,
            GET_DOC_TEXT: self._get_doc_text,
        }

    # ------------------------------------------------------------------
    # Method handlers
    # ------------------------------------------------------------------
    def _init_doc(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        path, password = _path_and_password(arguments, "Missing path or password")
        metadata = init_doc(path, password, date_format=self.config.date_format, backend=self.backend)
        return metadata.to_dict()

    def _get_doc_page_text(self, arguments: Mapping[str, Any]) -> str:
        message = "Missing path, password, or page number"
        path, password = _path_and_password(arguments, message)
        number = _int_arg(arguments, "number")
        if number is None:
            raise InvalidArgumentsError(message)
        return get_doc_page_text(path, password, number, backend=self.backend)

    def _get_doc_text(self, arguments: Mapping[str, Any]) -> List[str]:
        message = "Missing path, password, or missingPagesNumbers"
        path, password = _path_and_password(arguments, message)
        page_numbers = _int_list_arg(arguments, "missingPagesNumbers")
        if page_numbers is None:
            raise InvalidArgumentsError(message)
        return get_doc_text(path, password, page_numbers, backend=self.backend)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def dispatch(self, method: str, arguments: Any) -> Any:
        """Run ``method`` on the calling thread and return its value.

        Raises:
            InvalidArgumentsError: ``arguments`` is not a mapping or lacks a required field.
            MethodNotImplementedError: ``method`` is unknown.
            PdfTextException: Any classified failure of the operation itself.
        """
        if not isinstance(arguments, Mapping):
            raise InvalidArgumentsError("Invalid method arguments")
        handler = self._handlers.get(method)
        if handler is None:
            raise MethodNotImplementedError(method)
        LOGGER.info("Dispatching %s", method)
        return handler(arguments)

    def run(self, method: str, arguments: Any) -> MethodResult:
        """Run ``method`` and capture its outcome as a :class:`MethodResult`."""
        try:
            return MethodResult(method, value=self.dispatch(method, arguments))
        except PdfTextException as exc:
            LOGGER.info("%s failed with %s: %s", method, exc.code, exc.message)
            return MethodResult(method, error=exc)
        except MethodNotImplementedError:
            return MethodResult(method, not_implemented=True)

    def submit(
        self,
        method: str,
        arguments: Any,
        callback: ResultCallback,
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> Future:
        """Run ``method`` on a worker and deliver its result to ``callback`` once.

        The callback always runs on the thread of ``loop``, which defaults to
        the event loop running in the caller, and never on the worker.

        Raises:
            RuntimeError: No ``loop`` was given and none is running in the caller.
        """
        if loop is None:
            loop = asyncio.get_running_loop()
        future = self._executor.submit(self.run, method, arguments)

        def _deliver(done: Future) -> None:
            exc = done.exception()
            if exc is None:
                result = done.result()
            else:
                LOGGER.error("Unexpected error while handling %s: %s", method, exc)
                result = MethodResult(method, error=PdfTextException(f"Unexpected error: {exc}"))
            loop.call_soon_threadsafe(callback, result)

        future.add_done_callback(_deliver)
        return future

    async def invoke(self, method: str, arguments: Any) -> Any:
        """Await ``method`` on a worker; errors are raised in the caller's event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self.dispatch, method, arguments)

    # ------------------------------------------------------------------
    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "PdfTextChannel":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = [
    "GET_DOC_PAGE_TEXT",
    "GET_DOC_TEXT",
    "INIT_DOC",
    "METHODS",
    "MethodNotImplementedError",
    "MethodResult",
    "PdfTextChannel",
]
