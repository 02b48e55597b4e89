"""A small topic-based publish/subscribe hub."""

from __future__ import annotations

import threading
from types import CodeType
from typing import Any, Callable

_CO_VARARGS = 0x04


def _type_topic(topic_type: type) -> str:
    return f"{topic_type.__module__}.{topic_type.__qualname__}"


def _unwrap(function: Callable[..., Any]) -> tuple[Any, CodeType, int] | None:
    """The plain function behind a callable, its code and how many leading
    parameters are already bound; None when that cannot be told."""
    target: Any = function
    if isinstance(target, type):
        return None
    if not hasattr(target, "__code__") and not hasattr(target, "__func__"):
        target = getattr(target, "__call__", None)
        if target is None:
            return None
    skipped = 0
    if hasattr(target, "__func__"):
        skipped = 1
        target = target.__func__
    code = getattr(target, "__code__", None)
    if not isinstance(code, CodeType):
        return None
    return target, code, skipped


def _accepts(function: Callable[..., Any], count: int) -> bool:
    info = _unwrap(function)
    if info is None:
        return True
    target, code, skipped = info
    positional = code.co_argcount - skipped
    required = positional - len(getattr(target, "__defaults__", None) or ())
    kw_defaults = getattr(target, "__kwdefaults__", None) or {}
    if code.co_kwonlyargcount - len(kw_defaults) > 0:
        return False
    if count < required:
        return False
    return count <= positional or bool(code.co_flags & _CO_VARARGS)


class Handler:
    """A subscription; ``unsub`` removes it from its watcher."""

    def __init__(self, watcher: Watcher, topic: str, function: Callable[..., Any]) -> None:
        self.topic = topic
        self.function = function
        self._watcher = watcher

    def unsub(self) -> None:
        self._watcher._remove(self)


class Watcher:
    """Routes published arguments to the handlers subscribed to a topic.

    A handler is called only when it can take the published arguments.
    Typed topics are named after a class, so publishing an instance
    reaches handlers whose first parameter is annotated with that class.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._topics: dict[str, list[Handler]] = {}

    def has(self, topic: str) -> bool:
        return bool(self._topics.get(topic))

    def pub(self, topic: str, *args: Any) -> None:
        with self._lock:
            handlers = list(self._topics.get(topic, ()))
        for handler in handlers:
            if _accepts(handler.function, len(args)):
                handler.function(*args)

    def pub_as(self, *args: Any) -> None:
        if not args:
            raise ValueError("pub_as needs at least one argument")
        self.pub_to(type(args[0]), *args)

    def pub_to(self, topic_type: type, *args: Any) -> None:
        self.pub(_type_topic(topic_type), *args)

    def sub(self, topic: str, function: Callable[..., Any]) -> Handler:
        if not callable(function):
            raise TypeError(f"cannot sub with {type(function).__name__}, must be callable")
        handler = Handler(self, topic, function)
        with self._lock:
            self._topics.setdefault(topic, []).append(handler)
        return handler

    def sub_as(self, function: Callable[..., Any]) -> Handler:
        if not callable(function):
            raise TypeError(f"cannot sub with {type(function).__name__}, must be callable")
        info = _unwrap(function)
        if info is None:
            raise TypeError(f"cannot sub with {function!r}, its parameters are unknown")
        target, code, skipped = info
        names = code.co_varnames[skipped:code.co_argcount]
        if not names:
            raise TypeError(
                f"cannot sub with {function!r}, must have at least 1 input parameter"
            )
        annotation = (getattr(target, "__annotations__", None) or {}).get(names[0])
        if not isinstance(annotation, type):
            raise TypeError(
                f"cannot sub with {function!r}, first parameter must be annotated with a class"
            )
        return self.sub_to(annotation, function)

    def sub_to(self, topic_type: type, function: Callable[..., Any]) -> Handler:
        return self.sub(_type_topic(topic_type), function)

    def _remove(self, handler: Handler) -> None:
        with self._lock:
            handlers = self._topics.get(handler.topic)
            if handlers and handler in handlers:
                handlers.remove(handler)