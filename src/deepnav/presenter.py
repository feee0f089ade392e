"""Presenter protocol — the boundary to the UI layer.

deepnav resolves URLs to navigables; showing them is up to the host
application. A presenter receives the built navigable and decides how to
put it on screen (push onto a stack, present modally, render a page).
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, runtime_checkable


@runtime_checkable
class Presenter(Protocol):
    """Structural interface the navigator delegates transitions to.

    Both methods return ``True`` if the transition happened. A presenter
    with nowhere to show the target (no navigation stack, no top-most
    view) returns ``False``.
    """

    def push(self, target: Any, *, animated: bool = True) -> bool: ...

    def present(
        self,
        target: Any,
        *,
        wrap: bool = False,
        animated: bool = True,
        completion: Callable[[], None] | None = None,
    ) -> bool: ...


@dataclass(frozen=True, slots=True)
class Transition:
    """A single push or present performed by a ``RecordingPresenter``."""

    action: Literal["push", "present"]
    target: Any
    animated: bool = True
    wrap: bool = False


@dataclass(slots=True)
class RecordingPresenter:
    """Presenter that keeps a history of transitions instead of drawing.

    Useful for headless hosts, the CLI, and tests::

        presenter = RecordingPresenter()
        navigator.push_url("myapp://user/1", presenter=presenter)
        assert presenter.stack[-1].action == "push"
    """

    stack: list[Transition] = field(default_factory=list)
    accepting: bool = True

    def push(self, target: Any, *, animated: bool = True) -> bool:
        if not self.accepting:
            return False
        self.stack.append(Transition("push", target, animated=animated))
        return True

    def present(
        self,
        target: Any,
        *,
        wrap: bool = False,
        animated: bool = True,
        completion: Callable[[], None] | None = None,
    ) -> bool:
        if not self.accepting:
            return False
        self.stack.append(Transition("present", target, animated=animated, wrap=wrap))
        if completion is not None:
            completion()
        return True

    @property
    def top(self) -> Any:
        """The most recently shown target, or ``None``."""
        if not self.stack:
            return None
        return self.stack[-1].target
