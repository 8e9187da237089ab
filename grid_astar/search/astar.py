"""A* best-first search over any :class:`SearchProblem`."""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    List,
    NamedTuple,
    Optional,
    Set,
    Tuple,
    TypeVar,
)

from ..core.priority_queue import MinHeapPriorityQueue
from ..core.problem import SearchProblem

logger = logging.getLogger(__name__)

S = TypeVar("S")

# Phases reported to visualization callbacks
EXPANDING = "expanding"
CONSIDERING = "considering"
PATH = "path"

VisualizeStep = Callable[[Any, str], Optional[Awaitable[None]]]


@dataclass
class SearchNode(Generic[S]):
    """Frontier entry: a state, the path that reached it and its costs."""

    state: S
    path: List[S]
    g_cost: float
    h_cost: float

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost


class SearchResult(NamedTuple):
    path: List[Any]
    num_expanded: int


def _node_comparison(a: SearchNode[Any], b: SearchNode[Any]) -> float:
    return a.f_cost - b.f_cost


class AStar(Generic[S]):
    """Single-use A* engine.

    The engine only records *which* states were expanded, never the cost they
    were expanded at, so a state is never re-opened once finalized. That is
    exact as long as the heuristic is consistent; an inconsistent heuristic
    silently loses optimality.

    Parameters
    ----------
    problem:
        State space to search.
    heuristic:
        Optional override for ``problem.heuristic``.
    should_stop:
        Polled once per loop iteration; returning ``True`` cancels the search.
    timeout:
        Wall clock budget in seconds, checked once per loop iteration.
    """

    def __init__(
        self,
        problem: SearchProblem[S],
        heuristic: Callable[[S], float] | None = None,
        should_stop: Callable[[], bool] | None = None,
        timeout: float | None = None,
    ) -> None:
        self.problem = problem
        self.heuristic: Callable[[S], float] = heuristic or problem.heuristic
        self.should_stop = should_stop
        self.timeout = timeout
        self.frontier: MinHeapPriorityQueue[SearchNode[S]] = MinHeapPriorityQueue(
            _node_comparison
        )
        self.reached: Set[S] = set()
        self.num_expanded: int = 0
        self.cancelled: bool = False
        self._used = False
        self._deadline: float | None = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _begin(self) -> None:
        if self._used:
            raise RuntimeError("AStar instances are single-use; create a new engine")
        self._used = True
        if self.timeout is not None:
            self._deadline = time.monotonic() + self.timeout
        start = self.problem.get_start()
        self.frontier.put(SearchNode(start, [start], 0, self.heuristic(start)))

    def _should_cancel(self) -> bool:
        if self.should_stop is not None and self.should_stop():
            logger.warning("[AStar] Search cancelled after %d expansions", self.num_expanded)
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            logger.warning(
                "[AStar] Search timed out after %ss (%d expansions)",
                self.timeout,
                self.num_expanded,
            )
            return True
        return False

    def _expand(self, node: SearchNode[S]) -> List[S]:
        """Finalize ``node`` and push its unreached successors.

        Returns the successors that were pushed.
        """

        self.reached.add(node.state)
        self.num_expanded += 1
        pushed: List[S] = []
        for successor in self.problem.get_successors(node.state):
            if successor in self.reached:
                continue
            path = node.path + [successor]
            g_cost = self.problem.get_path_cost(path)
            h_cost = self.heuristic(successor)
            self.frontier.put(SearchNode(successor, path, g_cost, h_cost))
            pushed.append(successor)
        return pushed

    def _step(self) -> Tuple[Optional[SearchNode[S]], Optional[List[S]], bool]:
        """Run one loop iteration.

        Returns ``(node, pushed, done)``: the popped node, the successors
        pushed (``None`` when the node was not expanded) and whether the
        search has terminated. ``node`` is ``None`` when the search stopped
        without reaching the goal.
        """

        if self._should_cancel():
            self.cancelled = True
            return None, None, True
        node = self.frontier.get()
        if node is None:
            return None, None, True
        if self.problem.is_goal_state(node.state):
            return node, None, True
        if node.state in self.reached:
            # stale duplicate
            return node, None, False
        return node, self._expand(node), False

    def _finish(self, node: Optional[SearchNode[S]]) -> SearchResult:
        if node is None:
            if not self.cancelled:
                logger.debug("[AStar] No path found after %d expansions", self.num_expanded)
            return SearchResult([], self.num_expanded)
        logger.debug(
            "[AStar] Goal reached: path of %d states, %d expansions",
            len(node.path),
            self.num_expanded,
        )
        return SearchResult(node.path, self.num_expanded)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def search(self) -> SearchResult:
        """Return the path from start to goal inclusive and the expansion count.

        The path is empty when the goal is unreachable or the search was
        cancelled.
        """

        self._begin()
        while True:
            node, _, done = self._step()
            if done:
                return self._finish(node)

    async def search_visualize(
        self, visualize_step: VisualizeStep, step_delay: float = 0.0
    ) -> SearchResult:
        """Like :meth:`search` but reports progress to ``visualize_step``.

        ``visualize_step(state, phase)`` is called with ``"expanding"`` for
        each expanded state, ``"considering"`` for each pushed successor and
        ``"path"`` for every intermediate state of the final path. It may
        return an awaitable. Calls for one expansion are made once that
        expansion has completed, followed by a sleep of ``step_delay``.

        The returned path excludes the start and goal states, matching what
        was reported with ``"path"``.
        """

        self._begin()
        while True:
            node, pushed, done = self._step()
            if done:
                break
            if node is None or pushed is None:
                continue
            await _notify(visualize_step, node.state, EXPANDING)
            for successor in pushed:
                await _notify(visualize_step, successor, CONSIDERING)
            await asyncio.sleep(step_delay)

        result = self._finish(node)
        inner = result.path[1:-1]
        for state in inner:
            await _notify(visualize_step, state, PATH)
        return SearchResult(inner, result.num_expanded)


async def _notify(callback: VisualizeStep, state: Any, phase: str) -> None:
    outcome = callback(state, phase)
    if inspect.isawaitable(outcome):
        await outcome


__all__ = ["AStar", "SearchNode", "SearchResult", "EXPANDING", "CONSIDERING", "PATH"]
