import asyncio

from grid_astar.search.astar import AStar, CONSIDERING, EXPANDING, PATH


def _run(engine, callback, **kwargs):
    return asyncio.run(engine.search_visualize(callback, **kwargs))


def test_visualize_reports_steps_in_order(open_3x3):
    events = []
    path, expanded = _run(AStar(open_3x3), lambda cell, phase: events.append((cell.pos, phase)))

    assert [c.pos for c in path] == [(1, 0), (1, 1), (1, 2)]
    assert expanded == 6
    assert events == [
        ((0, 0), EXPANDING), ((1, 0), CONSIDERING), ((0, 1), CONSIDERING),
        ((1, 0), EXPANDING), ((2, 0), CONSIDERING), ((1, 1), CONSIDERING),
        ((0, 1), EXPANDING), ((1, 1), CONSIDERING), ((0, 2), CONSIDERING),
        ((1, 1), EXPANDING), ((2, 1), CONSIDERING), ((1, 2), CONSIDERING),
        ((0, 2), EXPANDING), ((1, 2), CONSIDERING),
        ((1, 2), EXPANDING), ((2, 2), CONSIDERING),
        ((1, 0), PATH), ((1, 1), PATH), ((1, 2), PATH),
    ]


def test_visualize_matches_plain_search(make_problem):
    problem = make_problem(["....#", ".##..", "...#.", "#...."], goal=(4, 3))
    plain_path, plain_expanded = AStar(problem).search()
    vis_path, vis_expanded = _run(AStar(problem), lambda cell, phase: None)
    assert vis_path == plain_path[1:-1]
    assert vis_expanded == plain_expanded


def test_async_callback_is_awaited(open_3x3):
    seen = []

    async def callback(cell, phase):
        await asyncio.sleep(0)
        seen.append(phase)

    _run(AStar(open_3x3), callback, step_delay=0.0)
    assert seen.count(EXPANDING) == 6
    assert seen.count(PATH) == 3


def test_callbacks_fire_after_step_completes(open_3x3):
    engine = AStar(open_3x3)
    snapshots = []

    def callback(cell, phase):
        if phase == EXPANDING:
            snapshots.append((cell.pos, engine.num_expanded, cell in engine.reached))

    _run(engine, callback)
    assert snapshots[0] == ((0, 0), 1, True)
    assert [count for _, count, _ in snapshots] == [1, 2, 3, 4, 5, 6]


def test_visualize_start_equals_goal(make_problem):
    problem = make_problem(["..", ".."], start=(1, 0), goal=(1, 0))
    events = []
    result = _run(AStar(problem), lambda cell, phase: events.append(phase))
    assert result == ([], 0)
    assert events == []


def test_visualize_no_path(make_problem):
    problem = make_problem(["...", "..#", ".#."], goal=(2, 2))
    events = []
    path, expanded = _run(AStar(problem), lambda cell, phase: events.append(phase))
    assert path == []
    assert expanded == 6
    assert PATH not in events
    assert events.count(EXPANDING) == 6


def test_visualize_cancelled(open_3x3):
    engine = AStar(open_3x3, should_stop=lambda: True)
    events = []
    assert _run(engine, lambda cell, phase: events.append(phase)) == ([], 0)
    assert engine.cancelled
    assert events == []
