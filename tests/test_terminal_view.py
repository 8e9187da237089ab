import asyncio
import io

from grid_astar.search.astar import AStar, CONSIDERING, EXPANDING, PATH
from grid_astar.utils.terminal_view import TerminalView


def test_render_text_marks_endpoints_and_walls(make_problem):
    problem = make_problem(["...", ".#.", "..."], goal=(2, 2))
    view = TerminalView(problem, stream=io.StringIO())
    assert view.render_text() == "S..\n.#.\n..G"


def test_marks_never_override_start_or_goal(open_3x3):
    view = TerminalView(open_3x3, stream=io.StringIO())
    view.mark(open_3x3.start, EXPANDING)
    view.mark(open_3x3.goal, CONSIDERING)
    view.mark(open_3x3.grid.get_cell(1, 1), PATH)
    view.mark(open_3x3.grid.get_cell(0, 1), EXPANDING)
    assert view.render_text() == "S..\n*o.\n..G"


def test_plain_render_writes_text(open_3x3):
    out = io.StringIO()
    view = TerminalView(open_3x3, colour=False, stream=out)
    view.render()
    assert out.getvalue() == "S..\n...\n..G\n"


def test_colour_render_clears_screen(open_3x3):
    out = io.StringIO()
    TerminalView(open_3x3, stream=out).render()
    text = out.getvalue()
    assert text.startswith("\x1b[H\x1b[2J")
    assert "\x1b[32mS" in text


def test_disabled_view_draws_nothing(open_3x3):
    out = io.StringIO()
    view = TerminalView(open_3x3, stream=out)
    view.enabled = False
    view.render()
    assert out.getvalue() == ""


def test_view_as_search_callback(open_3x3):
    view = TerminalView(open_3x3, colour=False, stream=io.StringIO())
    path, expanded = asyncio.run(AStar(open_3x3).search_visualize(view.visualize_step))
    assert expanded == 6
    assert view.render_text() == "So+\n*o+\n*oG"
