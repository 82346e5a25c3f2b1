"""Tests for maze_lab.problems.maze."""

from __future__ import annotations

import pytest

from maze_lab.problems.checks import sanity_check_problem
from maze_lab.problems.maze import TRANSITIONS, FormatError, MazeProblem, MazeState, load_maze
from maze_lab.problems.samples import SAMPLE_MAZES, make_maze_problem


class TestMazeState:
    def test_value_equality_and_hash(self) -> None:
        assert MazeState(2, 3) == MazeState(2, 3)
        assert hash(MazeState(2, 3)) == hash(MazeState(2, 3))
        assert MazeState(2, 3) != MazeState(3, 2)
        assert len({MazeState(1, 1), MazeState(1, 1), MazeState(1, 2)}) == 2

    def test_add_offset(self) -> None:
        assert MazeState(1, 1) + TRANSITIONS["U"] == MazeState(1, 0)
        assert MazeState(1, 1) + TRANSITIONS["R"] == MazeState(2, 1)

    def test_immutable(self) -> None:
        s = MazeState(0, 0)
        with pytest.raises(AttributeError):
            s.col = 5  # type: ignore[misc]

    def test_transition_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            TRANSITIONS["X"] = MazeState(0, 0)  # type: ignore[index]


class TestConstruction:
    def test_finds_special_cells(self) -> None:
        p = MazeProblem(["XXXXX", "XIKGX", "XMG.X", "XXXXX"])
        assert p.initial_state == MazeState(1, 1)
        assert p.key_state == MazeState(2, 1)
        assert p.goal_states == {MazeState(3, 1), MazeState(2, 2)}
        assert p.rows == 4 and p.cols == 5

    def test_unknown_character(self) -> None:
        with pytest.raises(FormatError, match="'Z'"):
            MazeProblem(["XXX", "XIZ", "XXX"])

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            MazeProblem(["I?G"])

    def test_missing_initial(self) -> None:
        with pytest.raises(FormatError, match="initial"):
            MazeProblem(["X.G", "XK."])

    def test_two_initials(self) -> None:
        with pytest.raises(FormatError):
            MazeProblem(["IKI", "..G"])

    def test_two_keys(self) -> None:
        with pytest.raises(FormatError):
            MazeProblem(["IKK", "..G"])

    def test_ragged_rows(self) -> None:
        with pytest.raises(FormatError, match="Row 1"):
            MazeProblem(["IKG", ".."])

    def test_empty(self) -> None:
        with pytest.raises(FormatError):
            MazeProblem([])

    def test_keyless_maze_is_allowed(self) -> None:
        p = MazeProblem(["I.G"])
        assert p.key_state is None
        assert p.objectives(has_key=False) == frozenset()

    def test_from_text_round_trip(self) -> None:
        text = "\n  XXXXX\n  XIKGX\n  XXXXX\n\n"
        p = MazeProblem.from_text(text)
        assert p.to_text() == "XXXXX\nXIKGX\nXXXXX"

    def test_load_maze(self, tmp_path) -> None:
        f = tmp_path / "m.txt"
        f.write_text("XXXX\nXIKG\nXXXX\n")
        p = load_maze(f)
        assert p.goal_states == {MazeState(3, 1)}


class TestStateSpace:
    def test_transitions_skip_walls(self, open_maze: MazeProblem) -> None:
        assert open_maze.transitions(MazeState(1, 1)) == {"D": MazeState(1, 2), "R": MazeState(2, 1)}

    def test_transitions_respect_bounds(self) -> None:
        p = MazeProblem(["I.", "KG"])
        assert p.transitions(MazeState(0, 0)) == {"D": MazeState(0, 1), "R": MazeState(1, 0)}

    def test_transitions_order_and_determinism(self) -> None:
        p = MazeProblem(["...", ".I.", "KG."])
        first = p.transitions(MazeState(1, 1))
        assert list(first) == ["U", "D", "L", "R"]
        assert p.transitions(MazeState(1, 1)) == first

    def test_cost(self) -> None:
        p = MazeProblem(["IMKG."])
        assert [p.cost(MazeState(c, 0)) for c in range(5)] == [1, 3, 1, 1, 1]

    def test_objectives(self) -> None:
        p = MazeProblem(["IKGG"])
        assert p.objectives(has_key=False) == {MazeState(1, 0)}
        assert p.objectives(has_key=True) == {MazeState(2, 0), MazeState(3, 0)}

    def test_is_goal(self) -> None:
        p = MazeProblem(["IKG"])
        assert p.is_goal(MazeState(2, 0))
        assert not p.is_goal(MazeState(1, 0))

    @pytest.mark.parametrize("name", sorted(SAMPLE_MAZES))
    def test_samples_pass_sanity_check(self, name: str) -> None:
        assert sanity_check_problem(make_maze_problem(name)).startswith("OK")

    def test_unknown_sample(self) -> None:
        with pytest.raises(ValueError, match="Unknown sample"):
            make_maze_problem("nope")


class TestSolutionCheck:
    MAZE = ["XXXXXX", "XIK.GX", "X..M.X", "XXXXXX"]

    def test_valid_solution(self) -> None:
        assert MazeProblem(self.MAZE).test_solution(["R", "R", "R"]) == (True, 3)

    def test_mud_cost_counted(self) -> None:
        assert MazeProblem(self.MAZE).test_solution(["R", "D", "R", "R", "U"]) == (True, 7)

    def test_goal_without_key(self) -> None:
        p = MazeProblem(["XXXXXX", "XI.KGX", "X....X", "XXXXXX"])
        ok, cost = p.test_solution(["D", "R", "R", "R", "U"])
        assert not ok
        assert cost == 5

    def test_not_ending_on_goal(self) -> None:
        assert MazeProblem(self.MAZE).test_solution(["R"]) == (False, 1)

    def test_wall(self) -> None:
        assert MazeProblem(self.MAZE).test_solution(["U"]) == (False, -1)

    def test_off_grid(self) -> None:
        p = MazeProblem(["IKG"])
        assert p.test_solution(["L"]) == (False, -1)
        assert p.test_solution(["R", "R", "R"]) == (False, -1)

    def test_unknown_token(self) -> None:
        assert MazeProblem(self.MAZE).test_solution(["R", "N"]) == (False, -1)

    def test_trace(self) -> None:
        p = MazeProblem(self.MAZE)
        assert p.trace(["R", "D"]) == [MazeState(1, 1), MazeState(2, 1), MazeState(2, 2)]
        with pytest.raises(ValueError, match="wall"):
            p.trace(["U"])
