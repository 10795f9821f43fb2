"""
Tests for reading puzzle collection files
"""
import pytest

from sudoku_gp import ConfigurationError, load_board, load_boards, parse_boards

COLLECTION = """Grid 01
1200
0000
0410
0003

Grid 02
1234
3412
2341
4120
"""


@pytest.fixture
def collection_file(tmp_path):
    path = tmp_path / "boards.txt"
    path.write_text(COLLECTION)
    return str(path)


class TestParseBoards:
    def test_parses_every_board(self):
        boards = parse_boards(COLLECTION, 4)
        assert len(boards) == 2
        assert boards[0].tolist()[0] == [1, 2, 0, 0]
        assert boards[1][3, 3] == 0

    def test_whitespace_separated_rows(self):
        boards = parse_boards("Grid\n1 2 0 0\n0 0 0 0\n0 4 1 0\n0 0 0 3\n", 4)
        assert boards[0].tolist()[2] == [0, 4, 1, 0]

    def test_large_board_rows(self):
        rows = "\n".join(" ".join(["0"] * 16) for _ in range(16))
        boards = parse_boards("Grid 16\n" + rows, 16)
        assert boards[0].shape == (16, 16)

    def test_size_mismatch_is_rejected(self):
        with pytest.raises(ConfigurationError):
            parse_boards(COLLECTION, 9)

    def test_malformed_rows_are_rejected(self):
        with pytest.raises(ConfigurationError):
            parse_boards("Grid\n12x0\n0000\n0000\n0000\n", 4)
        with pytest.raises(ConfigurationError):
            parse_boards("1200\nGrid\n", 4)
        with pytest.raises(ConfigurationError):
            parse_boards("Grid\n1200\n0000\n0000\n", 4)


class TestLoadBoard:
    def test_load_by_index(self, collection_file):
        assert len(load_boards(collection_file, 4)) == 2
        board = load_board(collection_file, 4, index=1)
        assert board[0].tolist() == [1, 2, 3, 4]

    def test_random_board(self, collection_file):
        board = load_board(collection_file, 4)
        assert board.shape == (4, 4)

    def test_index_out_of_range(self, collection_file):
        with pytest.raises(ConfigurationError):
            load_board(collection_file, 4, index=2)

    def test_empty_collection(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("")
        with pytest.raises(ConfigurationError):
            load_board(str(path), 4)
