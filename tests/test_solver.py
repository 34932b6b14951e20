import random
import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from boggle.dice import roll_grid
from boggle.dictionary import WordIndex, build_index, load_index
from boggle.solver import InvalidGridError, find_word_paths, find_words


def _make_index(words: list[str]) -> WordIndex:
    return build_index(words)


def _make_demo_index() -> WordIndex:
    return _make_index(["casa", "cosa", "caso", "sano", "mesa", "nota", "taco", "saco",
                        "quest", "quit", "quits", "star", "dona", "rosa", "lado", "seda"])


def _assert_valid_path(grid, word, path):
    assert len(set(path)) == len(path), f"{word}: path reuses a cell"
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert max(abs(r1 - r2), abs(c1 - c2)) == 1, f"{word}: cells not adjacent"
    assert "".join(grid[r][c] for r, c in path).lower() == word


BOARD = [
    ["C", "A", "T", "S"],
    ["R", "E", "P", "O"],
    ["B", "O", "N", "E"],
    ["D", "I", "G", "S"],
]


def test_basic_solve():
    words = ["cat", "cats", "care", "bone", "bones", "digs", "repo", "open",
             "nope", "peon", "sign", "quit"]
    result = find_words(BOARD, _make_index(words))
    assert result == ["bone", "bones", "care", "cats", "digs", "nope", "open", "peon", "repo"]


def test_casa_scenario():
    grid = [
        ["C", "A", "S"],
        ["A", "S", "A"],
    ]
    result = find_words(grid, _make_index(["casa", "mesa", "as"]))
    assert result == ["casa"]


def test_short_words_excluded():
    result = find_words(BOARD, _make_index(["cat", "ate", "cats"]))
    assert result == ["cats"]


def test_custom_length_bounds():
    index = _make_index(["cat", "cats", "bones"])
    assert find_words(BOARD, index, min_length=3) == ["bones", "cat", "cats"]
    assert find_words(BOARD, index, max_length=4) == ["cats"]


def test_qu_tile():
    grid = [
        ["QU", "I", "T"],
        ["E", "S", "A"],
        ["N", "D", "R"],
    ]
    words = ["quit", "quite", "quest", "quits", "quis", "star", "sate"]
    result = find_words(grid, _make_index(words))
    # "quis" spans three cells but four letters
    assert result == ["quest", "quis", "quit", "quits", "star"]


def test_mixed_case_tiles_and_words():
    grid = [["c", "A"], ["S", "a"]]
    assert find_words(grid, _make_index(["CASA"])) == ["casa"]


def test_no_revisit():
    """A word that needs the same cell twice is not found."""
    board = [
        ["A", "B"],
        ["C", "D"],
    ]
    index = _make_index(["abab", "abca", "abcd", "abdc", "dcba"])
    assert find_words(board, index) == ["abcd", "abdc", "dcba"]


def test_reported_once_when_reachable_many_ways():
    board = [["A", "A"], ["A", "A"]]
    assert find_words(board, _make_index(["aaaa", "aaaaa"])) == ["aaaa"]


def test_word_longer_than_board_never_found():
    board = [["A"] * 3 for _ in range(3)]
    index = _make_index(["a" * 9, "a" * 10, "a" * 20])
    assert find_words(board, index) == ["a" * 9]


@pytest.mark.slow
def test_twenty_letter_word_never_found_on_full_board():
    board = [["A"] * 4 for _ in range(4)]
    index = _make_index(["a" * 20])
    assert find_words(board, index) == []


def test_length_cap_applies_to_tile_text():
    # Seventeen letters from nine cells: over the 16 letter cap
    board = [["QU", "QU", "QU"], ["QU", "QU", "QU"], ["QU", "QU", "QU"]]
    index = _make_index(["qu" * 8, "qu" * 8 + "q", "qu" * 9])
    assert find_words(board, index) == ["qu" * 8]


def test_empty_dictionary():
    assert find_words(BOARD, _make_index([])) == []


def test_empty_results_for_no_matches():
    board = [["Z", "Z"], ["Z", "Z"]]
    assert find_words(board, _make_index(["casa", "gato"])) == []


@pytest.mark.parametrize("grid", [[], [[]], [["A"]], [["QU"]]])
def test_degenerate_grids(grid):
    assert find_words(grid, _make_index(["a", "qu", "casa"])) == []


@pytest.mark.parametrize("grid", [
    [["A", "B"], ["C"]],
    [["A", None], ["C", "D"]],
    [["A", ""], ["C", "D"]],
    [["A", "B"], "CD"],
    None,
    5,
    "CASA",
])
def test_malformed_grid_raises(grid):
    with pytest.raises(InvalidGridError):
        find_words(grid, _make_index(["abcd"]))


def test_paths_spell_their_words():
    words = ["bone", "bones", "care", "cats", "digs", "nope", "open", "peon", "repo"]
    paths = find_word_paths(BOARD, _make_index(words))
    assert sorted(paths) == words
    for word, path in paths.items():
        _assert_valid_path(BOARD, word, path)


def test_first_path_starts_topmost_leftmost():
    board = [["A", "A"], ["A", "A"]]
    paths = find_word_paths(board, _make_index(["aaaa"]))
    assert paths["aaaa"][0] == (0, 0)


def test_full_search_matches_pruned_search():
    index = _make_demo_index()
    rng = random.Random(1234)
    boards = [roll_grid(3, rng) for _ in range(2)]
    boards.append([["C", "A", "S"], ["A", "S", "A"]])
    boards.append([["QU", "I", "T"], ["E", "S", "A"], ["N", "D", "R"]])
    for board in boards:
        assert find_words(board, index, prune=False) == find_words(board, index, prune=True)


def test_results_are_sorted_unique_dictionary_words():
    index = _make_demo_index()
    rng = random.Random(99)
    for _ in range(5):
        board = roll_grid(4, rng)
        paths = find_word_paths(board, index)
        result = find_words(board, index)
        assert result == sorted(set(result))
        for word in result:
            assert word in index.words
            assert 4 <= len(word) <= 16
            _assert_valid_path(board, word, paths[word])


def test_shared_index_across_threads():
    index = _make_demo_index()
    rng = random.Random(5)
    boards = [roll_grid(4, rng) for _ in range(8)]
    expected = [find_words(b, index) for b in boards]
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda b: find_words(b, index), boards))
    assert results == expected


def test_performance_with_generated_dictionary(tmp_path):
    """Solve a 4x4 board against a few thousand words well under a second."""
    import itertools

    dict_file = tmp_path / "dict.txt"
    words = ["tape", "snide", "spin"]
    letters = "abcdefghijklmnoprstue"
    for length in range(4, 7):
        for combo in itertools.islice(itertools.permutations(letters, length), 3000):
            words.append("".join(combo))
    dict_file.write_text("\n".join(words))
    index = load_index(dict_file)

    board = [
        ["T", "A", "P", "E"],
        ["I", "N", "S", "O"],
        ["E", "D", "R", "L"],
        ["K", "G", "H", "M"],
    ]

    start = time.perf_counter()
    result = find_words(board, index)
    elapsed = time.perf_counter() - start

    assert elapsed < 1.0, f"Solver took {elapsed:.3f}s (expected <1s)"
    assert "tape" in result
