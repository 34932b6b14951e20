import random
import string

# Spanish-language Boggle dice, one list of six faces per die
DICE = [
    ["N", "D", "S", "E", "A", "O"],
    ["A", "O", "U", "E", "A", "I"],
    ["N", "I", "T", "A", "G", "U"],
    ["V", "O", "N", "J", "S", "L"],
    ["E", "S", "O", "Ñ", "A", "D"],
    ["E", "Qu", "O", "S", "H", "D"],
    ["C", "E", "N", "O", "L", "S"],
    ["D", "T", "A", "R", "O", "I"],
    ["C", "N", "I", "R", "T", "F"],
    ["P", "S", "C", "E", "L", "O"],
    ["E", "H", "I", "X", "U", "R"],
    ["B", "O", "M", "L", "E", "Z"],
    ["A", "R", "E", "C", "M", "A"],
    ["S", "A", "C", "E", "N", "O"],
    ["P", "O", "D", "E", "T", "A"],
    ["B", "R", "A", "E", "L", "A"],
]


def roll_grid(size: int = 4, rng: random.Random | None = None) -> list[list[str]]:
    """Shuffle the dice, roll each one and lay the faces out row by row.

    Boards with more cells than there are dice draw from a freshly shuffled
    set for every 16 cells.
    """
    if size < 1:
        raise ValueError(f"Grid size must be at least 1, got {size}")
    rng = rng or random.Random()

    faces: list[str] = []
    while len(faces) < size * size:
        dice = DICE[:]
        rng.shuffle(dice)
        faces.extend(rng.choice(die) for die in dice)

    return [faces[r * size:(r + 1) * size] for r in range(size)]


def random_grid(rows: int = 4, cols: int = 4, rng: random.Random | None = None) -> list[list[str]]:
    rng = rng or random.Random()
    return [[rng.choice(string.ascii_uppercase) for _ in range(cols)] for _ in range(rows)]


def format_grid(grid: list[list[str]]) -> str:
    return "\n".join(" ".join(f"{tile:<2}" for tile in row).rstrip() for row in grid)
