"""Known digests and the grids they produce."""

APPLE_HASH = [31, 56, 112, 190, 39, 79, 108, 73, 179, 227, 26, 12, 103, 40, 149, 127]
BALL_HASH = [122, 16, 234, 27, 155, 40, 114, 218, 159, 55, 80, 2, 196, 77, 223, 206]

APPLE_COLOR = (31, 56, 112)

# Mirrored rows of the apple digest, flattened
APPLE_GRID_VALUES = [
    31, 56, 112, 56, 31,
    190, 39, 79, 39, 190,
    108, 73, 179, 73, 108,
    227, 26, 12, 26, 227,
    103, 40, 149, 40, 103,
]

# Cells of the apple grid holding an even value
APPLE_EVEN_INDICES = [1, 2, 3, 5, 9, 10, 14, 16, 17, 18, 21, 23]
