"""Formal pipeline invariants.

This file documents what each stage MUST produce. Use it as a reviewer
anchor and system reference.
"""

PIPELINE_INVARIANTS = {
    "hash": [
        "Digest is a tuple of ints in 0..255",
        "Digest length is fixed by the algorithm (16 bytes for md5)",
        "Same input bytes always give the same digest",
    ],

    "color": [
        "Color is (hash[0], hash[1], hash[2]) verbatim",
        "Hashes shorter than 3 bytes raise InsufficientDataError",
    ],

    "grid": [
        "Rows are 3-byte chunks mirrored to [a, b, c, b, a]",
        "Trailing bytes that do not fill a chunk are discarded",
        "Indices are dense from 0 over the unfiltered sequence",
    ],

    "filter": [
        "Only even values survive",
        "Order and original indices are preserved (no renumbering)",
    ],

    "pixel_map": [
        "One rectangle per surviving cell, in grid order",
        "col = index % cols, row = index // cols",
        "Every rectangle is a cell_size square inside the canvas",
    ],

    "render": [
        "Canvas is cols * cell_size on each side",
        "Rectangles outside [0, width] x [0, height] are rejected, never dropped",
        "Rectangles are filled inclusive of both corners; only the far border pixel is clipped",
        "Encoding is deterministic for identical records",
    ],

    "persist": [
        "File name is <name>.<format> in the output directory",
        "Write is atomic: either the full file exists or nothing changed",
    ],
}

# Which stages are optional vs required
STAGE_REQUIREMENTS = {
    "hash": "REQUIRED",
    "color": "REQUIRED",
    "grid": "REQUIRED",
    "filter": "REQUIRED",
    "pixel_map": "REQUIRED",
    "render": "REQUIRED",
    "persist": "OPTIONAL",   # process() stops at the encoded bytes
}
