from typing import Literal

SizeType = Literal["XXS", "XS", "S", "M", "L", "XL", "XXL", "XXXL"]

# (exclusive upper bound in MB, label), ascending
_TIERS: tuple[tuple[float, SizeType], ...] = (
    (20, "XXS"),
    (50, "XS"),
    (100, "S"),
    (175, "M"),
    (300, "L"),
    (500, "XL"),
    (800, "XXL"),
)

SIZE_TYPES: tuple[SizeType, ...] = tuple(label for _, label in _TIERS) + ("XXXL",)


def get_size_type(size: int) -> SizeType:
    """Map a byte count to its size tier."""
    size_mb = size / 1024 / 1024
    for bound, label in _TIERS:
        if size_mb < bound:
            return label
    return "XXXL"
