"""Catalog of constants that produce well-known Julia sets."""

JULIA_SETS = (
    complex(-0.4, 0.6),
    complex(-0.835, -0.321),
    complex(0.285, 0.0),
    complex(0.285, 0.01),
    complex(0.45, 0.1428),
    complex(-0.70176, -0.3842),
    complex(-0.835, -0.2321),
    complex(-0.8, 0.156),
    complex(-0.7269, 0.1889),
    complex(0.0, 0.8),
    complex(0.35, 0.35),
    complex(0.4, 0.4),
)

DEFAULT_CONSTANT_INDEX = 1


def select_constant(index: int) -> complex:
    if not 0 <= index < len(JULIA_SETS):
        raise IndexError(f"constant index must be between 0 and {len(JULIA_SETS) - 1}, got {index}")
    return JULIA_SETS[index]
