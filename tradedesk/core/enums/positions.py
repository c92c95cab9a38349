"""Position definitions for Australian rules football players."""

from enum import Enum


class Position(Enum):
    """Individual on-field positions (primary position of a player)."""

    # Defence
    BP = "BP"  # Back Pocket
    FB = "FB"  # Full Back
    HBF = "HBF"  # Half Back Flank
    CHB = "CHB"  # Centre Half Back

    # Midfield
    W = "W"  # Wing
    IM = "IM"  # Inside Midfielder
    OM = "OM"  # Outside Midfielder
    RK = "RK"  # Ruck

    # Forward
    HFF = "HFF"  # Half Forward Flank
    CHF = "CHF"  # Centre Half Forward
    FP = "FP"  # Forward Pocket
    FF = "FF"  # Full Forward


# Positions that attract a premium on the open market
PREMIUM_POSITIONS = frozenset({
    Position.IM,
    Position.OM,
    Position.FF,
    Position.CHF,
    Position.HFF,
})
