def scaled_touch_slop(slop_dp: float, density: float = 1.0) -> float:
    """Drag slop in density-independent units -> surface pixels."""
    if density <= 0:
        raise ValueError(f"density must be > 0, got {density!r}")
    return float(slop_dp) * density
