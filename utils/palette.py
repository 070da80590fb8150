# utils/palette.py
import numpy as np


def build_palette(target: np.ndarray, uniform: bool = False) -> np.ndarray:
    """
    Candidate colours taken from the target image.

    Args:
        target (np.ndarray): uint8 RGB image, shape (H, W, 3).
        uniform (bool): If True, keep one entry per distinct colour (sorted),
            so sampling is uniform over colours instead of over pixels.

    Returns:
        np.ndarray: uint8 array of shape (N, 3), scan order when not uniform.
    """
    palette = np.ascontiguousarray(target, dtype=np.uint8).reshape(-1, 3)
    if uniform and len(palette):
        # lexicographic sort on (r, g, b), then drop consecutive repeats
        order = np.lexsort((palette[:, 2], palette[:, 1], palette[:, 0]))
        palette = palette[order]
        keep = np.ones(len(palette), bool)
        keep[1:] = np.any(palette[1:] != palette[:-1], axis=1)
        palette = palette[keep]
    return palette.copy()
