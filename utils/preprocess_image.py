import os

import cv2
import numpy as np


def load_target(path, size=None):
    """
    Load the image to approximate.

    Args:
        path (str): File path to image.
        size (tuple | None): Optional (height, width) to resize to.

    Returns:
        np.ndarray: RGB uint8 image of shape (H, W, 3).
    """
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise FileNotFoundError(f"Image not found: {path}")

    if size is not None:
        img = cv2.resize(img, (int(size[1]), int(size[0])), interpolation=cv2.INTER_AREA)

    # OpenCV keeps BGR; everything downstream is RGB
    return np.ascontiguousarray(img[..., ::-1])


def new_canvas(shape_hw):
    """Black RGB canvas."""
    h, w = int(shape_hw[0]), int(shape_hw[1])
    return np.zeros((h, w, 3), np.uint8)


def blur_canvas(canvas, amount):
    """Gaussian blur with sigma=amount; amount <= 0 returns an unblurred copy."""
    if amount <= 0:
        return canvas.copy()
    return cv2.GaussianBlur(canvas, (0, 0), sigmaX=float(amount))


def save_canvas(path, canvas):
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    if not cv2.imwrite(path, np.ascontiguousarray(canvas[..., ::-1])):
        raise OSError(f"Could not write image: {path}")
    return path


def frame_path(frames_dir, number, ext=".png"):
    return os.path.join(frames_dir, f"frame-{int(number):05d}{ext}")
