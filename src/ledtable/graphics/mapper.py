"""Map normalized scalar fields to pixel buffers."""

import numpy as np
from numpy.typing import NDArray

from ledtable.graphics.color import ColorGradient


def image_from_gradient(
    gradient: NDArray[np.float64], color: ColorGradient
) -> NDArray[np.uint8]:
    """Apply a palette to every element of a field.

    Args:
        gradient: Flat field, row-major
        color: Palette function

    Returns:
        uint8 array of shape (len(gradient), 3), same ordering as the field
    """
    image = np.zeros((len(gradient), 3), dtype=np.uint8)
    for i, value in enumerate(gradient):
        image[i] = color(float(value))
    return image
