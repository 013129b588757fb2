"""Heatmap expressions."""

from .base import Expression


def heatmap_density() -> Expression:
    """
    Gets the kernel density estimation of a pixel in a heatmap layer.

    This is a relative measure of how many data points are crowded around a
    particular pixel. Only meaningful in the heatmap-color property.
    """
    return Expression("heatmap-density")
