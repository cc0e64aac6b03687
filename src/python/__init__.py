"""Python implementation of the ray tracer kernel.

This package provides the numeric foundation of the ray tracer:
- Homogeneous tuple algebra for points, vectors and colours
- A row-major colour canvas
- Plain-text PPM encoding and PNG export

Subpackages:
    core: Epsilon equality, tuple algebra and the 4x4 matrix container
    canvas: Pixel storage with bounds-checked writes
    preview: PPM encoding, file export and Matplotlib preview
"""

__version__ = "0.1.0"
