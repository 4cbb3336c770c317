"""C-style text, memory, list, line-reading and printf helpers with pixel and render-queue utilities."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numbers",
    "output",
    "memory",
    "linked",
    "strings",
    "lines",
    "printf",
    "render_queue",
    "mlx_utils",
]