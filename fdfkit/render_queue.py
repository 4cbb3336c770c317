"""Draw calls for image instances and ordering them by depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["DrawCall", "sort_render_queue", "remove_image_calls"]


@dataclass(eq=False)
class DrawCall:
    """A request to draw one instance of an image."""

    image: Any
    instance_id: int

    def z(self) -> int:
        """Current depth of the instance this call draws."""
        return self.image.instances[self.instance_id].z


def sort_render_queue(queue: list[DrawCall]) -> None:
    """Sort ``queue`` in place by ascending depth.

    Calls of equal depth end up in the reverse of their previous order,
    each one being inserted before those already placed at its depth.
    """
    queue[:] = sorted(reversed(queue), key=DrawCall.z)


def remove_image_calls(queue: list[DrawCall], image: Any) -> list[DrawCall]:
    """Remove every call that draws ``image`` (by identity) and return them in order."""
    removed = [call for call in queue if call.image is image]
    queue[:] = [call for call in queue if call.image is not image]
    return removed