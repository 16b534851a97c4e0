"""Choosing a square region of a picture and turning it into a round avatar."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageChops, ImageDraw

VIEW_SIZE = 600  # the picture is shown inside a VIEW_SIZE x VIEW_SIZE area
WINDOW_HEIGHT = 800  # the area plus room for the instructions and the button
ZOOM_STEP = 10
AVATAR_SIZE = 128
_SUPERSAMPLE = 4


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _fit(width: int, height: int, box_width: int, box_height: int) -> tuple[int, int]:
    """Largest size with the same aspect ratio that fits in the box."""
    scaled_width = box_height * width // height
    if scaled_width <= box_width:
        size = (scaled_width, box_height)
    else:
        size = (box_width, box_width * height // width)
    return max(size[0], 1), max(size[1], 1)


def _scale_to_fit(image: Image.Image, box_width: int, box_height: int) -> Image.Image:
    if image.width <= 0 or image.height <= 0:
        raise ValueError("the picture is empty")
    size = _fit(image.width, image.height, box_width, box_height)
    return image.resize(size, Image.Resampling.LANCZOS)


class CropSelection:
    """A square selection over a picture shown scaled into the view.

    The selection is kept in view coordinates with inclusive corners
    (left, top) and (right, bottom); it can be dragged and resized with
    the wheel, and is clamped to the shown picture.
    """

    def __init__(self, image: Image.Image) -> None:
        self.original = image
        self.preview = _scale_to_fit(image, VIEW_SIZE, VIEW_SIZE)
        self.scale_factor = self.preview.width / image.width
        self.dragging = False
        self._last: tuple[int, int] = (0, 0)

        side = min(self.preview.width // 2, self.preview.height // 2)
        rect_width = self.preview.width // 2
        rect_height = self.preview.height // 2
        self._x1 = (VIEW_SIZE - rect_width) // 2
        self._y1 = (WINDOW_HEIGHT - rect_height) // 2
        self._x2 = self._x1 + side - 1
        self._y2 = self._y1 + side - 1

    @property
    def left(self) -> int:
        return self._x1

    @property
    def top(self) -> int:
        return self._y1

    @property
    def right(self) -> int:
        return self._x2

    @property
    def bottom(self) -> int:
        return self._y2

    @property
    def width(self) -> int:
        return self._x2 - self._x1 + 1

    @property
    def height(self) -> int:
        return self._y2 - self._y1 + 1

    @property
    def rect(self) -> tuple[int, int, int, int]:
        """The selection as (left, top, width, height)."""
        return (self.left, self.top, self.width, self.height)

    @property
    def center(self) -> tuple[int, int]:
        return (_trunc_div(self._x1 + self._x2, 2), _trunc_div(self._y1 + self._y2, 2))

    def contains(self, x: int, y: int) -> bool:
        return self._x1 <= x <= self._x2 and self._y1 <= y <= self._y2

    def press(self, x: int, y: int) -> None:
        """Start dragging when the pointer goes down inside the selection."""
        self._last = (x, y)
        if self.contains(x, y):
            self.dragging = True

    def move(self, x: int, y: int) -> None:
        """Follow the pointer while dragging."""
        if not self.dragging:
            return
        dx = x - self._last[0]
        dy = y - self._last[1]
        self._x1 += dx
        self._x2 += dx
        self._y1 += dy
        self._y2 += dy
        self._clamp()
        self._last = (x, y)

    def release(self) -> None:
        self.dragging = False

    def wheel(self, delta: int) -> None:
        """Grow the selection for a positive delta, shrink it for a negative one."""
        half = ZOOM_STEP // 2
        center = self.center
        if delta > 0:
            x1, y1 = self._x1 - half, self._y1 - half
            x2, y2 = self._x2 + half, self._y2 + half
            if x2 - x1 + 1 <= self.preview.width and y2 - y1 + 1 <= self.preview.height:
                self._x1, self._y1, self._x2, self._y2 = x1, y1, x2, y2
        elif delta < 0:
            if self.width >= ZOOM_STEP and self.height >= ZOOM_STEP:
                self._x1 += half
                self._y1 += half
                self._x2 -= half
                self._y2 -= half
        self._move_center(*center)
        self._clamp()

    def _move_center(self, cx: int, cy: int) -> None:
        w = self._x2 - self._x1
        h = self._y2 - self._y1
        self._x1 = cx - _trunc_div(w, 2)
        self._y1 = cy - _trunc_div(h, 2)
        self._x2 = self._x1 + w
        self._y2 = self._y1 + h

    def _clamp(self) -> None:
        sw, sh = self.preview.width, self.preview.height
        w = self._x2 - self._x1
        h = self._y2 - self._y1

        self._x1 = max(self._x1, (VIEW_SIZE - sw) // 2)
        self._x2 = self._x1 + w
        self._y1 = max(self._y1, (VIEW_SIZE - sh) // 2)
        self._y2 = self._y1 + h
        self._x2 = min(self._x2, (VIEW_SIZE + sw) // 2)
        self._x1 = self._x2 - w
        self._y2 = min(self._y2, (VIEW_SIZE + sh) // 2)
        self._y1 = self._y2 - h

    def cropped(self) -> Image.Image:
        """The part of the original picture under the selection."""
        offset_x = (VIEW_SIZE - self.preview.width) // 2
        offset_y = (VIEW_SIZE - self.preview.height) // 2
        left = int((self.left - offset_x) / self.scale_factor)
        top = int((self.top - offset_y) / self.scale_factor)
        width = int(self.width / self.scale_factor)
        height = int(self.height / self.scale_factor)

        if width <= 0 or height <= 0:
            return self.original.copy()
        box_left = max(left, 0)
        box_top = max(top, 0)
        box_right = min(left + width, self.original.width)
        box_bottom = min(top + height, self.original.height)
        if box_right <= box_left or box_bottom <= box_top:
            raise ValueError("the selection lies outside the picture")
        return self.original.crop((box_left, box_top, box_right, box_bottom))


def make_avatar(image: Image.Image) -> Image.Image:
    """A round AVATAR_SIZE picture, transparent outside the circle."""
    scaled = _scale_to_fit(image, AVATAR_SIZE, AVATAR_SIZE).convert("RGBA")

    tiled = Image.new("RGBA", (AVATAR_SIZE, AVATAR_SIZE), (0, 0, 0, 0))
    for x in range(0, AVATAR_SIZE, scaled.width):
        for y in range(0, AVATAR_SIZE, scaled.height):
            tiled.paste(scaled, (x, y))

    big = AVATAR_SIZE * _SUPERSAMPLE
    mask = Image.new("L", (big, big), 0)
    ImageDraw.Draw(mask).ellipse((0, 0, big - 1, big - 1), fill=255)
    mask = mask.resize((AVATAR_SIZE, AVATAR_SIZE), Image.Resampling.LANCZOS)

    tiled.putalpha(ImageChops.multiply(tiled.getchannel("A"), mask))
    return tiled


def save_avatar(image: Image.Image, uid: str, directory: str | Path = ".") -> Path:
    """Make the avatar of ``image`` and save it as ``<uid>.png``."""
    if not uid:
        raise ValueError("an avatar needs a user id")
    path = Path(directory) / f"{uid}.png"
    make_avatar(image).save(path, "PNG")
    return path