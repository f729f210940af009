"""A caching loader for images, fonts and audio samples."""

from __future__ import annotations

import weakref
from pathlib import Path
from typing import Any, Callable

import pygame

from siegeengine.log import LogType, Logger, logger as default_logger

BitmapLoader = Callable[[str], Any]
BitmapScaler = Callable[[Any, tuple[int, int]], Any]
FontLoader = Callable[[str, int], Any]
SampleLoader = Callable[[str], Any]


class ResourceError(RuntimeError):
    """Raised when a resource cannot be loaded or created."""


def _load_bitmap(path: str) -> Any:
    return pygame.image.load(path)


def _scale_bitmap(surface: Any, size: tuple[int, int]) -> Any:
    return pygame.transform.scale(surface, size)


def _load_font(path: str, font_size: int) -> Any:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, font_size)


def _load_sample(path: str) -> Any:
    return pygame.mixer.Sound(path)


class Resources:
    """Loads resources on first use and keeps them until released.

    Images live under ``<root>/images``, fonts under ``<root>/fonts`` and
    audio under ``<root>/audios``.
    """

    def __init__(
        self,
        root: str | Path = "resources",
        *,
        bitmap_loader: BitmapLoader | None = None,
        bitmap_scaler: BitmapScaler | None = None,
        font_loader: FontLoader | None = None,
        sample_loader: SampleLoader | None = None,
        log: Logger | None = None,
    ) -> None:
        root = Path(root)
        self.bitmap_dir = root / "images"
        self.font_dir = root / "fonts"
        self.sample_dir = root / "audios"
        self._load_bitmap = bitmap_loader or _load_bitmap
        self._scale_bitmap = bitmap_scaler or _scale_bitmap
        self._load_font = font_loader or _load_font
        self._load_sample = sample_loader or _load_sample
        self._log = log if log is not None else default_logger
        self._bitmaps: dict[str, Any] = {}
        self._fonts: dict[str, Any] = {}
        self._samples: dict[str, Any] = {}

    def get_bitmap(self, name: str, width: int | None = None, height: int | None = None) -> Any:
        """Return the named image, scaled to width x height when both are given."""
        scaled = width is not None and height is not None
        key = f"{name}?{int(width)}x{int(height)}" if scaled else name
        if key in self._bitmaps:
            return self._bitmaps[key]
        path = str(self.bitmap_dir / name)
        try:
            bitmap = self._load_bitmap(path)
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"failed to load image: {path}") from exc
        if scaled:
            try:
                bitmap = self._scale_bitmap(bitmap, (int(width), int(height)))
            except (ValueError, pygame.error) as exc:
                raise ResourceError(
                    f"failed to create bitmap when creating resized image: {path}"
                ) from exc
            self._log.log(
                LogType.INFO, "Loaded Resource<image>: ", path,
                " scaled to ", int(width), "x", int(height),
            )
        else:
            self._log.log(LogType.INFO, "Loaded Resource<image>: ", path)
        self._bitmaps[key] = bitmap
        return bitmap

    def get_font(self, name: str, font_size: int) -> Any:
        """Return the named font at the given size."""
        key = f"{name}?{int(font_size)}"
        if key in self._fonts:
            return self._fonts[key]
        path = str(self.font_dir / name)
        try:
            font = self._load_font(path, int(font_size))
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"failed to load font: {path}") from exc
        self._log.log(LogType.INFO, "Loaded Resource<font>: ", path, " with size ", int(font_size))
        self._fonts[key] = font
        return font

    def get_sample(self, name: str) -> Any:
        """Return the named audio sample."""
        if name in self._samples:
            return self._samples[name]
        path = str(self.sample_dir / name)
        try:
            sample = self._load_sample(path)
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"failed to load audio: {path}") from exc
        self._log.log(LogType.INFO, "Loaded Resource<audio>: ", path)
        self._samples[name] = sample
        return sample

    def release_unused(self) -> None:
        """Drop every cached resource that nothing outside the cache still uses."""
        for kind, cache in (("image", self._bitmaps), ("font", self._fonts), ("audio", self._samples)):
            for key in list(cache):
                if self._drop_if_unused(cache, key):
                    self._log.log(LogType.INFO, f"Destroyed Resource<{kind}>: ", key)

    @staticmethod
    def _drop_if_unused(cache: dict[str, Any], key: str) -> bool:
        try:
            ref = weakref.ref(cache[key])
        except TypeError:
            return False
        value = cache.pop(key)
        del value
        survivor = ref()
        if survivor is None:
            return True
        cache[key] = survivor
        return False


resources = Resources()