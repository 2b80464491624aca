import logging
import random
import time
from abc import ABC, abstractmethod
from typing import List
from core.camera import Camera
from core.image import Image, Pixel
from core.math import Vec3
from core.scene import Scene, RenderSettings

logger = logging.getLogger(__name__)


def gamma_correct(color: Vec3) -> Pixel:
    """Approximate gamma-2 mapping of an averaged 0..255 color into a Pixel."""
    return Pixel.from_vec3((color / 255.0).sqrt() * 256.0)


class BaseRenderer(ABC):
    """Scanline driver shared by renderers.

    Subclasses decide how one pixel's color is estimated; the base class
    walks the image bottom-up, gamma-maps each estimate and stores it with
    row 0 at the top.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def render_pixel(self, x: int, y: int, scene: Scene, camera: Camera,
                     settings: RenderSettings, rng=random) -> Vec3:
        """Linear 0..255 color of pixel (x, y), ``y`` counted from the bottom."""

    def render(self, scene: Scene, camera: Camera, settings: RenderSettings) -> Image:
        start_time = time.time()
        width = settings.image_width
        height = settings.image_height

        logger.info("%s render started: %dx%d, %d samples, depth %d, %d objects",
                    self.name, width, height, settings.samples_per_pixel,
                    settings.max_depth, len(scene))

        rng = random.Random(settings.seed)
        image = Image(width, height)

        for j in range(height):
            for i in range(width):
                col = self.render_pixel(i, j, scene, camera, settings, rng)
                image.set_pixel(i, height - 1 - j, gamma_correct(col))

            if j % 50 == 0:
                logger.debug("Scanlines remaining: %d", height - j)

        elapsed = time.time() - start_time
        minutes = int(elapsed // 60)
        seconds = elapsed % 60
        logger.info("%s render finished in %dm %.2fs", self.name, minutes, seconds)

        return image

    def get_name(self) -> str:
        return self.name


class RendererFactory:
    """Name -> renderer class registry."""

    _renderers = {}

    @classmethod
    def register(cls, name: str, renderer_class):
        cls._renderers[name] = renderer_class

    @classmethod
    def create(cls, name: str, **kwargs) -> BaseRenderer:
        if name not in cls._renderers:
            raise ValueError(f"Unknown renderer: {name}")
        return cls._renderers[name](**kwargs)

    @classmethod
    def list_available(cls) -> List[str]:
        return list(cls._renderers.keys())
