from typing import List, Optional
from dataclasses import dataclass
from core.math import Ray
from core.material import HitRecord
from core.geometry import Hittable


@dataclass
class RenderSettings:
    aspect_ratio: float = 16.0 / 9.0
    image_height: int = 400
    viewport_height: float = 2.0
    focal_length: float = 1.0
    samples_per_pixel: int = 100
    max_depth: int = 50
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("aspect_ratio", "image_height", "viewport_height",
                     "focal_length", "samples_per_pixel", "max_depth"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.image_width < 1:
            raise ValueError(
                f"image_height={self.image_height} with aspect_ratio="
                f"{self.aspect_ratio} gives an empty image"
            )

    @property
    def image_width(self) -> int:
        return int(self.image_height * self.aspect_ratio)

    @property
    def viewport_width(self) -> float:
        return self.viewport_height * self.aspect_ratio


class Scene:
    def __init__(self):
        self.objects: List[Hittable] = []

    def add_object(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self):
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def closest_hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Nearest intersection over all objects, or None.

        Each accepted hit shrinks the interval, so later objects only count
        when they are strictly closer.
        """
        closest = None
        closest_so_far = t_max

        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                closest = rec

        return closest
