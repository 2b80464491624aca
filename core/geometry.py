import math
from abc import ABC, abstractmethod
from typing import Optional

from core.math import Vec3, Ray
from core.material import Material, HitRecord


class Hittable(ABC):
    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        pass


class Sphere(Hittable):
    def __init__(self, center: Vec3, radius: float, material: Material):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - a * c
        if discriminant < 0:
            return None

        sqrt_d = math.sqrt(discriminant)
        # nearer root first, then the farther one
        for temp in ((-b - sqrt_d) / a, (-b + sqrt_d) / a):
            if t_min < temp < t_max:
                point = ray.at(temp)
                outward_normal = (point - self.center) / self.radius
                return HitRecord.from_outward_normal(
                    ray, temp, point, outward_normal, self.material)
        return None

    def __repr__(self):
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
