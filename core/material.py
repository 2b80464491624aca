import random
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from core.math import Vec3, Ray, random_in_unit_sphere, schlick


class HitRecord:
    def __init__(self, t: float, point: Vec3, normal: Vec3,
                 front_face: bool = True, material: "Material" = None):
        self.t = t
        self.point = point
        self.normal = normal            # unit length, opposes the incoming ray
        self.front_face = front_face    # True when the ray arrived from outside
        self.material = material

    @classmethod
    def from_outward_normal(cls, ray: Ray, t: float, point: Vec3,
                            outward_normal: Vec3, material: "Material" = None):
        """Build a record whose normal is flipped to face against ``ray``."""
        front_face = ray.direction.dot(outward_normal) < 0
        normal = outward_normal if front_face else -outward_normal
        return cls(t, point, normal, front_face, material)


ScatterResult = Optional[Tuple[Vec3, Ray]]


def _check_albedo(albedo: Vec3):
    for i, component in enumerate(albedo):
        if component < 0.0 or component > 1.0:
            raise ValueError(
                f"Albedo component {i} = {component} is outside [0, 1]"
            )


class Material(ABC):
    @abstractmethod
    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> ScatterResult:
        """Return ``(attenuation, scattered_ray)``, or None if the ray is absorbed."""


class Lambertian(Material):
    def __init__(self, albedo: Vec3):
        _check_albedo(albedo)
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> ScatterResult:
        direction = rec.normal + random_in_unit_sphere(rng)
        if direction.near_zero():
            direction = rec.normal
        return self.albedo, Ray(rec.point, direction)

    def __repr__(self):
        return f"Lambertian({self.albedo!r})"


class Metal(Material):
    def __init__(self, albedo: Vec3, fuzz: float = 0.0):
        _check_albedo(albedo)
        self.albedo = albedo
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> ScatterResult:
        reflected = ray_in.direction.reflect(rec.normal)
        if self.fuzz > 0.0:
            reflected = reflected + random_in_unit_sphere(rng) * self.fuzz
        # fuzz can push the reflection below the surface; treat that as absorbed
        if reflected.dot(rec.normal) <= 0:
            return None
        return self.albedo, Ray(rec.point, reflected)

    def __repr__(self):
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"


class Dielectric(Material):
    def __init__(self, refraction_index: float):
        if refraction_index < 1.0:
            raise ValueError(
                f"Index of refraction = {refraction_index} is less than 1.0"
            )
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> ScatterResult:
        attenuation = Vec3(1.0, 1.0, 1.0)
        # matched media: no interface to reflect from
        if self.refraction_index == 1.0:
            return attenuation, Ray(rec.point, ray_in.direction)

        ratio =1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)

        did_refract, refracted = unit_direction.refract(rec.normal, ratio)
        if not did_refract or rng.random() < schlick(cos_theta, ratio):
            direction = unit_direction.reflect(rec.normal)
        else:
            direction = refracted

        return attenuation, Ray(rec.point, direction)

    def __repr__(self):
        return f"Dielectric({self.refraction_index})"
