from core.math import Vec3, Ray
from core.scene import RenderSettings


class Camera:
    def __init__(self,
                 origin: Vec3,
                 viewport_height: float,
                 viewport_width: float,
                 focal_length: float):
        self.origin = origin

        self.horizontal = Vec3(viewport_width, 0, 0)
        self.vertical = Vec3(0, viewport_height, 0)
        # viewport sits focal_length down -z, centred on the view axis
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2 -
                                  self.vertical / 2 -
                                  Vec3(0, 0, focal_length))

    @classmethod
    def from_settings(cls, settings: RenderSettings, origin: Vec3 = None) -> "Camera":
        return cls(origin if origin is not None else Vec3(0, 0, 0),
                   settings.viewport_height,
                   settings.viewport_width,
                   settings.focal_length)

    def get_ray(self, u: float, v: float) -> Ray:
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin, direction)
