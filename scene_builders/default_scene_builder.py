from core.math import Vec3
from core.material import Material, Lambertian, Metal, Dielectric
from core.geometry import Sphere
from core.scene import Scene, RenderSettings
from core.camera import Camera


class DefaultSceneBuilder:
    """Three small spheres (glass, diffuse, gold) resting on a large ground sphere."""

    def __init__(self):
        self.sphere_radius = 0.5
        self.ground_radius = 100.0
        self.row_z = -1.0   # all three spheres sit one unit down the view axis

    def build_scene(self) -> Scene:
        scene = Scene()
        materials = self._create_materials()
        self._create_ground(scene, materials)
        self._create_spheres(scene, materials)
        return scene

    def create_camera(self, settings: RenderSettings) -> Camera:
        return Camera.from_settings(settings, origin=Vec3(0, 0, 0))

    def _create_materials(self) -> dict:
        return {
            'ground': Lambertian(Vec3(0.8, 0.8, 0.0)),
            'glass': Dielectric(1.5),
            'gold': Metal(Vec3(0.8, 0.6, 0.2), 0.0),
            'matte_blue': Lambertian(Vec3(0.1, 0.2, 0.5)),
        }

    def _create_ground(self, scene: Scene, materials: dict):
        # top of the ground sphere touches the bottom of the small spheres
        center = Vec3(0.0, -(self.ground_radius + self.sphere_radius), self.row_z)
        scene.add_object(Sphere(center, self.ground_radius, materials['ground']))

    def _create_spheres(self, scene: Scene, materials: dict):
        row = [
            (-1.0, materials['glass']),
            (1.0, materials['gold']),
            (0.0, materials['matte_blue']),
        ]
        for x, material in row:
            self._add_sphere(scene, Vec3(x, 0.0, self.row_z), material)

    def _add_sphere(self, scene: Scene, center: Vec3, material: Material):
        scene.add_object(Sphere(center, self.sphere_radius, material))
