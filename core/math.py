import math
import random


class Vec3:
    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other):
        return Vec3(self.x + other.x,
                    self.y + other.y,
                    self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x,
                    self.y - other.y,
                    self.z - other.z)

    def __mul__(self, t):
        # scalar or component-wise (Hadamard) product
        if isinstance(t, Vec3):
            return Vec3(self.x * t.x,
                        self.y * t.y,
                        self.z * t.z)
        return Vec3(self.x * t, self.y * t, self.z * t)

    __rmul__ = __mul__

    def __truediv__(self, t):
        return Vec3(self.x / t, self.y / t, self.z / t)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_squared(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self):
        return math.sqrt(self.length_squared())

    def normalize(self):
        l = self.length()
        if l == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / l

    def sqrt(self):
        """Component-wise square root, used for gamma correction."""
        return Vec3(math.sqrt(self.x), math.sqrt(self.y), math.sqrt(self.z))

    def near_zero(self, eps=1e-8):
        return abs(self.x) < eps and abs(self.y) < eps and abs(self.z) < eps

    def reflect(self, normal):
        # r = v - 2 * dot(v, n) * n
        return self - normal * (2 * self.dot(normal))

    def refract(self, normal, ni_over_nt):
        """Bend this direction through a surface with Snell's law.

        ``normal`` must oppose the direction. Returns ``(True, refracted)``,
        or ``(False, None)`` on total internal reflection.
        """
        uv = self.normalize()
        dt = uv.dot(normal)
        discr = 1.0 - ni_over_nt * ni_over_nt * (1 - dt * dt)
        if discr > 0:
            refracted = (uv - normal * dt) * ni_over_nt - normal * math.sqrt(discr)
            return True, refracted
        else:
            return False, None

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


class Ray:
    def __init__(self, origin: Vec3, direction: Vec3):
        self.origin = origin
        self.direction = direction.normalize()

    def at(self, t):
        return self.origin + self.direction * t

    def __repr__(self):
        return f"Ray({self.origin!r}, {self.direction!r})"


def random_in_unit_sphere(rng=random) -> Vec3:
    """Rejection-sample a point strictly inside the unit sphere."""
    while True:
        p = Vec3(rng.uniform(-1.0, 1.0),
                 rng.uniform(-1.0, 1.0),
                 rng.uniform(-1.0, 1.0))
        if p.length_squared() < 1.0:
            return p


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's polynomial estimate of Fresnel reflectance."""
    r0 = ((1.0 - ref_idx) / (1.0 + ref_idx)) ** 2
    return r0 + (1.0 - r0) * ((1.0 - cosine) ** 5)
