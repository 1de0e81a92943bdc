# core/vector.py
import math

class Vector3:
    """
    A 3D vector used for points, directions and colors. Supports componentwise
    arithmetic, dot and cross products, normalization, reflection and refraction.

    Instances are treated as values: no operation mutates its operands.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __getitem__(self, axis: int) -> float:
        if axis == 0:
            return self.x
        if axis == 1:
            return self.y
        if axis == 2:
            return self.z
        raise IndexError(f"Vector3 axis out of range: {axis}")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def near_zero(self) -> bool:
        """True if the vector is close to zero in all dimensions."""
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def reflect(self, n: "Vector3") -> "Vector3":
        return self - n * (2 * self.dot(n))

    def refract(self, n: "Vector3", etai_over_etat: float) -> "Vector3":
        """
        Refracts this unit vector through a surface with unit normal n using
        Snell's law, split into the components perpendicular and parallel to n.
        """
        cos_theta = min((-self).dot(n), 1.0)
        r_out_perp = (self + n * cos_theta) * etai_over_etat
        r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
        return r_out_perp + r_out_parallel

    @staticmethod
    def random(rng, minimum: float = 0.0, maximum: float = 1.0) -> "Vector3":
        return Vector3(rng.uniform(minimum, maximum),
                       rng.uniform(minimum, maximum),
                       rng.uniform(minimum, maximum))

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


# Points and colors share the vector representation.
Point3 = Vector3
Color = Vector3
