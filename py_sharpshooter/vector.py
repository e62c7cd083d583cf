import math
from dataclasses import dataclass
from typing import Union

__all__ = ('Vector',)


@dataclass(frozen=True)
class Vector:
    """
    Position or velocity of a projectile in the shooter frame.

    Attributes:
        x: downrange distance
        y: vertical, up positive
        z: horizontal, right positive
    """

    x: float
    y: float
    z: float

    def magnitude(self) -> float:
        """
        Returns:
            magnitude of Vector instance
        """
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def mul_by_const(self, a: float) -> 'Vector':
        """
        Args:
            a: float constant
        Returns:
            Vector instance
        """
        return Vector(self.x * a, self.y * a, self.z * a)

    def mul_by_vector(self, b: 'Vector') -> float:
        """
        Args:
            b: other Vector instance
        Returns:
            dot product of two Vector instances
        """
        return self.x * b.x + self.y * b.y + self.z * b.z

    def add(self, b: 'Vector') -> 'Vector':
        return Vector(self.x + b.x, self.y + b.y, self.z + b.z)

    def subtract(self, b: 'Vector') -> 'Vector':
        return Vector(self.x - b.x, self.y - b.y, self.z - b.z)

    def negate(self) -> 'Vector':
        return Vector(-self.x, -self.y, -self.z)

    def normalize(self) -> 'Vector':
        """
        Returns:
            Normalized Vector instance, or a copy of a (near) zero vector
        """
        m = self.magnitude()
        if math.fabs(m) < 1e-10:
            return Vector(self.x, self.y, self.z)
        return self.mul_by_const(1.0 / m)

    def lerp(self, b: 'Vector', fraction: float) -> 'Vector':
        """
        Args:
            b: end point
            fraction: 0 returns self, 1 returns b
        Returns:
            Linear interpolation between two Vector instances
        """
        return Vector(self.x + (b.x - self.x) * fraction,
                      self.y + (b.y - self.y) * fraction,
                      self.z + (b.z - self.z) * fraction)

    def __mul__(self, other: Union[int, float, 'Vector']) -> Union[float, 'Vector']:
        if isinstance(other, (int, float)):
            return self.mul_by_const(other)
        if isinstance(other, Vector):
            return self.mul_by_vector(other)
        raise TypeError(other)

    # aliases more efficient than wrappers
    __add__ = add
    __radd__ = add
    __iadd__ = add
    __sub__ = subtract
    __isub__ = subtract
    __rmul__ = __mul__
    __imul__ = __mul__
    __neg__ = negate
