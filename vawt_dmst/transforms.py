import numpy as np

class Rotation2D:

    def __init__(self, angle):
        """
        Args:
            angle (float): Rotation angle in radians (counter-clockwise)
        """
        self._angle = float(angle)
        self._cos = np.cos(self._angle)
        self._sin = np.sin(self._angle)

    @property
    def angle(self):
        return self._angle

    def __call__(self, vec):

        """Apply the transformation to the supplied vector

        Args:
            vec (sequence): (x, y) vector to transform
        Return:
            rot_vec (tuple): Rotated (x, y) vector
        """
        x, y = vec
        return (self._cos*x - self._sin*y,
                self._sin*x + self._cos*y)

    def inverted(self):
        """Return inverted rotation

        Return:
            rot_inv (Rotation2D): Inverted Rotation2D

        """
        return Rotation2D(-self._angle)

    def inverse_transform(self, vec):

        """Apply inverse transformation to the supplied vector

        Args:
            vec (sequence): (x, y) vector to transform
        Return:
            rot_vec (tuple): Rotated (x, y) vector
        """
        x, y = vec
        return (self._cos*x + self._sin*y,
                -self._sin*x + self._cos*y)

    def __mul__(self, rot_2):

        """Create a composition of this rotation with rot_2

        Args:
            rot_2 (Rotation2D): Rotation applied first

        Return:
            rot_3 (Rotation2D): Composition of self * rot_2
        """
        return Rotation2D(self._angle + rot_2._angle)


def rot_vec(x, y, angle):
    """Rotate the vector (x, y) by angle (radians)"""
    return Rotation2D(angle)((x, y))
