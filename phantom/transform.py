"""Transforms: one or more 4x4 matrices attached to nodes, skins or skeletons."""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from phantom.base import SceneBaseObject
from phantom.types import SceneObjectType


def translation_matrix(x: float, y: float, z: float) -> np.ndarray:
    """A 4x4 matrix that translates column vectors by (x, y, z)."""
    mat = np.identity(4)
    mat[0:3, 3] = (x, y, z)
    return mat


def _as_matrix(value) -> Optional[np.ndarray]:
    arr = np.asarray(value, dtype=float)
    return arr.copy() if arr.shape == (4, 4) else None


class SceneObjectTransform(SceneBaseObject):
    """Holds transformation matrices; nodes use only the first one."""

    def __init__(self, owner: str, matrix=None, object_only: bool = False) -> None:
        super().__init__(SceneObjectType.TRANSFORM)
        self.owner = owner
        self.object_only = object_only
        self._matrices: List[np.ndarray] = []
        if matrix is not None:
            self.append_matrix(matrix)

    @property
    def matrices(self) -> List[np.ndarray]:
        """All matrices, in insertion order."""
        return self._matrices

    def matrix_first(self) -> np.ndarray:
        """The first matrix; raises IndexError when there is none."""
        return self._matrices[0]

    def update(self, amount) -> None:
        """Replace the first matrix; a plain transform only accepts a 4x4 matrix."""
        matrix = _as_matrix(amount)
        if matrix is None:
            raise TypeError("a plain transform can only be updated with a 4x4 matrix")
        self._set_first(matrix)

    def append_matrix(self, matrix) -> None:
        """Add another matrix, e.g. one per skeleton bone."""
        mat = _as_matrix(matrix)
        if mat is None:
            raise ValueError("a transform matrix must be 4x4")
        self._matrices.append(mat)

    def _set_first(self, matrix: np.ndarray) -> None:
        if self._matrices:
            self._matrices[0] = matrix
        else:
            self._matrices.append(matrix)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(owner={self.owner!r}, matrices={len(self._matrices)})"


class SceneObjectTranslation(SceneObjectTransform):
    """A translation, either along all three axes or along a single one."""

    _AXES = ("x", "y", "z")

    def __init__(
        self,
        owner: str,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        object_only: bool = False,
    ) -> None:
        super().__init__(owner, translation_matrix(x, y, z), object_only)
        self.object_type = SceneObjectType.TRANSLATE
        self.axis: Optional[str] = None

    @classmethod
    def along_axis(
        cls, owner: str, axis: str, amount: float, object_only: bool = False
    ) -> "SceneObjectTranslation":
        """A translation by ``amount`` along the named axis ('x', 'y' or 'z')."""
        if axis not in cls._AXES:
            raise ValueError(f"unknown axis {axis!r}")
        result = cls(owner, object_only=object_only)
        result.axis = axis
        result._translate_axis(amount)
        return result

    def update(self, amount) -> None:
        """Take a scalar (single-axis only), a 3-vector, or a full 4x4 matrix."""
        arr = np.asarray(amount, dtype=float)
        if arr.shape == ():
            if self.axis is None:
                raise ValueError("a scalar update needs a single-axis translation")
            self._translate_axis(float(arr))
        elif arr.shape == (3,):
            self._set_first(translation_matrix(*arr))
        elif arr.shape == (4, 4):
            self._set_first(arr.copy())
        else:
            raise TypeError(f"cannot update a translation with shape {arr.shape}")

    def _translate_axis(self, amount: float) -> None:
        offsets = [0.0, 0.0, 0.0]
        offsets[self._AXES.index(self.axis)] = amount
        self._set_first(translation_matrix(*offsets))