"""Sobol quasi random sequence in up to six dimensions."""

from __future__ import annotations

_MAXBIT = 30
_MAXDIM = 6
_MDEG = (1, 2, 3, 3, 4, 4)
_IP = (0, 1, 1, 2, 1, 4)
_IV0 = (1, 1, 1, 1, 1, 1, 3, 1, 3, 3, 1, 1, 5, 7, 7, 3, 3, 5, 15, 11, 5, 15, 13, 9)


class Sobol:
    """Generator of Sobol points with coordinates in the open interval (0, 1)."""

    def __init__(self, dim: int) -> None:
        if not 1 <= dim <= _MAXDIM:
            raise ValueError(f"Sobol: dimension must be in 1..{_MAXDIM}, not {dim}")
        self.dim = dim
        self._fac = 1.0 / (1 << _MAXBIT)
        self._count = 0
        self._ix = [0] * _MAXDIM
        flat = list(_IV0) + [0] * (_MAXBIT * _MAXDIM - len(_IV0))
        iv = [flat[j * _MAXDIM:(j + 1) * _MAXDIM] for j in range(_MAXBIT)]
        for k in range(_MAXDIM):
            mdeg = _MDEG[k]
            for j in range(mdeg):
                iv[j][k] <<= _MAXBIT - 1 - j
            for j in range(mdeg, _MAXBIT):
                ipp = _IP[k]
                i = iv[j - mdeg][k]
                i ^= i >> mdeg
                for step in range(mdeg - 1, 0, -1):
                    if ipp & 1:
                        i ^= iv[j - step][k]
                    ipp >>= 1
                iv[j][k] = i
        self._iv = iv

    def __call__(self) -> list[float]:
        """Return the next point of the sequence."""
        im = self._count
        self._count += 1
        j = 0
        while j < _MAXBIT and im & 1:
            im >>= 1
            j += 1
        if j >= _MAXBIT:
            raise RuntimeError("Sobol: maxbit too small")
        row = self._iv[j]
        rv = []
        for k in range(self.dim):
            self._ix[k] ^= row[k]
            rv.append(self._ix[k] * self._fac)
        return rv