"""Inverse of a 4x4 matrix by adjugate over determinant."""

import numpy as np

from pymat import Matrix


def main():
    M = Matrix([
        [5, -2, 2, 7],
        [1, 0, 0, 3],
        [-3, 1, 5, 0],
        [3, -1, -9, 4],
    ])
    print(f"det(M) = {M.det():g}")
    M_inv = M.inv()
    print(M_inv)
    print("M @ inv(M) == I:", np.allclose((M @ M_inv).arr, np.eye(4)))


if __name__ == "__main__":
    main()
