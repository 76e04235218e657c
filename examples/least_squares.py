"""
Cubic fit a + b*x + c*x^2 + d*x^3 through four points by least squares,
coefficients = inv(A.T @ A) @ A.T @ b.

Expected: a = 2.7, b = 3.5, c = -3.83, d = 5.0
"""

from pymat import Matrix


def main():
    A = Matrix([
        [1, -2, 4, -8],
        [1, 0.7, 0.49, 0.343],
        [1, 1.2, 1.44, 1.728],
        [1, 3, 9, 27],
    ])
    b = Matrix([[-59.62, 4.9883, 10.0248, 113.73]]).T

    coefficients = A.T.multiply(A).inv().multiply(A.T).multiply(b)
    for name, value in zip("abcd", coefficients):
        print(f"{name} = {value:.6f}")


if __name__ == "__main__":
    main()
