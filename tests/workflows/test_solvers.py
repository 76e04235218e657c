"""
End-to-end numerical workflows built only from the public API:
polynomial fitting, linear regression, and a Newton-Raphson solve.
"""

import numpy as np
import pytest

from pymat import Matrix, horzcat, linspace, ones


class TestPolynomialFit:
    """a + b*x + c*x^2 + d*x^3 through (-2, -59.62), (0.7, 4.9883),
    (1.2, 10.0248), (3, 113.73)."""

    @pytest.fixture
    def system(self):
        A = Matrix([
            [1, -2, 4, -8],
            [1, 0.7, 0.49, 0.343],
            [1, 1.2, 1.44, 1.728],
            [1, 3, 9, 27],
        ])
        b = Matrix([[-59.62, 4.9883, 10.0248, 113.73]]).T
        return A, b

    def test_normal_equations(self, system):
        A, b = system
        coefficients = A.T.multiply(A).inv().multiply(A.T).multiply(b)
        np.testing.assert_allclose(
            coefficients.arr, [[2.7], [3.5], [-3.83], [5.0]], atol=1e-6
        )

    def test_direct_inverse(self, system):
        A, b = system
        coefficients = A.inv() @ b
        np.testing.assert_allclose(
            coefficients.arr, [[2.7], [3.5], [-3.83], [5.0]], atol=1e-8
        )


class TestLinearRegression:

    def test_closed_form(self):
        x = linspace(0, 5, 100).T
        y = x.multiply(12.5).add(21)
        X = horzcat(ones(x.rows, 1), x)
        beta = (X.T @ X).inv() @ X.T @ y
        np.testing.assert_allclose(beta.arr, [[21.0], [12.5]], rtol=1e-8)

    def test_gradient_descent_reduces_loss(self):
        x = linspace(0, 5, 100).T
        y = x.multiply(12.5).add(21)
        w = Matrix([[0.0]])
        b = 0.0
        losses = []
        for _ in range(50):
            residual = y.diff(x.dot(w).add(b))
            losses.append(residual.copy().pow(2).mean().as_scalar())
            dw = x.T.dot(residual).multiply(-2.0 / y.size())
            db = residual.sum().as_scalar() * (-2.0 / y.size())
            w = w.diff(dw.multiply(0.01))
            b -= 0.01 * db
        assert losses[-1] < losses[0]


class TestNewtonRaphson:
    """x^3 + y = 1, y^3 - x = -1 has the root (1, 0)."""

    def test_converges(self):
        X = Matrix([[0.9], [0.1]])
        err = 1e9
        n = 0
        while err > 1e-10 and n < 100:
            x, y = X.get(0, 0), X.get(1, 0)
            f = Matrix([[x ** 3 + y - 1], [y ** 3 - x + 1]])
            J = Matrix([[3 * x ** 2, 1], [-1, 3 * y ** 2]])
            delta = J.inv().multiply(f)
            X = X.sub(delta)
            err = delta.abs().max()
            n += 1

        assert n < 100
        np.testing.assert_allclose(X.arr, [[1.0], [0.0]], atol=1e-9)

    def test_history_by_concatenation(self):
        history = Matrix([[0.9], [0.1]])
        for n in range(5):
            X = Matrix([history.get_column(n)]).T
            x, y = X.get(0, 0), X.get(1, 0)
            f = Matrix([[x ** 3 + y - 1], [y ** 3 - x + 1]])
            J = Matrix([[3 * x ** 2, 1], [-1, 3 * y ** 2]])
            history = horzcat(history, X.sub(J.inv().multiply(f)))
        assert history.shape == (2, 6)
        assert abs(history.get(0, 5) - 1.0) < 1e-6
