"""
Newton-Raphson on the system

    x^3 + y = 1
    y^3 - x = -1

whose solution is x = 1, y = 0. Each iterate is appended as a new
column of the history matrix.
"""

import numpy as np

from pymat import Matrix, horzcat, rand


def main(seed=None, max_iters=100, eps=1e-6):
    history = rand(2, 1, rng=np.random.default_rng(seed))
    print("Seed:", history.get_column(0))

    err = 1e9
    n = 0
    while err > eps and n < max_iters:
        X = Matrix([history.get_column(n)]).T
        x, y = X.get(0, 0), X.get(1, 0)

        f = Matrix([[x ** 3 + y - 1], [y ** 3 - x + 1]])
        J = Matrix([[3 * x ** 2, 1], [-1, 3 * y ** 2]])

        delta = J.inv().multiply(f)
        X_new = X.sub(delta)
        history = horzcat(history, X_new)
        err = delta.abs().max()

        print(f"Iteration {n} -> x = {X_new.get(0, 0):.4f}, "
              f"y = {X_new.get(1, 0):.4f} -> error = {err:.8f}")
        n += 1

    if n < max_iters:
        print("\nThe solution is:", history.get_column(history.cols - 1))
    else:
        print("Max. number of iterations reached. Problem not solved")


if __name__ == "__main__":
    main()
