"""Linear regression y = 12.5x + 21 fitted by batch gradient descent."""

import numpy as np

from pymat import linspace, rand


def main(lr=0.01, epochs=1000, seed=None):
    rng = np.random.default_rng(seed)
    x = linspace(0, 5, 100).T
    y = x.multiply(12.5).add(21)

    w = rand(1, 1, rng=rng)
    b = rng.random() * 20

    for epoch in range(epochs):
        residual = y.diff(x.dot(w).add(b))
        loss = residual.copy().pow(2).sum().multiply(1.0 / y.size())

        dw = x.T.dot(residual).sum().multiply(-2.0 / y.size())
        db = residual.sum().as_scalar() * (-2.0 / y.size())

        w = w.diff(dw.multiply(lr))
        b -= lr * db

        if (epoch + 1) % 100 == 0:
            print(f"Epoch {epoch + 1}, loss: {loss.as_scalar():.6f}")

    print(f"w = {w.as_scalar():.4f}, b = {b:.4f}")


if __name__ == "__main__":
    main()
