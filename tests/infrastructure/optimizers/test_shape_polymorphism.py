"""
The same algorithm must produce identical per-element trajectories whatever
container kind holds the parameters.
"""

import unittest

import numpy as np

from stochopt.infrastructure.optimizers import SGD, AdaGrad, Adam

INIT = [3.0, -1.0, 4.0, 1.0, -5.0, 9.0]
TARGET = [0.5, 2.0, -1.0, 0.0, 3.0, 1.5]

FACTORIES = {
    "sgd": lambda params: SGD(params, 0.05),
    "adagrad": lambda params: AdaGrad(params, 0.3, learning_rate_decay=0.01),
    "adam": lambda params: Adam.builder(params).learning_rate(0.05).beta2(0.99).build(),
}

# Each entry: (to_container, to_flat_list)
LAYOUTS = {
    "list": (list, list),
    "tuple": (tuple, list),
    "list_of_tuples": (
        lambda xs: [tuple(xs[i : i + 2]) for i in range(0, len(xs), 2)],
        lambda c: [x for pair in c for x in pair],
    ),
    "dict": (
        lambda xs: {"w": list(xs[:4]), "b": (xs[4], xs[5])},
        lambda c: list(c["w"]) + list(c["b"]),
    ),
    "ndarray": (np.array, lambda a: a.tolist()),
    "ndarray_2d": (
        lambda xs: np.array(xs).reshape(2, 3),
        lambda a: a.ravel().tolist(),
    ),
    "list_of_ndarrays": (
        lambda xs: [np.array(xs[:3]), np.array(xs[3:])],
        lambda c: c[0].tolist() + c[1].tolist(),
    ),
}


def _gradient(flat):
    return [2.0 * (x - t) for x, t in zip(flat, TARGET)]


def _trajectory(make_optimizer, to_container, to_flat, steps=25):
    opt = make_optimizer(to_container(list(INIT)))
    history = []
    for _ in range(steps):
        flat = to_flat(opt.parameters)
        opt.step(to_container(_gradient(flat)))
        history.append([float(x) for x in to_flat(opt.parameters)])
    return history


class TestShapePolymorphism(unittest.TestCase):
    def test_scalar_matches_single_element(self):
        for name, make in FACTORIES.items():
            with self.subTest(optimizer=name):
                scalar = make(INIT[0])
                vector = make([INIT[0]])
                for _ in range(25):
                    scalar.step(2.0 * (scalar.parameters - TARGET[0]))
                    vector.step([2.0 * (vector.parameters[0] - TARGET[0])])
                    self.assertEqual(float(scalar.parameters), float(vector.parameters[0]))

    def test_scalar_type_is_preserved(self):
        for name, make in FACTORIES.items():
            for init in (INIT[0], np.float32(INIT[0])):
                with self.subTest(optimizer=name, kind=type(init).__name__):
                    opt = make(init)
                    for _ in range(3):
                        opt.step(2.0 * (opt.parameters - TARGET[0]))
                    self.assertIs(type(opt.parameters), type(init))

    def test_list_elements_stay_python_floats(self):
        for name, make in FACTORIES.items():
            with self.subTest(optimizer=name):
                opt = make(list(INIT))
                opt.step([1.0] * len(INIT))
                self.assertTrue(all(type(x) is float for x in opt.parameters))

    def test_all_layouts_produce_identical_trajectories(self):
        for name, make in FACTORIES.items():
            reference = _trajectory(make, *LAYOUTS["list"])
            for layout, (to_container, to_flat) in LAYOUTS.items():
                with self.subTest(optimizer=name, layout=layout):
                    self.assertEqual(
                        _trajectory(make, to_container, to_flat), reference
                    )


if __name__ == "__main__":
    unittest.main()
