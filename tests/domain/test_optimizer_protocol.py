import unittest

import numpy as np

from stochopt.domain._optimizers import IOptimizer
from stochopt.infrastructure.optimizers import SGD, AdaGrad, Adam


class TestOptimizerProtocol(unittest.TestCase):
    def test_sgd_conforms_to_ioptimizer(self):
        opt = SGD([1.0, 2.0], 1e-3)
        self.assertIsInstance(opt, IOptimizer)

    def test_adagrad_conforms_to_ioptimizer(self):
        opt = AdaGrad(np.zeros(3), 1e-3)
        self.assertIsInstance(opt, IOptimizer)

    def test_adam_conforms_to_ioptimizer(self):
        opt = Adam(0.5, 1e-3)
        self.assertIsInstance(opt, IOptimizer)

    def test_builder_result_conforms_to_ioptimizer(self):
        opt = Adam.builder((1.0, 2.0)).learning_rate(0.1).build()
        self.assertIsInstance(opt, IOptimizer)

    def test_object_without_timestep_does_not_conform(self):
        class NoTimestep:
            parameters = None
            learning_rate = 0.1

            def parameters_mut(self):
                return None

            def set_parameters(self, parameters):
                pass

            def step(self, gradients):
                pass

            def into_parameters(self):
                return None

            def change_learning_rate(self, learning_rate):
                pass

        self.assertNotIsInstance(NoTimestep(), IOptimizer)

        class WithTimestep(NoTimestep):
            timestep = 0

        self.assertIsInstance(WithTimestep(), IOptimizer)


if __name__ == "__main__":
    unittest.main()
