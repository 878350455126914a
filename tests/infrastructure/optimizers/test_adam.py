import dataclasses
import math
import unittest

import numpy as np

from stochopt.infrastructure.optimizers import Adam, AdamBuilder, AdamConfig

from ._reference_utils import HAS_TORCH, quadratic_gradient, run_against_torch


class TestAdamConfig(unittest.TestCase):
    def test_defaults(self):
        config = AdamConfig()
        self.assertEqual(config.learning_rate, 1e-3)
        self.assertEqual(config.beta1, 0.9)
        self.assertEqual(config.beta2, 0.999)
        self.assertEqual(config.epsilon, 1e-8)

    def test_invalid_values_raise(self):
        with self.assertRaises(ValueError):
            AdamConfig(beta1=1.0)
        with self.assertRaises(ValueError):
            AdamConfig(beta2=-0.1)
        with self.assertRaises(ValueError):
            AdamConfig(epsilon=-1e-8)

    def test_is_frozen(self):
        config = AdamConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.beta1 = 0.5  # type: ignore[misc]


class TestAdam(unittest.TestCase):
    def test_new_uses_default_hyperparameters(self):
        opt = Adam([1.0, 2.0], 0.1)
        self.assertEqual(opt.learning_rate, 0.1)
        self.assertEqual(opt.beta1, 0.9)
        self.assertEqual(opt.beta2, 0.999)
        self.assertEqual(opt.epsilon, 1e-8)
        self.assertEqual(opt.timestep, 0)

    def test_moments_start_at_zero_with_matching_shape(self):
        params = {"w": np.ones((2, 2), dtype=np.float32), "b": [1.0, 2.0]}
        opt = Adam(params, 0.1)

        for moment in (opt.m0, opt.v0):
            self.assertEqual(set(moment), {"w", "b"})
            np.testing.assert_array_equal(moment["w"], np.zeros((2, 2)))
            self.assertEqual(moment["w"].dtype, np.float32)
            self.assertEqual(moment["b"], [0.0, 0.0])
        self.assertIsNot(opt.m0, opt.v0)
        self.assertFalse(np.shares_memory(opt.m0["w"], opt.v0["w"]))
        self.assertFalse(np.shares_memory(opt.m0["w"], params["w"]))

    def test_first_step_matches_reference(self):
        p0, g, lr = 1.0, 0.3, 1e-2
        b1, b2, eps = 0.9, 0.999, 1e-8

        opt = Adam(p0, lr)
        opt.step(g)

        m = (1 - b1) * g
        v = (1 - b2) * g * g
        self.assertAlmostEqual(opt.m0, m, places=16)
        self.assertAlmostEqual(opt.v0, v, places=16)

        bias_correction1 = 1 - b1
        bias_correction2_sqrt = math.sqrt(1 - b2)
        expected = p0 - (lr / bias_correction1) * m / (
            math.sqrt(v) / bias_correction2_sqrt + eps
        )
        self.assertAlmostEqual(opt.parameters, expected, places=15)
        # the first step moves by ~lr in the direction of -sign(g)
        self.assertAlmostEqual(p0 - opt.parameters, lr, places=6)

    def test_epsilon_is_added_after_bias_correction(self):
        # epsilon comparable to |g| makes the denominator ordering visible
        g, lr, eps = 1e-3, 1.0, 1e-3
        b1, b2 = 0.9, 0.999
        opt = Adam(0.0, lr, epsilon=eps)
        opt.step(g)

        m = (1 - b1) * g
        v = (1 - b2) * g * g
        expected = -(lr / (1 - b1)) * m / (math.sqrt(v) / math.sqrt(1 - b2) + eps)
        eps_before_correction = -(
            lr * math.sqrt(1 - b2) / (1 - b1)
        ) * m / (math.sqrt(v) + eps)

        self.assertAlmostEqual(opt.parameters, expected, places=12)
        self.assertAlmostEqual(opt.parameters, -0.5, places=9)
        self.assertGreater(abs(opt.parameters - eps_before_correction), 0.4)

    def test_quadratic_convergence(self):
        opt = Adam(-3.0, 0.1)
        for _ in range(10_000):
            opt.step(quadratic_gradient(opt.parameters))
        self.assertAlmostEqual(float(opt.into_parameters()), 4.0, places=9)

    def test_quadratic_convergence_float32_array(self):
        opt = Adam(np.full(3, -3.0, dtype=np.float32), 0.1)
        for _ in range(10_000):
            opt.step(quadratic_gradient(opt.parameters).astype(np.float32))
        result = opt.into_parameters()
        self.assertEqual(result.dtype, np.float32)
        np.testing.assert_allclose(result, 4.0, atol=1e-4)

    def test_change_learning_rate(self):
        opt = Adam(1.0, 0.1)
        opt.change_learning_rate(0.01)
        self.assertEqual(opt.learning_rate, 0.01)
        self.assertEqual(opt.config.learning_rate, 0.01)
        opt.step(1.0)
        self.assertAlmostEqual(opt.parameters, 0.99, places=6)

    def test_invalid_hyperparams_raise(self):
        with self.assertRaises(ValueError):
            Adam(1.0, 0.1, beta1=1.5)
        with self.assertRaises(ValueError):
            Adam(1.0, 0.1, epsilon=-1.0)

    def test_from_config(self):
        config = AdamConfig(learning_rate=0.05, beta1=0.8, beta2=0.99, epsilon=1e-6)
        opt = Adam.from_config([0.0], config)
        self.assertEqual(opt.config, config)

    @unittest.skipUnless(HAS_TORCH, "PyTorch is not installed")
    def test_matches_torch(self):
        import torch

        opt = Adam([3.0, 1.0, 4.0, 1.0, 5.0], 0.005)
        ours, ref = run_against_torch(
            opt,
            lambda params: torch.optim.Adam(
                params, lr=0.005, betas=(0.9, 0.999), eps=1e-8
            ),
        )
        np.testing.assert_allclose(ours, ref, rtol=0, atol=1e-12)


class TestAdamBuilder(unittest.TestCase):
    def test_builder_defaults(self):
        builder = Adam.builder([1.0])
        self.assertIsInstance(builder, AdamBuilder)
        opt = builder.build()
        self.assertEqual(opt.config, AdamConfig())

    def test_builder_overrides_subset(self):
        opt = Adam.builder(0.5).learning_rate(0.1).beta2(0.99).build()
        self.assertEqual(opt.learning_rate, 0.1)
        self.assertEqual(opt.beta1, 0.9)
        self.assertEqual(opt.beta2, 0.99)
        self.assertEqual(opt.epsilon, 1e-8)

    def test_builder_all_setters_chain(self):
        opt = (
            Adam.builder([0.0, 0.0])
            .learning_rate(0.2)
            .beta1(0.5)
            .beta2(0.75)
            .epsilon(1e-4)
            .build()
        )
        self.assertEqual(
            opt.config,
            AdamConfig(learning_rate=0.2, beta1=0.5, beta2=0.75, epsilon=1e-4),
        )

    def test_builder_rejects_invalid_beta(self):
        with self.assertRaises(ValueError):
            Adam.builder(0.0).beta1(1.0)

    def test_builder_keeps_parameters(self):
        params = [1.0, 2.0]
        opt = Adam.builder(params).build()
        self.assertIs(opt.parameters, params)

    @unittest.skipUnless(HAS_TORCH, "PyTorch is not installed")
    def test_builder_matches_torch(self):
        import torch

        opt = Adam.builder([3.0, 1.0, 4.0, 1.0, 5.0]).learning_rate(0.005).build()
        ours, ref = run_against_torch(
            opt, lambda params: torch.optim.Adam(params, lr=0.005)
        )
        np.testing.assert_allclose(ours, ref, rtol=0, atol=1e-12)


if __name__ == "__main__":
    unittest.main()
