"""
Tests for RegressionDesign and the CPU backend.
"""

import warnings

import numpy as np
import pytest

from numstat.core.protocols import Backend
from numstat.regression import CPUNormalEquationBackend, RegressionDesign


class TestRegressionDesign:

    def test_intercept_column_prepended(self):
        design = RegressionDesign.build([[2.0, 3.0], [4.0, 5.0]], [1.0, 2.0])
        assert design.X.to_list() == [[1.0, 2.0, 3.0], [1.0, 4.0, 5.0]]

    def test_sizes(self):
        design = RegressionDesign.build([[1, 2, 3]] * 4, [0, 1, 2, 3])
        assert design.n == 4
        assert design.p == 3
        assert design.X.shape == (4, 4)

    def test_targets_are_floating(self):
        design = RegressionDesign.build([[1], [2]], [1, 2])
        assert design.y.dtype == np.float64
        assert design.y_column.shape == (2, 1)

    def test_integer_features_become_floating(self):
        design = RegressionDesign.build([[1], [2]], [1, 2])
        assert design.X.kind == 'floating'

    def test_repr(self):
        design = RegressionDesign.build([[1], [2]], [1, 2])
        assert repr(design) == "RegressionDesign(n=2, p=1)"


class TestCPUNormalEquationBackend:

    def test_satisfies_backend_protocol(self):
        assert isinstance(CPUNormalEquationBackend(), Backend)

    def test_name(self):
        assert CPUNormalEquationBackend().name == 'cpu_normal_equation'

    def test_solve(self):
        design = RegressionDesign.build([[1.0], [2.0], [3.0]], [3.0, 5.0, 7.0])
        result = CPUNormalEquationBackend(pivoting='absolute').solve(design)
        np.testing.assert_allclose(result.params.coefficients, [1.0, 2.0], atol=1e-9)
        assert result.params.tss == pytest.approx(8.0)
        assert result.info['pivoting'] == 'absolute'

    def test_near_singular_recorded_not_emitted(self, collinear_data):
        x, y = collinear_data
        design = RegressionDesign.build(x, y)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = CPUNormalEquationBackend().solve(design)
        assert result.has_warning("near-singular")

    def test_design_not_modified(self):
        design = RegressionDesign.build([[1.0], [2.0], [3.0]], [3.0, 5.0, 7.0])
        before = design.X.to_list()
        CPUNormalEquationBackend().solve(design)
        assert design.X.to_list() == before
