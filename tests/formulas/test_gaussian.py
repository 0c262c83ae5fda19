import pytest

from differentia.formulas.gaussian import GaussianBackward, GaussianForward


class TestGaussianForward:
    def test_full_table_matches_newton(self, zigzag_points):
        result = GaussianForward().evaluate(zigzag_points, 2.5)
        assert result.value == pytest.approx(3.1484375)
        assert result.reference_index == 2
        assert result.terms_used == (1, 2, 3, 4)

    def test_zigzag_rows(self, zigzag_points):
        result = GaussianForward().evaluate(zigzag_points, 2.5)
        assert result.referenced_entries() == ((1, 2), (2, 1), (3, 1), (4, 0))

    def test_term_labels(self, zigzag_points):
        steps = GaussianForward().evaluate(zigzag_points, 2.5).steps
        terms = [step for step in steps if step.entries]
        assert terms[0].description.startswith("Add 1st order term [Δy₀]: ")
        assert terms[2].description.startswith("Add 3rd order term [Δ³y₋₁]: ")
        assert r"\frac{p(p-1)(p+1)}{3!}" in terms[2].formula

    def test_off_center_tip(self, zigzag_points):
        assert GaussianForward().evaluate(zigzag_points, 2.5).warning is None
        tip = GaussianForward().evaluate(zigzag_points, 3).warning
        assert tip.startswith("Tip:") and "Gaussian Backward" in tip


class TestGaussianBackward:
    def test_truncated_series(self, zigzag_points):
        result = GaussianBackward().evaluate(zigzag_points, 2.5)
        assert result.reference_index == 3
        assert result.parameter == pytest.approx(-0.5)
        assert result.terms_used == (1, 2, 3)
        assert result.value == pytest.approx(3.5)

    def test_zigzag_rows(self, zigzag_points):
        result = GaussianBackward().evaluate(zigzag_points, 2.5)
        assert result.referenced_entries() == ((1, 2), (2, 2), (3, 1))

    def test_square_is_exact(self, square_points):
        assert GaussianBackward().evaluate(square_points, 2.5).value == pytest.approx(6.25)

    @pytest.mark.parametrize("n,reference", [(2, 1), (3, 2), (4, 2), (5, 3), (6, 3)])
    def test_reference_index_is_ceil_half(self, n, reference):
        assert GaussianBackward().reference_index(n) == reference

    def test_two_points_is_linear(self):
        result = GaussianBackward().evaluate([(0, 1), (1, 3)], 0.25)
        assert result.value == pytest.approx(1.5)
        assert result.terms_used == (1,)

    def test_off_center_tip(self, zigzag_points):
        tip = GaussianBackward().evaluate(zigzag_points, 1).warning
        assert tip.startswith("Tip:") and "Gaussian Forward" in tip
