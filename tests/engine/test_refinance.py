from decimal import Decimal

from loancalc.engine.refinance import calculate_refinance_savings

TOLERANCE = Decimal("0.000001")


class TestRefinance:
    def test_same_terms_save_nothing(self):
        result = calculate_refinance_savings(
            Decimal("250000"), Decimal("6.5"), 300, Decimal("6.5"), 300, Decimal("0")
        )
        assert abs(result.monthly_savings) < TOLERANCE
        assert abs(result.total_savings) < TOLERANCE
        assert abs(result.total_interest_savings) < TOLERANCE
        assert not result.breaks_even
        assert result.break_even_months == Decimal("Infinity")

    def test_lower_rate_breaks_even(self):
        result = calculate_refinance_savings(
            Decimal("250000"), Decimal("7"), 300, Decimal("5.5"), 300, Decimal("4000")
        )
        assert result.new_payment < result.current_payment
        assert result.monthly_savings > 0
        assert result.breaks_even
        assert result.break_even_months == Decimal("4000") / result.monthly_savings
        assert result.total_savings == result.monthly_savings * 300 - Decimal("4000")
        assert result.total_interest_savings > 0

    def test_closing_costs_reduce_interest_savings(self):
        free = calculate_refinance_savings(
            Decimal("250000"), Decimal("7"), 300, Decimal("5.5"), 300, Decimal("0")
        )
        costly = calculate_refinance_savings(
            Decimal("250000"), Decimal("7"), 300, Decimal("5.5"), 300, Decimal("5000")
        )
        assert abs(free.total_interest_savings - costly.total_interest_savings - Decimal("5000")) < TOLERANCE
        assert free.break_even_months == 0

    def test_longer_term_lowers_payment_but_costs_interest(self):
        result = calculate_refinance_savings(
            Decimal("200000"), Decimal("6"), 180, Decimal("6"), 360, Decimal("0")
        )
        assert result.monthly_savings > 0
        assert result.total_interest_savings < 0

    def test_higher_payment_never_breaks_even(self):
        result = calculate_refinance_savings(
            Decimal("200000"), Decimal("5"), 360, Decimal("5"), 180, Decimal("3000")
        )
        assert result.monthly_savings < 0
        assert not result.breaks_even
