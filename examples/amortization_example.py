#!/usr/bin/env python3
"""
Loan Amortization Example
=========================

This example demonstrates how to compute and compare amortization tables
with amortix under its three repayment conventions.

What You'll Learn:
-----------------
1. How to describe a loan with LoanRequest
2. How French, German and American schedules differ for the same loan
3. How dead and grace periods delay the repayment of principal
4. How to quote the level payment of many loans at once

Repayment Conventions:
----------------------
- French (annuity): the same total payment every period
- German (linear): the same principal portion every period, so payments fall
- American (bullet): interest only, with the whole principal repaid at the end

Example: $120,000 loan at 6% nominal annual interest, 5 years, monthly payments
"""

from datetime import date

from amortix import LoanRequest, build_amortization_schedule, quote_level_payments


def base_request(**overrides) -> LoanRequest:
    fields = {
        "principal": 120000.0,
        "nominal_annual_rate_percent": 6.0,
        "payments_per_year": 12,
        "duration_value": 5,
        "duration_unit": "years",
        "repayment_convention": "french",
        "start_date": date(2024, 1, 15),
    }
    fields.update(overrides)
    return LoanRequest(**fields)


def example_1_french_loan():
    """
    Example 1: French Loan
    ----------------------
    Level monthly payment over 60 months. The interest share of each payment
    shrinks as the balance falls.
    """
    print("=" * 80)
    print("Example 1: French Loan - $120,000 at 6% for 5 years")
    print("=" * 80)

    schedule = build_amortization_schedule(base_request())
    df = schedule.to_dataframe()

    print(f"\nPayments: {len(schedule)}")
    print(f"Level payment: ${df['payment'].iloc[0]:,.2f}")
    print("\nFirst 6 rows:")
    print(df.head(6).to_string(index=False, float_format=lambda v: f"{v:,.2f}"))
    print(f"\nTotal interest: ${schedule.total_interest():,.2f}")

    return schedule


def example_2_convention_comparison():
    """
    Example 2: French vs German vs American
    ---------------------------------------
    Same loan, three conventions. Repaying principal earlier means paying
    less interest overall.
    """
    print("\n\n" + "=" * 80)
    print("Example 2: Repayment Convention Comparison")
    print("=" * 80)

    print(f"\n{'Convention':<12} {'First':>12} {'Last':>12} {'Total Interest':>16}")
    print("-" * 56)
    for convention in ("french", "german", "american"):
        schedule = build_amortization_schedule(base_request(repayment_convention=convention))
        first, last = schedule.rows[0], schedule.rows[-1]
        print(
            f"{convention:<12} ${first.payment:>11,.2f} ${last.payment:>11,.2f} "
            f"${schedule.total_interest():>15,.2f}"
        )

    print("\nKey Insight: German repays principal fastest and costs the least interest;")
    print("American keeps the full balance outstanding until maturity.")


def example_3_dead_and_grace_periods():
    """
    Example 3: Dead and Grace Periods
    ---------------------------------
    One dead semester (nothing paid, no interest) followed by six months of
    interest-only payments, then French amortization over the remaining
    48 months.
    """
    print("\n\n" + "=" * 80)
    print("Example 3: Dead Semester + 6 Month Grace")
    print("=" * 80)

    schedule = build_amortization_schedule(
        base_request(
            dead_period_value=1,
            grace_period_value=6,
            grace_period_unit="months",
        )
    )
    df = schedule.to_dataframe()
    print(df.iloc[4:15].to_string(index=False, float_format=lambda v: f"{v:,.2f}"))

    for key, value in schedule.summary().items():
        print(f"  {key}: {value}")

    return schedule


def example_4_batch_quotes():
    """
    Example 4: Batch Quotes
    -----------------------
    Level payments for a range of rates, computed in one vectorized call.
    """
    print("\n\n" + "=" * 80)
    print("Example 4: Level Payment Quotes")
    print("=" * 80)

    rates = [3.0, 4.5, 6.0, 7.5, 9.0]
    quotes = quote_level_payments([base_request(nominal_annual_rate_percent=r) for r in rates])

    print(f"\n{'Rate':>6} {'Payment':>12}")
    for rate, quote in zip(rates, quotes):
        print(f"{rate:>5.1f}% ${float(quote):>11,.2f}")


def main():
    """Run all examples."""
    example_1_french_loan()
    example_2_convention_comparison()
    example_3_dead_and_grace_periods()
    example_4_batch_quotes()

    print("\n\n" + "=" * 80)
    print("All examples completed successfully!")
    print("=" * 80)


if __name__ == "__main__":
    main()
