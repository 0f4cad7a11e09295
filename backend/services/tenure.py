"""
Tenure arithmetic: anniversaries and completed years of service.
"""
from datetime import date


def anniversary_in_year(joined_date: date, year: int) -> date:
    """
    joined_date moved to the given year.
    A 29 February join date rolls over to 1 March in non-leap years.
    """
    try:
        return joined_date.replace(year=year)
    except ValueError:
        return date(year, 3, 1)


def completed_years_of_service(joined_date: date, as_of: date) -> int:
    """
    Whole anniversaries of joined_date reached on or before as_of.
    Never negative.
    """
    years = as_of.year - joined_date.year
    if as_of < anniversary_in_year(joined_date, as_of.year):
        years -= 1
    return max(years, 0)
