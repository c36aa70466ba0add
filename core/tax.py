# core/tax.py
# Flat income tax: one rate, no brackets, no validation.

TAX_RATE = 0.15


def calculate_tax(income: float) -> float:
    """
    Tax owed on `income` at the flat 15% rate.
    No checks on sign or type: negatives give negative tax, NaN stays NaN.
    Also works on anything that multiplies by a float (e.g. a pandas Series).
    """
    return income * TAX_RATE


# camelCase alias for callers coming from the JS module
calculateTax = calculate_tax
