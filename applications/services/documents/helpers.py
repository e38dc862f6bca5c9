"""
Derived presentation fields for application documents.

Pure functions over an Application record; none of them touch the database
beyond the related rows already loaded with the application.
"""

from typing import Callable, Iterable, Optional

from applications.models import Application, ApplicationState, Fund


REVIEW_MESSAGE_PREFIX = "Your application has been placed in review"

ADDRESS_REVIEW_SUFFIX = " pending outstanding address verification for FICA purposes."
BANK_REVIEW_SUFFIX = " pending outstanding bank account verification."
DEFAULT_REVIEW_SUFFIX = " because of suspicious account behaviour. Please contact support ASAP."


def describe_state(state: str) -> str:
    """Human-readable label for an application state."""
    return str(ApplicationState(state).label)


def get_full_name(application: Application) -> str:
    person = application.person
    return f"{person.first_name} {person.surname}"


def get_state_description(
    application: Application,
    describe: Callable[[str], str] = describe_state,
) -> str:
    return describe(application.state)


def get_portfolio_funds(application: Application) -> list[Fund]:
    """
    All funds of all products, in product order and then fund order.
    """
    return [
        fund
        for product in application.products.all()
        for fund in product.funds.all()
    ]


def get_portfolio_total_amount(application: Application, tax_rate: float) -> float:
    """
    Sum of (amount - fees) * tax_rate over the portfolio funds.

    Accumulates in portfolio order so repeated runs produce identical
    floating-point results. No rounding is applied.
    """
    return calculate_total_amount(get_portfolio_funds(application), tax_rate)


def calculate_total_amount(funds: Iterable[Fund], tax_rate: float) -> float:
    total = 0.0
    for fund in funds:
        total += (fund.amount - fund.fees) * tax_rate
    return total


def compose_review_message(reason: Optional[str]) -> str:
    """
    Explain why an application is in review.

    Matching is a case-sensitive substring test on the reviewer's free text,
    first match wins. This is product wording: keep the rules and the
    sentences exactly as they are.
    """
    reason = reason or ''

    if 'address' in reason:
        suffix = ADDRESS_REVIEW_SUFFIX
    elif 'bank' in reason:
        suffix = BANK_REVIEW_SUFFIX
    else:
        suffix = DEFAULT_REVIEW_SUFFIX

    return REVIEW_MESSAGE_PREFIX + suffix
