"""
View models for application documents.

One view model per supported application state. They are built fresh for
every request, handed to the template and then discarded.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional

from applications.models import Application, Fund, LegalEntity, Review
from applications.services.config import DocumentSettings

from .helpers import (
    compose_review_message,
    get_full_name,
    get_portfolio_funds,
    get_portfolio_total_amount,
    get_state_description,
)


@dataclass
class PendingApplicationViewModel:
    reference_number: str
    state: str
    full_name: str
    applied_on: date
    support_email: str
    signature: str


@dataclass
class ActivatedApplicationViewModel(PendingApplicationViewModel):
    legal_entity: Optional[LegalEntity] = None
    portfolio_funds: list[Fund] = field(default_factory=list)
    portfolio_total_amount: float = 0.0


@dataclass
class InReviewApplicationViewModel(ActivatedApplicationViewModel):
    in_review_message: str = ''
    in_review_information: Optional[Review] = None


def _common_fields(
    application: Application,
    settings: DocumentSettings,
    describe: Callable[[str], str],
) -> dict:
    return {
        'reference_number': application.reference_number,
        'state': get_state_description(application, describe),
        'full_name': get_full_name(application),
        'applied_on': application.date,
        'support_email': settings.support_email,
        'signature': settings.signature,
    }


def _portfolio_fields(application: Application, settings: DocumentSettings) -> dict:
    return {
        'legal_entity': application.legal_entity if application.is_legal_entity else None,
        'portfolio_funds': get_portfolio_funds(application),
        'portfolio_total_amount': get_portfolio_total_amount(application, settings.tax_rate),
    }


def build_pending_view_model(
    application: Application,
    settings: DocumentSettings,
    describe: Callable[[str], str],
) -> PendingApplicationViewModel:
    return PendingApplicationViewModel(**_common_fields(application, settings, describe))


def build_activated_view_model(
    application: Application,
    settings: DocumentSettings,
    describe: Callable[[str], str],
) -> ActivatedApplicationViewModel:
    return ActivatedApplicationViewModel(
        **_common_fields(application, settings, describe),
        **_portfolio_fields(application, settings),
    )


def build_in_review_view_model(
    application: Application,
    settings: DocumentSettings,
    describe: Callable[[str], str],
) -> InReviewApplicationViewModel:
    review = application.current_review
    return InReviewApplicationViewModel(
        **_common_fields(application, settings, describe),
        **_portfolio_fields(application, settings),
        in_review_message=compose_review_message(review.reason if review else None),
        in_review_information=review,
    )
