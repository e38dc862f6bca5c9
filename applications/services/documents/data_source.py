"""
ORM-backed application lookup.
"""

import logging
from typing import Any, Optional

from applications.models import Application
from applications.printing.interfaces import IApplicationSource


logger = logging.getLogger(__name__)


class OrmApplicationSource(IApplicationSource):
    """
    Looks up applications through the Django ORM.

    Person, legal entity, current review and the product/fund tree are
    loaded with the application so document building runs no further
    queries.
    """

    def get_queryset(self):
        return (
            Application.objects
            .select_related('person', 'legal_entity', 'current_review')
            .prefetch_related('products__funds')
        )

    def find_application_by_id(self, application_id: Any) -> Optional[Application]:
        """
        Raises:
            Application.MultipleObjectsReturned: If the identifier is not unique
        """
        try:
            return self.get_queryset().get(pk=application_id)
        except Application.DoesNotExist:
            logger.debug(f"Application lookup returned no rows for id '{application_id}'")
            return None
