"""Save-time validation for invoice content

Checked before any quota consultation or store access.
"""

from typing import List, Optional
from libs.result import Error
from src.domain.line_item import LineItem
from src.domain.tax import InvalidLineItemError, check_line_item

MISSING_CLIENT_NAME = "MISSING_CLIENT_NAME"
MISSING_ITEM_DESCRIPTION = "MISSING_ITEM_DESCRIPTION"
MISSING_LINE_ITEMS = "MISSING_LINE_ITEMS"
INVALID_LINE_ITEM = "INVALID_LINE_ITEM"

VALIDATION_ERROR_CODES = frozenset({
    MISSING_CLIENT_NAME,
    MISSING_ITEM_DESCRIPTION,
    MISSING_LINE_ITEMS,
    INVALID_LINE_ITEM,
})


def validate_invoice_content(client_name: Optional[str], items: List[LineItem]) -> Optional[Error]:
    """
    Check the fields an invoice cannot be saved without

    Args:
        client_name: Name on the client snapshot
        items: Line items in display order

    Returns:
        Error naming the offending field category, or None when valid
    """
    if not client_name or not client_name.strip():
        return Error(
            code=MISSING_CLIENT_NAME,
            message="Please provide a client name.",
            reason="client.name is empty",
        )

    if not items:
        return Error(
            code=MISSING_LINE_ITEMS,
            message="An invoice needs at least one line item.",
            reason="items is empty",
        )

    for index, item in enumerate(items):
        if not item.description or not item.description.strip():
            return Error(
                code=MISSING_ITEM_DESCRIPTION,
                message="Please provide a description for every item.",
                reason=f"items[{index}].description is empty",
            )

    for index, item in enumerate(items):
        try:
            check_line_item(item)
        except InvalidLineItemError as e:
            return Error(
                code=INVALID_LINE_ITEM,
                message="Quantities and prices cannot be negative.",
                reason=f"items[{index}]: {e}",
            )

    return None
