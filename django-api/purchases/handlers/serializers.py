"""Serializers for purchase requests and responses.

Request serializers check format only. Business rules (positive account
id, non-empty list, quantities, limits) are enforced by the service.
"""

from rest_framework import serializers

from purchases.domain import TicketCategory, TicketLineItem


class TicketLineItemSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=[category.value for category in TicketCategory])
    quantity = serializers.IntegerField()


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for POST /api/purchases bodies."""

    account_id = serializers.IntegerField(allow_null=True)
    tickets = TicketLineItemSerializer(many=True, allow_empty=True)

    def line_items(self) -> list[TicketLineItem]:
        return [
            TicketLineItem(category=TicketCategory(ticket["type"]), quantity=ticket["quantity"])
            for ticket in self.validated_data["tickets"]
        ]


class PurchaseOutcomeSerializer(serializers.Serializer):
    """Serializer for PurchaseOutcome domain model."""

    account_id = serializers.IntegerField(source="account_id.value")
    total_cost = serializers.IntegerField(source="total_cost.amount")
    seats_reserved = serializers.IntegerField(source="seats_to_reserve.value")
